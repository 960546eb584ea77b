from app.db.models.message import Message
from app.db.models.user import UserEntity, Role, user_roles

__all__ = [
    "Message",
    "UserEntity",
    "Role",
    "user_roles"
]
