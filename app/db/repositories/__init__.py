from app.db.repositories.message_repository import MessageRepository
from app.db.repositories.user_repository import UserRepository

__all__ = [
    "MessageRepository",
    "UserRepository"
]
