from app.domains.identity.entities import User, Principal
from app.domains.identity.schemas import Token, PrincipalResponse
from app.domains.identity.stores import InMemoryUserStore, DatabaseUserStore, build_user_store
from app.domains.identity.services import IdentityService

__all__ = [
    "User", "Principal",
    "Token", "PrincipalResponse",
    "InMemoryUserStore", "DatabaseUserStore", "build_user_store",
    "IdentityService"
]
