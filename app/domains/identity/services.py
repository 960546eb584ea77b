import logging
from datetime import timedelta
from typing import Optional, Tuple

from app.core.config import settings
from app.core.security import create_access_token, verify_token
from app.domains.identity.entities import User, Principal
from app.domains.identity.stores import UserStore

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис аутентификации и выдачи токенов"""

    def __init__(self, user_store: UserStore):
        self.user_store = user_store

    async def authenticate_user(self, username: str, password: str) -> Optional[User]:
        """Проверка имени и пароля; неизвестный пользователь и неверный пароль неразличимы"""
        user = await self.user_store.get_by_username(username)

        if not user or not user.authenticate(password):
            logger.warning(f"Authentication failed for user {username!r}")
            return None

        return user

    def issue_token(self, principal: Principal) -> Tuple[str, int]:
        """Создание JWT токена с именем пользователя и ролями в scope"""
        expires = timedelta(minutes=settings.access_token_expire_minutes)
        token_data = {
            "sub": principal.username,
            "scope": " ".join(sorted(principal.roles))
        }

        token = create_access_token(data=token_data, expires_delta=expires)
        logger.info(f"Issued access token for user {principal.username}")
        return token, int(expires.total_seconds())

    async def login_user(self, username: str, password: str) -> Optional[Tuple[str, int]]:
        """Вход пользователя и создание JWT токена"""
        user = await self.authenticate_user(username, password)

        if not user:
            return None

        return self.issue_token(user.to_principal())

    def get_principal_from_token(self, token: str) -> Optional[Principal]:
        """Получение вызывающего из JWT токена без обращения к хранилищу"""
        payload = verify_token(token)

        if payload is None:
            return None

        scope = payload.get("scope") or ""
        return Principal(username=payload["sub"], roles=scope.split())
