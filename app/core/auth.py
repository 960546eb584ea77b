import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import (
    HTTPBasic, HTTPBasicCredentials, HTTPBearer, HTTPAuthorizationCredentials
)

from app.domains.identity.entities import Principal
from app.domains.identity.services import IdentityService

logger = logging.getLogger(__name__)

basic_scheme = HTTPBasic(auto_error=False, realm="messages")
bearer_scheme = HTTPBearer(auto_error=False)


def unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": 'Bearer, Basic realm="messages"'},
    )


def get_identity_service(request: Request) -> IdentityService:
    """Сервис идентификации поверх хранилища пользователей приложения"""
    return IdentityService(request.app.state.user_store)


async def get_basic_principal(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    identity_service: IdentityService = Depends(get_identity_service)
) -> Principal:
    """Только Basic: используется для выдачи токена"""
    if credentials is None:
        raise unauthorized()

    user = await identity_service.authenticate_user(credentials.username, credentials.password)
    if user is None:
        raise unauthorized("Bad credentials")

    return user.to_principal()


async def get_current_principal(
    basic: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    identity_service: IdentityService = Depends(get_identity_service)
) -> Principal:
    """Зависимость для получения текущего пользователя (Basic или Bearer)"""
    if bearer is not None:
        principal = identity_service.get_principal_from_token(bearer.credentials)
        if principal is None:
            logger.warning("Rejected invalid or expired bearer token")
            raise unauthorized("Invalid token")
        return principal

    if basic is not None:
        user = await identity_service.authenticate_user(basic.username, basic.password)
        if user is None:
            raise unauthorized("Bad credentials")
        return user.to_principal()

    raise unauthorized()


def require_roles(*role_names: str) -> Callable[..., Principal]:
    """Фабрика зависимостей: 403, если у пользователя нет ни одной из ролей"""

    async def _role_dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_any_role(*role_names):
            logger.warning(f"User {principal.username} lacks roles {role_names}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return principal

    return _role_dependency
