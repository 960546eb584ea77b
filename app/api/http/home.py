from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.core.auth import get_current_principal
from app.domains.identity.entities import Principal
from app.domains.identity.schemas import PrincipalResponse

router = APIRouter(tags=["home"])


@router.get("/", response_class=PlainTextResponse)
async def home(principal: Principal = Depends(get_current_principal)):
    """Приветствие для любого аутентифицированного пользователя"""
    return f"Hello, {principal.username}"


@router.get("/me", response_model=PrincipalResponse)
async def me(principal: Principal = Depends(get_current_principal)):
    """Имя и роли текущего пользователя"""
    return PrincipalResponse(username=principal.username, roles=sorted(principal.roles))
