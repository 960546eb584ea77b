from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.core.auth import get_basic_principal, get_identity_service
from app.domains.identity.entities import Principal
from app.domains.identity.schemas import Token
from app.domains.identity.services import IdentityService

router = APIRouter(tags=["authentication"])


@router.post("/token", response_model=Token)
async def token(
    principal: Principal = Depends(get_basic_principal),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Выдача JWT токена по Basic учетным данным"""
    access_token, expires_in = identity_service.issue_token(principal)

    return Token(access_token=access_token, expires_in=expires_in)


@router.post("/auth/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Вход через форму (username/password) с выдачей токена"""
    result = await identity_service.login_user(form_data.username, form_data.password)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token, expires_in = result
    return Token(access_token=access_token, expires_in=expires_in)
