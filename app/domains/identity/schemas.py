from pydantic import BaseModel


class Token(BaseModel):
    """Схема для JWT токена"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class PrincipalResponse(BaseModel):
    """Схема для данных из JWT токена / Basic учетных данных"""
    username: str
    roles: list[str]
