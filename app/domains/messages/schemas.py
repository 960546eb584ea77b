from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional


class MessageRequest(BaseModel):
    """Тело запроса на создание/обновление сообщения

    id и owner принимаются, но игнорируются: id назначает база,
    owner берется из аутентифицированного пользователя.
    """
    id: Optional[int] = None
    title: str = Field(..., min_length=1)
    owner: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title must not be blank')
        return v


class MessageResponse(BaseModel):
    """Схема для ответа с данными сообщения"""
    id: Optional[int]
    title: str
    owner: Optional[str]

    model_config = ConfigDict(from_attributes=True)
