from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.auth import require_roles
from app.core.config import settings
from app.core.db import get_db
from app.db.models.message import MAX_BIGINT
from app.domains.identity.entities import Principal
from app.domains.messages.schemas import MessageRequest, MessageResponse
from app.domains.messages.services import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])

message_access = require_roles(settings.message_role)


def _to_response(message) -> MessageResponse:
    return MessageResponse(id=message.id, title=message.title, owner=message.owner)


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: int = Path(..., gt=0, le=MAX_BIGINT),
    principal: Principal = Depends(message_access),
    db: AsyncSession = Depends(get_db)
):
    """Получение своего сообщения по id"""
    message_service = MessageService(db)

    message = await message_service.get_message(message_id, principal.username)

    return _to_response(message)


@router.get("", response_model=List[MessageResponse])
async def list_messages(
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, gt=0, le=settings.max_page_size),
    sort: str = Query("id"),
    direction: str = Query("asc", pattern="^(?i:asc|desc)$"),
    principal: Principal = Depends(message_access),
    db: AsyncSession = Depends(get_db)
):
    """Страница своих сообщений с сортировкой"""
    message_service = MessageService(db)

    try:
        messages = await message_service.list_messages(
            principal.username,
            page=page,
            size=size,
            sort=sort,
            direction=direction.lower()
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return [_to_response(message) for message in messages]


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_message(
    message_data: MessageRequest,
    request: Request,
    principal: Principal = Depends(message_access),
    db: AsyncSession = Depends(get_db)
):
    """Создание сообщения от имени текущего пользователя"""
    message_service = MessageService(db)

    message = await message_service.create_message(message_data, principal.username)

    location = request.url_for("get_message", message_id=str(message.id))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)}
    )


@router.put("/{message_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_message(
    message_data: MessageRequest,
    message_id: int = Path(..., gt=0, le=MAX_BIGINT),
    principal: Principal = Depends(message_access),
    db: AsyncSession = Depends(get_db)
):
    """Замена заголовка своего сообщения"""
    message_service = MessageService(db)

    await message_service.update_message(message_id, message_data, principal.username)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_message(
    message_id: int = Path(..., gt=0, le=MAX_BIGINT),
    principal: Principal = Depends(message_access),
    db: AsyncSession = Depends(get_db)
):
    """Удаление своего сообщения"""
    message_service = MessageService(db)

    await message_service.delete_message(message_id, principal.username)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
