import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.db.models.message import MAX_BIGINT
from app.db.repositories.message_repository import MessageRepository
from app.domains.messages.entities import Message
from app.domains.messages.schemas import MessageRequest

logger = logging.getLogger(__name__)


class MessageNotFoundError(NotFoundError):
    """Нет сообщения с таким id у этого владельца"""

    def __init__(self, message_id: int):
        super().__init__(f"Message {message_id} not found")
        self.message_id = message_id


class MessageService:
    """Сервис для работы с сообщениями в пределах одного владельца"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.message_repository = MessageRepository(session)

    async def get_message(self, message_id: int, owner: str) -> Message:
        """Получение сообщения по id и владельцу

        Чужое и несуществующее сообщение неразличимы: в обоих случаях
        MessageNotFoundError.
        """
        message = await self.message_repository.get_by_id_and_owner(message_id, owner)

        if message is None:
            raise MessageNotFoundError(message_id)

        return message

    async def list_messages(
        self,
        owner: str,
        page: int = 0,
        size: int = 2,
        sort: str = "id",
        direction: str = "asc"
    ) -> List[Message]:
        """Страница сообщений владельца; за пределами данных - пустой список"""
        offset = page * size
        if offset > MAX_BIGINT:
            # таких строк быть не может, а драйвер не примет такое смещение
            return []

        return await self.message_repository.get_by_owner(
            owner,
            limit=min(size, MAX_BIGINT),
            offset=offset,
            sort=sort,
            direction=direction
        )

    async def create_message(self, message_data: MessageRequest, owner: str) -> Message:
        """Создание сообщения; id и owner из запроса игнорируются"""
        message = Message.create_message(title=message_data.title, owner=owner)

        created_message = await self.message_repository.create(message)
        logger.info(f"Message {created_message.id} created by {owner}")
        return created_message

    async def update_message(self, message_id: int, message_data: MessageRequest, owner: str) -> Message:
        """Замена заголовка сообщения"""
        message = await self.get_message(message_id, owner)
        message.update_title(message_data.title)

        updated_message = await self.message_repository.update(message)
        if updated_message is None:
            # удалено между чтением и записью
            raise MessageNotFoundError(message_id)

        logger.info(f"Message {message_id} updated by {owner}")
        return updated_message

    async def delete_message(self, message_id: int, owner: str) -> None:
        """Удаление сообщения"""
        message = await self.get_message(message_id, owner)

        if not await self.message_repository.delete(message.id):
            raise MessageNotFoundError(message_id)

        logger.info(f"Message {message_id} deleted by {owner}")
