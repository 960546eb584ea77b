from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_

from app.db.models.message import Message as MessageModel

if TYPE_CHECKING:
    from app.domains.messages.entities import Message


SORTABLE_FIELDS = {
    "id": MessageModel.id,
    "title": MessageModel.title,
    "owner": MessageModel.owner,
}


class MessageRepository:
    """Репозиторий для работы с сообщениями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, message: "Message") -> "Message":
        """Сохранение нового сообщения, id назначает база"""
        db_message = MessageModel(
            title=message.title,
            owner=message.owner
        )

        self.session.add(db_message)
        await self.session.commit()
        await self.session.refresh(db_message)
        return self._to_domain(db_message)

    async def get_by_id_and_owner(self, message_id: int, owner: str) -> Optional["Message"]:
        """Получение сообщения по id и владельцу"""
        result = await self.session.execute(
            select(MessageModel).where(
                and_(
                    MessageModel.id == message_id,
                    MessageModel.owner == owner
                )
            )
        )
        db_message = result.scalar_one_or_none()
        return self._to_domain(db_message) if db_message else None

    async def get_by_owner(
        self,
        owner: str,
        limit: int = 2,
        offset: int = 0,
        sort: str = "id",
        direction: str = "asc"
    ) -> List["Message"]:
        """Страница сообщений владельца с сортировкой"""
        column = SORTABLE_FIELDS.get(sort)
        if column is None:
            raise ValueError(f"Unknown sort field: {sort}")

        order = column.desc() if direction.lower() == "desc" else column.asc()
        order_by = [order]
        if column is not MessageModel.id:
            # стабильный порядок между страницами при равных значениях
            order_by.append(MessageModel.id.asc())

        result = await self.session.execute(
            select(MessageModel)
            .where(MessageModel.owner == owner)
            .order_by(*order_by)
            .offset(offset)
            .limit(limit)
        )
        db_messages = result.scalars().all()
        return [self._to_domain(message) for message in db_messages]

    async def update(self, message: "Message") -> Optional["Message"]:
        """Обновление заголовка сообщения"""
        db_message = await self.session.get(MessageModel, message.id)
        if db_message is None:
            return None

        db_message.title = message.title
        await self.session.commit()
        await self.session.refresh(db_message)
        return self._to_domain(db_message)

    async def delete(self, message_id: int) -> bool:
        """Удаление сообщения"""
        stmt = delete(MessageModel).where(MessageModel.id == message_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_message: MessageModel) -> "Message":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.messages.entities import Message

        return Message(
            id=db_message.id,
            title=db_message.title,
            owner=db_message.owner
        )
