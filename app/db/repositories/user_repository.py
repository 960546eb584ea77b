from typing import Optional, Iterable, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.db.models.user import UserEntity as UserModel, Role as RoleModel

if TYPE_CHECKING:
    from app.domains.identity.entities import User


class UserRepository:
    """Репозиторий для пользователей и их ролей"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: "User") -> "User":
        """Создание пользователя; недостающие роли создаются"""
        try:
            roles = [await self._get_or_create_role(name) for name in sorted(user.roles)]
            db_user = UserModel(
                username=user.username,
                password=user.password_hash,
                roles=roles
            )

            self.session.add(db_user)
            await self.session.commit()
            return self._to_domain(db_user)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("User with this username already exists")

    async def get_by_username(self, username: str) -> Optional["User"]:
        """Получение пользователя по username вместе с ролями"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def count(self) -> int:
        """Подсчет пользователей"""
        result = await self.session.execute(select(func.count(UserModel.id)))
        return result.scalar()

    async def create_many(self, users: Iterable["User"]) -> None:
        for user in users:
            await self.create(user)

    async def _get_or_create_role(self, name: str) -> RoleModel:
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.name == name)
        )
        role = result.scalar_one_or_none()
        if role is None:
            role = RoleModel(name=name)
            self.session.add(role)
            await self.session.flush()
        return role

    def _to_domain(self, db_user: UserModel) -> "User":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.identity.entities import User

        return User(
            username=db_user.username,
            password_hash=db_user.password,
            roles={role.name for role in db_user.roles}
        )
