import logging
from typing import Optional, Iterable, Dict, Tuple, Protocol

from sqlalchemy.orm import sessionmaker

from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User

logger = logging.getLogger(__name__)

# (username, password, roles)
DEFAULT_USERS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    ("jack", "asd", ("USER",)),
    ("ann", "zxc", ("USER",)),
    ("hank", "qwe", ("NON-USER",)),
)


class UserStore(Protocol):
    async def get_by_username(self, username: str) -> Optional[User]:
        ...


class InMemoryUserStore:
    """Статический набор пользователей, хеши считаются при создании"""

    def __init__(self, users: Iterable[User] = ()):
        self._users: Dict[str, User] = {user.username: user for user in users}

    @classmethod
    def from_credentials(cls, credentials: Iterable[Tuple[str, str, Iterable[str]]]) -> "InMemoryUserStore":
        return cls(
            User.create_user(username, password, roles)
            for username, password, roles in credentials
        )

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def __len__(self) -> int:
        return len(self._users)


class DatabaseUserStore:
    """Пользователи из таблиц user_entity / role / user_roles"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def get_by_username(self, username: str) -> Optional[User]:
        async with self.session_factory() as session:
            return await UserRepository(session).get_by_username(username)

    async def seed(self, credentials: Iterable[Tuple[str, str, Iterable[str]]]) -> int:
        """Заполнение пустой таблицы пользователей; возвращает число созданных"""
        async with self.session_factory() as session:
            repository = UserRepository(session)
            if await repository.count() > 0:
                return 0

            users = [
                User.create_user(username, password, roles)
                for username, password, roles in credentials
            ]
            try:
                await repository.create_many(users)
            except ValueError:
                # другой воркер заполнил таблицу между count() и вставкой
                logger.info("User table was seeded by another worker, skipping")
                return 0

            logger.info(f"Seeded {len(users)} users into user_entity")
            return len(users)


async def build_user_store(kind: str, session_factory: sessionmaker) -> UserStore:
    """Создание хранилища пользователей по настройке USER_STORE"""
    if kind == "memory":
        return InMemoryUserStore.from_credentials(DEFAULT_USERS)

    if kind == "database":
        store = DatabaseUserStore(session_factory)
        await store.seed(DEFAULT_USERS)
        return store

    raise ValueError(f"Unknown user store: {kind}")
