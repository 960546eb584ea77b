from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

from app.core.config import settings

# Базовый класс для моделей
Base = declarative_base()

engine_options = {"future": True, "echo": settings.sql_echo}
if settings.database_url.startswith("sqlite"):
    # aiosqlite: соединение на каждую сессию
    engine_options["poolclass"] = NullPool

# Асинхронный движок
engine = create_async_engine(settings.database_url, **engine_options)

# Сессии
SessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_db() -> None:
    """Создание таблиц, если их еще нет"""
    # модели должны быть зарегистрированы в metadata до create_all
    import app.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db() -> None:
    """Удаление всех таблиц (используется в тестах)"""
    import app.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# Функция для dependency injection в FastAPI
async def get_db():
    async with SessionLocal() as session:
        yield session
