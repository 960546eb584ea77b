import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.http import home_router, auth_router, messages_router
from app.core.config import settings
from app.core.db import SessionLocal, init_db
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import setup_logging
from app.domains.identity.stores import build_user_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    app.state.user_store = await build_user_store(settings.user_store, SessionLocal)
    logger.info(f"Message API started: user store={settings.user_store}, database={settings.database_url.split('://')[0]}")
    yield


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Message API",
        description="CRUD API для сообщений с доступом только к своим записям",
        version="1.0.0",
        lifespan=lifespan
    )

    register_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(home_router)
    app.include_router(auth_router)
    app.include_router(messages_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
