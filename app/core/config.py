from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./messages.db"
    sql_echo: bool = False

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "self"
    access_token_expire_minutes: int = 60

    bcrypt_rounds: int = 12

    # memory - статические пользователи, database - таблицы user_entity/role
    user_store: Literal["memory", "database"] = "memory"
    message_role: str = "USER"

    default_page_size: int = 2
    max_page_size: int = 2000

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
