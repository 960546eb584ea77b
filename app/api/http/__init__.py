from app.api.http.home import router as home_router
from app.api.http.auth import router as auth_router
from app.api.http.messages import router as messages_router

__all__ = [
    "home_router",
    "auth_router",
    "messages_router"
]
