from app.domains.messages.entities import Message
from app.domains.messages.schemas import MessageRequest, MessageResponse
from app.domains.messages.services import MessageService, MessageNotFoundError

__all__ = [
    "Message",
    "MessageRequest", "MessageResponse",
    "MessageService", "MessageNotFoundError"
]
