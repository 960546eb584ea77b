from typing import Optional


class Message:
    """Сущность сообщения домена Messages"""

    def __init__(self, id: Optional[int], title: str, owner: Optional[str] = None):
        self.id = id
        self.title = title
        self.owner = owner

    def update_title(self, new_title: str) -> None:
        """Замена заголовка - единственное изменяемое поле"""
        self.title = new_title

    def is_owned_by(self, username: str) -> bool:
        return self.owner == username

    @classmethod
    def create_message(cls, title: str, owner: str) -> "Message":
        """Новое сообщение без id: id назначает база"""
        return cls(id=None, title=title, owner=owner)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Message):
            return False
        # несохраненные сообщения не равны друг другу
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(Message)

    def __repr__(self) -> str:
        return f"Message(id={self.id}, title={self.title!r}, owner={self.owner})"
