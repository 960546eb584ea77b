from typing import Optional, Iterable, FrozenSet

from app.core.security import verify_password, get_password_hash


class User:
    """Учетная запись: имя, хеш пароля и набор ролей"""

    def __init__(
        self,
        username: str,
        password_hash: str,
        roles: Optional[Iterable[str]] = None
    ):
        self.username = username
        self.password_hash = password_hash
        self.roles = set(roles or ())

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        return verify_password(password, self.password_hash)

    def to_principal(self) -> "Principal":
        return Principal(username=self.username, roles=self.roles)

    @classmethod
    def create_user(cls, username: str, password: str, roles: Iterable[str] = ()) -> "User":
        """Создание пользователя с хешированием пароля"""
        return cls(
            username=username,
            password_hash=get_password_hash(password),
            roles=roles
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.username == other.username

    def __hash__(self) -> int:
        return hash(self.username)

    def __repr__(self) -> str:
        return f"User(username={self.username}, roles={sorted(self.roles)})"


class Principal:
    """Аутентифицированный вызывающий: имя и роли, без пароля"""

    def __init__(self, username: str, roles: Iterable[str] = ()):
        self.username = username
        self.roles: FrozenSet[str] = frozenset(roles)

    def has_any_role(self, *names: str) -> bool:
        return any(name in self.roles for name in names)

    def __repr__(self) -> str:
        return f"Principal(username={self.username}, roles={sorted(self.roles)})"
