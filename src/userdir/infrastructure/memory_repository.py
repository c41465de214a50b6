"""In-memory implementation of UserStore (no DB)."""

import threading

from userdir.domain import User
from userdir.infrastructure.errors import UserNotFoundError


class InMemoryUserStore:
    """Stores users in memory, keyed by id. Writing an existing id replaces it (last write wins).
    Order of first insertion is preserved.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[str, User] = {}

    def add_user(self, user: User) -> None:
        with self._lock:
            self._by_id[user.id] = user

    def find_user(self, user_id: str) -> User:
        with self._lock:
            user = self._by_id.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._by_id.values())
