"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol

from userdir.domain import User

# Blocks the calling thread for the given number of seconds.
Sleeper = Callable[[float], None]


class UserStore(Protocol):
    """Persists and looks up User records. Must be safe for concurrent use."""

    def add_user(self, user: User) -> None:
        """Store a user. Raises on any failure."""
        ...

    def find_user(self, user_id: str) -> User:
        """Return the user with the given id. Raises if it cannot be found or read."""
        ...


class CardRenderer(Protocol):
    """Formats a business card from a name and phone."""

    def render(self, name: str, phone: str) -> str:
        """Return the card text. Raises if the template cannot be executed."""
        ...


class RetryPolicy(Protocol):
    """Decides how long to wait before the next write attempt."""

    def wait(self, attempt: int) -> None:
        """Block after failed attempt number `attempt` (1-based)."""
        ...
