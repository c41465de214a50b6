"""Errors raised by UserStore adapters."""


class UserStoreError(Exception):
    """A store operation failed."""


class UserNotFoundError(UserStoreError):
    """No user with the given id."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"user {user_id!r} not found")
        self.user_id = user_id
