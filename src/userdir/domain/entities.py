"""Domain entities: User."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    A directory record: identifier, display name and phone.
    Phone is opaque text; only the identifier is required.
    """

    id: str
    name: str = ""
    phone: str = ""

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise ValueError("User id must be non-empty.")
