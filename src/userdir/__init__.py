"""
userdir core: clean-architecture layout.

- domain: entities (User). No outer dependencies.
- application: DirectoryService, ports (UserStore, CardRenderer, RetryPolicy), business card renderer.
- infrastructure: adapters (InMemoryUserStore, Neo4jUserStore) and configuration.
"""

from userdir.application import (
    BusinessCardRenderer,
    CardRenderError,
    DirectoryError,
    DirectoryService,
    FixedDelay,
    UserLookupError,
    UserStore,
)
from userdir.domain import User
from userdir.infrastructure import InMemoryUserStore, Neo4jUserStore, UserNotFoundError

__all__ = [
    "BusinessCardRenderer",
    "CardRenderError",
    "DirectoryError",
    "DirectoryService",
    "FixedDelay",
    "InMemoryUserStore",
    "Neo4jUserStore",
    "User",
    "UserLookupError",
    "UserNotFoundError",
    "UserStore",
]
