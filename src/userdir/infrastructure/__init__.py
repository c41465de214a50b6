"""Infrastructure layer: concrete implementations of application ports, plus configuration."""

from userdir.infrastructure.errors import UserNotFoundError, UserStoreError
from userdir.infrastructure.memory_repository import InMemoryUserStore
from userdir.infrastructure.persistence.neo4j_repository import (
    Neo4jUserStore,
    ensure_user_id_constraint,
)

__all__ = [
    "InMemoryUserStore",
    "Neo4jUserStore",
    "UserNotFoundError",
    "UserStoreError",
    "ensure_user_id_constraint",
]
