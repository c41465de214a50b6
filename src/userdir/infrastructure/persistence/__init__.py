"""Database-backed UserStore adapters."""

from userdir.infrastructure.persistence.neo4j_repository import (
    Neo4jUserStore,
    ensure_user_id_constraint,
)

__all__ = ["Neo4jUserStore", "ensure_user_id_constraint"]
