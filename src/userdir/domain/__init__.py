"""Domain layer: entities. No dependencies on outer layers."""

from userdir.domain.entities import User

__all__ = ["User"]
