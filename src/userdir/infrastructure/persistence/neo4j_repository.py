"""Neo4j implementation of UserStore.
Graph: one node per user, (:User {id, name, phone}); id is unique.
"""

from userdir.domain import User
from userdir.infrastructure.errors import UserNotFoundError

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT user_id_unique IF NOT EXISTS
FOR (u:User) REQUIRE u.id IS UNIQUE
"""

_ADD_USER_QUERY = """
MERGE (u:User {id: $id})
SET u.name = $name,
    u.phone = $phone
"""

_FIND_USER_QUERY = """
MATCH (u:User {id: $id})
RETURN u
LIMIT 1
"""


def ensure_user_id_constraint(driver: object) -> None:
    """Create the uniqueness constraint on User.id. Safe to call repeatedly."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


class Neo4jUserStore:
    """Stores users as User nodes. Writing an existing id overwrites name and phone."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def add_user(self, user: User) -> None:
        with self._driver.session() as session:
            session.run(
                _ADD_USER_QUERY,
                id=user.id,
                name=user.name,
                phone=user.phone,
            )

    def find_user(self, user_id: str) -> User:
        with self._driver.session() as session:
            result = session.run(_FIND_USER_QUERY, id=user_id)
            record = result.single()
        if not record:
            raise UserNotFoundError(user_id)
        return _record_to_user(record)


def _record_to_user(record) -> User:
    u = record["u"]
    return User(
        id=u["id"],
        name=u.get("name") or "",
        phone=u.get("phone") or "",
    )
