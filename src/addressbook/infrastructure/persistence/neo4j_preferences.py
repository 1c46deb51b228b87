"""Neo4j implementation of KeyValueStore.
Graph: one Preferences node per user, one Preference node per key holding a list of strings.
(owner:Preferences {user_id})-[:HAS]->(p:Preference {key, values, updated_at}).
"""

from datetime import datetime, timezone


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


_CONSTRAINT_QUERY = """
CREATE CONSTRAINT preferences_owner_unique IF NOT EXISTS
FOR (o:Preferences) REQUIRE o.user_id IS UNIQUE
"""


def ensure_preferences_constraint(driver) -> None:
    """Create unique constraint on Preferences(user_id) if missing."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


class Neo4jPreferences:
    """Stores preferences in Neo4j, scoped by user_id.
    Values keep their order; Neo4j list properties are ordered.
    """

    def __init__(self, driver: object, user_id: str = "default") -> None:
        self._driver = driver
        self._user_id = user_id

    def get_strings(self, key: str) -> list[str] | None:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (o:Preferences {user_id: $user_id})-[:HAS]->(p:Preference {key: $key})
                RETURN p.values AS values
                """,
                user_id=self._user_id,
                key=key,
            )
            record = result.single()
        if not record or record["values"] is None:
            return None
        return list(record["values"])

    def put_strings(self, key: str, values: list[str]) -> None:
        with self._driver.session() as session:
            session.run(
                """
                MERGE (o:Preferences {user_id: $user_id})
                MERGE (o)-[:HAS]->(p:Preference {key: $key})
                SET p.values = $values, p.updated_at = $updated_at
                """,
                user_id=self._user_id,
                key=key,
                values=list(values),
                updated_at=_now_iso(),
            )

    def remove(self, key: str) -> None:
        with self._driver.session() as session:
            session.run(
                """
                MATCH (o:Preferences {user_id: $user_id})-[:HAS]->(p:Preference {key: $key})
                DETACH DELETE p
                """,
                user_id=self._user_id,
                key=key,
            )
