"""In-memory implementation of KeyValueStore (no disk)."""


class InMemoryPreferences:
    """Stores string sequences in a dict. Values are copied in and out."""

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def get_strings(self, key: str) -> list[str] | None:
        values = self._values.get(key)
        return list(values) if values is not None else None

    def put_strings(self, key: str, values: list[str]) -> None:
        self._values[key] = list(values)

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
