"""KeyValueStore backed by one JSON file on disk, the local equivalent of a shared preferences file."""

import json
import logging
import os
from pathlib import Path

from addressbook.domain import PreferencesError

logger = logging.getLogger(__name__)


class JsonFilePreferences:
    """Keeps every key in one JSON object file. Writes go to a temp file, then replace the file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_strings(self, key: str) -> list[str] | None:
        values = self._read().get(key)
        if values is None:
            return None
        if not isinstance(values, list):
            raise PreferencesError(f"Preference {key!r} in {self._path} is not a list.")
        return [str(v) for v in values]

    def put_strings(self, key: str, values: list[str]) -> None:
        data = self._read()
        data[key] = list(values)
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PreferencesError(f"Cannot read preferences file {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PreferencesError(f"Preferences file {self._path} does not hold a JSON object.")
        return data

    def _write(self, data: dict) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            raise PreferencesError(f"Cannot write preferences file {self._path}: {exc}") from exc
        logger.debug("Wrote preferences file %s", self._path)
