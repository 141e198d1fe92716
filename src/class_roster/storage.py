"""JSON file storage for class rosters, one document per class."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Set

from .errors import (
    CorruptRosterError,
    InvalidNameError,
    RosterIOError,
    RosterNotFoundError,
)
from .students import Roster

LOGGER = logging.getLogger(__name__)

ROSTER_SUFFIX = ".json"


def validate_class_name(class_name: str) -> str:
    name = (class_name or "").strip()
    if not name:
        raise InvalidNameError("Class name must not be empty")
    if "/" in name or "\\" in name or name.startswith("."):
        raise InvalidNameError(f"Class name '{name}' cannot be used as a file name")
    return name


class RosterStore:
    """Read and write roster documents under a single directory."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, class_name: str) -> Path:
        return self._directory / f"{validate_class_name(class_name)}{ROSTER_SUFFIX}"

    def _ensure_directory(self) -> None:
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RosterIOError(f"Cannot create roster directory {self._directory}: {exc}") from exc

    def list_rosters(self) -> Set[str]:
        self._ensure_directory()
        try:
            entries = list(self._directory.iterdir())
        except OSError as exc:
            raise RosterIOError(f"Cannot list roster directory {self._directory}: {exc}") from exc
        return {
            entry.stem
            for entry in entries
            if entry.is_file() and entry.suffix.lower() == ROSTER_SUFFIX
        }

    def exists(self, class_name: str) -> bool:
        return self.path_for(class_name).is_file()

    def load(self, class_name: str) -> Roster:
        path = self.path_for(class_name)
        if not path.is_file():
            raise RosterNotFoundError(f"Class '{class_name}' does not exist")
        try:
            data = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RosterIOError(f"Cannot read {path}: {exc}") from exc
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise CorruptRosterError(f"Class '{class_name}' is not valid JSON: {exc}") from exc
        roster = Roster.from_payload(class_name, payload)
        LOGGER.debug("Loaded %d student(s) from %s", len(roster), path)
        return roster

    def save(self, roster: Roster) -> None:
        self._ensure_directory()
        path = self.path_for(roster.class_name)
        try:
            path.write_text(
                json.dumps(roster.to_payload(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:
            raise RosterIOError(f"Cannot write {path}: {exc}") from exc
        LOGGER.debug("Saved %d student(s) to %s", len(roster), path)

    def delete(self, class_name: str) -> None:
        path = self.path_for(class_name)
        if not path.is_file():
            raise RosterNotFoundError(f"Class '{class_name}' does not exist")
        try:
            path.unlink()
        except OSError as exc:
            raise RosterIOError(f"Cannot delete {path}: {exc}") from exc
