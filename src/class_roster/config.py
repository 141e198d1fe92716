"""Environment driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .picker import DEFAULT_COOLDOWN


def default_roster_dir(environ: Mapping[str, str]) -> Path:
    data_home = environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / "class-roster" / "Classes"


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    roster_dir: Path
    pick_cooldown: int = DEFAULT_COOLDOWN
    language: Optional[str] = None
    env_file: str = ".env"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        roster_dir = environ.get("ROSTER_DIR")
        return cls(
            roster_dir=Path(roster_dir).expanduser() if roster_dir else default_roster_dir(environ),
            pick_cooldown=_int_setting(environ, "PICK_COOLDOWN", DEFAULT_COOLDOWN),
            language=environ.get("LANGUAGE_PREFERENCE") or None,
            env_file=environ.get("ENV_FILE", ".env"),
        )
