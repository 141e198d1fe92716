"""Helpers for the ``.env`` file that holds local preferences."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

from .logger import debug_detail

ENV_HEADER = "# Class Roster configuration\n"


def read_env_file(path: Path | str) -> Dict[str, str]:
    """Parse ``KEY=value`` lines, ignoring comments and lines without ``=``.

    Values wrapped in single or double quotes are unwrapped.
    """
    values: Dict[str, str] = {}
    path = Path(path)
    if not path.is_file():
        return values
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(path: Path | str = ".env") -> None:
    """Copy values from ``path`` into :data:`os.environ` without overriding."""
    try:
        values = read_env_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        debug_detail(f"Skipping env file {path}: {exc}")
        return
    for key, value in values.items():
        os.environ.setdefault(key, value)


def set_env_value(path: Path | str, key: str, value: str) -> None:
    """Add or replace ``KEY="value"`` in ``path``, creating the file if needed."""
    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines(keepends=True) if path.exists() else [ENV_HEADER]
    entry = f'{key}="{value}"\n'
    for index, line in enumerate(lines):
        if line.strip().startswith(f"{key}="):
            lines[index] = entry
            break
    else:
        if lines and not lines[-1].endswith("\n"):
            lines[-1] += "\n"
        lines.append(entry)
    path.write_text("".join(lines), encoding="utf-8")


__all__ = ["load_env", "read_env_file", "set_env_value"]
