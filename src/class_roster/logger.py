"""
src/class_roster/logger.py
Layered console logging for Class Roster.

Records carry a ``layer`` extra (step, success, warning, error, debug, user)
that decides the icon and colour printed in front of the message.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

__all__ = [
    "logger",
    "step",
    "success",
    "debug_detail",
    "get_logger",
    "set_log_profile",
]

BASE_LOGGER_NAME = "class_roster"

_PALETTE: Dict[str, str] = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "bold": "\033[1m",
    "blue": "\033[34m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "magenta": "\033[35m",
}

_PROFILE_LEVELS = {
    "quiet": logging.WARNING,
    "user": logging.INFO,
    "debug": logging.DEBUG,
    "verbose": logging.DEBUG,
}


def _apply_color(text: str, *styles: str) -> str:
    if os.getenv("NO_COLOR") is not None or not styles:
        return text
    colors = "".join(_PALETTE.get(style, "") for style in styles)
    return f"{colors}{text}{_PALETTE['reset']}"


class LayeredFormatter(logging.Formatter):
    """Prefix each console line with the icon of its layer."""

    LAYERS: Dict[str, Dict[str, Any]] = {
        "step": {"icon": "▶", "style": ("blue", "bold")},
        "success": {"icon": "✓", "style": ("green", "bold")},
        "warning": {"icon": "!", "style": ("yellow", "bold")},
        "error": {"icon": "✗", "style": ("red", "bold")},
        "debug": {"icon": "·", "style": ("magenta",)},
        "user": {"icon": "•", "style": ()},
    }

    def format(self, record: logging.LogRecord) -> str:
        layer = getattr(record, "layer", "user")
        mapping = self.LAYERS.get(layer, self.LAYERS["user"])
        message = super().format(record)
        if layer == "debug":
            return f"{_apply_color('[debug]', 'dim')} {message}"
        return f"{_apply_color(mapping['icon'], *mapping['style'])} {message}"


class LayeredAdapter(logging.LoggerAdapter):
    """Logger adapter that fills in the ``layer`` extra."""

    def __init__(self, logger: logging.Logger, default_layer: str = "user"):
        super().__init__(logger, {"layer": default_layer})

    def log(self, level: int, msg: Any, *args, layer: Optional[str] = None, **kwargs) -> None:
        if not self.isEnabledFor(level):
            return
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("layer", layer or self.extra.get("layer", "user"))
        self.logger.log(level, msg, *args, **kwargs)

    def warning(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "warning")
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "error")
        self.log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: Any, *args, **kwargs) -> None:  # type: ignore[override]
        kwargs.setdefault("layer", "error")
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, msg, *args, **kwargs)


def _console_level(profile: str) -> int:
    level = _PROFILE_LEVELS.get(profile, logging.INFO)
    override = os.getenv("LOG_LEVEL")
    if override:
        explicit = getattr(logging, override.upper(), None)
        if isinstance(explicit, int):
            level = explicit
    return level


def _configure_base_logger() -> LayeredAdapter:
    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if base_logger.handlers:
        return LayeredAdapter(base_logger)

    base_logger.setLevel(logging.DEBUG)
    base_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_console_level((os.getenv("LOG_PROFILE") or "user").lower()))
    console_handler.setFormatter(LayeredFormatter("%(message)s"))
    base_logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE")
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            base_logger.warning("Failed to open logfile '%s': %s", log_file, exc)
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(logging.DEBUG)
            base_logger.addHandler(file_handler)

    return LayeredAdapter(base_logger)


logger = _configure_base_logger()


def step(message: str) -> None:
    """Log the start of a user-visible action."""
    logger.log(logging.INFO, message, layer="step")


def success(message: str) -> None:
    """Log successful completion of an action."""
    logger.log(logging.INFO, message, layer="success")


def debug_detail(message: str) -> None:
    """Log detail that only shows with LOG_PROFILE=debug."""
    logger.log(logging.DEBUG, message, layer="debug")


def get_logger(name: str, *, layer: str = "user") -> LayeredAdapter:
    return LayeredAdapter(logging.getLogger(f"{BASE_LOGGER_NAME}.{name}"), default_layer=layer)


def set_log_profile(profile: str) -> None:
    """Change console verbosity at runtime (quiet, user, debug)."""
    profile = (profile or "user").lower()
    level = _PROFILE_LEVELS.get(profile, logging.INFO)
    for handler in logging.getLogger(BASE_LOGGER_NAME).handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)
    os.environ["LOG_PROFILE"] = profile
