"""Minimal logging setup for the engine.

Modules grab their logger with ``logging.getLogger(__name__)``. The entry
point (or a host application) calls :func:`setup_default_logging` once.
"""

from __future__ import annotations

import logging

# Level names understood on top of the stdlib ones
_ALIASES = {
    "verbose": logging.DEBUG,
    "info": logging.INFO,
}


def resolve_level(level: int | str) -> int:
    """Turn a level name ("info", "verbose", "WARNING", ...) into an int."""
    if isinstance(level, int):
        return level
    name = level.strip().lower()
    if name in _ALIASES:
        return _ALIASES[name]
    return getattr(logging, name.upper(), logging.INFO)


def setup_default_logging(level: int | str = "info") -> None:
    """Apply a basic logging config once.

    No-op when the root logger already has handlers (the host app owns it).
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["resolve_level", "setup_default_logging"]
