"""
Internal diagnostics for the facade itself.

The facade reports its own lifecycle (binding resolution, cache misses,
resets) through structlog so host applications decide where those events go.
Nothing here configures structlog.
"""

from __future__ import annotations

import structlog

ROOT_NAME = "slf4py"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a facade module."""
    if not name or name == ROOT_NAME:
        return structlog.get_logger(_name=ROOT_NAME)
    if not name.startswith(f"{ROOT_NAME}."):
        name = f"{ROOT_NAME}.{name}"
    return structlog.get_logger(_name=name)
