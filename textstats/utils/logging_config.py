"""Root logging setup for the ``textstats`` command line."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "TEXTSTATS_LOG_LEVEL"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def configure_logging(level: Optional[str] = None, *, force: bool = False) -> None:
    """Send diagnostics to stderr, leaving stdout to the report.

    ``level`` is a level name such as ``"debug"``; without one
    ``TEXTSTATS_LOG_LEVEL`` is consulted and unknown names fall back to
    ``WARNING``.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logging.basicConfig(level=resolved, format=_FORMAT, force=force)
    logging.getLogger("textstats").setLevel(resolved)
    _CONFIGURED = True


__all__ = ["configure_logging", "LOG_LEVEL_ENV"]
