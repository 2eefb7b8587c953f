"""Logging helpers with structured JSON payloads."""

from __future__ import annotations

import json
import logging
from typing import Any

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Apply the standard log format at ``level`` (a name such as ``"DEBUG"``)."""

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def structured_log(level: int, **payload: Any) -> None:
    """Emit a JSON-formatted log line for one pipeline event."""

    logging.getLogger("anchorlens").log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str))
