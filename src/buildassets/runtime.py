from __future__ import annotations

import logging
import os


def log_level_from_env(default: int = logging.INFO) -> int:
    raw = os.getenv("BUILDASSETS_LOG_LEVEL", "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def configure_logging(level: int | None = None) -> None:
    level = log_level_from_env() if level is None else level
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
