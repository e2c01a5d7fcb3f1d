from __future__ import annotations

import logging
from pathlib import Path

from buildassets.config import SummaryConfig
from buildassets.errors import MarkerFileUnreadable

logger = logging.getLogger(__name__)


def read_marker(path: Path, default: str) -> str:
    """Return the first line of ``path``, or ``default`` if it does not exist."""
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            line = handle.readline()
    except FileNotFoundError:
        logger.info("marker file missing path=%s default=%s", path, default)
        return default
    except (OSError, UnicodeDecodeError) as exc:
        raise MarkerFileUnreadable(path, str(exc)) from exc
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


def strip_language_prefix(version: str, prefix: str = "go") -> str:
    # VERSION matches the tags ("go1.21.0"); only the numbers are wanted.
    if prefix and version.startswith(prefix):
        return version[len(prefix) :]
    return version


def compose_version(version: str, revision: str) -> str:
    return f"{version}-{revision}"


def resolve_build_version(source_dir: Path, config: SummaryConfig) -> str:
    version = read_marker(source_dir / config.version_file, config.default_version)
    revision = read_marker(source_dir / config.revision_file, config.default_revision)
    return compose_version(strip_language_prefix(version, config.version_prefix), revision)
