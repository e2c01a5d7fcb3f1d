from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ARCHIVE_SUFFIXES: tuple[str, ...] = (".tar.gz", ".zip")
DEFAULT_CHECKSUM_SUFFIX = ".sha256"


@dataclass(frozen=True)
class SummaryConfig:
    version_file: str = "VERSION"
    revision_file: str = "MICROSOFT_REVISION"
    default_version: str = "main"
    default_revision: str = "1"
    version_prefix: str = "go"
    # Checked in order; the first matching suffix wins.
    archive_suffixes: tuple[str, ...] = DEFAULT_ARCHIVE_SUFFIXES
    checksum_suffix: str = DEFAULT_CHECKSUM_SUFFIX


def _parse_suffixes(raw: str) -> tuple[str, ...]:
    suffixes = tuple(item.strip() for item in raw.split(",") if item.strip())
    return suffixes or DEFAULT_ARCHIVE_SUFFIXES


def default_config() -> SummaryConfig:
    version_env = os.getenv("BUILDASSETS_VERSION_FILE", "").strip()
    revision_env = os.getenv("BUILDASSETS_REVISION_FILE", "").strip()
    suffixes_env = os.getenv("BUILDASSETS_ARCHIVE_SUFFIXES", "").strip()
    defaults = SummaryConfig()
    return SummaryConfig(
        version_file=version_env or defaults.version_file,
        revision_file=revision_env or defaults.revision_file,
        archive_suffixes=(
            _parse_suffixes(suffixes_env) if suffixes_env else defaults.archive_suffixes
        ),
    )
