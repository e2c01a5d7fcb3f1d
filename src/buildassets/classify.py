from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from buildassets.config import DEFAULT_ARCHIVE_SUFFIXES, DEFAULT_CHECKSUM_SUFFIX
from buildassets.errors import MalformedArchiveFilename, MalformedChecksumContent

# Naming convention of Microsoft Go build outputs, duplicated from the
# archiving scripts in each release branch:
#   go.<version>.<GOOS>-<GOARCH>.<archive suffix>
#   go.<version>.<GOOS>-<GOARCH>.<archive suffix>.sha256


class ArtifactKind(str, Enum):
    CHECKSUM = "checksum"
    ARCHIVE = "archive"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Classification:
    kind: ArtifactKind
    # Identity shared by an archive and its checksum file: the archive filename.
    key: str = ""
    suffix: str = ""


def classify(
    filename: str,
    archive_suffixes: tuple[str, ...] = DEFAULT_ARCHIVE_SUFFIXES,
    checksum_suffix: str = DEFAULT_CHECKSUM_SUFFIX,
) -> Classification:
    if checksum_suffix and filename.endswith(checksum_suffix):
        return Classification(
            kind=ArtifactKind.CHECKSUM,
            key=filename[: -len(checksum_suffix)],
            suffix=checksum_suffix,
        )
    for suffix in archive_suffixes:
        if filename.endswith(suffix):
            return Classification(kind=ArtifactKind.ARCHIVE, key=filename, suffix=suffix)
    return Classification(kind=ArtifactKind.IGNORED)


def parse_platform(filename: str, suffix: str) -> tuple[str, str]:
    """Extract (GOOS, GOARCH) from ``go.1.21.0-3.linux-amd64.tar.gz``.

    Architectures containing a dash cannot be told apart from the separator,
    so anything but exactly two parts is rejected.
    """
    extensionless = filename[: -len(suffix)] if suffix else filename
    platform = extensionless.rsplit(".", 1)[-1]
    parts = platform.split("-")
    if len(parts) != 2 or not all(parts):
        raise MalformedArchiveFilename(filename, platform)
    return parts[0], parts[1]


def parse_checksum(text: str, path: Path) -> str:
    fields = text.split()
    if not fields:
        raise MalformedChecksumContent(path)
    return fields[0]
