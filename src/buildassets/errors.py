from __future__ import annotations

from pathlib import Path


class BuildAssetsError(RuntimeError):
    """Base class for failures that abort a build summary."""


class MarkerFileUnreadable(BuildAssetsError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"unable to read marker file '{path}'{detail}")


class DirectoryUnreadable(BuildAssetsError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"unable to list artifacts directory '{path}'{detail}")


class ChecksumFileUnreadable(BuildAssetsError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"unable to read checksum file '{path}'{detail}")


class MalformedChecksumContent(BuildAssetsError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"checksum file '{path}' has no digest token")


class MalformedArchiveFilename(BuildAssetsError):
    def __init__(self, filename: str, platform: str) -> None:
        self.filename = filename
        self.platform = platform
        super().__init__(
            f"archive '{filename}' platform '{platform}' is not in GOOS-GOARCH form"
        )


class ManifestFormatError(BuildAssetsError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"invalid build assets file '{path}'{detail}")
