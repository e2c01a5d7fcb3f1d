from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from buildassets.classify import ArtifactKind, classify, parse_checksum, parse_platform
from buildassets.config import SummaryConfig, default_config
from buildassets.errors import ChecksumFileUnreadable, DirectoryUnreadable
from buildassets.index import ArtifactIndex
from buildassets.models import BuildAssets
from buildassets.versions import resolve_build_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResultsDirectoryInfo:
    """Where a Go build from source and its artifacts live."""

    source_dir: Path | str
    artifacts_dir: Path | str | None
    destination_url: str
    branch: str
    build_id: str

    def create_summary(self, config: SummaryConfig | None = None) -> BuildAssets:
        config = config or default_config()
        version = resolve_build_version(Path(self.source_dir), config)

        index = ArtifactIndex()
        if self.artifacts_dir is not None and str(self.artifacts_dir) != "":
            _collect_artifacts(Path(self.artifacts_dir), self.destination_url, index, config)

        assets = BuildAssets(
            branch=self.branch,
            build_id=self.build_id,
            version=version,
            arches=index.sorted_arches(),
        )
        logger.info(
            "build summary complete version=%s arches=%s", assets.version, len(assets.arches)
        )
        return assets


def _list_files(artifacts_dir: Path) -> list[Path]:
    try:
        entries = list(artifacts_dir.iterdir())
    except OSError as exc:
        raise DirectoryUnreadable(artifacts_dir, str(exc)) from exc
    return [entry for entry in sorted(entries) if not entry.is_dir()]


def _read_checksum(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ChecksumFileUnreadable(path, str(exc)) from exc
    return parse_checksum(text, path)


def _collect_artifacts(
    artifacts_dir: Path,
    destination_url: str,
    index: ArtifactIndex,
    config: SummaryConfig,
) -> None:
    for path in _list_files(artifacts_dir):
        name = path.name
        logger.info("artifact file name=%s", name)
        found = classify(name, config.archive_suffixes, config.checksum_suffix)
        if found.kind is ArtifactKind.CHECKSUM:
            index.get_or_create(found.key).sha256 = _read_checksum(path)
        elif found.kind is ArtifactKind.ARCHIVE:
            goos, goarch = parse_platform(name, found.suffix)
            entry = index.get_or_create(found.key)
            entry.url = f"{destination_url}/{name}"
            entry.goos, entry.goarch = goos, goarch


def summarize(
    source_dir: Path | str,
    artifacts_dir: Path | str | None,
    destination_url: str,
    branch: str,
    build_id: str,
    config: SummaryConfig | None = None,
) -> BuildAssets:
    info = BuildResultsDirectoryInfo(
        source_dir=source_dir,
        artifacts_dir=artifacts_dir,
        destination_url=destination_url,
        branch=branch,
        build_id=build_id,
    )
    return info.create_summary(config)
