from __future__ import annotations

from dataclasses import dataclass

from buildassets.models import Arch, ArchEnv


@dataclass
class ArtifactEntry:
    goos: str = ""
    goarch: str = ""
    url: str = ""
    sha256: str = ""

    def freeze(self) -> Arch:
        return Arch(
            env=ArchEnv(GOOS=self.goos, GOARCH=self.goarch),
            url=self.url,
            sha256=self.sha256,
        )


class ArtifactIndex:
    """Accumulates checksum and archive facts per archive filename."""

    def __init__(self) -> None:
        self._entries: dict[str, ArtifactEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get_or_create(self, key: str) -> ArtifactEntry:
        entry = self._entries.get(key)
        if entry is None:
            entry = ArtifactEntry()
            self._entries[key] = entry
        return entry

    def sorted_arches(self) -> tuple[Arch, ...]:
        # URL is unique per archive; entries without one sort first.
        entries = sorted(self._entries.values(), key=lambda item: item.url)
        return tuple(entry.freeze() for entry in entries)
