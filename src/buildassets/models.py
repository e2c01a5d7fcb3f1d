from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from buildassets.branches import target_branch
from buildassets.errors import ManifestFormatError


class ArchEnv(BaseModel):
    model_config = ConfigDict(frozen=True)

    GOOS: str = ""
    GOARCH: str = ""


class Arch(BaseModel):
    model_config = ConfigDict(frozen=True)

    env: ArchEnv = Field(default_factory=ArchEnv)
    url: str = ""
    sha256: str = ""


class BuildAssets(BaseModel):
    """Root object of a build asset JSON file.

    Auto-update tooling reads ``version`` and ``arches``; ``branch`` and
    ``buildId`` only trace the file back to the build that produced it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    branch: str
    build_id: str = Field(alias="buildId")
    # 'major.minor.patch-revision'
    version: str
    arches: tuple[Arch, ...] = ()

    def docker_target_branch(self) -> str:
        return target_branch(self.branch)

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), indent=2) + "\n"

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())

    @classmethod
    def load(cls, path: Path) -> BuildAssets:
        try:
            data = json.loads(path.read_text())
            return cls.model_validate(data)
        except OSError as exc:
            raise ManifestFormatError(path, str(exc)) from exc
        except ValueError as exc:
            raise ManifestFormatError(path, str(exc)) from exc
