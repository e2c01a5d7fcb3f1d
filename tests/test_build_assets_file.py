from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from buildassets.errors import ManifestFormatError
from buildassets.models import Arch, ArchEnv, BuildAssets


def _assets() -> BuildAssets:
    return BuildAssets(
        branch="main",
        build_id="42",
        version="1.21.0-3",
        arches=[
            Arch(
                env=ArchEnv(GOOS="linux", GOARCH="amd64"),
                url="https://x/go.1.21.0-3.linux-amd64.tar.gz",
                sha256="abc123",
            )
        ],
    )


def test_json_field_names() -> None:
    payload = json.loads(_assets().to_json())
    assert set(payload) == {"branch", "buildId", "version", "arches"}
    assert payload["arches"][0] == {
        "env": {"GOOS": "linux", "GOARCH": "amd64"},
        "url": "https://x/go.1.21.0-3.linux-amd64.tar.gz",
        "sha256": "abc123",
    }


def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "out" / "assets.json"
    assets = _assets()
    assets.save(path)
    loaded = BuildAssets.load(path)
    assert loaded == assets
    assert loaded.arches[0].env.GOOS == "linux"


def test_load_rejects_bad_file(tmp_path: Path) -> None:
    path = tmp_path / "assets.json"
    path.write_text(json.dumps({"branch": "main"}))
    with pytest.raises(ManifestFormatError):
        BuildAssets.load(path)
    path.write_text("{not json")
    with pytest.raises(ManifestFormatError):
        BuildAssets.load(path)


def test_manifest_is_frozen() -> None:
    assets = _assets()
    with pytest.raises(ValidationError):
        assets.version = "other"
