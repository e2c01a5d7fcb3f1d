from __future__ import annotations

import pytest

from buildassets.config import DEFAULT_ARCHIVE_SUFFIXES, default_config


def test_default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BUILDASSETS_VERSION_FILE", raising=False)
    monkeypatch.delenv("BUILDASSETS_REVISION_FILE", raising=False)
    monkeypatch.delenv("BUILDASSETS_ARCHIVE_SUFFIXES", raising=False)
    config = default_config()
    assert config.version_file == "VERSION"
    assert config.revision_file == "MICROSOFT_REVISION"
    assert config.archive_suffixes == DEFAULT_ARCHIVE_SUFFIXES
    assert config.checksum_suffix == ".sha256"


def test_config_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUILDASSETS_VERSION_FILE", "GO_VERSION")
    monkeypatch.setenv("BUILDASSETS_ARCHIVE_SUFFIXES", " .tar.xz, .zip ,")
    config = default_config()
    assert config.version_file == "GO_VERSION"
    assert config.archive_suffixes == (".tar.xz", ".zip")
