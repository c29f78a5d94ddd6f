"""Tests for shipit.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipit.core.config import (
    SETTINGS_FILENAME,
    Settings,
    load_settings,
    load_settings_or_default,
)
from shipit.core.result import Err, Ok


def _write(root: Path, content: str) -> Path:
    path = root / SETTINGS_FILENAME
    path.write_text(content, encoding="utf-8")
    return path


class TestSettingsFromDict:
    def test_empty(self) -> None:
        assert Settings.from_dict({}) == Settings()

    def test_all_keys(self) -> None:
        settings = Settings.from_dict(
            {
                "image": " api ",
                "services": ["a", " b ", "", 3],
                "project": "acme",
                "region": "europe-west1",
                "registry_host": "eu.gcr.io",
                "lang": "go",
                "keep_images": 4,
                "keep_revisions": 6,
            }
        )

        assert settings == Settings(
            image="api",
            services=("a", "b"),
            project="acme",
            region="europe-west1",
            registry_host="eu.gcr.io",
            lang="go",
            keep_images=4,
            keep_revisions=6,
        )

    def test_services_as_semicolon_string(self) -> None:
        assert Settings.from_dict({"services": "a; b;;c"}).services == ("a", "b", "c")

    def test_wrong_types_ignored(self) -> None:
        settings = Settings.from_dict({"image": 1, "keep_images": "5", "keep_revisions": True})
        assert settings.image is None
        assert settings.keep_images is None
        assert settings.keep_revisions is None

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Settings().image = "x"  # type: ignore[misc]


class TestLoadSettings:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'image = "api"\nservices = ["a", "b"]\nkeep_images = 3\n')

        result = load_settings(path)

        assert isinstance(result, Ok)
        assert result.value.image == "api"
        assert result.value.services == ("a", "b")
        assert result.value.keep_images == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_settings(tmp_path / SETTINGS_FILENAME)

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "image = \n")

        result = load_settings(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path


class TestLoadSettingsOrDefault:
    def test_absent_file_is_empty_settings(self, tmp_path: Path) -> None:
        assert load_settings_or_default(tmp_path) == Ok(Settings())

    def test_present_file_is_loaded(self, tmp_path: Path) -> None:
        _write(tmp_path, 'region = "us-east1"\n')
        assert load_settings_or_default(tmp_path) == Ok(Settings(region="us-east1"))

    def test_broken_file_is_an_error(self, tmp_path: Path) -> None:
        _write(tmp_path, "[[[")
        assert isinstance(load_settings_or_default(tmp_path), Err)
