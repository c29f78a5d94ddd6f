"""Tests for shipit.release.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from shipit.core.config import Settings
from shipit.core.result import Err, Ok
from shipit.release.config import (
    ReleaseOptions,
    build_release_config,
    infer_registry_host,
    split_services,
)
from shipit.release.errors import ConfigInvalid, UnsupportedBuildTool
from shipit.release.model import BuildTool, ReleaseConfig


def _options(**overrides: object) -> ReleaseOptions:
    values: dict[str, object] = {
        "image": "api",
        "services": "svc-a;svc-b",
        "project": "acme",
        "region": "europe-west1",
    }
    values.update(overrides)
    return ReleaseOptions(**values)  # type: ignore[arg-type]


def _build(
    tmp_path: Path, options: ReleaseOptions, settings: Settings | None = None
) -> ReleaseConfig:
    result = build_release_config(
        options, settings or Settings(), workspace=tmp_path, started_at=12.5
    )
    assert isinstance(result, Ok), result
    return result.value


def _error(tmp_path: Path, options: ReleaseOptions, settings: Settings | None = None) -> str:
    result = build_release_config(
        options, settings or Settings(), workspace=tmp_path, started_at=0.0
    )
    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigInvalid)
    return result.error.message


class TestSplitServices:
    def test_trims_and_drops_empties(self) -> None:
        assert split_services(" a ; b;;c ;") == ("a", "b", "c")

    def test_keeps_order_and_duplicates(self) -> None:
        assert split_services("b;a;b") == ("b", "a", "b")

    def test_only_separators(self) -> None:
        assert split_services(" ; ; ") == ()


class TestInferRegistryHost:
    @pytest.mark.parametrize(
        ("region", "host"),
        [
            ("asia-northeast1", "asia.gcr.io"),
            ("europe-west1", "eu.gcr.io"),
            ("eu-central", "eu.gcr.io"),
            ("us-central1", "us.gcr.io"),
            (" US-EAST4 ", "us.gcr.io"),
            ("australia-southeast1", "gcr.io"),
            ("me-west1", "gcr.io"),
        ],
    )
    def test_prefixes(self, region: str, host: str) -> None:
        assert infer_registry_host(region) == host


class TestBuildReleaseConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        cfg = _build(tmp_path, _options())

        assert cfg.image == "api"
        assert cfg.services == ("svc-a", "svc-b")
        assert cfg.beta is False
        assert cfg.keep_images == 10
        assert cfg.keep_revisions == 10
        assert cfg.registry_host == "eu.gcr.io"
        assert cfg.build_tool == BuildTool.pnpm
        assert cfg.workspace == tmp_path
        assert cfg.started_at == 12.5
        assert cfg.image_repo == "eu.gcr.io/acme/api"
        assert cfg.image_tag == "eu.gcr.io/acme/api"

    def test_beta_uses_dev_tag(self, tmp_path: Path) -> None:
        cfg = _build(tmp_path, _options(beta=True))
        assert cfg.image_tag == "eu.gcr.io/acme/api:dev"

    def test_explicit_registry_host(self, tmp_path: Path) -> None:
        cfg = _build(tmp_path, _options(registry_host="  asia.gcr.io "))
        assert cfg.registry_host == "asia.gcr.io"

    def test_build_tool_detected_from_workspace(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text("", encoding="utf-8")
        assert _build(tmp_path, _options()).build_tool == BuildTool.rust

    def test_unknown_lang(self, tmp_path: Path) -> None:
        result = build_release_config(
            _options(lang="cobol"), Settings(), workspace=tmp_path, started_at=0.0
        )
        assert result == Err(UnsupportedBuildTool(value="cobol"))

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"image": None}, "--image is required"),
            ({"image": "  "}, "--image is required"),
            ({"services": None}, "--svc is required"),
            ({"services": " ; "}, "no services provided via --svc"),
            ({"keep_images": 0}, "--keep-images must be >= 1"),
            ({"keep_revisions": -3}, "--keep-revisions must be >= 1"),
            ({"project": None}, "--project is required"),
            ({"region": ""}, "--region is required"),
        ],
    )
    def test_validation(self, tmp_path: Path, overrides: dict[str, object], message: str) -> None:
        assert _error(tmp_path, _options(**overrides)) == message

    def test_missing_workspace(self, tmp_path: Path) -> None:
        result = build_release_config(
            _options(), Settings(), workspace=tmp_path / "nope", started_at=0.0
        )
        assert isinstance(result, Err)
        assert "not a directory" in result.error.message


class TestSettingsPrecedence:
    def test_settings_fill_missing_options(self, tmp_path: Path) -> None:
        settings = Settings(
            image="web",
            services=("front",),
            project="p",
            region="us-east1",
            lang="go",
            keep_images=3,
            keep_revisions=4,
        )

        cfg = _build(tmp_path, ReleaseOptions(), settings)

        assert cfg.image == "web"
        assert cfg.services == ("front",)
        assert cfg.registry_host == "us.gcr.io"
        assert cfg.build_tool == BuildTool.go
        assert cfg.keep_images == 3
        assert cfg.keep_revisions == 4

    def test_options_win(self, tmp_path: Path) -> None:
        settings = Settings(image="web", services=("front",), keep_images=3, registry_host="gcr.io")

        cfg = _build(
            tmp_path, _options(keep_images=1, registry_host="eu.gcr.io"), settings
        )

        assert cfg.image == "api"
        assert cfg.services == ("svc-a", "svc-b")
        assert cfg.keep_images == 1
        assert cfg.registry_host == "eu.gcr.io"

    def test_invalid_setting_is_not_masked_by_default(self, tmp_path: Path) -> None:
        settings = Settings(keep_revisions=0)
        assert _error(tmp_path, _options(), settings) == "--keep-revisions must be >= 1"
