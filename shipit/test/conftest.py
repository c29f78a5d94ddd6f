from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from shipit.release.model import BuildTool, ReleaseConfig

ConfigFactory = Callable[..., ReleaseConfig]


@pytest.fixture
def make_config(tmp_path: Path) -> ConfigFactory:
    """Build a ReleaseConfig rooted in ``tmp_path``; keyword args override fields."""

    def factory(**overrides: Any) -> ReleaseConfig:
        values: dict[str, Any] = {
            "image": "api",
            "beta": False,
            "services": ("svc-a",),
            "build_tool": BuildTool.pnpm,
            "registry_host": "eu.gcr.io",
            "project": "acme",
            "region": "europe-west1",
            "workspace": tmp_path,
            "keep_images": 2,
            "keep_revisions": 2,
            "started_at": 0.0,
        }
        values.update(overrides)
        return ReleaseConfig(**values)

    return factory
