"""Tests for shipit.release.model module."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from shipit.release.model import ImageReference, ReleaseConfig


class TestImageReference:
    def test_tag_forms(self) -> None:
        ref = ImageReference("eu.gcr.io/acme/api")
        assert ref.tag(beta=False) == "eu.gcr.io/acme/api"
        assert ref.tag(beta=True) == "eu.gcr.io/acme/api:dev"

    def test_pinned_requires_digest(self) -> None:
        with pytest.raises(ValueError):
            ImageReference("eu.gcr.io/acme/api").pinned()

    def test_pinned_after_push(self) -> None:
        ref = ImageReference("eu.gcr.io/acme/api").with_digest("sha256:abc")
        assert ref.pinned() == "eu.gcr.io/acme/api@sha256:abc"


class TestReleaseConfig:
    def test_frozen(self, make_config: Callable[..., ReleaseConfig]) -> None:
        cfg = make_config()
        with pytest.raises(AttributeError):
            cfg.image = "other"  # type: ignore[misc]
