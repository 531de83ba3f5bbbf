"""Shared test fixtures for the motion graphics generator."""

from __future__ import annotations

import pytest

from mgg.defaults import default_video
from mgg.models import Canvas, DiagramConfig, SceneData, VideoConfig


@pytest.fixture(autouse=True)
def _set_dummy_api_key(monkeypatch):
    """Ensure tests never hit the real Anthropic API."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key-not-real")


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(width=1080, height=1080, fps=30)


@pytest.fixture
def redis_video() -> VideoConfig:
    return default_video()


@pytest.fixture
def redis_diagram(redis_video) -> DiagramConfig:
    return redis_video.scenes[0].diagram


@pytest.fixture
def make_scene():
    """Build a scene from keyword overrides of a bullet point scene."""

    def _make(**overrides) -> SceneData:
        data = {
            "type": "bullet_point",
            "title": "Title",
            "subtitle": "Subtitle",
            "backgroundColor": "#000000",
            "textColor": "#ffffff",
            "durationInFrames": 90,
        }
        data.update(overrides)
        return SceneData.model_validate(data)

    return _make
