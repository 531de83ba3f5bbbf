"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from mgg import __version__
from mgg.cli import app
from mgg.config import config
from mgg.errors import GenerationError
from mgg.models import GeneratedScript, VideoConfig

runner = CliRunner()


class _FakeAgent:
    """Stands in for ScriptAgent so no request leaves the process."""

    model = "fake-model"
    script = None
    error = None

    def __init__(self, *args, **kwargs):
        pass

    def run(self, input_data):
        if self.error:
            raise self.error
        return self.script


@pytest.fixture
def fake_agent(monkeypatch, redis_video):
    monkeypatch.setattr(config, "anthropic_api_key", "test-key")
    _FakeAgent.script = GeneratedScript(
        suggested_music_mood="Ambient",
        scenes=list(redis_video.scenes),
    )
    _FakeAgent.error = None
    monkeypatch.setattr("mgg.agents.ScriptAgent", _FakeAgent)
    return _FakeAgent


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestStatus:
    def test_default_video(self):
        result = runner.invoke(app, ["status", "--default"])
        assert result.exit_code == 0
        assert "Redis Distributed Lock" in result.output
        assert "240 frames" in result.output
        assert "4 nodes, 3 edges, 8 actions" in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["status", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "No video config found" in result.output

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"scenes": [{"type": "intro", "durationInFrames": 0}]}')
        result = runner.invoke(app, ["status", "--config", str(path)])
        assert result.exit_code == 1
        assert "Error loading video config" in result.output


class TestFrame:
    def test_prints_frame_json(self):
        result = runner.invoke(app, ["frame", "80", "--default"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["sceneIndex"] == 0
        assert data["scene"]["packets"][0]["label"] == "SETNX"

    def test_writes_to_file(self, tmp_path):
        target = tmp_path / "out" / "frame.json"
        result = runner.invoke(app, ["frame", "85", "--default", "--output", str(target)])
        assert result.exit_code == 0
        data = json.loads(target.read_text())
        assert data["scene"]["labels"][0]["text"] == "LOCKED"

    def test_unknown_theme(self):
        result = runner.invoke(app, ["frame", "10", "--default", "--theme", "sepia"])
        assert result.exit_code == 1
        assert "Unknown theme" in result.output


class TestExport:
    def test_export_default(self, tmp_path):
        target = tmp_path / "export.json"
        result = runner.invoke(app, ["export", "--default", "--output", str(target)])
        assert result.exit_code == 0
        assert VideoConfig.from_json(target).topic == "Redis Distributed Lock"

    def test_export_from_yaml(self, tmp_path, redis_video):
        source = redis_video.to_yaml(tmp_path / "video.yaml")
        target = tmp_path / "video.json"
        result = runner.invoke(app, ["export", "-c", str(source), "-o", str(target)])
        assert result.exit_code == 0
        assert VideoConfig.from_json(target) == redis_video


class TestGenerate:
    def test_writes_config(self, fake_agent, tmp_path):
        target = tmp_path / "video.json"
        result = runner.invoke(
            app, ["generate", "Redis locks", "-d", "30", "-a", "9:16", "-o", str(target)]
        )
        assert result.exit_code == 0, result.output
        video = VideoConfig.from_json(target)
        assert video.topic == "Redis locks"
        assert video.music_mood == "Ambient"
        assert (video.width, video.height) == (1080, 1920)

    def test_failure_keeps_previous_config(self, fake_agent, tmp_path):
        target = tmp_path / "video.yaml"
        target.write_text("previous: true\n")
        fake_agent.error = GenerationError("network down")
        result = runner.invoke(app, ["generate", "Redis locks", "-o", str(target)])
        assert result.exit_code == 1
        assert "network down" in result.output
        assert target.read_text() == "previous: true\n"

    def test_requires_api_key(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "anthropic_api_key", "")
        result = runner.invoke(app, ["generate", "x", "-o", str(tmp_path / "v.yaml")])
        assert result.exit_code == 1
        assert "ANTHROPIC_API_KEY" in result.output
