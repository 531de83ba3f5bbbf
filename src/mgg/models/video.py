"""Video configuration model."""

import re
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import Field, computed_field, model_validator

from .base import SchemaModel
from .canvas import Canvas
from .scene import SceneData

# Keys that restate the scene total; it is always derived instead.
_DERIVED_KEYS = ("totalDurationFrames", "total_duration_frames", "totalDuration")


class VideoConfig(SchemaModel):
    """Complete, immutable description of one generated video."""

    topic: str = Field(default="", description="Topic the video explains")
    music_mood: str = Field(default="", description="Suggested background music mood")
    scenes: List[SceneData] = Field(default_factory=list, description="Ordered scenes")
    width: int = Field(default=1080, gt=0, description="Canvas width in pixels")
    height: int = Field(default=1080, gt=0, description="Canvas height in pixels")
    fps: int = Field(default=30, gt=0, description="Frames per second")

    @model_validator(mode="before")
    @classmethod
    def _accept(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {k: v for k, v in data.items() if k not in _DERIVED_KEYS}

    @computed_field(alias="totalDurationFrames")
    @property
    def total_duration_frames(self) -> int:
        """Total length in frames, always the sum of scene durations."""
        return sum(scene.duration_in_frames for scene in self.scenes)

    @property
    def canvas(self) -> Canvas:
        """Return the render context for this video."""
        return Canvas(width=self.width, height=self.height, fps=self.fps)

    @property
    def duration_seconds(self) -> float:
        """Return the total length in seconds."""
        return self.total_duration_frames / self.fps

    def export_filename(self) -> str:
        """Return the download file name, e.g. ``animation-redis-lock.json``."""
        slug = re.sub(r"\s+", "-", self.topic.strip()).lower() or "untitled"
        return f"animation-{slug}.json"

    def to_dict(self) -> dict:
        """Return the camelCase JSON-compatible mapping of this config."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, path: Path) -> "VideoConfig":
        """Load a config from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())

    def to_json(self, path: Path) -> Path:
        """Export the config verbatim to a JSON file."""
        path = Path(path)
        path.write_text(self.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        return path

    @classmethod
    def from_yaml(cls, path: Path) -> "VideoConfig":
        """Load a config from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: Path) -> Path:
        """Save the config to a YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        return Path(path)

    @classmethod
    def load(cls, path: Path) -> "VideoConfig":
        """Load a config from JSON or YAML depending on the file suffix."""
        path = Path(path)
        if path.suffix.lower() == ".json":
            return cls.from_json(path)
        return cls.from_yaml(path)

    def save(self, path: Path) -> Path:
        """Save a config as JSON or YAML depending on the file suffix."""
        path = Path(path)
        if path.suffix.lower() == ".json":
            return self.to_json(path)
        return self.to_yaml(path)


class GeneratedScript(SchemaModel):
    """Response contract of the script generator."""

    suggested_music_mood: str = Field(default="", description="Music mood for the video")
    scenes: List[SceneData] = Field(..., description="Ordered scenes")
