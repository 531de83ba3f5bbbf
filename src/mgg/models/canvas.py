"""Canvas and aspect ratio models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AspectRatio(str, Enum):
    """Output aspect ratios offered to the generator."""
    SQUARE = "1:1"
    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"

    @property
    def dimensions(self) -> tuple[int, int]:
        """Return the (width, height) in pixels for this aspect ratio."""
        if self is AspectRatio.LANDSCAPE:
            return 1920, 1080
        if self is AspectRatio.PORTRAIT:
            return 1080, 1920
        return 1080, 1080


class Canvas(BaseModel):
    """Read-only render context passed into every evaluator call."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=1080, gt=0, description="Canvas width in pixels")
    height: int = Field(default=1080, gt=0, description="Canvas height in pixels")
    fps: int = Field(default=30, gt=0, description="Frames per second")

    @classmethod
    def for_aspect_ratio(cls, aspect_ratio: AspectRatio, fps: int = 30) -> "Canvas":
        """Build a canvas sized for the given aspect ratio."""
        width, height = AspectRatio(aspect_ratio).dimensions
        return cls(width=width, height=height, fps=fps)

    @property
    def short_side(self) -> int:
        """Return the smaller of width and height."""
        return min(self.width, self.height)
