"""Configuration management."""

import logging
import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}, not an integer; using {default}")
        return default
    if parsed <= 0:
        logger.warning(f"Ignoring {name}={value!r}, must be positive; using {default}")
        return default
    return parsed


class Config(BaseModel):
    """Application configuration."""

    # API Keys
    anthropic_api_key: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""),
        description="Anthropic API key"
    )

    # Paths
    workspace: Path = Field(
        default_factory=lambda: Path(os.getenv("MGG_WORKSPACE", ".")),
        description="Workspace directory"
    )

    # Model settings
    default_model: str = Field(
        default_factory=lambda: os.getenv("MGG_MODEL", "claude-sonnet-4-20250514"),
        description="Default Claude model"
    )

    # Render settings
    default_fps: int = Field(
        default_factory=lambda: _env_int("MGG_FPS", 30),
        gt=0,
        description="Frame rate for generated videos"
    )

    def validate_required(self) -> None:
        """Validate that required credentials are set."""
        if not self.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY not set")


# Global config instance
config = Config()
