"""AI agents for script generation."""

from .base import BaseAgent, extract_json
from .script import ScriptAgent, ScriptInput, build_video_config

__all__ = ["BaseAgent", "ScriptAgent", "ScriptInput", "build_video_config", "extract_json"]
