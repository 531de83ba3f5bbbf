"""Script agent: turns a topic into an ordered list of scenes."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from ..errors import ScriptParseError
from ..models import AspectRatio, GeneratedScript, VideoConfig
from .base import BaseAgent, extract_json

logger = logging.getLogger(__name__)

# Load prompt template
PROMPT_TEMPLATE_PATH = Path(__file__).parent.parent.parent.parent / "templates" / "prompts" / "script.txt"

# Average seconds of screen time per scene.
SECONDS_PER_SCENE = 5


def _load_system_prompt() -> str:
    """Load the system prompt from template file."""
    if PROMPT_TEMPLATE_PATH.exists():
        return PROMPT_TEMPLATE_PATH.read_text()
    # Fallback inline prompt if template not found
    return """You are a professional motion graphics director specializing in technical explainers.
Output valid JSON only, with no additional text or markdown formatting.
The JSON must be an object with a "suggestedMusicMood" string and a "scenes" array.
Each scene has: title, subtitle, backgroundColor (#RRGGBB), textColor (#RRGGBB),
durationInFrames (integer, 60-150 at 30fps) and type, one of
intro, bullet_point, quote, outro, tech_diagram.
A tech_diagram scene also has diagramConfig with nodes, edges and actions.
Nodes: id, type (database, server, client, code, lock, queue, cloud, firewall),
label, x and y in percent (0-100, 50 is center), optional color.
Edges: fromId, toId, optional label and color.
Actions: type (packet, highlight, pulse, show_label), startDelay and duration in frames,
fromId/toId for packet, targetId for highlight, pulse and show_label,
optional label and color."""


@dataclass
class ScriptInput:
    """Input data for the script agent."""

    topic: str
    duration_seconds: int = 15
    aspect_ratio: AspectRatio = AspectRatio.SQUARE
    fps: int = 30

    @property
    def target_scenes(self) -> int:
        """Return the suggested number of scenes for the duration."""
        return max(3, self.duration_seconds // SECONDS_PER_SCENE)


class ScriptAgent(BaseAgent[ScriptInput, GeneratedScript]):
    """Agent for generating an explainer script from a topic.

    Produces concise scenes in a dark technical style, using animated
    tech diagrams for anything architectural or flow-based.
    """

    @property
    def name(self) -> str:
        """Return the agent's name."""
        return "ScriptAgent"

    @property
    def system_prompt(self) -> str:
        """Return the system prompt for script generation."""
        return _load_system_prompt()

    def run(self, input_data: ScriptInput) -> GeneratedScript:
        """Generate a script for the input topic.

        Raises:
            GenerationError: If the request to Claude fails.
            ScriptParseError: If the response is not a valid script.
        """
        self._logger.info(
            f"Generating script for: '{input_data.topic}' "
            f"(duration: {input_data.duration_seconds}s)"
        )

        response = self._create_message(
            prompt=self._build_prompt(input_data),
            temperature=0.7,
        )
        script = self._parse_response(response)

        frames = sum(scene.duration_in_frames for scene in script.scenes)
        self._logger.info(
            f"Generated {len(script.scenes)} scenes "
            f"({frames / input_data.fps:.1f}s of {input_data.duration_seconds}s target)"
        )
        return script

    def _build_prompt(self, input_data: ScriptInput) -> str:
        """Build the user prompt for script generation."""
        return "\n".join([
            f'Create a structured video script for a video about: "{input_data.topic}".',
            "",
            "CONSTRAINTS:",
            f"1. Total Duration Target: ~{input_data.duration_seconds} seconds "
            f"({input_data.fps} frames per second).",
            f"2. Scene Count Target: ~{input_data.target_scenes} scenes.",
            "3. STYLE: Minimalist, Technical, Cyberpunk.",
            "4. TEXT: EXTREMELY CONCISE. No fluff. No long sentences. Use keywords.",
            '   - BAD: "In this scene we will explore how the database connects to the server."',
            '   - GOOD: "Database Connection" / "Handshake Protocol"',
            "",
            "CRITICAL: For technical explanations (how it works, architecture, flow), "
            "you MUST use the 'tech_diagram' scene type.",
            "",
            "When defining a 'tech_diagram':",
            "1. Define 'nodes' (Servers, Databases, Users) with x/y coordinates (0-100 scale). 50,50 is center.",
            "2. Define 'edges' connecting them.",
            "3. Define 'actions' to animate the flow.",
            "",
            f"The canvas aspect ratio is {input_data.aspect_ratio.value}.",
            "Ensure the color palette is modern (dark mode technical aesthetic).",
        ])

    def _parse_response(self, response: str) -> GeneratedScript:
        """Parse Claude's response into a validated script.

        Raises:
            ScriptParseError: If the response cannot be parsed or validated.
        """
        json_str = extract_json(response)

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            self._logger.error(f"Failed to parse JSON: {e}")
            self._logger.debug(f"Raw response: {response}")
            raise ScriptParseError(f"Invalid JSON in response: {e}") from e

        # A bare array is taken as the scene list
        if isinstance(data, list):
            data = {"scenes": data}
        if not isinstance(data, dict) or not isinstance(data.get("scenes"), list):
            raise ScriptParseError("Response does not contain a scenes array")

        try:
            script = GeneratedScript.model_validate(data)
        except ValidationError as e:
            self._logger.debug(f"Raw response: {response}")
            raise ScriptParseError(f"Response does not match the script schema: {e}") from e

        if not script.scenes:
            raise ScriptParseError("Response contains no scenes")
        return script


def build_video_config(script: GeneratedScript, input_data: ScriptInput) -> VideoConfig:
    """Assemble a complete video configuration from a generated script."""
    width, height = AspectRatio(input_data.aspect_ratio).dimensions
    return VideoConfig(
        topic=input_data.topic,
        music_mood=script.suggested_music_mood,
        scenes=list(script.scenes),
        width=width,
        height=height,
        fps=input_data.fps,
    )
