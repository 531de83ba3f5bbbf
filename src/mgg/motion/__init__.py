"""Frame-indexed animation engine."""

from .spring import (
    CRITICALLY_DAMPED,
    SpringConfig,
    spring,
)
from .interpolate import (
    clamp,
    clamp_progress,
    interpolate,
    lerp,
    lerp_point,
    node_anchor,
    to_pixels,
)
from .timeline import (
    TimelinePosition,
    locate,
    scene_offsets,
    total_frames,
)
from .themes import (
    NEON,
    TECH,
    THEMES,
    DiagramTheme,
    get_theme,
    icon_for,
    register_theme,
)
from .diagram import (
    ActionPhase,
    DiagramFrame,
    action_phase,
    evaluate_diagram,
)
from .scene import (
    evaluate_scene,
    scene_opacity,
)
from .composition import render_frame

__all__ = [
    # Spring
    "CRITICALLY_DAMPED",
    "SpringConfig",
    "spring",
    # Interpolation
    "clamp",
    "clamp_progress",
    "interpolate",
    "lerp",
    "lerp_point",
    "node_anchor",
    "to_pixels",
    # Timeline
    "TimelinePosition",
    "locate",
    "scene_offsets",
    "total_frames",
    # Themes
    "NEON",
    "TECH",
    "THEMES",
    "DiagramTheme",
    "get_theme",
    "icon_for",
    "register_theme",
    # Diagram
    "ActionPhase",
    "DiagramFrame",
    "action_phase",
    "evaluate_diagram",
    # Scene
    "evaluate_scene",
    "scene_opacity",
    # Composition
    "render_frame",
]
