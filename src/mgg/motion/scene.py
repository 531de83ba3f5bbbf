"""Scene state evaluator."""

from typing import Dict

from ..models import (
    Canvas,
    DiagramSceneState,
    RingDecoration,
    SceneData,
    SceneState,
    SceneType,
    StandardSceneState,
)
from .diagram import evaluate_diagram
from .interpolate import clamp, interpolate, lerp
from .spring import CRITICALLY_DAMPED, spring
from .themes import TECH, DiagramTheme

# Frames spent fading in at the start and out at the end of a scene.
FADE_FRAMES = 10
SLIDE_DISTANCE = 100.0
SUBTITLE_FONT_SIZE = 32

TITLE_FONT_SIZES: Dict[SceneType, int] = {
    SceneType.INTRO: 80,
    SceneType.QUOTE: 50,
}
DEFAULT_TITLE_FONT_SIZE = 70


def scene_opacity(local_frame: int, duration: int) -> float:
    """Trapezoid fade: up over the first frames, down over the last ones.

    Scenes shorter than two fade lengths split their duration evenly
    between the fade in and the fade out.
    """
    fade = min(FADE_FRAMES, duration / 2)
    if fade <= 0:
        return 1.0
    if fade * 2 == duration:
        points = (0, fade, duration)
        values = (0.0, 1.0, 0.0)
    else:
        points = (0, fade, duration - fade, duration)
        values = (0.0, 1.0, 1.0, 0.0)
    return interpolate(local_frame, points, values)


def _evaluate_standard(scene: SceneData, local_frame: int, canvas: Canvas) -> StandardSceneState:
    entrance = spring(local_frame, canvas.fps, CRITICALLY_DAMPED)

    ring = None
    if scene.type is SceneType.INTRO:
        ring = RingDecoration(
            diameter=canvas.width * 1.5,
            scale=entrance,
            opacity=0.1,
            border_width=4,
            color=scene.text_color,
        )

    return StandardSceneState(
        scene_type=scene.type,
        title=scene.title,
        subtitle=scene.subtitle,
        background_color=scene.background_color,
        text_color=scene.text_color,
        opacity=scene_opacity(local_frame, scene.duration_in_frames),
        translate_y=lerp(entrance, (SLIDE_DISTANCE, 0.0)),
        title_font_size=TITLE_FONT_SIZES.get(scene.type, DEFAULT_TITLE_FONT_SIZE),
        subtitle_font_size=SUBTITLE_FONT_SIZE,
        ring=ring,
        quote_glyphs=scene.type is SceneType.QUOTE,
        progress=clamp(local_frame / scene.duration_in_frames),
    )


def _evaluate_diagram_scene(
    scene: SceneData, local_frame: int, canvas: Canvas, theme: DiagramTheme
) -> DiagramSceneState:
    frame = evaluate_diagram(
        scene.diagram, local_frame, canvas, theme=theme, text_color=scene.text_color
    )
    return DiagramSceneState(
        title=scene.title,
        subtitle=scene.subtitle,
        background_color=scene.background_color,
        text_color=scene.text_color,
        theme=theme.name,
        nodes=frame.nodes,
        edges=frame.edges,
        packets=frame.packets,
        labels=frame.labels,
    )


def evaluate_scene(
    scene: SceneData,
    local_frame: int,
    canvas: Canvas,
    theme: DiagramTheme = TECH,
) -> SceneState:
    """Evaluate the visual state of one scene at a local frame.

    Tech diagram scenes go through the diagram evaluator; every other
    variant uses the standard fade-and-slide layout.
    """
    if scene.is_diagram:
        return _evaluate_diagram_scene(scene, local_frame, canvas, theme)
    return _evaluate_standard(scene, local_frame, canvas)
