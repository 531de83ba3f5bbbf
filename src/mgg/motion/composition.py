"""Render entry point: global frame in, frame description out."""

from typing import Optional

from ..models import FrameDescription, VideoConfig
from .scene import evaluate_scene
from .themes import TECH, DiagramTheme
from .timeline import locate

NO_SCENES_MESSAGE = "No Scene Data Available"


def render_frame(
    video: Optional[VideoConfig],
    global_frame: int,
    theme: DiagramTheme = TECH,
) -> FrameDescription:
    """Describe what the video looks like at ``global_frame``.

    The result depends only on the arguments, so frames may be requested
    in any order and any number of times. Out-of-range frames are clamped
    onto the timeline.
    """
    if video is None:
        video = VideoConfig()

    position = locate(video.scenes, global_frame)
    if position is None:
        return FrameDescription(
            global_frame=global_frame,
            width=video.width,
            height=video.height,
            message=NO_SCENES_MESSAGE,
        )

    scene = video.scenes[position.scene_index]
    return FrameDescription(
        global_frame=global_frame,
        scene_index=position.scene_index,
        local_frame=position.local_frame,
        width=video.width,
        height=video.height,
        scene=evaluate_scene(scene, position.local_frame, video.canvas, theme=theme),
    )
