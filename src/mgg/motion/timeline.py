"""Timeline sequencing: map a global frame to a scene and local frame."""

import logging
from bisect import bisect_right
from itertools import accumulate
from typing import List, NamedTuple, Optional, Sequence

from ..models import SceneData

logger = logging.getLogger(__name__)


class TimelinePosition(NamedTuple):
    """Scene index and frame within that scene."""

    scene_index: int
    local_frame: int


def scene_offsets(scenes: Sequence[SceneData]) -> List[int]:
    """Return the first global frame of each scene.

    Scene ``i`` occupies ``[offsets[i], offsets[i] + duration_i)``.
    """
    return list(accumulate((s.duration_in_frames for s in scenes), initial=0))[:-1]


def total_frames(scenes: Sequence[SceneData]) -> int:
    """Return the length of the timeline in frames."""
    return sum(scene.duration_in_frames for scene in scenes)


def locate(scenes: Sequence[SceneData], global_frame: int) -> Optional[TimelinePosition]:
    """Find the scene showing at ``global_frame``.

    Frames before 0 clamp to the first frame of the first scene and frames
    past the end clamp to the last frame of the last scene.

    Returns:
        The position, or None when there are no scenes.
    """
    if not scenes:
        return None

    end = total_frames(scenes)
    frame = global_frame
    if frame < 0 or frame >= end:
        frame = min(max(frame, 0), end - 1)
        logger.debug(f"Frame {global_frame} outside timeline [0, {end}), clamped to {frame}")

    offsets = scene_offsets(scenes)
    index = bisect_right(offsets, frame) - 1
    return TimelinePosition(index, frame - offsets[index])
