"""Interpolation and coordinate mapping helpers."""

from typing import Sequence, Tuple

from ..models import Canvas, DiagramNode, Point


def lerp(progress: float, output_range: Tuple[float, float]) -> float:
    """Map progress in [0, 1] linearly onto ``output_range``.

    Progress outside [0, 1] extrapolates, so a spring that overshoots 1
    overshoots the output as well.
    """
    out_min, out_max = output_range
    return out_min + (out_max - out_min) * progress


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return min(max(value, low), high)


def clamp_progress(elapsed: float, duration: float) -> float:
    """Return ``elapsed / duration`` clamped to [0, 1]."""
    if duration <= 0:
        return 1.0 if elapsed >= 0 else 0.0
    return clamp(elapsed / duration)


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    clamp_output: bool = True,
) -> float:
    """Piecewise-linear mapping of ``value`` through matching ranges.

    Args:
        value: Input value.
        input_range: Strictly increasing breakpoints.
        output_range: Output values at each breakpoint.
        clamp_output: Hold the end values outside the input range instead
            of extrapolating the first and last segments.

    Raises:
        ValueError: If the ranges differ in length, have fewer than two
            points, or the input range is not strictly increasing.
    """
    if len(input_range) != len(output_range):
        raise ValueError("input_range and output_range must have the same length")
    if len(input_range) < 2:
        raise ValueError("interpolate needs at least two breakpoints")
    for left, right in zip(input_range, input_range[1:]):
        if right <= left:
            raise ValueError(f"input_range must be strictly increasing: {list(input_range)}")

    if clamp_output:
        if value <= input_range[0]:
            return float(output_range[0])
        if value >= input_range[-1]:
            return float(output_range[-1])

    # Last segment whose start is at or before value; first segment below the range.
    segment = 0
    for i in range(len(input_range) - 1):
        if value >= input_range[i]:
            segment = i
    x0, x1 = input_range[segment], input_range[segment + 1]
    y0, y1 = output_range[segment], output_range[segment + 1]
    return lerp((value - x0) / (x1 - x0), (y0, y1))


def to_pixels(percent: float, dimension: float) -> float:
    """Convert a percentage coordinate to pixels along one axis."""
    return (percent / 100.0) * dimension


def node_anchor(node: DiagramNode, canvas: Canvas) -> Point:
    """Return the pixel anchor of a node on the canvas.

    Node cards, edge endpoints and packet paths all go through this
    function so they stay aligned.
    """
    return Point(x=to_pixels(node.x, canvas.width), y=to_pixels(node.y, canvas.height))


def lerp_point(start: Point, end: Point, progress: float) -> Point:
    """Linearly interpolate between two points."""
    return Point(
        x=lerp(progress, (start.x, end.x)),
        y=lerp(progress, (start.y, end.y)),
    )
