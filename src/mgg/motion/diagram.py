"""Diagram animation evaluator.

Turns a static diagram plus its timed actions into the state of every node,
edge, packet and popup label at one local frame. Every value is derived from
the frame number alone; there is no state carried from one frame to the next.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..models import (
    ActionType,
    Canvas,
    DiagramAction,
    DiagramConfig,
    DiagramNode,
    EdgeState,
    LabelEffect,
    NodeState,
    PacketEffect,
    Point,
)
from .interpolate import clamp, clamp_progress, interpolate, lerp, lerp_point, node_anchor
from .spring import spring
from .themes import TECH, DiagramTheme, icon_for

logger = logging.getLogger(__name__)

DEFAULT_TEXT_COLOR = "#e2e8f0"


class ActionPhase(str, Enum):
    """Lifecycle of an action relative to the current frame."""
    PENDING = "pending"
    ACTIVE = "active"
    FINISHED = "finished"


def action_phase(action: DiagramAction, frame: int) -> ActionPhase:
    """Return the phase of ``action`` at ``frame``.

    An action is active on ``[start_delay, start_delay + duration)``.
    """
    if frame < action.start_delay:
        return ActionPhase.PENDING
    if frame < action.end_frame:
        return ActionPhase.ACTIVE
    return ActionPhase.FINISHED


@dataclass
class DiagramFrame:
    """Evaluated diagram state for one frame."""

    nodes: List[NodeState] = field(default_factory=list)
    edges: List[EdgeState] = field(default_factory=list)
    packets: List[PacketEffect] = field(default_factory=list)
    labels: List[LabelEffect] = field(default_factory=list)


def _node_state(
    index: int,
    node: DiagramNode,
    actions: List[DiagramAction],
    frame: int,
    canvas: Canvas,
    theme: DiagramTheme,
    text_color: str,
) -> NodeState:
    pop = spring(frame - index * theme.node_stagger, canvas.fps, theme.node_pop)
    scale = lerp(pop, (0.0, 1.0))

    emphasis = 1.0
    highlighted = False
    pulse = 0.0
    glow = theme.idle_glow
    for action in actions:
        if action.target_id != node.id or action_phase(action, frame) is not ActionPhase.ACTIVE:
            continue
        if action.type is ActionType.HIGHLIGHT:
            highlighted = True
            emphasis *= theme.highlight_boost
        elif action.type is ActionType.PULSE:
            pulse = math.sin(theme.pulse_frequency * (frame - action.start_delay))
            emphasis *= 1.0 + theme.pulse_amplitude * pulse
            glow = max(glow, lerp(abs(pulse), (theme.idle_glow, theme.highlight_glow)))
    if highlighted:
        glow = theme.highlight_glow

    return NodeState(
        id=node.id,
        type=node.type,
        label=node.label,
        anchor=node_anchor(node, canvas),
        size=theme.base_size(canvas.short_side) * 2,
        scale=scale * emphasis,
        color=node.color or text_color,
        icon=icon_for(node.type),
        highlighted=highlighted,
        pulse=pulse,
        glow_radius=glow,
    )


def _edge_states(
    diagram: DiagramConfig,
    nodes: Dict[str, DiagramNode],
    frame: int,
    canvas: Canvas,
    theme: DiagramTheme,
    text_color: str,
) -> List[EdgeState]:
    states: List[EdgeState] = []
    for index, edge in enumerate(diagram.edges):
        source = nodes.get(edge.from_id)
        target = nodes.get(edge.to_id)
        if source is None or target is None:
            logger.debug(f"Skipping edge {edge.from_id}->{edge.to_id}: unknown node")
            continue

        start = node_anchor(source, canvas)
        end = node_anchor(target, canvas)
        reveal = spring(frame - index * theme.edge_stagger, canvas.fps, theme.edge_reveal)
        opacity = clamp(lerp(reveal, (0.0, theme.edge_opacity)), 0.0, theme.edge_opacity)

        label_anchor = None
        if edge.label:
            mid = lerp_point(start, end, 0.5)
            label_anchor = Point(x=mid.x, y=mid.y - theme.edge_label_offset)

        states.append(EdgeState(
            from_id=edge.from_id,
            to_id=edge.to_id,
            start=start,
            end=end,
            opacity=opacity,
            color=edge.color or text_color,
            dashed=theme.edges_dashed,
            label=edge.label,
            label_anchor=label_anchor,
        ))
    return states


def _packet(
    index: int,
    action: DiagramAction,
    nodes: Dict[str, DiagramNode],
    frame: int,
    canvas: Canvas,
    theme: DiagramTheme,
) -> Optional[PacketEffect]:
    # Shown through its arrival frame, then removed without fading.
    if frame < action.start_delay or frame > action.end_frame:
        return None
    source = nodes.get(action.from_id) if action.from_id else None
    target = nodes.get(action.to_id) if action.to_id else None
    if source is None or target is None:
        return None

    progress = clamp_progress(frame - action.start_delay, action.duration)
    return PacketEffect(
        action_index=index,
        from_id=source.id,
        to_id=target.id,
        position=lerp_point(node_anchor(source, canvas), node_anchor(target, canvas), progress),
        progress=progress,
        label=action.label or theme.packet_label,
        color=action.color or theme.packet_color,
    )


def _label(
    index: int,
    action: DiagramAction,
    nodes: Dict[str, DiagramNode],
    frame: int,
    canvas: Canvas,
    theme: DiagramTheme,
) -> Optional[LabelEffect]:
    if frame < action.start_delay:
        return None
    target = nodes.get(action.target_id) if action.target_id else None
    if target is None:
        return None

    opacity = 1.0
    if theme.label_exit_frames is not None:
        exit_end = action.end_frame + theme.label_exit_frames
        if frame >= exit_end:
            return None
        if frame > action.end_frame:
            opacity = interpolate(frame, (action.end_frame, exit_end), (1.0, 0.0))

    base = theme.base_size(canvas.short_side)
    anchor = node_anchor(target, canvas)
    return LabelEffect(
        action_index=index,
        target_id=target.id,
        anchor=Point(x=anchor.x + base, y=anchor.y - base),
        scale=spring(frame - action.start_delay, canvas.fps, theme.label_pop),
        opacity=opacity,
        text=action.label or "",
        color=action.color or theme.label_color,
    )


def evaluate_diagram(
    diagram: Optional[DiagramConfig],
    local_frame: int,
    canvas: Canvas,
    theme: DiagramTheme = TECH,
    text_color: str = DEFAULT_TEXT_COLOR,
) -> DiagramFrame:
    """Evaluate every node, edge and action effect of a diagram at one frame.

    Args:
        diagram: Diagram to evaluate. None evaluates as an empty diagram.
        local_frame: Frame relative to the start of the scene.
        canvas: Canvas size and frame rate.
        theme: Timing and styling parameters.
        text_color: Fallback color for nodes and edges without an override.

    Returns:
        The evaluated frame. Edges and actions whose node references do not
        resolve are left out.
    """
    if diagram is None:
        diagram = DiagramConfig()
    nodes = diagram.node_index()

    result = DiagramFrame()
    result.nodes = [
        _node_state(i, node, diagram.actions, local_frame, canvas, theme, text_color)
        for i, node in enumerate(diagram.nodes)
    ]
    result.edges = _edge_states(diagram, nodes, local_frame, canvas, theme, text_color)

    for index, action in enumerate(diagram.actions):
        if action.type is ActionType.PACKET:
            packet = _packet(index, action, nodes, local_frame, canvas, theme)
            if packet is not None:
                result.packets.append(packet)
        elif action.type is ActionType.SHOW_LABEL:
            label = _label(index, action, nodes, local_frame, canvas, theme)
            if label is not None:
                result.labels.append(label)

    return result
