"""Data models for the motion graphics generator."""

from .canvas import AspectRatio, Canvas
from .diagram import (
    ActionType,
    DiagramAction,
    DiagramConfig,
    DiagramEdge,
    DiagramNode,
    NodeType,
)
from .scene import SceneData, SceneType, normalize_scene
from .video import GeneratedScript, VideoConfig
from .render import (
    DiagramSceneState,
    EdgeState,
    FrameDescription,
    LabelEffect,
    NodeIcon,
    NodeState,
    PacketEffect,
    Point,
    RingDecoration,
    SceneState,
    StandardSceneState,
)

__all__ = [
    "AspectRatio",
    "Canvas",
    "ActionType",
    "DiagramAction",
    "DiagramConfig",
    "DiagramEdge",
    "DiagramNode",
    "NodeType",
    "SceneData",
    "SceneType",
    "GeneratedScript",
    "VideoConfig",
    "normalize_scene",
    "DiagramSceneState",
    "EdgeState",
    "FrameDescription",
    "LabelEffect",
    "NodeState",
    "PacketEffect",
    "NodeIcon",
    "Point",
    "RingDecoration",
    "SceneState",
    "StandardSceneState",
]
