"""Render description models produced by the frame evaluators.

These are the output side of the engine: one ``FrameDescription`` per
requested frame, consumed by whatever host draws pixels.
"""

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import Field

from .base import SchemaModel
from .diagram import NodeType
from .scene import SceneType


class Point(SchemaModel):
    """An absolute pixel position on the canvas."""

    x: float
    y: float


class RingDecoration(SchemaModel):
    """Decorative ring drawn behind intro titles."""

    diameter: float
    scale: float
    opacity: float
    border_width: int
    color: str


class StandardSceneState(SchemaModel):
    """Layout state of an intro, bullet point, quote or outro scene."""

    kind: Literal["standard"] = "standard"
    scene_type: SceneType
    title: str
    subtitle: str
    background_color: str
    text_color: str
    opacity: float
    translate_y: float
    title_font_size: int
    subtitle_font_size: int
    ring: Optional[RingDecoration] = None
    quote_glyphs: bool = False
    progress: float = Field(..., description="Progress bar fill, 0 to 1")


class NodeIcon(SchemaModel):
    """Vector icon drawn inside a node card (40x40 view box)."""

    paths: Tuple[str, ...] = ()
    filled_paths: Tuple[str, ...] = ()
    glyph: Optional[str] = None
    round: bool = False


class NodeState(SchemaModel):
    """Per-frame state of one diagram node."""

    id: str
    type: NodeType
    label: str
    anchor: Point
    size: float
    scale: float
    color: str
    icon: NodeIcon
    highlighted: bool = False
    pulse: float = 0.0
    glow_radius: float


class EdgeState(SchemaModel):
    """Per-frame state of one drawable diagram edge."""

    from_id: str
    to_id: str
    start: Point
    end: Point
    opacity: float
    color: str
    dashed: bool
    label: Optional[str] = None
    label_anchor: Optional[Point] = None


class PacketEffect(SchemaModel):
    """A labelled packet travelling between two nodes."""

    action_index: int
    from_id: str
    to_id: str
    position: Point
    progress: float
    label: str
    color: str


class LabelEffect(SchemaModel):
    """A popup label anchored next to a node."""

    action_index: int
    target_id: str
    anchor: Point
    scale: float
    opacity: float
    text: str
    color: str


class DiagramSceneState(SchemaModel):
    """Per-frame state of a tech diagram scene."""

    kind: Literal["diagram"] = "diagram"
    title: str
    subtitle: str
    background_color: str
    text_color: str
    theme: str
    nodes: List[NodeState] = Field(default_factory=list)
    edges: List[EdgeState] = Field(default_factory=list)
    packets: List[PacketEffect] = Field(default_factory=list)
    labels: List[LabelEffect] = Field(default_factory=list)


SceneState = Annotated[
    Union[StandardSceneState, DiagramSceneState], Field(discriminator="kind")
]


class FrameDescription(SchemaModel):
    """Everything the host needs to draw one global frame."""

    global_frame: int
    scene_index: Optional[int] = None
    local_frame: Optional[int] = None
    width: int
    height: int
    scene: Optional[SceneState] = None
    message: Optional[str] = None
