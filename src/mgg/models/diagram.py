"""Diagram data models: nodes, edges and timed actions."""

import logging
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from .base import HexColor, SchemaModel

logger = logging.getLogger(__name__)


class NodeType(str, Enum):
    """Icon variant of a diagram node."""
    DATABASE = "database"
    SERVER = "server"
    CLIENT = "client"
    CODE = "code"
    LOCK = "lock"
    QUEUE = "queue"
    CLOUD = "cloud"
    FIREWALL = "firewall"
    GENERIC = "generic"


class ActionType(str, Enum):
    """Kind of timed effect a diagram action produces."""
    PACKET = "packet"
    HIGHLIGHT = "highlight"
    PULSE = "pulse"
    SHOW_LABEL = "show_label"


class DiagramNode(SchemaModel):
    """A vertex of the diagram, placed in percentage coordinates."""

    id: str = Field(..., min_length=1, description="Unique node id within the diagram")
    type: NodeType = Field(default=NodeType.GENERIC, description="Icon variant")
    label: str = Field(default="", description="Caption under the icon")
    x: float = Field(..., description="X position in percent (0-100, 50 is center)")
    y: float = Field(..., description="Y position in percent (0-100, 50 is center)")
    color: Optional[HexColor] = Field(None, description="Color override")

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type_is_generic(cls, value):
        if isinstance(value, NodeType):
            return value
        try:
            return NodeType(str(value).lower())
        except ValueError:
            logger.debug(f"Unknown node type {value!r}, using generic icon")
            return NodeType.GENERIC

    @field_validator("x", "y")
    @classmethod
    def _clamp_percent(cls, value: float) -> float:
        return min(max(value, 0.0), 100.0)


class DiagramEdge(SchemaModel):
    """A connection between two nodes, referenced by id."""

    from_id: str = Field(..., description="Source node id")
    to_id: str = Field(..., description="Target node id")
    label: Optional[str] = Field(None, description="Text drawn at the edge midpoint")
    color: Optional[HexColor] = Field(None, description="Line color override")


class DiagramAction(SchemaModel):
    """A timed effect scoped to ``[start_delay, start_delay + duration)``."""

    type: ActionType = Field(..., description="Effect kind")
    start_delay: int = Field(..., ge=0, description="Frame offset from scene start")
    duration: int = Field(..., gt=0, description="Length of the effect window in frames")
    from_id: Optional[str] = Field(None, description="Packet source node id")
    to_id: Optional[str] = Field(None, description="Packet destination node id")
    target_id: Optional[str] = Field(None, description="Node affected by highlight, pulse or label")
    label: Optional[str] = Field(None, description="Packet or popup text")
    color: Optional[HexColor] = Field(None, description="Effect color")

    @property
    def end_frame(self) -> int:
        """Return the first frame after the action window."""
        return self.start_delay + self.duration


class DiagramConfig(SchemaModel):
    """Nodes plus the edges and actions that reference them by id."""

    nodes: List[DiagramNode] = Field(default_factory=list)
    edges: List[DiagramEdge] = Field(default_factory=list)
    actions: List[DiagramAction] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_node_ids(self) -> "DiagramConfig":
        seen: set[str] = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f"Duplicate node id: {node.id}")
            seen.add(node.id)
        return self

    def node_index(self) -> dict[str, DiagramNode]:
        """Return a lookup of nodes by id."""
        return {node.id: node for node in self.nodes}
