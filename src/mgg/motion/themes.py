"""Diagram themes and node icons."""

from dataclasses import dataclass, field
from typing import Optional

from ..models import NodeIcon, NodeType
from .spring import SpringConfig

# Icon paths, drawn in a 40x40 view box.
DB_PATH = "M 0 5 A 20 6 0 1 1 40 5 L 40 30 A 20 6 0 1 1 0 30 Z M 0 5 A 20 6 0 1 0 40 5"
LOCK_BODY_PATH = "M 10 15 H 30 V 30 H 10 Z"
LOCK_SHACKLE_PATH = "M 15 15 V 10 A 5 5 0 1 1 25 10 V 15"
SERVER_PATH = "M 2 2 H 38 V 38 H 2 Z M 5 10 H 35 M 5 20 H 35 M 5 30 H 35"
USER_PATH = "M 20 10 A 8 8 0 1 1 20 26 A 8 8 0 1 1 20 10 M 10 38 Q 20 28 30 38"
QUEUE_PATH = "M 4 12 H 36 V 28 H 4 Z M 12 12 V 28 M 20 12 V 28 M 28 12 V 28"
CLOUD_PATH = "M 12 30 A 7 7 0 0 1 10 16 A 9 9 0 0 1 27 13 A 7 7 0 0 1 30 30 Z"
FIREWALL_PATH = (
    "M 4 8 H 36 V 32 H 4 Z M 4 16 H 36 M 4 24 H 36 "
    "M 14 8 V 16 M 26 8 V 16 M 20 16 V 24 M 14 24 V 32 M 26 24 V 32"
)
GENERIC_PATH = "M 20 8 A 12 12 0 1 1 20 32 A 12 12 0 1 1 20 8"


def icon_for(node_type: NodeType) -> NodeIcon:
    """Return the icon drawn for a node type.

    Every ``NodeType`` member has a branch; anything else gets the generic
    circle.
    """
    if node_type is NodeType.DATABASE:
        return NodeIcon(paths=(DB_PATH,))
    if node_type is NodeType.SERVER:
        return NodeIcon(paths=(SERVER_PATH,))
    if node_type is NodeType.CLIENT:
        return NodeIcon(paths=(USER_PATH,), round=True)
    if node_type is NodeType.CODE:
        return NodeIcon(glyph="</>")
    if node_type is NodeType.LOCK:
        return NodeIcon(paths=(LOCK_SHACKLE_PATH,), filled_paths=(LOCK_BODY_PATH,))
    if node_type is NodeType.QUEUE:
        return NodeIcon(paths=(QUEUE_PATH,))
    if node_type is NodeType.CLOUD:
        return NodeIcon(paths=(CLOUD_PATH,))
    if node_type is NodeType.FIREWALL:
        return NodeIcon(paths=(FIREWALL_PATH,))
    return NodeIcon(paths=(GENERIC_PATH,), round=True)


@dataclass(frozen=True)
class DiagramTheme:
    """Visual and timing parameters of the diagram evaluator."""

    name: str = "tech"
    node_stagger: int = 10
    edge_stagger: int = 5
    node_pop: SpringConfig = field(default_factory=lambda: SpringConfig(stiffness=200, damping=15))
    edge_reveal: SpringConfig = field(default_factory=lambda: SpringConfig(damping=200))
    label_pop: SpringConfig = field(default_factory=lambda: SpringConfig(stiffness=150))
    edge_opacity: float = 0.5
    edges_dashed: bool = True
    highlight_boost: float = 1.2
    pulse_amplitude: float = 0.15
    pulse_frequency: float = 0.3
    idle_glow: float = 10.0
    highlight_glow: float = 30.0
    base_size_ratio: float = 0.06
    edge_label_offset: float = 10.0
    packet_color: str = "#ffffff"
    packet_label: str = "DATA"
    label_color: str = "#10B981"
    label_exit_frames: Optional[int] = 10

    def base_size(self, short_side: float) -> float:
        """Return the node half-size for a canvas whose short side is given."""
        return short_side * self.base_size_ratio


TECH = DiagramTheme()

NEON = DiagramTheme(
    name="neon",
    node_stagger=6,
    edge_stagger=3,
    edge_opacity=0.7,
    edges_dashed=False,
    highlight_boost=1.3,
    idle_glow=20.0,
    highlight_glow=50.0,
    packet_color="#22d3ee",
    label_color="#f472b6",
)

THEMES = {
    "tech": TECH,
    "neon": NEON,
}


def get_theme(name: str) -> DiagramTheme:
    """Get a diagram theme by name.

    Raises:
        ValueError: If the theme is not registered.
    """
    if name not in THEMES:
        raise ValueError(f"Unknown theme: {name}. Available: {list(THEMES.keys())}")
    return THEMES[name]


def register_theme(name: str, theme: DiagramTheme) -> None:
    """Register a custom diagram theme."""
    THEMES[name] = theme
