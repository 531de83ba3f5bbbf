"""Scene data model."""

import logging
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError, model_validator

from .base import HexColor, SchemaModel
from .diagram import ActionType, DiagramAction, DiagramConfig, DiagramEdge, DiagramNode

logger = logging.getLogger(__name__)

_ACTION_TYPES = {member.value for member in ActionType}

M = TypeVar("M", bound=BaseModel)


class SceneType(str, Enum):
    """Layout variant of a scene."""
    INTRO = "intro"
    BULLET_POINT = "bullet_point"
    QUOTE = "quote"
    OUTRO = "outro"
    TECH_DIAGRAM = "tech_diagram"


def _diagram_items(raw: Any, key: str) -> list:
    items = raw.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, (dict, BaseModel))]


def _action_type(action: Any) -> Any:
    kind = action.type if isinstance(action, BaseModel) else action.get("type")
    return kind.value if isinstance(kind, Enum) else kind


def _validate_items(raw: Any, key: str, model: Type[M]) -> List[M]:
    """Validate each item of ``raw[key]`` on its own, dropping invalid ones."""
    valid = []
    for item in _diagram_items(raw, key):
        if isinstance(item, model):
            valid.append(item)
            continue
        try:
            valid.append(model.model_validate(item))
        except ValidationError as e:
            logger.debug(f"Dropping invalid diagram {key[:-1]}: {e.error_count()} error(s)")
    return valid


def _normalize_diagram(diagram: dict) -> DiagramConfig:
    nodes = []
    seen = set()
    for node in _validate_items(diagram, "nodes", DiagramNode):
        if node.id in seen:
            logger.debug(f"Dropping duplicate node id {node.id!r}")
            continue
        seen.add(node.id)
        nodes.append(node)

    actions = []
    for action in _diagram_items(diagram, "actions"):
        if _action_type(action) not in _ACTION_TYPES:
            logger.debug(f"Dropping action of unknown type {_action_type(action)!r}")
            continue
        actions.append(action)

    try:
        return DiagramConfig(
            nodes=nodes,
            edges=_validate_items(diagram, "edges", DiagramEdge),
            actions=_validate_items({"actions": actions}, "actions", DiagramAction),
        )
    except ValidationError:
        logger.debug("Diagram payload failed validation, using an empty diagram")
        return DiagramConfig()


def normalize_scene(raw: Any) -> Any:
    """Fill defaults on a raw scene mapping before validation.

    A ``tech_diagram`` scene whose diagram payload is missing or not a
    mapping is downgraded to ``bullet_point``. Inside a diagram payload,
    missing arrays become empty and nodes, edges and actions that fail
    validation are dropped one by one, as are actions of unknown type and
    nodes repeating an earlier id. Anything that is not a mapping is
    returned untouched.
    """
    if not isinstance(raw, dict):
        return raw

    scene = dict(raw)
    key = "diagram_config" if "diagram_config" in scene else "diagramConfig"
    diagram = scene.get(key)

    if scene.get("type") == SceneType.TECH_DIAGRAM.value:
        if isinstance(diagram, DiagramConfig):
            return scene
        if not isinstance(diagram, dict):
            logger.debug(
                f"Scene {scene.get('title')!r} has no diagram payload, "
                "downgrading to bullet_point"
            )
            scene["type"] = SceneType.BULLET_POINT.value
            scene.pop(key, None)
            return scene

        scene[key] = _normalize_diagram(diagram)

    return scene


class SceneData(SchemaModel):
    """A time-boxed segment of the video with a fixed layout variant."""

    type: SceneType = Field(..., description="Layout variant")
    title: str = Field(default="", description="Very short title")
    subtitle: str = Field(default="", description="Concise subtitle")
    background_color: HexColor = Field(default="#0f172a", description="Background color")
    text_color: HexColor = Field(default="#e2e8f0", description="Text color")
    duration_in_frames: int = Field(..., gt=0, description="Scene length in frames")
    diagram_config: Optional[DiagramConfig] = Field(
        None, description="Diagram payload for tech_diagram scenes"
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        return normalize_scene(data)

    @property
    def is_diagram(self) -> bool:
        """Return True if this scene renders through the diagram evaluator."""
        return self.type is SceneType.TECH_DIAGRAM

    @property
    def diagram(self) -> DiagramConfig:
        """Return the diagram payload, or an empty diagram if there is none."""
        return self.diagram_config or DiagramConfig()
