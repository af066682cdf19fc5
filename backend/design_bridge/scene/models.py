from __future__ import annotations

"""design_bridge/scene/models.py

Scene description shared by the builder, the serializer, the plugin bridge and
the HTTP endpoints.  A scene is an ordered list of nodes; each node is tagged by
``type`` and carries a payload whose key depends on the tag::

    [
      {"type": "RECTANGLE", "name": "Card", "node": {"position": {...}, "color": {...}, ...}},
      {"type": "TEXT", "name": "Title", "text": {"content": "Hello", "fontSize": 24}},
      {"type": "GROUP", "name": "Row", "children": [...]}
    ]

Field names follow the design tool's camelCase JSON so payloads produced by the
plugin UI validate without translation.
"""

import json
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from design_bridge.exceptions import SceneInputError


class _SceneModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# --------------------------------------------------------------------------- #
# Primitives
# --------------------------------------------------------------------------- #

class Color(_SceneModel):
    """RGB(A) colour with 0-1 float components.  Blue may be omitted (two-component input)."""
    r: float = Field(..., ge=0, le=1)
    g: float = Field(..., ge=0, le=1)
    b: float = Field(default=0.0, ge=0, le=1)
    a: Optional[float] = Field(default=None, ge=0, le=1)


class Position(_SceneModel):
    x: float
    y: float


class FontName(_SceneModel):
    family: str = Field(..., min_length=1)
    style: str = Field(..., min_length=1)


class Paint(_SceneModel):
    color: Color
    opacity: Optional[float] = Field(default=None, ge=0, le=1)


# --------------------------------------------------------------------------- #
# Per-type payloads
# --------------------------------------------------------------------------- #

class RectangleSpec(_SceneModel):
    position: Position
    color: Color
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    strokeWeight: Optional[float] = Field(default=None, ge=0)
    cornerRadius: Optional[float] = Field(default=None, ge=0)
    dropShadow: Optional[float] = None  # vertical offset of the shadow


class EllipseSpec(_SceneModel):
    position: Position
    color: Color
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class TextSpec(_SceneModel):
    content: str
    fontSize: Optional[float] = Field(default=None, gt=0)
    color: Optional[Color] = None
    fontName: Optional[FontName] = None
    position: Optional[Position] = None


class FrameSpec(_SceneModel):
    position: Optional[Position] = None
    width: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    color: Optional[Color] = None


# --------------------------------------------------------------------------- #
# Nodes (discriminated on ``type``)
# --------------------------------------------------------------------------- #

class RectangleNode(_SceneModel):
    type: Literal["RECTANGLE"] = "RECTANGLE"
    name: str
    node: RectangleSpec


class EllipseNode(_SceneModel):
    type: Literal["ELLIPSE"] = "ELLIPSE"
    name: str
    node: EllipseSpec


class TextNode(_SceneModel):
    type: Literal["TEXT"] = "TEXT"
    name: str
    text: TextSpec


class GroupNode(_SceneModel):
    type: Literal["GROUP"] = "GROUP"
    name: str
    children: List["Node"] = Field(..., min_length=1)


class FrameNode(_SceneModel):
    type: Literal["FRAME"] = "FRAME"
    name: str
    node: Optional[FrameSpec] = None
    children: List["Node"] = Field(default_factory=list)


Node = Annotated[
    Union[RectangleNode, EllipseNode, TextNode, GroupNode, FrameNode],
    Field(discriminator="type"),
]
Scene = List[Node]

GroupNode.model_rebuild()
FrameNode.model_rebuild()

_scene_adapter: TypeAdapter[List[Any]] = TypeAdapter(Scene)
_node_adapter: TypeAdapter[Any] = TypeAdapter(Node)


# --------------------------------------------------------------------------- #
# Parsing helpers
# --------------------------------------------------------------------------- #

def validate_scene(data: Any) -> List[Any]:
    """Validate already-decoded JSON data as a scene.

    Raises:
        SceneInputError: when *data* is not a list of valid nodes.
    """
    if not isinstance(data, list):
        raise SceneInputError(f"Scene must be a JSON array of nodes, got {type(data).__name__}")
    try:
        return _scene_adapter.validate_python(data)
    except ValidationError as e:
        raise SceneInputError(f"Invalid scene: {e}") from e


def validate_node(data: Any):
    try:
        return _node_adapter.validate_python(data)
    except ValidationError as e:
        raise SceneInputError(f"Invalid node: {e}") from e


def parse_scene(json_text: str) -> List[Any]:
    """Parse raw JSON text (as typed into the plugin UI) into a validated scene."""
    try:
        data = json.loads(json_text)
    except (TypeError, json.JSONDecodeError) as e:
        raise SceneInputError(f"Scene is not valid JSON: {e}") from e
    return validate_scene(data)


def dump_scene(scene: List[Any]) -> List[dict]:
    """Return JSON-ready data for *scene*; optional fields that are unset are left out."""
    return _scene_adapter.dump_python(scene, mode="json", exclude_none=True)
