"""
Schema for the external design API's file format (``GET /v1/files/:key``).

One versioned set of models covers every consumer of the format.  Rules:

* ``id``, ``name`` and ``type`` are required on every node, ``children`` on
  container nodes and ``characters`` on text nodes; everything else is optional.
* ``visible`` defaults to ``True`` (the API omits it for visible nodes).
* Colours always carry all four channels, as the API sends them.
* Unknown keys are kept, and node types this schema does not model validate as
  ``GenericNode`` instead of failing the whole document.

Bump ``SCHEMA_VERSION`` whenever a required/optional decision changes.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, ValidationError

from design_bridge.exceptions import SchemaValidationError

SCHEMA_VERSION = 1


class _FileModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Color(_FileModel):
    r: float = Field(..., ge=0, le=1)
    g: float = Field(..., ge=0, le=1)
    b: float = Field(..., ge=0, le=1)
    a: float = Field(..., ge=0, le=1)


class Vector(_FileModel):
    x: float
    y: float


class BoundingBox(_FileModel):
    x: float
    y: float
    width: float
    height: float


class Paint(_FileModel):
    """Solid, gradient or image paint.  Only solid paints are consumed downstream."""
    type: str
    visible: bool = True
    opacity: Optional[float] = Field(default=None, ge=0, le=1)
    color: Optional[Color] = None
    gradientStops: Optional[List[Dict[str, Any]]] = None
    imageRef: Optional[str] = None


class Effect(_FileModel):
    type: str
    visible: bool = True
    radius: Optional[float] = None
    spread: Optional[float] = None
    color: Optional[Color] = None
    offset: Optional[Vector] = None


class TypeStyle(_FileModel):
    fontFamily: Optional[str] = None
    fontPostScriptName: Optional[str] = None
    fontStyle: Optional[str] = None
    fontWeight: Optional[float] = None
    fontSize: Optional[float] = None


class _BaseNode(_FileModel):
    id: str
    name: str
    visible: bool = True
    pluginData: Optional[Dict[str, Any]] = None
    sharedPluginData: Optional[Dict[str, Any]] = None


class _GeometryMixin(_FileModel):
    absoluteBoundingBox: Optional[BoundingBox] = None
    size: Optional[Vector] = None
    fills: List[Paint] = Field(default_factory=list)
    effects: List[Effect] = Field(default_factory=list)
    strokeWeight: Optional[float] = None


class DocumentNode(_BaseNode):
    type: Literal["DOCUMENT"] = "DOCUMENT"
    children: List["FigmaNode"]


class CanvasNode(_BaseNode):
    type: Literal["CANVAS"] = "CANVAS"
    children: List["FigmaNode"]
    backgroundColor: Optional[Color] = None


class FrameNode(_BaseNode, _GeometryMixin):
    type: Literal["FRAME"] = "FRAME"
    children: List["FigmaNode"]
    background: Optional[List[Paint]] = None
    backgroundColor: Optional[Color] = None
    cornerRadius: Optional[float] = None


class GroupNode(_BaseNode, _GeometryMixin):
    type: Literal["GROUP"] = "GROUP"
    children: List["FigmaNode"]


class ComponentNode(_BaseNode, _GeometryMixin):
    type: Literal["COMPONENT"] = "COMPONENT"
    children: List["FigmaNode"]


class InstanceNode(_BaseNode, _GeometryMixin):
    type: Literal["INSTANCE"] = "INSTANCE"
    componentId: str
    children: List["FigmaNode"] = Field(default_factory=list)


class RectangleNode(_BaseNode, _GeometryMixin):
    type: Literal["RECTANGLE"] = "RECTANGLE"
    cornerRadius: Optional[float] = None


class EllipseNode(_BaseNode, _GeometryMixin):
    type: Literal["ELLIPSE"] = "ELLIPSE"


class VectorNode(_BaseNode, _GeometryMixin):
    type: Literal["VECTOR"] = "VECTOR"


class TextNode(_BaseNode, _GeometryMixin):
    type: Literal["TEXT"] = "TEXT"
    characters: str
    style: Optional[TypeStyle] = None


class GenericNode(_BaseNode):
    """Any node type the schema does not model (LINE, STAR, SECTION, …)."""
    type: str
    children: List["FigmaNode"] = Field(default_factory=list)


KNOWN_NODE_TYPES = (
    "DOCUMENT", "CANVAS", "FRAME", "GROUP", "COMPONENT",
    "INSTANCE", "RECTANGLE", "ELLIPSE", "VECTOR", "TEXT",
)


def _node_tag(value: Any) -> str:
    node_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return node_type if node_type in KNOWN_NODE_TYPES else "OTHER"


FigmaNode = Annotated[
    Union[
        Annotated[DocumentNode, Tag("DOCUMENT")],
        Annotated[CanvasNode, Tag("CANVAS")],
        Annotated[FrameNode, Tag("FRAME")],
        Annotated[GroupNode, Tag("GROUP")],
        Annotated[ComponentNode, Tag("COMPONENT")],
        Annotated[InstanceNode, Tag("INSTANCE")],
        Annotated[RectangleNode, Tag("RECTANGLE")],
        Annotated[EllipseNode, Tag("ELLIPSE")],
        Annotated[VectorNode, Tag("VECTOR")],
        Annotated[TextNode, Tag("TEXT")],
        Annotated[GenericNode, Tag("OTHER")],
    ],
    Discriminator(_node_tag),
]

for _model in (DocumentNode, CanvasNode, FrameNode, GroupNode, ComponentNode, InstanceNode, GenericNode):
    _model.model_rebuild()


class FigmaFile(_FileModel):
    name: str
    lastModified: str
    version: str
    document: DocumentNode
    components: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)
    schemaVersion: int = 0


def parse_figma_file(data: Any) -> FigmaFile:
    """Validate a decoded file document.

    Raises:
        SchemaValidationError: when *data* does not match the schema.
    """
    if not isinstance(data, dict):
        raise SchemaValidationError(f"Design file must be a JSON object, got {type(data).__name__}")
    try:
        return FigmaFile.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(f"Invalid design file: {e}") from e
