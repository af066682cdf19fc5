"""design_bridge/scene/serializer.py

Inverse of the builder: host nodes -> scene nodes, used when the plugin saves
a selection.  Serialization is lossy relative to what the builder can produce:
only the vertical offset of a drop shadow survives, and paints other than the
first are ignored.
"""

import logging
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from design_bridge.exceptions import SceneInputError, UnsupportedNodeTypeError
from design_bridge.host import (
    DEFAULT_FONT,
    BaseHostNode,
    EllipseNode,
    FrameNode,
    GroupNode,
    RectangleNode,
    TextNode,
)
from design_bridge.scene import models

logger = logging.getLogger(__name__)

DEFAULT_COLOR = models.Color(r=0.0, g=0.0, b=0.0, a=1.0)


def _first_color(node: Any) -> models.Color:
    """Colour of the first solid paint, black when the node has none."""
    fills = getattr(node, "fills", None) or []
    for paint in fills[:1]:
        if getattr(paint, "type", None) == "SOLID":
            return models.Color(r=paint.color.r, g=paint.color.g, b=paint.color.b, a=paint.opacity)
    return DEFAULT_COLOR


def _shadow_offset(node: Any) -> Optional[float]:
    for effect in getattr(node, "effects", None) or []:
        if effect.type == "DROP_SHADOW":
            return effect.offset[1]
    return None


def _position(node: BaseHostNode) -> models.Position:
    return models.Position(x=node.x, y=node.y)


def _serialize_rectangle(node: RectangleNode) -> models.RectangleNode:
    return models.RectangleNode(
        name=node.name,
        node=models.RectangleSpec(
            position=_position(node),
            color=_first_color(node),
            width=node.width,
            height=node.height,
            strokeWeight=node.stroke_weight,
            cornerRadius=node.corner_radius,
            dropShadow=_shadow_offset(node),
        ),
    )


def _serialize_ellipse(node: EllipseNode) -> models.EllipseNode:
    return models.EllipseNode(
        name=node.name,
        node=models.EllipseSpec(
            position=_position(node),
            color=_first_color(node),
            width=node.width,
            height=node.height,
        ),
    )


def _serialize_text(node: TextNode) -> models.TextNode:
    font = node.font_name
    return models.TextNode(
        name=node.name,
        text=models.TextSpec(
            content=node.characters,
            fontSize=node.font_size,
            color=_first_color(node),
            fontName=None if font == DEFAULT_FONT else models.FontName(family=font.family, style=font.style),
            position=_position(node),
        ),
    )


def _serialize_group(node: GroupNode) -> models.GroupNode:
    return models.GroupNode(name=node.name, children=serialize_nodes(node.children))


def _serialize_frame(node: FrameNode) -> models.FrameNode:
    return models.FrameNode(
        name=node.name,
        node=models.FrameSpec(
            position=_position(node),
            width=node.width,
            height=node.height,
            color=_first_color(node),
        ),
        children=serialize_nodes(node.children),
    )


_SERIALIZERS = {
    RectangleNode: _serialize_rectangle,
    EllipseNode: _serialize_ellipse,
    TextNode: _serialize_text,
    GroupNode: _serialize_group,
    FrameNode: _serialize_frame,
}


def serialize_node(node: BaseHostNode):
    """Return the scene node describing *node*.

    Raises:
        UnsupportedNodeTypeError: for host node types with no scene counterpart;
            the error propagates through every enclosing group or frame.
        SceneInputError: the host node holds values the scene model rejects
            (zero size, a group left without children).
    """
    serializer = _SERIALIZERS.get(type(node))
    if serializer is None:
        raise UnsupportedNodeTypeError(getattr(node, "type", type(node).__name__))
    try:
        return serializer(node)
    except ValidationError as e:
        raise SceneInputError(f"Cannot serialize {node.type} {node.name!r}: {e}") from e


def serialize_nodes(nodes: Sequence[BaseHostNode]) -> List[Any]:
    """Serialize *nodes* in order."""
    scene = [serialize_node(node) for node in nodes]
    logger.debug(f"Serialized {len(scene)} node(s)")
    return scene
