"""Scene description model plus the builder/serializer pair that maps it onto host nodes."""

from .models import (
    Color,
    EllipseNode,
    FontName,
    FrameNode,
    GroupNode,
    Node,
    Position,
    RectangleNode,
    Scene,
    TextNode,
    dump_scene,
    parse_scene,
    validate_node,
    validate_scene,
)
from .builder import build_node, build_nodes, build_scene
from .serializer import serialize_node, serialize_nodes

__all__ = [
    "Color",
    "EllipseNode",
    "FontName",
    "FrameNode",
    "GroupNode",
    "Node",
    "Position",
    "RectangleNode",
    "Scene",
    "TextNode",
    "build_node",
    "build_nodes",
    "build_scene",
    "dump_scene",
    "parse_scene",
    "serialize_node",
    "serialize_nodes",
    "validate_node",
    "validate_scene",
]
