from .nodes import (
    DEFAULT_FONT,
    RGB,
    RGBA,
    BaseHostNode,
    ContainerNode,
    DropShadowEffect,
    EllipseNode,
    FontSpec,
    FrameNode,
    GroupNode,
    PageNode,
    RectangleNode,
    SolidPaint,
    TextNode,
)
from .runtime import DesignHost

__all__ = [
    "DEFAULT_FONT",
    "RGB",
    "RGBA",
    "BaseHostNode",
    "ContainerNode",
    "DesignHost",
    "DropShadowEffect",
    "EllipseNode",
    "FontSpec",
    "FrameNode",
    "GroupNode",
    "PageNode",
    "RectangleNode",
    "SolidPaint",
    "TextNode",
]
