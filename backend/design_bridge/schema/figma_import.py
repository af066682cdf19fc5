"""Convert a design-file subtree into scene nodes.

Only the node types the scene model knows survive: rectangles, ellipses, text,
groups and frame-like containers (frames, components, instances).  Documents
and pages flatten into their children; anything else is skipped.
"""

import logging
from typing import Any, List, Optional, Tuple

from design_bridge.schema import figma_file as ff
from design_bridge.scene import models

logger = logging.getLogger(__name__)

# Offset of the coordinate space a node is placed in (its nearest enclosing frame).
Origin = Tuple[float, float]
PAGE_ORIGIN: Origin = (0.0, 0.0)


def _solid_color(paints: List[ff.Paint]) -> Optional[models.Color]:
    for paint in paints:
        if paint.visible and paint.type == "SOLID" and paint.color is not None:
            alpha = paint.color.a * (paint.opacity if paint.opacity is not None else 1.0)
            return models.Color(r=paint.color.r, g=paint.color.g, b=paint.color.b, a=alpha)
    return None


def _shadow_offset(effects: List[ff.Effect]) -> Optional[float]:
    for effect in effects:
        if effect.visible and effect.type == "DROP_SHADOW" and effect.offset is not None:
            return effect.offset.y
    return None


def _box(node: Any) -> Optional[ff.BoundingBox]:
    box = node.absoluteBoundingBox
    if box is None or box.width <= 0 or box.height <= 0:
        logger.debug("Skipping %s '%s': no usable bounding box", node.type, node.name)
        return None
    return box


def _position(box: ff.BoundingBox, origin: Origin) -> models.Position:
    return models.Position(x=box.x - origin[0], y=box.y - origin[1])


def _convert_children(children: List[Any], origin: Origin) -> List[Any]:
    converted: List[Any] = []
    for child in children:
        converted.extend(scene_from_figma(child, origin))
    return converted


def scene_from_figma(node: Any, origin: Origin = PAGE_ORIGIN) -> List[Any]:
    """Return the scene nodes for *node* (zero, one, or a flattened list).

    Positions come from absolute bounding boxes and are made relative to
    *origin*.  Frames start a new coordinate space for their children; groups
    do not, so group children stay relative to the nearest enclosing frame.
    """
    if not node.visible:
        return []

    if isinstance(node, (ff.DocumentNode, ff.CanvasNode)):
        return _convert_children(node.children, origin)

    if isinstance(node, ff.RectangleNode):
        box = _box(node)
        if box is None:
            return []
        return [models.RectangleNode(
            name=node.name,
            node=models.RectangleSpec(
                position=_position(box, origin),
                color=_solid_color(node.fills) or models.Color(r=0, g=0, b=0, a=1),
                width=box.width,
                height=box.height,
                strokeWeight=node.strokeWeight,
                cornerRadius=node.cornerRadius,
                dropShadow=_shadow_offset(node.effects),
            ),
        )]

    if isinstance(node, ff.EllipseNode):
        box = _box(node)
        if box is None:
            return []
        return [models.EllipseNode(
            name=node.name,
            node=models.EllipseSpec(
                position=_position(box, origin),
                color=_solid_color(node.fills) or models.Color(r=0, g=0, b=0, a=1),
                width=box.width,
                height=box.height,
            ),
        )]

    if isinstance(node, ff.TextNode):
        style = node.style or ff.TypeStyle()
        font = None
        if style.fontFamily:
            font = models.FontName(family=style.fontFamily, style=style.fontStyle or "Regular")
        box = node.absoluteBoundingBox
        return [models.TextNode(
            name=node.name,
            text=models.TextSpec(
                content=node.characters,
                fontSize=style.fontSize if style.fontSize and style.fontSize > 0 else None,
                color=_solid_color(node.fills),
                fontName=font,
                position=_position(box, origin) if box else None,
            ),
        )]

    if isinstance(node, ff.GroupNode):
        children = _convert_children(node.children, origin)
        if not children:
            return []
        return [models.GroupNode(name=node.name, children=children)]

    if isinstance(node, (ff.FrameNode, ff.ComponentNode, ff.InstanceNode)):
        box = node.absoluteBoundingBox
        spec = models.FrameSpec(
            position=_position(box, origin) if box else None,
            width=box.width if box and box.width > 0 else None,
            height=box.height if box and box.height > 0 else None,
            color=_solid_color(node.fills),
        )
        inner = (box.x, box.y) if box else origin
        return [models.FrameNode(name=node.name, node=spec, children=_convert_children(node.children, inner))]

    logger.debug("Skipping unsupported design-file node %s (%s)", node.name, node.type)
    return []


def scene_from_file(document: ff.FigmaFile) -> List[Any]:
    """Scene for every visible, convertible node of *document*."""
    return scene_from_figma(document.document)
