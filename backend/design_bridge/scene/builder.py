from __future__ import annotations

"""design_bridge/scene/builder.py

Walks a scene description and produces host nodes.

Sibling nodes are built concurrently and joined as a unit: results keep the
scene order, the first failure cancels the siblings still running and every
host node already produced for the failed batch is removed again, so a failed
build never leaves objects behind in the container.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Sequence

from design_bridge.exceptions import UnsupportedNodeTypeError
from design_bridge.host import (
    DEFAULT_FONT,
    RGB,
    RGBA,
    BaseHostNode,
    ContainerNode,
    DesignHost,
    DropShadowEffect,
    FontSpec,
    SolidPaint,
)
from design_bridge.metrics import NODES_BUILT_TOTAL, SCENE_BUILDS_TOTAL
from design_bridge.scene import models

logger = logging.getLogger(__name__)

# Drop shadow parameters are fixed; only the vertical offset comes from the scene.
SHADOW_COLOR = RGBA(0.0, 0.0, 0.0, 0.25)
SHADOW_RADIUS = 4.0
SHADOW_SPREAD = 0.0


# --------------------------------------------------------------------------- #
# Property helpers
# --------------------------------------------------------------------------- #

def _replace_fill(node: Any, color: models.Color) -> None:
    """Recolour the first paint slot and drop any other paints."""
    base = node.fills[0] if node.fills else SolidPaint(color=RGB(0.0, 0.0, 0.0))
    node.fills = [base.with_color(RGB(color.r, color.g, color.b), opacity=color.a)]


def _drop_shadow(offset_y: float) -> DropShadowEffect:
    return DropShadowEffect(
        color=SHADOW_COLOR,
        offset=(0.0, offset_y),
        radius=SHADOW_RADIUS,
        spread=SHADOW_SPREAD,
    )


# --------------------------------------------------------------------------- #
# Per-type builders
# --------------------------------------------------------------------------- #

async def _build_rectangle(host: DesignHost, node: models.RectangleNode) -> BaseHostNode:
    spec = node.node
    rect = host.create_rectangle()
    rect.name = node.name
    rect.x = spec.position.x
    rect.y = spec.position.y
    rect.resize(spec.width, spec.height)
    _replace_fill(rect, spec.color)
    rect.stroke_weight = spec.strokeWeight or 0
    rect.corner_radius = spec.cornerRadius or 0
    if spec.dropShadow:
        rect.effects = [_drop_shadow(spec.dropShadow)]
    return rect


async def _build_ellipse(host: DesignHost, node: models.EllipseNode) -> BaseHostNode:
    spec = node.node
    ellipse = host.create_ellipse()
    ellipse.name = node.name
    ellipse.x = spec.position.x
    ellipse.y = spec.position.y
    ellipse.resize(spec.width, spec.height)
    _replace_fill(ellipse, spec.color)
    return ellipse


async def _build_text(host: DesignHost, node: models.TextNode) -> BaseHostNode:
    spec = node.text
    text = host.create_text()
    text.name = node.name

    # Font must be resolved before size, family/style or content may be set.
    font = FontSpec(spec.fontName.family, spec.fontName.style) if spec.fontName else DEFAULT_FONT
    await host.load_font(font)
    if spec.fontName:
        text.font_name = font

    text.characters = spec.content

    if spec.fontSize:
        text.font_size = spec.fontSize
    if spec.color:
        _replace_fill(text, spec.color)
    if spec.position:
        text.x = spec.position.x
        text.y = spec.position.y
    return text


async def _build_group(host: DesignHost, node: models.GroupNode) -> BaseHostNode:
    children = await build_nodes(host, node.children)
    try:
        group = host.group(children)
    except Exception:
        _discard(children)
        raise
    group.name = node.name
    return group


async def _build_frame(host: DesignHost, node: models.FrameNode) -> BaseHostNode:
    frame = host.create_frame()
    frame.name = node.name
    spec = node.node
    if spec is not None:
        if spec.position:
            frame.x = spec.position.x
            frame.y = spec.position.y
        if spec.width or spec.height:
            frame.resize(spec.width or frame.width, spec.height or frame.height)
        if spec.color:
            _replace_fill(frame, spec.color)

    for child in await build_nodes(host, node.children):
        frame.append_child(child)
    return frame


_BUILDERS: Dict[type, Callable[[DesignHost, Any], Awaitable[BaseHostNode]]] = {
    models.RectangleNode: _build_rectangle,
    models.EllipseNode: _build_ellipse,
    models.TextNode: _build_text,
    models.GroupNode: _build_group,
    models.FrameNode: _build_frame,
}


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #

async def build_node(host: DesignHost, node: Any) -> BaseHostNode:
    """Produce one host node (and its subtree) for a scene node."""
    builder = _BUILDERS.get(type(node))
    if builder is None:
        raise UnsupportedNodeTypeError(getattr(node, "type", type(node).__name__))
    created = await builder(host, node)
    NODES_BUILT_TOTAL.labels(node_type=created.type).inc()
    return created


def _discard(nodes: Sequence[BaseHostNode]) -> None:
    for created in nodes:
        created.remove()


async def build_nodes(host: DesignHost, nodes: Sequence[Any]) -> List[BaseHostNode]:
    """Build sibling nodes concurrently; all succeed or none remain."""
    tasks = [asyncio.ensure_future(build_node(host, node)) for node in nodes]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        _discard([
            task.result()
            for task in tasks
            if task.done() and not task.cancelled() and task.exception() is None
        ])
        raise


async def build_scene(host: DesignHost, scene: Sequence[Any], container: ContainerNode) -> ContainerNode:
    """Build every top-level node of *scene* into *container* and return it.

    A single resulting node is appended directly and moved to the origin; more
    than one are grouped inside the container and the group is moved to the
    origin.  An empty scene leaves the container empty.
    """
    try:
        nodes = await build_nodes(host, scene)
        if len(nodes) > 1:
            try:
                group = host.group(nodes, container)
            except Exception:
                _discard(nodes)
                raise
            group.x = 0
            group.y = 0
        elif nodes:
            single = nodes[0]
            container.append_child(single)
            single.x = 0
            single.y = 0
    except Exception as e:
        SCENE_BUILDS_TOTAL.labels(outcome="failure").inc()
        logger.error(f"Scene build failed for container '{container.name}': {e}")
        raise

    SCENE_BUILDS_TOTAL.labels(outcome="success").inc()
    logger.info(f"Built {len(nodes)} top-level node(s) into '{container.name}'")
    return container
