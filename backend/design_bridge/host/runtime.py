"""design_bridge/host/runtime.py

``DesignHost`` is the in-memory stand-in for the design tool's plugin runtime
(``figma.createRectangle()``, ``figma.group()``, ``figma.loadFontAsync()`` …).
The builder and serializer only ever go through this surface, so a remote host
adapter can replace it without touching scene code.
"""

import asyncio
import itertools
import logging
from typing import Iterable, List, Optional, Sequence, Set

from design_bridge.exceptions import HostContractError
from design_bridge.host.nodes import (
    DEFAULT_FONT,
    BaseHostNode,
    ContainerNode,
    EllipseNode,
    FontSpec,
    FrameNode,
    GroupNode,
    Notification,
    PageNode,
    RectangleNode,
    TextNode,
    Viewport,
)

logger = logging.getLogger(__name__)

# Fonts every fresh document can load.
DEFAULT_AVAILABLE_FONTS: Set[FontSpec] = {
    FontSpec("Inter", "Regular"),
    FontSpec("Inter", "Medium"),
    FontSpec("Inter", "Bold"),
    FontSpec("Roboto", "Regular"),
    FontSpec("Roboto", "Bold"),
}


class DesignHost:
    """Single-document host runtime: one current page, a viewport and a notification log."""

    def __init__(
        self,
        available_fonts: Optional[Iterable[FontSpec]] = None,
        font_load_delay: float = 0.0,
    ) -> None:
        self._ids = itertools.count(1)
        self.available_fonts: Set[FontSpec] = set(available_fonts or DEFAULT_AVAILABLE_FONTS)
        self.loaded_fonts: Set[FontSpec] = set()
        self.font_load_delay = font_load_delay
        self.current_page = PageNode(self._next_id())
        self.viewport = Viewport()
        self.notifications: List[Notification] = []

    def _next_id(self) -> str:
        return f"1:{next(self._ids)}"

    # ------------------------------------------------------------------ #
    # Node factories (every node starts detached)
    # ------------------------------------------------------------------ #

    def create_rectangle(self) -> RectangleNode:
        return RectangleNode(self._next_id())

    def create_ellipse(self) -> EllipseNode:
        return EllipseNode(self._next_id())

    def create_text(self) -> TextNode:
        return TextNode(self._next_id(), "Text", self.loaded_fonts)

    def create_frame(self) -> FrameNode:
        return FrameNode(self._next_id())

    def group(self, nodes: Sequence[BaseHostNode], parent: Optional[ContainerNode] = None) -> GroupNode:
        """Wrap *nodes* in a new group, appended to *parent* when one is given."""
        if not nodes:
            raise HostContractError("Cannot create a group with no children")
        group = GroupNode(self._next_id())
        for node in nodes:
            group.append_child(node)
        group.fit_to_children()
        if parent is not None:
            parent.append_child(group)
        return group

    # ------------------------------------------------------------------ #
    # Fonts
    # ------------------------------------------------------------------ #

    async def load_font(self, font: FontSpec = DEFAULT_FONT) -> None:
        """Resolve *font* so it can be applied to text nodes."""
        await asyncio.sleep(self.font_load_delay)
        if font not in self.available_fonts:
            raise HostContractError(f"Font {font.family} {font.style} is not available")
        self.loaded_fonts.add(font)
        logger.debug("Loaded font %s %s", font.family, font.style)

    # ------------------------------------------------------------------ #
    # UI surface
    # ------------------------------------------------------------------ #

    def notify(self, message: str, error: bool = False) -> None:
        self.notifications.append(Notification(message=message, error=error))
        if error:
            logger.warning("Host notification (error): %s", message)
        else:
            logger.info("Host notification: %s", message)

    def scroll_and_zoom_into_view(self, nodes: Sequence[BaseHostNode]) -> None:
        self.viewport.focused = list(nodes)
