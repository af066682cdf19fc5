"""design_bridge/host/nodes.py

In-memory node objects mirroring the design tool's plugin node API.

Only the properties the builder and serializer touch are modelled: geometry,
fills, effects, stroke/corner settings and text styling.  Nodes are created
detached (``parent is None``) and become part of the document once appended to
a page, frame or group.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from design_bridge.exceptions import HostContractError


@dataclass(frozen=True)
class RGB:
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float


@dataclass(frozen=True)
class SolidPaint:
    color: RGB
    opacity: float = 1.0
    type: str = "SOLID"
    visible: bool = True

    def with_color(self, color: RGB, opacity: Optional[float] = None) -> "SolidPaint":
        return replace(self, color=color, opacity=self.opacity if opacity is None else opacity)


@dataclass(frozen=True)
class DropShadowEffect:
    color: RGBA
    offset: Tuple[float, float]
    radius: float
    spread: float = 0.0
    visible: bool = True
    blend_mode: str = "NORMAL"
    show_shadow_behind_node: bool = False
    type: str = "DROP_SHADOW"


@dataclass(frozen=True)
class FontSpec:
    family: str
    style: str


DEFAULT_FONT = FontSpec("Inter", "Regular")
DEFAULT_FILL = SolidPaint(color=RGB(0.85, 0.85, 0.85))
DEFAULT_TEXT_FILL = SolidPaint(color=RGB(0.0, 0.0, 0.0))


class BaseHostNode:
    type = "NODE"

    def __init__(self, node_id: str, name: str = "") -> None:
        self.id = node_id
        self.name = name or self.type.title()
        self.x: float = 0.0
        self.y: float = 0.0
        self.width: float = 100.0
        self.height: float = 100.0
        self.parent: Optional[ContainerNode] = None
        self.removed = False

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None
        self.removed = True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} name={self.name!r}>"


class RectangleNode(BaseHostNode):
    type = "RECTANGLE"

    def __init__(self, node_id: str, name: str = "") -> None:
        super().__init__(node_id, name)
        self.fills = [DEFAULT_FILL]
        self.effects = []
        self.stroke_weight: float = 1.0
        self.corner_radius: float = 0.0


class EllipseNode(BaseHostNode):
    type = "ELLIPSE"

    def __init__(self, node_id: str, name: str = "") -> None:
        super().__init__(node_id, name)
        self.fills = [DEFAULT_FILL]
        self.effects = []


class TextNode(BaseHostNode):
    """Text node.  Font-dependent properties require the current font to be loaded."""

    type = "TEXT"

    def __init__(self, node_id: str, name: str, loaded_fonts: set) -> None:
        super().__init__(node_id, name)
        self.fills = [DEFAULT_TEXT_FILL]
        self.effects: List[DropShadowEffect] = []
        self._loaded_fonts = loaded_fonts
        self._font_name = DEFAULT_FONT
        self._font_size: float = 12.0
        self._characters = ""

    def _require_loaded(self, font: FontSpec) -> None:
        if font not in self._loaded_fonts:
            raise HostContractError(
                f"Font {font.family} {font.style} must be loaded before it is used on {self.name!r}"
            )

    @property
    def font_name(self) -> FontSpec:
        return self._font_name

    @font_name.setter
    def font_name(self, value: FontSpec) -> None:
        self._require_loaded(value)
        self._font_name = value

    @property
    def font_size(self) -> float:
        return self._font_size

    @font_size.setter
    def font_size(self, value: float) -> None:
        self._require_loaded(self._font_name)
        self._font_size = value

    @property
    def characters(self) -> str:
        return self._characters

    @characters.setter
    def characters(self, value: str) -> None:
        self._require_loaded(self._font_name)
        self._characters = value


class ContainerNode(BaseHostNode):
    def __init__(self, node_id: str, name: str = "") -> None:
        super().__init__(node_id, name)
        self.children: List[BaseHostNode] = []

    def append_child(self, child: BaseHostNode) -> None:
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)

    def remove(self) -> None:
        for child in list(self.children):
            child.remove()
        super().remove()


class FrameNode(ContainerNode):
    type = "FRAME"

    def __init__(self, node_id: str, name: str = "") -> None:
        super().__init__(node_id, name)
        self.fills = [SolidPaint(color=RGB(1.0, 1.0, 1.0))]
        self.effects = []


class GroupNode(ContainerNode):
    """Group node; its bounds follow its children and moving it moves them."""

    type = "GROUP"

    def __init__(self, node_id: str, name: str = "") -> None:
        self._x = 0.0
        self._y = 0.0
        self.children = []
        super().__init__(node_id, name)

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        dx = value - self._x
        for child in self.children:
            child.x += dx
        self._x = value

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        dy = value - self._y
        for child in self.children:
            child.y += dy
        self._y = value

    def fit_to_children(self) -> None:
        if not self.children:
            return
        left = min(c.x for c in self.children)
        top = min(c.y for c in self.children)
        right = max(c.x + c.width for c in self.children)
        bottom = max(c.y + c.height for c in self.children)
        self._x, self._y = left, top
        self.width, self.height = right - left, bottom - top


class PageNode(ContainerNode):
    type = "PAGE"

    def __init__(self, node_id: str, name: str = "Page 1") -> None:
        super().__init__(node_id, name)
        self.selection: List[BaseHostNode] = []


@dataclass
class Notification:
    message: str
    error: bool = False


@dataclass
class Viewport:
    focused: List[BaseHostNode] = field(default_factory=list)
