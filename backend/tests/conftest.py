import types

import pytest

from design_bridge.host import DesignHost


@pytest.fixture
def host():
    return DesignHost()


@pytest.fixture
def container(host):
    frame = host.create_frame()
    frame.name = "Container"
    return frame


def _rect(name="Rect", x=10, y=20, width=50, height=40, **extra):
    spec = {
        "position": {"x": x, "y": y},
        "color": {"r": 1, "g": 0, "b": 0},
        "width": width,
        "height": height,
    }
    spec.update(extra)
    return {"type": "RECTANGLE", "name": name, "node": spec}


def _ellipse(name="Ellipse", x=0, y=0, width=30, height=30):
    return {
        "type": "ELLIPSE",
        "name": name,
        "node": {
            "position": {"x": x, "y": y},
            "color": {"r": 0, "g": 0, "b": 1},
            "width": width,
            "height": height,
        },
    }


def _text(name="Text", content="Hello", **extra):
    spec = {"content": content}
    spec.update(extra)
    return {"type": "TEXT", "name": name, "text": spec}


def _group(name="Group", *children):
    return {"type": "GROUP", "name": name, "children": list(children)}


@pytest.fixture
def nodes():
    """Factories for scene-node dicts as the plugin UI sends them."""
    return types.SimpleNamespace(rect=_rect, ellipse=_ellipse, text=_text, group=_group)
