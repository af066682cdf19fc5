import json

import pytest

from design_bridge.exceptions import SceneInputError
from design_bridge.scene import models


def test_parse_scene_dispatches_on_type_tag(nodes):
    scene = models.parse_scene(json.dumps([
        nodes.rect(),
        nodes.ellipse(),
        nodes.text(),
        nodes.group("Row", nodes.rect("A"), nodes.rect("B")),
        {"type": "FRAME", "name": "Frame", "children": [nodes.text()]},
    ]))

    assert [type(n) for n in scene] == [
        models.RectangleNode,
        models.EllipseNode,
        models.TextNode,
        models.GroupNode,
        models.FrameNode,
    ]
    assert [c.name for c in scene[3].children] == ["A", "B"]
    assert scene[4].node is None


def test_color_blue_defaults_to_zero_and_alpha_is_optional():
    color = models.Color(r=0.5, g=0.25)
    assert color.b == 0.0
    assert color.a is None


@pytest.mark.parametrize("component", ["r", "g", "b", "a"])
def test_color_components_outside_unit_range_are_rejected(component):
    data = {"r": 0.1, "g": 0.1, "b": 0.1, "a": 0.1}
    data[component] = 255
    with pytest.raises(SceneInputError):
        models.validate_scene([{
            "type": "ELLIPSE",
            "name": "E",
            "node": {"position": {"x": 0, "y": 0}, "color": data, "width": 1, "height": 1},
        }])


def test_unknown_type_tag_is_rejected(nodes):
    with pytest.raises(SceneInputError):
        models.validate_scene([nodes.rect(), {"type": "STAR", "name": "Star", "node": {}}])


def test_missing_payload_is_rejected():
    with pytest.raises(SceneInputError):
        models.validate_scene([{"type": "RECTANGLE", "name": "Rect"}])


def test_group_requires_children():
    with pytest.raises(SceneInputError):
        models.validate_scene([{"type": "GROUP", "name": "Empty", "children": []}])


def test_unknown_fields_are_rejected(nodes):
    node = nodes.rect()
    node["node"]["blur"] = 3
    with pytest.raises(SceneInputError):
        models.validate_scene([node])


@pytest.mark.parametrize("raw", ["not json", "{\"type\": \"RECTANGLE\"}", None])
def test_parse_scene_rejects_non_array_input(raw):
    with pytest.raises(SceneInputError):
        models.parse_scene(raw)


def test_empty_scene_is_valid():
    assert models.parse_scene("[]") == []


def test_validate_node_accepts_single_node(nodes):
    node = models.validate_node(nodes.text(content="Hi", fontSize=18))
    assert isinstance(node, models.TextNode)
    assert node.text.fontSize == 18


def test_dump_scene_omits_unset_optionals(nodes):
    scene = models.validate_scene([nodes.text(content="Hi")])
    assert models.dump_scene(scene) == [{"type": "TEXT", "name": "Text", "text": {"content": "Hi"}}]
