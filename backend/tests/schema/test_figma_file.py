import copy

import pytest

from design_bridge.exceptions import SchemaValidationError
from design_bridge.schema import SCHEMA_VERSION, parse_figma_file, scene_from_file, scene_from_figma
from design_bridge.schema import figma_file as ff
from design_bridge.scene import build_node, models

SOLID_RED = {"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0, "a": 1}}

SAMPLE_FILE = {
    "name": "Landing page",
    "lastModified": "2024-03-01T12:00:00Z",
    "version": "123456",
    "schemaVersion": 0,
    "components": {},
    "styles": {},
    "document": {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "backgroundColor": {"r": 1, "g": 1, "b": 1, "a": 1},
                "children": [
                    {
                        "id": "1:1",
                        "name": "Hero",
                        "type": "FRAME",
                        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 800, "height": 400},
                        "fills": [{"type": "SOLID", "color": {"r": 0.9, "g": 0.9, "b": 0.9, "a": 1}}],
                        "children": [
                            {
                                "id": "1:2",
                                "name": "Button",
                                "type": "RECTANGLE",
                                "absoluteBoundingBox": {"x": 40, "y": 300, "width": 160, "height": 48},
                                "fills": [dict(SOLID_RED, opacity=0.5)],
                                "effects": [{"type": "DROP_SHADOW", "offset": {"x": 0, "y": 2}, "radius": 4}],
                                "cornerRadius": 8,
                                "strokeWeight": 1,
                            },
                            {
                                "id": "1:3",
                                "name": "Headline",
                                "type": "TEXT",
                                "characters": "Ship faster",
                                "absoluteBoundingBox": {"x": 40, "y": 40, "width": 300, "height": 60},
                                "style": {"fontFamily": "Inter", "fontStyle": "Bold", "fontSize": 48},
                                "fills": [SOLID_RED],
                            },
                            {
                                "id": "1:4",
                                "name": "Star",
                                "type": "STAR",
                                "absoluteBoundingBox": {"x": 0, "y": 0, "width": 10, "height": 10},
                            },
                            {
                                "id": "1:5",
                                "name": "Hidden dot",
                                "type": "ELLIPSE",
                                "visible": False,
                                "absoluteBoundingBox": {"x": 0, "y": 0, "width": 10, "height": 10},
                            },
                        ],
                    }
                ],
            }
        ],
    },
}


def test_parse_sample_file():
    doc = parse_figma_file(SAMPLE_FILE)

    assert doc.name == "Landing page"
    page = doc.document.children[0]
    assert isinstance(page, ff.CanvasNode)
    hero = page.children[0]
    assert isinstance(hero, ff.FrameNode)
    assert [type(c) for c in hero.children] == [ff.RectangleNode, ff.TextNode, ff.GenericNode, ff.EllipseNode]
    assert hero.children[2].type == "STAR"
    assert hero.children[3].visible is False
    assert SCHEMA_VERSION == 1


def test_visible_defaults_to_true_and_unknown_keys_are_kept():
    data = copy.deepcopy(SAMPLE_FILE)
    data["document"]["children"][0]["flowStartingPoints"] = []

    doc = parse_figma_file(data)

    page = doc.document.children[0]
    assert page.visible is True
    assert page.model_extra["flowStartingPoints"] == []


@pytest.mark.parametrize("path, key", [
    (("document",), "id"),
    (("document", "children", 0), "children"),
    (("document", "children", 0, "children", 0, "children", 1), "characters"),
])
def test_required_fields_are_enforced(path, key):
    data = copy.deepcopy(SAMPLE_FILE)
    target = data
    for step in path:
        target = target[step]
    del target[key]

    with pytest.raises(SchemaValidationError):
        parse_figma_file(data)


def test_colors_need_all_four_channels():
    data = copy.deepcopy(SAMPLE_FILE)
    del data["document"]["children"][0]["backgroundColor"]["a"]
    with pytest.raises(SchemaValidationError):
        parse_figma_file(data)


def test_non_object_is_rejected():
    with pytest.raises(SchemaValidationError):
        parse_figma_file([SAMPLE_FILE])


def test_scene_from_file_converts_supported_nodes():
    scene = scene_from_file(parse_figma_file(SAMPLE_FILE))

    [hero] = scene
    assert isinstance(hero, models.FrameNode)
    assert (hero.node.width, hero.node.height) == (800, 400)
    button, headline = hero.children  # STAR skipped, hidden ellipse dropped
    assert isinstance(button, models.RectangleNode)
    assert button.node.color.a == 0.5
    assert button.node.dropShadow == 2
    assert button.node.cornerRadius == 8
    assert isinstance(headline, models.TextNode)
    assert headline.text.fontName == models.FontName(family="Inter", style="Bold")
    assert headline.text.fontSize == 48


def test_converted_scene_validates_as_scene():
    scene = scene_from_file(parse_figma_file(SAMPLE_FILE))
    assert models.validate_scene(models.dump_scene(scene))


def test_group_without_convertible_children_is_dropped():
    group = ff.GroupNode.model_validate({
        "id": "2:1",
        "name": "Vectors",
        "type": "GROUP",
        "children": [{"id": "2:2", "name": "Path", "type": "VECTOR"}],
    })
    assert scene_from_figma(group) == []


def test_rectangle_without_bounding_box_is_skipped():
    rect = ff.RectangleNode.model_validate({"id": "3:1", "name": "Ghost", "type": "RECTANGLE"})
    assert scene_from_figma(rect) == []


def _nested_frame():
    return ff.FrameNode.model_validate({
        "id": "4:1",
        "name": "Card",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 100, "y": 100, "width": 300, "height": 200},
        "children": [
            {
                "id": "4:2",
                "name": "Badge",
                "type": "RECTANGLE",
                "absoluteBoundingBox": {"x": 110, "y": 120, "width": 20, "height": 20},
            },
            {
                "id": "4:3",
                "name": "Row",
                "type": "GROUP",
                "absoluteBoundingBox": {"x": 150, "y": 160, "width": 60, "height": 20},
                "children": [
                    {
                        "id": "4:4",
                        "name": "Dot",
                        "type": "ELLIPSE",
                        "absoluteBoundingBox": {"x": 150, "y": 160, "width": 20, "height": 20},
                    },
                    {
                        "id": "4:5",
                        "name": "Inner",
                        "type": "FRAME",
                        "absoluteBoundingBox": {"x": 180, "y": 160, "width": 30, "height": 20},
                        "children": [
                            {
                                "id": "4:6",
                                "name": "Pip",
                                "type": "RECTANGLE",
                                "absoluteBoundingBox": {"x": 185, "y": 165, "width": 5, "height": 5},
                            },
                        ],
                    },
                ],
            },
        ],
    })


def test_frame_children_are_positioned_relative_to_the_frame():
    [card] = scene_from_figma(_nested_frame())

    assert card.node.position == models.Position(x=100, y=100)
    badge, row = card.children
    assert badge.node.position == models.Position(x=10, y=20)
    dot, inner = row.children
    # Groups do not start a coordinate space; their children use the enclosing frame's.
    assert dot.node.position == models.Position(x=50, y=60)
    assert inner.node.position == models.Position(x=80, y=60)
    [pip] = inner.children
    assert pip.node.position == models.Position(x=5, y=5)


def test_frame_without_box_keeps_parent_origin():
    frame = ff.FrameNode.model_validate({
        "id": "5:1",
        "name": "Loose",
        "type": "FRAME",
        "children": [{
            "id": "5:2",
            "name": "R",
            "type": "RECTANGLE",
            "absoluteBoundingBox": {"x": 130, "y": 140, "width": 10, "height": 10},
        }],
    })

    [loose] = scene_from_figma(frame, origin=(100, 100))

    assert loose.node.position is None
    assert loose.children[0].node.position == models.Position(x=30, y=40)


@pytest.mark.asyncio
async def test_imported_frame_builds_child_at_its_absolute_position(host):
    [card] = scene_from_figma(_nested_frame())

    frame = await build_node(host, card)

    badge = frame.children[0]
    assert (frame.x + badge.x, frame.y + badge.y) == (110, 120)
