import pytest

from design_bridge.exceptions import HostContractError
from design_bridge.host import DEFAULT_FONT, FontSpec


def test_nodes_start_detached_with_unique_ids(host):
    a = host.create_rectangle()
    b = host.create_ellipse()
    assert a.parent is None and b.parent is None
    assert a.id != b.id


def test_group_fits_children_and_moves_them(host):
    a = host.create_rectangle()
    a.x, a.y = 10, 20
    b = host.create_rectangle()
    b.x, b.y = 60, 80

    group = host.group([a, b], host.current_page)

    assert group.parent is host.current_page
    assert (group.x, group.y, group.width, group.height) == (10, 20, 150, 160)
    group.x = 0
    assert (a.x, b.x) == (0, 50)


def test_group_requires_nodes(host):
    with pytest.raises(HostContractError):
        host.group([])


def test_removing_container_removes_subtree(host):
    frame = host.create_frame()
    child = host.create_rectangle()
    frame.append_child(child)
    host.current_page.append_child(frame)

    frame.remove()

    assert host.current_page.children == []
    assert child.removed


def test_text_requires_loaded_font(host):
    text = host.create_text()
    with pytest.raises(HostContractError):
        text.characters = "too early"


@pytest.mark.asyncio
async def test_load_font_unlocks_text_properties(host):
    text = host.create_text()
    await host.load_font(DEFAULT_FONT)
    text.characters = "ok"
    text.font_size = 20
    assert text.characters == "ok"

    with pytest.raises(HostContractError):
        text.font_name = FontSpec("Roboto", "Bold")


@pytest.mark.asyncio
async def test_unavailable_font_cannot_be_loaded(host):
    with pytest.raises(HostContractError):
        await host.load_font(FontSpec("Papyrus", "Regular"))


def test_notify_records_messages(host):
    host.notify("done")
    host.notify("failed", error=True)
    assert [(n.message, n.error) for n in host.notifications] == [("done", False), ("failed", True)]
