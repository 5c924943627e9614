import pytest

from scrmirror.keymap_types import (
    ANDROID_KEYCODE_UNKNOWN,
    KEY_UNKNOWN,
    ActionType,
    DelayClickNode,
    KeyMapNode,
    KeyMapType,
    KeyNode,
)


def test_key_node_defaults():
    node = KeyNode()
    assert node.type is ActionType.INVALID
    assert node.key == KEY_UNKNOWN
    assert node.android_key == ANDROID_KEYCODE_UNKNOWN
    assert node.delay_click_nodes == []


def test_key_nodes_do_not_share_lists():
    a, b = KeyNode(), KeyNode()
    a.delay_click_nodes.append(DelayClickNode(10, (0.5, 0.5)))
    assert b.delay_click_nodes == []


def test_mouse_move_default_speed_ratio():
    assert KeyMapNode().speed_ratio == (1.0, 1.0)


def test_invalid_node_binds_nothing():
    assert KeyMapNode().bound_keys() == []


def test_mouse_move_binds_nothing():
    node = KeyMapNode(type=KeyMapType.MOUSE_MOVE, small_eyes=KeyNode(ActionType.KEY, 5))
    assert node.bound_keys() == []


@pytest.mark.parametrize(
    "kind",
    [
        KeyMapType.CLICK,
        KeyMapType.CLICK_TWICE,
        KeyMapType.CLICK_MULTI,
        KeyMapType.DRAG,
        KeyMapType.ANDROID_KEY,
    ],
)
def test_single_key_types(kind):
    key_node = KeyNode(ActionType.KEY, 65)
    node = KeyMapNode(type=kind, key_node=key_node)
    assert node.bound_keys() == [key_node]


def test_steer_wheel_binds_four_keys_in_order():
    keys = [KeyNode(ActionType.KEY, k) for k in (1, 2, 3, 4)]
    node = KeyMapNode(
        type=KeyMapType.STEER_WHEEL, left=keys[0], right=keys[1], up=keys[2], down=keys[3]
    )
    assert [k.key for k in node.bound_keys()] == [1, 2, 3, 4]


def test_enum_values_match_wire_names():
    assert KeyMapType["STEER_WHEEL"] is KeyMapType.STEER_WHEEL
    assert ActionType(1) is ActionType.MOUSE