"""Validation helpers for key map JSON objects."""

from __future__ import annotations

import logging
from typing import Any, Mapping

__all__ = [
    "check_item_string",
    "check_item_double",
    "check_item_bool",
    "check_item_object",
    "check_item_pos",
    "check_for_click",
    "check_for_click_twice",
    "check_for_click_multi",
    "check_for_delay_click_node",
    "check_for_steer_wheel",
    "check_for_drag",
    "check_for_android_key",
    "item_pos",
]

_log = logging.getLogger(__name__)

JsonObject = Mapping[str, Any]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_double(value: Any) -> float:
    return float(value) if _is_number(value) else 0.0


def check_item_string(node: JsonObject, name: str) -> bool:
    """Return whether ``node[name]`` exists and is a string."""
    return isinstance(node.get(name), str)


def check_item_double(node: JsonObject, name: str) -> bool:
    """Return whether ``node[name]`` exists and is a number."""
    return name in node and _is_number(node[name])


def check_item_bool(node: JsonObject, name: str) -> bool:
    """Return whether ``node[name]`` exists and is a boolean."""
    return isinstance(node.get(name), bool)


def check_item_object(node: JsonObject, name: str) -> bool:
    """Return whether ``node[name]`` exists and is an object."""
    return isinstance(node.get(name), Mapping)


def check_item_pos(node: JsonObject, name: str) -> bool:
    """Return whether ``node[name]`` is an object with numeric ``x`` and ``y``."""
    if not check_item_object(node, name):
        return False
    pos = node[name]
    return check_item_double(pos, "x") and check_item_double(pos, "y")


def check_for_click_twice(node: JsonObject) -> bool:
    return check_item_string(node, "key") and check_item_pos(node, "pos")


def check_for_click(node: JsonObject) -> bool:
    return check_for_click_twice(node) and check_item_bool(node, "switchMap")


def check_for_delay_click_node(node: JsonObject) -> bool:
    return check_item_pos(node, "pos") and check_item_double(node, "delay")


def check_for_click_multi(node: JsonObject) -> bool:
    """Return whether ``node`` holds a non-empty list of valid delayed clicks."""
    click_nodes = node.get("clickNodes")
    if not isinstance(click_nodes, list):
        _log.warning("json error: no find clickNodes")
        return False
    if not click_nodes:
        _log.warning("json error: clickNodes is empty")
        return False
    for click_node in click_nodes:
        if not isinstance(click_node, Mapping):
            _log.warning("json error: clickNodes node must be json object")
            return False
        if not check_for_delay_click_node(click_node):
            return False
    return True


def check_for_android_key(node: JsonObject) -> bool:
    return check_item_string(node, "key") and check_item_double(node, "androidKey")


def check_for_steer_wheel(node: JsonObject) -> bool:
    keys = ("leftKey", "rightKey", "upKey", "downKey")
    offsets = ("leftOffset", "rightOffset", "upOffset", "downOffset")
    return (
        all(check_item_string(node, name) for name in keys)
        and all(check_item_double(node, name) for name in offsets)
        and check_item_pos(node, "centerPos")
    )


def check_for_drag(node: JsonObject) -> bool:
    return (
        check_item_string(node, "key")
        and check_item_pos(node, "startPos")
        and check_item_pos(node, "endPos")
    )


def item_pos(node: JsonObject, name: str) -> tuple[float, float]:
    """Return ``(x, y)`` of ``node[name]``; missing or non-numeric parts are 0."""
    pos = node.get(name)
    if not isinstance(pos, Mapping):
        return (0.0, 0.0)
    return (_as_double(pos.get("x")), _as_double(pos.get("y")))