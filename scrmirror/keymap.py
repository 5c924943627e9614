"""Loading of key maps that bind keyboard and mouse input to screen touches."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from scrmirror.keymap_checks import (
    check_for_android_key,
    check_for_click,
    check_for_click_multi,
    check_for_click_twice,
    check_for_drag,
    check_for_steer_wheel,
    check_item_double,
    check_item_object,
    check_item_string,
    item_pos,
)
from scrmirror.keymap_types import (
    MAX_DELAY_CLICK_NODES,
    ActionType,
    DelayClickNode,
    KeyMapNode,
    KeyMapType,
    KeyNode,
)

__all__ = ["KeymapError", "KeyMap", "DEFAULT_SWITCH_KEY", "MIN_SPEED_RATIO"]

_log = logging.getLogger(__name__)

# Default switch key: the back-quote key on the keyboard.
DEFAULT_SWITCH_KEY = 0x60
MIN_SPEED_RATIO = 0.001
# Phone screens are often FHD+, so a shared ratio is stretched vertically.
_VERTICAL_RATIO_DIVISOR = 2.25

_TYPE_PREFIX = "KMT_"


class KeymapError(ValueError):
    """Raised when a key map document cannot be loaded."""


def _item_string(node: Mapping[str, Any], name: str) -> str:
    value = node.get(name)
    return value if isinstance(value, str) else ""


def _item_double(node: Mapping[str, Any], name: str) -> float:
    value = node.get(name)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _item_bool(node: Mapping[str, Any], name: str) -> bool:
    value = node.get(name)
    return value if isinstance(value, bool) else False


def _item_key_map_type(node: Mapping[str, Any], name: str) -> KeyMapType:
    value = _item_string(node, name)
    if not value.startswith(_TYPE_PREFIX):
        return KeyMapType.INVALID
    member = KeyMapType.__members__.get(value[len(_TYPE_PREFIX):])
    return member if member is not None else KeyMapType.INVALID


class KeyMap:
    """A key map read from JSON, with lookup by key code or mouse button.

    ``key_codes`` maps key names such as ``"Key_A"`` to key codes and
    ``mouse_buttons`` maps button names such as ``"LeftButton"`` to button
    values; key names are looked up first.
    """

    def __init__(self, key_codes: Mapping[str, int], mouse_buttons: Mapping[str, int]) -> None:
        self._key_codes = dict(key_codes)
        self._mouse_buttons = dict(mouse_buttons)
        self._nodes: list[KeyMapNode] = []
        self._switch_key = KeyNode(type=ActionType.KEY, key=DEFAULT_SWITCH_KEY)
        self._invalid_node = KeyMapNode()
        self._idx_steer_wheel = -1
        self._idx_mouse_move = -1
        self._rmap_key: dict[int, KeyMapNode] = {}
        self._rmap_mouse: dict[int, KeyMapNode] = {}

    def _item_key(self, node: Mapping[str, Any], name: str) -> tuple[ActionType, int]:
        value = _item_string(node, name)
        if value in self._key_codes:
            return ActionType.KEY, self._key_codes[value]
        if value in self._mouse_buttons:
            return ActionType.MOUSE, self._mouse_buttons[value]
        return ActionType.INVALID, -1

    def load(self, json_text: str) -> None:
        """Parse ``json_text`` and add its entries to this key map.

        Malformed entries in ``keyMapNodes`` are skipped with a warning;
        structural errors raise :class:`KeymapError`.
        """
        try:
            root = json.loads(json_text)
        except json.JSONDecodeError as exc:
            raise KeymapError(f"json error: {exc}") from exc
        if not isinstance(root, Mapping):
            root = {}

        if not check_item_string(root, "switchKey"):
            raise KeymapError("json error: no find switchKey")
        switch_type, switch_key = self._item_key(root, "switchKey")
        if switch_type is ActionType.INVALID:
            raise KeymapError("json error: switchKey invalid")
        self._switch_key = KeyNode(type=switch_type, key=switch_key)

        if check_item_object(root, "mouseMoveMap"):
            node = self._parse_mouse_move(root["mouseMoveMap"])
            self._idx_mouse_move = len(self._nodes)
            self._nodes.append(node)

        entries = root.get("keyMapNodes")
        if isinstance(entries, list):
            for entry in entries:
                if not isinstance(entry, Mapping):
                    raise KeymapError("json error: keyMapNodes node must be json object")
                if not check_item_string(entry, "type"):
                    raise KeymapError("json error: keyMapNodes no find node type")
                self._add_entry(entry)

        self._make_reverse_map()
        _log.info("Script updated, current keymap mode:normal, Press ~ key to switch keymap mode")

    def _parse_mouse_move(self, mouse_move: Mapping[str, Any]) -> KeyMapNode:
        node = KeyMapNode(type=KeyMapType.MOUSE_MOVE)
        ratio_x, ratio_y = node.speed_ratio
        have_ratio = False
        if check_item_double(mouse_move, "speedRatio"):
            ratio = _item_double(mouse_move, "speedRatio")
            ratio_x, ratio_y = ratio, ratio / _VERTICAL_RATIO_DIVISOR
            have_ratio = True
        if check_item_double(mouse_move, "speedRatioX"):
            ratio_x = _item_double(mouse_move, "speedRatioX")
            have_ratio = True
        if check_item_double(mouse_move, "speedRatioY"):
            ratio_y = _item_double(mouse_move, "speedRatioY")
            have_ratio = True
        if not have_ratio:
            raise KeymapError("json error: speedRatio setting is missing in mouseMoveMap!")
        if ratio_x < MIN_SPEED_RATIO or ratio_y < MIN_SPEED_RATIO:
            raise KeymapError("json error: Minimum speedRatio is 0.001")
        node.speed_ratio = (ratio_x, ratio_y)

        if not check_item_object(mouse_move, "startPos"):
            raise KeymapError("json error: mouseMoveMap on find startPos")
        start = mouse_move["startPos"]
        start_x, start_y = node.start_pos
        if check_item_double(start, "x"):
            start_x = _item_double(start, "x")
        if check_item_double(start, "y"):
            start_y = _item_double(start, "y")
        node.start_pos = (start_x, start_y)

        if check_item_object(mouse_move, "smallEyes"):
            small_eyes = mouse_move["smallEyes"]
            if not check_item_string(small_eyes, "type"):
                raise KeymapError("json error: smallEyes no find node type")
            if _item_key_map_type(small_eyes, "type") is not KeyMapType.CLICK:
                raise KeymapError("json error: smallEyes just support KMT_CLICK")
            if not check_for_click(small_eyes):
                raise KeymapError("json error: smallEyes node format error")
            key_type, key = self._item_key(small_eyes, "key")
            if key_type is ActionType.INVALID:
                raise KeymapError(
                    f"json error: keyMapNodes node invalid key: {_item_string(small_eyes, 'key')}"
                )
            node.small_eyes = KeyNode(type=key_type, key=key, pos=item_pos(small_eyes, "pos"))
        return node

    def _valid_key(self, entry: Mapping[str, Any], name: str) -> tuple[ActionType, int] | None:
        key_type, key = self._item_key(entry, name)
        if key_type is ActionType.INVALID:
            _log.warning("json error: keyMapNodes node invalid key: %s", _item_string(entry, name))
            return None
        return key_type, key

    def _add_entry(self, entry: Mapping[str, Any]) -> None:
        kind = _item_key_map_type(entry, "type")
        checks = {
            KeyMapType.CLICK: check_for_click,
            KeyMapType.CLICK_TWICE: check_for_click_twice,
            KeyMapType.CLICK_MULTI: check_for_click_multi,
            KeyMapType.STEER_WHEEL: check_for_steer_wheel,
            KeyMapType.DRAG: check_for_drag,
            KeyMapType.ANDROID_KEY: check_for_android_key,
        }
        check = checks.get(kind)
        if check is None:
            _log.warning("json error: keyMapNodes invalid node type: %s", _item_string(entry, "type"))
            return
        if not check(entry):
            _log.warning("json error: keyMapNodes node format error")
            return

        if kind is KeyMapType.STEER_WHEEL:
            self._add_steer_wheel(entry)
            return

        found = self._valid_key(entry, "key")
        if found is None:
            return
        key_type, key = found
        node = KeyMapNode(type=kind)
        key_node = KeyNode(type=key_type, key=key)
        if kind in (KeyMapType.CLICK, KeyMapType.CLICK_TWICE):
            key_node.pos = item_pos(entry, "pos")
            key_node.android_key = int(_item_double(entry, "androidKey"))
            node.switch_map = _item_bool(entry, "switchMap")
        elif kind is KeyMapType.CLICK_MULTI:
            click_nodes = entry["clickNodes"]
            if len(click_nodes) > MAX_DELAY_CLICK_NODES:
                _log.info("clickNodes too much, up to %d", MAX_DELAY_CLICK_NODES)
            key_node.delay_click_nodes = [
                DelayClickNode(
                    delay=int(_item_double(click, "delay")), pos=item_pos(click, "pos")
                )
                for click in click_nodes[:MAX_DELAY_CLICK_NODES]
            ]
        elif kind is KeyMapType.DRAG:
            key_node.pos = item_pos(entry, "startPos")
            key_node.extend_pos = item_pos(entry, "endPos")
        elif kind is KeyMapType.ANDROID_KEY:
            key_node.android_key = int(_item_double(entry, "androidKey"))
        node.key_node = key_node
        self._nodes.append(node)

    def _add_steer_wheel(self, entry: Mapping[str, Any]) -> None:
        directions = ("left", "right", "up", "down")
        found = {name: self._item_key(entry, f"{name}Key") for name in directions}
        invalid = [name for name, (kind, _) in found.items() if kind is ActionType.INVALID]
        if invalid:
            for name in invalid:
                _log.warning(
                    "json error: keyMapNodes node invalid key: %s",
                    _item_string(entry, f"{name}Key"),
                )
            return
        node = KeyMapNode(type=KeyMapType.STEER_WHEEL)
        for name in directions:
            key_type, key = found[name]
            setattr(
                node,
                name,
                KeyNode(
                    type=key_type,
                    key=key,
                    extend_offset=_item_double(entry, f"{name}Offset"),
                ),
            )
        node.center_pos = item_pos(entry, "centerPos")
        self._idx_steer_wheel = len(self._nodes)
        self._nodes.append(node)

    def _make_reverse_map(self) -> None:
        self._rmap_key.clear()
        self._rmap_mouse.clear()
        for node in self._nodes:
            for key_node in node.bound_keys():
                target = self._rmap_key if key_node.type is ActionType.KEY else self._rmap_mouse
                target[key_node.key] = node

    def node_for(self, key: int) -> KeyMapNode:
        """Return the entry bound to ``key`` as a key code, else as a mouse button."""
        node = self._rmap_key.get(key)
        if node is None:
            node = self._rmap_mouse.get(key, self._invalid_node)
        return node

    def node_for_key(self, key: int) -> KeyMapNode:
        """Return the entry bound to key code ``key``, or an invalid entry."""
        return self._rmap_key.get(key, self._invalid_node)

    def node_for_mouse(self, button: int) -> KeyMapNode:
        """Return the entry bound to mouse ``button``, or an invalid entry."""
        return self._rmap_mouse.get(button, self._invalid_node)

    def is_switch_on_keyboard(self) -> bool:
        return self._switch_key.type is ActionType.KEY

    def switch_key(self) -> int:
        return self._switch_key.key

    def has_mouse_move_map(self) -> bool:
        return self._idx_mouse_move != -1

    def has_steer_wheel_map(self) -> bool:
        return self._idx_steer_wheel != -1

    def mouse_move_map(self) -> KeyMapNode:
        """Return the mouse move entry; raise ``LookupError`` if there is none."""
        if self._idx_mouse_move == -1:
            raise LookupError("key map has no mouse move map")
        return self._nodes[self._idx_mouse_move]