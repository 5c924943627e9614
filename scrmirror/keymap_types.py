"""Data types describing a key mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "MAX_DELAY_CLICK_NODES",
    "KEY_UNKNOWN",
    "ANDROID_KEYCODE_UNKNOWN",
    "KeyMapType",
    "ActionType",
    "DelayClickNode",
    "KeyNode",
    "KeyMapNode",
]

MAX_DELAY_CLICK_NODES = 50
KEY_UNKNOWN = 0x01FFFFFF
ANDROID_KEYCODE_UNKNOWN = 0

Point = tuple[float, float]


class KeyMapType(IntEnum):
    INVALID = -1
    CLICK = 0
    CLICK_TWICE = 1
    CLICK_MULTI = 2
    STEER_WHEEL = 3
    DRAG = 4
    MOUSE_MOVE = 5
    ANDROID_KEY = 6


class ActionType(IntEnum):
    INVALID = -1
    KEY = 0
    MOUSE = 1


@dataclass
class DelayClickNode:
    delay: int = 0
    pos: Point = (0.0, 0.0)


@dataclass
class KeyNode:
    """One bound key or mouse button and what it triggers."""

    type: ActionType = ActionType.INVALID
    key: int = KEY_UNKNOWN
    pos: Point = (0.0, 0.0)
    extend_pos: Point = (0.0, 0.0)
    extend_offset: float = 0.0
    delay_click_nodes: list[DelayClickNode] = field(default_factory=list)
    android_key: int = ANDROID_KEYCODE_UNKNOWN


@dataclass
class KeyMapNode:
    """A mapping entry; which fields matter depends on ``type``."""

    type: KeyMapType = KeyMapType.INVALID
    key_node: KeyNode = field(default_factory=KeyNode)
    switch_map: bool = False
    center_pos: Point = (0.0, 0.0)
    left: KeyNode = field(default_factory=KeyNode)
    right: KeyNode = field(default_factory=KeyNode)
    up: KeyNode = field(default_factory=KeyNode)
    down: KeyNode = field(default_factory=KeyNode)
    start_pos: Point = (0.0, 0.0)
    speed_ratio: Point = (1.0, 1.0)
    small_eyes: KeyNode = field(default_factory=KeyNode)

    def bound_keys(self) -> list[KeyNode]:
        """Return the key nodes whose input selects this entry."""
        if self.type is KeyMapType.STEER_WHEEL:
            return [self.left, self.right, self.up, self.down]
        if self.type in (
            KeyMapType.CLICK,
            KeyMapType.CLICK_TWICE,
            KeyMapType.CLICK_MULTI,
            KeyMapType.DRAG,
            KeyMapType.ANDROID_KEY,
        ):
            return [self.key_node]
        return []