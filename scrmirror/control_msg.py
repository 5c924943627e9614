"""Control messages sent from the client to the device."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import IntEnum

from scrmirror.buffer_util import write16, write32, write64

__all__ = [
    "CONTROL_MSG_MAX_SIZE",
    "CONTROL_MSG_INJECT_TEXT_MAX_LENGTH",
    "CONTROL_MSG_CLIPBOARD_TEXT_MAX_LENGTH",
    "POINTER_ID_MOUSE",
    "POINTER_ID_VIRTUAL_FINGER",
    "ControlMsgType",
    "ScreenPowerMode",
    "GetClipboardCopyKey",
    "Position",
    "ControlMsg",
    "to_fixed_point16",
]

CONTROL_MSG_MAX_SIZE = 1 << 18
CONTROL_MSG_INJECT_TEXT_MAX_LENGTH = 300
# type: 1 byte; paste flag: 1 byte; length: 4 bytes
CONTROL_MSG_CLIPBOARD_TEXT_MAX_LENGTH = CONTROL_MSG_MAX_SIZE - 6

POINTER_ID_MOUSE = (1 << 64) - 1
POINTER_ID_VIRTUAL_FINGER = (1 << 64) - 2

_KEY_ACTION_DOWN = 0
_KEY_ACTION_UP = 1


class ControlMsgType(IntEnum):
    NULL = -1
    INJECT_KEYCODE = 0
    INJECT_TEXT = 1
    INJECT_TOUCH = 2
    INJECT_SCROLL = 3
    BACK_OR_SCREEN_ON = 4
    EXPAND_NOTIFICATION_PANEL = 5
    EXPAND_SETTINGS_PANEL = 6
    COLLAPSE_PANELS = 7
    GET_CLIPBOARD = 8
    SET_CLIPBOARD = 9
    SET_SCREEN_POWER_MODE = 10
    ROTATE_DEVICE = 11


class ScreenPowerMode(IntEnum):
    OFF = 0
    NORMAL = 2


class GetClipboardCopyKey(IntEnum):
    NONE = 0
    COPY = 1
    CUT = 2


@dataclass(frozen=True)
class Position:
    """A point on the device screen together with the frame size it refers to."""

    x: int
    y: int
    width: int
    height: int


def to_fixed_point16(value: float) -> int:
    """Convert a value in [0, 1] to an unsigned 16-bit fixed-point number."""
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"value out of range [0, 1]: {value}")
    return min(int(value * 65536.0), 0xFFFF)


def _put_byte(buffer: io.BytesIO, value: int) -> None:
    buffer.write(bytes([value & 0xFF]))


def _write_position(buffer: io.BytesIO, position: Position) -> None:
    write32(buffer, position.x)
    write32(buffer, position.y)
    write16(buffer, position.width)
    write16(buffer, position.height)


class ControlMsg:
    """A control message of one type with the data that type carries."""

    def __init__(self, msg_type: ControlMsgType) -> None:
        self.type = ControlMsgType(msg_type)
        self.action = 0
        self.keycode = 0
        self.repeat = 0
        self.metastate = 0
        self.text = b""
        self.pointer_id = 0
        self.buttons = 0
        self.position = Position(0, 0, 0, 0)
        self.pressure = 0.0
        self.h_scroll = 0
        self.v_scroll = 0
        self.copy_key = GetClipboardCopyKey.NONE
        self.paste = True
        self.sequence = 0
        self.mode = ScreenPowerMode.OFF

    def set_inject_keycode(self, action: int, keycode: int, repeat: int, metastate: int) -> None:
        self.action = action
        self.keycode = keycode
        self.repeat = repeat
        self.metastate = metastate

    def set_inject_text(self, text: str) -> None:
        """Set the text to inject, cut to the maximum injectable length."""
        self.text = text[:CONTROL_MSG_INJECT_TEXT_MAX_LENGTH].encode("utf-8")

    def set_inject_touch(
        self, pointer_id: int, action: int, buttons: int, position: Position, pressure: float
    ) -> None:
        self.pointer_id = pointer_id
        self.action = action
        self.buttons = buttons
        self.position = position
        self.pressure = pressure

    def set_inject_scroll(self, position: Position, h_scroll: int, v_scroll: int) -> None:
        self.position = position
        self.h_scroll = h_scroll
        self.v_scroll = v_scroll

    def set_get_clipboard(self, copy_key: GetClipboardCopyKey) -> None:
        self.copy_key = GetClipboardCopyKey(copy_key)

    def set_set_clipboard(self, text: str, paste: bool) -> None:
        """Set the clipboard text; an empty text leaves the message unchanged."""
        if not text:
            return
        self.text = text[:CONTROL_MSG_CLIPBOARD_TEXT_MAX_LENGTH].encode("utf-8")
        self.paste = paste
        self.sequence = 0

    def set_screen_power_mode(self, mode: ScreenPowerMode) -> None:
        self.mode = ScreenPowerMode(mode)

    def set_back_or_screen_on(self, down: bool) -> None:
        self.action = _KEY_ACTION_DOWN if down else _KEY_ACTION_UP

    def serialize(self) -> bytes:
        """Return the wire form of the message."""
        buffer = io.BytesIO()
        _put_byte(buffer, self.type)
        kind = self.type
        if kind is ControlMsgType.INJECT_KEYCODE:
            _put_byte(buffer, self.action)
            write32(buffer, self.keycode)
            write32(buffer, self.repeat)
            write32(buffer, self.metastate)
        elif kind is ControlMsgType.INJECT_TEXT:
            write32(buffer, len(self.text))
            buffer.write(self.text)
        elif kind is ControlMsgType.INJECT_TOUCH:
            _put_byte(buffer, self.action)
            write64(buffer, self.pointer_id)
            _write_position(buffer, self.position)
            write16(buffer, to_fixed_point16(self.pressure))
            write32(buffer, self.buttons)
        elif kind is ControlMsgType.INJECT_SCROLL:
            _write_position(buffer, self.position)
            write32(buffer, self.h_scroll)
            write32(buffer, self.v_scroll)
        elif kind is ControlMsgType.BACK_OR_SCREEN_ON:
            _put_byte(buffer, self.action)
        elif kind is ControlMsgType.GET_CLIPBOARD:
            _put_byte(buffer, self.copy_key)
        elif kind is ControlMsgType.SET_CLIPBOARD:
            write64(buffer, self.sequence)
            _put_byte(buffer, 1 if self.paste else 0)
            write32(buffer, len(self.text))
            buffer.write(self.text)
        elif kind is ControlMsgType.SET_SCREEN_POWER_MODE:
            _put_byte(buffer, self.mode)
        return buffer.getvalue()