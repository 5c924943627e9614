"""Messages sent from the device to the client, and their handling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

__all__ = [
    "DEVICE_MSG_MAX_SIZE",
    "DEVICE_MSG_TEXT_MAX_LENGTH",
    "DeviceMsgType",
    "DeviceMsgError",
    "DeviceMsg",
    "Receiver",
    "deserialize",
]

_log = logging.getLogger(__name__)

DEVICE_MSG_MAX_SIZE = 1 << 18
# type: 1 byte; length: 4 bytes
DEVICE_MSG_TEXT_MAX_LENGTH = DEVICE_MSG_MAX_SIZE - 5

_HEADER_SIZE = 5


class DeviceMsgType(IntEnum):
    NULL = -1
    GET_CLIPBOARD = 0


class DeviceMsgError(ValueError):
    """Raised for a device message that cannot be decoded."""


@dataclass(frozen=True)
class DeviceMsg:
    type: DeviceMsgType
    text: str = ""


def deserialize(data: bytes) -> tuple[DeviceMsg, int] | None:
    """Decode one message from the start of ``data``.

    Returns the message and the number of bytes it took, or ``None`` when
    ``data`` does not yet hold a whole message.
    """
    if len(data) < _HEADER_SIZE:
        return None
    raw_type = data[0]
    if raw_type != DeviceMsgType.GET_CLIPBOARD:
        raise DeviceMsgError(f"Unsupported device msg type: {raw_type}")
    length = int.from_bytes(data[1:_HEADER_SIZE], "big")
    if length > len(data) - _HEADER_SIZE:
        return None
    text = data[_HEADER_SIZE:_HEADER_SIZE + length].decode("utf-8", errors="replace")
    return DeviceMsg(DeviceMsgType.GET_CLIPBOARD, text), _HEADER_SIZE + length


class Clipboard(Protocol):
    def text(self) -> str: ...

    def set_text(self, text: str) -> None: ...


class Receiver:
    """Applies device messages to the local side."""

    def __init__(self, clipboard: Clipboard) -> None:
        self.clipboard = clipboard

    def recv(self, msg: DeviceMsg) -> bool:
        """Handle ``msg``; return whether the local clipboard was changed."""
        if msg.type is not DeviceMsgType.GET_CLIPBOARD:
            return False
        _log.info("Device clipboard copied")
        if self.clipboard.text() == msg.text:
            _log.debug("Computer clipboard unchanged")
            return False
        self.clipboard.set_text(msg.text)
        return True