import pytest

from scrmirror.device_msg import (
    DeviceMsg,
    DeviceMsgError,
    DeviceMsgType,
    Receiver,
    deserialize,
)


def _clipboard_bytes(text: str) -> bytes:
    body = text.encode("utf-8")
    return b"\x00" + len(body).to_bytes(4, "big") + body


class FakeClipboard:
    def __init__(self, content=""):
        self.content = content
        self.writes = []

    def text(self):
        return self.content

    def set_text(self, text):
        self.content = text
        self.writes.append(text)


def test_deserialize_clipboard():
    result = deserialize(b"\x00\x00\x00\x00\x05hello")
    assert result == (DeviceMsg(DeviceMsgType.GET_CLIPBOARD, "hello"), 10)


def test_deserialize_round_trip_unicode():
    data = _clipboard_bytes("héllo wörld")
    msg, used = deserialize(data)
    assert msg.text == "héllo wörld"
    assert used == len(data)


def test_deserialize_empty_text():
    msg, used = deserialize(b"\x00\x00\x00\x00\x00")
    assert msg.text == ""
    assert used == 5


def test_deserialize_stops_at_message_end():
    data = _clipboard_bytes("abc") + _clipboard_bytes("xyz")
    msg, used = deserialize(data)
    assert msg.text == "abc"
    second, _ = deserialize(data[used:])
    assert second.text == "xyz"


@pytest.mark.parametrize("data", [b"", b"\x00\x00\x00", b"\x00\x00\x00\x00\x05hel"])
def test_deserialize_incomplete(data):
    assert deserialize(data) is None


def test_deserialize_unsupported_type():
    with pytest.raises(DeviceMsgError):
        deserialize(b"\x07\x00\x00\x00\x00")


def test_receiver_sets_clipboard():
    board = FakeClipboard("old")
    receiver = Receiver(board)
    assert receiver.recv(DeviceMsg(DeviceMsgType.GET_CLIPBOARD, "new")) is True
    assert board.content == "new"


def test_receiver_leaves_unchanged_clipboard():
    board = FakeClipboard("same")
    receiver = Receiver(board)
    assert receiver.recv(DeviceMsg(DeviceMsgType.GET_CLIPBOARD, "same")) is False
    assert board.writes == []


def test_receiver_ignores_other_types():
    board = FakeClipboard("keep")
    receiver = Receiver(board)
    assert receiver.recv(DeviceMsg(DeviceMsgType.NULL, "x")) is False
    assert board.content == "keep"