# scrmirror

Building blocks for controlling an Android device whose screen is mirrored
on a desktop: the binary format of the control messages sent to the
device, parsing of the messages the device sends back, game key maps that
turn keyboard and mouse input into screen touches, and the thread-safe
hand-over of decoded frames to a renderer.

The package has no dependencies outside the standard library.

## Install

    pip install scrmirror

To run the tests:

    pip install "scrmirror[test]"
    pytest

## Modules

- `scrmirror.buffer_util` – `read16`, `read32`, `read64` and `write16`,
  `write32`, `write64`: unsigned big-endian integers on binary file
  objects. Writes keep only the low bits that fit; reads raise `EOFError`
  when the data runs out.
- `scrmirror.control_msg` – `ControlMsg` with the enums `ControlMsgType`,
  `ScreenPowerMode` and `GetClipboardCopyKey`, the `Position` dataclass and
  `to_fixed_point16`. Fill a message with one of the `set_*` methods and
  call `serialize()` for the bytes to send. Injected text is cut to
  `CONTROL_MSG_INJECT_TEXT_MAX_LENGTH` characters, clipboard text to
  `CONTROL_MSG_CLIPBOARD_TEXT_MAX_LENGTH`.
- `scrmirror.device_msg` – `deserialize(data)` decodes one device message
  from the start of `data` and returns `(DeviceMsg, bytes_used)`, or `None`
  when the message is not complete yet; an unknown message type raises
  `DeviceMsgError`. `Receiver(clipboard).recv(msg)` copies the device
  clipboard into any object with `text()` and `set_text(text)` methods and
  returns whether it changed anything.
- `scrmirror.keymap_types` – `KeyMapType`, `ActionType`, `DelayClickNode`,
  `KeyNode` and `KeyMapNode` (with `bound_keys()`).
- `scrmirror.keymap_checks` – the `check_*` validators for key map JSON
  objects and `item_pos`.
- `scrmirror.keymap` – `KeyMap(key_codes, mouse_buttons)` loads a JSON key
  map with `load(json_text)`; lookups are `node_for`, `node_for_key` and
  `node_for_mouse`, plus `switch_key`, `is_switch_on_keyboard`,
  `has_mouse_move_map`, `has_steer_wheel_map` and `mouse_move_map`.
  Structural errors raise `KeymapError`; malformed entries in
  `keyMapNodes` are skipped with a logged warning.
- `scrmirror.steering` – `delay_queue` splits a drag into jittered steps
  with random delays; `SteerWheelState.press` and `advance` turn
  directional key presses into touch down, move and up events.
- `scrmirror.touch` – `TouchIdPool` hands out touch ids to the keys holding
  a touch; `frame_absolute_pos` scales a relative position to frame pixels.
- `scrmirror.fps_counter` – `FpsCounter` counts rendered and skipped frames;
  call `tick()` once a second to get and report the frame rate.
- `scrmirror.video_buffer` – `VideoBuffer` passes the newest decoded frame
  from a decoder thread to a renderer, either dropping frames that were not
  rendered in time or, with `render_expired_frames=True`, making the
  decoder wait until `interrupt()` is called.

## Example

    from scrmirror.control_msg import ControlMsg, ControlMsgType
    from scrmirror.device_msg import deserialize
    from scrmirror.keymap import KeyMap

    msg = ControlMsg(ControlMsgType.INJECT_TEXT)
    msg.set_inject_text("hello")
    payload = msg.serialize()   # b"\x01\x00\x00\x00\x05hello"

    message, used = deserialize(b"\x00\x00\x00\x00\x02hi")
    # message.text == "hi", used == 7

    keymap = KeyMap({"Key_QuoteLeft": 0x60, "Key_J": 0x4A}, {"LeftButton": 1})
    keymap.load(
        '{"switchKey": "Key_QuoteLeft", "keyMapNodes": [{"type": "KMT_CLICK",'
        ' "key": "Key_J", "pos": {"x": 0.5, "y": 0.8}, "switchMap": false}]}'
    )
    node = keymap.node_for_key(0x4A)   # node.key_node.pos == (0.5, 0.8)

## What it does not do

scrmirror does not connect to a device, start anything on it, or read,
decode, display or record the video stream. It has no command-line tool
and no window. An application supplies the socket, the decoder, the
clipboard and the event loop, and uses these modules for the message
formats, key mapping and frame bookkeeping.