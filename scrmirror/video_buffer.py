"""Hand-over of decoded frames from the decoder to the renderer."""

from __future__ import annotations

import threading
from typing import Any, Optional

from scrmirror.fps_counter import FpsCounter

__all__ = ["VideoBuffer"]


class VideoBuffer:
    """Holds the latest decoded frame until the renderer consumes it.

    When ``render_expired_frames`` is false a new frame replaces one that was
    never rendered, and the lost frame counts as skipped. When it is true the
    decoder waits until the renderer has consumed the previous frame, unless
    :meth:`interrupt` has been called.
    """

    def __init__(
        self,
        fps_counter: Optional[FpsCounter] = None,
        render_expired_frames: bool = False,
    ) -> None:
        self.fps_counter = fps_counter if fps_counter is not None else FpsCounter()
        self.render_expired_frames = render_expired_frames
        self._cond = threading.Condition()
        self._rendering_frame: Any = None
        # no frame yet, so consider the rendering frame already consumed
        self._consumed = True
        self._interrupted = False
        self.fps_counter.start()

    def offer_decoded_frame(self, frame: Any) -> bool:
        """Make ``frame`` the one to render.

        Returns whether the previous frame was dropped without being rendered.
        """
        with self._cond:
            if self.render_expired_frames:
                while not self._consumed and not self._interrupted:
                    self._cond.wait()
            elif self.fps_counter.is_started() and not self._consumed:
                self.fps_counter.add_skipped_frame()
            self._rendering_frame = frame
            previous_skipped = not self._consumed
            self._consumed = False
            return previous_skipped

    def consume_rendered_frame(self) -> Any:
        """Mark the pending frame as rendered and return it."""
        with self._cond:
            if self._consumed:
                raise RuntimeError("no frame to consume")
            self._consumed = True
            if self.fps_counter.is_started():
                self.fps_counter.add_rendered_frame()
            if self.render_expired_frames:
                self._cond.notify()
            return self._rendering_frame

    def interrupt(self) -> None:
        """Wake a waiting decoder and stop any further blocking."""
        if self.render_expired_frames:
            with self._cond:
                self._interrupted = True
                self._cond.notify_all()