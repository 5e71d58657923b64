"""Per-source leading-edge throttle for log events"""
import logging
import time
from typing import Dict, Optional

from core.state import Source, ThrottleWindow, Vector2

LOG = logging.getLogger("petleash.throttle")

DEFAULT_WINDOW_S = 0.250


class EventThrottle:
    """Admit the first event of a burst, drop the rest until the window closes.

    Windows are per-source state handed in by the owner, one per Source. A
    window is a deadline on ``clock``; it closes lazily on the next ``admit``
    for that source or eagerly via ``expire``.
    """

    def __init__(self, windows: Dict[Source, ThrottleWindow], window_s: float = DEFAULT_WINDOW_S,
                 clock=time.monotonic):
        if window_s <= 0:
            raise ValueError(f"throttle window must be positive, got {window_s}")
        self.windows = windows
        self.window_s = window_s
        self._clock = clock

    def pending(self, source: Source) -> bool:
        win = self.windows[source]
        self._close_if_elapsed(source, win, self._clock())
        return win.pending

    def admit(self, source: Source, vector: Vector2) -> bool:
        now = self._clock()
        win = self.windows[source]
        self._close_if_elapsed(source, win, now)
        if win.pending:
            LOG.debug("%s: suppressed (%.3f, %.3f)", source.value, vector.x, vector.y)
            return False
        win.pending = True
        win.deadline = now + self.window_s
        LOG.debug("%s: admitted (%.3f, %.3f), window open until %.3f",
                  source.value, vector.x, vector.y, win.deadline)
        return True

    def cancel(self, source: Source):
        win = self.windows[source]
        if win.pending:
            LOG.debug("%s: window cancelled", source.value)
        win.pending = False
        win.deadline = None

    def expire(self, now: Optional[float] = None):
        """Close every window whose deadline has passed."""
        if now is None:
            now = self._clock()
        for source, win in self.windows.items():
            self._close_if_elapsed(source, win, now)

    @staticmethod
    def _close_if_elapsed(source: Source, win: ThrottleWindow, now: float):
        if win.pending and win.deadline is not None and now >= win.deadline:
            win.pending = False
            win.deadline = None
            LOG.debug("%s: window closed", source.value)
