"""Pointer reader: pygame mouse and touch events -> PointerEvent

Mouse events use the left button only. Touch events carry coordinates
normalized to 0..1, so they are scaled by the surface size. pygame also
synthesizes mouse events from touches (``event.touch``); those are skipped so a
finger is never seen twice.
"""
import logging

import pygame

from core.reader import InputReader
from core.state import MOUSE_POINTER, PointerEvent, PointerKind

LOG = logging.getLogger("petleash.pointer")

_MOUSE_KINDS = {
    pygame.MOUSEBUTTONDOWN: PointerKind.START,
    pygame.MOUSEMOTION: PointerKind.MOVE,
    pygame.MOUSEBUTTONUP: PointerKind.END,
}

_FINGER_KINDS = {
    pygame.FINGERDOWN: PointerKind.START,
    pygame.FINGERMOTION: PointerKind.MOVE,
    pygame.FINGERUP: PointerKind.END,
}


class PointerReader(InputReader):
    def __init__(self, size=(0, 0)):
        self._subs = []
        self.size = size

    def subscribe(self, callback):
        self._subs.append(callback)

    def handle(self, raw_event):
        """Translate one pygame event; returns the PointerEvent or None."""
        event = self.translate(raw_event)
        if event is not None:
            self._emit(event)
        return event

    def translate(self, ev):
        etype = getattr(ev, "type", None)
        if etype in _MOUSE_KINDS:
            if getattr(ev, "touch", False):
                return None
            kind = _MOUSE_KINDS[etype]
            if kind is not PointerKind.MOVE and getattr(ev, "button", 1) != 1:
                return None
            pos = getattr(ev, "pos", None)
            if pos is None:
                return PointerEvent(kind, None, None, MOUSE_POINTER)
            return PointerEvent(kind, float(pos[0]), float(pos[1]), MOUSE_POINTER)
        if etype in _FINGER_KINDS:
            kind = _FINGER_KINDS[etype]
            pointer_id = (getattr(ev, "touch_id", 0), getattr(ev, "finger_id", None))
            x = getattr(ev, "x", None)
            y = getattr(ev, "y", None)
            if x is None or y is None:
                return PointerEvent(kind, None, None, pointer_id)
            width, height = self.size
            return PointerEvent(kind, x * width, y * height, pointer_id)
        return None

    def _emit(self, event):
        LOG.debug("pointer event -> %s", event)
        for cb in self._subs:
            try:
                cb(event)
            except Exception:
                LOG.exception("subscriber callback failed")
