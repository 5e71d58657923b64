"""Per-joystick drag state machine (Idle <-> Dragging)"""
import logging

from core.state import DragState, PointerEvent, Source, Vector2
from mapper import map_pointer

LOG = logging.getLogger("petleash.session")


class JoystickSession:
    """Tracks one joystick's drag and reports vectors to the controller.

    ``on_move(source, vector)`` fires on every sample while dragging, with no
    de-duplication. ``on_stop(source)`` fires once on release, after the
    vector has been reset to zero.
    """

    def __init__(self, source: Source, on_move=None, on_stop=None, mapper=map_pointer):
        self.source = source
        self.state = DragState()
        self._on_move = on_move
        self._on_stop = on_stop
        self._map = mapper

    @property
    def dragging(self) -> bool:
        return self.state.active

    @property
    def vector(self) -> Vector2:
        return self.state.current_vector

    def owns(self, pointer_id) -> bool:
        return self.state.active and self.state.pointer_id == pointer_id

    def start(self, event: PointerEvent, geometry) -> bool:
        if self.state.active:
            LOG.debug("%s: start from %r ignored, already dragging with %r",
                      self.source.value, event.pointer_id, self.state.pointer_id)
            return False
        vec = self._map(event.client_x, event.client_y, geometry)
        if vec is None:
            return False
        self.state.active = True
        self.state.pointer_id = event.pointer_id
        LOG.debug("%s: drag started by %r", self.source.value, event.pointer_id)
        self._update(vec)
        return True

    def move(self, event: PointerEvent, geometry) -> bool:
        if not self.state.active:
            return False
        if event.pointer_id != self.state.pointer_id:
            return False
        vec = self._map(event.client_x, event.client_y, geometry)
        if vec is None:
            return False
        self._update(vec)
        return True

    def end(self, event: PointerEvent = None) -> bool:
        if not self.state.active:
            return False
        if event is not None and event.pointer_id != self.state.pointer_id:
            return False
        self.state.active = False
        self.state.pointer_id = None
        self.state.current_vector = Vector2.ZERO
        LOG.debug("%s: drag ended", self.source.value)
        if self._on_stop:
            self._on_stop(self.source)
        return True

    def _update(self, vec: Vector2):
        # state first so readers see the new vector inside the callback
        self.state.current_vector = vec
        if self._on_move:
            self._on_move(self.source, vec)
