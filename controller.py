"""Controller: two joystick sessions -> throttle -> bounded log"""
import logging
import time
from datetime import datetime
from typing import Dict, List, Optional

from core.state import JoystickGeometry, LogEntry, PointerEvent, PointerKind, Source, ThrottleWindow, Vector2
from pipeline.logstore import DEFAULT_CAPACITY, LogStore
from pipeline.throttle import DEFAULT_WINDOW_S, EventThrottle
from session import JoystickSession

LOG = logging.getLogger("petleash.controller")


def wall_timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


class Controller:
    """Owns both joysticks, their throttle windows and the shared log.

    Live vectors update on every sample; the log only sees what the throttle
    admits, plus the zero entry when a moving joystick is released.
    """

    def __init__(self, window_s: float = DEFAULT_WINDOW_S, capacity: int = DEFAULT_CAPACITY,
                 clock=time.monotonic, timestamp=wall_timestamp):
        self.windows: Dict[Source, ThrottleWindow] = {s: ThrottleWindow() for s in Source}
        self.throttle = EventThrottle(self.windows, window_s=window_s, clock=clock)
        self.store = LogStore(capacity)
        self.sessions: Dict[Source, JoystickSession] = {
            s: JoystickSession(s, on_move=self._on_move, on_stop=self._on_stop) for s in Source
        }
        self.geometry: Dict[Source, Optional[JoystickGeometry]] = {s: None for s in Source}
        self._live: Dict[Source, Vector2] = {s: Vector2.ZERO for s in Source}
        self._timestamp = timestamp

    @classmethod
    def from_config(cls, cfg, **kwargs):
        return cls(window_s=cfg.window_s, capacity=cfg.log_capacity, **kwargs)

    # -- presentation layer inputs --------------------------------------

    def set_geometry(self, source: Source, geometry: Optional[JoystickGeometry]):
        self.geometry[source] = geometry

    def start(self, source: Source, event: PointerEvent) -> bool:
        return self.sessions[source].start(event, self.geometry[source])

    def move(self, source: Source, event: PointerEvent) -> bool:
        return self.sessions[source].move(event, self.geometry[source])

    def end(self, source: Source, event: PointerEvent = None) -> bool:
        return self.sessions[source].end(event)

    def dispatch(self, event: PointerEvent) -> bool:
        """Route a raw pointer event to the joystick(s) it belongs to."""
        handled = False
        try:
            if event.kind is PointerKind.START:
                if not event.has_coordinates:
                    LOG.debug("start without coordinates ignored")
                    return False
                for source, geom in self.geometry.items():
                    if geom is not None and geom.contains(event.client_x, event.client_y):
                        return self.start(source, event)
                return False
            for source, session in self.sessions.items():
                if not session.owns(event.pointer_id):
                    continue
                if event.kind is PointerKind.MOVE:
                    handled = self.move(source, event) or handled
                elif event.kind is PointerKind.END:
                    handled = self.end(source, event) or handled
        except Exception:
            LOG.exception("error handling pointer event %s", event)
        return handled

    def tick(self):
        """Close throttle windows whose time is up."""
        self.throttle.expire()

    # -- outputs ---------------------------------------------------------

    def vector(self, source: Source) -> Vector2:
        return self._live[source]

    def vectors(self) -> Dict[Source, Vector2]:
        return dict(self._live)

    def logs(self) -> List[LogEntry]:
        return self.store.entries()

    @property
    def can_export(self) -> bool:
        return len(self.store) > 0

    def export(self) -> Optional[str]:
        if not self.can_export:
            LOG.debug("export requested with empty log, nothing to do")
            return None
        return self.store.to_json()

    # -- session callbacks -----------------------------------------------

    def _on_move(self, source: Source, vector: Vector2):
        self._live[source] = vector
        if self.throttle.admit(source, vector):
            self.store.record(source, vector, self._timestamp())

    def _on_stop(self, source: Source):
        if not self._live[source].is_zero:
            self.store.record(source, Vector2.ZERO, self._timestamp())
        self.throttle.cancel(source)
        self._live[source] = Vector2.ZERO
        LOG.info("%s joystick released", source.value)
