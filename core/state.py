"""State models and lightweight DTOs"""
import enum
import math
from dataclasses import dataclass
from typing import Any, Optional


class Source(enum.Enum):
    LEFT = "Left"
    RIGHT = "Right"


class PointerKind(enum.Enum):
    START = "start"
    MOVE = "move"
    END = "end"


MOUSE_POINTER = "mouse"


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0  # -1..1, right positive
    y: float = 0.0  # -1..1, up positive

    @property
    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    @property
    def norm(self) -> float:
        return math.hypot(self.x, self.y)


Vector2.ZERO = Vector2(0.0, 0.0)


@dataclass
class DragState:
    active: bool = False
    current_vector: Vector2 = Vector2.ZERO
    pointer_id: Any = None


@dataclass(frozen=True)
class LogEntry:
    id: int
    timestamp: str
    source: Source
    vector: Vector2

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "source": self.source.value,
            "x": self.vector.x,
            "y": self.vector.y,
        }


@dataclass
class ThrottleWindow:
    pending: bool = False
    deadline: Optional[float] = None  # clock seconds at which the window closes


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    client_x: Optional[float] = None
    client_y: Optional[float] = None
    pointer_id: Any = MOUSE_POINTER

    @property
    def has_coordinates(self) -> bool:
        return self.client_x is not None and self.client_y is not None


@dataclass(frozen=True)
class JoystickGeometry:
    center_x: float
    center_y: float
    container_size: float = 160.0
    knob_size: float = 64.0

    @property
    def radius(self) -> float:
        """Maximum knob travel from the center, in pixels."""
        return self.container_size / 2 - self.knob_size / 2

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.center_x, y - self.center_y) <= self.container_size / 2

    @classmethod
    def from_rect(cls, left: float, top: float, width: float, height: float, knob_size: float = 64.0):
        return cls(left + width / 2, top + height / 2, min(width, height), knob_size)
