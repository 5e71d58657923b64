"""Base input reader abstraction"""
import abc


class InputReader(abc.ABC):
    """Turns host input events into PointerEvent DTOs for subscribers."""

    @abc.abstractmethod
    def handle(self, raw_event):
        raise NotImplementedError

    @abc.abstractmethod
    def subscribe(self, callback):
        raise NotImplementedError
