"""Profile loading: YAML file -> LeashConfig"""
import logging
from dataclasses import dataclass

import yaml

LOG = logging.getLogger("petleash.config")

EXPORT_FILENAME = "ai-pet-leash-logs.json"

_KNOWN = {
    "joystick": {"container_size", "knob_size"},
    "throttle": {"window_ms"},
    "log": {"capacity"},
    "export": {"filename", "directory"},
    "display": {"width", "height", "hz"},
}


@dataclass
class LeashConfig:
    container_size: float = 160.0
    knob_size: float = 64.0
    window_ms: int = 250
    log_capacity: int = 10
    export_filename: str = EXPORT_FILENAME
    export_directory: str = "."
    width: int = 900
    height: int = 520
    hz: int = 60

    @property
    def radius(self) -> float:
        return self.container_size / 2 - self.knob_size / 2

    @property
    def window_s(self) -> float:
        return self.window_ms / 1000.0

    def validate(self):
        if self.container_size <= 0 or self.knob_size <= 0:
            raise ValueError("joystick sizes must be positive")
        if self.knob_size >= self.container_size:
            raise ValueError(
                f"knob_size ({self.knob_size}) must be smaller than container_size ({self.container_size})")
        if self.window_ms <= 0:
            raise ValueError(f"throttle.window_ms must be positive, got {self.window_ms}")
        if self.log_capacity <= 0:
            raise ValueError(f"log.capacity must be positive, got {self.log_capacity}")
        if self.hz <= 0:
            raise ValueError(f"display.hz must be positive, got {self.hz}")
        if not self.export_filename:
            raise ValueError("export.filename must not be empty")

    @classmethod
    def from_profile(cls, profile: dict):
        profile = profile or {}
        for section, values in profile.items():
            known = _KNOWN.get(section)
            if known is None:
                LOG.debug("ignoring unknown profile section %r", section)
                continue
            for key in (values or {}):
                if key not in known:
                    LOG.debug("ignoring unknown profile key %s.%s", section, key)

        joystick = profile.get("joystick") or {}
        throttle = profile.get("throttle") or {}
        log = profile.get("log") or {}
        export = profile.get("export") or {}
        display = profile.get("display") or {}
        defaults = cls()
        cfg = cls(
            container_size=float(joystick.get("container_size", defaults.container_size)),
            knob_size=float(joystick.get("knob_size", defaults.knob_size)),
            window_ms=int(throttle.get("window_ms", defaults.window_ms)),
            log_capacity=int(log.get("capacity", defaults.log_capacity)),
            export_filename=str(export.get("filename", defaults.export_filename)),
            export_directory=str(export.get("directory", defaults.export_directory)),
            width=int(display.get("width", defaults.width)),
            height=int(display.get("height", defaults.height)),
            hz=int(display.get("hz", defaults.hz)),
        )
        cfg.validate()
        return cfg

    @classmethod
    def load_profile(cls, path: str):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        LOG.info("loaded profile %s", path)
        return cls.from_profile(data)
