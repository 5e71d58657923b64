"""Log export writer

Writes the controller's JSON log snapshot to a file. The controller decides
what goes in the document; this module only handles the file.
"""
import logging
from pathlib import Path
from typing import Optional

from core.config import EXPORT_FILENAME

LOG = logging.getLogger("petleash.export")


class LogExporter:
    def __init__(self, directory=".", filename: str = EXPORT_FILENAME):
        self.directory = Path(directory)
        self.filename = filename

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    def export(self, controller) -> Optional[Path]:
        """Write the current log; returns the path, or None if nothing was written."""
        document = controller.export()
        if document is None:
            LOG.info("log is empty, export skipped")
            return None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document, encoding="utf-8")
        except OSError:
            LOG.exception("failed to write %s", self.path)
            return None
        LOG.info("exported %d log entries to %s", len(controller.logs()), self.path)
        return self.path
