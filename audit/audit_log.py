"""
Audit Log Module
Writes one line per registration event to an append-only file
Format: [<timestamp>] <INFO|ERROR>: <message>
"""

import logging
from pathlib import Path
from typing import Optional

import config


class AuditLog:
    """
    File-backed audit trail
    Opened once at construction, flushed after every entry, closed once
    """

    def __init__(self, log_path: Path = config.AUDIT_LOG):
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._handler: Optional[logging.FileHandler] = None

        # Setup logging
        self._setup_logging()

    def _setup_logging(self):
        """Setup audit file logging"""
        # Instance-owned, not registered with getLogger: exactly one handler per log
        self.logger = logging.Logger(config.AUDIT_LOGGER_NAME, logging.INFO)
        self.logger.propagate = False

        handler = logging.FileHandler(
            self.log_path, mode='a', encoding=config.FILE_ENCODING
        )
        formatter = logging.Formatter(
            config.AUDIT_LOG_FORMAT,
            datefmt=config.LOG_DATE_FORMAT
        )
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self._handler = handler

    @property
    def is_open(self) -> bool:
        return self._handler is not None

    def info(self, message: str):
        self.logger.info(message)

    def error(self, message: str):
        self.logger.error(message)

    def close(self):
        """Flush and release the log file"""
        handler = self._handler
        if handler is None:
            return

        self._handler = None
        try:
            handler.flush()
        finally:
            self.logger.removeHandler(handler)
            handler.close()
