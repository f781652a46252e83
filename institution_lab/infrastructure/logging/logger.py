"""
Structured logging for lab runs.

Every record is one JSON object. Context passed as keyword arguments may hold
institutions, search results or lists of them; they are written through their
``to_dict`` form so a log line shows the same fields the entity validates.
"""

import logging
import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from institution_lab.domain.models.configuration import LabConfiguration


def _to_json(value: Any) -> Any:
    """JSON fallback for context values the encoder does not know."""
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return str(value)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for lab log records."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': getattr(record, 'timestamp', datetime.now().isoformat()),
            'level': record.levelname,
            'component': getattr(record, 'component', 'unknown'),
            'message': record.getMessage(),
            'logger': record.name,
        }

        context = getattr(record, 'context', {})
        if context:
            log_data['context'] = context

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=_to_json)


class StructuredLogger:
    """Keyword-context logger writing JSON lines to a stream and optional file.

    The stream defaults to ``sys.stderr`` (resolved when the handler is built),
    which keeps the report on stdout free of log lines.
    """

    def __init__(self, name: str, level: str = "WARNING", log_file: Optional[str] = None,
                 stream: Optional[TextIO] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.propagate = False
        self.logger.handlers.clear()

        formatter = StructuredFormatter()
        handlers: List[logging.Handler] = [logging.StreamHandler(stream)]

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)

    def close(self) -> None:
        """Flush and release handlers once the run is over."""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        self.logger.log(level, message, extra={
            'context': context,
            'timestamp': datetime.now().isoformat(),
            'component': context.get('component', 'unknown'),
        })


class LoggerFactory:
    """Builds the run's logger from configuration."""

    ROOT_NAME = "institution_lab"

    @classmethod
    def create_logger(cls, level: str = "WARNING", stream: Optional[TextIO] = None) -> StructuredLogger:
        """Logger used before the configuration is known."""
        return StructuredLogger(cls.ROOT_NAME, level, stream=stream)

    @classmethod
    def from_configuration(cls, config: LabConfiguration,
                           stream: Optional[TextIO] = None) -> StructuredLogger:
        """Logger honouring ``log_level`` and either ``log_file`` or ``log_dir``.

        With ``log_dir`` set the file is ``<log_dir>/lab.log``; an explicit
        ``log_file`` wins over it.
        """
        log_file = config.log_file
        if log_file is None and config.log_dir:
            log_file = str(Path(config.log_dir) / "lab.log")

        return StructuredLogger(cls.ROOT_NAME, config.log_level, log_file, stream)

