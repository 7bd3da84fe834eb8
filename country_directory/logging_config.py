"""
Configuration du logging / Logging configuration.

Console lisible en developpement, JSON structure en production ; chaque ligne
porte l'identifiant de requete (X-Request-ID) courant.
Readable console in development, structured JSON in production; each line
carries the current request id (X-Request-ID).
"""

import json
import logging
from contextvars import ContextVar

request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get()
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configurer le logger racine une seule fois / Configure the root logger once."""
    root = logging.getLogger()
    if any(isinstance(f, RequestIDFilter) for h in root.handlers for f in h.filters):
        return

    handler = logging.StreamHandler()
    handler.addFilter(RequestIDFilter())
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
