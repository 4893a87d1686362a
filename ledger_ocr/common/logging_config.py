"""
Structured logging for ledger-ocr.

Every record is written as one JSON object carrying the service name, the
request id of the API call being served and any keyword fields passed to
the logger:

    logger = get_logger(__name__)
    logger.info("Parsed list", method="list", count=3)

Library modules only call ``get_logger``; ``setup_logging`` is called once by
the entrypoint.
"""
import logging
import json
import os
import datetime
from contextvars import ContextVar
from typing import Any, Dict, Optional

SERVICE_NAME = "ledger-ocr"

# OCR text can be long; string fields are clipped to keep one line per record.
MAX_FIELD_LENGTH = 200

# A ContextVar (not thread-local) so the id set by the API middleware is
# still visible inside endpoints that Starlette runs in its threadpool.
_request_id: ContextVar[str] = ContextVar("request_id", default="GLOBAL")

_RESERVED_KWARGS = {'exc_info', 'stack_info', 'stacklevel', 'extra'}


def _clip(value: Any) -> Any:
    if isinstance(value, str) and len(value) > MAX_FIELD_LENGTH:
        return value[:MAX_FIELD_LENGTH] + "..."
    return value


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line. Non-ASCII text (Polish, Russian) is kept as is.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
            "request_id": _request_id.get(),
        }

        fields = getattr(record, "extra_fields", None)
        if isinstance(fields, dict):
            log_data.update({key: _clip(value) for key, value in fields.items()})

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _parse_level(level) -> int:
    if isinstance(level, int):
        return level
    numeric = getattr(logging, str(level).strip().upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def _json_handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(log_level=logging.INFO, log_file: Optional[str] = None):
    """
    Route the root logger to JSON on stderr and, optionally, a JSON file.

    Args:
        log_level: logging constant or level name ("DEBUG", "info", ...)
        log_file: Path of the log file; its directory is created if missing
    """
    handlers = [_json_handler(logging.StreamHandler())]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(_json_handler(logging.FileHandler(log_file, encoding='utf-8')))

    root_logger = logging.getLogger()
    root_logger.setLevel(_parse_level(log_level))
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    get_logger(__name__).info(
        "Logging configured",
        level=logging.getLevelName(root_logger.level),
        log_file=log_file,
    )


def set_request_id(request_id: str):
    """Bind ``request_id`` to the current request context."""
    _request_id.set(request_id)


def get_request_id() -> str:
    return _request_id.get()


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Turns keyword arguments into ``extra_fields`` of the JSON record.

    ``extra_fields={...}`` may also be passed explicitly; both are merged.
    """
    def process(self, msg: Any, kwargs: Any):
        extra = dict(kwargs.get("extra") or {})
        fields = dict(extra.get("extra_fields") or {})

        passthrough = {}
        for key, value in kwargs.items():
            if key in _RESERVED_KWARGS:
                passthrough[key] = value
            elif key == "extra_fields" and isinstance(value, dict):
                fields.update(value)
            else:
                fields[key] = value

        extra["extra_fields"] = fields
        passthrough["extra"] = extra
        return msg, passthrough


def get_logger(name: str) -> ContextLoggerAdapter:
    """Structured logger for ``name``."""
    return ContextLoggerAdapter(logging.getLogger(name), {})
