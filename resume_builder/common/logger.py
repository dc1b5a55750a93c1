"""
Logging setup and request-scoped loggers for the resume builder.

get_logger() wraps a module logger so every line carries the request and
component it belongs to:

    [req:1f3a9c0d] [render] Rendered resume (4210 chars)

DEBUG_MODE=true forces DEBUG level when setup_logging() runs.
"""

import logging
import os
import sys
from typing import Optional

SIMPLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with request and component tags."""

    def __init__(self, logger: logging.Logger, request_id: Optional[str] = None, component: Optional[str] = None):
        super().__init__(logger, {"request_id": request_id, "component": component})

    @property
    def prefix(self) -> str:
        tags = []
        if self.extra["request_id"]:
            tags.append(f"[req:{self.extra['request_id'][:8]}]")
        if self.extra["component"]:
            tags.append(f"[{self.extra['component']}]")
        return " ".join(tags)

    def process(self, msg, kwargs):
        prefix = self.prefix
        return (f"{prefix} {msg}" if prefix else msg), kwargs


def get_logger(name: str, request_id: Optional[str] = None, component: Optional[str] = None) -> ContextLogger:
    """
    Args:
        name: Logger name (usually __name__)
        request_id: Request identifier; only the first 8 characters are shown
        component: Short component tag such as "api", "generation" or "render"
    """
    return ContextLogger(logging.getLogger(name), request_id, component)


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Replace the root handlers with a single stdout handler.

    Args:
        level: Log level name; ignored when DEBUG_MODE=true
        format: "simple" or "json" (one JSON object per line)
    """
    if os.getenv("DEBUG_MODE", "false").lower() == "true":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if format == "json":
        handler.setFormatter(logging.Formatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(log_level)
