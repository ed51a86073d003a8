"""Structured logging configuration.

Provides JSON log formatting when ENABLE_JSON_LOGS=1 (default), otherwise a
concise human formatter. Fields: timestamp, level, msg, logger, request_id,
path, method, status, duration_ms, location_id.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import uuid
from time import time

_EXTRA_FIELDS = ("request_id", "path", "method", "status", "duration_ms", "location_id")


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - formatting
        base = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        for attr in _EXTRA_FIELDS:
            if hasattr(record, attr):
                base[attr] = getattr(record, attr)
        if record.exc_info:
            base["exc_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
        return json.dumps(base, ensure_ascii=False)


class _PlainFormatter(logging.Formatter):  # pragma: no cover - formatting
    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self.formatTime(record, datefmt="%H:%M:%S"),
            record.levelname[0],
            record.name + ":",
            record.getMessage(),
        ]
        if hasattr(record, "request_id"):
            parts.append(f"rid={getattr(record, 'request_id')}")
        if hasattr(record, "path"):
            parts.append(f"path={getattr(record, 'path')}")
        if hasattr(record, "status"):
            parts.append(f"status={getattr(record, 'status')}")
        if hasattr(record, "location_id"):
            parts.append(f"loc={getattr(record, 'location_id')}")
        return " ".join(parts)


def configure_logging() -> None:
    if getattr(configure_logging, "_configured", False):  # idempotent
        return
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    json_enabled = os.getenv("ENABLE_JSON_LOGS", "1") == "1"
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):  # remove uvicorn's default handlers for consistency
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter() if json_enabled else _PlainFormatter())
    root.addHandler(handler)
    configure_logging._configured = True  # type: ignore[attr-defined]


async def logging_middleware(request, call_next):
    rid = uuid.uuid4().hex[:8]
    start = time()
    request.state.request_id = rid
    logger = logging.getLogger("request")
    logger.info("request.start", extra={"request_id": rid, "path": request.url.path, "method": request.method})
    status = None
    try:
        response = await call_next(request)
        status = response.status_code
        return response
    finally:
        dur = (time() - start) * 1000.0
        logger.info(
            "request.end",
            extra={
                "request_id": rid,
                "path": request.url.path,
                "method": request.method,
                "status": status,
                "duration_ms": round(dur, 2),
            },
        )
