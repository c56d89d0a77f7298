"""
Formatters that tag each record with the test case it came from.

Records emitted through a ``case_logger`` carry the test node id and its
categories in ``extra_context``; both formatters lift those out so a log line
can be traced back to a single test.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s%(case)s: %(message)s"


def split_case_context(record: logging.LogRecord) -> Tuple[Any, Any, Dict[str, Any]]:
    """Return (test, categories, remaining context) for a record."""
    context = dict(getattr(record, "extra_context", {}))
    return context.pop("test", None), context.pop("categories", None), context


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, service_name: str, version: str):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        test, categories, context = split_case_context(record)
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
        }
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id
        if test is not None:
            entry["test"] = test
        if categories is not None:
            entry["categories"] = list(categories)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class CaseFormatter(logging.Formatter):
    """Plain-text formatter exposing ``%(case)s``: `` [node id (categories)]``."""

    def __init__(self, fmt: str = CONSOLE_FORMAT, datefmt: str = "%Y-%m-%d %H:%M:%S"):
        super().__init__(fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        test, categories, _ = split_case_context(record)
        record.case = ""
        if test is not None:
            tag = test
            if categories:
                tag += f" ({', '.join(categories)})"
            record.case = f" [{tag}]"
        return super().format(record)


def create_rich_handler() -> logging.Handler:
    """Rich terminal handler; Rich renders time, level and path itself."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=True,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(CaseFormatter("%(message)s%(case)s"))
    return handler
