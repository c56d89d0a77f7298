"""
Logger handles with correlation IDs and structured context.

A SavantLogger is built explicitly by whoever needs one and lives as long as
its owner; nothing here caches handles by name or type.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4

# Keyword arguments the stdlib logger understands; everything else is context.
_LOGGING_KWARGS = ("exc_info", "stack_info", "stacklevel")


class SavantLogger(logging.LoggerAdapter):
    """Adapter attaching a correlation ID and key/value context to records.

    Extra keyword arguments to the logging calls become per-call context:

        logger.info("retrying", attempt=2)
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        super().__init__(logging.getLogger(name), {})
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    def process(self, msg, kwargs):
        passthrough = {key: kwargs.pop(key) for key in _LOGGING_KWARGS if key in kwargs}
        context = {**self.extra_context, **kwargs}

        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        if context:
            extra["extra_context"] = context
        return msg, {**passthrough, "extra": extra}

    def add_context(self, **kwargs):
        """Add persistent context to this logger."""
        self.extra_context.update(kwargs)

    def clear_context(self):
        self.extra_context.clear()

    def with_context(self, **kwargs) -> "SavantLogger":
        """Copy sharing the correlation ID, with additional context."""
        child = SavantLogger(self.logger.name, self.correlation_id)
        child.extra_context = {**self.extra_context, **kwargs}
        return child
