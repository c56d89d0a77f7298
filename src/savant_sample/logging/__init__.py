"""
Savant Sample Logging Package

- formatters: JSON, plain-text and Rich output tagged with the test case
- loggers: SavantLogger handles carrying correlation IDs and context
- manager: LoggingManager installing and removing handlers
"""

from .formatters import CaseFormatter, StructuredFormatter
from .loggers import SavantLogger
from .manager import LoggingManager, configure_logging

__all__ = [
    "CaseFormatter",
    "LoggingManager",
    "configure_logging",
    "SavantLogger",
    "StructuredFormatter",
]
