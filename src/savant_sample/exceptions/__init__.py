"""
Savant Sample exception hierarchy.

- base: SavantError
- config: Configuration loading and validation errors
- categories: Test category registration and selection errors
"""

from .base import SavantError
from .categories import CategoryError, InvalidCategoryError, UnknownCategoryError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

__all__ = [
    "SavantError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    "CategoryError",
    "InvalidCategoryError",
    "UnknownCategoryError",
]
