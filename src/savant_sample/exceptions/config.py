"""
Errors raised while reading or validating configuration.
"""

from typing import Any, List, Optional

from .base import SavantError


class ConfigurationError(SavantError):
    """Configuration could not be read or written."""

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: str = "CONFIG_ERROR",
        **context: Any,
    ):
        super().__init__(message, help_text=help_text, error_code=error_code, **context)


class InvalidConfigurationError(ConfigurationError):
    """A configuration source holds something that cannot be parsed."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid configuration for '{field}': got {value!r}, expected {expected}",
            help_text=f"Make '{field}' {expected}",
            error_code="CONFIG_INVALID",
        )


class ConfigurationValidationError(ConfigurationError):
    """Parsed configuration failed model validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "\n  - ".join(["Configuration validation failed:", *errors])
        super().__init__(
            message,
            help_text=(
                "Fix the entries above in the configuration file "
                "or the SAVANT_* environment variables"
            ),
            error_code="CONFIG_VALIDATION",
        )
