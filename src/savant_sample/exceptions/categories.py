"""
Test category exceptions.

Raised while registering categories or resolving the ones a run selects.
"""

from typing import Any, Iterable

from .base import SavantError


class CategoryError(SavantError):
    """Base class for test category errors."""
    pass


class InvalidCategoryError(CategoryError):
    """Raised when a category name is empty or not a string."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(
            f"Invalid test category: {name!r}",
            help_text="Category names must be non-empty strings, e.g. 'Unit'",
            error_code="CATEGORY_INVALID",
        )


class UnknownCategoryError(CategoryError):
    """Raised when a run selects a category nobody registered."""

    def __init__(self, name: str, known: Iterable[str]):
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown test category: '{name}'",
            help_text=f"Known categories: {', '.join(self.known) or 'none'}",
            error_code="CATEGORY_UNKNOWN",
            user_action="Register it in the 'test_categories' ini option or fix the spelling",
        )
