"""
Test category support.

- categories: Category registry and category-based item selection
- plugin: Pytest hooks, command-line options and the case_logger fixture
"""

from .categories import (
    BUILTIN_CATEGORIES,
    CATEGORY_MARKER,
    CategoryRegistry,
    apply_category_markers,
    item_categories,
    normalize_category,
    select_items,
)

__all__ = [
    "BUILTIN_CATEGORIES",
    "CATEGORY_MARKER",
    "CategoryRegistry",
    "apply_category_markers",
    "item_categories",
    "normalize_category",
    "select_items",
]
