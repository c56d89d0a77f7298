"""
Test categories.

A category is a free-form label ("Unit", "Integration", ...) attached to a
collected test through the ``category`` marker:

    @pytest.mark.category("Unit")
    class MyClassTest:
        ...

Labels compare case-insensitively. The registry knows the canonical spelling
and description of every category a run may select, and selection keeps or
drops collected items by the categories they carry.
"""

from typing import Any, Dict, Iterable, List, Sequence, Set, Tuple

from ..exceptions import InvalidCategoryError, UnknownCategoryError

CATEGORY_MARKER = "category"

BUILTIN_CATEGORIES = {
    "Unit": "isolated tests with no external resources",
    "Integration": "tests run in a later phase, possibly against live resources",
}


def normalize_category(name: Any) -> str:
    """Return the lookup key for a category label."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidCategoryError(name)
    return name.strip().casefold()


class CategoryRegistry:
    """Canonical labels and descriptions of the categories a run knows about."""

    def __init__(self, include_builtins: bool = True):
        self._categories: Dict[str, Tuple[str, str]] = {}
        if include_builtins:
            for label, description in BUILTIN_CATEGORIES.items():
                self.register(label, description)

    def __contains__(self, name: Any) -> bool:
        try:
            return normalize_category(name) in self._categories
        except InvalidCategoryError:
            return False

    def __len__(self) -> int:
        return len(self._categories)

    def register(self, label: str, description: str = "") -> str:
        """Register a category, replacing any entry with the same key."""
        key = normalize_category(label)
        self._categories[key] = (label.strip(), description.strip())
        return key

    def register_line(self, line: str) -> str:
        """Register a category from its ``Name: description`` form."""
        label, _, description = line.partition(":")
        return self.register(label, description)

    def resolve(self, name: str) -> str:
        """Canonical label of a registered category."""
        key = normalize_category(name)
        if key not in self._categories:
            raise UnknownCategoryError(name.strip(), self.labels())
        return self._categories[key][0]

    def labels(self) -> List[str]:
        return [label for label, _ in self._categories.values()]

    def marker_lines(self) -> List[str]:
        """Marker declarations in the form pytest's ``markers`` ini accepts."""
        lines = []
        for key, (label, description) in self._categories.items():
            lines.append(f"{key}: {description or label + ' tests'}")
        return lines


def item_categories(item) -> Set[str]:
    """Normalized categories carried by a collected test item.

    Only ``category(...)`` markers on the item and its parents count. Bare
    markers such as ``@pytest.mark.unit`` are ordinary pytest markers and
    do not place a test in a category.
    """
    found = set()
    for marker in item.iter_markers(name=CATEGORY_MARKER):
        for name in marker.args:
            found.add(normalize_category(name))
    return found


def apply_category_markers(items: Iterable, registry: CategoryRegistry) -> None:
    """Mirror each item's categories as bare markers and report properties.

    The bare markers let ``-m unit`` style expressions select by category.
    Only registered categories are mirrored, since only those are declared
    as markers.
    """
    for item in items:
        categories = item_categories(item)
        existing = {marker.name for marker in item.iter_markers()}
        for key in sorted(categories - existing):
            if key in registry:
                item.add_marker(key)
        if categories:
            item.user_properties.append(("categories", ",".join(sorted(categories))))


def select_items(
    items: Sequence,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> Tuple[List, List]:
    """Split items into (selected, deselected) by category, preserving order.

    An item is selected when it carries one of the included categories (or
    nothing is included) and none of the excluded ones.
    """
    include_keys = {normalize_category(name) for name in include}
    exclude_keys = {normalize_category(name) for name in exclude}

    selected, deselected = [], []
    for item in items:
        categories = item_categories(item)
        wanted = not include_keys or bool(categories & include_keys)
        if wanted and not categories & exclude_keys:
            selected.append(item)
        else:
            deselected.append(item)
    return selected, deselected
