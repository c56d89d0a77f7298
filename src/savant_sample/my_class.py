"""Placeholder object exercised by the category fixtures."""


class MyClass:
    """Stateless placeholder with a single no-op operation."""

    def testable(self) -> None:
        """Perform no work."""
        return None
