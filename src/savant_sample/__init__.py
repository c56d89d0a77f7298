"""
Savant Sample: category-tagged test fixtures

A placeholder class exercised by a "Unit" and an "Integration" test case,
plus the pytest plugin that lets a run select either phase by category.

Architecture Overview:
- my_class: The placeholder object under test
- testing: Category registry and the pytest plugin built on it
- config: Pydantic configuration with TOML and environment overrides
- logging: Explicitly constructed logging handles and handler setup
- exceptions: Error hierarchy shared by the packages above
"""

__version__ = "0.1.0"

from .exceptions import SavantError
from .my_class import MyClass

__all__ = [
    "MyClass",
    "SavantError",
]
