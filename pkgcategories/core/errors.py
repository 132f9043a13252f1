"""
Domain errors for category metadata.

Raised synchronously at annotation time (``InvalidCategories``), on
registry lookups (``UnknownCategory``), and by the query CLI when a
required flag argument is missing (``MissingArgument``).
"""

from __future__ import annotations


class CategoryError(Exception):
    """Base class for all category metadata errors."""


class UnknownCategory(CategoryError):
    """Raised when a registry lookup is given an identifier it doesn't know."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Unknown category: {category}")


class InvalidCategories(CategoryError):
    """Raised when one or more requested category identifiers are invalid.

    ``categories`` holds every offending identifier (distinct values,
    in first-occurrence order), not just the first one.
    """

    def __init__(self, categories: list[str]) -> None:
        self.categories = list(categories)
        super().__init__(f"Invalid categories: {', '.join(self.categories)}")


class MissingArgument(CategoryError):
    """Raised when a CLI flag that requires a value was given none."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"{flag} requires an argument")
