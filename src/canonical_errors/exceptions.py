"""
Failures raised when a problem document cannot be turned back into a
canonical error.

All three kinds are terminal and purely diagnostic: none describes a
transient condition and none is retried by the library.
"""

from __future__ import annotations


class ProblemConversionError(ValueError):
    """Base class for problem -> canonical error conversion failures."""


class InvalidProblemTypeError(ProblemConversionError):
    """The ``type`` URI does not have the expected prefix and suffix."""

    def __init__(self, problem_type: str) -> None:
        self.problem_type = problem_type
        super().__init__(f"invalid GTS type URI: {problem_type}")


class UnknownCategoryError(ProblemConversionError):
    """The category extracted from the ``type`` URI is not a known category."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"unknown canonical error category: {category}")


class ContextDeserializationError(ProblemConversionError):
    """
    The ``context`` (or ``debug``) value does not match the shape bound to
    the category. The underlying validation error is chained as ``__cause__``.
    """

    def __init__(self, category: str, source: Exception) -> None:
        self.category = category
        self.source = source
        super().__init__(f"failed to deserialize context for {category}: {source}")
