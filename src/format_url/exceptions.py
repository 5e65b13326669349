"""Custom exception types for format_url.

Malformed but well-typed input never raises: unresolved placeholders simply
remain visible in the produced URL. Type errors in arguments are reported
with the built-in ``TypeError``. The only custom exception is:

- ``BuilderConsumedError``: a builder was used after ``format_url()``.
"""

from __future__ import annotations


class BuilderConsumedError(RuntimeError):
    """A FormatUrl builder was used after it had been finalized.

    Builders are single-use: ``format_url()`` consumes the builder, and any
    later modification or finalization attempt raises this error.

    Args:
        operation: Name of the method that was called on the consumed builder.

    Attributes:
        operation: Name of the method that was called on the consumed builder.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"cannot call {operation}() on a FormatUrl builder "
            f"that has already been consumed by format_url()")
        self.operation = operation
