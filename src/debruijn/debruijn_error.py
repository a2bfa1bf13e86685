"""Custom exceptions for de Bruijn expression printing."""

from typing import Any

from debruijn.debruijn_location import DeBruijnLocation


class DeBruijnError(Exception):
    """Base exception for de Bruijn printing operations."""

    kind = "Error"

    def __init__(
        self,
        message: str,
        error_details: dict[str, Any] | None = None,
        location: DeBruijnLocation | None = None
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
            location: Source location the error relates to, or None if unknown
        """
        super().__init__(message)
        self.error_details = error_details
        self.location = location


class DeBruijnNameLookupError(DeBruijnError):
    """Raised when a variable index has no entry in the naming context."""

    kind = "Name lookup error"

    def __init__(self, index: int, context_size: int, location: DeBruijnLocation | None = None):
        """
        Initialize the exception.

        Args:
            index: The de Bruijn index that could not be resolved
            context_size: Number of names available in the naming context
            location: Source location of the variable, if known
        """
        super().__init__(
            f"Variable index {index} is outside a naming context of {context_size} names",
            {'index': index, 'context_size': context_size},
            location
        )


class DeBruijnSubstitutionError(DeBruijnError):
    """Raised when a pending substitution cannot be forced."""

    kind = "Substitution error"


class DeBruijnFormatterError(DeBruijnError):
    """Raised when the output formatter is used inconsistently (e.g. unbalanced groups)."""

    kind = "Formatter error"
