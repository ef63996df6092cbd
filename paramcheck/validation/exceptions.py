"""Custom exceptions for the validation framework."""

from __future__ import annotations


class ParameterError(Exception):
    """Raised when the arguments of a validated method break its rules.

    A single instance aggregates every violation found during one call, so
    ``parameter_indexes`` and ``detail`` are index-aligned: ``detail[i]``
    describes the failure at position ``parameter_indexes[i]``.
    """

    def __init__(
        self,
        message: str = "",
        method: str = "",
        parameter_indexes: list[int] | None = None,
        detail: list[str] | None = None,
    ):
        """Initialize parameter error.

        Args:
            message: Error message
            method: Name of the method the failure originated from
            parameter_indexes: Positions of the offending parameters
            detail: Human-readable description of each violation
        """
        super().__init__(message)
        self.message = message
        self.method = method
        self.parameter_indexes = list(parameter_indexes or [])
        self.detail = list(detail or [])

    def extend(self, parameter_index: int, detail: str) -> None:
        """Record one more violation on this error."""
        self.parameter_indexes.append(parameter_index)
        self.detail.append(detail)

    def __reduce__(self) -> tuple:
        return (
            type(self),
            (self.message, self.method, self.parameter_indexes, self.detail),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, method={self.method!r}, "
            f"parameter_indexes={self.parameter_indexes!r}, detail={self.detail!r})"
        )


class SchemaDefinitionError(ValueError):
    """Raised when validation rules are declared incorrectly."""

    pass
