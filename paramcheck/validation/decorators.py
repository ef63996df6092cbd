"""
This module contains the parameter-level decorators that attach validation
rules to a method. They only record rules; enforcing them is the job of
``paramcheck.validation.interceptor.validate``.

Example:
::

    >>> positive = build_custom_validator(lambda x: x > 0, "must be positive")
    >>>
    >>> class Account:
    ...     @validate
    ...     @required("owner")
    ...     @positive(1)
    ...     def deposit(self, owner, amount):
    ...         ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from paramcheck.validation.exceptions import ParameterError, SchemaDefinitionError
from paramcheck.validation.schema import Position, SchemaBuilder, ValidateFunc

BUILDER_ATTR = "__paramcheck_schema__"

UnaryPredicate = Callable[[Any], bool]
F = TypeVar("F", bound=Callable[..., Any])


def _schema_builder(target: Any) -> SchemaBuilder:
    if not callable(target):
        raise SchemaDefinitionError(
            f"Validation rules can only decorate callables, "
            f"got {type(target).__name__} instead."
        )
    builder = getattr(target, BUILDER_ATTR, None)
    if builder is None:
        builder = SchemaBuilder()
        setattr(target, BUILDER_ATTR, builder)
    return builder


def _flush(target: Any) -> None:
    # Registrars stacked above ``@validate`` receive the interceptor itself.
    flush = getattr(target, "flush", None)
    if flush is not None:
        flush()


def required(position: Position) -> Callable[[F], F]:
    """Mark a parameter as required.

    A required parameter must be passed, and must not be ``None`` unless the
    ``NONE_IS_MISSING`` setting is turned off.

    Args:
        position: Zero-based position of the parameter, not counting ``self``,
            or the parameter name.

    Returns:
        A decorator returning the decorated function unchanged.

    Raises:
        SchemaDefinitionError: When ``position`` can never refer to a parameter.
    """

    def _required(func: F) -> F:
        _schema_builder(func).add_required(position)
        _flush(func)
        return func

    return _required


def custom_validator(
    position: Position, check: ValidateFunc, message: str
) -> Callable[[F], F]:
    """Attach a check to a parameter.

    Args:
        position: Zero-based position of the parameter, not counting ``self``,
            or the parameter name.
        check: Function taking the argument and raising ``ParameterError``
            when it is invalid.
        message: Description of the rule, reported when the check fails.

    Returns:
        A decorator returning the decorated function unchanged.
    """

    def _custom_validator(func: F) -> F:
        _schema_builder(func).add_validator(position, check, message)
        _flush(func)
        return func

    return _custom_validator


def predicate_wrapper(predicate: UnaryPredicate) -> ValidateFunc:
    """Turn a boolean predicate into a check raising an empty ``ParameterError``."""

    def _check(arg: Any) -> None:
        if not predicate(arg):
            raise ParameterError()

    return _check


def build_custom_validator(
    predicate: UnaryPredicate, message: str
) -> Callable[[Position], Callable[[F], F]]:
    """Build a reusable parameter rule out of a predicate.

    Args:
        predicate: Function receiving the argument and returning whether it
            is valid.
        message: Description of the rule, reported when the predicate fails.

    Returns:
        A factory taking a parameter position and returning the decorator
        that attaches the rule to it.
    """

    def _factory(position: Position) -> Callable[[F], F]:
        return custom_validator(position, predicate_wrapper(predicate), message)

    return _factory
