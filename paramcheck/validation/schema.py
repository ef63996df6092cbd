"""Data model of the validation rules attached to a method."""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable
from typing import Any, NamedTuple, Union

from paramcheck.validation.exceptions import SchemaDefinitionError

Position = Union[int, str]

ValidateFunc = Callable[[Any], None]

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class CustomValidator(NamedTuple):
    """A check bound to one parameter position, with its failure message."""

    position: int
    check: ValidateFunc
    message: str


@dataclasses.dataclass(frozen=True)
class ValidationSchema:
    """The accumulated rules of one method.

    Both fields are ``None`` until a rule of that kind is registered, so a
    schema holding only custom validators skips the required check entirely.
    """

    required_parameters: tuple[int, ...] | None = None
    custom_validators: tuple[CustomValidator, ...] | None = None

    def with_required(self, position: int) -> ValidationSchema:
        """Return a copy with ``position`` prepended to the required positions."""
        return dataclasses.replace(
            self, required_parameters=(position, *(self.required_parameters or ()))
        )

    def with_validator(self, validator: CustomValidator) -> ValidationSchema:
        """Return a copy with ``validator`` prepended to the custom validators."""
        return dataclasses.replace(
            self, custom_validators=(validator, *(self.custom_validators or ()))
        )


def check_position(position: Any) -> Position:
    """Reject positions that can never refer to a parameter."""
    if isinstance(position, bool) or not isinstance(position, (int, str)):
        raise SchemaDefinitionError(
            f"Parameter position must be an int or a parameter name, "
            f"got {type(position).__name__} instead."
        )
    if isinstance(position, int) and position < 0:
        raise SchemaDefinitionError(
            f"Parameter position must be non-negative, got {position}."
        )
    return position


class SchemaBuilder:
    """Collects the rules declared on a function until its owner is known.

    Decorators run before the class body is finished, so the registrars
    cannot key their rules by the owning type yet. They record them here
    instead, and the interceptor replays them into the registry, in
    application order, once ``__set_name__`` reveals the owner.
    """

    def __init__(self) -> None:
        self._pending: list[tuple[Position, ValidateFunc | None, str | None]] = []

    def add_required(self, position: Position) -> None:
        self._pending.append((check_position(position), None, None))

    def add_validator(
        self, position: Position, check: ValidateFunc, message: str
    ) -> None:
        self._pending.append((check_position(position), check, message))

    def __bool__(self) -> bool:
        return bool(self._pending)

    def clear(self) -> None:
        self._pending.clear()

    def registrations(
        self, signature: inspect.Signature, skip_receiver: bool
    ) -> list[int | CustomValidator]:
        """Resolve the recorded rules against ``signature``.

        Returns:
            Required positions (plain ints) and ``CustomValidator`` tuples, in
            the order the decorators were applied.

        Raises:
            SchemaDefinitionError: When a parameter name is not in the signature.
        """
        names = _parameter_names(signature, skip_receiver)
        resolved: list[int | CustomValidator] = []
        for position, check, message in self._pending:
            index = _resolve(position, names)
            if check is None:
                resolved.append(index)
            else:
                resolved.append(CustomValidator(index, check, message or ""))
        return resolved


def _parameter_names(signature: inspect.Signature, skip_receiver: bool) -> list[str]:
    params = [
        param
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL_KINDS
    ]
    if skip_receiver:
        params = params[1:]
    return [param.name for param in params]


def _resolve(position: Position, names: list[str]) -> int:
    if isinstance(position, int):
        return position
    try:
        return names.index(position)
    except ValueError:
        raise SchemaDefinitionError(
            f"Unknown parameter '{position}'. Available parameters: {names}"
        ) from None
