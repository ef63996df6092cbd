"""This module contains the ``validate`` decorator, which enforces the rules
declared with the parameter decorators before the decorated method runs.
"""

from __future__ import annotations

import functools
import inspect
import logging
import types
from collections.abc import Callable, Sequence
from typing import Any

from paramcheck.config import settings
from paramcheck.utils import _func_full_name, try_catch_exception
from paramcheck.validation.decorators import BUILDER_ATTR
from paramcheck.validation.exceptions import ParameterError, SchemaDefinitionError
from paramcheck.validation.schema import (
    CustomValidator,
    SchemaBuilder,
    ValidationSchema,
)
from paramcheck.validation.store import SchemaRegistry
from paramcheck.validation.store import registry as default_registry

logger = logging.getLogger(__name__)

_UNDEFINED = object()


def _is_missing(value: Any) -> bool:
    return value is _UNDEFINED or (value is None and settings.NONE_IS_MISSING)


def _validate_required(required_parameters: Sequence[int], arguments: list) -> None:
    missing_indexes = [
        index
        for index in required_parameters
        if index >= len(arguments) or _is_missing(arguments[index])
    ]
    if missing_indexes:
        raise ParameterError(
            "missing required parameters",
            parameter_indexes=missing_indexes,
            detail=[
                f"Position parameter {index} must be provided"
                for index in missing_indexes
            ],
        )


def _is_plain_function(func: Callable) -> bool:
    owner_path, _, _ = getattr(func, "__qualname__", "").rpartition(".")
    return not owner_path or owner_path.endswith("<locals>")


class ValidatedMethod:
    """Wraps a function so that its validation schema is checked on every call.

    Instances are descriptors: accessed on an instance they bind like a
    regular method, and ``__set_name__`` registers the recorded rules under
    the owning class once the class body has been executed.
    """

    def __init__(self, func: Callable, registry: SchemaRegistry | None = None):
        if not callable(func):
            raise SchemaDefinitionError(
                f"'validate' can only decorate callables, "
                f"got {type(func).__name__} instead."
            )
        functools.update_wrapper(self, func)
        self._registry = default_registry if registry is None else registry
        self._signature = inspect.signature(func)
        builder = getattr(func, BUILDER_ATTR, None)
        self._builder: SchemaBuilder = SchemaBuilder() if builder is None else builder
        setattr(self, BUILDER_ATTR, self._builder)
        self._owner: Any = None
        self._name = func.__name__
        self._is_method = False

        # Functions sharing a qualname (closures, factories) each get their own
        # schema, so they are keyed by the function object itself.
        if _is_plain_function(func):
            self._owner = func
            self._name = func.__qualname__
            self.flush()

    def __set_name__(self, owner: type, name: str) -> None:
        if self._owner is not None:
            # Already registered as a plain function; keep that schema.
            return
        self._owner = owner
        self._name = name
        self._is_method = True
        self.flush()

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    @property
    def schema(self) -> ValidationSchema | None:
        """The rules registered for this method, if any."""
        if self._owner is None:
            return None
        return self._registry.get(self._owner, self._name)

    def flush(self) -> None:
        """Move the rules recorded by the parameter decorators into the registry.

        Does nothing until the owner of the method is known.
        """
        if self._owner is None or not self._builder:
            return
        for entry in self._builder.registrations(self._signature, self._is_method):
            if isinstance(entry, CustomValidator):
                self._registry.add_validator(self._owner, self._name, entry)
            else:
                self._registry.add_required(self._owner, self._name, entry)
        self._builder.clear()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if settings.ENABLED:
            schema = self.schema
            if schema is not None:
                self._check(schema, self._arguments(args, kwargs))
        return self.__wrapped__(*args, **kwargs)  # type: ignore[attr-defined]

    def _arguments(self, args: tuple, kwargs: dict) -> list:
        """Build the positional view of a call, leaving out the receiver."""
        bound = self._signature.bind_partial(*args, **kwargs)
        arguments: list = []
        for param in self._signature.parameters.values():
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                arguments.extend(bound.arguments.get(param.name, ()))
            elif param.kind in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                arguments.append(bound.arguments.get(param.name, _UNDEFINED))
        return arguments[1:] if self._is_method else arguments

    def _check(self, schema: ValidationSchema, arguments: list) -> None:
        method_name = self.__name__  # type: ignore[attr-defined]

        if schema.required_parameters:
            error = try_catch_exception(
                _validate_required,
                [schema.required_parameters, arguments],
                ParameterError,
            )
            if isinstance(error, ParameterError):
                error.method = method_name
                self._log_failure(error)
                raise error

        if schema.custom_validators:
            parameter_error: ParameterError | None = None
            for index, check, message in schema.custom_validators:
                value = arguments[index] if index < len(arguments) else None
                outcome = try_catch_exception(
                    check, [None if value is _UNDEFINED else value], ParameterError
                )
                if not isinstance(outcome, ParameterError):
                    continue
                detail = f"Position parameter {index} wrong: {message}"
                if parameter_error is None:
                    parameter_error = ParameterError(
                        f"Parameter error when calling method {method_name}",
                        method_name,
                        [index],
                        [detail],
                    )
                else:
                    parameter_error.extend(index, detail)
            if parameter_error is not None:
                self._log_failure(parameter_error)
                raise parameter_error

    def _log_failure(self, error: ParameterError) -> None:
        if settings.LOG_FAILURES:
            logger.debug(
                "Validation of %s failed: %s",
                _func_full_name(self.__wrapped__),  # type: ignore[attr-defined]
                "; ".join(error.detail),
                extra={"rich_format": ["cyan"]},
            )

    def __repr__(self) -> str:
        return f"<ValidatedMethod {_func_full_name(self.__wrapped__)}>"  # type: ignore[attr-defined]


def validate(
    func: Callable | None = None, *, registry: SchemaRegistry | None = None
) -> Any:
    """A method decorator which checks the arguments of every call against
    the rules declared with ``required`` and ``build_custom_validator``.

    Required parameters are checked first, all together; if any is missing
    a single ``ParameterError`` lists them and the custom validators are
    skipped. Otherwise every custom validator runs and all of their failures
    are aggregated into one ``ParameterError``. The decorated method only
    runs when no rule failed.

    Can be used bare (``@validate``) or with arguments
    (``@validate(registry=my_registry)``).

    Args:
        func: The method to be validated.
        registry: Store holding the schemas. Defaults to the process-wide
            ``paramcheck.validation.registry``.

    Returns:
        A ``ValidatedMethod`` wrapping ``func``, or a decorator producing one.

    """

    def _validate(func: Callable) -> ValidatedMethod:
        return ValidatedMethod(func, registry)

    if func is None:
        return _validate
    return _validate(func)
