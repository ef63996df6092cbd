"""``paramcheck.validation.store`` holds the validation schema of every
validated method, keyed by the owning type and the method name.

The store is populated while classes are being defined and only read
afterwards, which is why it carries no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from paramcheck.validation.schema import CustomValidator, ValidationSchema

logger = logging.getLogger(__name__)

Key = tuple[Any, str]


class SchemaRegistry:
    """A keyed lookup table from ``(owner, method name)`` to ``ValidationSchema``.

    ``owner`` is the class a method is defined on. Plain functions are their
    own owner, keyed with their qualified name.
    """

    def __init__(self) -> None:
        self._schemas: dict[Key, ValidationSchema] = {}

    def get(self, owner: Any, method_name: str) -> ValidationSchema | None:
        return self._schemas.get((owner, method_name))

    def set(self, owner: Any, method_name: str, schema: ValidationSchema) -> None:
        self._schemas[(owner, method_name)] = schema

    def add_required(self, owner: Any, method_name: str, position: int) -> None:
        """Mark ``position`` as required for the given method."""
        schema = self.get(owner, method_name) or ValidationSchema()
        self.set(owner, method_name, schema.with_required(position))
        logger.debug(
            "Registered required parameter %d on %s", position, _label(owner, method_name)
        )

    def add_validator(
        self, owner: Any, method_name: str, validator: CustomValidator
    ) -> None:
        """Attach ``validator`` to the given method."""
        schema = self.get(owner, method_name) or ValidationSchema()
        self.set(owner, method_name, schema.with_validator(validator))
        logger.debug(
            "Registered validator '%s' for parameter %d on %s",
            validator.message,
            validator.position,
            _label(owner, method_name),
        )

    def items(self) -> Iterator[tuple[Key, ValidationSchema]]:
        return iter(list(self._schemas.items()))

    def clear(self) -> None:
        """Forget every schema. Only meant for test isolation."""
        self._schemas.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(_label(*key) for key in self._schemas)})"


def _label(owner: Any, method_name: str) -> str:
    if isinstance(owner, type):
        return f"{owner.__module__}.{owner.__qualname__}.{method_name}"
    if callable(owner):
        return f"{owner.__module__}.{method_name}"
    return f"{owner}.{method_name}"


registry = SchemaRegistry()
