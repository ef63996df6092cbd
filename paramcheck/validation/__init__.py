"""``paramcheck.validation`` provides the decorators declaring and enforcing
parameter rules on methods."""

from .decorators import build_custom_validator, custom_validator, required
from .exceptions import ParameterError, SchemaDefinitionError
from .interceptor import ValidatedMethod, validate
from .schema import CustomValidator, ValidationSchema
from .store import SchemaRegistry, registry

__all__ = [
    "CustomValidator",
    "ParameterError",
    "SchemaDefinitionError",
    "SchemaRegistry",
    "ValidatedMethod",
    "ValidationSchema",
    "build_custom_validator",
    "custom_validator",
    "registry",
    "required",
    "validate",
]
