"""paramcheck is a declarative parameter-validation layer: methods declare
which parameters are required and which predicates they must satisfy, and
every violation is reported in a single structured error before the method
body runs.
"""

__version__ = "0.3.1"

from paramcheck.validation import (
    ParameterError,
    SchemaDefinitionError,
    build_custom_validator,
    custom_validator,
    required,
    validate,
)

__all__ = [
    "ParameterError",
    "SchemaDefinitionError",
    "build_custom_validator",
    "custom_validator",
    "required",
    "validate",
]
