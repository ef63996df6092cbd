"""Tests for paramcheck.validation.schema."""

from __future__ import annotations

import inspect

import pytest

from paramcheck.validation.exceptions import SchemaDefinitionError
from paramcheck.validation.schema import (
    CustomValidator,
    SchemaBuilder,
    ValidationSchema,
    check_position,
)


def _noop(arg):
    return None


def _method(self, name, amount, *rest, flag=False, **extra):
    pass  # pragma: no cover


class TestValidationSchema:
    def test_empty_schema(self):
        schema = ValidationSchema()
        assert schema.required_parameters is None
        assert schema.custom_validators is None

    def test_required_positions_are_prepended(self):
        schema = ValidationSchema().with_required(2).with_required(0)
        assert schema.required_parameters == (0, 2)
        assert schema.custom_validators is None

    def test_validators_are_prepended(self):
        first = CustomValidator(0, _noop, "first")
        second = CustomValidator(1, _noop, "second")
        schema = ValidationSchema().with_validator(first).with_validator(second)
        assert schema.custom_validators == (second, first)

    def test_merging_keeps_the_other_field(self):
        validator = CustomValidator(0, _noop, "first")
        schema = ValidationSchema().with_validator(validator).with_required(1)
        assert schema.required_parameters == (1,)
        assert schema.custom_validators == (validator,)

    def test_schema_is_immutable(self):
        schema = ValidationSchema()
        merged = schema.with_required(0)
        assert schema.required_parameters is None
        assert merged is not schema


class TestCheckPosition:
    @pytest.mark.parametrize("position", [0, 3, "amount"])
    def test_valid_positions(self, position):
        assert check_position(position) == position

    @pytest.mark.parametrize("position", [-1, 1.5, None, True])
    def test_invalid_positions(self, position):
        with pytest.raises(SchemaDefinitionError, match="Parameter position"):
            check_position(position)


class TestSchemaBuilder:
    def test_empty_builder_is_falsy(self):
        assert not SchemaBuilder()

    def test_registrations_keep_application_order(self):
        builder = SchemaBuilder()
        builder.add_required(1)
        builder.add_validator(0, _noop, "checked")
        builder.add_required(0)

        registrations = builder.registrations(inspect.signature(_method), True)

        assert registrations == [1, CustomValidator(0, _noop, "checked"), 0]

    def test_names_resolve_to_positions_after_receiver(self):
        builder = SchemaBuilder()
        builder.add_required("amount")
        builder.add_validator("name", _noop, "checked")

        registrations = builder.registrations(inspect.signature(_method), True)

        assert registrations == [1, CustomValidator(0, _noop, "checked")]

    def test_names_resolve_including_first_parameter(self):
        builder = SchemaBuilder()
        builder.add_required("name")

        assert builder.registrations(inspect.signature(_method), False) == [1]

    @pytest.mark.parametrize("name", ["missing", "rest", "flag", "extra", "self"])
    def test_unknown_or_non_positional_names(self, name):
        builder = SchemaBuilder()
        builder.add_required(name)

        with pytest.raises(SchemaDefinitionError, match=f"Unknown parameter '{name}'"):
            builder.registrations(inspect.signature(_method), True)

    def test_invalid_position_is_rejected_when_recorded(self):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder().add_required(-2)

    def test_clear(self):
        builder = SchemaBuilder()
        builder.add_required(0)
        builder.clear()
        assert not builder
