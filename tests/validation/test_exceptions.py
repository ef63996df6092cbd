"""Tests for paramcheck.validation.exceptions."""

from __future__ import annotations

import pickle

import pytest

from paramcheck.validation.exceptions import ParameterError, SchemaDefinitionError


class TestParameterError:
    def test_basic_error(self):
        error = ParameterError("something failed")
        assert str(error) == "something failed"
        assert error.message == "something failed"

    def test_defaults(self):
        error = ParameterError()
        assert error.message == ""
        assert error.method == ""
        assert error.parameter_indexes == []
        assert error.detail == []

    def test_structured_attributes(self):
        error = ParameterError("bad call", "save", [0, 2], ["first", "second"])
        assert error.method == "save"
        assert error.parameter_indexes == [0, 2]
        assert error.detail == ["first", "second"]

    def test_extend_keeps_indexes_and_detail_aligned(self):
        error = ParameterError("bad call", "save", [1], ["first"])
        error.extend(0, "second")
        error.extend(1, "third")

        assert error.parameter_indexes == [1, 0, 1]
        assert error.detail == ["first", "second", "third"]

    def test_given_lists_are_copied(self):
        indexes = [0]
        error = ParameterError("bad call", parameter_indexes=indexes)
        error.extend(1, "more")
        assert indexes == [0]

    def test_repr(self):
        error = ParameterError("bad call", "save", [0], ["detail"])
        assert repr(error) == (
            "ParameterError('bad call', method='save', "
            "parameter_indexes=[0], detail=['detail'])"
        )

    def test_pickle_keeps_structured_attributes(self):
        error = ParameterError("bad call", "save", [0, 2], ["first", "second"])

        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is ParameterError
        assert str(restored) == "bad call"
        assert restored.method == "save"
        assert restored.parameter_indexes == [0, 2]
        assert restored.detail == ["first", "second"]

    def test_can_be_raised_and_caught(self):
        with pytest.raises(ParameterError, match="param error"):
            raise ParameterError("param error")


class TestSchemaDefinitionError:
    def test_is_value_error_subclass(self):
        assert isinstance(SchemaDefinitionError("bad rule"), ValueError)

    def test_is_not_a_parameter_error(self):
        assert not isinstance(SchemaDefinitionError("bad rule"), ParameterError)
