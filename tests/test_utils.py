import pytest

from paramcheck.utils import _format_rich, _func_full_name, load_module, try_catch_exception


def _divide(a, b):
    return a / b


class TestTryCatchException:
    def test_returns_function_result(self):
        assert try_catch_exception(_divide, [6, 3], ZeroDivisionError) == 2

    def test_returns_expected_exception(self):
        result = try_catch_exception(_divide, [1, 0], ZeroDivisionError)
        assert isinstance(result, ZeroDivisionError)

    def test_returns_subclass_of_expected_exception(self):
        result = try_catch_exception(_divide, [1, 0], ArithmeticError)
        assert isinstance(result, ZeroDivisionError)

    def test_reraises_other_exceptions(self):
        with pytest.raises(TypeError):
            try_catch_exception(_divide, [1, "x"], ZeroDivisionError)


def test_load_module():
    module = load_module("paramcheck.validation")
    assert hasattr(module, "validate")


def test_load_module_missing():
    with pytest.raises(ImportError):
        load_module("paramcheck.does_not_exist")


def test_func_full_name():
    assert _func_full_name(_divide) == f"{__name__}._divide"


def test_format_rich():
    assert _format_rich("text", "cyan") == "[cyan]text[/cyan]"
