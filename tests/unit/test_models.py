"""Unit tests for domain models."""

from dataclasses import FrozenInstanceError

import pytest

from cmdshell.lib.exceptions import DefinitionError
from cmdshell.models import (
    CommandFailed,
    CommandInfo,
    HelpRequested,
    MalformedArgument,
    MissingArgument,
    Ok,
    ParameterKind,
    ParameterType,
    flag,
    is_outcome,
    option,
    positional,
)
from cmdshell.models.parameter import HELP_PARAMETER, Parameter


class TestOutcomes:
    """Tests for the CommandOutcome variants."""

    def test_variants_are_outcomes(self):
        for outcome in (
            Ok("x"),
            HelpRequested("text"),
            MalformedArgument("a", "x"),
            MissingArgument("a"),
            CommandFailed("boom"),
        ):
            assert is_outcome(outcome)

    def test_other_values_are_not_outcomes(self):
        assert not is_outcome("x")
        assert not is_outcome(None)

    def test_outcomes_are_immutable(self):
        outcome = Ok("x")

        with pytest.raises(FrozenInstanceError):
            outcome.output = "y"

    def test_value_equality(self):
        assert MalformedArgument("a", "x") == MalformedArgument("a", "x")


class TestCommandInfo:
    """Tests for CommandInfo."""

    def test_options_default_empty(self):
        assert CommandInfo("hello", "say hi", "hello <whom>").options == ()


class TestParameterType:
    """Tests for value conversion."""

    def test_integer(self):
        assert ParameterType.INTEGER.convert("42") == 42

    def test_integer_rejects_text(self):
        with pytest.raises(ValueError):
            ParameterType.INTEGER.convert("forty")

    @pytest.mark.parametrize("raw,expected", [("+5", 5), ("-3", -3), ("007", 7)])
    def test_integer_signs_and_zeros(self, raw, expected):
        assert ParameterType.INTEGER.convert(raw) == expected

    @pytest.mark.parametrize("raw", ["1_000", "١٢", "１", "+", "", "1.0"])
    def test_integer_ascii_digits_only(self, raw):
        with pytest.raises(ValueError):
            ParameterType.INTEGER.convert(raw)

    @pytest.mark.parametrize("raw", ["1_0.5", "１.5"])
    def test_float_ascii_only(self, raw):
        with pytest.raises(ValueError):
            ParameterType.FLOAT.convert(raw)

    def test_float(self):
        assert ParameterType.FLOAT.convert("1.5") == 1.5

    @pytest.mark.parametrize("raw,expected", [("yes", True), ("FALSE", False), ("1", True)])
    def test_boolean(self, raw, expected):
        assert ParameterType.BOOLEAN.convert(raw) is expected

    def test_boolean_rejects_text(self):
        with pytest.raises(ValueError):
            ParameterType.BOOLEAN.convert("maybe")

    def test_from_python(self):
        assert ParameterType.from_python(int) is ParameterType.INTEGER
        assert ParameterType.from_python(ParameterType.FLOAT) is ParameterType.FLOAT

    def test_from_python_unsupported(self):
        with pytest.raises(DefinitionError):
            ParameterType.from_python(list)


class TestParameter:
    """Tests for parameter declarations."""

    def test_positional(self):
        param = positional("whom", description="who to greet")

        assert param.kind is ParameterKind.POSITIONAL
        assert param.value_type is ParameterType.STRING
        assert param.usage_fragment() == "<whom>"

    def test_flag_line(self):
        param = flag("reverse", description="reverse the order")

        assert param.default is False
        assert param.usage_fragment() == "[--reverse]"
        assert param.option_line() == "--reverse  reverse the order (bool, default: false)"

    def test_option_line(self):
        param = option("times", int, default=1, description="repeat count")

        assert param.usage_fragment() == "[--times <int>]"
        assert param.option_line() == "--times <int>  repeat count (int, default: 1)"

    def test_option_line_without_description_or_default(self):
        param = option("label")

        assert param.option_line() == "--label <str>  (str, default: none)"

    def test_dest_replaces_dashes(self):
        assert flag("dry-run").dest == "dry_run"

    def test_help_parameter_line(self):
        assert HELP_PARAMETER.option_line() == "-h, --help  Show this help text"

    @pytest.mark.parametrize("name", ["", "two words", "--x", " pad"])
    def test_invalid_names(self, name):
        with pytest.raises(DefinitionError):
            positional(name)

    @pytest.mark.parametrize("name", ["help", "h"])
    def test_help_names_reserved(self, name):
        with pytest.raises(DefinitionError):
            flag(name)

    def test_parameter_is_frozen(self):
        param = positional("whom")

        with pytest.raises(Exception):
            param.name = "other"

    def test_builtin_help_allowed(self):
        param = Parameter(name="help", kind=ParameterKind.FLAG, builtin=True)

        assert param.builtin is True
