"""Contract tests for the usage parser.

Help text produced by any registered command must parse back into
the metadata it was rendered from; text that breaks the layout must
fail as a whole.
"""

import pytest

from cmdshell.lib.exceptions import HelpFormatError
from cmdshell.models import CommandInfo, HelpRequested, Ok, flag, option, positional
from cmdshell.services.arguments import define
from cmdshell.services.help import extract_info, parse_help_text
from cmdshell.services.registry import wrap


class TestParseHelpText:
    """Tests for parse_help_text."""

    def test_without_options(self):
        info = parse_help_text("hello -- say hi\nUsage: hello <whom>")

        assert info == CommandInfo("hello", "say hi", "hello <whom>", ())

    def test_with_options(self, concat_help_text):
        info = parse_help_text(concat_help_text)

        assert info.name == "concat"
        assert info.description == "concatenate two strings"
        assert info.usage == "concat <a> <b> [--reverse]"
        assert info.options == ("--reverse  reverse the order (bool, default: false)",)

    def test_help_flag_filtered(self, concat_help_text):
        info = parse_help_text(concat_help_text)

        assert not any(line.startswith("-h, --help") for line in info.options)

    def test_blank_option_lines_dropped(self):
        text = "x -- d\nUsage: x\nOptions:\n\n  --a  first\n   \n  --b  second\n"

        assert parse_help_text(text).options == ("--a  first", "--b  second")

    def test_only_help_flag_gives_no_options(self):
        text = "x -- d\nUsage: x\nOptions:\n  -h, --help  Show this help text"

        assert parse_help_text(text).options == ()

    def test_description_may_be_empty(self):
        info = parse_help_text("x -- \nUsage: x")

        assert info.description == ""

    @pytest.mark.parametrize(
        "text",
        [
            "hello say hi\nUsage: hello <whom>",
            "hello -- say hi\nhello <whom>",
            "hello -- say hi\nUsage: hello <whom>\n  --loud  shout",
            " -- say hi\nUsage: hello",
            "",
        ],
        ids=["no-name-delimiter", "no-usage", "no-options-header", "empty-name", "empty"],
    )
    def test_missing_delimiters_fail(self, text):
        with pytest.raises(HelpFormatError) as exc_info:
            parse_help_text(text)

        assert exc_info.value.text == text


class TestExtractInfo:
    """Tests for extract_info."""

    def test_from_wrapped_handler(self, hello_env):
        info = extract_info(hello_env.lookup("hello"))

        assert info == CommandInfo("hello", "say hi", "hello <whom>", ())

    def test_handler_not_answering_help_fails(self):
        with pytest.raises(HelpFormatError):
            extract_info(lambda args: Ok("not help"))

    def test_handler_with_bad_layout_fails(self):
        with pytest.raises(HelpFormatError):
            extract_info(lambda args: HelpRequested("just some words"))

    def test_handler_receives_help_sentinel(self):
        received = []

        def handler(args):
            received.append(list(args))
            return HelpRequested("x -- d\nUsage: x")

        extract_info(handler)

        assert received == [["--help"]]


class TestRoundTrip:
    """Help text from the public API always parses."""

    @pytest.mark.parametrize(
        "parameters,expected_options",
        [
            ([], 0),
            ([positional("a"), positional("b", int)], 0),
            ([flag("quiet")], 1),
            ([positional("path"), option("depth", int, 3, "how deep"), flag("all", "everything")], 2),
        ],
    )
    def test_parameters_round_trip(self, parameters, expected_options):
        handler = wrap("cmd", "does -- things", define(parameters, lambda args: ""))

        info = extract_info(handler)

        assert info.name == "cmd"
        assert info.description == "does -- things"
        assert info.usage.startswith("cmd")
        assert len(info.options) == expected_options
