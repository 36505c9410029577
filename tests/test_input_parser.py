"""Parsing of the recorded timing stream."""

import io

import pytest

from timeblind.sqli.errors import ConfigurationError
from timeblind.sqli.input_parser import parse_input, parse_stream


def test_parses_count_and_both_groups():
    text = "# baseline then payload\n3\n0.1 0.2 0.3\n0.5 0.6 0.7\n"
    reference, candidate = parse_input(text)
    assert reference == [0.1, 0.2, 0.3]
    assert candidate == [0.5, 0.6, 0.7]


def test_values_can_span_lines():
    text = "2\n1.0\n2.0 3.0\n\n4.0\n"
    assert parse_input(text) == ([1.0, 2.0], [3.0, 4.0])


def test_comments_and_blank_lines_are_skipped_everywhere():
    text = "# first\n\n# second\n2\n# reference\n1 2\n# candidate\n3 4\n"
    assert parse_input(text) == ([1.0, 2.0], [3.0, 4.0])


def test_zero_count_gives_empty_groups():
    assert parse_input("0\n") == ([], [])


def test_trailing_values_are_ignored(caplog):
    reference, candidate = parse_input("1\n1.0\n2.0\n3.0 4.0\n")
    assert (reference, candidate) == ([1.0], [2.0])
    assert "Ignoring 2 trailing value(s)" in caplog.text


@pytest.mark.parametrize("text", ["", "\n\n", "# only a comment\n", "# a\n# b\n\n"])
def test_missing_count_line_is_a_configuration_error(text):
    with pytest.raises(ConfigurationError, match="no observation count"):
        parse_input(text)


@pytest.mark.parametrize("count_line", ["abc", "3.5", "3 4", "-2"])
def test_malformed_count_is_a_configuration_error(count_line):
    with pytest.raises(ConfigurationError):
        parse_input(f"{count_line}\n1 2 3\n4 5 6\n")


@pytest.mark.parametrize("bad", ["fast", "-0.5", "nan", "inf"])
def test_bad_observation_is_a_configuration_error(bad):
    with pytest.raises(ConfigurationError, match="line 3"):
        parse_input(f"2\n0.1 0.2\n0.3 {bad}\n")


def test_short_input_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="expected 6 observations"):
        parse_input("3\n0.1 0.2 0.3\n0.4\n")


def test_parse_stream_reads_file_objects():
    stream = io.StringIO("1\n0.25\n0.75\n")
    assert parse_stream(stream) == ([0.25], [0.75])
