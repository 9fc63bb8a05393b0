"""Tests for template composition."""

from datetime import datetime

import pytest

from format_date_time import (
    FormatDateTimeError,
    TemplateError,
    compose,
    day,
    four_digit_year,
    month_name,
    template,
    two_digit_day,
    two_digit_hours,
    two_digit_minutes,
    two_digit_month,
)


class TestCompose:
    """Tests for compose function."""

    def test_interleaves_literals_and_formatters(self, sample_datetime):
        """Output is literals and formatter outputs in interleaving order."""
        formatter = compose(
            ["<", "|", ">"],
            [two_digit_hours, two_digit_minutes],
        )
        assert formatter(sample_datetime) == "<11|57>"

    def test_structural_law(self, sample_datetime):
        """Composed output equals the literal concatenation."""
        literals = ["Date: ", "-", "-", " end"]
        formatters = [four_digit_year, two_digit_month, two_digit_day]
        expected = (
            literals[0]
            + formatters[0](sample_datetime)
            + literals[1]
            + formatters[1](sample_datetime)
            + literals[2]
            + formatters[2](sample_datetime)
            + literals[3]
        )
        assert compose(literals, formatters)(sample_datetime) == expected

    def test_literals_only(self, sample_datetime):
        """A single literal with no formatters is returned as-is."""
        assert compose(["plain text"], [])(sample_datetime) == "plain text"

    def test_empty_literals_are_kept_empty(self, sample_datetime):
        """Empty literals add nothing between formatters."""
        formatter = compose(["", "", ""], [two_digit_hours, two_digit_minutes])
        assert formatter(sample_datetime) == "1157"

    def test_no_trimming(self, sample_datetime):
        """Whitespace in literals is preserved."""
        formatter = compose(["  ", "  "], [two_digit_hours])
        assert formatter(sample_datetime) == "  11  "

    def test_same_formatter_repeated(self, sample_datetime):
        """A formatter used twice is evaluated twice."""
        formatter = compose(["", "/", ""], [two_digit_hours, two_digit_hours])
        assert formatter(sample_datetime) == "11/11"

    def test_deterministic(self, sample_datetime):
        """Repeated calls return the identical string."""
        formatter = compose(["", ":", ""], [two_digit_hours, two_digit_minutes])
        assert formatter(sample_datetime) == formatter(sample_datetime)

    def test_different_values(self):
        """One composed formatter serves many values."""
        formatter = compose(["", ":", ""], [two_digit_hours, two_digit_minutes])
        assert formatter(datetime(2024, 1, 1, 8, 5)) == "08:05"
        assert formatter(datetime(2024, 1, 1, 23, 59)) == "23:59"

    def test_formatters_reevaluated_each_call(self, sample_datetime):
        """Field formatters are called on every invocation, with no caching."""
        calls = []

        def counting(value):
            calls.append(value)
            return str(len(calls))

        formatter = compose(["[", "]"], [counting])
        assert formatter(sample_datetime) == "[1]"
        assert formatter(sample_datetime) == "[2]"
        assert calls == [sample_datetime, sample_datetime]

    def test_caller_list_mutation_ignored(self, sample_datetime):
        """Mutating the input lists after composition has no effect."""
        literals = ["", "h"]
        formatters = [two_digit_hours]
        formatter = compose(literals, formatters)
        literals[1] = "X"
        formatters[0] = two_digit_minutes
        assert formatter(sample_datetime) == "11h"

    def test_accepts_tuples(self, sample_datetime):
        """Any sequence works for literals and formatters."""
        formatter = compose(("", "h"), (two_digit_hours,))
        assert formatter(sample_datetime) == "11h"


class TestComposeLenient:
    """Tests for mismatched lengths in the default mode."""

    def test_missing_formatters_become_empty(self, sample_datetime):
        """Placeholders beyond the supplied formatters produce nothing."""
        formatter = compose(["a", "b", "c"], [two_digit_hours])
        assert formatter(sample_datetime) == "a11bc"

    def test_no_formatters_many_literals(self, sample_datetime):
        """All literals are concatenated when no formatters are supplied."""
        assert compose(["a", "b", "c"], [])(sample_datetime) == "abc"

    def test_extra_formatters_are_not_called(self, sample_datetime):
        """Formatters without a literal slot are never evaluated."""

        def unreachable(value):
            raise AssertionError("should not be called")

        formatter = compose(["a"], [two_digit_hours, unreachable])
        assert formatter(sample_datetime) == "a11"

    def test_no_literals(self, sample_datetime):
        """No literals produces an empty string."""
        assert compose([], [two_digit_hours])(sample_datetime) == ""

    def test_none_result_is_empty(self, sample_datetime):
        """A formatter returning None contributes an empty string."""
        formatter = compose(["<", ">"], [lambda value: None])
        assert formatter(sample_datetime) == "<>"

    def test_mismatch_is_logged(self, caplog):
        """A mismatched lenient template is reported at debug level."""
        with caplog.at_level("DEBUG", logger="format_date_time.composer"):
            compose(["a", "b", "c"], [two_digit_hours])
        assert "3 literals and 1 formatters" in caplog.text


class TestComposeStrict:
    """Tests for compose with strict=True."""

    def test_strict_accepts_matching_lengths(self, sample_datetime):
        """Correct interleaving is accepted."""
        formatter = compose(["", "h"], [two_digit_hours], strict=True)
        assert formatter(sample_datetime) == "11h"

    def test_strict_too_many_literals_raises(self):
        """Too many literals raises TemplateError."""
        with pytest.raises(TemplateError, match="needs 2 literals for 1 formatters, got 3"):
            compose(["a", "b", "c"], [two_digit_hours], strict=True)

    def test_strict_too_few_literals_raises(self):
        """Too few literals raises TemplateError."""
        with pytest.raises(TemplateError, match="got 2"):
            compose(["a", "b"], [two_digit_hours, two_digit_minutes], strict=True)

    def test_template_error_hierarchy(self):
        """TemplateError is a FormatDateTimeError and a ValueError."""
        assert issubclass(TemplateError, FormatDateTimeError)
        assert issubclass(TemplateError, ValueError)


class TestComposeErrors:
    """Tests for exceptions raised by field formatters."""

    def test_formatter_exception_propagates(self, sample_datetime):
        """Exceptions from a formatter reach the caller unchanged."""

        class Boom(Exception):
            pass

        error = Boom("field failed")

        def failing(value):
            raise error

        formatter = compose(["a", "b", "c"], [two_digit_hours, failing])
        with pytest.raises(Boom) as excinfo:
            formatter(sample_datetime)
        assert excinfo.value is error

    def test_formatting_stops_at_failure(self, sample_datetime):
        """Formatters after the failing one are not evaluated."""
        calls = []

        def failing(value):
            raise ValueError("bad field")

        def recording(value):
            calls.append(value)
            return "x"

        formatter = compose(["", "", ""], [failing, recording])
        with pytest.raises(ValueError, match="bad field"):
            formatter(sample_datetime)
        assert calls == []


class TestNesting:
    """Tests for composed formatters used inside other templates."""

    def test_nested_equals_inlined(self, sample_datetime):
        """Embedding a composed formatter equals inlining its parts."""
        inner = compose(["", ":", ""], [two_digit_hours, two_digit_minutes])
        nested = compose(["at ", " on ", ""], [inner, two_digit_day])
        inlined = compose(
            ["at ", ":", " on ", ""],
            [two_digit_hours, two_digit_minutes, two_digit_day],
        )
        assert nested(sample_datetime) == inlined(sample_datetime)
        assert nested(sample_datetime) == "at 11:57 on 26"

    def test_nested_with_surrounding_literals(self, sample_datetime):
        """Literals around an embedded template are preserved."""
        inner = compose(["(", ")"], [two_digit_hours])
        outer = compose(["[", "]"], [inner])
        assert outer(sample_datetime) == "[(11)]"

    def test_deep_nesting(self, sample_datetime):
        """Templates nest to any depth."""
        formatter = two_digit_hours
        for _ in range(5):
            formatter = compose(["<", ">"], [formatter])
        assert formatter(sample_datetime) == "<<<<<11>>>>>"


class TestTemplate:
    """Tests for template function."""

    def test_interleaved_parts(self, sample_datetime):
        """Literals and formatters are read in order."""
        formatter = template(day, " ", month_name, " ", four_digit_year)
        assert formatter(sample_datetime) == "26 January 2024"

    def test_leading_and_trailing_literals(self, sample_datetime):
        """Literals may open and close the template."""
        formatter = template("Year ", four_digit_year, "!")
        assert formatter(sample_datetime) == "Year 2024!"

    def test_adjacent_literals_joined(self, sample_datetime):
        """Consecutive strings are concatenated."""
        formatter = template("a", "b", two_digit_hours, "c", "d")
        assert formatter(sample_datetime) == "ab11cd"

    def test_adjacent_formatters(self, sample_datetime):
        """Consecutive formatters are emitted back to back."""
        formatter = template(two_digit_hours, two_digit_minutes)
        assert formatter(sample_datetime) == "1157"

    def test_no_parts(self, sample_datetime):
        """An empty template formats to an empty string."""
        assert template()(sample_datetime) == ""

    def test_matches_compose(self, sample_datetime):
        """template() is equivalent to the corresponding compose() call."""
        via_template = template("[", two_digit_hours, ":", two_digit_minutes, "]")
        via_compose = compose(["[", ":", "]"], [two_digit_hours, two_digit_minutes])
        assert via_template(sample_datetime) == via_compose(sample_datetime)

    def test_nested_template(self, sample_datetime):
        """A template is usable as a part of another template."""
        time_part = template(two_digit_hours, "h", two_digit_minutes)
        formatter = template(day, " ", month_name, " at ", time_part)
        assert formatter(sample_datetime) == "26 January at 11h57"

    def test_lambda_part(self, sample_datetime):
        """Any callable is accepted as a formatter."""
        formatter = template("Q", lambda value: str((value.month - 1) // 3 + 1))
        assert formatter(sample_datetime) == "Q1"

    def test_invalid_part_raises(self):
        """A part that is neither str nor callable raises TypeError."""
        with pytest.raises(TypeError, match="template part 1 must be a str or a formatter, got int"):
            template("a", 42)
