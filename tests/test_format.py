"""Tests for formatting durations end to end."""

from datetime import timedelta

import pytest
from dateutil.relativedelta import relativedelta

from durfmt import (
    DAY,
    EXTENDED_UNITS,
    HOUR,
    MINIMAL_UNITS,
    MINUTE,
    SECOND,
    DurationFormatter,
    InvalidDirective,
    format_duration,
    parse_template,
)


@pytest.mark.parametrize(
    ("duration", "template", "expected"),
    [
        (90 * MINUTE, "%h:%0m", "1:30"),
        (3661 * SECOND, "%0h:%0m:%0s", "01:01:01"),
        (0, "%y years", "0 years"),
        (8 * DAY, "%w week(s), %d day(s)", "1 week(s), 1 day(s)"),
        (5 * SECOND, "100%% done in %ss", "100% done in 5s"),
    ],
)
def test_minimal_scenarios(duration, template, expected):
    """Scenarios over the six-unit table."""
    formatter = DurationFormatter(MINIMAL_UNITS)

    assert formatter.format(duration, template) == expected
    assert format_duration(duration, template, units=MINIMAL_UNITS) == expected


def test_default_units_match_minimal_scenario():
    """The default table gives the same answer for shared codes."""
    assert format_duration(90 * MINUTE, "%h:%0m") == "1:30"


@pytest.mark.parametrize("duration", [0, 1, 90 * MINUTE, -DAY])
def test_template_without_directives_is_unchanged(duration):
    """Plain text renders verbatim for any duration."""
    assert format_duration(duration, "just text") == "just text"


def test_unknown_directive_raises_without_output():
    """An invalid directive anywhere fails the whole call."""
    with pytest.raises(InvalidDirective):
        format_duration(HOUR, "%h hours %z")


def test_trailing_percent_raises():
    """A dangling % at the end is an error."""
    with pytest.raises(InvalidDirective):
        format_duration(HOUR, "%h%")


@pytest.mark.parametrize("unit", EXTENDED_UNITS, ids=lambda unit: unit.name)
def test_single_unit_recovers_multiple(unit):
    """n whole units formatted with that unit alone print n."""
    assert format_duration(7 * unit.divisor, f"%{unit.code}") == "7"


def test_largest_requested_unit_exceeds_two_digits():
    """Without larger units the count is unbounded."""
    assert format_duration(2 * DAY, "%ss") == "172800s"
    assert format_duration(2 * DAY, "%0s") == "172800"


@pytest.mark.parametrize(
    ("hours", "expected"), [(0, "00"), (5, "05"), (9, "09"), (10, "10"), (123, "123")]
)
def test_zero_pad_width(hours, expected):
    """Zero padding yields at least two digits and never truncates."""
    assert format_duration(hours * HOUR, "%0h") == expected


def test_months_and_sub_second_units():
    """Extended units render with fixed divisors."""
    assert format_duration(45 * DAY, "%o months %d days") == "1 months 15 days"
    assert format_duration(1_002_003_004, "%i.%c.%n") == "1002.3.4"


def test_timedelta_duration():
    """timedelta values format like their nanosecond equivalent."""
    assert format_duration(timedelta(hours=1, minutes=1, seconds=1), "%0h:%0m:%0s") == (
        "01:01:01"
    )


def test_negative_duration_truncates_toward_zero():
    """Each component of a negative duration keeps the sign."""
    assert format_duration(-90 * MINUTE, "%h:%m") == "-1:-30"
    assert format_duration(-90 * MINUTE, "%0h:%0m") == "-1:-30"
    assert format_duration(-5 * MINUTE, "%0h:%0m") == "00:-5"


def test_minimal_units_reject_months():
    """%o is unknown when formatting with the minimal table."""
    with pytest.raises(InvalidDirective):
        format_duration(DAY, "%o", units=MINIMAL_UNITS)


def test_parsed_template_is_reusable():
    """A parsed template formats many durations."""
    template = parse_template("%0m:%0s")

    assert template.format(61 * SECOND) == "01:01"
    assert template.format(59 * SECOND) == "00:59"
    assert template.format(timedelta(minutes=100)) == "100:00"


def test_formatter_repr_lists_codes():
    """The repr shows the formatter's unit codes in order."""
    assert repr(DurationFormatter(MINIMAL_UNITS)) == "DurationFormatter(units='ywdhms')"


def test_formatter_parse_uses_its_units():
    """Templates parsed by a formatter carry its table."""
    template = DurationFormatter(MINIMAL_UNITS).parse("%d")

    assert template.units == MINIMAL_UNITS


@pytest.mark.parametrize(
    ("delta", "template", "expected"),
    [
        (relativedelta(years=1, months=2, days=3), "%y %o %d", "1 2 3"),
        (relativedelta(years=1), "%o months %d days", "12 months 5 days"),
        (relativedelta(months=13), "%d", "395"),
        (relativedelta(hours=25, minutes=5), "%d %0h:%0m", "1 01:05"),
    ],
)
def test_relativedelta_duration(delta, template, expected):
    """relativedelta values format with 365-day years and 30-day months."""
    assert format_duration(delta, template) == expected
    assert parse_template(template).format(delta) == expected
