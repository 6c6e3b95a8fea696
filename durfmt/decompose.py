"""Breaking a duration into whole counts of the requested units."""

from collections.abc import Iterable
from datetime import timedelta
from fractions import Fraction
from typing import Any, TypeAlias

from dateutil.relativedelta import relativedelta

from durfmt.units import EXTENDED_UNITS, UnitTable
from durfmt.util import DAY, HOUR, MICROSECOND, MINUTE, MONTH, SECOND, YEAR

Duration: TypeAlias = int | timedelta | relativedelta

# relativedelta fields that pin a calendar position rather than a length
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def to_nanoseconds(duration: Any) -> int:
    """Convert a duration to integer nanoseconds.

    Accepts:
    - int: Passed through as-is (nanoseconds)
    - timedelta: Converted exactly
    - relativedelta: Relative fields only, with years as 365 days and
      months as 30 days

    Raises:
        TypeError: If duration is an unsupported type, or a relativedelta
            with absolute fields or leap days
    """
    if isinstance(duration, bool):
        raise TypeError(f"Duration must be a number of nanoseconds, got {duration!r}")
    if isinstance(duration, int):
        return duration
    if isinstance(duration, timedelta):
        micros = (duration.days * 86400 + duration.seconds) * 1_000_000
        return (micros + duration.microseconds) * MICROSECOND
    if isinstance(duration, relativedelta):
        fixed = [name for name in _ABSOLUTE_FIELDS if getattr(duration, name) is not None]
        if duration.leapdays:
            fixed.append("leapdays")
        if fixed:
            raise TypeError(
                f"relativedelta duration must only use relative fields.\n"
                f"Got absolute fields: {', '.join(fixed)}\n"
                f"Hint: Use plural fields, e.g. relativedelta(days=1, hours=2)"
            )
        total = Fraction(0)
        for value, unit in (
            (duration.years, YEAR),
            (duration.months, MONTH),
            (duration.days, DAY),
            (duration.hours, HOUR),
            (duration.minutes, MINUTE),
            (duration.seconds, SECOND),
            (duration.microseconds, MICROSECOND),
        ):
            total += Fraction(value) * unit
        if total.denominator != 1:
            raise TypeError(
                f"relativedelta duration is not a whole number of nanoseconds, "
                f"got {duration!r}"
            )
        return int(total)
    raise TypeError(
        f"Duration must be int, timedelta, or relativedelta.\n"
        f"Got {type(duration).__name__!r}: {duration!r}\n"
        f"Examples:\n"
        f"  format_duration(90 * MINUTE, '%h:%0m')  # int (nanoseconds)\n"
        f"  format_duration(timedelta(minutes=90), '%h:%0m')"
    )


def _trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """divmod rounding toward zero; the remainder takes the dividend's sign."""
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def decompose(
    duration: Duration,
    requested: Iterable[str],
    units: UnitTable = EXTENDED_UNITS,
) -> dict[str, int]:
    """
    Break a duration into counts for the requested units.

    Units are visited in table order (largest first). Only requested units
    consume the remainder, so leaving a unit out folds its range into the
    next smaller requested unit.

    Args:
        duration: Duration to decompose
        requested: Codes of the units to compute
        units: Canonical unit table

    Returns:
        Mapping from unit code to count

    Example:
        >>> decompose(90 * MINUTE, {"h", "m"})
        {'h': 1, 'm': 30}
        >>> decompose(90 * MINUTE, {"m"})
        {'m': 90}
    """
    wanted = set(requested)
    remaining = to_nanoseconds(duration)
    values: dict[str, int] = {}
    for unit in units:
        if unit.code in wanted:
            values[unit.code], remaining = _trunc_divmod(remaining, unit.divisor)
    return values
