from collections.abc import Iterable

from durfmt.decompose import Duration
from durfmt.template import Template, parse_template
from durfmt.units import EXTENDED_UNITS, Unit, unit_table


class DurationFormatter:
    """Formats durations against templates using a fixed unit table."""

    def __init__(self, units: Iterable[Unit] = EXTENDED_UNITS):
        """
        Initialize a formatter.

        Args:
            units: Unit table, largest divisor first (default: all units
                from years down to nanoseconds)

        Example:
            >>> from durfmt import MINIMAL_UNITS, MINUTE
            >>> DurationFormatter(MINIMAL_UNITS).format(90 * MINUTE, "%h:%0m")
            '1:30'
        """
        self.units: tuple[Unit, ...] = unit_table(units)

    def parse(self, template: str) -> Template:
        return parse_template(template, self.units)

    def format(self, duration: Duration, template: str) -> str:
        """Render a duration through a template.

        Raises:
            InvalidDirective: If the template contains an unknown directive
            TypeError: If the duration type is not supported
        """
        return self.parse(template).format(duration)

    def __repr__(self) -> str:
        codes = "".join(unit.code for unit in self.units)
        return f"DurationFormatter(units={codes!r})"


_default = DurationFormatter()


def format_duration(
    duration: Duration, template: str, *, units: Iterable[Unit] | None = None
) -> str:
    """
    Format a duration according to a template.

    Directives:
        %y years, %o months (30 days), %w weeks, %d days, %h hours,
        %m minutes, %s seconds, %i milliseconds, %c microseconds,
        %n nanoseconds, %% a literal percent sign.
        Place a 0 after the % (e.g. %0m) to zero-pad a value to two digits.
        Zero-padding is intended for %h, %m and %s.

    Only the units present in the template are computed. Each takes what
    remains after the larger requested units, so "%h %s" of 90 minutes
    renders "1 1800".

    Args:
        duration: Nanoseconds as an int, or a timedelta/relativedelta
        template: Format string
        units: Optional unit table overriding the default

    Returns:
        The rendered string

    Raises:
        InvalidDirective: If the template contains an unknown or
            unterminated directive

    Example:
        >>> from durfmt import HOUR, MINUTE, SECOND
        >>> format_duration(HOUR + MINUTE + SECOND, "%0h:%0m:%0s")
        '01:01:01'
        >>> format_duration(5 * SECOND, "100%% done in %ss")
        '100% done in 5s'
    """
    formatter = _default if units is None else DurationFormatter(units)
    return formatter.format(duration, template)
