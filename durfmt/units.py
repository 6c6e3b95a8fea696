"""Duration unit tables.

A unit table is an ordered tuple of ``Unit`` records, largest divisor first.
That order is the canonical decomposition order and is independent of the
order in which directives appear in a template.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from durfmt.util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MONTH,
    NANOSECOND,
    SECOND,
    WEEK,
    YEAR,
)

# Characters with a fixed meaning inside a directive
_RESERVED_CODES = frozenset({"%", "0"})


@dataclass(frozen=True, kw_only=True)
class Unit:
    code: str
    divisor: int
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or len(self.code) != 1:
            raise ValueError(
                f"Unit code must be a single character, got {self.code!r}"
            )
        if self.code in _RESERVED_CODES:
            raise ValueError(f"Unit code {self.code!r} is reserved")
        if isinstance(self.divisor, bool) or not isinstance(self.divisor, int):
            raise ValueError(
                f"Unit divisor must be an integer number of nanoseconds, "
                f"got {self.divisor!r} for {self.name}"
            )
        if self.divisor <= 0:
            raise ValueError(
                f"Unit divisor must be positive, got {self.divisor} for {self.name}"
            )

    def __str__(self) -> str:
        return f"%{self.code} ({self.name}, {self.divisor}ns)"


UnitTable = tuple[Unit, ...]


EXTENDED_UNITS: UnitTable = (
    Unit(code="y", divisor=YEAR, name="years"),
    Unit(code="o", divisor=MONTH, name="months"),
    Unit(code="w", divisor=WEEK, name="weeks"),
    Unit(code="d", divisor=DAY, name="days"),
    Unit(code="h", divisor=HOUR, name="hours"),
    Unit(code="m", divisor=MINUTE, name="minutes"),
    Unit(code="s", divisor=SECOND, name="seconds"),
    Unit(code="i", divisor=MILLISECOND, name="milliseconds"),
    Unit(code="c", divisor=MICROSECOND, name="microseconds"),
    Unit(code="n", divisor=NANOSECOND, name="nanoseconds"),
)

MINIMAL_UNITS: UnitTable = tuple(
    unit for unit in EXTENDED_UNITS if unit.code in {"y", "w", "d", "h", "m", "s"}
)


def unit_table(units: Iterable[Unit]) -> UnitTable:
    """Validate a unit table and return it as an immutable tuple.

    Raises:
        ValueError: If codes repeat or divisors are not strictly decreasing
    """
    table = tuple(units)
    seen: set[str] = set()
    previous: Unit | None = None
    for unit in table:
        if unit.code in seen:
            raise ValueError(f"Duplicate unit code {unit.code!r} in unit table")
        seen.add(unit.code)
        if previous is not None and unit.divisor >= previous.divisor:
            raise ValueError(
                f"Unit table must be ordered largest to smallest.\n"
                f"Got {previous.name} ({previous.divisor}ns) "
                f"before {unit.name} ({unit.divisor}ns)"
            )
        previous = unit
    return table


def unit_codes(units: UnitTable) -> frozenset[str]:
    return frozenset(unit.code for unit in units)
