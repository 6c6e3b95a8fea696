from .core import DurationFormatter, format_duration
from .decompose import Duration, decompose, to_nanoseconds
from .errors import InvalidDirective
from .template import Template, Text, Token, UnitRef, parse_template, render
from .units import EXTENDED_UNITS, MINIMAL_UNITS, Unit, unit_table
from .util import (
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

__all__ = [
    "format_duration",
    "DurationFormatter",
    "Template",
    "Token",
    "Text",
    "UnitRef",
    "parse_template",
    "render",
    "decompose",
    "to_nanoseconds",
    "Duration",
    "InvalidDirective",
    "Unit",
    "unit_table",
    "EXTENDED_UNITS",
    "MINIMAL_UNITS",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
