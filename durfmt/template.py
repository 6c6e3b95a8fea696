"""Format template parsing and rendering.

A template mixes literal text with ``%`` directives:

- ``%<code>`` renders the count for the unit with that code
- ``%0<code>`` renders the same count zero-padded to two digits
- ``%%`` renders a literal percent sign

Parsing produces an immutable ``Template``: the tokens in the order they
appear plus the set of unit codes the template references.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from typing_extensions import override

from durfmt.decompose import Duration, decompose
from durfmt.errors import InvalidDirective
from durfmt.units import EXTENDED_UNITS, UnitTable, unit_codes

logger = logging.getLogger(__name__)


class Token(ABC):

    @abstractmethod
    def render(self, values: Mapping[str, int]) -> str:
        """Return the text this token contributes to the output."""
        pass


@dataclass(frozen=True)
class Text(Token):
    text: str

    @override
    def render(self, values: Mapping[str, int]) -> str:
        return self.text


@dataclass(frozen=True)
class UnitRef(Token):
    code: str
    zero_pad: bool = False

    @override
    def render(self, values: Mapping[str, int]) -> str:
        value = values[self.code]
        # Padding never truncates; the sign counts toward the width
        return f"{value:02d}" if self.zero_pad else str(value)


@dataclass(frozen=True)
class Template:
    source: str
    tokens: tuple[Token, ...]
    requested: frozenset[str]
    units: UnitTable = EXTENDED_UNITS

    def render(self, values: Mapping[str, int]) -> str:
        return render(self.tokens, values)

    def format(self, duration: Duration) -> str:
        """Decompose a duration into the requested units and render it."""
        return self.render(decompose(duration, self.requested, self.units))


def parse_template(template: str, units: UnitTable = EXTENDED_UNITS) -> Template:
    """
    Parse a format template into tokens.

    Args:
        template: Format string containing literal text and directives
        units: Unit table defining the recognized directive codes

    Returns:
        Template with tokens in appearance order and the requested unit codes

    Raises:
        InvalidDirective: If a directive character is not a unit code or
            ``%``, or if the template ends inside a directive

    Example:
        >>> parse_template("%h:%0m").tokens
        (UnitRef(code='h', zero_pad=False), Text(text=':'), UnitRef(code='m', zero_pad=True))
    """
    codes = unit_codes(units)
    tokens: list[Token] = []
    requested: set[str] = set()
    literal: list[str] = []
    in_directive, zero_pad = False, False

    def flush() -> None:
        if literal:
            tokens.append(Text("".join(literal)))
            literal.clear()

    for position, char in enumerate(template):
        if not in_directive:
            if char == "%":
                in_directive = True
            else:
                literal.append(char)
            continue

        if char in codes:
            flush()
            tokens.append(UnitRef(char, zero_pad))
            requested.add(char)
        elif char == "0" and not zero_pad:
            zero_pad = True
            continue
        elif char == "%" and not zero_pad:
            literal.append("%")
        else:
            logger.debug("Rejected duration template %r at %d", template, position)
            raise InvalidDirective(template, position, char)
        in_directive, zero_pad = False, False

    if in_directive:
        logger.debug("Rejected unterminated duration template %r", template)
        raise InvalidDirective(template, len(template), None)

    flush()
    return Template(
        source=template,
        tokens=tuple(tokens),
        requested=frozenset(requested),
        units=units,
    )


def render(tokens: Iterable[Token], values: Mapping[str, int]) -> str:
    """Concatenate rendered tokens, looking unit counts up in ``values``."""
    return "".join(token.render(values) for token in tokens)
