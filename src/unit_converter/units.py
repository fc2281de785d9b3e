"""Token normalization and parsing of value+unit input."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Mapping, Tuple

from .catalog import ALL_CATEGORIES
from .errors import InvalidValue, UnknownUnit

if TYPE_CHECKING:  # pragma: no cover
    from .resolver import UnitResolver


_VALUE_RE = re.compile(r"\s*(?P<value>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")

PREFIXES: Mapping[str, float] = {
    "k": 1e3,
    "M": 1e6,
    "G": 1e9,
    "T": 1e12,
    "m": 1e-3,
    "u": 1e-6,
    "µ": 1e-6,
    "n": 1e-9,
    "p": 1e-12,
    "c": 1e-2,
    "d": 1e-1,
    "h": 1e2,
}


def normalize(token: str) -> str:
    """Uppercase *token* and drop all whitespace."""

    return "".join(token.upper().split())


def _split_number(text: str) -> Tuple[float, str]:
    match = _VALUE_RE.match(text)
    if not match:
        raise InvalidValue(text)
    return float(match.group("value")), text[match.end():]


def parse_prefixed(text: str) -> Tuple[float, str]:
    """Split ``"10 km"`` style input into a value and a unit token.

    A metric prefix directly following the number scales the value and is
    consumed, so ``"2k"`` gives ``(2000.0, "")`` and ``"10 mft"`` gives
    ``(0.01, "ft")``.
    """

    value, rest = _split_number(text)
    rest = rest.lstrip()
    if rest and rest[0] in PREFIXES:
        value *= PREFIXES[rest[0]]
        rest = rest[1:]
    return value, rest.strip()


def parse_value(text: str) -> float:
    """Parse a bare number; a trailing metric prefix is accepted, anything else is not."""

    value, rest = parse_prefixed(text)
    if rest:
        raise InvalidValue(text)
    return value


def parse_quantity(text: str, resolver: "UnitResolver", scope: str = ALL_CATEGORIES) -> Tuple[float, str]:
    """Read a combined value+unit token against the units available in *scope*.

    The literal reading wins when its unit resolves (``"10 mi"`` stays miles);
    otherwise a leading metric prefix is applied (``"2 kft"`` is 2000 ft).
    """

    value, rest = _split_number(text)
    literal = rest.strip()
    if literal and resolver.resolve(literal, scope) is not None:
        return value, literal
    prefixed_value, prefixed_unit = parse_prefixed(text)
    if prefixed_unit and prefixed_unit != literal and resolver.resolve(prefixed_unit, scope) is not None:
        return prefixed_value, prefixed_unit
    raise UnknownUnit(literal, scope)


__all__ = ["PREFIXES", "normalize", "parse_prefixed", "parse_value", "parse_quantity"]
