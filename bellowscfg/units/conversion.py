"""
Conversion between display units and the canonical units.

Canonical units:
- length: inches
- pressure: psi (gauge)
- temperature: degrees Fahrenheit

Length and pressure are purely multiplicative, so they go through a
factor table (display units per canonical unit). Temperature is affine
and is converted directly on the F/C boundary.

Nothing in this module raises. Malformed numbers read as 0 and unknown
unit tokens are treated as already canonical.
"""

import logging
import math
import re
from enum import Enum
from typing import Optional, Union

from bellowscfg.units.registry import (
    CANONICAL_LENGTH,
    CANONICAL_PRESSURE,
    factor_from,
)

logger = logging.getLogger(__name__)


class Dimension(str, Enum):
    """Physical quantity a query field carries."""
    LENGTH = "length"
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"


# Display unit tokens offered to users
LENGTH_UNITS = ("IN", "MM", "FT")
PRESSURE_UNITS = ("PSIG", "BAR")
TEMPERATURE_UNITS = ("°F", "°C")

DEFAULT_UNITS = {
    Dimension.LENGTH: "IN",
    Dimension.PRESSURE: "PSIG",
    Dimension.TEMPERATURE: "°F",
}

LENGTH_FACTORS = {
    "IN": 1.0,
    "MM": factor_from(CANONICAL_LENGTH, "millimeter"),
    "FT": factor_from(CANONICAL_LENGTH, "foot"),
}

PRESSURE_FACTORS = {
    "PSIG": 1.0,
    "BAR": factor_from(CANONICAL_PRESSURE, "bar"),
}

# Alternate spellings accepted from callers
_ALIASES = {
    '"': "IN",
    "INCH": "IN",
    "INCHES": "IN",
    "NB": "IN",  # nominal bore is quoted in inches
    "MILLIMETER": "MM",
    "FEET": "FT",
    "FOOT": "FT",
    "'": "FT",
    "PSI": "PSIG",
    "F": "°F",
    "DEGF": "°F",
    "ºF": "°F",
    "C": "°C",
    "DEGC": "°C",
    "ºC": "°C",
}

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(\d+\.?\d*|\.\d+)")

Number = Union[int, float]


def _finite(number: float) -> float:
    """Overflowed or NaN numbers read as 0."""
    return number if math.isfinite(number) else 0.0


def normalize_unit(unit: str) -> str:
    """Map a unit token to its display spelling (upper-case, aliases resolved)."""
    token = (unit or "").strip().upper()
    return _ALIASES.get(token, token)


def parse_value(value) -> float:
    """
    Read a number out of free-form user text.

    Everything except digits, '.' and '-' is dropped and the leading
    number of what remains is used, so '150 psig', '1,200' and '4"'
    all parse. Anything unreadable is 0.

    Examples:
        >>> parse_value("1,200 mm")
        1200.0
        >>> parse_value("NIL")
        0.0
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return _finite(float(value))
    if not value:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", str(value))
    found = _LEADING_NUMBER.match(cleaned)
    if not found:
        return 0.0
    return _finite(float(found.group(0)))


def _factor(unit: str, dimension: Dimension) -> float:
    table = LENGTH_FACTORS if dimension == Dimension.LENGTH else PRESSURE_FACTORS
    factor = table.get(normalize_unit(unit))
    if factor is None:
        logger.debug("Unknown %s unit %r, treating as canonical", dimension.value, unit)
        return 1.0
    return factor


def _is_celsius(unit: str) -> bool:
    return normalize_unit(unit) == "°C"


def to_canonical(value, from_unit: str, dimension: Dimension) -> float:
    """
    Convert a display value into the canonical unit.

    Args:
        value: Number or free-form text (see parse_value)
        from_unit: Display unit token
        dimension: Which quantity the value is

    Returns:
        Value in inches, psi or Fahrenheit
    """
    number = parse_value(value)
    dimension = Dimension(dimension)
    if dimension == Dimension.TEMPERATURE:
        if _is_celsius(from_unit):
            return _finite(number * 9 / 5 + 32)
        return number
    return _finite(number / _factor(from_unit, dimension))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_value(value: Number, unit: str, dimension: Dimension) -> str:
    """Format a value already expressed in `unit` for display."""
    dimension = Dimension(dimension)
    value = _finite(float(value))
    if dimension == Dimension.TEMPERATURE:
        return str(_round_half_up(value))
    if dimension == Dimension.LENGTH and normalize_unit(unit) == "FT":
        return f"{value:.3f}"
    return f"{value:.2f}"


def from_canonical(value: Number, to_unit: str, dimension: Dimension) -> str:
    """
    Express a canonical value in a display unit, rounded for display.

    Length rounds to 3 decimals for feet and 2 otherwise, pressure to
    2 decimals and temperature to a whole degree.
    """
    dimension = Dimension(dimension)
    value = _finite(float(value))
    if dimension == Dimension.TEMPERATURE:
        converted = (value - 32) * 5 / 9 if _is_celsius(to_unit) else value
    else:
        converted = value * _factor(to_unit, dimension)
    return format_value(converted, to_unit, dimension)


def re_express(
    text: str,
    old_unit: str,
    new_unit: str,
    dimension: Dimension,
    canonical: Optional[float] = None,
) -> str:
    """
    Re-express display text given in `old_unit` in `new_unit`.

    Empty text stays empty. When the canonical value behind the text is
    known it is formatted directly; the rounded text is only re-parsed
    when it is not, which can drift by the display precision.
    """
    if not text or not str(text).strip():
        return text
    if canonical is None:
        canonical = to_canonical(text, old_unit, dimension)
    return from_canonical(canonical, new_unit, dimension)


def units_for(dimension: Dimension) -> tuple[str, ...]:
    """Display units offered for a dimension."""
    dimension = Dimension(dimension)
    if dimension == Dimension.LENGTH:
        return LENGTH_UNITS
    if dimension == Dimension.PRESSURE:
        return PRESSURE_UNITS
    return TEMPERATURE_UNITS


def format_literal(value: Optional[Number]) -> str:
    """
    A catalog number as written, without padding: 14.0 -> '14',
    10.5 -> '10.5'. None renders as '-'.
    """
    if value is None:
        return "-"
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
