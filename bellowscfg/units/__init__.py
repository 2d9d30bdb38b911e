"""
Unit handling for configurator queries.

Display values are converted to canonical units (inches, psi,
Fahrenheit) before they reach the matcher.
"""

from bellowscfg.units.registry import ureg, Q_
from bellowscfg.units.conversion import (
    Dimension,
    DEFAULT_UNITS,
    LENGTH_UNITS,
    PRESSURE_UNITS,
    TEMPERATURE_UNITS,
    normalize_unit,
    parse_value,
    to_canonical,
    from_canonical,
    format_value,
    re_express,
    format_literal,
    units_for,
)

__all__ = [
    "ureg",
    "Q_",
    "Dimension",
    "DEFAULT_UNITS",
    "LENGTH_UNITS",
    "PRESSURE_UNITS",
    "TEMPERATURE_UNITS",
    "normalize_unit",
    "parse_value",
    "to_canonical",
    "from_canonical",
    "format_value",
    "re_express",
    "format_literal",
    "units_for",
]
