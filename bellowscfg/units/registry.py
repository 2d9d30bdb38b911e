"""
Unit registry shared by the configurator.

Uses pint so that the display-unit factor tables are derived from one
dimensionally checked source instead of hand-typed constants.
"""

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Canonical units for stored query values
CANONICAL_LENGTH = "inch"
CANONICAL_PRESSURE = "psi"


def factor_from(canonical: str, unit: str) -> float:
    """How many `unit` make up one `canonical` unit."""
    return Q_(1.0, canonical).to(unit).magnitude
