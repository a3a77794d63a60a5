"""Units of measurement accepted for a travel distance."""

from __future__ import annotations

import math
from enum import Enum

from lodestone_destination.geo import EARTH_RADIUS_KM, EARTH_RADIUS_M, km_to_mi


class UnrecognizedUnit(ValueError):
    """Raised when a unit token does not name a known unit."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Unrecognized unit of measurement {token!r} "
            f"(expected one of: {', '.join(sorted(_ALIASES))})"
        )


class Unit(str, Enum):
    DEGREES = "degrees"
    KILOMETERS = "kilometers"
    METERS = "meters"
    MILES = "miles"
    RADIANS = "radians"

    @classmethod
    def parse(cls, token: str | Unit) -> Unit:
        """Resolve a token such as ``"km"`` or ``"miles"``. Case-sensitive."""
        if isinstance(token, Unit):
            return token
        try:
            return _ALIASES[token]
        except (KeyError, TypeError):
            raise UnrecognizedUnit(token) from None

    @property
    def radius(self) -> float:
        """Divisor turning a distance in this unit into an angle in radians."""
        return _RADII[self]


_ALIASES: dict[str, Unit] = {
    "degrees": Unit.DEGREES,
    "kilometers": Unit.KILOMETERS,
    "km": Unit.KILOMETERS,
    "meters": Unit.METERS,
    "m": Unit.METERS,
    "miles": Unit.MILES,
    "mi": Unit.MILES,
    "radians": Unit.RADIANS,
}

_RADII: dict[Unit, float] = {
    Unit.DEGREES: math.degrees(1.0),
    Unit.KILOMETERS: EARTH_RADIUS_KM,
    Unit.METERS: EARTH_RADIUS_M,
    Unit.MILES: km_to_mi(EARTH_RADIUS_KM),
    Unit.RADIANS: 1.0,
}


def aliases(unit: Unit) -> list[str]:
    """All tokens that parse to ``unit``, long form first."""
    return [token for token, u in _ALIASES.items() if u is unit]
