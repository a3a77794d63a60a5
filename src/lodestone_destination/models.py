"""Point value type with GeoJSON serialization."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FeaturePoint:
    """A location on Earth's surface, longitude first as in GeoJSON."""

    longitude: float            # degrees
    latitude: float             # degrees, [-90, 90] by convention (not checked)

    def coordinates(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)

    def isclose(self, other: FeaturePoint, abs_tol: float = 1e-6) -> bool:
        """True when both coordinates agree within ``abs_tol`` degrees."""
        return (
            math.isclose(self.longitude, other.longitude, rel_tol=0.0, abs_tol=abs_tol)
            and math.isclose(self.latitude, other.latitude, rel_tol=0.0, abs_tol=abs_tol)
        )

    def to_geojson(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [self.longitude, self.latitude]},
            "properties": {},
        }

    @classmethod
    def from_geojson(cls, doc: dict[str, Any]) -> FeaturePoint:
        """Build a point from a GeoJSON Feature or bare Point geometry.

        Raises:
            ValueError: if the document is not a Point with two numeric coordinates.
        """
        if not isinstance(doc, dict):
            raise ValueError(f"expected a GeoJSON object, got {type(doc).__name__}")

        geometry = doc.get("geometry") if doc.get("type") == "Feature" else doc
        if not isinstance(geometry, dict):
            raise ValueError(f"expected a Point geometry, got {type(geometry).__name__}")
        if geometry.get("type") != "Point":
            raise ValueError(f"expected a Point geometry, got {geometry.get('type')!r}")

        coords = geometry.get("coordinates")
        if not isinstance(coords, (list, tuple)) or len(coords) < 2:
            raise ValueError(f"Point coordinates must be [lng, lat], got {coords!r}")
        try:
            lng, lat = float(coords[0]), float(coords[1])
        except (TypeError, ValueError):
            raise ValueError(f"non-numeric Point coordinates: {coords!r}") from None
        return cls(longitude=lng, latitude=lat)

    def to_json(self) -> str:
        return json.dumps(self.to_geojson())

    @classmethod
    def from_json(cls, raw: str) -> FeaturePoint:
        return cls.from_geojson(json.loads(raw))
