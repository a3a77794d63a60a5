"""Destination point calculation on a spherical Earth."""

from lodestone_destination.destination import destination
from lodestone_destination.models import FeaturePoint
from lodestone_destination.units import Unit, UnrecognizedUnit

__all__ = ["destination", "FeaturePoint", "Unit", "UnrecognizedUnit"]
