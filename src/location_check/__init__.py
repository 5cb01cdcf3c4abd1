"""Phonetic readings and check characters for warehouse location codes."""

from location_check.codes import classify, compute_check, render_phonetic
from location_check.lookup import lookup_location
from location_check.models import LocationFamily, LocationResult, RelativePosition

__all__ = [
    "LocationFamily",
    "LocationResult",
    "RelativePosition",
    "classify",
    "compute_check",
    "lookup_location",
    "render_phonetic",
]
