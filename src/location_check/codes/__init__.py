"""Location code interpretation: phonetic rendering, check characters and families."""

from location_check.codes.check import compute_check
from location_check.codes.classifier import FAMILY_RULES, FamilyRule, classify
from location_check.codes.input_filter import filter_location
from location_check.codes.phonetic import render_phonetic

__all__ = [
    "FAMILY_RULES",
    "FamilyRule",
    "classify",
    "compute_check",
    "filter_location",
    "render_phonetic",
]
