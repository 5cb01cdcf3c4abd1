"""Pydantic models for location codes and their lookup results."""

from enum import StrEnum
from typing import Final, Self

from pydantic import BaseModel, ConfigDict, Field

NONE: Final = "NONE"
MAX_CODE_LENGTH: Final = 4
RELATIVE_MARKERS: Final = "+-"


class LocationFamily(StrEnum):
    """Families of location codes that get their own phonetic composition."""

    GENERIC = "generic"
    SALES_OPPORTUNITY_BASKET = "sales_opportunity_basket"
    DELIVERY_PICK_AREA = "delivery_pick_area"
    RETURNS = "returns"
    CASH_OFFICE = "cash_office"
    COLLECTION_POINT = "collection_point"
    JEWELLERY = "jewellery"
    SECURITY = "security"
    LINBIN = "linbin"
    BULK = "bulk"

    @property
    def display_name(self) -> str:
        """Human-readable display name for this family."""
        return _FAMILY_DISPLAY_NAMES[self.value]


_FAMILY_DISPLAY_NAMES: Final[dict[str, str]] = {
    "generic": "Generic",
    "sales_opportunity_basket": "Sales opportunity basket",
    "delivery_pick_area": "Delivery pick area",
    "returns": "Returns",
    "cash_office": "Cash office",
    "collection_point": "Collection point",
    "jewellery": "Jewellery",
    "security": "Security",
    "linbin": "Linbin",
    "bulk": "Bulk",
}
assert set(_FAMILY_DISPLAY_NAMES) == {f.value for f in LocationFamily}


class RelativePosition(StrEnum):
    """Relative-position suffix on a location code."""

    AFTER = "after"
    BEFORE = "before"

    @property
    def prefix(self) -> str:
        """Spoken word put in front of the base location's phonetic."""
        return self.value.upper()

    @classmethod
    def from_marker(cls, character: str) -> Self | None:
        """Return the position for a ``+``/``-`` marker, or None for anything else."""
        if character == "+":
            return cls.AFTER
        if character == "-":
            return cls.BEFORE
        return None


class LocationResult(BaseModel):
    """Phonetic rendering and check character for one location code."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Normalized location code the result was computed for")
    phonetic: str
    check: str = Field(description="Single phonetic word, or NONE when the code is not 4 long")
    family: LocationFamily = LocationFamily.GENERIC
    relative: RelativePosition | None = None
