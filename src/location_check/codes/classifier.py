"""Special location classification.

Some locations are not read out character by character. Cash offices,
collection points, jewellery, security, linbin and bulk locations get a
spoken family name, a few fixed codes have their own reading, and a
trailing ``+``/``-`` makes any location relative to another one.

Rules are tried in order and the first match wins, so the two letter
``CA``/``CP`` prefixes must stay ahead of the single letter families.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from location_check.codes.check import compute_check
from location_check.codes.phonetic import render_phonetic
from location_check.logging import get_logger
from location_check.models import LocationFamily, LocationResult, RelativePosition

logger = get_logger(__name__)


@dataclass(frozen=True)
class FamilyRule:
    """A predicate over a normalized code paired with its phonetic composition."""

    family: LocationFamily
    matches: Callable[[str], bool]
    compose: Callable[[str], str]
    fixed_check: str | None = None


def _exact(value: str) -> Callable[[str], bool]:
    return lambda code: code == value


def _prefix(value: str) -> Callable[[str], bool]:
    return lambda code: code.startswith(value)


def _named(name: str, skip: int) -> Callable[[str], str]:
    """Family name followed by the rest of the code read out."""
    return lambda code: f"{name} {render_phonetic(code[skip:])}".strip()


def _split(name: str) -> Callable[[str], str]:
    """Family name spoken between characters 1-2 and the remainder."""
    return lambda code: f"{render_phonetic(code[1:3])} {name} {render_phonetic(code[3:])}".strip()


FAMILY_RULES: Final[tuple[FamilyRule, ...]] = (
    FamilyRule(
        LocationFamily.SALES_OPPORTUNITY_BASKET,
        _exact("SOB"),
        lambda code: "SOB",
        fixed_check="SIERRA",
    ),
    FamilyRule(
        LocationFamily.DELIVERY_PICK_AREA,
        _exact("DPA"),
        lambda code: "DPA",
        fixed_check="VICTOR",
    ),
    FamilyRule(LocationFamily.RETURNS, _exact("RETS"), lambda code: "RETURNS"),
    FamilyRule(LocationFamily.CASH_OFFICE, _prefix("CA"), _named("CASH OFFICE", 2)),
    FamilyRule(LocationFamily.COLLECTION_POINT, _prefix("CP"), _named("COLLECTION POINT", 2)),
    FamilyRule(LocationFamily.JEWELLERY, _prefix("J"), _named("JEWELLERY", 1)),
    FamilyRule(LocationFamily.SECURITY, _prefix("S"), _named("SECURITY", 1)),
    FamilyRule(LocationFamily.LINBIN, _prefix("L"), _split("LINBIN")),
    FamilyRule(LocationFamily.BULK, _prefix("Z"), _split("BULK")),
)


def normalize_code(code: str) -> str:
    """Uppercase the ASCII letters of a code and strip surrounding whitespace.

    Non-ASCII characters are left alone so that, for example, ``ß`` never
    turns into ``SS``.
    """
    return "".join(c.upper() if c.isascii() else c for c in code.strip())


def _split_relative(code: str) -> tuple[str, list[RelativePosition]]:
    """Strip trailing ``+``/``-`` markers, outermost first."""
    positions: list[RelativePosition] = []
    base = code
    while True:
        position = RelativePosition.from_marker(base[-1:])
        if position is None:
            break
        positions.append(position)
        base = base[:-1].rstrip()
    return base, positions


def _match_family(code: str) -> LocationResult | None:
    for rule in FAMILY_RULES:
        if not rule.matches(code):
            continue
        check = rule.fixed_check if rule.fixed_check is not None else compute_check(code)
        return LocationResult(
            code=code,
            phonetic=rule.compose(code),
            check=check,
            family=rule.family,
        )
    return None


def classify(code: str) -> LocationResult | None:
    """Classify a location code against the special location families.

    A trailing ``+`` or ``-`` makes any code special: the base is read out
    (as its family, or character by character) after ``AFTER``/``BEFORE``.

    Args:
        code: Location code, normally already uppercased and at most four
            characters long. Mixed case and longer codes are tolerated.

    Returns:
        The phonetic and check character for a special location, or None
        when the code belongs to no family and should be read out as is.
    """
    code = normalize_code(code)
    base, positions = _split_relative(code)
    inner = _match_family(base)

    if not positions:
        if inner is not None:
            logger.debug("location_classified", code=code, family=inner.family.value)
        return inner

    spoken = inner.phonetic if inner is not None else render_phonetic(base)
    words = [position.prefix for position in positions]
    # The suffix characters take part in the check like any other character
    result = LocationResult(
        code=code,
        phonetic=" ".join([*words, spoken]).strip(),
        check=compute_check(code),
        family=inner.family if inner is not None else LocationFamily.GENERIC,
        relative=positions[0],
    )
    logger.debug(
        "location_classified",
        code=code,
        family=result.family.value,
        relative=positions[0].value,
        depth=len(positions),
    )
    return result
