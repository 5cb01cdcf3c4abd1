"""Look up the phonetic and check character for a typed location."""

from location_check.codes import classify, compute_check, filter_location, render_phonetic
from location_check.codes.classifier import normalize_code
from location_check.logging import get_logger
from location_check.models import NONE, LocationResult

logger = get_logger(__name__)


def lookup_location(raw: str, *, strict: bool = True) -> LocationResult:
    """Compute the phonetic and check character for a location as typed.

    Special locations are handled by the classifier. Everything else is
    read out character by character, with ``NONE`` standing in for an
    empty phonetic.

    Args:
        raw: Location as typed, in any case.
        strict: If True, drop characters the location format does not allow
            before interpreting the code. If False, interpret it as given.

    Returns:
        The lookup result. Never raises for any string input.
    """
    code = filter_location(raw) if strict else raw
    code = normalize_code(code)

    special = classify(code)
    if special is not None:
        return special

    phonetic = render_phonetic(code)
    result = LocationResult(
        code=code,
        phonetic=phonetic or NONE,
        check=compute_check(code),
    )
    logger.debug("location_looked_up", code=code, check=result.check)
    return result
