"""Restrict typed input to the location code format."""

from location_check.logging import get_logger
from location_check.models import MAX_CODE_LENGTH, RELATIVE_MARKERS

logger = get_logger(__name__)


def _allowed(character: str, position: int) -> bool:
    if character.isascii() and character.isalnum():
        return True
    return position == MAX_CODE_LENGTH - 1 and character in RELATIVE_MARKERS


def filter_location(raw: str) -> str:
    """Remove characters that cannot appear in a location code.

    Only the first four typed positions are considered. Each may hold an
    ASCII letter or digit, and the fourth may also be a ``+`` or ``-``.
    Anything else is dropped, so it looks as if it could not be typed.
    Case is preserved.

    Args:
        raw: Text as typed by the user.

    Returns:
        The filtered code, at most four characters long.
    """
    kept = [c for i, c in enumerate(raw[:MAX_CODE_LENGTH]) if _allowed(c, i)]
    filtered = "".join(kept)
    if len(filtered) != len(raw):
        logger.debug("location_input_filtered", raw=raw, filtered=filtered)
    return filtered
