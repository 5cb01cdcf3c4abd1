"""Check character calculation for location codes.

The check character guards against transcription mistakes. Each of the
four characters contributes its character code times a small prime, and
the sum modulo 26 picks the check letter. With the weights used here a
one-step change in the last character moves the check three letters on:
``AAAA`` is ALPHA and ``AAAB`` is DELTA.
"""

from typing import Final

from location_check.codes.phonetic import LETTER_WORDS
from location_check.models import MAX_CODE_LENGTH, NONE

# Terms j=2..5 read positions 2, 3, 0, 1 with weights 7, 3, 5, 7
CHECK_TERMS: Final = range(2, 6)


def check_weight(term: int) -> int:
    """Weight applied to the character read for term ``term``."""
    return term % 3 * 2 + 3


def check_letter(code: str) -> str | None:
    """Return the raw check letter (``"A"``-``"Z"``), or None if the code is not 4 long."""
    if len(code) != MAX_CODE_LENGTH:
        return None
    total = sum(ord(code[term % MAX_CODE_LENGTH]) * check_weight(term) for term in CHECK_TERMS)
    return chr(total % 26 + ord("A"))


def compute_check(code: str) -> str:
    """Compute the phonetic check word for a 4 character location code.

    Every character counts literally, including a trailing ``+`` or ``-``.
    Codes of any other length have no check and return ``NONE``.
    """
    letter = check_letter(code)
    if letter is None:
        return NONE
    return LETTER_WORDS[ord(letter) - ord("A")]
