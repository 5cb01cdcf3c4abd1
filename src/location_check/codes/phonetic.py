"""Phonetic rendering of location codes.

Letters are spoken with the NATO alphabet and digits with their English
names, e.g. ``"A1"`` becomes ``"ALPHA ONE"``.
"""

from typing import Final

LETTER_WORDS: Final[tuple[str, ...]] = (
    "ALPHA", "BRAVO", "CHARLIE", "DELTA", "ECHO", "FOXTROT", "GOLF", "HOTEL",
    "INDIA", "JULIET", "KILO", "LIMA", "MIKE", "NOVEMBER", "OSCAR", "PAPA",
    "QUEBEC", "ROMEO", "SIERRA", "TANGO", "UNIFORM", "VICTOR", "WHISKEY",
    "X-RAY", "YANKEE", "ZULU",
)  # fmt: skip

DIGIT_WORDS: Final[tuple[str, ...]] = (
    "ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN", "EIGHT", "NINE",
)  # fmt: skip

assert len(LETTER_WORDS) == 26
assert len(DIGIT_WORDS) == 10


def letter_word(letter: str) -> str | None:
    """Look up the NATO word for an ASCII letter (never the digit table)."""
    letter = letter[:1]
    if not (letter.isascii() and letter.isalpha()):
        return None
    letter = letter.upper()
    return LETTER_WORDS[ord(letter) - ord("A")]


def convert_to_word(character: str) -> str | None:
    """Convert a single character to its phonetic word.

    Only the first character of the input is considered. Returns None for
    anything without a phonetic word, such as ``+``, ``-`` or punctuation.
    """
    character = character[:1]
    if character and character in "0123456789":
        return DIGIT_WORDS[int(character)]
    return letter_word(character)


def render_phonetic(code: str) -> str:
    """Render a code as space-separated phonetic words, in input order.

    Characters without a phonetic word are skipped entirely, so
    ``"A+B"`` renders as ``"ALPHA BRAVO"``. An empty code renders as an
    empty string; substituting ``NONE`` is left to the caller.
    """
    words = [word for word in (convert_to_word(c) for c in code) if word is not None]
    return " ".join(words)
