"""Property-based tests using Hypothesis.

Tests invariants of the location algorithms: check character arithmetic,
phonetic rendering and classifier robustness on arbitrary input.
"""

import string

from hypothesis import given
from hypothesis import strategies as st

from location_check.codes.check import check_letter, compute_check
from location_check.codes.classifier import classify
from location_check.codes.input_filter import filter_location
from location_check.codes.phonetic import render_phonetic
from location_check.lookup import lookup_location

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

alphanumerics = string.ascii_uppercase + string.digits

# Codes as the input filter would pass them on, already uppercased
location_codes = st.from_regex(r"[A-Z0-9]{0,3}|[A-Z0-9]{3}[A-Z0-9+\-]", fullmatch=True)

full_codes = st.text(alphabet=alphanumerics, min_size=4, max_size=4)


def _shift(letter: str, steps: int) -> str:
    return chr((ord(letter) - ord("A") + steps) % 26 + ord("A"))


# ---------------------------------------------------------------------------
# compute_check
# ---------------------------------------------------------------------------


class TestCheckProperties:
    @given(
        st.text(alphabet=alphanumerics, min_size=3, max_size=3),
        st.sampled_from(string.ascii_uppercase[:-1]),
    )
    def test_last_character_step_moves_three(self, head: str, last: str) -> None:
        """Each step of the last character moves the check three letters on."""
        before = check_letter(head + last)
        after = check_letter(head + chr(ord(last) + 1))
        assert before is not None and after is not None
        assert after == _shift(before, 3)

    @given(full_codes)
    def test_single_word(self, code: str) -> None:
        word = compute_check(code)
        assert word != "NONE"
        assert " " not in word

    @given(st.text(max_size=10).filter(lambda s: len(s) != 4))
    def test_wrong_length_is_none(self, code: str) -> None:
        assert compute_check(code) == "NONE"

    @given(st.text(min_size=4, max_size=4))
    def test_any_four_characters(self, code: str) -> None:
        assert compute_check(code) != "NONE"


# ---------------------------------------------------------------------------
# render_phonetic
# ---------------------------------------------------------------------------


class TestRenderProperties:
    @given(st.text(alphabet=alphanumerics, max_size=8))
    def test_one_word_per_character(self, code: str) -> None:
        rendered = render_phonetic(code)
        assert len(rendered.split()) == len(code)

    @given(st.text())
    def test_never_raises(self, text: str) -> None:
        render_phonetic(text)


# ---------------------------------------------------------------------------
# classify / lookup
# ---------------------------------------------------------------------------


class TestClassifyProperties:
    @given(location_codes)
    def test_check_always_uses_full_code(self, code: str) -> None:
        result = classify(code)
        if result is not None and result.code not in ("SOB", "DPA"):
            assert result.check == compute_check(code)

    @given(location_codes)
    def test_deterministic(self, code: str) -> None:
        assert classify(code) == classify(code)

    @given(st.text())
    def test_never_raises(self, text: str) -> None:
        classify(text)
        lookup_location(text)
        lookup_location(text, strict=False)

    @given(
        st.text(alphabet="+-", min_size=1, max_size=5000),
        st.sampled_from(["", "S1", "AB", "SOB"]),
    )
    def test_marker_runs_never_raise(self, markers: str, base: str) -> None:
        result = lookup_location(base + markers, strict=False)
        assert result.phonetic.split()[0] in ("AFTER", "BEFORE")


class TestFilterProperties:
    @given(st.text())
    def test_filtered_characters_are_allowed(self, text: str) -> None:
        filtered = filter_location(text)
        assert len(filtered) <= 4
        assert all(c in string.ascii_letters + string.digits + "+-" for c in filtered)

    @given(st.text())
    def test_idempotent(self, text: str) -> None:
        filtered = filter_location(text).rstrip("+-")
        assert filter_location(filtered) == filtered

    @given(location_codes)
    def test_location_codes_pass_unchanged(self, code: str) -> None:
        assert filter_location(code) == code
