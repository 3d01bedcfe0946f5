"""
Unit tests for the canonical alphabets.

Tests the three folding modes, idempotence and the bigram layout.
"""
import pytest

from domainseg.alphabet import (
    ALPHABET,
    BIGRAM_INDEX,
    CanonicalMode,
    canonicalize,
    generate_bigrams,
)

PLAIN = ".-_0123456789abcdefghijklmnopqrstuvwxyz"
ODD = "@$#áéíýóú"


class TestCanonicalize:
    """Test canonicalize() in every mode."""

    def test_fold_similar(self):
        """Similar letters collapse, digits become 0, the rest becomes ?."""
        result = canonicalize(PLAIN + ODD, CanonicalMode.FOLD_SIMILAR)
        assert result == ".--0000000000adcdetgligclmmopprstuwwris" + "?" * len(ODD)

    def test_fold_digits_only(self):
        """Letters are kept, digits and underscore are folded."""
        result = canonicalize(PLAIN + ODD, CanonicalMode.FOLD_DIGITS_ONLY)
        assert result == ".--0000000000abcdefghijklmnopqrstuvwxyz" + "?" * len(ODD)

    def test_default_mode_is_digits_only(self):
        assert canonicalize("mp3_shits.com") == "mp0-shits.com"

    def test_bs_only_keeps_digits_and_underscore(self):
        result = canonicalize(PLAIN + ODD, CanonicalMode.BS_ONLY)
        assert result == PLAIN + "?" * len(ODD)

    def test_fold_similar_output_in_alphabet(self):
        result = canonicalize("The Quick_Brown.Fox-99 jumps!", CanonicalMode.FOLD_SIMILAR)
        assert set(result) <= set(ALPHABET)

    @pytest.mark.parametrize("mode", list(CanonicalMode))
    def test_idempotent(self, mode):
        """Canonicalizing canonical text changes nothing."""
        for text in ["mp3shits.com", "Żluťoučký-kůň.cz", "a_b..c", PLAIN + ODD, ""]:
            once = canonicalize(text, mode)
            assert canonicalize(once, mode) == once

    @pytest.mark.parametrize("mode", list(CanonicalMode))
    def test_length_preserved(self, mode):
        text = "ščř-123_abc.xyz"
        assert len(canonicalize(text, mode)) == len(text)

    def test_uppercase_is_not_a_letter(self):
        """Callers lowercase first; capitals fall outside the alphabet."""
        assert canonicalize("ABC") == "???"


class TestBigrams:
    """Test the bigram feature layout."""

    def test_alphabet_size(self):
        assert len(ALPHABET) == 19
        assert len(set(ALPHABET)) == 19
        assert ALPHABET[0] == "." and ALPHABET[-1] == "?"

    def test_bigram_count(self):
        """Every ordered pair except '..'."""
        grams = generate_bigrams()
        assert len(grams) == 19 * 19 - 1
        assert ".." not in grams
        assert len(set(grams)) == len(grams)

    def test_bigram_order(self):
        grams = generate_bigrams()
        assert grams[:3] == [".-", ".0", ".a"]
        assert grams[18] == "-."
        assert grams[-1] == "??"

    def test_bigram_index(self):
        assert BIGRAM_INDEX[".-"] == 0
        assert BIGRAM_INDEX["-."] == 18
        assert BIGRAM_INDEX["??"] == 359
        assert all(BIGRAM_INDEX[g] == i for i, g in enumerate(generate_bigrams()))
