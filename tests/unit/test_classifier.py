"""
Unit tests for the non-letter run classifier.
"""
from domainseg.classifier import classify_non_letter_run
from domainseg.stub import StubType


def kinds_and_parts(stubs):
    return [(s.kind, s.parts) for s in stubs]


class TestClassifyNonLetterRun:
    """Test splitting of digit, dash and symbol runs."""

    def test_empty_run(self):
        assert classify_non_letter_run("abc", 1, "") == []

    def test_single_number(self):
        stubs = classify_non_letter_run("mp0shits", 2, "0")
        assert kinds_and_parts(stubs) == [(StubType.NUMBER, ("0",))]
        assert stubs[0].text == "0"
        assert stubs[0].level == 2

    def test_number_dash_symbol(self):
        stubs = classify_non_letter_run("a0-?b", 3, "0-?")
        assert kinds_and_parts(stubs) == [
            (StubType.NUMBER, ("0",)),
            (StubType.DASH, ("-",)),
            (StubType.SYMBOL, ("?",)),
        ]
        assert all(s.level == 3 for s in stubs)

    def test_symbol_stops_at_number(self):
        stubs = classify_non_letter_run("??00", 1, "??00")
        assert kinds_and_parts(stubs) == [
            (StubType.SYMBOL, ("??",)),
            (StubType.NUMBER, ("00",)),
        ]

    def test_symbol_stops_at_dash(self):
        stubs = classify_non_letter_run("?-?", 1, "?-?")
        assert kinds_and_parts(stubs) == [
            (StubType.SYMBOL, ("?",)),
            (StubType.DASH, ("-",)),
            (StubType.SYMBOL, ("?",)),
        ]

    def test_mixed_dash_and_underscore_is_one_run(self):
        stubs = classify_non_letter_run("a__--b", 2, "__--")
        assert kinds_and_parts(stubs) == [(StubType.DASH, ("__--",))]

    def test_maximal_digit_run(self):
        stubs = classify_non_letter_run("2019", 2, "2019")
        assert kinds_and_parts(stubs) == [(StubType.NUMBER, ("2019",))]

    def test_parts_reconstruct_run(self):
        run = "?!0-0__$$9"
        stubs = classify_non_letter_run(run, 2, run)
        assert "".join(p for s in stubs for p in s.parts) == run
        assert [s.text for s in stubs] == ["?!", "0", "-", "0", "__", "$$", "9"]
