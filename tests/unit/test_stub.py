"""
Unit tests for Stub.
"""
import pytest

from domainseg.stub import Stub, StubType


class TestStub:
    """Test stub construction and rating."""

    def test_string_parts_become_tuple(self):
        stub = Stub("123", 2, StubType.NUMBER, "123")
        assert stub.parts == ("123",)

    def test_list_parts_become_tuple(self):
        stub = Stub("shits", 2, StubType.LATIN, ["shit", "s"])
        assert stub.parts == ("shit", "s")

    def test_rating(self):
        """Fewer and longer parts rate lower."""
        assert Stub("shits", 2, StubType.LATIN, ("shits",)).rating() == pytest.approx(0.2)
        assert Stub("shits", 2, StubType.LATIN, ("shit", "s")).rating() == pytest.approx(1.25)
        assert Stub("abc", 2, StubType.LATIN, ("a", "b", "c")).rating() == pytest.approx(3.0)

    def test_rating_of_empty_part(self):
        assert Stub("x", 1, StubType.LATIN, ("",)).rating() == 2

    @pytest.mark.parametrize(
        "text,level,parts",
        [
            ("", 1, ("a",)),
            ("a", 0, ("a",)),
            ("a", 1, ()),
        ],
    )
    def test_invalid_stub(self, text, level, parts):
        with pytest.raises(ValueError):
            Stub(text, level, StubType.LATIN, parts)

    def test_frozen(self):
        stub = Stub("a", 1, StubType.LATIN, ("a",))
        with pytest.raises(AttributeError):
            stub.level = 2

    def test_equality(self):
        assert Stub("ab", 2, StubType.LATIN, ["ab"]) == Stub("ab", 2, StubType.LATIN, ("ab",))

    def test_to_dict(self):
        stub = Stub("-", 3, StubType.DASH, ("-",))
        assert stub.to_dict() == {"text": "-", "level": 3, "kind": "DASH", "parts": ["-"]}

    def test_kind_values(self):
        assert [k.value for k in StubType] == [0, 1, 2, 3, 4]
        assert StubType.SYMBOL.name == "SYMBOL"
