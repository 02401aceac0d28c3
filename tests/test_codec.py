"""Tests for the codec module."""

import json
import math

import pytest

from tagattrs.codec import coerce, decode, encode, format_number, parse_number, stringify


class TestEncodeDecode:
    """Tests for encode() and decode()."""

    def test_encode_escapes_markup_characters(self):
        """Test that reserved characters are escaped."""
        assert encode('a "b" & <c>') == "a &quot;b&quot; &amp; &lt;c&gt;"
        assert encode("it's") == "it&#x27;s"

    def test_decode_named_and_numeric_references(self):
        """Test decoding named and numeric character references."""
        assert decode("&lt;b&gt; &amp; &#169; &#x41;") == "<b> & © A"

    def test_decode_is_idempotent_on_plain_text(self):
        """Test that decoded ASCII text stays stable."""
        assert decode("plain text") == "plain text"
        assert decode(decode("plain text")) == "plain text"

    @pytest.mark.parametrize(
        "value",
        ["hello", "two words", 'quote " here', "amp & more", "<tag attr='x'>", ""],
    )
    def test_round_trip(self, value):
        """Test decode(encode(s)) == s."""
        assert decode(encode(value)) == value


class TestStringify:
    """Tests for stringify()."""

    def test_keywords(self):
        """Test None and booleans become their keywords."""
        assert stringify(None) == "null"
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_numbers(self):
        """Test numbers use their canonical short form."""
        assert stringify(42) == "42"
        assert stringify(1.5) == "1.5"
        assert stringify(2.0) == "2"

    def test_containers_become_json(self):
        """Test dicts and lists are written as compact JSON."""
        assert stringify({"a": 1}) == '{"a":1}'
        assert stringify([1, "x"]) == '[1,"x"]'

    def test_other_values(self):
        """Test other values fall back to str()."""
        assert stringify("text") == "text"


class TestNumbers:
    """Tests for number formatting and parsing."""

    def test_format_special_floats(self):
        """Test non-finite floats."""
        assert format_number(float("inf")) == "Infinity"
        assert format_number(float("nan")) == "NaN"

    def test_parse_canonical_numbers(self):
        """Test canonical numeric strings parse."""
        assert parse_number("42") == 42
        assert parse_number("-7") == -7
        assert parse_number("0.25") == 0.25

    @pytest.mark.parametrize(
        "number, text",
        [
            (0.00001, "0.00001"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-10, "1.5e-10"),
            (1e21, "1e+21"),
            (123456789012345680000.0, "123456789012345680000"),
            (-2.5, "-2.5"),
            (-0.0, "0"),
            (float("-inf"), "-Infinity"),
        ],
    )
    def test_format_notation_boundaries(self, number, text):
        """Test fixed notation from 1e-6 to 1e21 and unpadded exponents outside."""
        assert format_number(number) == text

    def test_parse_non_finite(self):
        """Test non-finite spellings parse only in canonical form."""
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf
        assert math.isnan(parse_number("NaN"))
        assert parse_number("inf") is None
        assert parse_number("nan") is None

    def test_parse_rejects_non_canonical(self):
        """Test strings that change when reformatted are not numbers."""
        assert parse_number("042") is None
        assert parse_number("1.0") is None
        assert parse_number(" 7") is None
        assert parse_number("1e-07") is None
        assert parse_number("-0") is None
        assert parse_number("") is None
        assert parse_number("abc") is None


class TestCoerce:
    """Tests for coerce()."""

    def test_keywords(self):
        """Test literal keyword lookup."""
        assert coerce("null") is None
        assert coerce("true") is True
        assert coerce("false") is False

    def test_keywords_are_exact(self):
        """Test that keyword lookup is case-sensitive."""
        assert coerce("True") == "True"

    def test_number(self):
        """Test numeric coercion."""
        assert coerce("42") == 42
        assert coerce("3.5") == 3.5

    def test_json(self):
        """Test JSON object and array coercion."""
        assert coerce('{"a":1}') == {"a": 1}
        assert coerce("[1,2]") == [1, 2]

    def test_plain_string(self):
        """Test other strings pass through."""
        assert coerce("hello") == "hello"

    def test_malformed_json_raises(self):
        """Test that JSON-shaped garbage propagates the parse error."""
        with pytest.raises(json.JSONDecodeError):
            coerce("{not json}")
