import sys

import pytest

from bitsequence import (
    BitString,
    BitStringImmutable,
    IndexOutOfRange,
    InvalidArgument,
    InvalidFormat,
)
from bitsequence.converters import (
    ArrayConverter,
    BinaryConverter,
    BitsConverter,
    CodewordConverter,
    Converter,
    DecimalConverter,
    HexConverter,
)


ALL = [BinaryConverter, BitsConverter, CodewordConverter, DecimalConverter, HexConverter]


@pytest.mark.parametrize("cls", ALL)
def test_every_converter_fits_the_protocol(cls):
    assert isinstance(cls(), Converter)


def test_array_converter_needs_both_hooks():
    with pytest.raises(TypeError):
        ArrayConverter()

    class ParseOnly(ArrayConverter):
        def _to_bits(self, value):
            return BinaryConverter()._to_bits(value)

    with pytest.raises(TypeError):
        ParseOnly()


# ---------------------------------------------------------------------------
# binary
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("text", ["", "1", "10110101"])
def test_binary_round_trip(text):
    conv = BinaryConverter()
    mutable = conv.to_mutable(text)
    immutable = conv.to_immutable(text)
    assert isinstance(mutable, BitString)
    assert isinstance(immutable, BitStringImmutable)
    assert conv.from_bit_sequence(mutable) == text
    assert conv.from_bit_sequence(immutable) == text


@pytest.mark.parametrize("value", ["10201", 101, None])
def test_binary_rejects(value):
    with pytest.raises(InvalidFormat):
        BinaryConverter().to_mutable(value)


# ---------------------------------------------------------------------------
# hex
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "bits,expected",
    [
        ("10110101", "B5"),
        ("1", "1"),
        ("11111", "1F"),
        ("0000", "0"),
        ("000100100011", "123"),
        ("101011111110", "AFE"),
        ("", ""),
    ],
)
def test_hex_render(bits, expected):
    assert HexConverter(prefix=False).from_bit_sequence(BitString.from_string(bits)) == expected


def test_hex_render_with_prefix():
    conv = HexConverter(prefix=False).with_prefix()
    assert conv.prefix is True
    assert conv.from_bit_sequence(BitStringImmutable.from_string("10110101")) == "0xB5"
    assert conv.with_prefix(False).from_bit_sequence(BitString.from_string("10110101")) == "B5"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("B5", "10110101"),
        ("b5", "10110101"),
        ("0xB5", "10110101"),
        ("0XB5", "10110101"),
        ("0x0F", "00001111"),
        ("0", "0000"),
        ("123", "000100100011"),
        ("0b101", "00001011000100000001"),
    ],
)
def test_hex_parse(text, expected):
    conv = HexConverter()
    assert conv.to_mutable(text).to_string() == expected
    assert conv.to_immutable(text).to_string() == expected


@pytest.mark.parametrize("text", ["", "0x", "G1", "12 3", "0x1g", "-1F"])
def test_hex_rejects_bad_text(text):
    with pytest.raises(InvalidFormat):
        HexConverter().to_mutable(text)


def test_hex_rejects_non_strings():
    with pytest.raises(InvalidFormat):
        HexConverter().to_immutable(0xB5)


# ---------------------------------------------------------------------------
# decimal
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "value,expected",
    [(0, "0"), (1, "1"), (5, "101"), (181, "10110101"), (255, "11111111"), ("42", "101010")],
)
def test_decimal_parse(value, expected):
    assert DecimalConverter().to_mutable(value).to_string() == expected
    assert DecimalConverter().to_immutable(value).to_string() == expected


def test_decimal_with_width():
    conv = DecimalConverter(width=8)
    assert conv.to_mutable(5).to_string() == "00000101"
    assert conv.to_mutable(0).to_string() == "00000000"
    assert conv.with_width(None).to_mutable(5).to_string() == "101"
    assert conv.with_width(3).to_immutable(7).to_string() == "111"
    with pytest.raises(InvalidArgument):
        conv.to_mutable(8)


def test_decimal_rejects():
    conv = DecimalConverter()
    with pytest.raises(InvalidArgument):
        conv.to_mutable(-1)
    with pytest.raises(InvalidArgument):
        conv.to_mutable("-7")
    for bad in ("12a", "", "1.5", "\uff15", "\u0661\u0662", "+5", 1.5, True, None):
        with pytest.raises(InvalidFormat):
            conv.to_mutable(bad)
    with pytest.raises(InvalidArgument):
        DecimalConverter(width=-1)


@pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"), reason="no int string limit")
def test_decimal_text_over_int_limit():
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        with pytest.raises(InvalidFormat):
            DecimalConverter().to_mutable("9" * 5000)
    finally:
        sys.set_int_max_str_digits(previous)


@pytest.mark.parametrize(
    "bits,expected",
    [("", 0), ("0", 0), ("101", 5), ("00000101", 5), ("10110101", 181), ("1" * 70, 2 ** 70 - 1)],
)
def test_decimal_render(bits, expected):
    assert DecimalConverter().from_bit_sequence(BitStringImmutable.from_string(bits)) == expected


# ---------------------------------------------------------------------------
# codewords
# ---------------------------------------------------------------------------
def test_codeword_parse():
    conv = CodewordConverter()
    assert conv.to_mutable(["1011", "0101"]).to_string() == "10110101"
    assert conv.to_immutable(("11", "0", "")).to_string() == "110"
    assert conv.to_mutable([]).length() == 0
    with pytest.raises(InvalidFormat):
        conv.to_mutable(["10", "2"])
    with pytest.raises(InvalidFormat):
        conv.to_mutable("1011")


def test_codeword_render_exact_multiple():
    conv = CodewordConverter(word_length=4, pad=True)
    assert conv.from_bit_sequence(BitString.from_string("10110101")) == ["1011", "0101"]


def test_codeword_render_pads_last_word():
    bits = BitStringImmutable.from_string("1011010111")
    assert CodewordConverter(word_length=4, pad=True).from_bit_sequence(bits) == ["1011", "0101", "1100"]
    assert CodewordConverter(word_length=4, pad=False).from_bit_sequence(bits) == ["1011", "0101", "11"]


def test_codeword_render_leaves_source_alone():
    bits = BitString.from_string("101")
    assert CodewordConverter(word_length=2).from_bit_sequence(bits) == ["10", "10"]
    assert bits.to_string() == "101"


def test_codeword_fluent_configuration():
    conv = CodewordConverter().with_word_length(3).with_padding(False)
    assert conv.word_length == 3 and conv.pad is False
    assert conv.from_bit_sequence(BitString.from_string("1011010")) == ["101", "101", "0"]


def test_codeword_render_empty_and_invalid_width():
    assert CodewordConverter(word_length=8).from_bit_sequence(BitString.empty()) == []
    with pytest.raises(InvalidArgument):
        CodewordConverter(word_length=0).from_bit_sequence(BitString.from_string("1"))


def test_codeword_words_match_core_codeword():
    bits = BitString.from_string("1011010111001100")
    words = CodewordConverter(word_length=8).from_bit_sequence(bits)
    assert words[1] == bits.codeword(1, 8).to_string() == "11001100"
    with pytest.raises(IndexOutOfRange):
        bits.codeword(len(words), 8)


# ---------------------------------------------------------------------------
# bit lists
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "values,expected",
    [
        ([], ""),
        ([1], "1"),
        ([1, 0, 0, 1, 0, 1], "100101"),
        (["1", "1", "0", "1", "0", "0", "1"], "1101001"),
        ([0.0, 1.0, 1.1, 1.999, 0.0, 1, 1.0], "0111011"),
        ([True, True, True, False, False, False, False, False], "11100000"),
    ],
)
def test_bits_parse(values, expected):
    conv = BitsConverter()
    assert conv.to_mutable(values).to_string() == expected
    assert conv.to_immutable(values).to_string() == expected


@pytest.mark.parametrize("values", [[1, 2], ["a"], [[1]], [None], "101", 5])
def test_bits_rejects(values):
    with pytest.raises(InvalidFormat):
        BitsConverter().to_mutable(values)


def test_bits_render():
    assert BitsConverter().from_bit_sequence(BitStringImmutable.from_string("1001")) == [1, 0, 0, 1]
    assert BitsConverter().from_bit_sequence(BitString.empty()) == []
