import pytest

from barcodec import (
    InvalidCharacter, InvalidLength, UnsupportedCombination, encode, to_string
)
from barcodec.encoding import Code128
from barcodec.encoding.code128_subsets import (
    FNC1, FNC2, FNC4, SHIFT, SelectorState, select_subsets, transition
)


CODE_A = "À"
CODE_B = "Ɓ"
CODE_C = "Ć"


def values(data):
    return [symbol.value for symbol in Code128.symbols(data)]


def all_b_length(data):
    # start symbol and one symbol per character
    return 1 + len(data)


@pytest.mark.parametrize("data, expected", [
    (CODE_A + "HELLO",
     "1101000010011000101000100011010001000110111010001101110100011101"
     "10110100010001100011101011"),
    (CODE_A + "XY" + CODE_C + "2199",
     "1101000010011100010110111011010001011101111011011100100101110111"
     "10100111011001100011101011"),
    (CODE_B + "xyZ" + CODE_A + "199!*1",
     "1101001000011110010010110110111101110110001011101011110100111001"
     "1011100101100111001011001100110110011001000100100111001101001011"
     "11001100011101011"),
    (CODE_A + "B\u0006",
     "110100001001000101100010110000100100110100001100011101011"),
    (CODE_C + FNC1 + "4218402050" + CODE_A + "0",
     "1101001110011110101110101101110001100111001011000101000110010011"
     "10110001011101110101111010011101100101011110001100011101011"),
])
def test_explicit_reference_patterns(data, expected):
    assert to_string(encode("code128", data)) == expected


@pytest.mark.parametrize("data, expected", [
    ("HELLO", [104, 40, 37, 44, 44, 47]),
    ("12", [105, 12]),
    ("123", [104, 17, 18, 19]),
    ("1234", [105, 12, 34]),
    ("AB1234", [104, 33, 34, 99, 12, 34]),
    ("AB12345", [104, 33, 34, 17, 99, 23, 45]),
    ("12345AB", [105, 12, 34, 100, 21, 33, 34]),
    ("AB123456CD", [104, 33, 34, 99, 12, 34, 56, 100, 35, 36]),
    ("\tabc", [103, 73, 100, 65, 66, 67]),
    ("a\tb", [104, 65, 98, 73, 66]),
    ("a\t\tb", [104, 65, 101, 73, 73, 100, 66]),
    (FNC1 + "0101234567890128", [105, 102, 1, 1, 23, 45, 67, 89, 1, 28]),
    (FNC4 + "A", [104, 100, 33]),
    (FNC2 + "\n", [103, 97, 74]),
])
def test_automatic_subsets(data, expected):
    assert values(data) == expected


def test_check_symbol():
    assert Code128.checksum("HELLO")[-1] == 40
    assert Code128.checksum(CODE_A + "HELLO")[-1] == 39


def test_short_digit_run_in_middle_stays_in_b():
    assert values("AB1234CD") == [104, 33, 34, 17, 18, 19, 20, 35, 36]


@pytest.mark.parametrize("data", [
    "AB123456CD",
    "ABC1234",
    "1234ABC",
    "X12345678Y",
    "0123456789",
])
def test_digit_runs_shorten_symbol(data):
    assert len(Code128.symbols(data)) < all_b_length(data)


def test_symbol_text():
    symbols = Code128.symbols("a\tb")
    assert [symbol.text for symbol in symbols] == [
        "START B", "a", "SHIFT", "\t", "b"
    ]
    assert [symbol.subset for symbol in symbols] == ["B", "B", "B", "A", "B"]


def test_transition_emits_code_c():
    emitted, state = transition(SelectorState("B", 2), "AB123456CD")
    assert [symbol.value for symbol in emitted] == [99]
    assert state == SelectorState("C", 2)


def test_transition_leaves_subset_c_on_single_digit():
    emitted, state = transition(SelectorState("C", 4), "12345AB")
    assert [symbol.text for symbol in emitted] == ["CODE B"]
    assert state == SelectorState("B", 4)


def test_select_subsets_starts_with_start_symbol():
    symbols = select_subsets("\x01abc")
    assert symbols[0].text == "START A"


def test_pattern_lengths():
    modules = encode("code128", "HELLO")
    # start, 5 data symbols and check symbol, 11 modules each
    assert len(modules) == 7 * 11 + 13
    assert to_string(modules[-13:]) == "1100011101011"


def test_fnc1_prefix_does_not_count_as_data():
    with pytest.raises(InvalidLength):
        encode("code128", FNC1)
    assert encode("code128", FNC1 + "12")


def test_empty_data():
    with pytest.raises(InvalidLength):
        encode("code128", "")


def test_too_long():
    with pytest.raises(InvalidLength):
        encode("code128", "A" * 257)
    assert encode("code128", "A" * 256)


@pytest.mark.parametrize("data, position", [
    ("café", 3),
    ("AB" + CODE_A, 2),
    ("a" + SHIFT + "b", 1),
])
def test_invalid_characters_in_automatic_mode(data, position):
    with pytest.raises(InvalidCharacter) as error:
        encode("code128", data)
    assert error.value.position == position
    assert error.value.symbology == "Code128"


@pytest.mark.parametrize("data", [
    CODE_C + "12" + FNC4,
    CODE_C + "123",
    CODE_C + "12A",
    CODE_A + "abc",
    CODE_B + "\t",
    CODE_A + "AB" + CODE_A + "C",
    CODE_A + "A" + SHIFT,
    CODE_C + "12" + SHIFT + "a",
])
def test_unsupported_explicit_combinations(data):
    with pytest.raises(UnsupportedCombination):
        encode("code128", data)


def test_explicit_shift():
    assert values(CODE_A + "A" + SHIFT + "a") == [103, 33, 98, 65]


def test_explicit_error_position():
    with pytest.raises(UnsupportedCombination) as error:
        encode("code128", CODE_C + "12" + FNC4)
    assert error.value.position == 3
    assert "FNC4" in str(error.value)
