import pytest

from barcodec import (
    InvalidCharacter, InvalidLength, UnsupportedCombination, encode, to_string
)
from barcodec.encoding import Code11, Code39, Code93, Interleaved2of5


@pytest.mark.parametrize("data, expected", [
    ("123-45",
     "1011001011010110100101101100101010110101011011011011010110110101011001"),
    ("666", "10110010100110101001101010011010110010101011001"),
    ("12-9", "10110010110101101001011010110101101010100110101011001"),
    ("1234-5678-4321",
     "1011001011010110100101101100101010110110101101011011010100110101"
     "0100110110100101011010101101101100101010010110110101101101101010"
     "0110101011001"),
])
def test_code11(data, expected):
    assert to_string(encode("code11", data)) == expected


def test_code11_check_characters():
    assert Code11.checksum("123-45") == "123-455"
    # K is added above ten characters only
    assert len(Code11.checksum("1234567890")) == 11
    assert len(Code11.checksum("1234-5678-4321")) == 16


@pytest.mark.parametrize("data, expected", [
    ("1234",
     "1001011011010110100101011010110010101101101100101010101001101011"
     "0100101101101"),
    ("983RD512",
     "1001011011010101100101101011010010110101101100101010110101011001"
     "0101011001011011010011010101101001010110101100101011010010110110"
     "1"),
    ("TEST8052",
     "1001011011010101011011001011010110010101011010110010101011011001"
     "0110100101101010100110110101101001101010101100101011010010110110"
     "1"),
])
def test_code39_without_check_character(data, expected):
    assert to_string(encode("code39", data, check_character=False)) == expected


@pytest.mark.parametrize("data, expected", [
    ("1234",
     "1001011011010110100101011010110010101101101100101010101001101011"
     "01101010010110100101101101"),
    ("983RD512",
     "1001011011010101100101101011010010110101101100101010110101011001"
     "0101011001011011010011010101101001010110101100101011010110110100"
     "10100101101101"),
])
def test_code39_with_check_character(data, expected):
    assert to_string(encode("code39", data)) == expected


def test_code39_check_character_pattern():
    data = "1ISTHELONELIESTNUMBER"
    modules = to_string(encode("code39", data))
    check = Code39.check_character(data)
    pattern = Code39.pattern[Code39.characters.index(check)]
    # check character, narrow space and stop character close the symbol
    assert modules[-25:-13] == format(pattern, "012b")
    assert modules[-13:] == "0100101101101"


def test_code39_lowercase():
    with pytest.raises(InvalidCharacter) as error:
        encode("code39", "AbC")
    assert error.value.position == 1


def test_code93():
    assert to_string(encode("code93", "1234")) == (
        "1010111101010010001010001001010000101001010001000110101010000101"
        "010111101"
    )


def test_code93_check_values():
    # C and K check values follow the data
    assert Code93.checksum("1234") == [1, 2, 3, 4, 20, 3]


def test_code93_full_ascii():
    # lowercase letters are written with the (+) shift code
    assert list(Code93.symbols("a")) == [Code93.esc4, 10]
    assert list(Code93.symbols("\x00")) == [Code93.esc2, 30]
    modules = encode("code93", "Hello, World!")
    assert len(modules) % 9 == 1


def test_code93_rejects_non_ascii():
    with pytest.raises(InvalidCharacter):
        encode("code93", "€")


@pytest.mark.parametrize("data, expected", [
    ("A98B", "10110010010110100101010011010101010010011"),
    ("A40156B",
     "1011001001010110100101010100110101011001011010100101001010110101"
     "0010011"),
])
def test_codabar(data, expected):
    assert to_string(encode("codabar", data)) == expected


def test_codabar_reference_length():
    assert len(encode("codabar", "A98B")) == 41


@pytest.mark.parametrize("data, position", [
    ("98B", 0),
    ("A98", 2),
    ("A9C8B", 2),
])
def test_codabar_start_stop(data, position):
    with pytest.raises(UnsupportedCombination) as error:
        encode("codabar", data)
    assert error.value.position == position


def test_codabar_too_short():
    with pytest.raises(InvalidLength):
        encode("codabar", "AB")


def test_interleaved_2_of_5():
    assert to_string(encode("itf", "1234567")) == (
        "1010111010001010111000111011101000101000111010001110001010101010"
        "0011100011101101"
    )


def test_interleaved_2_of_5_check_digit():
    assert Interleaved2of5.checksum("1234567") == "12345670"
    assert Interleaved2of5.checksum("123456") == "123456"
    assert encode("itf", "1234567") == encode("itf", "12345670")


def test_interleaved_2_of_5_odd_without_check_digit():
    with pytest.raises(InvalidLength) as error:
        encode("itf", "1234567", check_digit=False)
    assert error.value.actual == 7
    assert len(encode("itf", "123456", check_digit=False)) == 4 + 3 * 18 + 4


def test_standard_2_of_5():
    assert to_string(encode("stf", "1234567")) == (
        "1101101011101010101110101110101011101110111010101010101110101110"
        "11101011101010101110111010101010101110111011010110"
    )


@pytest.mark.parametrize("symbology", ["code11", "code39", "itf", "stf"])
def test_digit_symbologies_reject_letters(symbology):
    with pytest.raises(InvalidCharacter):
        encode(symbology, "12x4")
