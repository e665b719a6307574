from .encoding import BarcodeEncoding, DIGITS, modulo_10_check_digit
from ..errors import ChecksumMismatch, UnsupportedCombination


class Ean(BarcodeEncoding):
    """Shared tables and check digit handling of the EAN/UPC family.

    The last entry of :attr:`lengths` is the length including the check
    digit. Shorter input gets the check digit appended, full length input
    has its check digit verified.
    """
    patterns = (
        # L pattern, G pattern, R pattern
        (0b0001101, 0b0100111, 0b1110010),  # 0
        (0b0011001, 0b0110011, 0b1100110),  # 1
        (0b0010011, 0b0011011, 0b1101100),  # 2
        (0b0111101, 0b0100001, 0b1000010),  # 3
        (0b0100011, 0b0011101, 0b1011100),  # 4
        (0b0110001, 0b0111001, 0b1001110),  # 5
        (0b0101111, 0b0000101, 0b1010000),  # 6
        (0b0111011, 0b0010001, 0b1000100),  # 7
        (0b0110111, 0b0001001, 0b1001000),  # 8
        (0b0001011, 0b0010111, 0b1110100)   # 9
    )

    code_bitlength = 7
    characters = DIGITS
    unit = "digits"

    guard = 0b101
    center_guard = 0b01010

    @classmethod
    def check_digit(cls, number_sequence):
        return modulo_10_check_digit(number_sequence)

    @classmethod
    def checksum(cls, data):
        if len(data) < cls.lengths[-1]:
            return data + str(cls.check_digit(data))
        check = cls.check_digit(data[:-1])
        if check != int(data[-1]):
            raise ChecksumMismatch(cls.name, str(check), data[-1])
        return data

    @classmethod
    def digit_bars(cls, number, lgr_index):
        yield from cls.bits(cls.patterns[number][lgr_index], cls.code_bitlength)


class Ean13(Ean):
    name = "EAN-13"
    lengths = (12, 13)

    # LG pattern chosen by first digit. 0 bit for L, 1 bit for G
    lg_pattern = (
        0b000000, 0b001011, 0b001101, 0b001110, 0b010011,
        0b011001, 0b011100, 0b010101, 0b010110, 0b011010
    )

    @classmethod
    def bars(cls, checked):
        it = (int(char) for char in checked)
        lg_pattern = cls.lg_pattern[next(it)]

        yield from cls.bits(cls.guard, 3)
        for i, number in enumerate(it):
            if i < 6:
                lgr_index = (lg_pattern >> (5 - i)) & 1
            else:
                lgr_index = 2
            yield from cls.digit_bars(number, lgr_index)
            if i == 5:
                # middle separator, between first 6 and last 6 digits
                yield from cls.bits(cls.center_guard, 5)
        yield from cls.bits(cls.guard, 3)


class UpcA(Ean13):
    """UPC-A, encoded as EAN-13 with number system digit 0"""
    name = "UPC-A"
    lengths = (11, 12)

    @classmethod
    def bars(cls, checked):
        yield from super().bars("0" + checked)


class PrefixedEan13(Ean13):
    """EAN-13 restricted to numbers starting with one of :attr:`prefixes`"""
    prefixes = ()

    @classmethod
    def validate(cls, data):
        data = super().validate(data)
        if not data.startswith(cls.prefixes):
            raise UnsupportedCombination(
                cls.name,
                "number must start with {}".format(" or ".join(cls.prefixes)),
                0
            )
        return data


class Jan(PrefixedEan13):
    name = "JAN"
    prefixes = ("45", "49")


class Bookland(PrefixedEan13):
    name = "Bookland"
    prefixes = ("978", "979")


class Ean8(Ean):
    name = "EAN-8"
    lengths = (7, 8)

    @classmethod
    def bars(cls, checked):
        yield from cls.bits(cls.guard, 3)
        for i, number in enumerate(int(char) for char in checked):
            yield from cls.digit_bars(number, 0 if i < 4 else 2)
            if i == 3:
                yield from cls.bits(cls.center_guard, 5)
        yield from cls.bits(cls.guard, 3)
