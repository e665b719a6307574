"""EAN-2 and EAN-5 add-on symbols.

Printed to the right of an EAN-13 symbol, EAN-2 carries a periodical
issue number and EAN-5 usually a suggested retail price. Neither has an
appended check digit; the check value only selects the L/G parity of
the digits.
"""
from .ean import Ean


class EanSupplement(Ean):
    guard = 0b1011
    separator = 0b01
    # parity pattern for every possible check value, 0 bit for L, 1 for G
    parities = ()

    @classmethod
    def checksum(cls, data):
        return data

    @classmethod
    def check_value(cls, digits):
        raise NotImplementedError

    @classmethod
    def bars(cls, checked):
        digits = [int(char) for char in checked]
        parity = cls.parities[cls.check_value(digits)]
        length = len(digits)

        yield from cls.bits(cls.guard, 4)
        for i, number in enumerate(digits):
            if i > 0:
                yield from cls.bits(cls.separator, 2)
            yield from cls.digit_bars(number, (parity >> (length - 1 - i)) & 1)


class Ean2(EanSupplement):
    name = "EAN-2"
    lengths = (2,)
    parities = (0b00, 0b01, 0b10, 0b11)

    @classmethod
    def check_value(cls, digits):
        return (digits[0] * 10 + digits[1]) % 4


class Ean5(EanSupplement):
    name = "EAN-5"
    lengths = (5,)
    parities = (
        0b11000, 0b10100, 0b10010, 0b10001, 0b01100,
        0b00110, 0b00011, 0b01010, 0b01001, 0b00101
    )

    @classmethod
    def check_value(cls, digits):
        return (3 * sum(digits[0::2]) + 9 * sum(digits[1::2])) % 10
