from .encoding import BarcodeEncoding, DIGITS, modulo_10_check_digit
from ..errors import InvalidLength


class TwoOfFive(BarcodeEncoding):
    """Common tables of the 2 of 5 symbologies.

    Every digit is five elements, two of them wide. A wide element is
    three modules, a narrow one a single module.
    """
    characters = DIGITS
    unit = "digits"

    widths = (
        "NNWWN", "WNNNW", "NWNNW", "WWNNN", "NNWNW",
        "WNWNN", "NWWNN", "NNNWW", "WNNWN", "NWNWN"
    )

    wide = 3

    @classmethod
    def element(cls, module, width):
        yield from (module for _ in range(cls.wide if width == "W" else 1))


class Interleaved2of5(TwoOfFive):
    """Interleaved 2 of 5 (ITF).

    Digits are encoded in pairs, the first digit of a pair in the bars,
    the second one in the spaces between them. Odd length data gets a
    modulo 10 check digit appended to make the pairs complete.
    """
    name = "Interleaved 2 of 5"
    start = "1010"
    stop = "1101"

    @classmethod
    def checksum(cls, data, check_digit=True):
        if len(data) % 2 == 0:
            return data
        if not check_digit:
            raise InvalidLength(cls.name, "an even number of digits", len(data))
        return data + str(modulo_10_check_digit(data))

    @classmethod
    def bars(cls, checked):
        yield from cls.modules(cls.start)
        for i in range(0, len(checked), 2):
            bar_widths = cls.widths[int(checked[i])]
            space_widths = cls.widths[int(checked[i + 1])]
            for bar, space in zip(bar_widths, space_widths):
                yield from cls.element(1, bar)
                yield from cls.element(0, space)
        yield from cls.modules(cls.stop)


class Standard2of5(TwoOfFive):
    """Standard (industrial) 2 of 5, only the bars carry information"""
    name = "Standard 2 of 5"
    start = "11011010"
    stop = "11010110"

    @classmethod
    def bars(cls, checked):
        yield from cls.modules(cls.start)
        for char in checked:
            for width in cls.widths[int(char)]:
                yield from cls.element(1, width)
                yield 0
        yield from cls.modules(cls.stop)
