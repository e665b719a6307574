from .encoding import BarcodeEncoding
from ..errors import UnsupportedCombination


class Codabar(BarcodeEncoding):
    """Encoder for Codabar barcodes.

    Codabar is self-checking and has no check character. The data must
    start and end with one of the start/stop characters A, B, C or D.
    """
    name = "Codabar"
    characters = "0123456789-$:/.+ABCD"
    start_stop = "ABCD"
    min_length = 3

    pattern = {
        "0": "101010011",
        "1": "101011001",
        "2": "101001011",
        "3": "110010101",
        "4": "101101001",
        "5": "110101001",
        "6": "100101011",
        "7": "100101101",
        "8": "100110101",
        "9": "110100101",
        "-": "101001101",
        "$": "101100101",
        ":": "1101011011",
        "/": "1101101011",
        ".": "1101101101",
        "+": "10110011001",
        "A": "1011001001",
        "B": "1010010011",
        "C": "1001001011",
        "D": "1010011001",
    }

    @classmethod
    def validate(cls, data):
        data = super().validate(data)
        last = len(data) - 1
        for position in (0, last):
            if data[position] not in cls.start_stop:
                raise UnsupportedCombination(
                    cls.name, "must start and end with A, B, C or D", position
                )
        for position in range(1, last):
            if data[position] in cls.start_stop:
                raise UnsupportedCombination(
                    cls.name,
                    "start/stop character {!r} inside data".format(
                        data[position]
                    ),
                    position
                )
        return data

    @classmethod
    def bars(cls, checked):
        for i, char in enumerate(checked):
            if i > 0:
                yield 0
            yield from cls.modules(cls.pattern[char])
