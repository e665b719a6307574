from .encoding import BarcodeEncoding


class Code11(BarcodeEncoding):
    """Encoder for Code11 (USD-8) barcodes.

    Code11 encodes the decimal digits and the dash. The C check character
    is always appended, data longer than :attr:`k_threshold` characters
    gets a second check character K.
    """
    name = "Code11"
    characters = "0123456789-"

    # stripe patterns in order of character value, variable width
    pattern = (
        "101011", "1101011", "1001011", "1100101", "1011011", "1101101",
        "1001101", "1010011", "1101001", "110101", "101101"
    )
    # start and stop character
    guard = "1011001"
    separator = "0"

    k_threshold = 10

    @classmethod
    def check_character(cls, data, max_weight):
        """Weighted modulo 11 check character

        :param str data:        Characters to compute check from
        :param int max_weight:  Weights count 1..max_weight from the right
        :return:                Check character"""
        total = 0
        for i, char in enumerate(reversed(data)):
            total += (i % max_weight + 1) * cls.characters.index(char)
        return cls.characters[total % 11]

    @classmethod
    def checksum(cls, data):
        checked = data + cls.check_character(data, 10)
        if len(data) > cls.k_threshold:
            checked += cls.check_character(checked, 9)
        return checked

    @classmethod
    def bars(cls, checked):
        yield from cls.modules(cls.guard)
        yield from cls.modules(cls.separator)
        for char in checked:
            yield from cls.modules(cls.pattern[cls.characters.index(char)])
            yield from cls.modules(cls.separator)
        yield from cls.modules(cls.guard)
