from .encoding import BarcodeEncoding


class Code39(BarcodeEncoding):
    """Encoder for Code39 barcodes.

    Every character is 12 modules wide and followed by a single narrow
    space. A modulo 43 check character is appended unless disabled with
    ``check_character=False``.
    """
    name = "Code39"
    # characters in order of their check value
    characters = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

    pattern = (
        0b101001101101, 0b110100101011, 0b101100101011, 0b110110010101,
        0b101001101011, 0b110100110101, 0b101100110101, 0b101001011011,
        0b110100101101, 0b101100101101, 0b110101001011, 0b101101001011,
        0b110110100101, 0b101011001011, 0b110101100101, 0b101101100101,
        0b101010011011, 0b110101001101, 0b101101001101, 0b101011001101,
        0b110101010011, 0b101101010011, 0b110110101001, 0b101011010011,
        0b110101101001, 0b101101101001, 0b101010110011, 0b110101011001,
        0b101101011001, 0b101011011001, 0b110010101011, 0b100110101011,
        0b110011010101, 0b100101101011, 0b110010110101, 0b100110110101,
        0b100101011011, 0b110010101101, 0b100110101101, 0b100100100101,
        0b100100101001, 0b100101001001, 0b101001001001
    )

    # "*" start and stop character
    guard = 0b100101101101

    code_bitlength = 12

    @classmethod
    def check_character(cls, data):
        """Modulo 43 sum of character values

        :param str data:    Validated data
        :return:            Check character"""
        total = sum(cls.characters.index(char) for char in data)
        return cls.characters[total % 43]

    @classmethod
    def checksum(cls, data, check_character=True):
        if check_character:
            return data + cls.check_character(data)
        return data

    @classmethod
    def bars(cls, checked):
        yield from cls.bits(cls.guard, cls.code_bitlength)
        yield 0
        for char in checked:
            code = cls.characters.index(char)
            yield from cls.bits(cls.pattern[code], cls.code_bitlength)
            # characters are separated by one narrow space
            yield 0
        yield from cls.bits(cls.guard, cls.code_bitlength)
