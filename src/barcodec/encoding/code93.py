from .encoding import BarcodeEncoding


class Code93(BarcodeEncoding):
    """Encoder for Code93 barcodes.

    Characters outside the 43 directly encodable ones are written as
    a shift code followed by a letter (full ASCII Code93), so the checked
    sequence is a list of symbol values rather than characters.
    """
    name = "Code93"
    characters = "".join(chr(i) for i in range(128))

    # stripe patterns, 1 for black, 0 for background white
    pattern = [
        0b100010100, 0b101001000, 0b101000100, 0b101000010, 0b100101000,
        0b100100100, 0b100100010, 0b101010000, 0b100010010, 0b100001010,
        0b110101000, 0b110100100, 0b110100010, 0b110010100, 0b110010010,
        0b110001010, 0b101101000, 0b101100100, 0b101100010, 0b100110100,
        0b100011010, 0b101011000, 0b101001100, 0b101000110, 0b100101100,
        0b100010110, 0b110110100, 0b110110010, 0b110101100, 0b110100110,
        0b110010110, 0b110011010, 0b101101100, 0b101100110, 0b100110110,
        0b100111010, 0b100101110, 0b111010100, 0b111010010, 0b111001010,
        0b101101110, 0b101110110, 0b110101110, 0b100100110, 0b111011010,
        0b111010110, 0b100110010, 0b101011110
    ]

    # shift codes, written ($), (%), (/) and (+)
    esc1 = 43
    esc2 = 44
    esc3 = 45
    esc4 = 46

    # nonalphabetical characters encoded without shift codes
    enc = {"-": 36, ".": 37, " ": 38, "$": 39, "/": 40, "+": 41, "%": 42}

    # bit patterns symbolizing start and stop
    start = 47
    stop = 47

    code_bitlength = 9

    # check value weights cycle from 1 to these values, counted from the right
    c_max_weight = 20
    k_max_weight = 15

    @classmethod
    def _encode_other(cls, char):
        """Encodes non-alphanumeric character

    :param str char:    string of length one to encode
    :return:            yields integer of character code, in some
                        cases preceded by shift code"""
        i = ord(char)
        if char in cls.enc:
            yield cls.enc[char]
        elif i == 0:
            yield cls.esc2
            yield 30
        elif i <= 26:
            yield cls.esc1
            yield i + 9
        elif i <= 31:
            yield cls.esc2
            yield i - 17
        elif 33 <= i <= 35 or 38 <= i <= 42 or i == 44 or i == 58:
            yield cls.esc3
            yield i - 23
        elif 59 <= i <= 63:
            yield cls.esc2
            yield i - 44
        elif i == 64:
            yield cls.esc2
            yield 31
        elif 91 <= i <= 95:
            yield cls.esc2
            yield i - 71
        elif i == 96:
            yield cls.esc2
            yield 32
        else:
            # 123 <= i <= 127
            yield cls.esc2
            yield i - 98

    @classmethod
    def symbols(cls, s):
        """Encodes string to symbol values

    :param str s:       Validated string
    :return:            yields symbol values"""
        for char in s:
            if "0" <= char <= "9":
                yield ord(char) - ord("0")
            elif "A" <= char <= "Z":
                yield ord(char) - ord("A") + 10
            elif "a" <= char <= "z":
                yield cls.esc4
                yield ord(char) - ord("a") + 10
            else:
                yield from cls._encode_other(char)

    @classmethod
    def check_value(cls, codes, max_weight):
        total = 0
        for i, code in enumerate(reversed(codes)):
            total += (i % max_weight + 1) * code
        return total % 47

    @classmethod
    def checksum(cls, data):
        codes = list(cls.symbols(data))
        codes.append(cls.check_value(codes, cls.c_max_weight))
        codes.append(cls.check_value(codes, cls.k_max_weight))
        return codes

    @classmethod
    def bars(cls, checked):
        """Encodes symbol values to series of bits, 1 for black bar,
0 for background

    :param list checked:    Symbol values including both check values
    :return:                yields bits (0, 1 values)"""
        yield from cls.bits(cls.pattern[cls.start], cls.code_bitlength)
        for code in checked:
            yield from cls.bits(cls.pattern[code], cls.code_bitlength)
        yield from cls.bits(cls.pattern[cls.stop], cls.code_bitlength)
        # termination bar
        yield 1
