from .encoding import BarcodeEncoding
from .code128_subsets import (
    FNC1, FNC2, FNC3, FNC4, MARKERS, SHIFT,
    data_length, explicit_subsets, select_subsets
)
from ..errors import InvalidCharacter


class Code128(BarcodeEncoding):
    """
    Encoder for Code128 barcodes.

    Subsets are chosen automatically unless the data starts with
    a subset marker, see :mod:`barcodec.encoding.code128_subsets`.
    """
    name = "Code128"
    characters = "".join(chr(i) for i in range(128)) + FNC1 + FNC2 + FNC3 + FNC4

    # stripe patterns written as a number, 1 bit for black stripe,
    # 0 bit for white background, 11 bits long
    pattern = [
        1740, 1644, 1638, 1176, 1164, 1100, 1224, 1220, 1124, 1608, 1604,
        1572, 1436, 1244, 1230, 1484, 1260, 1254, 1650, 1628, 1614, 1764,
        1652, 1902, 1868, 1836, 1830, 1892, 1844, 1842, 1752, 1734, 1590,
        1304, 1112, 1094, 1416, 1128, 1122, 1672, 1576, 1570, 1464, 1422,
        1134, 1496, 1478, 1142, 1910, 1678, 1582, 1768, 1762, 1774, 1880,
        1862, 1814, 1896, 1890, 1818, 1914, 1602, 1930, 1328, 1292, 1200,
        1158, 1068, 1062, 1424, 1412, 1232, 1218, 1076, 1074, 1554, 1616,
        1978, 1556, 1146, 1340, 1212, 1182, 1508, 1268, 1266, 1956, 1940,
        1938, 1758, 1782, 1974, 1400, 1310, 1118, 1512, 1506, 1960, 1954,
        1502, 1518, 1886, 1966, 1668, 1680, 1692
    ]

    # stop pattern, 13 bits long
    stop = 6379

    # bit length of non-control characters
    code_bitlength = 11

    @classmethod
    def is_explicit(cls, data):
        return data[:1] in MARKERS

    @classmethod
    def validate(cls, data):
        if not isinstance(data, str):
            raise TypeError(
                "Barcode data must be str, got {!r}".format(type(data))
            )
        explicit = cls.is_explicit(data)
        for position, char in enumerate(data):
            if char in cls.characters:
                continue
            if explicit and (char in MARKERS or char == SHIFT):
                continue
            raise InvalidCharacter(cls.name, char, position)
        cls.validate_length(data_length(data))
        if explicit:
            # walking the markers finds any character outside its subset
            explicit_subsets(data, cls.name)
        return data

    @classmethod
    def subsets(cls, data):
        """Symbols of validated data, start symbol included

        :param str data:    Validated data
        :return:            List of Symbol tuples"""
        if cls.is_explicit(data):
            return explicit_subsets(data, cls.name)
        return select_subsets(data)

    @classmethod
    def symbols(cls, data):
        return cls.subsets(cls.validate(data))

    @classmethod
    def checksum(cls, data):
        codes = [symbol.value for symbol in cls.subsets(data)]
        checksum = 0
        for i, n in enumerate(codes):
            checksum += n * max([1, i])
        codes.append(checksum % 103)
        return codes

    @classmethod
    def bars(cls, checked):
        """Encodes symbol values to series of bits, 1 for black bar,
0 for background.

    :param list checked:    Symbol values, start symbol first and check
                            symbol last
    :return:                Yields bits of barcode (0/1)"""
        for n in checked:
            yield from cls.bits(cls.pattern[n], cls.code_bitlength)
        yield from cls.bits(cls.stop, 13)
