from abc import ABC, abstractmethod

from ..errors import InvalidCharacter, InvalidLength


DIGITS = "0123456789"


class BarcodeEncoding(ABC):
    """Linear barcode base class

    An encoding is used through its classmethods only and holds no state,
    so one class can serve any number of concurrent callers. Encoding
    runs in three steps, each of which may be overridden:

    * :meth:`validate` checks the raw input against :attr:`characters`
      and the length limits,
    * :meth:`checksum` appends (or verifies) check characters,
    * :meth:`bars` yields the modules, 1 for black bar, 0 for background.
    """
    dimensionality = "linear"

    # human readable name used in error messages
    name = None
    characters = ""
    # either a tuple of exact allowed lengths or a min/max range
    lengths = None
    min_length = 1
    max_length = 256
    unit = "characters"

    @classmethod
    def bits(cls, number, bit_length):
        for shift in range(bit_length - 1, -1, -1):
            yield (number >> shift) & 1

    @classmethod
    def modules(cls, pattern):
        """Yields modules of pattern written as string of "0" and "1"
        characters"""
        for char in pattern:
            yield 1 if char == "1" else 0

    @classmethod
    def length_rule(cls):
        if cls.lengths is not None:
            allowed = " or ".join(str(length) for length in cls.lengths)
        else:
            allowed = "{} to {}".format(cls.min_length, cls.max_length)
        return "{} {}".format(allowed, cls.unit)

    @classmethod
    def validate_length(cls, length):
        if cls.lengths is not None:
            valid = length in cls.lengths
        else:
            valid = cls.min_length <= length <= cls.max_length
        if not valid:
            raise InvalidLength(cls.name, cls.length_rule(), length)

    @classmethod
    def validate(cls, data):
        """Checks input characters and length

        :param str data:    Raw input
        :return:            The validated input"""
        if not isinstance(data, str):
            raise TypeError(
                "Barcode data must be str, got {!r}".format(type(data))
            )
        for position, char in enumerate(data):
            if char not in cls.characters:
                raise InvalidCharacter(cls.name, char, position)
        cls.validate_length(len(data))
        return data

    @classmethod
    def checksum(cls, data):
        return data

    @classmethod
    @abstractmethod
    def bars(cls, checked):
        raise NotImplementedError

    @classmethod
    def encode(cls, data, **options):
        """Encodes data to bytes of modules

        :param str data:    Data to encode
        :param options:     Symbology specific checksum options
        :return:            bytes of 0/1 modules"""
        checked = cls.checksum(cls.validate(data), **options)
        return bytes(cls.bars(checked))


def modulo_10_check_digit(digits):
    """Weighted modulo 10 check digit used by EAN, UPC and ITF

    Weights 3 and 1 alternate starting with 3 at the rightmost digit.

    :param str digits:  Digit characters
    :return:            Check digit as integer"""
    checksum = 0
    weight = 3
    for number in (int(char) for char in reversed(digits)):
        checksum += weight * number
        weight = 4 - weight
    return -checksum % 10
