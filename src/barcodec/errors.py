"""Exceptions raised while encoding or rendering a barcode.

Every encoding failure is a :class:`EncodingError`, which is a
``ValueError`` so existing ``except ValueError`` handlers keep working.
"""


class EncodingError(ValueError):
    """Input data can't be encoded in the chosen symbology"""

    def __init__(self, symbology, message):
        super().__init__("{}: {}".format(symbology, message))
        self.symbology = symbology


class InvalidCharacter(EncodingError):
    def __init__(self, symbology, char, position):
        super().__init__(
            symbology,
            "character {!r} at position {} can't be encoded".format(
                char, position
            )
        )
        self.char = char
        self.position = position


class InvalidLength(EncodingError):
    def __init__(self, symbology, expected, actual):
        super().__init__(
            symbology,
            "requires {}, got {} characters".format(expected, actual)
        )
        self.expected = expected
        self.actual = actual


class ChecksumMismatch(EncodingError):
    def __init__(self, symbology, expected, actual):
        super().__init__(
            symbology,
            "check digit {!r} is invalid, expected {!r}".format(
                actual, expected
            )
        )
        self.expected = expected
        self.actual = actual


class UnsupportedCombination(EncodingError):
    def __init__(self, symbology, reason, position=None):
        if position is None:
            message = reason
        else:
            message = "{} (position {})".format(reason, position)
        super().__init__(symbology, message)
        self.reason = reason
        self.position = position


class UnknownSymbology(ValueError):
    """Symbology tag is not registered"""


class GenerateError(ValueError):
    """Module sequence can't be rendered"""
