"""Linear barcode encoder.

Turns text into the bar/space module sequence of a barcode symbology::

    >>> from barcodec import encode, to_string
    >>> to_string(encode("ean8", "5512345"))
    '1010110001011000100110010010011010101000010101110010011101000100101'

Renderers for the module sequence live in :mod:`barcodec.image`.
"""
from .errors import (
    ChecksumMismatch, EncodingError, GenerateError, InvalidCharacter,
    InvalidLength, UnknownSymbology, UnsupportedCombination
)
from .symbology import encode, get_encoding, symbologies, to_string


__version__ = "0.1.0"
