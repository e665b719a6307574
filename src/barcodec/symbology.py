"""Dispatch from symbology tags to encodings"""
import logging

from .encoding import (
    BarcodeEncoding, Bookland, Codabar, Code11, Code39, Code93, Code128,
    Ean2, Ean5, Ean8, Ean13, Interleaved2of5, Jan, Standard2of5, UpcA
)
from .errors import UnknownSymbology


logger = logging.getLogger(__name__)

encoding_classes = {
    "ean13": Ean13,
    "upca": UpcA,
    "jan": Jan,
    "bookland": Bookland,
    "ean8": Ean8,
    "ean2": Ean2,
    "ean5": Ean5,
    "code11": Code11,
    "code39": Code39,
    "code93": Code93,
    "code128": Code128,
    "itf": Interleaved2of5,
    "stf": Standard2of5,
    "codabar": Codabar,
}


def symbologies():
    return sorted(encoding_classes)


def get_encoding(symbology):
    """Returns encoding class for a symbology tag

    :param symbology:   Tag such as "ean13" (case insensitive) or an
                        encoding class, which is returned as is
    :return:            BarcodeEncoding subclass"""
    if isinstance(symbology, type) and issubclass(symbology, BarcodeEncoding):
        return symbology
    encoding = encoding_classes.get(str(symbology).lower())
    if encoding is None:
        raise UnknownSymbology(
            "Unknown barcode encoding {!r}".format(symbology)
        )
    return encoding


def encode(symbology, data, **options):
    """Encodes data into the module sequence of a symbology

    :param symbology:   Symbology tag or encoding class
    :param str data:    Text to encode
    :param options:     Checksum options of the symbology, such as
                        check_character for Code39 or check_digit for ITF
    :return:            bytes of modules, 1 for bar, 0 for space
    :raises EncodingError: when data can't be encoded"""
    encoding = get_encoding(symbology)
    modules = encoding.encode(data, **options)
    logger.debug("Encoded %d characters as %s into %d modules",
                 len(data), encoding.name, len(modules))
    return modules


def to_string(modules):
    """Module sequence as string of "0" and "1" characters"""
    return "".join("1" if module else "0" for module in modules)
