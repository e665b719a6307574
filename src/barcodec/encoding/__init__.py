from .encoding import BarcodeEncoding
from .codabar import Codabar
from .code11 import Code11
from .code39 import Code39
from .code93 import Code93
from .code128 import Code128
from .ean import Bookland, Ean8, Ean13, Jan, UpcA
from .ean_supplement import Ean2, Ean5
from .two_of_five import Interleaved2of5, Standard2of5
