from .image import BarcodeImage
from .ascii import AsciiBarcodeImage
from .json import JsonBarcodeImage
from .png import PngBarcodeImage
from .svg import SvgBarcodeImage


image_classes = {
    "svg": SvgBarcodeImage,
    "png": PngBarcodeImage,
    "ascii": AsciiBarcodeImage,
    "json": JsonBarcodeImage,
}
