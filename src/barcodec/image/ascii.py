from .image import BarcodeImage


class AsciiBarcodeImage(BarcodeImage):
    """Barcode drawn with "#" for bars and spaces for background

    Every module is ``scale`` characters wide, the image has
    ``barcode_height`` identical rows separated by newlines.
    """
    file_open_mode = "w"
    default_scale = 1
    default_height = 10
    default_quiet_zone = 0

    CHARS = (" ", "#")

    def _write_header(self, image_file):
        pass

    def _write_bars(self, image_file):
        row = "".join(self.CHARS[bit] * self.scale for bit in self.bars)
        image_file.write("\n".join([row] * self.barcode_height))

    def _write_finish(self, image_file):
        pass
