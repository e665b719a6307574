import json

from .image import BarcodeImage


class JsonBarcodeImage(BarcodeImage):
    """Exports modules and layout as a compact JSON object::

        {"height":10,"xdim":1,"encoding":[1,0,1,...]}
    """
    file_open_mode = "w"
    default_scale = 1
    default_height = 10
    default_quiet_zone = 0

    def _write_header(self, image_file):
        pass

    def _write_bars(self, image_file):
        document = {
            "height": self.barcode_height,
            "xdim": self.scale,
            "encoding": self.bars,
        }
        image_file.write(json.dumps(document, separators=(",", ":")))

    def _write_finish(self, image_file):
        pass
