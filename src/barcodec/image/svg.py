from .image import BarcodeImage


class SvgBarcodeImage(BarcodeImage):
    """Class for saving barcode image as .svg file"""
    file_open_mode = "w"

    SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg"\n'\
        '    version="1.1" xmlns:xlink="http://www.w3.org/1999/xlink"\n'\
        '    width="{width}" height="{height}">\n'
    SVG_CLOSE = "</svg>\n"
    RECTANGLE = '    <rect x="{x}" y="{y}" width="{width}"'\
                ' height="{height}" fill="{fill}" />\n'

    def _write_header(self, image_file):
        image_file.write(
            self.SVG_OPEN.format(
                width=self.image_width,
                height=self.image_height
            )
        )
        image_file.write(
            self.RECTANGLE.format(
                x=0,
                y=0,
                width=self.image_width,
                height=self.image_height,
                fill="#fff"
            )
        )

    def _write_bars(self, image_file):
        # one rectangle per run of black modules
        for start, width in self.bar_runs():
            image_file.write(
                self.RECTANGLE.format(
                    x=start * self.scale,
                    y=0,
                    width=width * self.scale,
                    height=self.barcode_height,
                    fill="#000"
                )
            )

    def _write_finish(self, image_file):
        image_file.write(self.SVG_CLOSE)
