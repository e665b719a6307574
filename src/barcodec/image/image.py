from abc import ABC, abstractmethod
from io import BytesIO, StringIO

from ..errors import GenerateError


class BarcodeImage(ABC):
    """Abstract class representing image of a linear barcode

    Modules of the barcode are drawn ``scale`` units wide and
    ``barcode_height`` units high, surrounded by ``quiet_zone`` modules
    of background on both sides.
    """
    file_open_mode = "wb"
    default_scale = 2
    default_height = 50
    default_quiet_zone = 10

    def __init__(self, data_bits, barcode_height=None, scale=None,
                 quiet_zone=None):
        self.data_bits = self.check_bits(data_bits)
        self.barcode_height = barcode_height or self.default_height
        self.scale = scale or self.default_scale
        if quiet_zone is None:
            quiet_zone = self.default_quiet_zone
        if quiet_zone < 0:
            raise GenerateError(
                "Quiet zone can't be negative, got {}".format(quiet_zone)
            )
        self.quiet_zone = quiet_zone

    @staticmethod
    def check_bits(data_bits):
        bits = list(data_bits)
        if not bits:
            raise GenerateError("Barcode has no modules to render")
        for i, bit in enumerate(bits):
            if bit not in (0, 1):
                raise GenerateError(
                    "Module {} is {!r}, expected 0 or 1".format(i, bit)
                )
        return [int(bit) for bit in bits]

    @property
    def bars(self):
        """Modules including the quiet zone"""
        margin = [0] * self.quiet_zone
        return margin + self.data_bits + margin

    @property
    def image_height(self):
        return self.barcode_height

    @property
    def image_width(self):
        return len(self.bars) * self.scale

    def bar_runs(self):
        """Yields (offset, width) of each run of black modules"""
        start = None
        bars = self.bars
        for i, bit in enumerate(bars):
            if bit and start is None:
                start = i
            elif not bit and start is not None:
                yield start, i - start
                start = None
        if start is not None:
            yield start, len(bars) - start

    @abstractmethod
    def _write_header(self, image_file):
        pass

    @abstractmethod
    def _write_bars(self, image_file):
        pass

    @abstractmethod
    def _write_finish(self, image_file):
        pass

    def write(self, image_file):
        self._write_header(image_file)
        self._write_bars(image_file)
        self._write_finish(image_file)

    def generate(self):
        """Returns the whole image, str for text formats, bytes otherwise"""
        buffer = StringIO() if "b" not in self.file_open_mode else BytesIO()
        self.write(buffer)
        return buffer.getvalue()
