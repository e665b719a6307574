from zlib import compress, crc32
from abc import ABC, abstractmethod

from .image import BarcodeImage


class PngBarcodeImage(BarcodeImage):
    """Class for saving barcode as 1 bit greyscale .png file"""
    HEADER = b"\x89PNG\r\n\x1a\x0a"

    class Chunk(ABC):
        def __init__(self, type_):
            self.type = type_

        @staticmethod
        def encode_int(i, size=4):
            return i.to_bytes(size, "big")

        @abstractmethod
        def payload(self):
            """Return iterable of bytes that make the content of chunk"""
            pass

        def to_bytes(self):
            payload_bytes = b"".join(self.payload())
            length = self.encode_int(len(payload_bytes))
            type_and_payload = self.type + payload_bytes
            crc = self.encode_int(crc32(type_and_payload))
            return length + type_and_payload + crc

    class IhdrChunk(Chunk):
        GREYSCALE = 0
        NO_INTERLACE = 0

        def __init__(self, width, height, bit_depth, color_type=GREYSCALE):
            super().__init__(b"IHDR")
            self.width = width
            self.height = height
            self.bit_depth = bit_depth
            self.color_type = color_type
            self.compression_method = 0  # only deflate
            self.filter_method = 0  # only adaptive filtering with 5 basic types
            self.interlace_method = self.NO_INTERLACE

        def payload(self):
            yield self.encode_int(self.width)
            yield self.encode_int(self.height)
            yield self.encode_int(self.bit_depth, 1)
            yield self.encode_int(self.color_type, 1)
            yield self.encode_int(self.compression_method, 1)
            yield self.encode_int(self.filter_method, 1)
            yield self.encode_int(self.interlace_method, 1)

    class IdatChunk(Chunk):
        def __init__(self):
            super().__init__(b"IDAT")
            self._payload = bytearray()

        @classmethod
        def encode_line(cls, bars, bar_width=1):
            """Packs one scanline, 1 bit per pixel, black is 0"""
            black_bar = 0
            white_bar = (1 << bar_width) - 1
            value = 0
            length = 0
            arr = bytearray()
            for bar in bars:
                value <<= bar_width
                value |= black_bar if bar else white_bar
                length += bar_width
                if length >= 4096:
                    length &= 4095
                    out = value >> length
                    value &= (1 << length) - 1
                    arr.extend(out.to_bytes(512, "big"))
            padding = -length % 8
            if padding:
                value <<= padding
                length += padding
            arr.extend(value.to_bytes(length // 8, "big"))
            return arr

        def set_payload_from_barcode_line(self, bars, bar_width, height):
            # first line unfiltered, the rest use the "up" filter
            # and are all zeros
            lines = bytearray(1)
            first_line = self.encode_line(bars, bar_width)
            lines.extend(first_line)
            rep_line = bytes((2,)) + bytes(len(first_line))
            lines.extend(rep_line * (height - 1))
            self._payload = lines

        def payload(self):
            yield compress(self._payload)

    class IendChunk(Chunk):
        def __init__(self):
            super().__init__(b"IEND")

        def payload(self):
            yield b""

    def _write_header(self, image_file):
        image_file.write(self.HEADER)
        ihdr = self.IhdrChunk(
            self.image_width,
            self.image_height,
            1  # color bit depth
        )
        image_file.write(ihdr.to_bytes())

    def _write_bars(self, image_file):
        idat = self.IdatChunk()
        idat.set_payload_from_barcode_line(
            self.bars,
            self.scale,
            self.barcode_height
        )
        image_file.write(idat.to_bytes())

    def _write_finish(self, image_file):
        image_file.write(self.IendChunk().to_bytes())
