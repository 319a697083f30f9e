from collections import namedtuple

import numpy as np

from bmp_helpers.errors import IndexOutOfBounds, InvalidPixel, MissingPixelData

BYTES_PER_PIXEL = 3

Pixel = namedtuple("Pixel", ["r", "g", "b"])


def row_stride(width):
    """
    Bytes per stored row of 24-bit pixels, padding included.

    :param width: Image width in pixels
    :return: Row length rounded up to a multiple of 4
    """
    return ((24 * width + 31) // 32) * 4


def row_padding(width):
    """
    Number of zero bytes appended to each row of 24-bit pixels.
    """
    return (4 - (width * BYTES_PER_PIXEL) % 4) % 4


def data_size(width, height):
    return row_stride(width) * height


def file_size(width, height, pixel_offset):
    return pixel_offset + data_size(width, height)


def encode_row(row, padding):
    """
    Serialises one row of the grid as BGR triplets followed by zero padding.

    :param row: numpy array of shape (width, 3) in RGB order
    :param padding: Number of padding bytes
    :return: The row as bytes
    """
    return row[:, ::-1].tobytes() + bytes(padding)


def decode_row(row_bytes, width):
    """
    Turns BGR triplets read from a file back into an RGB row.

    :param row_bytes: Exactly width * 3 bytes
    :param width: Image width in pixels
    :return: numpy array of shape (width, 3) in RGB order
    """
    return np.frombuffer(row_bytes, dtype=np.uint8).reshape(width, BYTES_PER_PIXEL)[:, ::-1]


class PixelGrid(object):
    """
    Row-major store of width * height RGB pixels, addressed as (x, y).
    """

    has_data = True

    def __init__(self, width, height, array=None):
        if array is None:
            array = np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        self.width = width
        self.height = height
        self.array = array

    @classmethod
    def from_rows(cls, width, rows):
        rows = list(rows)
        if rows:
            array = np.stack(rows).astype(np.uint8)
        else:
            array = np.zeros((0, width, BYTES_PER_PIXEL), dtype=np.uint8)
        return cls(width, len(rows), array=array)

    def __len__(self):
        return self.width * self.height

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.array.shape == other.array.shape and np.array_equal(self.array, other.array)

    __hash__ = None

    def _check_bounds(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfBounds(x, y)

    def get(self, x, y):
        self._check_bounds(x, y)
        r, g, b = self.array[y, x]
        return Pixel(int(r), int(g), int(b))

    def set(self, x, y, pixel):
        self._check_bounds(x, y)
        if not all(0 <= channel <= 255 for channel in pixel):
            raise InvalidPixel(pixel)
        self.array[y, x] = (pixel.r, pixel.g, pixel.b)

    def rows(self):
        for y in range(self.height):
            yield self.array[y]


class AbsentPixelData(object):
    """
    Stands in for the pixel store when the headers were decoded but the stored
    data size does not match a 24-bit row-padded layout.
    """

    has_data = False

    def __init__(self, expected_size, stored_size):
        self.expected_size = expected_size
        self.stored_size = stored_size

    def __len__(self):
        return 0

    def __repr__(self):
        return "AbsentPixelData(expected_size={}, stored_size={})".format(self.expected_size, self.stored_size)

    def get(self, x, y):
        raise MissingPixelData()

    def set(self, x, y, pixel):
        raise MissingPixelData()

    def rows(self):
        raise MissingPixelData()
