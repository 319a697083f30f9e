class BitmapError(Exception):
    """Base class for everything the codec raises."""


class IndexOutOfBounds(BitmapError, IndexError):

    def __init__(self, x, y):
        super(IndexOutOfBounds, self).__init__("Index out of bounds: ({}, {})".format(x, y))
        self.x = x
        self.y = y


class NotABitmap(BitmapError):

    def __init__(self, identifier=None):
        super(NotABitmap, self).__init__("File is not a bitmap (identifier {!r})".format(identifier))
        self.identifier = identifier


class TruncatedHeader(BitmapError):

    def __init__(self, header_name):
        super(TruncatedHeader, self).__init__("{} of bitmap is truncated".format(header_name))
        self.header_name = header_name


class IoFailure(BitmapError):

    def __init__(self, cause):
        super(IoFailure, self).__init__("File error: {}".format(cause))
        self.cause = cause


class InvalidDimensions(BitmapError, ValueError):

    def __init__(self, width, height):
        super(InvalidDimensions, self).__init__(
            "Image dimensions must be positive, got {}x{}".format(width, height))
        self.width = width
        self.height = height


class MissingPixelData(BitmapError):
    """
    Raised when pixels are accessed on an image whose data could not be decoded.
    This is a programming error: check ``Image.has_data`` after ``Image.open``.
    """

    def __init__(self):
        super(MissingPixelData, self).__init__("Image has no data")


class InvalidPixel(BitmapError, ValueError):

    def __init__(self, pixel):
        super(InvalidPixel, self).__init__("Pixel channels must be in 0..255, got {}".format(tuple(pixel)))
        self.pixel = pixel
