from collections import namedtuple

from construct import Struct, Int8ul, Int16ul, Int32ul, Int32sl

from bmp_helpers import pixel_helpers

BMP_MAGIC = b'BM'
PIXEL_OFFSET = 54
INFO_HEADER_SIZE = 40
NUM_PLANES = 1
BITS_PER_PIXEL = 24
COMPRESSION_NONE = 0
DEFAULT_RESOLUTION = 0x100
MAX_DIMENSION = 2 ** 31 - 1
MAX_FILE_SIZE = 0xFFFFFFFF

# All fields are little-endian, laid out field by field with no alignment.

bmp_identifier = Struct(
    "magic1" / Int8ul,
    "magic2" / Int8ul
)

bmp_file_header = Struct(
    "file_size" / Int32ul,
    "reserved1" / Int16ul,
    "reserved2" / Int16ul,
    "pixel_offset" / Int32ul
)

bmp_info_header = Struct(
    "header_size" / Int32ul,
    "width" / Int32sl,
    "height" / Int32sl,
    "num_planes" / Int16ul,
    "bits_per_pixel" / Int16ul,
    "compress_type" / Int32ul,
    "data_size" / Int32ul,
    # Resolutions are pixels per metre
    "hres" / Int32sl,
    "vres" / Int32sl,
    "num_colors" / Int32ul,
    "num_imp_colors" / Int32ul
)


class _Header(object):
    """Shared parse/build behaviour for the header value objects."""

    __slots__ = ()
    codec = None

    @classmethod
    def from_container(cls, container):
        return cls(**{field: container[field] for field in cls._fields})

    @classmethod
    def parse_stream(cls, stream):
        return cls.from_container(cls.codec.parse_stream(stream))

    @classmethod
    def size(cls):
        return cls.codec.sizeof()

    def build(self):
        return self.codec.build(self._asdict())


class FileIdentifier(_Header, namedtuple("FileIdentifier", ["magic1", "magic2"])):
    __slots__ = ()
    codec = bmp_identifier

    @classmethod
    def new(cls):
        return cls(magic1=BMP_MAGIC[0], magic2=BMP_MAGIC[1])

    @property
    def is_bitmap(self):
        return bytes([self.magic1, self.magic2]) == BMP_MAGIC


class FileHeader(_Header, namedtuple("FileHeader", ["file_size", "reserved1", "reserved2", "pixel_offset"])):
    __slots__ = ()
    codec = bmp_file_header

    @classmethod
    def from_dimensions(cls, width, height):
        """
        Builds the file header for a fresh 24-bit image.

        :param width: Image width in pixels
        :param height: Image height in pixels
        :return: FileHeader with the total file size and the standard pixel offset
        """
        return cls(file_size=pixel_helpers.file_size(width, height, PIXEL_OFFSET),
                   reserved1=0,
                   reserved2=0,
                   pixel_offset=PIXEL_OFFSET)


class InfoHeader(_Header, namedtuple("InfoHeader", ["header_size", "width", "height", "num_planes",
                                                    "bits_per_pixel", "compress_type", "data_size",
                                                    "hres", "vres", "num_colors", "num_imp_colors"])):
    __slots__ = ()
    codec = bmp_info_header

    @classmethod
    def from_dimensions(cls, width, height):
        return cls(header_size=INFO_HEADER_SIZE,
                   width=width,
                   height=height,
                   num_planes=NUM_PLANES,
                   bits_per_pixel=BITS_PER_PIXEL,
                   compress_type=COMPRESSION_NONE,
                   data_size=pixel_helpers.data_size(width, height),
                   hres=DEFAULT_RESOLUTION,
                   vres=DEFAULT_RESOLUTION,
                   num_colors=0,
                   num_imp_colors=0)


def header_size():
    """
    Total size in bytes of the identifier and both headers.
    """
    return FileIdentifier.size() + FileHeader.size() + InfoHeader.size()


def build_headers(identifier, file_header, info_header):
    return identifier.build() + file_header.build() + info_header.build()
