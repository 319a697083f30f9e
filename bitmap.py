import logging
import os

from construct import ConstructError, StreamError
from transitions import Machine

from bmp_helpers import pixel_helpers, statemachine_helpers
from bmp_helpers.bmp_codecs import (FileIdentifier, FileHeader, InfoHeader, MAX_DIMENSION, MAX_FILE_SIZE,
                                     PIXEL_OFFSET, build_headers)
from bmp_helpers.errors import (IoFailure, InvalidDimensions, MissingPixelData, NotABitmap,
                                TruncatedHeader)
from bmp_helpers.logging_helpers import LOGGER_NAME
from bmp_helpers.pixel_helpers import AbsentPixelData, Pixel, PixelGrid

logger = logging.getLogger(LOGGER_NAME)

__all__ = ['Image', 'BitmapDecoder', 'Pixel']


class Image(object):
    """
    A 24-bit uncompressed bitmap held in memory.

    Rows are kept top to bottom in the same order they appear in the file; the
    codec does not flip bottom-up bitmaps.
    """

    def __init__(self, identifier, file_header, info_header, data):
        self.identifier = identifier
        self.file_header = file_header
        self.info_header = info_header
        self.width = info_header.width
        self.height = info_header.height
        self.padding = pixel_helpers.row_padding(self.width)
        self.data = data

    def __repr__(self):
        if self.has_data:
            return "Image(width={}, height={}, pixels={})".format(self.width, self.height, len(self.data))
        return "Image(width={}, height={}, data={!r})".format(self.width, self.height, self.data)

    @classmethod
    def new(cls, width, height):
        """
        Creates a black image of the given size.

        :param width: Width in pixels, must be positive
        :param height: Height in pixels, must be positive
        :return: Image with a zero-filled pixel grid
        """
        if width <= 0 or height <= 0 or max(width, height) > MAX_DIMENSION:
            raise InvalidDimensions(width, height)
        # file_size is the largest header field and must fit in a u32
        if pixel_helpers.file_size(width, height, PIXEL_OFFSET) > MAX_FILE_SIZE:
            raise InvalidDimensions(width, height)

        return cls(identifier=FileIdentifier.new(),
                   file_header=FileHeader.from_dimensions(width, height),
                   info_header=InfoHeader.from_dimensions(width, height),
                   data=PixelGrid(width, height))

    @classmethod
    def open(cls, path):
        logger.info("Opening bitmap {}".format(path))
        try:
            with open(path, 'rb') as f:
                return BitmapDecoder(f).decode()
        except OSError as e:
            raise IoFailure(e) from e

    @property
    def has_data(self):
        return self.data.has_data

    def set_pixel(self, x, y, pixel):
        self.data.set(x, y, pixel)

    def get_pixel(self, x, y):
        return self.data.get(x, y)

    def save(self, path):
        """
        Writes the headers, then appends the pixel rows.

        :param path: Target file, created or truncated
        """
        if not self.has_data:
            raise MissingPixelData()

        logger.info("Saving {}x{} bitmap to {}".format(self.width, self.height, path))
        self._write_header(path)

        try:
            with open(path, 'ab') as f:
                for row in self.data.rows():
                    f.write(pixel_helpers.encode_row(row, self.padding))
        except OSError as e:
            raise IoFailure(e) from e

    def _write_header(self, path):
        # Headers are built before the target is truncated
        try:
            headers = build_headers(self.identifier, self.file_header, self.info_header)
        except ConstructError as e:
            raise InvalidDimensions(self.width, self.height) from e

        try:
            with open(path, 'wb') as f:
                f.write(headers)
        except OSError as e:
            raise IoFailure(e) from e


class BitmapDecoder(object):
    """
    Single-pass decoder for a binary stream positioned at the start of a bitmap.
    The only backward movement is the seek to the pixel data offset.
    """

    terminal_states = ['not_a_bitmap', 'image_without_data', 'done']

    def __init__(self, stream):
        self._stream = stream

        self.identifier = None
        self.file_header = None
        self.info_header = None
        self._rows = []

        states = ['start', 'read_identifier', 'read_file_header', 'read_info_header', 'validate_data_size',
                  'seek_to_pixel_data', 'read_rows']
        states.extend(self.terminal_states)

        transitions = [
            {'trigger': 'begin', 'source': 'start', 'dest': 'read_identifier'},
            {'trigger': 'identifier_read', 'conditions': statemachine_helpers.identifier_is_bitmap,
             'source': 'read_identifier', 'dest': 'read_file_header'},
            {'trigger': 'identifier_read', 'unless': statemachine_helpers.identifier_is_bitmap,
             'source': 'read_identifier', 'dest': 'not_a_bitmap'},
            {'trigger': 'file_header_read', 'source': 'read_file_header', 'dest': 'read_info_header'},
            {'trigger': 'info_header_read', 'source': 'read_info_header', 'dest': 'validate_data_size'},
            {'trigger': 'data_size_checked', 'conditions': statemachine_helpers.data_size_matches,
             'source': 'validate_data_size', 'dest': 'seek_to_pixel_data'},
            {'trigger': 'data_size_checked', 'unless': statemachine_helpers.data_size_matches,
             'source': 'validate_data_size', 'dest': 'image_without_data'},
            {'trigger': 'row_read', 'conditions': statemachine_helpers.rows_left_to_read,
             'source': ['seek_to_pixel_data', 'read_rows'], 'dest': 'read_rows'},
            {'trigger': 'row_read', 'conditions': statemachine_helpers.no_rows_left_to_read,
             'source': ['seek_to_pixel_data', 'read_rows'], 'dest': 'done'}
        ]

        self._fsm = Machine(states=states, transitions=transitions, initial='start')

    @property
    def state(self):
        return self._fsm.state

    @property
    def padding(self):
        return pixel_helpers.row_padding(self.info_header.width)

    def decode(self):
        """
        Runs the decoder to completion.

        :return: Image, without pixel data if the stored data size is not what a
                 24-bit image of the stored dimensions needs
        """
        self._fsm.begin()

        while self._fsm.state not in self.terminal_states:
            logger.debug("Decoder state is {}".format(self._fsm.state))

            if self._fsm.state == 'read_identifier':
                self._read_identifier()
            elif self._fsm.state == 'read_file_header':
                self._read_file_header()
            elif self._fsm.state == 'read_info_header':
                self._read_info_header()
            elif self._fsm.state == 'validate_data_size':
                self._fsm.data_size_checked(info_header=self.info_header)
            elif self._fsm.state == 'seek_to_pixel_data':
                self._seek_to_pixel_data()
            elif self._fsm.state == 'read_rows':
                self._read_row()

        if self._fsm.state == 'not_a_bitmap':
            raise NotABitmap(self.identifier)

        if self._fsm.state == 'image_without_data':
            expected_size = pixel_helpers.data_size(self.info_header.width, self.info_header.height)
            logger.warning("Stored data size {} does not match expected {}, pixel data not decoded".format(
                self.info_header.data_size, expected_size))
            data = AbsentPixelData(expected_size, self.info_header.data_size)
        else:
            data = PixelGrid.from_rows(self.info_header.width, self._rows)

        return Image(self.identifier, self.file_header, self.info_header, data)

    def _read_identifier(self):
        try:
            self.identifier = FileIdentifier.parse_stream(self._stream)
        except StreamError:
            raise NotABitmap()
        logger.debug("Identifier: {}".format(self.identifier))
        self._fsm.identifier_read(identifier=self.identifier)

    def _read_file_header(self):
        try:
            self.file_header = FileHeader.parse_stream(self._stream)
        except StreamError:
            raise TruncatedHeader("Header")
        logger.debug("File header: {}".format(self.file_header))
        self._fsm.file_header_read()

    def _read_info_header(self):
        try:
            self.info_header = InfoHeader.parse_stream(self._stream)
        except StreamError:
            raise TruncatedHeader("DIB header")
        logger.debug("Info header: {}".format(self.info_header))
        self._fsm.info_header_read()

    def _seek_to_pixel_data(self):
        try:
            self._stream.seek(self.file_header.pixel_offset, os.SEEK_SET)
        except OSError as e:
            raise IoFailure(e) from e
        self._fsm.row_read(rows_read=len(self._rows), height=self.info_header.height)

    def _read_row(self):
        width = self.info_header.width
        row_length = width * pixel_helpers.BYTES_PER_PIXEL

        try:
            row_bytes = self._stream.read(row_length)
            if len(row_bytes) < row_length:
                raise IoFailure(EOFError("Pixel row {} ended after {} of {} bytes".format(
                    len(self._rows), len(row_bytes), row_length)))
            self._rows.append(pixel_helpers.decode_row(row_bytes, width))
            self._stream.seek(self.padding, os.SEEK_CUR)
        except OSError as e:
            raise IoFailure(e) from e

        self._fsm.row_read(rows_read=len(self._rows), height=self.info_header.height)
