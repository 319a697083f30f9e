from bmp_helpers import pixel_helpers


def identifier_is_bitmap(identifier, **kwargs):
    return identifier.is_bitmap


def data_size_matches(info_header, **kwargs):
    """
    True when the stored data size matches a 24-bit row-padded pixel array of the
    header's dimensions. Negative dimensions never match.
    """
    if info_header.width < 0 or info_header.height < 0:
        return False
    return pixel_helpers.data_size(info_header.width, info_header.height) == info_header.data_size


def rows_left_to_read(rows_read, height, **kwargs):
    return rows_read < height


def no_rows_left_to_read(rows_read, height, **kwargs):
    return rows_read >= height
