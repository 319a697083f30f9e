from bmp_helpers.pixel_helpers import Pixel

# The sixteen basic HTML/CSS colours

BLACK = Pixel(r=0, g=0, b=0)
WHITE = Pixel(r=255, g=255, b=255)
RED = Pixel(r=255, g=0, b=0)
LIME = Pixel(r=0, g=255, b=0)
BLUE = Pixel(r=0, g=0, b=255)
YELLOW = Pixel(r=255, g=255, b=0)
CYAN = Pixel(r=0, g=255, b=255)
MAGENTA = Pixel(r=255, g=0, b=255)
SILVER = Pixel(r=192, g=192, b=192)
GRAY = Pixel(r=128, g=128, b=128)
MAROON = Pixel(r=128, g=0, b=0)
OLIVE = Pixel(r=128, g=128, b=0)
GREEN = Pixel(r=0, g=128, b=0)
PURPLE = Pixel(r=128, g=0, b=128)
TEAL = Pixel(r=0, g=128, b=128)
NAVY = Pixel(r=0, g=0, b=128)
