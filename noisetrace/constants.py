"""Constants for noisetrace frame layout and rendering defaults."""

TEMPLATE_FILE_NAME = "template"
FRAME_DIR_NAME = "frames"
FRAME_FILE_NAME = "frame"
FRAME_FILE_EXTENSION = "png"  # lossless, decoded back by imageio

PIXEL_ON = 255
PIXEL_OFF = 0
BRIGHT_THRESHOLD = 127  # mask expansion keeps pixels with a neighbour above this

DEFAULT_WINDOW = 1
DEFAULT_UPSCALE = 1
DEFAULT_FPS = 24
FLIP_EXPONENT = 3
