"""Limits, menu numbers and message strings shared across the package."""

# Image and color ranges
MIN_COLOR_VALUE = 0
MAX_COLOR_VALUE = 255
MIN_IMAGE_DIM = 1
MAX_IMAGE_DIM = 2000
MIN_COORDINATE = 0
MIN_MAX_COLOR_VALUE = 1

# Main menu choices
MENU_CHOICE_RECTANGLE = 1
MENU_CHOICE_PATTERN = 2
MENU_CHOICE_INSERT = 3
MENU_CHOICE_OUTPUT = 4
MENU_CHOICE_EXIT = 5

# Rectangle specification
RECT_SPEC_UL_LR = 1
RECT_SPEC_UL_SIZE = 2
RECT_SPEC_CENTER_EXTENT = 3

# Rectangle input bounds
MIN_RECT_ROWS = 1
MIN_RECT_COLS = 1
HALF_EXTENT_MIN = 0

# Rectangle fill option
RECT_FILL_NO = 1
RECT_FILL_YES = 2

# Color menu choices
COLOR_CHOICE_RED = 1
COLOR_CHOICE_GREEN = 2
COLOR_CHOICE_BLUE = 3
COLOR_CHOICE_BLACK = 4
COLOR_CHOICE_WHITE = 5

# Exit codes
EXIT_SUCCESS_CODE = 0
EXIT_BAD_ARG = 2
EXIT_FILE_ERROR = 3

# Menu option strings
MENU_OPTION_RECTANGLE = "Annotate image with rectangle"
MENU_OPTION_PATTERN = "Annotate image with pattern from file"
MENU_OPTION_INSERT = "Insert another image"
MENU_OPTION_OUTPUT = "Write out current image"
MENU_OPTION_EXIT = "Exit the program"

# Rectangle specification method strings
RECT_SPEC_METHOD_UL_LR = "Specify upper left and lower right corners of rectangle"
RECT_SPEC_METHOD_UL_SIZE = "Specify upper left corner and dimensions of rectangle"
RECT_SPEC_METHOD_CENTER_EXTENT = "Specify extent from center of rectangle"

# Color names
COLOR_NAME_RED = "Red"
COLOR_NAME_GREEN = "Green"
COLOR_NAME_BLUE = "Blue"
COLOR_NAME_BLACK = "Black"
COLOR_NAME_WHITE = "White"

# Fill option strings
FILL_OPTION_NO = "No"
FILL_OPTION_YES = "Yes"

# Prompts
PROMPT_MAIN_MENU = "Enter int for main menu choice: "
PROMPT_RECT_SPEC_METHOD = "Enter int for rectangle specification method: "
PROMPT_UPPER_LEFT_CORNER = "Enter upper left corner row and column: "
PROMPT_LOWER_RIGHT_CORNER = "Enter lower right corner row and column: "
PROMPT_RECTANGLE_COLOR = "Enter int for rectangle color: "
PROMPT_RECTANGLE_FILL = "Enter int for rectangle fill option: "
PROMPT_NUMBER_OF_ROWS = "Enter int for number of rows: "
PROMPT_NUMBER_OF_COLUMNS = "Enter int for number of columns: "
PROMPT_RECTANGLE_CENTER = "Enter rectangle center row and column: "
PROMPT_HALF_NUMBER_OF_ROWS = "Enter int for half number of rows: "
PROMPT_HALF_NUMBER_OF_COLUMNS = "Enter int for half number of columns: "
PROMPT_PATTERN_FILE = "Enter string for file name containing pattern: "
PROMPT_PATTERN_CORNER = "Enter upper left corner of pattern row and column: "
PROMPT_PATTERN_COLOR = "Enter int for pattern color: "
PROMPT_INSERT_FILE = "Enter string for file name of PPM image to insert: "
PROMPT_INSERT_CORNER = "Enter upper left corner to insert image row and column: "
PROMPT_TRANSPARENCY_COLOR = "Enter int for transparecy color: "
PROMPT_OUTPUT_FILE = "Enter string for PPM file name to output: "
PROMPT_COLOR_CHOICE = "Enter int for color choice: "

# Error messages
ERROR_INVALID_DATA = "Invalid data entered"
ERROR_INVALID_MENU_OPTION = "Invalid menu option!"
ERROR_UNABLE_TO_READ_INPUT = "Error: Unable to read input file: "
ERROR_UNABLE_TO_OPEN_PPM = "Error: Unable to open PPM file: "
ERROR_INVALID_PPM_MAGIC = "Error: Invalid PPM magic number in file: "
ERROR_INVALID_IMAGE_DIMENSIONS = (
    "Error: Invalid image dimensions or max color value in file: "
)
ERROR_INVALID_PIXEL_DATA = "Error: Invalid pixel data in file: "
ERROR_EXTRA_DATA = "Error: Extra data found in file: "
ERROR_UNABLE_TO_CREATE_PPM = "Error: Unable to create PPM file: "
ERROR_UNABLE_TO_WRITE_PIXEL = "Error: Unable to write pixel data to file: "
ERROR_UNABLE_TO_OPEN_PATTERN = "Error: Unable to open pattern file: "
ERROR_INVALID_PATTERN_DIMENSIONS = "Error: Invalid pattern dimensions in file: "
ERROR_INVALID_PATTERN_DATA = "Error: Invalid pattern data in file: "
ERROR_UNABLE_TO_OPEN_IMAGE = "Error: Unable to open image file: "
ERROR_UNABLE_TO_WRITE_FILE = "Error: Unable to write file: "

# Other messages
MSG_USAGE = "Usage: "
MSG_THANK_YOU = "Thank you for using this program"

# PPM file format
PPM_MAGIC_NUMBER = "P3"