# File format constants
SVG_EXT = ".svg"
SVG_DIR = ""

# UI Constants
GRID_ITEM_WIDTH = 256
ICON_SIZE = 96
CAPTION_SPACING = 8
ROW_SPACING = 16
COLUMN_SPACING = 8
DEFAULT_WINDOW_SIZE = (1024, 768)

# Application identity
APP_ID = "com.example.Svger"
ORG_NAME = "Svger"
APP_NAME = "Svger"
REPOSITORY = "https://github.com/edfloreshz/cosmic-app-template"
MAIN_WINDOW_ID = "main"

# Settings keys
SETTINGS_GEOMETRY = "main_window_geometry"
