"""
config.py - Path resolution and application constants
Bookshelf v0.1
"""

import os
import sys

# ---------------------------------------------------------------------------
# Path resolution (frozen exe aware)
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    Return the application base directory.
    - frozen exe: directory holding the executable
    - script    : project root (one level above this package)
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()

# The collection lives in one SQLite file; point several clients at the same
# file (e.g. on a shared folder) to see each other's changes live.
DB_PATH = os.environ.get("BOOKSHELF_DB_PATH") or os.path.join(BASE_PATH, "books.db")

POLL_INTERVAL_SECONDS = float(os.environ.get("BOOKSHELF_POLL_INTERVAL", "1.0"))
LOG_LEVEL = os.environ.get("BOOKSHELF_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Application constants
# ---------------------------------------------------------------------------

APP_TITLE = "My Bookshelf"
APP_VERSION = "0.1.0"

MAX_RATING = 5
HIGH_RATING_THRESHOLD = 4

EXPORT_FILENAME = "books.csv"
DATE_FORMAT = "%d/%m/%Y"
TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"
NO_RESULTS_TEXT = "No books matching your search result"
NO_TIMESTAMP_TEXT = "N/A"
NO_FAVORITE_TEXT = "-"

# ---------------------------------------------------------------------------
# Color palette
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_DANGER = "#CF222E"
COLOR_SUCCESS = "#2da44e"
COLOR_STAR = "#F5A623"
COLOR_COVER_PLACEHOLDER = "#E5E8EC"

COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

# UI constants
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
COVER_WIDTH = 90
COVER_HEIGHT = 130
