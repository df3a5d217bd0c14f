"""
config.py - Path resolution and app constants
UX Debt Tracker v1.0
"""

import os
import sys

# ---------------------------------------------------------------------------
# Path resolution (frozen exe aware)
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    Return the base directory of the app for the current runtime.
    - frozen exe : directory containing the executable
    - script     : project root (one level above this package)
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # config.py is in uxdebt/, so project root is one level up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()

# UXDEBT_DB_PATH overrides the default location (handy for throwaway data sets)
DB_PATH = os.environ.get("UXDEBT_DB_PATH") or os.path.join(BASE_PATH, "data.db")

# ---------------------------------------------------------------------------
# Storage keys
# ---------------------------------------------------------------------------

PROJECTS_KEY = "projects"
DEBT_ITEMS_KEY = "debt_items"
USER_KEY = "user"

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "UX Debt Tracker"
APP_VERSION = "0.1.0"
UNKNOWN_PROJECT_LABEL = "Unknown Project"
ANALYTICS_MONTHS = 6  # trailing window for the monthly chart
TIME_RANGES = {
    "all": None,
    "30d": 30,
    "90d": 90,
    "1y": 365,
}

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

COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

STATUS_COLORS = {
    "Open": "#DC2626",
    "In Progress": "#2563EB",
    "Fixed": "#CA8A04",
    "Resolved": "#16A34A",
}
SEVERITY_COLORS = {
    "High": "#DC2626",
    "Medium": "#D97706",
    "Low": "#059669",
}
TYPE_COLORS = {
    "Visual": "#EF4444",
    "Accessibility": "#F59E0B",
    "Copy": "#10B981",
    "Usability": "#3B82F6",
}

# UI constants
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
KANBAN_COLUMN_WIDTH = 280
