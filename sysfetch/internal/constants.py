"""
Fixed values shared across the sysfetch pipeline.
"""

APP_NAME = "sysfetch"

# ---------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------

ENV_LOG_LEVEL = "SYSFETCH_LOG_LEVEL"
ENV_LOG_FILE = "SYSFETCH_LOG_FILE"
ENV_LOGO_DIR = "SYSFETCH_LOGO_DIR"
ENV_HARDWARE = "SYSFETCH_HARDWARE"
ENV_SHELL = "SHELL"

# ---------------------------------------------------------------------
# Distribution detection
# ---------------------------------------------------------------------

OS_RELEASE_PATH = "/etc/os-release"
OS_RELEASE_ID_PREFIX = "ID="
UNKNOWN_DISTRO = "Unknown Distro"

# ---------------------------------------------------------------------
# Package managers
# ---------------------------------------------------------------------

UNKNOWN_PACKAGE_MANAGER = "unknown"
PACKAGE_MANAGER_NOT_SUPPORTED = "Package manager not supported."

# ---------------------------------------------------------------------
# Logos
# ---------------------------------------------------------------------

LOGO_SUFFIX = ".txt"
FALLBACK_LOGO_NAME = "unknown"
LOGO_READ_ERROR = "Error reading ASCII file"

# ---------------------------------------------------------------------
# Layout / rendering
# ---------------------------------------------------------------------

ART_COLUMN_WIDTH = 18
ACCENT_COLOR = "blue"
SWATCH_COLORS = (1, 2, 3, 4, 5, 6, 7)
SWATCH_CELL = "  "

# Searched for as substrings of process names.
KNOWN_WINDOW_MANAGERS = (
    "i3",
    "kwin",
    "mutter",
    "openbox",
    "awesome",
    "fluxbox",
    "xmonad",
    "sway",
    "bspwm",
    "qtile",
    "dwm",
    "hyprland",
)

COMMAND_ERROR_PREFIX = "Error: "
