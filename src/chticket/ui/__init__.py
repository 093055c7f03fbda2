"""UI components for terminal output."""

from chticket.ui.clipboard import copy_to_clipboard
from chticket.ui.output import (
    BLUE,
    BOLD,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    UNDERLINE,
    YELLOW,
    bold,
    error,
    hyperlink,
    link,
    log,
    success,
    warn,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "GRAY",
    "MAGENTA",
    "BOLD",
    "UNDERLINE",
    "NC",
    # Functions
    "hyperlink",
    "link",
    "bold",
    "log",
    "success",
    "warn",
    "error",
    "copy_to_clipboard",
]
