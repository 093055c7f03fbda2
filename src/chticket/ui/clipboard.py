"""System clipboard writes via platform tools."""

import shutil
import subprocess

# Tried in order, first one installed wins
CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the clipboard. Returns False if no tool succeeded."""
    for cmd in CLIPBOARD_COMMANDS:
        if not shutil.which(cmd[0]):
            continue
        try:
            result = subprocess.run(cmd, input=text, text=True, capture_output=True, timeout=5)
        except (OSError, subprocess.SubprocessError):
            continue
        if result.returncode == 0:
            return True
    return False
