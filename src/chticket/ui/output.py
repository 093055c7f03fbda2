"""Terminal output helpers with colors and hyperlinks."""

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"
NC = "\033[0m"

PREFIX = "[ch]"


def hyperlink(url: str, text: str) -> str:
    """OSC 8 hyperlink - clickable in modern terminals."""
    return f"\033]8;;{url}\007{text}\033]8;;\007"


def link(url: str) -> str:
    """Blue, underlined, clickable URL."""
    return f"{BLUE}{UNDERLINE}{hyperlink(url, url)}{NC}"


def bold(msg: str) -> str:
    return f"{BOLD}{msg}{NC}"


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}{PREFIX}{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}{PREFIX}{NC} {GREEN}{msg}{NC}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}{PREFIX}{NC} {YELLOW}{msg}{NC}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}{PREFIX}{NC} {RED}{msg}{NC}")
