"""CLI entry point."""

import json
import sys
from importlib.metadata import version as get_version

try:
    __version__ = get_version("ch-ticket")
except Exception:
    __version__ = "dev"

from chticket.clients.clubhouse import fetch_state
from chticket.config.settings import (
    get_config_loaded_sources,
    load_configuration,
    require_configuration,
)
from chticket.errors import ChticketError, ClubhouseAPIError, NotConfiguredError
from chticket.init import run_init
from chticket.models.state import SessionContext
from chticket.ui.output import error, log, success, warn
from chticket.wizard.session import create_tickets

USAGE = """usage: ch-ticket [init | help]

  ch-ticket         Create Clubhouse stories interactively
  ch-ticket init    Set up API token and default project, then create stories
"""


def log_config() -> None:
    """Log version and which config files overrode the bundled defaults."""
    log(f"ch-ticket {__version__}")
    overrides = [s for s in get_config_loaded_sources() if s != "defaults"]
    if overrides:
        log(f"Config overrides: {', '.join(overrides)}")


def run(setup: bool = False) -> int:
    """Configure if needed, fetch the workspace, then run the wizard. Returns exit code."""
    try:
        try:
            configuration = require_configuration()
            if setup:
                configuration = run_init(configuration)
        except NotConfiguredError as e:
            error(str(e))
            warn("You must first configure the CLI")
            configuration = run_init(load_configuration())

        log_config()
        log("Fetching workspace...")
        state = fetch_state(configuration)
    except ClubhouseAPIError as e:
        error(str(e))
        if e.payload is not None:
            print(json.dumps(e.payload, indent=2) if isinstance(e.payload, dict) else e.payload)
        return 1
    except ChticketError as e:
        error(str(e))
        return 1

    count = create_tickets(SessionContext(state=state))
    success(f"Done ({count} ticket{'s' if count != 1 else ''} attempted)")
    return 0


def main() -> None:
    args = sys.argv[1:]
    if args and args[0] == "help":
        print(USAGE)
        sys.exit(0)
    if args and args[0] != "init":
        error(f"Unknown command: {args[0]}")
        print(USAGE)
        sys.exit(2)

    try:
        code = run(setup=bool(args))
    except (EOFError, KeyboardInterrupt):
        print()
        warn("Aborted")
        sys.exit(130)
    sys.exit(code)


if __name__ == "__main__":
    main()
