"""ch-ticket init - interactive first-run setup."""

from typing import Optional

from chticket.auth import TOKEN_FILE, TOKEN_ENV_VAR, save_credentials
from chticket.clients.clubhouse import fetch_projects, fetch_teams
from chticket.config.settings import get_config
from chticket.errors import ChticketError
from chticket.models.core import Configuration
from chticket.ui.output import GREEN, NC, link, log, success
from chticket.wizard.questions import (
    AutocompleteQuestion,
    ConfirmQuestion,
    TextQuestion,
    ask_question,
    default_project_index,
    project_choices,
    validate_token,
)

TOKEN_QUESTION = TextQuestion(
    name="token",
    message="Clubhouse API token: ",
    validate=validate_token,
    secret=True,
)


def _ask_token(existing: Optional[str]) -> str:
    """Reuse an existing token if the user agrees, otherwise prompt for one."""
    if existing:
        reuse = ConfirmQuestion(
            name="reuse_token",
            message="An API token is already available. Use it: ",
            default=True,
        )
        if ask_question(reuse):
            return existing
    return str(ask_question(TOKEN_QUESTION)).strip()


def run_init(configuration: Optional[Configuration] = None) -> Configuration:
    """Ask for token and default project, save them, and return a loaded Configuration.

    API failures propagate to the caller.
    """
    settings = get_config()
    existing_token = configuration.token if configuration else None
    existing_project = configuration.default_project_id if configuration else None

    print(f"\n{GREEN}ch-ticket setup{NC} - connect the CLI to your Clubhouse workspace\n")
    log("The most important part is an API token.")
    log(
        "To get one, login to your Clubhouse account and visit "
        + link(settings["token_settings_url"])
    )
    log(f"You can also set {TOKEN_ENV_VAR} instead of storing the token.")

    token = _ask_token(existing_token)

    log("Checking token...")
    projects = fetch_projects(token, settings)
    if not projects:
        raise ChticketError("No projects found in this Clubhouse workspace")
    teams = fetch_teams(token, settings)
    choices = project_choices(projects, teams)

    question = AutocompleteQuestion(
        name="default_project",
        message="Which project should new stories default to: ",
        source=lambda: choices,
        default=default_project_index(choices, existing_project),
        required_message="Pick a default project",
    )
    project_id = int(ask_question(question))

    save_credentials(token, project_id)
    success(f"Saved configuration to {TOKEN_FILE}")

    return Configuration(
        loaded=True,
        token=token,
        default_project_id=project_id,
        settings=settings,
    )
