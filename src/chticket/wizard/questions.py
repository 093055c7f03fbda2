"""Question definitions for the single-ticket flow.

Each prompt kind is its own dataclass with its own validation. ask_question()
renders any of them through questionary.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import questionary

from chticket.errors import ValidationError
from chticket.models.core import STORY_TYPES, Label, Project, StoryDraft, Team, WorkspaceState
from chticket.models.state import SessionContext
from chticket.wizard.choices import Choice, ChoiceCompleter, disambiguate, find_choice

TITLE_MIN = 5
TITLE_MAX = 120
DESCRIPTION_MIN = 5

NO_EPIC = "No Epic"
DO_NOT_ASSIGN = "Do not assign"
NO_LABEL = "No Label"

PICK_LISTED_OPTION = "Please pick one of the listed options"


@dataclass
class TextQuestion:
    name: str
    message: str
    validate: Callable[[str], None]
    multiline: bool = False
    secret: bool = False


@dataclass
class SelectQuestion:
    name: str
    message: str
    options: list[str]
    default: int = 0


@dataclass
class AutocompleteQuestion:
    name: str
    message: str
    source: Callable[[], list[Choice]]
    default: Optional[int] = None
    required_message: str = PICK_LISTED_OPTION

    def default_choice(self) -> Optional[Choice]:
        """Choice at the default index, or None when the index is out of range."""
        choices = self.source()
        if self.default is not None and 0 <= self.default < len(choices):
            return choices[self.default]
        return None

    def pick(self, answer: Optional[str]) -> Choice:
        """Map typed text back to a listed choice. Raises ValidationError if none matches."""
        choice = find_choice(self.source(), answer)
        if choice is None:
            raise ValidationError(self.required_message)
        return choice


@dataclass
class ConfirmQuestion:
    name: str
    message: str
    default: bool = True


Question = Union[TextQuestion, SelectQuestion, AutocompleteQuestion, ConfirmQuestion]


# --- Validators ---


def validate_title(value: Optional[str]) -> None:
    if value is None or len(value) < TITLE_MIN:
        raise ValidationError("Title should be more than 5 characters long")
    if len(value) > TITLE_MAX:
        raise ValidationError("Title should not be longer than 120 characters")


def validate_description(value: Optional[str]) -> None:
    if value is None or len(value) < DESCRIPTION_MIN:
        raise ValidationError("Description should be more than 5 characters long")


def validate_token(value: Optional[str]) -> None:
    if not value or not value.strip():
        raise ValidationError("An API token is required")


# --- Choice sources ---


def project_choices(projects: list[Project], teams: list[Team]) -> list[Choice]:
    """Projects sorted by team, labelled 'name (team)'. Values are string ids."""
    team_names = {t.id: t.name for t in teams}
    choices = []
    for project in sorted(projects, key=lambda p: p.team_id):
        team = team_names.get(project.team_id)
        name = f"{project.name} ({team})" if team else project.name
        choices.append(Choice(name, str(project.id)))
    return disambiguate(choices)


def default_project_index(choices: list[Choice], project_id: Optional[int]) -> Optional[int]:
    if project_id is None:
        return None
    for i, choice in enumerate(choices):
        if choice.value == str(project_id):
            return i
    return None


def epic_choices(state: WorkspaceState) -> list[Choice]:
    epics = [Choice(e.name, e.id) for e in state.epics]
    return disambiguate(epics + [Choice(NO_EPIC, None)])


def owner_choices(state: WorkspaceState) -> list[Choice]:
    users = [Choice(u.name, u.id) for u in state.users]
    return disambiguate([Choice(DO_NOT_ASSIGN, None)] + users)


def label_choices(state: WorkspaceState) -> list[Choice]:
    labels = [Choice(s.name, Label(name=s.name)) for s in state.sprints]
    return labels + [Choice(NO_LABEL, None)]


def build_questions(state: WorkspaceState) -> list[Question]:
    """Ordered prompts for one ticket."""
    projects = project_choices(state.projects, state.teams)
    return [
        AutocompleteQuestion(
            name="project",
            message="Which project does this story belong to: ",
            source=lambda: projects,
            default=default_project_index(projects, state.configuration.default_project_id),
            required_message="A story must be assigned to a project",
        ),
        AutocompleteQuestion(
            name="epic",
            message="Which epic to assign this story to: ",
            source=lambda: epic_choices(state),
            default=len(state.epics),
        ),
        TextQuestion(
            name="title",
            message="Title for this story (short and descriptive): ",
            validate=validate_title,
        ),
        TextQuestion(
            name="description",
            message="A concise description for this story, markdown is supported: ",
            validate=validate_description,
            multiline=True,
        ),
        SelectQuestion(
            name="story_type",
            message="What type of work is this: ",
            options=STORY_TYPES,
            default=0,
        ),
        AutocompleteQuestion(
            name="owner",
            message="Which user to assign this story to: ",
            source=lambda: owner_choices(state),
            default=0,
        ),
        AutocompleteQuestion(
            name="label",
            message="Which sprint to put this story in: ",
            source=lambda: label_choices(state),
            default=len(state.sprints),
        ),
    ]


# --- Rendering ---


def _as_validator(check: Callable[[Any], Any]) -> Callable[[str], Union[bool, str]]:
    """Adapt a raising validator to questionary's True-or-message convention."""

    def validator(value: str) -> Union[bool, str]:
        try:
            check(value)
        except ValidationError as e:
            return str(e)
        return True

    return validator


def ask_question(question: Question) -> Any:
    """Show one prompt until it gets a valid answer. Ctrl-C raises KeyboardInterrupt."""
    if isinstance(question, TextQuestion):
        if question.secret:
            return questionary.password(
                question.message, validate=_as_validator(question.validate)
            ).unsafe_ask()
        return questionary.text(
            question.message,
            multiline=question.multiline,
            validate=_as_validator(question.validate),
        ).unsafe_ask()

    if isinstance(question, SelectQuestion):
        return questionary.select(
            question.message,
            choices=question.options,
            default=question.options[question.default],
        ).unsafe_ask()

    if isinstance(question, ConfirmQuestion):
        return questionary.confirm(question.message, default=question.default).unsafe_ask()

    if isinstance(question, AutocompleteQuestion):
        choices = question.source()
        default = question.default_choice()
        answer = questionary.autocomplete(
            question.message,
            choices=[c.name for c in choices],
            default=default.name if default else "",
            completer=ChoiceCompleter(choices),
            validate=_as_validator(question.pick),
        ).unsafe_ask()
        return question.pick(answer).value

    raise TypeError(f"Unknown question type: {type(question).__name__}")


def collect_answers(ctx: SessionContext) -> StoryDraft:
    """Ask every prompt in order and return the validated draft."""
    answers = {}
    for question in build_questions(ctx.state):
        answers[question.name] = ask_question(question)
    return StoryDraft(
        title=answers["title"],
        description=answers["description"],
        story_type=answers["story_type"],
        project_id=answers["project"],
        owner_id=answers["owner"],
        epic_id=answers["epic"],
        label=answers["label"],
    )
