"""Interactive story creation wizard."""

from chticket.wizard.choices import Choice, ChoiceCompleter, resolve
from chticket.wizard.questions import ask_question, build_questions, collect_answers
from chticket.wizard.session import create_single_ticket, create_tickets
from chticket.wizard.submit import branch_command, build_story_request, story_slug, submit_story

__all__ = [
    # Choices
    "Choice",
    "ChoiceCompleter",
    "resolve",
    # Questions
    "build_questions",
    "ask_question",
    "collect_answers",
    # Submission
    "build_story_request",
    "story_slug",
    "branch_command",
    "submit_story",
    # Session
    "create_single_ticket",
    "create_tickets",
]
