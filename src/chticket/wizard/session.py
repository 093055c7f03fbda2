"""Repeat-until-done ticket creation loop."""

from typing import Optional

from chticket.models.core import CreatedStory
from chticket.models.state import SessionContext
from chticket.ui.output import bold
from chticket.wizard.questions import ConfirmQuestion, ask_question, collect_answers
from chticket.wizard.submit import submit_story

ANOTHER_TICKET = ConfirmQuestion(
    name="do_one_more",
    message="Create another ticket: ",
    default=True,
)


def create_single_ticket(ctx: SessionContext) -> Optional[CreatedStory]:
    """Ask all questions, then submit. Nothing is sent until every answer is valid."""
    draft = collect_answers(ctx)
    return submit_story(ctx, draft)


def create_tickets(ctx: SessionContext) -> int:
    """Create tickets until the user declines another. Returns the attempt count."""
    idx = 1
    while True:
        print(f"\nCreating ticket #{bold(str(idx))}")
        create_single_ticket(ctx)
        if not ask_question(ANOTHER_TICKET):
            return idx
        idx += 1
