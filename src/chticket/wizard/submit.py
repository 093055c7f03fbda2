"""Turn a draft into a Clubhouse story and report the outcome."""

import json
import re
import unicodedata
from typing import Any, Optional

from chticket.clients.clubhouse import create_story
from chticket.errors import SubmissionError
from chticket.models.core import CreatedStory, StoryDraft
from chticket.models.state import SessionContext
from chticket.ui.clipboard import copy_to_clipboard
from chticket.ui.output import bold, error, link, log, success, warn

DEFAULT_BRANCH_VERB = "git checkout -b"
DEFAULT_APP_URL = "https://app.clubhouse.io"


def build_story_request(draft: StoryDraft) -> dict:
    """Creation payload. Unassigned owner/label become null rather than empty lists."""
    return {
        "name": draft.title,
        "description": draft.description,
        "story_type": draft.story_type,
        "owner_ids": None if draft.owner_id is None else [draft.owner_id],
        "project_id": int(draft.project_id),
        "epic_id": draft.epic_id,
        "labels": None if draft.label is None else [draft.label.to_dict()],
    }


def story_slug(name: str) -> str:
    """Lowercase, branch-safe slug: 'Fix Login Bug' -> 'fix-login-bug'."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode()
    return re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")


def branch_command(story: CreatedStory, verb: str = DEFAULT_BRANCH_VERB) -> str:
    """e.g. 'git checkout -b bug/ch42/fix-login-bug'."""
    slug = story_slug(story.name) or "story"
    return f"{verb} {story.story_type}/ch{story.id}/{slug}"


def story_url(settings: dict, story_id: int) -> str:
    app_url = settings.get("app_url") or DEFAULT_APP_URL
    return f"{app_url.rstrip('/')}/story/{story_id}"


def _format_payload(payload: Any) -> str:
    if isinstance(payload, (dict, list)):
        return json.dumps(payload, indent=2)
    return str(payload)


def submit_story(ctx: SessionContext, draft: StoryDraft) -> Optional[CreatedStory]:
    """Create the story. API failures are reported and absorbed (returns None)."""
    request = build_story_request(draft)
    try:
        story = create_story(ctx.token, request, settings=ctx.settings)
    except SubmissionError as e:
        error("There was an error processing your request")
        print(_format_payload(e.payload if e.payload is not None else e))
        return None

    cmd = branch_command(story, ctx.settings.get("branch_verb") or DEFAULT_BRANCH_VERB)
    success(f"Successfully created a story with id {story.id}")
    log(f"You can view your story at {link(story_url(ctx.settings, story.id))}")
    log(f"To start working on this story (copied to clipboard): {bold(cmd)}")
    if not copy_to_clipboard(cmd):
        warn("Could not copy to clipboard (install pbcopy, wl-copy, xclip or xsel)")
    return story
