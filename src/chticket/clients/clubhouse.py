"""Clubhouse REST API client."""

import json
import urllib.error
import urllib.request
from typing import Any, Optional

from chticket.config.settings import get_config
from chticket.errors import ChticketError, ClubhouseAPIError, SubmissionError
from chticket.models.core import (
    Configuration,
    CreatedStory,
    Epic,
    Label,
    Project,
    Team,
    User,
    WorkspaceState,
)
from chticket.utils.debug import debug_log


def _error_payload(err: urllib.error.HTTPError) -> Any:
    """Best-effort decode of an HTTP error body (JSON if possible)."""
    try:
        raw = err.read()
    except (OSError, AttributeError):
        return None
    if not raw:
        return None
    text = raw.decode(errors="replace")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def clubhouse_api(
    method: str,
    path: str,
    token: str,
    body: Optional[dict] = None,
    settings: Optional[dict] = None,
) -> Any:
    """Call the Clubhouse v3 REST API. Raises ClubhouseAPIError on any failure."""
    settings = settings if settings is not None else get_config()
    url = f"{settings['api_url'].rstrip('/')}{path}"
    data = json.dumps(body).encode() if body is not None else None
    req = urllib.request.Request(
        url,
        data=data,
        method=method,
        headers={"Clubhouse-Token": token, "Content-Type": "application/json"},
    )
    debug_log(settings, f"{method} {path}", body if body is not None else "")
    try:
        with urllib.request.urlopen(
            req, timeout=settings.get("timeout", 30)
        ) as resp:  # nosemgrep: dynamic-urllib-use-detected
            raw = resp.read()
    except urllib.error.HTTPError as e:
        payload = _error_payload(e)
        debug_log(settings, f"{method} {path} HTTP {e.code}", payload or "")
        raise ClubhouseAPIError(
            f"Clubhouse API HTTP {e.code}: {e.reason}", status=e.code, payload=payload
        ) from e
    except urllib.error.URLError as e:
        raise ClubhouseAPIError(f"Clubhouse API connection error: {e.reason}") from e

    if not raw:
        return None
    try:
        result = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ClubhouseAPIError(f"Clubhouse API returned invalid JSON: {e}") from e
    debug_log(settings, f"{method} {path} response", result)
    return result


def fetch_projects(token: str, settings: Optional[dict] = None) -> list[Project]:
    """Fetch non-archived projects."""
    data = clubhouse_api("GET", "/projects", token, settings=settings) or []
    return [
        Project(id=p["id"], name=p["name"], team_id=p.get("team_id", 0))
        for p in data
        if not p.get("archived")
    ]


def fetch_teams(token: str, settings: Optional[dict] = None) -> list[Team]:
    data = clubhouse_api("GET", "/teams", token, settings=settings) or []
    return [Team(id=t["id"], name=t["name"]) for t in data]


def fetch_state(configuration: Configuration) -> WorkspaceState:
    """Fetch everything the wizard needs to populate its prompts."""
    token = configuration.token or ""
    settings = configuration.settings or get_config()

    projects = fetch_projects(token, settings)
    if not projects:
        raise ChticketError("No projects found in this Clubhouse workspace")
    epics = [
        Epic(id=e["id"], name=e["name"])
        for e in clubhouse_api("GET", "/epics", token, settings=settings) or []
        if not e.get("archived")
    ]
    teams = fetch_teams(token, settings)
    users = []
    for member in clubhouse_api("GET", "/members", token, settings=settings) or []:
        profile = member.get("profile") or {}
        if member.get("disabled") or profile.get("deactivated"):
            continue
        users.append(User(id=member["id"], name=profile.get("name", "")))

    prefix = (settings.get("sprint_label_prefix") or "").lower()
    sprints = [
        Label(name=label["name"])
        for label in clubhouse_api("GET", "/labels", token, settings=settings) or []
        if not label.get("archived") and label["name"].lower().startswith(prefix)
    ]

    return WorkspaceState(
        projects=projects,
        epics=epics,
        teams=teams,
        users=users,
        sprints=sprints,
        configuration=configuration,
    )


def create_story(token: str, request: dict, settings: Optional[dict] = None) -> CreatedStory:
    """Create a story. Raises SubmissionError carrying the response payload on failure."""
    try:
        story = clubhouse_api("POST", "/stories", token, body=request, settings=settings)
    except ClubhouseAPIError as e:
        raise SubmissionError(str(e), status=e.status, payload=e.payload) from e
    if not isinstance(story, dict) or "id" not in story:
        raise SubmissionError("Clubhouse API returned no story", payload=story)
    return CreatedStory(
        id=story["id"],
        name=story.get("name", request.get("name", "")),
        story_type=story.get("story_type", request.get("story_type", "")),
    )
