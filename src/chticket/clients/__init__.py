"""API client for Clubhouse."""

from chticket.clients.clubhouse import (
    clubhouse_api,
    create_story,
    fetch_projects,
    fetch_state,
    fetch_teams,
)

__all__ = [
    "clubhouse_api",
    "fetch_projects",
    "fetch_teams",
    "fetch_state",
    "create_story",
]
