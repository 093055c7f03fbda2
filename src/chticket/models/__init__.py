"""Data models for ch-ticket."""

from chticket.models.core import (
    STORY_TYPES,
    Configuration,
    CreatedStory,
    Epic,
    Label,
    Project,
    StoryDraft,
    Team,
    User,
    WorkspaceState,
)
from chticket.models.state import SessionContext

__all__ = [
    # Core
    "STORY_TYPES",
    "Configuration",
    "Team",
    "Project",
    "Epic",
    "User",
    "Label",
    "WorkspaceState",
    "StoryDraft",
    "CreatedStory",
    # State
    "SessionContext",
]
