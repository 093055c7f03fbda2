"""Core data models for workspace state and stories."""

from dataclasses import dataclass, field
from typing import Optional

STORY_TYPES = ["feature", "bug", "chore"]


@dataclass
class Configuration:
    """Resolved credentials plus merged settings."""

    loaded: bool
    error_msg: str = ""
    token: Optional[str] = None
    default_project_id: Optional[int] = None
    settings: dict = field(default_factory=dict)


@dataclass
class Team:
    id: int
    name: str


@dataclass
class Project:
    id: int
    name: str
    team_id: int


@dataclass
class Epic:
    id: int
    name: str


@dataclass
class User:
    """Workspace member. `name` comes from the member's profile."""

    id: str
    name: str


@dataclass
class Label:
    name: str

    def to_dict(self) -> dict:
        return {"name": self.name}


@dataclass
class WorkspaceState:
    """Reference data fetched once per session to populate prompt choices."""

    projects: list[Project]
    epics: list[Epic]
    teams: list[Team]
    users: list[User]
    sprints: list[Label]
    configuration: Configuration


@dataclass
class StoryDraft:
    """Answers collected for one ticket. None marks an unassigned owner/epic/label."""

    title: str
    description: str
    story_type: str
    project_id: str
    owner_id: Optional[str] = None
    epic_id: Optional[int] = None
    label: Optional[Label] = None


@dataclass
class CreatedStory:
    id: int
    name: str
    story_type: str
