"""Shared test fixtures."""

import subprocess

import pytest

from chticket.models.core import (
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


@pytest.fixture
def sample_settings():
    return {
        "api_url": "https://api.clubhouse.test/api/v3",
        "app_url": "https://app.clubhouse.io",
        "token_settings_url": "https://app.clubhouse.io/settings/account/api-tokens",
        "timeout": 30,
        "branch_verb": "git checkout -b",
        "sprint_label_prefix": "",
        "debug": False,
    }


@pytest.fixture
def sample_configuration(sample_settings):
    return Configuration(
        loaded=True,
        token="ch-token",
        default_project_id=12,
        settings=sample_settings,
    )


@pytest.fixture
def sample_state(sample_configuration):
    return WorkspaceState(
        projects=[
            Project(id=10, name="API", team_id=2),
            Project(id=11, name="Web", team_id=1),
            Project(id=12, name="Mobile", team_id=1),
        ],
        epics=[Epic(id=100, name="Onboarding"), Epic(id=101, name="Billing")],
        teams=[Team(id=1, name="Frontend"), Team(id=2, name="Backend")],
        users=[User(id="u-1", name="Ada Lovelace"), User(id="u-2", name="Grace Hopper")],
        sprints=[Label(name="Sprint 12"), Label(name="Sprint 13")],
        configuration=sample_configuration,
    )


@pytest.fixture
def session_ctx(sample_state):
    return SessionContext(state=sample_state)


@pytest.fixture
def sample_draft():
    return StoryDraft(
        title="Fix Login Bug",
        description="Users cannot log in with SSO",
        story_type="bug",
        project_id="12",
        owner_id="u-1",
        epic_id=100,
        label=Label(name="Sprint 12"),
    )


@pytest.fixture
def created_story():
    return CreatedStory(id=42, name="Fix Login Bug", story_type="bug")


@pytest.fixture
def reset_config_cache():
    import chticket.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def token_file(tmp_path, monkeypatch):
    """Point credential storage at a temp dir and clear the env token."""
    import chticket.auth as auth_mod

    path = tmp_path / "auth.json"
    monkeypatch.setattr(auth_mod, "TOKEN_DIR", tmp_path)
    monkeypatch.setattr(auth_mod, "TOKEN_FILE", path)
    monkeypatch.delenv("CLUBHOUSE_API_TOKEN", raising=False)
    return path


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock
