"""Session context threaded through the wizard."""

from dataclasses import dataclass

from chticket.models.core import Configuration, WorkspaceState


@dataclass
class SessionContext:
    """Built once at startup and passed to the pipeline, submission and loop."""

    state: WorkspaceState

    @property
    def configuration(self) -> Configuration:
        return self.state.configuration

    @property
    def settings(self) -> dict:
        return self.state.configuration.settings

    @property
    def token(self) -> str:
        return self.state.configuration.token or ""
