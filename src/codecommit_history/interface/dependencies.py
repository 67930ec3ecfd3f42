"""Dependency wiring: builds adapters and use cases from settings."""

from __future__ import annotations

from rich.console import Console

from codecommit_history.domain.ports.history_source import HistorySource
from codecommit_history.domain.value_objects import CloneUrl
from codecommit_history.infrastructure.codecommit_adapter import CodeCommitAdapter
from codecommit_history.infrastructure.config import Settings
from codecommit_history.infrastructure.git_clone_adapter import GitCloneAdapter
from codecommit_history.interface.console_reporter import ConsoleReporter

console = Console(highlight=False)


def get_reporter() -> ConsoleReporter:
    return ConsoleReporter(console)


def get_history_source(settings: Settings) -> HistorySource:
    """One CodeCommit client for the whole run."""
    return CodeCommitAdapter.from_settings(settings)


def get_clone(settings: Settings, url: CloneUrl) -> GitCloneAdapter:
    return GitCloneAdapter(
        url,
        username=settings.git_username,
        password=settings.git_access_token.get_secret_value(),
    )
