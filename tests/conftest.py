"""Pytest configuration and fixtures."""

from __future__ import annotations

import io
from typing import Iterator

import pytest
from rich.console import Console

from codecommit_history.domain.entities import Branch, Commit, Person, Repository
from codecommit_history.domain.exceptions import CommitNotFoundError, ServiceError
from codecommit_history.interface.console_reporter import ConsoleReporter


def make_commit(commit_id: str, *parents: str, message: str | None = None) -> Commit:
    return Commit(
        commit_id=commit_id,
        author=Person(name="Kellie", email="kellie@example.com", date="1484167798 -0800"),
        message=message or f"message {commit_id}",
        parents=tuple(parents),
    )


class FakeHistorySource:
    """In-memory HistorySource recording every call made to it."""

    def __init__(
        self,
        repositories: list[Repository] | None = None,
        branches: dict[str, dict[str, str]] | None = None,
        default_branches: dict[str, str | None] | None = None,
        commits: list[Commit] | None = None,
        failing_commits: set[str] | None = None,
    ) -> None:
        self.repositories = repositories or []
        self.branches = branches or {}
        self.default_branches = default_branches or {}
        self.commits = {c.commit_id: c for c in commits or []}
        self.failing_commits = failing_commits or set()
        self.calls: list[tuple[str, ...]] = []

    def list_repositories(self) -> Iterator[Repository]:
        self.calls.append(("list_repositories",))
        yield from self.repositories

    def get_default_branch(self, repository_name: str) -> str | None:
        self.calls.append(("get_default_branch", repository_name))
        return self.default_branches.get(repository_name)

    def list_branches(self, repository_name: str) -> Iterator[str]:
        self.calls.append(("list_branches", repository_name))
        yield from self.branches.get(repository_name, {})

    def get_branch(self, repository_name: str, branch_name: str) -> Branch:
        self.calls.append(("get_branch", repository_name, branch_name))
        return Branch(branch_name, self.branches[repository_name][branch_name])

    def get_commit(self, repository_name: str, commit_id: str) -> Commit:
        self.calls.append(("get_commit", repository_name, commit_id))
        if commit_id in self.failing_commits:
            raise ServiceError(f"Failed to get commit {commit_id}")
        try:
            return self.commits[commit_id]
        except KeyError:
            raise CommitNotFoundError(f"Commit {commit_id} does not exist") from None

    def commit_fetches(self) -> list[str]:
        return [call[2] for call in self.calls if call[0] == "get_commit"]


class RecordingReporter:
    """HistoryReporter that keeps events instead of printing them."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str | None]] = []

    def repository(self, repository: Repository) -> None:
        self.events.append(("repository", repository.repository_name))

    def default_branch(self, branch_name: str | None) -> None:
        self.events.append(("default_branch", branch_name))

    def branch(self, branch_name: str) -> None:
        self.events.append(("branch", branch_name))

    def branch_tip(self, branch: Branch) -> None:
        self.events.append(("branch_tip", branch.commit_id))

    def commit(self, commit: Commit) -> None:
        self.events.append(("commit", commit.commit_id))

    def log_entry(self, commit: Commit) -> None:
        self.events.append(("log_entry", commit.commit_id))


@pytest.fixture
def kellie_source() -> FakeHistorySource:
    """Repository "kellie1": main c3 -> c1, dev c4 -> c1."""
    return FakeHistorySource(
        repositories=[Repository("id-kellie1", "kellie1")],
        branches={"kellie1": {"main": "c3", "dev": "c4"}},
        default_branches={"kellie1": "main"},
        commits=[make_commit("c3", "c1"), make_commit("c4", "c1"), make_commit("c1")],
    )


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console_reporter(output: io.StringIO) -> ConsoleReporter:
    console = Console(file=output, width=200, color_system=None, highlight=False)
    return ConsoleReporter(console)
