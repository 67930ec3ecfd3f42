"""Port: commit history source, implemented by the CodeCommit adapter."""

from __future__ import annotations

from typing import Iterator, Protocol

from codecommit_history.domain.entities import Branch, Commit, Repository


class HistorySource(Protocol):
    """Abstract contract for reading repositories, branches and commits."""

    def list_repositories(self) -> Iterator[Repository]:
        """Yield every repository, oldest modification first, across all pages."""
        ...

    def get_default_branch(self, repository_name: str) -> str | None:
        """Return the repository's default branch name, if it has one."""
        ...

    def list_branches(self, repository_name: str) -> Iterator[str]:
        """Yield every branch name in the repository, across all pages."""
        ...

    def get_branch(self, repository_name: str, branch_name: str) -> Branch:
        """Return the branch with its current tip commit id."""
        ...

    def get_commit(self, repository_name: str, commit_id: str) -> Commit:
        """Return a commit's metadata including its parent ids."""
        ...
