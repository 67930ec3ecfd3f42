"""Port: history reporter, the sink every visited entity is printed to."""

from __future__ import annotations

from typing import Protocol

from codecommit_history.domain.entities import Branch, Commit, Repository


class HistoryReporter(Protocol):
    """Abstract contract for rendering the history trace."""

    def repository(self, repository: Repository) -> None: ...

    def default_branch(self, branch_name: str | None) -> None: ...

    def branch(self, branch_name: str) -> None: ...

    def branch_tip(self, branch: Branch) -> None: ...

    def commit(self, commit: Commit) -> None: ...

    def log_entry(self, commit: Commit) -> None: ...
