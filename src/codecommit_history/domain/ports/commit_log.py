"""Port: commit log of a locally cloned repository."""

from __future__ import annotations

from typing import Iterator, Protocol

from codecommit_history.domain.entities import Commit


class CommitLog(Protocol):
    """Abstract contract for reading a repository's log from a start point."""

    def head(self) -> str:
        """Return the commit id HEAD resolves to."""
        ...

    def log(self, start: str) -> Iterator[Commit]:
        """Yield commits reachable from *start* in the library's log order."""
        ...
