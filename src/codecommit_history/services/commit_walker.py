"""Commit-history walker: depth-first traversal of the parent graph.

The walk is pre-order: a commit is yielded before any of its parents are
fetched, and each parent's full history is visited before the next parent,
in the order the service returns them. An explicit stack replaces
recursion so long histories do not grow the interpreter's call stack.
"""

from __future__ import annotations

import logging
from typing import Iterator

from codecommit_history.domain.entities import Commit
from codecommit_history.domain.ports.history_source import HistorySource

logger = logging.getLogger(__name__)


class CommitHistoryWalker:
    """Walks every commit reachable from a starting commit.

    Parameters
    ----------
    source:
        Adapter able to fetch single commits.
    deduplicate:
        When false (the default) a shared ancestor is yielded once for every
        path that reaches it, so history below a merge that reconverges is
        repeated. When true, a visited set scoped to one :meth:`walk` call
        yields each commit at most once.
    """

    def __init__(self, source: HistorySource, *, deduplicate: bool = False) -> None:
        self._source = source
        self._deduplicate = deduplicate

    def walk(self, repository_name: str, commit_id: str) -> Iterator[Commit]:
        """Yield *commit_id* and all of its ancestors.

        Fetch errors propagate from the point they occur; nothing further is
        yielded afterwards.
        """
        stack: list[str] = [commit_id]
        visited: set[str] = set()
        visits = 0

        while stack:
            current = stack.pop()
            if self._deduplicate:
                if current in visited:
                    continue
                visited.add(current)

            commit = self._source.get_commit(repository_name, current)
            visits += 1
            yield commit

            # reversed so the first parent is popped first
            stack.extend(reversed(commit.parents))

        logger.debug(
            "Walked %d commit(s) from %s in %s", visits, commit_id, repository_name
        )
