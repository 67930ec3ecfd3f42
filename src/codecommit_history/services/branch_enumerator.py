"""Repository/branch enumerator: drives the commit walker branch by branch."""

from __future__ import annotations

import logging
from typing import Iterator

from codecommit_history.domain.entities import Branch, Repository
from codecommit_history.domain.ports.history_reporter import HistoryReporter
from codecommit_history.domain.ports.history_source import HistorySource

logger = logging.getLogger(__name__)


class BranchEnumerator:
    """Yields the tip of every branch to walk, repository by repository.

    With ``only_default_branch`` each repository contributes at most its
    default branch; otherwise every listed branch. The two modes are never
    combined. Repositories and branch names are reported as they are
    discovered, before their tips are resolved.
    """

    def __init__(
        self,
        source: HistorySource,
        reporter: HistoryReporter,
        *,
        only_default_branch: bool = False,
    ) -> None:
        self._source = source
        self._reporter = reporter
        self._only_default = only_default_branch

    def branch_tips(self) -> Iterator[tuple[Repository, Branch]]:
        """Yield ``(repository, branch)`` pairs in enumeration order."""
        for repository in self._source.list_repositories():
            self._reporter.repository(repository)
            for branch_name in self._branch_names(repository):
                branch = self._source.get_branch(repository.repository_name, branch_name)
                yield repository, branch

    def _branch_names(self, repository: Repository) -> Iterator[str]:
        name = repository.repository_name
        if self._only_default:
            default = self._source.get_default_branch(name)
            self._reporter.default_branch(default)
            if default is None:
                logger.info("Repository %s has no default branch", name)
                return
            yield default
            return

        for branch_name in self._source.list_branches(name):
            self._reporter.branch(branch_name)
            yield branch_name
