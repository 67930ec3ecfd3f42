"""Report-history use cases: the entry points for the business logic.

They depend only on the ports; the CLI injects the boto3 and GitPython
adapters and the console reporter at runtime.
"""

from __future__ import annotations

import logging

from codecommit_history.domain.ports.commit_log import CommitLog
from codecommit_history.domain.ports.history_reporter import HistoryReporter
from codecommit_history.domain.ports.history_source import HistorySource
from codecommit_history.services.branch_enumerator import BranchEnumerator
from codecommit_history.services.commit_walker import CommitHistoryWalker
from codecommit_history.services.log_walker import LocalLogWalker

logger = logging.getLogger(__name__)


class ReportHistoryUseCase:
    """Prints every repository, branch and reachable commit of an account.

    Parameters
    ----------
    source:
        Adapter for the hosting service API.
    reporter:
        Sink that renders each visited entity.
    only_default_branch:
        Walk only each repository's default branch instead of all branches.
    deduplicate:
        Print each commit at most once per branch walk.
    """

    def __init__(
        self,
        source: HistorySource,
        reporter: HistoryReporter,
        *,
        only_default_branch: bool = False,
        deduplicate: bool = False,
    ) -> None:
        self._reporter = reporter
        self._enumerator = BranchEnumerator(
            source, reporter, only_default_branch=only_default_branch
        )
        self._walker = CommitHistoryWalker(source, deduplicate=deduplicate)

    def execute(self) -> None:
        """Run the walk; the first error aborts it."""
        branches = 0
        for repository, branch in self._enumerator.branch_tips():
            branches += 1
            logger.info(
                "Walking %s@%s from %s",
                repository.repository_name,
                branch.branch_name,
                branch.commit_id,
            )
            self._reporter.branch_tip(branch)
            for commit in self._walker.walk(repository.repository_name, branch.commit_id):
                self._reporter.commit(commit)
        logger.info("Finished walking %d branch(es)", branches)


class ReportLocalLogUseCase:
    """Prints the commit log of one cloned repository from HEAD."""

    def __init__(self, commit_log: CommitLog, reporter: HistoryReporter) -> None:
        self._walker = LocalLogWalker(commit_log)
        self._reporter = reporter

    def execute(self) -> None:
        for commit in self._walker.walk():
            self._reporter.log_entry(commit)
