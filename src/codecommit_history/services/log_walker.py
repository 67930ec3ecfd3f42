"""Local-clone linear walker: the commit log from HEAD, as the library orders it."""

from __future__ import annotations

import logging
from typing import Iterator

from codecommit_history.domain.entities import Commit
from codecommit_history.domain.ports.commit_log import CommitLog

logger = logging.getLogger(__name__)


class LocalLogWalker:
    """Iterates a cloned repository's log starting at HEAD.

    No parent recursion happens here; order and termination belong to the
    log iterator, and every commit it produces is yielded once, unfiltered.
    """

    def __init__(self, commit_log: CommitLog) -> None:
        self._log = commit_log

    def walk(self) -> Iterator[Commit]:
        head = self._log.head()
        logger.info("Reading log from HEAD %s", head)
        yield from self._log.log(head)
