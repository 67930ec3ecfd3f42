"""GitPython adapter: implements the CommitLog port over a throwaway clone."""

from __future__ import annotations

import logging
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Iterator

from git import GitCommandError, Repo
from git.objects.commit import Commit as GitCommit
from git.objects.util import altz_to_utctz_str

from codecommit_history.domain.entities import Commit, Person
from codecommit_history.domain.exceptions import CloneError, EmptyRepositoryError
from codecommit_history.domain.value_objects import CloneUrl

logger = logging.getLogger(__name__)

# same layout as `git log`: "Mon Jan 02 15:04:05 2006 -0700"
_GIT_DATE_FORMAT = "%a %b %d %H:%M:%S %Y"


class GitCloneAdapter:
    """Concrete CommitLog backed by a bare clone in a temporary directory.

    Use as a context manager: the clone is made on enter and removed on exit.

    Parameters
    ----------
    url:
        Repository to clone.
    username, password:
        Basic-auth credentials for HTTP(S) remotes. Empty values are passed
        through and left for the remote to reject.
    """

    def __init__(self, url: CloneUrl, username: str = "", password: str = "") -> None:
        self._url = url
        self._username = username
        self._password = password
        self._workdir: Path | None = None
        self._repo: Repo | None = None

    def __enter__(self) -> GitCloneAdapter:
        self._workdir = Path(tempfile.mkdtemp(prefix="codecommit-history-"))
        target = self._workdir / self._url.repository_name
        logger.info("Cloning %s", self._url)
        try:
            self._repo = Repo.clone_from(
                self._url.with_credentials(self._username, self._password),
                target,
                bare=True,
            )
        except GitCommandError as exc:
            self._cleanup()
            # stderr may echo the authenticated URL
            raise CloneError(
                f"Failed to clone {self._url}: git exited with status {exc.status}"
            ) from None
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._cleanup()

    def head(self) -> str:
        repo = self._require_repo()
        try:
            return repo.head.commit.hexsha
        except ValueError as exc:
            raise EmptyRepositoryError(f"Repository {self._url} has no commits.") from exc

    def log(self, start: str) -> Iterator[Commit]:
        repo = self._require_repo()
        try:
            for git_commit in repo.iter_commits(start):
                yield _to_commit(git_commit)
        except GitCommandError as exc:
            raise CloneError(f"Failed to read log of {self._url} from {start}: {exc}") from exc

    def _require_repo(self) -> Repo:
        if self._repo is None:
            raise CloneError("Repository is not cloned; use GitCloneAdapter as a context manager.")
        return self._repo

    def _cleanup(self) -> None:
        if self._repo is not None:
            self._repo.close()
            self._repo = None
        if self._workdir is not None:
            shutil.rmtree(self._workdir, ignore_errors=True)
            self._workdir = None


def _to_commit(git_commit: GitCommit) -> Commit:
    author = git_commit.author
    committer = git_commit.committer
    return Commit(
        commit_id=git_commit.hexsha,
        author=Person(
            name=author.name or "",
            email=author.email or "",
            date=_format_date(git_commit.authored_datetime, git_commit.author_tz_offset),
        ),
        message=_message(git_commit),
        parents=tuple(parent.hexsha for parent in git_commit.parents),
        tree_id=git_commit.tree.hexsha,
        committer=Person(
            name=committer.name or "",
            email=committer.email or "",
            date=_format_date(git_commit.committed_datetime, git_commit.committer_tz_offset),
        ),
    )


def _message(git_commit: GitCommit) -> str:
    message = git_commit.message
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    return message


def _format_date(moment: datetime, tz_offset: int) -> str:
    return f"{moment.strftime(_GIT_DATE_FORMAT)} {altz_to_utctz_str(tz_offset)}"
