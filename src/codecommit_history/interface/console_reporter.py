"""Console reporter: renders the history trace to standard output with rich."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from codecommit_history.domain.entities import Branch, Commit, Repository

_BRANCH_INDENT = " " * 3
_TIP_INDENT = " " * 7
_COMMIT_INDENT = " " * 9
_AUTHOR_INDENT = " " * 11
_MESSAGE_INDENT = " " * 17


class ConsoleReporter:
    """Concrete HistoryReporter printing one block per visited entity.

    Text is printed without markup parsing or wrapping so commit messages
    appear verbatim.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def repository(self, repository: Repository) -> None:
        self._line(
            f"repository ID: {repository.repository_id}, "
            f"repository Name: {repository.repository_name} "
        )

    def default_branch(self, branch_name: str | None) -> None:
        self._line(f"{_BRANCH_INDENT}-- default branch: {branch_name}")

    def branch(self, branch_name: str) -> None:
        self._line(f"{_BRANCH_INDENT}--branch: {branch_name}")

    def branch_tip(self, branch: Branch) -> None:
        self._line(f"{_TIP_INDENT}--LastCommitID: {branch.commit_id}")
        self._line(f"{_TIP_INDENT}--Commit History:")
        self._line("")

    def commit(self, commit: Commit) -> None:
        header = Text(_COMMIT_INDENT)
        title = f"Commit: {commit.commit_id}"
        if commit.additional_data:
            title = f"{title} {commit.additional_data}"
        header.append(title, style="red")
        self._print(header)
        self._line(f"{_AUTHOR_INDENT}Author: {commit.author.name}, Date: {commit.author.date}")
        self._line("")
        self._line(f"{_MESSAGE_INDENT}{commit.message}")
        self._line("")

    def log_entry(self, commit: Commit) -> None:
        """Print *commit* the way ``git log`` does."""
        author = commit.author
        self._print(Text(f"commit {commit.commit_id}", style="yellow"))
        self._line(f"Author: {author.name} <{author.email}>")
        self._line(f"Date:   {author.date}")
        self._line("")
        for line in commit.message.rstrip("\n").split("\n"):
            self._line(f"    {line}")
        self._line("")

    def error(self, message: str) -> None:
        self._print(Text(f"error: {message}", style="bold red"))

    def _line(self, text: str) -> None:
        self._print(Text(text))

    def _print(self, text: Text) -> None:
        self._console.print(text, soft_wrap=True)
