"""Domain entities: read-only records fetched on demand, never persisted."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Repository:
    """A repository as listed by the hosting service."""

    repository_id: str
    repository_name: str


@dataclass(frozen=True, slots=True)
class Branch:
    """A branch reference and the commit it currently points to."""

    branch_name: str
    commit_id: str


@dataclass(frozen=True, slots=True)
class Person:
    """Author or committer identity attached to a commit."""

    name: str
    email: str = ""
    date: str = ""  # raw service string, e.g. "1484167798 -0800"


@dataclass(frozen=True, slots=True)
class Commit:
    """A single commit and the ids of its immediate parents.

    ``parents`` keeps the order returned by the backing store: an empty
    tuple marks a root commit, more than one entry a merge.
    """

    commit_id: str
    author: Person
    message: str
    parents: tuple[str, ...] = ()
    additional_data: str = ""
    tree_id: str = ""
    committer: Person | None = None

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1
