"""Domain exception hierarchy.

Adapters translate library errors (botocore, GitPython) into these; the
CLI error boundary turns any of them into a red message and exit status 1.
``retryable`` classifies an error without triggering any retry.
"""

from __future__ import annotations


class CommitHistoryError(Exception):
    """Base exception for the entire application."""

    retryable: bool = False


# ── Configuration ───────────────────────────────────────────────────────────


class ConfigurationError(CommitHistoryError):
    """Settings are missing or inconsistent for the requested operation."""


# ── Remote service errors ───────────────────────────────────────────────────


class RepositoryNotFoundError(CommitHistoryError):
    """The repository does not exist or is not visible to the caller."""


class BranchNotFoundError(CommitHistoryError):
    """The branch does not exist in the repository."""


class CommitNotFoundError(CommitHistoryError):
    """The commit id does not resolve in the repository."""


class AccessDeniedError(CommitHistoryError):
    """Credentials are missing, invalid, or lack permission."""


class ServiceError(CommitHistoryError):
    """Any other failure reported by the hosting service."""


class TransientServiceError(ServiceError):
    """Throttling, timeouts and connection failures."""

    retryable = True


class MalformedResponseError(CommitHistoryError):
    """A response lacked a field the caller depends on."""


# ── Local clone errors ──────────────────────────────────────────────────────


class CloneError(CommitHistoryError):
    """Cloning or reading the local copy of a repository failed."""


class EmptyRepositoryError(CommitHistoryError):
    """The repository exists but HEAD points at no commit."""
