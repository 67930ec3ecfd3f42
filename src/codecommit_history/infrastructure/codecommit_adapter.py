"""AWS CodeCommit adapter: implements the HistorySource port with boto3."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import boto3
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    HTTPClientError,
    NoCredentialsError,
)

from codecommit_history.domain.entities import Branch, Commit, Person, Repository
from codecommit_history.domain.exceptions import (
    AccessDeniedError,
    BranchNotFoundError,
    CommitHistoryError,
    CommitNotFoundError,
    MalformedResponseError,
    RepositoryNotFoundError,
    ServiceError,
    TransientServiceError,
)
from codecommit_history.infrastructure.config import Settings

logger = logging.getLogger(__name__)

_NOT_FOUND: dict[str, type[CommitHistoryError]] = {
    "RepositoryDoesNotExistException": RepositoryNotFoundError,
    "BranchDoesNotExistException": BranchNotFoundError,
    "CommitDoesNotExistException": CommitNotFoundError,
    "CommitIdDoesNotExistException": CommitNotFoundError,
}

_ACCESS_DENIED = frozenset(
    {
        "AccessDeniedException",
        "UnrecognizedClientException",
        "InvalidSignatureException",
        "InvalidClientTokenId",
        "ExpiredTokenException",
        "EncryptionKeyAccessDeniedException",
    }
)

_TRANSIENT = frozenset(
    {
        "ThrottlingException",
        "TooManyRequestsException",
        "RequestLimitExceeded",
        "ServiceUnavailable",
        "ServiceUnavailableException",
        "InternalFailure",
        "RequestTimeout",
        "EncryptionKeyUnavailableException",
    }
)


def create_client(settings: Settings) -> Any:
    """Build a CodeCommit client from static credentials in *settings*."""
    return boto3.client(
        "codecommit",
        region_name=settings.aws_region,
        aws_access_key_id=settings.aws_access_key,
        aws_secret_access_key=settings.aws_secret_access_key.get_secret_value(),
    )


class CodeCommitAdapter:
    """Concrete HistorySource backed by the CodeCommit API."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> CodeCommitAdapter:
        return cls(create_client(settings))

    def list_repositories(self) -> Iterator[Repository]:
        """ListRepositories, sorted ascending by last-modified date."""
        paginator = self._client.get_paginator("list_repositories")
        with _service_call("list repositories"):
            for page in paginator.paginate(sortBy="lastModifiedDate", order="ascending"):
                for item in page.get("repositories", []):
                    yield Repository(
                        repository_id=_require(item, "repositoryId", "repository"),
                        repository_name=_require(item, "repositoryName", "repository"),
                    )

    def get_default_branch(self, repository_name: str) -> str | None:
        """GetRepository → repositoryMetadata.defaultBranch (absent for empty repos)."""
        with _service_call(f"get repository {repository_name}"):
            resp = self._client.get_repository(repositoryName=repository_name)
        metadata = _require(resp, "repositoryMetadata", "GetRepository response")
        return metadata.get("defaultBranch")

    def list_branches(self, repository_name: str) -> Iterator[str]:
        paginator = self._client.get_paginator("list_branches")
        with _service_call(f"list branches of {repository_name}"):
            for page in paginator.paginate(repositoryName=repository_name):
                yield from page.get("branches", [])

    def get_branch(self, repository_name: str, branch_name: str) -> Branch:
        with _service_call(f"get branch {repository_name}@{branch_name}"):
            resp = self._client.get_branch(
                repositoryName=repository_name, branchName=branch_name
            )
        info = _require(resp, "branch", "GetBranch response")
        return Branch(
            branch_name=info.get("branchName", branch_name),
            commit_id=_require(info, "commitId", f"branch {branch_name}"),
        )

    def get_commit(self, repository_name: str, commit_id: str) -> Commit:
        logger.debug("GetCommit %s in %s", commit_id, repository_name)
        with _service_call(f"get commit {commit_id} in {repository_name}"):
            resp = self._client.get_commit(
                repositoryName=repository_name, commitId=commit_id
            )
        data = _require(resp, "commit", "GetCommit response")
        author = _require(data, "author", f"commit {commit_id}")
        committer = data.get("committer")
        return Commit(
            commit_id=data.get("commitId", commit_id),
            author=_person(author),
            message=_require(data, "message", f"commit {commit_id}"),
            parents=tuple(data.get("parents", [])),
            additional_data=data.get("additionalData", ""),
            tree_id=data.get("treeId", ""),
            committer=_person(committer) if committer else None,
        )


def _person(data: dict[str, Any]) -> Person:
    return Person(
        name=_require(data, "name", "user info"),
        email=data.get("email", ""),
        date=_require(data, "date", "user info"),
    )


def _require(data: dict[str, Any], key: str, what: str) -> Any:
    """Return ``data[key]`` or raise if the service left it out."""
    value = data.get(key)
    if value is None:
        raise MalformedResponseError(f"Missing '{key}' in {what}.")
    return value


@contextmanager
def _service_call(operation: str) -> Iterator[None]:
    """Translate botocore errors raised inside the block into domain errors."""
    try:
        yield
    except ClientError as exc:
        raise _translate_client_error(operation, exc) from exc
    except NoCredentialsError as exc:
        raise AccessDeniedError(f"Failed to {operation}: {exc}") from exc
    except (BotoConnectionError, HTTPClientError) as exc:
        raise TransientServiceError(f"Failed to {operation}: {exc}") from exc
    except BotoCoreError as exc:
        raise ServiceError(f"Failed to {operation}: {exc}") from exc


def _translate_client_error(operation: str, exc: ClientError) -> CommitHistoryError:
    error = exc.response.get("Error", {})
    code = error.get("Code", "")
    message = f"Failed to {operation}: {code}: {error.get('Message', exc)}"

    if code in _NOT_FOUND:
        return _NOT_FOUND[code](message)
    if code in _ACCESS_DENIED:
        return AccessDeniedError(message)

    status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode", 0)
    if code in _TRANSIENT or status >= 500:
        return TransientServiceError(message)
    return ServiceError(message)
