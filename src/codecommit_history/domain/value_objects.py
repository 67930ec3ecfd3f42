"""Value objects: self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote, urlsplit, urlunsplit

from codecommit_history.domain.exceptions import ConfigurationError

_CODECOMMIT_HOST = "git-codecommit.{region}.amazonaws.com"
_REPOSITORY_NAME_RE = re.compile(r"^[A-Za-z0-9_.\-]{1,100}$")


@dataclass(frozen=True, slots=True)
class CloneUrl:
    """Validated HTTPS (or local path) URL of a repository to clone.

    Credentials are never stored on the object; :meth:`with_credentials`
    produces the authenticated string only when it is handed to git.
    """

    raw: str

    @classmethod
    def for_codecommit(cls, region: str, repository_name: str) -> CloneUrl:
        """Build the CodeCommit HTTPS clone URL for *repository_name*."""
        name = repository_name.strip()
        if not _REPOSITORY_NAME_RE.match(name):
            raise ConfigurationError(f"Invalid repository name: '{repository_name}'.")
        if not region:
            raise ConfigurationError("A region is required to build a clone URL.")
        host = _CODECOMMIT_HOST.format(region=region)
        return cls(raw=f"https://{host}/v1/repos/{name}")

    @classmethod
    def from_string(cls, url: str) -> CloneUrl:
        """Accept an explicit clone URL, rejecting embedded credentials."""
        url = url.strip()
        if not url:
            raise ConfigurationError("Clone URL must not be empty.")
        parts = urlsplit(url)
        if parts.username or parts.password:
            raise ConfigurationError(
                "Clone URL must not embed credentials; "
                "set GIT_USERNAME and GIT_ACCESS_TOKEN instead."
            )
        return cls(raw=url)

    @property
    def is_http(self) -> bool:
        return urlsplit(self.raw).scheme in ("http", "https")

    @property
    def repository_name(self) -> str:
        return urlsplit(self.raw).path.rstrip("/").rsplit("/", 1)[-1]

    def with_credentials(self, username: str, password: str) -> str:
        """Return the URL with basic-auth credentials for HTTP(S) remotes.

        Non-HTTP URLs (local paths, ssh) are returned unchanged.
        """
        if not self.is_http or not (username or password):
            return self.raw
        parts = urlsplit(self.raw)
        userinfo = f"{quote(username, safe='')}:{quote(password, safe='')}"
        return urlunsplit(parts._replace(netloc=f"{userinfo}@{parts.netloc}"))

    def __str__(self) -> str:
        return self.raw
