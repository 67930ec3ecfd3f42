"""Application configuration, loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from codecommit_history.domain.exceptions import ConfigurationError
from codecommit_history.domain.value_objects import CloneUrl

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or an optional ``.env`` file).

    Missing credentials stay empty strings and are passed through to the
    authentication layer, which rejects them if they are required.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    aws_region: str = "us-east-1"
    aws_access_key: str = ""
    aws_secret_access_key: SecretStr = SecretStr("")
    git_username: str = ""
    git_access_token: SecretStr = SecretStr("")
    clone_repository: str | None = None
    clone_url: str | None = None
    only_default_branch: bool = False
    use_local_clone: bool = False
    deduplicate_commits: bool = False
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    def resolve_clone_url(
        self, repository: str | None = None, url: str | None = None
    ) -> CloneUrl:
        """Pick the clone target: explicit URL, then repository name, then settings."""
        if url:
            return CloneUrl.from_string(url)
        if repository:
            return CloneUrl.for_codecommit(self.aws_region, repository)
        if self.clone_url:
            return CloneUrl.from_string(self.clone_url)
        if self.clone_repository:
            return CloneUrl.for_codecommit(self.aws_region, self.clone_repository)
        raise ConfigurationError(
            "No repository to clone. Set CLONE_REPOSITORY or CLONE_URL, "
            "or pass --repository / --url."
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
