"""Command-line interface: thin commands that delegate to the use cases."""

from __future__ import annotations

from typing import Optional

import typer

from codecommit_history.infrastructure.config import Settings, get_settings
from codecommit_history.interface import dependencies
from codecommit_history.interface.console_reporter import ConsoleReporter
from codecommit_history.interface.error_handlers import exit_on_error
from codecommit_history.services.report_history import (
    ReportHistoryUseCase,
    ReportLocalLogUseCase,
)

app = typer.Typer(
    name="codecommit-history",
    help="Print repositories, branches and commit histories of a CodeCommit account.",
    add_completion=False,
)


def _run_local_log(
    settings: Settings,
    reporter: ConsoleReporter,
    repository: str | None = None,
    url: str | None = None,
) -> None:
    clone_url = settings.resolve_clone_url(repository=repository, url=url)
    with dependencies.get_clone(settings, clone_url) as clone:
        ReportLocalLogUseCase(clone, reporter).execute()


@app.command()
def walk(
    default_branch_only: Optional[bool] = typer.Option(
        None,
        "--default-branch-only/--all-branches",
        help="Walk only each repository's default branch. [env: ONLY_DEFAULT_BRANCH]",
    ),
    dedupe: Optional[bool] = typer.Option(
        None,
        "--dedupe/--no-dedupe",
        help="Print each commit once per branch. [env: DEDUPLICATE_COMMITS]",
    ),
    local_log: Optional[bool] = typer.Option(
        None,
        "--local-log/--no-local-log",
        help="Print the cloned repository's log first. [env: USE_LOCAL_CLONE]",
    ),
) -> None:
    """Walk every repository and branch, printing all reachable commits."""
    reporter = dependencies.get_reporter()
    with exit_on_error(reporter):
        settings = get_settings()
        if local_log is None:
            local_log = settings.use_local_clone
        if local_log:
            _run_local_log(settings, reporter)

        use_case = ReportHistoryUseCase(
            dependencies.get_history_source(settings),
            reporter,
            only_default_branch=(
                default_branch_only
                if default_branch_only is not None
                else settings.only_default_branch
            ),
            deduplicate=dedupe if dedupe is not None else settings.deduplicate_commits,
        )
        use_case.execute()


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Without a command, behave like `walk` with settings from the environment."""
    if ctx.invoked_subcommand is None:
        walk(default_branch_only=None, dedupe=None, local_log=None)


@app.command()
def log(
    repository: Optional[str] = typer.Option(
        None, "--repository", "-r", help="CodeCommit repository name. [env: CLONE_REPOSITORY]"
    ),
    url: Optional[str] = typer.Option(
        None, "--url", help="Explicit clone URL; overrides --repository. [env: CLONE_URL]"
    ),
) -> None:
    """Clone one repository and print its commit log from HEAD."""
    reporter = dependencies.get_reporter()
    with exit_on_error(reporter):
        _run_local_log(get_settings(), reporter, repository=repository, url=url)
