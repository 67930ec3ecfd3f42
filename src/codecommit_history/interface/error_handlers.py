"""Fatal error boundary: every failure ends the run with exit status 1.

Domain errors are expected failures and are logged at warning level; anything
else is logged with its traceback. In both cases the message is printed in red
to standard output, after whatever trace was already printed.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import typer

from codecommit_history.domain.exceptions import CommitHistoryError
from codecommit_history.interface.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


@contextmanager
def exit_on_error(reporter: ConsoleReporter) -> Iterator[None]:
    """Turn any exception raised in the block into ``typer.Exit(1)``."""
    try:
        yield
    except typer.Exit:
        raise
    except CommitHistoryError as exc:
        logger.warning(
            "%s (retryable=%s): %s", type(exc).__name__, exc.retryable, exc
        )
        reporter.error(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc
    except Exception as exc:
        logger.exception("Unhandled exception")
        reporter.error(str(exc) or type(exc).__name__)
        raise typer.Exit(code=EXIT_FAILURE) from exc
