from __future__ import annotations
import logging
import sys
from pydantic import ValidationError
from codecommit_history.infrastructure.config import get_settings
from codecommit_history.interface import dependencies
from codecommit_history.interface.cli import app

def main() -> None:
    """Configure logging and run the CLI."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        dependencies.get_reporter().error(f"invalid configuration: {exc}")
        raise SystemExit(1) from exc
    # stdout carries the history trace only
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        stream=sys.stderr,
        force=True,
    )
    app()


if __name__ == "__main__":
    main()
