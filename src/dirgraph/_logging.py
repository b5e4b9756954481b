"""Opt-in logging setup for scripts using dirgraph."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> None:
    """Route log records to a Rich handler on stderr.

    The library itself only emits records through ``logging.getLogger(__name__)``;
    call this from an application or script to see them.

    Args:
        verbose: Show debug records and source paths.
        console: Console to write to. Defaults to a stderr console.

    """
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console or Console(stderr=True),
                show_time=False,
                show_path=verbose,
            ),
        ],
        force=True,
    )
