"""Typer CLI application."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.logging import RichHandler

from termcomp.config import CompositorConfig
from termcomp.core.screen import ScreenError

logger = logging.getLogger(__name__)


def configure_logging(config: CompositorConfig) -> None:
    """
    Send log records to the configured file, or to stderr through rich.

    The file handler replaces the console one: stderr is the terminal the
    compositor draws on.
    """
    handler: logging.Handler
    if config.log_file is not None:
        handler = logging.FileHandler(config.log_file)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    logging.basicConfig(level=config.log_level, handlers=[handler], force=True)


@contextmanager
def console_logging_detached() -> Iterator[None]:
    """Remove RichHandlers from the root logger for the duration of the block."""
    root = logging.getLogger()
    detached = [h for h in root.handlers if isinstance(h, RichHandler)]
    for handler in detached:
        root.removeHandler(handler)
    try:
        yield
    finally:
        for handler in detached:
            root.addHandler(handler)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termcomp",
        help="Terminal widget compositor demo.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def run() -> None:
        """Show the demo screen. j/k move, g/G jump, q quits."""
        from termcomp.demo import run_demo

        try:
            config = CompositorConfig.from_env()
        except ValueError as e:
            console.print(f"[red]Configuration error:[/] {e}")
            raise typer.Exit(2)

        configure_logging(config)

        try:
            with console_logging_detached():
                run_demo(config)
        except ScreenError as e:
            logger.error("cannot start terminal: %s", e)
            console.print(f"[red]Cannot start terminal:[/] {e}")
            raise typer.Exit(1)
        except Exception:
            logger.exception("compositor crashed")
            raise

    return app
