"""Shared utilities for rtplan CLI modules."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

# Default inventory search paths (ordered by proximity to current run)
CONFIG_PATHS = [
    "./rtplan.yml",
    str(Path.home() / ".rtplan" / "rtplan.yml"),
    "/etc/rtplan/rtplan.yml",
]


def find_config(config_path: Optional[str] = None) -> str:
    """Locate the active inventory file."""
    if config_path:
        return config_path

    if env_config := os.environ.get("RTPLAN_CONFIG"):
        return env_config

    for path in CONFIG_PATHS:
        if Path(path).exists():
            return path

    return "rtplan.yml"


def setup_logging(verbose: bool = False) -> None:
    """Apply runtime logging settings for a CLI command.

    Args:
        verbose: Enable debug logging (also enabled by RTPLAN_VERBOSE)
    """
    from rtplan.core.config import get_config
    from rtplan.core.logger import set_verbose, setup_file_logging

    config = get_config()
    verbose = verbose or config.verbose
    set_verbose(verbose)
    if config.file_logging:
        setup_file_logging(log_file=config.log_file, verbose=verbose)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {escape(str(e))}")
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    console.print(f"[green]{prefix}[/green] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    console.print(f"[cyan]{prefix}[/cyan] {message}")
