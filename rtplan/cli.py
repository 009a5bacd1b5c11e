#!/usr/bin/env python3
"""rtplan CLI - device layout planning for storage target nodes."""

import typer
from rich.console import Console

from rtplan.cli_plan_commands import register_plan_commands

app = typer.Typer(
    name="rtplan",
    help="""rtplan - Device layout planning for storage target nodes

One inventory file. Disks + store config in, device list out.

Quick start:
  rtplan disks                # Which disks are eligible
  rtplan plan                 # Planned RT devices
  rtplan plan --format yaml   # Wire format for the target config
  rtplan dirs                 # Directory-backed devices
""",
    add_completion=False,
)

console = Console()

register_plan_commands(app, console)

if __name__ == "__main__":
    app()
