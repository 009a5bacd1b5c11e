"""Planning CLI commands - plan, dirs, disks, service-name."""
import json
from enum import Enum
from typing import Any, Dict, List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rtplan.cli_support import (
    find_config,
    handle_cli_error,
    print_info,
    print_success,
    setup_logging,
)
from rtplan.config.loader import ConfigLoader
from rtplan.core.classifier import classify_disks, get_id_dev_link_name
from rtplan.core.directories import get_rtlfs_devices
from rtplan.core.naming import create_qualified_headless_service_name
from rtplan.core.planner import LayoutPlanner
from rtplan.models.config import ConfigValidationError

# Module-level console instance (will be set by register function)
console: Console = Console()


class OutputFormat(str, Enum):
    TABLE = "table"
    YAML = "yaml"
    JSON = "json"


def register_plan_commands(app: typer.Typer, shared_console: Console) -> None:
    """Attach planning commands to the root CLI."""
    global console
    console = shared_console

    app.command(name="plan")(plan)
    app.command(name="dirs")(dirs)
    app.command(name="disks")(disks)
    app.command(name="service-name")(service_name)


def _load(config: Optional[str], verbose: bool) -> ConfigLoader:
    setup_logging(verbose)
    loader = ConfigLoader(find_config(config))
    try:
        loader.load()
    except (FileNotFoundError, ConfigValidationError) as e:
        handle_cli_error(e, console, verbose)
    return loader


def _emit(documents: List[Dict[str, Any]], fmt: OutputFormat, key: str) -> None:
    """Print wire documents as YAML or JSON."""
    if fmt == OutputFormat.JSON:
        typer.echo(json.dumps({key: documents}, indent=2))
    else:
        typer.echo(yaml.safe_dump({key: documents}, sort_keys=False), nl=False)


def plan(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Inventory file (YAML)"),
    fmt: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", "-f", help="Output format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Plan RT devices for the disks in the inventory."""
    loader = _load(config, verbose)

    try:
        planner = LayoutPlanner(loader.get_store_config())
        devices = planner.plan(loader.get_disks())
    except ConfigValidationError as e:
        handle_cli_error(e, console, verbose)

    if fmt != OutputFormat.TABLE:
        _emit([d.to_dict() for d in devices], fmt, "rtDevices")
        return

    if not devices:
        print_info(console, "No disks discovered, nothing to plan")
        return

    table = Table(title=f"RT devices ({planner.policy.value})", show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Device")
    table.add_column("Journal")
    table.add_column("Metadata")
    table.add_column("bcache", justify="right")
    table.add_column("Writearound", justify="right")

    for device in devices:
        table.add_row(
            device.name or "[dim]-[/dim]",
            device.device,
            device.journal or "",
            device.metadata or "",
            "" if device.bcache is None else str(device.bcache),
            "" if device.bcache_writearound is None else str(device.bcache_writearound),
        )

    console.print(table)
    print_success(console, f"{len(devices)} device(s) planned")


def dirs(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Inventory file (YAML)"),
    fmt: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", "-f", help="Output format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Plan directory-backed (rtlfs) devices."""
    loader = _load(config, verbose)
    devices = get_rtlfs_devices(loader.get_directories(), loader.get_store_config())

    if fmt != OutputFormat.TABLE:
        _emit([d.to_dict() for d in devices], fmt, "rtlfsDevices")
        return

    if not devices:
        print_info(console, "No directories configured")
        return

    table = Table(title="Directory devices", show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Path")
    table.add_column("Max size", justify="right")

    for device in devices:
        table.add_row(device.name, device.path, str(device.maxsize) if device.maxsize else "-")

    console.print(table)
    print_success(console, f"{len(devices)} directory device(s) planned")


def disks(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Inventory file (YAML)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show which discovered disks are eligible and their media type."""
    loader = _load(config, verbose)
    classified = classify_disks(loader.get_disks())

    table = Table(title="Discovered disks", show_header=True, header_style="bold cyan")
    table.add_column("Disk")
    table.add_column("By-id name")
    table.add_column("Model")
    table.add_column("Media")
    table.add_column("Size", justify="right")
    table.add_column("Status")

    for disk in loader.get_disks():
        status = "[green]eligible[/green]" if disk.is_eligible else "[yellow]in use[/yellow]"
        table.add_row(
            disk.name,
            get_id_dev_link_name(disk.dev_links) or "[dim]-[/dim]",
            escape(disk.model) or "[dim]-[/dim]",
            disk.media,
            disk.size_human,
            status,
        )

    console.print(table)
    console.print(
        f"SSD: {len(classified.ssds)}  HDD: {len(classified.hdds)}  "
        f"excluded: {len(classified.excluded)}"
    )


def service_name(
    replica: int = typer.Argument(..., help="Target replica number"),
    namespace: str = typer.Argument(..., help="Cluster namespace"),
):
    """Print the qualified headless service name for a target replica."""
    typer.echo(create_qualified_headless_service_name(replica, namespace))
