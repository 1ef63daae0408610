"""Entry point for the integration health sample app."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from healthcheck.config import settings
from healthcheck.health.loader import load_integration_defs

console = Console()
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)


def run_server() -> None:
    """Start the FastAPI server."""
    console.print(Panel("Starting Integration Health Server", style="bold green"))
    uvicorn.run(
        "healthcheck.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )


def show_integrations(path: str | None) -> None:
    """Print the integrations declared in the YAML file."""
    file_path = Path(path) if path else (Path(settings.integrations_file) if settings.integrations_file else None)
    defs = load_integration_defs(file_path)
    if not defs:
        console.print("[yellow]No integrations declared[/yellow]")
        return

    table = Table(title="Integrations")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Optional")
    table.add_column("Fail at")
    table.add_column("Warn at")
    table.add_column("Window (min)")
    for d in defs:
        table.add_row(
            d.name,
            d.kind,
            "yes" if d.optional else "no",
            str(d.config.error_per_interval_to_fail_state),
            str(d.config.error_per_interval_to_warn_state),
            str(d.config.error_minute_interval),
        )
    console.print(table)


def main() -> None:
    parser = argparse.ArgumentParser(description="Integration Health Check")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Start the API server")

    list_parser = sub.add_parser("integrations", help="List declared integrations")
    list_parser.add_argument("--file", help="Path to integrations.yaml")

    args = parser.parse_args()

    if args.command == "serve":
        run_server()
    elif args.command == "integrations":
        show_integrations(args.file)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
