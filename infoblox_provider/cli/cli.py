#!/usr/bin/env python3
"""
Main CLI entry point using Typer.
"""

import sys

import typer

from infoblox_provider.cli.commands import container

app = typer.Typer(
    name="infoblox-nc",
    help="Infoblox network container provisioning tool",
    add_completion=False,
)

app.add_typer(container.app, name="container", help="Network container management commands")


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except KeyboardInterrupt:
        typer.echo("\nOperation cancelled by user", err=True)
        return 130
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
