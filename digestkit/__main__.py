"""
Entry point for the `digestkit` command-line interface.

This module provides the main() entry point that delegates to the Click CLI.
"""

import sys


def main():
    """Main entry point for the digestkit CLI."""
    import click

    from .cli import cli
    from .core.exceptions import ContractViolationError

    try:
        cli()
    except ContractViolationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
