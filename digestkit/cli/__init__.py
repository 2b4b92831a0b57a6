"""
Click-based CLI for digestkit.

Usage:
    from digestkit.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import DigestContext

try:
    from importlib.metadata import version

    __version__ = version("digestkit")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """digestkit - content-addressable digest identifiers

    \b
    Commands:
        digestkit digest FILE          Compute a digest
        digestkit verify DIGEST FILE   Check content against a digest
        digestkit validate DIGEST      Check a digest string
        digestkit algorithms           List registered algorithms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = DigestContext.create(config_path=config_path)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DigestContext",
    "__version__",
    "cli",
    "register_commands",
]
