"""
Native Click implementation of the algorithms command.

Usage: digestkit algorithms
"""

from __future__ import annotations

import click

from ..context import DigestContext


@click.command("algorithms")
@click.pass_obj
def algorithms(ctx: DigestContext) -> None:
    """List registered algorithms and their encoded lengths."""
    default = ctx.settings.digest.algorithm
    for name in ctx.registry.available_algorithms:
        entry = ctx.registry.lookup(name)
        if entry is None:
            continue
        length = str(entry.encoded_length) if entry.encoded_length else "variable"
        marker = " (default)" if name == default else ""
        click.echo(f"{name:<12} {length}{marker}")
