"""
Native Click implementation of the validate command.

Usage: digestkit validate DIGEST...
"""

from __future__ import annotations

import click

from ...core.digest import Digest
from ...core.exceptions import DigestError
from ..context import DigestContext


@click.command("validate")
@click.argument("digests", nargs=-1, required=True)
@click.pass_obj
def validate(ctx: DigestContext, digests: tuple[str, ...]) -> None:
    """Check that each DIGEST is well formed and uses a known algorithm.

    Exits with status 1 if any digest is invalid.
    """
    failed = 0
    for value in digests:
        try:
            Digest.parse(value, ctx.registry)
        except DigestError as e:
            failed += 1
            click.echo(f"{value}: {e.message}")
        else:
            click.echo(f"{value}: ok")

    if failed:
        raise SystemExit(1)
