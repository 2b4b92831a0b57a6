"""
Native Click implementation of the verify command.

Usage: digestkit verify DIGEST [FILE]
"""

from __future__ import annotations

import shutil

import click

from ...core.digest import Digest
from ..context import DigestContext
from ..params import DIGEST


@click.command("verify")
@click.argument("expected", type=DIGEST)
@click.argument("file", required=False, default="-", type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_obj
def verify(ctx: DigestContext, expected: Digest, file: str) -> None:
    """Check that FILE (or stdin) matches EXPECTED.

    Exits with status 1 when the content does not match.

    \b
    Examples:

        digestkit verify sha256:2cf24d... hello.txt
    """
    verifier = expected.verifier(ctx.registry)

    try:
        with click.open_file(file, "rb") as f:
            shutil.copyfileobj(f, verifier, ctx.chunk_size)
    except OSError as e:
        raise click.ClickException(f"Cannot read {file}: {e.strerror}") from e

    if verifier.verified():
        click.echo(f"{file}: OK")
        return

    click.echo(f"{file}: FAILED")
    raise SystemExit(1)
