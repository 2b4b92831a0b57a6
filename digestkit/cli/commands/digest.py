"""
Native Click implementation of the digest command.

Usage: digestkit digest [--algorithm NAME] [FILE...]
"""

from __future__ import annotations

import click

from ...core.algorithm import Algorithm
from ...core.exceptions import DigestError
from ..context import DigestContext
from ..params import ALGORITHM


@click.command("digest")
@click.option(
    "-a",
    "--algorithm",
    type=ALGORITHM,
    default=None,
    help="Algorithm to use (default: digest.algorithm from config, sha256).",
)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_obj
def digest(ctx: DigestContext, algorithm: Algorithm | None, files: tuple[str, ...]) -> None:
    """Print the digest of each FILE (or of stdin).

    \b
    Examples:

        digestkit digest model.bin

        digestkit digest -a sha512 a.txt b.txt

        cat data.tar | digestkit digest
    """
    if algorithm is None:
        try:
            algorithm = Algorithm.from_name(ctx.settings.digest.algorithm, ctx.registry)
        except DigestError as e:
            raise click.ClickException(f"Configured algorithm: {e}") from e

    for path in files or ("-",):
        if path == "-":
            with click.open_file("-", "rb") as stream:
                result = algorithm.from_reader(stream, ctx.registry, ctx.chunk_size)
        else:
            try:
                result = algorithm.from_path(path, ctx.registry, ctx.chunk_size)
            except OSError as e:
                raise click.ClickException(f"Cannot read {path}: {e.strerror}") from e
        click.echo(f"{result}  {path}")
