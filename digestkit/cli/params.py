"""
Click parameter types for digestkit.
"""

from __future__ import annotations

from typing import Any

import click

from ..core.algorithm import Algorithm
from ..core.digest import Digest
from ..core.exceptions import DigestError


def _registry_from(ctx: click.Context | None):
    obj = ctx.find_root().obj if ctx is not None else None
    return getattr(obj, "registry", None)


class AlgorithmParamType(click.ParamType):
    """Accepts the name of a registered algorithm."""

    name = "algorithm"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Algorithm:
        if isinstance(value, Algorithm):
            return value
        try:
            return Algorithm.from_name(value, _registry_from(ctx))
        except DigestError as e:
            self.fail(f"{value!r}: {e.message}", param, ctx)


class DigestParamType(click.ParamType):
    """Accepts a digest string and validates it."""

    name = "digest"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Digest:
        if isinstance(value, Digest):
            return value
        try:
            return Digest.parse(value, _registry_from(ctx))
        except DigestError as e:
            self.fail(f"{value!r}: {e.message}", param, ctx)


ALGORITHM = AlgorithmParamType()
DIGEST = DigestParamType()
