"""
Text grammar for algorithm names and digest strings.

    algorithm := token (separator token)*
    token     := [a-z0-9]+
    separator := [.+_-]
    encoded   := [a-zA-Z0-9=_-]+
    digest    := algorithm ":" encoded
"""

from __future__ import annotations

import re

ALGORITHM_PATTERN = re.compile(r"[a-z0-9]+(?:[.+_-][a-z0-9]+)*")
ALGORITHM_PATTERN_ANCHORED = re.compile(rf"^{ALGORITHM_PATTERN.pattern}$")

ENCODED_PATTERN = re.compile(r"[a-zA-Z0-9=_-]+")

DIGEST_PATTERN = re.compile(rf"{ALGORITHM_PATTERN.pattern}:{ENCODED_PATTERN.pattern}")
DIGEST_PATTERN_ANCHORED = re.compile(rf"^{DIGEST_PATTERN.pattern}$")


def is_valid_algorithm_name(name: str) -> bool:
    """Check a name against the algorithm grammar (ASCII only)."""
    return name.isascii() and ALGORITHM_PATTERN_ANCHORED.fullmatch(name) is not None


def matches_digest_grammar(value: str) -> bool:
    """Check a full digest string against the generic grammar (ASCII only)."""
    return value.isascii() and DIGEST_PATTERN_ANCHORED.fullmatch(value) is not None
