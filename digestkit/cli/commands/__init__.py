"""
Native Click command implementations for digestkit.
"""

from .algorithms import algorithms
from .digest import digest
from .validate import validate
from .verify import verify

COMMANDS = [algorithms, digest, validate, verify]

__all__ = ["COMMANDS", "algorithms", "digest", "validate", "verify"]
