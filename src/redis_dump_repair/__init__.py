"""Redis dump repair.

Re-tokenizes dumps written by the redis-dump NPM package and re-emits them with
unambiguous escaping and fixed-width command names, so they can be replayed.

Progressive API Disclosure:
- Level 1: Simple functions - repair(), repair_bytes(), repair_file(), tokenize()
- Level 2: Components - DumpTokenizer and DumpRepairer with RepairConfig
"""

__version__ = "0.1.0"
__author__ = "Redis Dump Repair Team"

from .api import repair, repair_bytes, repair_file, tokenize
from .repair import DumpRepairer
from .shared import (
    DumpRepairError,
    RepairConfig,
    RepairMetrics,
    RepairResult,
    TokenizationError,
)
from .tokenization import DumpTokenizer, Token, TokenKind

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "repair",
    "repair_bytes",
    "repair_file",
    "tokenize",

    # Level 2: Components
    "DumpRepairer",
    "DumpTokenizer",
    "Token",
    "TokenKind",

    # Configuration, results and errors
    "RepairConfig",
    "RepairMetrics",
    "RepairResult",
    "DumpRepairError",
    "TokenizationError",
]
