"""starledger.core

Core primitives: blocks, the chain store, validation, and owner queries.

If a module needs to exist, it should probably depend only on this package.
"""

from .block import Block, compute_block_hash
from .chain import ChainStore
from .config import Config
from .exceptions import StarLedgerError
from .query import OwnerScan, scan_owner
from .time import unix_now
from .validation import BrokenLinkError, TamperedBlockError, ValidationError, validate_blocks

__all__ = [
    "Block",
    "BrokenLinkError",
    "ChainStore",
    "Config",
    "OwnerScan",
    "StarLedgerError",
    "TamperedBlockError",
    "ValidationError",
    "compute_block_hash",
    "scan_owner",
    "unix_now",
    "validate_blocks",
]
