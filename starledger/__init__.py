"""starledger

A single-node star registry on a hash-linked chain.

Every block remembers the one before it. Every star remembers who claimed it.
"""

from __future__ import annotations

__all__ = [
    "__version__",
    "GENESIS_DATA",
    "GENESIS_PREVIOUS_HASH",
    "CHALLENGE_SUFFIX",
    "FRESHNESS_WINDOW_SECONDS",
]

__version__ = "1.0.0"

# Body marker of block 0.
GENESIS_DATA = "Genesis Block"

# Genesis has no predecessor; the empty string stands in for its link.
GENESIS_PREVIOUS_HASH = ""

CHALLENGE_SUFFIX = "starRegistry"

# Five minutes from challenge to submission.
FRESHNESS_WINDOW_SECONDS = 300
