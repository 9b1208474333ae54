"""starledger.core.block

A block is a sealed envelope around an opaque body.

Sealing fixes the link fields and commits to them with a hash. After that the
only legitimate operation on a block is to re-derive its hash and compare.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

from starledger import GENESIS_PREVIOUS_HASH
from starledger.core.encoding import decode_body, encode_body
from starledger.core.exceptions import BlockAlreadySealedError, DecodeError


def compute_block_hash(*, previous_hash: str, height: int, timestamp: int, body: str) -> str:
    """Compute the canonical SHA-256 block hash.

    Hash = sha256(previous_hash | height | timestamp | body)

    Field order is fixed. The hash field itself is never an input.
    """

    header_parts = [
        previous_hash or GENESIS_PREVIOUS_HASH,
        str(int(height)),
        str(int(timestamp)),
        body,
    ]
    data = "|".join(header_parts)
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


@dataclass(slots=True)
class Block:
    body: str
    height: int = -1
    timestamp: int = 0
    previous_hash: str = GENESIS_PREVIOUS_HASH
    hash: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> Block:
        """Build an unsealed block whose body encodes ``payload``."""

        return cls(body=encode_body(payload))

    @property
    def is_sealed(self) -> bool:
        return bool(self.hash)

    @property
    def is_genesis(self) -> bool:
        return self.height == 0

    def seal(self, previous_hash: str, height: int, timestamp: int) -> str:
        """Set link fields and compute the hash. Exactly once per block."""

        if self.is_sealed:
            raise BlockAlreadySealedError(f"block #{self.height} is already sealed")
        if height < 0:
            raise ValueError(f"height must be non-negative, got {height}")

        self.previous_hash = previous_hash
        self.height = int(height)
        self.timestamp = int(timestamp)
        self.hash = self.recompute_hash()
        return self.hash

    def recompute_hash(self) -> str:
        """Derive the hash from the current header and body. Pure."""

        return compute_block_hash(
            previous_hash=self.previous_hash,
            height=self.height,
            timestamp=self.timestamp,
            body=self.body,
        )

    def decode_body(self) -> Any:
        try:
            return decode_body(self.body)
        except DecodeError as e:
            raise DecodeError(f"block #{self.height}: {e}", height=self.height) from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "height": self.height,
            "body": self.body,
            "time": self.timestamp,
            "previous_block_hash": self.previous_hash,
        }
