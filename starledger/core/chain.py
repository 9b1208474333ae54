"""starledger.core.chain

The chain store: an index-addressed list of sealed blocks (index == height).

Append-only. One writer at a time. An append that leaves the chain invalid
never happened.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from starledger import GENESIS_DATA, GENESIS_PREVIOUS_HASH
from starledger.core.block import Block
from starledger.core.exceptions import InvalidChainError
from starledger.core.time import Clock, unix_now
from starledger.core.validation import ValidationError, validate_blocks

logger = logging.getLogger(__name__)


class ChainStore:
    """In-memory hash-linked chain. Owns the add-block protocol."""

    def __init__(self, *, clock: Clock | None = None, genesis_data: str = GENESIS_DATA) -> None:
        self._clock: Clock = clock or unix_now
        self._chain: list[Block] = []
        self._lock = threading.RLock()
        self._initialize(genesis_data)

    def _initialize(self, genesis_data: str) -> None:
        with self._lock:
            if self.current_height() == -1:
                self.append_block({"data": genesis_data})

    def __len__(self) -> int:
        with self._lock:
            return len(self._chain)

    def current_height(self) -> int:
        with self._lock:
            return len(self._chain) - 1

    @property
    def tail(self) -> Block | None:
        with self._lock:
            return self._chain[-1] if self._chain else None

    def blocks(self) -> list[Block]:
        """Consistent snapshot of the chain in height order."""

        with self._lock:
            return list(self._chain)

    def append_block(self, payload: Any) -> Block:
        """Seal ``payload`` into a new block and append it.

        Height assignment, linking, sealing, and post-append validation run in one
        critical section. On any validation failure the block is discarded.

        Raises:
            InvalidChainError: if the chain does not validate after the append.
        """

        block = Block.from_payload(payload)
        with self._lock:
            height = len(self._chain)
            previous_hash = self._chain[-1].hash if self._chain else GENESIS_PREVIOUS_HASH
            block.seal(previous_hash, height, self._clock())

            self._chain.append(block)
            errors = validate_blocks(self._chain)
            if errors:
                self._chain.pop()
                logger.error(
                    "chain_invalid_after_append",
                    extra={"height": height, "errors": [e.message for e in errors]},
                )
                raise InvalidChainError("Invalid Chain. Cannot Add this Block.", errors)

        logger.info("block_appended", extra={"height": block.height, "hash": block.hash})
        return block

    def get_block_by_hash(self, block_hash: str) -> Block | None:
        for block in self.blocks():
            if block.hash == block_hash:
                return block
        return None

    def get_block_by_height(self, height: int) -> Block | None:
        with self._lock:
            if 0 <= height < len(self._chain):
                return self._chain[height]
        return None

    def validate_chain(self) -> list[ValidationError]:
        """Validate every block. Empty list means the chain is intact."""

        return validate_blocks(self.blocks())
