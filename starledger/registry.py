"""starledger.registry

The star registry: ownership proof in front, hash chain behind.

Control flow for a claim:
- ``issue_challenge(address)`` → the wallet signs the returned message
- ``submit_star(address, message, signature, star)`` → freshness check →
  signature check → ``ChainStore.append_block({"owner": address, "star": star})``

This is the surface the HTTP layer and the CLI talk to. Nothing here is global:
every registry owns its own chain.
"""

from __future__ import annotations

import logging
from typing import Any

from starledger import CHALLENGE_SUFFIX, FRESHNESS_WINDOW_SECONDS, GENESIS_DATA
from starledger.core.block import Block
from starledger.core.chain import ChainStore
from starledger.core.config import Config
from starledger.core.exceptions import ChallengeExpiredError, SignatureInvalidError
from starledger.core.query import scan_owner
from starledger.core.time import Clock, elapsed_seconds, unix_now
from starledger.core.validation import ValidationError
from starledger.ownership.challenge import issue_challenge, parse_challenge
from starledger.ownership.signatures import EthMessageVerifier, SignatureVerifier, verifier_for_scheme

logger = logging.getLogger(__name__)

EXPIRED_MESSAGE = "Please submit a star within 5 minutes of the signature ownership verification."
SIGNATURE_INVALID_MESSAGE = "The Message is not Verified"


class StarRegistry:
    def __init__(
        self,
        *,
        chain: ChainStore | None = None,
        verifier: SignatureVerifier | None = None,
        clock: Clock | None = None,
        freshness_window_seconds: int = FRESHNESS_WINDOW_SECONDS,
        challenge_suffix: str = CHALLENGE_SUFFIX,
        genesis_data: str = GENESIS_DATA,
    ) -> None:
        self._clock: Clock = clock or unix_now
        self.chain = chain or ChainStore(clock=self._clock, genesis_data=genesis_data)
        self.verifier: SignatureVerifier = verifier or EthMessageVerifier()
        self.freshness_window_seconds = int(freshness_window_seconds)
        self.challenge_suffix = challenge_suffix

    @classmethod
    def from_config(
        cls,
        config: Config,
        *,
        verifier: SignatureVerifier | None = None,
        clock: Clock | None = None,
    ) -> StarRegistry:
        reg = config.registry
        return cls(
            verifier=verifier or verifier_for_scheme(reg.signature_scheme),
            clock=clock,
            freshness_window_seconds=reg.freshness_window_seconds,
            challenge_suffix=reg.challenge_suffix,
            genesis_data=reg.genesis_data,
        )

    # -----------------
    # Ownership
    # -----------------

    def issue_challenge(self, address: str) -> str:
        message = issue_challenge(address, now=self._clock(), suffix=self.challenge_suffix)
        logger.info("challenge_issued", extra={"address": address})
        return message

    def submit_star(self, address: str, message: str, signature: str, star: Any) -> Block:
        """Verify ownership of ``address`` and record ``star`` on the chain.

        Raises:
            ChallengeMalformedError: the message carries no usable timestamp.
            ChallengeExpiredError: the challenge is at least the freshness window old.
            SignatureInvalidError: the signature does not match message + address.
            InvalidChainError: the append left the chain invalid and was rolled back.
        """

        challenge = parse_challenge(message)
        elapsed = elapsed_seconds(challenge.issued_at, now=self._clock())
        if elapsed >= self.freshness_window_seconds:
            logger.info("challenge_expired", extra={"address": address, "elapsed_s": elapsed})
            raise ChallengeExpiredError(EXPIRED_MESSAGE)

        if not self.verifier.verify(message, address, signature):
            logger.info("signature_invalid", extra={"address": address})
            raise SignatureInvalidError(SIGNATURE_INVALID_MESSAGE)

        return self.chain.append_block({"owner": address, "star": star})

    verify_and_submit = submit_star

    # -----------------
    # Queries
    # -----------------

    def current_height(self) -> int:
        return self.chain.current_height()

    def get_block_by_hash(self, block_hash: str) -> Block | None:
        return self.chain.get_block_by_hash(block_hash)

    def get_block_by_height(self, height: int) -> Block | None:
        return self.chain.get_block_by_height(height)

    def get_stars_by_owner(self, address: str) -> list[Any]:
        scan = scan_owner(self.chain.blocks(), address)
        for err in scan.errors:
            logger.warning("block_body_undecodable", extra={"height": err.height, "error": str(err)})
        return scan.stars

    def validate_chain(self) -> list[ValidationError]:
        return self.chain.validate_chain()
