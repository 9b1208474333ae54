"""starledger.ownership

Proof of wallet control, in two steps:

1. ``issue_challenge(address)`` hands out a time-stamped message.
2. The wallet signs it; ``SignatureVerifier.verify`` checks the signature.

The registry glues the two together with a freshness window.
"""

from starledger.ownership.challenge import Challenge, issue_challenge, parse_challenge
from starledger.ownership.signatures import (
    BitcoinMessageVerifier,
    EthMessageVerifier,
    SignatureVerifier,
    bitcoin_address,
    recover_signer,
    sign_bitcoin_message,
    sign_message,
    verifier_for_scheme,
)

__all__ = [
    "BitcoinMessageVerifier",
    "Challenge",
    "EthMessageVerifier",
    "SignatureVerifier",
    "bitcoin_address",
    "issue_challenge",
    "parse_challenge",
    "recover_signer",
    "sign_bitcoin_message",
    "sign_message",
    "verifier_for_scheme",
]
