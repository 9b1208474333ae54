"""starledger.ownership.signatures

Wallet message signatures.

The ledger only needs one primitive: does ``signature`` over ``message`` come
from the key behind ``address``? Two wallet ecosystems are spoken:

- ``eip191``: Ethereum ``personal_sign``. The signer is recovered and compared
  with the address case-insensitively.
- ``bitcoin``: Bitcoin Core / Electrum ``signmessage``. A base64 compact
  signature; the recovered key must hash to the P2PKH address exactly.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bitcoin.signmessage import BitcoinMessage, SignMessage, VerifyMessage
from bitcoin.wallet import CBitcoinSecret, P2PKHBitcoinAddress
from eth_account import Account
from eth_account.messages import encode_defunct

from starledger.core.exceptions import ConfigError


@runtime_checkable
class SignatureVerifier(Protocol):
    def verify(self, message: str, address: str, signature: str) -> bool: ...


def _norm_addr(v: str) -> str:
    s = str(v).strip()
    if not s.startswith("0x"):
        s = "0x" + s
    return s.lower()


def _hex_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return bytes.fromhex(str(value).strip().removeprefix("0x"))


def recover_signer(message: str, signature: str | bytes) -> str:
    """Return the lowercase address that produced ``signature`` over ``message``."""

    sig = _hex_bytes(signature)
    return str(Account.recover_message(encode_defunct(text=message), signature=sig)).lower()


class EthMessageVerifier:
    """EIP-191 personal message verification via eth-account."""

    def verify(self, message: str, address: str, signature: str) -> bool:
        if not address or not signature:
            return False
        try:
            return recover_signer(message, signature) == _norm_addr(address)
        except Exception:  # noqa: BLE001 - verification boundary
            return False


class BitcoinMessageVerifier:
    """Bitcoin signed-message verification via python-bitcoinlib.

    Addresses are base58 and case-sensitive, so no normalisation happens here.
    """

    def verify(self, message: str, address: str, signature: str) -> bool:
        if not address or not signature:
            return False
        try:
            return bool(VerifyMessage(address.strip(), BitcoinMessage(message), signature.strip()))
        except Exception:  # noqa: BLE001 - verification boundary
            return False


_VERIFIERS: dict[str, type[SignatureVerifier]] = {
    "eip191": EthMessageVerifier,
    "bitcoin": BitcoinMessageVerifier,
}


def verifier_for_scheme(scheme: str) -> SignatureVerifier:
    """Build the verifier for a configured ``registry.signature_scheme``."""

    cls = _VERIFIERS.get(str(scheme).lower())
    if cls is None:
        raise ConfigError(f"Unknown signature scheme: {scheme!r} (expected one of {sorted(_VERIFIERS)})")
    return cls()


def sign_message(message: str, private_key: str) -> str:
    """Sign ``message`` the way an Ethereum wallet would. Returns ``0x``-prefixed hex.

    Wallet-side helper for tests and demos; the registry itself never holds keys.
    """

    sig = Account.sign_message(encode_defunct(text=message), private_key=private_key).signature
    return "0x" + bytes(sig).hex()


def bitcoin_address(private_key: str) -> str:
    """P2PKH address (compressed pubkey) for a hex secret."""

    secret = CBitcoinSecret.from_secret_bytes(_hex_bytes(private_key))
    return str(P2PKHBitcoinAddress.from_pubkey(secret.pub))


def sign_bitcoin_message(message: str, private_key: str) -> str:
    """Sign ``message`` the way Bitcoin Core's ``signmessage`` would. Returns base64."""

    secret = CBitcoinSecret.from_secret_bytes(_hex_bytes(private_key))
    return SignMessage(secret, BitcoinMessage(message)).decode("ascii")
