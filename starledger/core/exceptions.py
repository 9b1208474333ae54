"""starledger.core.exceptions

Errors are part of the interface.

Validation findings (tampered blocks, broken links) are *not* here: they are
diagnostics returned by the validation engine, see :mod:`starledger.core.validation`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starledger.core.validation import ValidationError


class StarLedgerError(Exception):
    """Base exception for starledger."""


class ConfigError(StarLedgerError):
    """Configuration is missing, invalid, or inconsistent."""


class ChainError(StarLedgerError):
    """Chain store failures: sealing, linkage, or integrity."""


class BlockAlreadySealedError(ChainError):
    """A block can be sealed once. Only once."""


class InvalidChainError(ChainError):
    """Post-append validation found corruption. The append was rolled back."""

    def __init__(self, message: str, errors: Sequence[ValidationError] = ()) -> None:
        super().__init__(message)
        self.errors: list[ValidationError] = list(errors)


class DecodeError(StarLedgerError):
    """A block body is not a valid encoding of its payload."""

    def __init__(self, message: str, *, height: int | None = None) -> None:
        super().__init__(message)
        self.height = height


class OwnershipError(StarLedgerError):
    """Ownership proof rejected."""


class ChallengeMalformedError(OwnershipError):
    """The echoed challenge message does not carry a usable timestamp."""


class ChallengeExpiredError(OwnershipError):
    """The challenge is older than the freshness window. Request a new one."""


class SignatureInvalidError(OwnershipError):
    """The signature does not prove control of the address."""
