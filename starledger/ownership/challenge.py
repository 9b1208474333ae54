"""starledger.ownership.challenge

The challenge is a string the wallet signs: ``<address>:<issued_at>:starRegistry``.

Nothing is stored. The caller echoes the message back and the timestamp inside
it is the only record that the challenge was ever issued.
"""

from __future__ import annotations

from dataclasses import dataclass

from starledger import CHALLENGE_SUFFIX
from starledger.core.exceptions import ChallengeMalformedError
from starledger.core.time import unix_now


@dataclass(frozen=True, slots=True)
class Challenge:
    address: str
    issued_at: int
    suffix: str = CHALLENGE_SUFFIX

    @property
    def message(self) -> str:
        return f"{self.address}:{self.issued_at}:{self.suffix}"


def issue_challenge(address: str, *, now: int | None = None, suffix: str = CHALLENGE_SUFFIX) -> str:
    """Return the message ``address`` must sign, stamped with wall-clock seconds."""

    issued_at = unix_now() if now is None else int(now)
    return Challenge(address=address, issued_at=issued_at, suffix=suffix).message


def parse_challenge(message: str) -> Challenge:
    """Recover the address and timestamp embedded in a challenge message.

    Only the second colon-delimited field is load-bearing.

    Raises:
        ChallengeMalformedError: if the timestamp field is missing or not an integer.
    """

    parts = message.split(":")
    if len(parts) < 2:
        raise ChallengeMalformedError("Challenge message is missing its timestamp.")

    raw = parts[1]
    digits = raw.removeprefix("-")
    if not (digits.isascii() and digits.isdigit()):
        raise ChallengeMalformedError(f"Challenge timestamp is not an integer: {raw!r}")
    issued_at = int(raw)

    suffix = parts[2] if len(parts) > 2 else ""
    return Challenge(address=parts[0], issued_at=issued_at, suffix=suffix)
