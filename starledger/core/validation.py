"""starledger.core.validation

Whole-chain validation.

Findings are returned, not raised: the caller decides whether a tampered block
is an alarm or a forensic exhibit. One pass, every block, every violation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from starledger.core.block import Block


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Base diagnostic for a chain violation at ``height``."""

    height: int

    @property
    def kind(self) -> str:
        return "invalid"

    @property
    def message(self) -> str:
        return f"Invalid Block #{self.height}"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "height": self.height, "message": self.message}

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class TamperedBlockError(ValidationError):
    """Stored hash disagrees with the hash recomputed from header + body."""

    stored_hash: str

    @property
    def kind(self) -> str:
        return "tampered"

    @property
    def message(self) -> str:
        return f"Tampering Detected - Invalid Block #{self.height} with Hash: {self.stored_hash}"

    def to_dict(self) -> dict[str, Any]:
        return {**ValidationError.to_dict(self), "stored_hash": self.stored_hash}


@dataclass(frozen=True, slots=True)
class BrokenLinkError(ValidationError):
    """previous_hash disagrees with the predecessor's stored hash."""

    expected_prev: str
    actual_prev: str

    @property
    def kind(self) -> str:
        return "broken_link"

    @property
    def message(self) -> str:
        return (
            f"Broken Chain - Invalid Link: Block at #{self.height} is not Linked "
            f"to the Correct Previous Block at #{self.height - 1}."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **ValidationError.to_dict(self),
            "expected_prev": self.expected_prev,
            "actual_prev": self.actual_prev,
        }


def validate_blocks(blocks: Sequence[Block]) -> list[ValidationError]:
    """Validate a height-ordered block sequence (index == height).

    Returns an empty list for a valid chain. Never mutates ``blocks``.
    """

    errors: list[ValidationError] = []
    for index, block in enumerate(blocks):
        if block.recompute_hash() != block.hash:
            errors.append(TamperedBlockError(height=block.height, stored_hash=block.hash))

        if index > 0:
            expected = blocks[index - 1].hash
            if block.previous_hash != expected:
                errors.append(
                    BrokenLinkError(
                        height=block.height,
                        expected_prev=expected,
                        actual_prev=block.previous_hash,
                    )
                )
    return errors
