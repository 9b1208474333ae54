"""starledger.core.query

Owner-indexed lookups over opaque bodies.

There is no owner index; the chain is the index. Every body is decoded in
height order and matched on its ``owner`` field.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from starledger.core.block import Block
from starledger.core.exceptions import DecodeError


@dataclass(frozen=True, slots=True)
class OwnerScan:
    address: str
    stars: list[Any] = field(default_factory=list)
    errors: list[DecodeError] = field(default_factory=list)


def scan_owner(blocks: Iterable[Block], address: str) -> OwnerScan:
    """Collect the stars owned by ``address`` in ascending height order.

    Bodies without an ``owner`` (genesis included) are skipped. A body that does
    not decode is reported in ``errors`` and the scan moves on.
    """

    stars: list[Any] = []
    errors: list[DecodeError] = []
    for block in blocks:
        try:
            body = block.decode_body()
        except DecodeError as e:
            errors.append(e)
            continue

        if isinstance(body, dict) and body.get("owner") == address:
            stars.append(body.get("star"))

    return OwnerScan(address=address, stars=stars, errors=errors)
