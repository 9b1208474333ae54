"""starledger.core.encoding

Block bodies are opaque to the ledger: hex of canonical JSON.

The chain never interprets a body's schema. It only needs encode/decode to be
exact inverses so that a decoded star can be re-encoded byte for byte.
"""

from __future__ import annotations

import json
from typing import Any

from starledger.core.exceptions import DecodeError


def canonical_json(data: Any) -> str:
    """Canonical JSON serialization used for bodies and hashing."""

    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def encode_body(payload: Any) -> str:
    """Encode a JSON-compatible payload into a lowercase hex string."""

    try:
        raw = canonical_json(payload)
    except (TypeError, ValueError) as e:
        raise ValueError(f"payload is not JSON-serializable: {e}") from e
    return raw.encode("utf-8").hex()


def decode_body(encoded: str) -> Any:
    """Decode a hex body back into its payload.

    Raises:
        DecodeError: if the body is not hex, not UTF-8, or not JSON.
    """

    try:
        raw = bytes.fromhex(encoded)
    except (ValueError, TypeError) as e:
        raise DecodeError(f"body is not valid hex: {e}") from e

    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"body is not valid JSON: {e}") from e
