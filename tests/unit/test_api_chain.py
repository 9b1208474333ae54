from __future__ import annotations

import pytest

from api.main import create_app
from tests.unit._api_test_client import make_client


def _claim(registry, wallet, story: str) -> None:
    msg = registry.issue_challenge(wallet.address)
    registry.submit_star(wallet.address, msg, wallet.sign(msg), {"story": story})


@pytest.mark.anyio
async def test_validate_intact_chain(test_config, registry, alice):
    _claim(registry, alice, "S1")
    app = create_app(test_config, registry=registry)

    async with make_client(app) as ac:
        r = await ac.get("/api/v1/chain/validate")
        assert r.status_code == 200
        assert r.json() == {"height": 1, "valid": True, "errors": []}


@pytest.mark.anyio
async def test_validate_reports_tampering(test_config, registry, alice, bob):
    _claim(registry, alice, "S1")
    _claim(registry, bob, "S2")
    registry.get_block_by_height(1).body = "00"
    app = create_app(test_config, registry=registry)

    async with make_client(app) as ac:
        r = await ac.get("/api/v1/chain/validate")
        data = r.json()
        assert data["valid"] is False
        assert [(e["kind"], e["height"]) for e in data["errors"]] == [("tampered", 1)]
        assert data["errors"][0]["message"].startswith("Tampering Detected - Invalid Block #1")

        msg = registry.issue_challenge(alice.address)
        r = await ac.post(
            "/api/v1/submitstar",
            json={"address": alice.address, "message": msg, "signature": alice.sign(msg), "star": {"story": "S3"}},
        )
        assert r.status_code == 409
        assert r.json()["error"]["code"] == "chain.invalid"
        assert registry.current_height() == 2
