from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# uv/pytest may run without installing the project; ensure repo root is importable.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from eth_account import Account  # noqa: E402

from starledger.core.config import Config  # noqa: E402
from starledger.ownership.signatures import (  # noqa: E402
    bitcoin_address,
    sign_bitcoin_message,
    sign_message,
)
from starledger.registry import StarRegistry  # noqa: E402

# Deterministic test keys (anvil defaults, DO NOT USE IN PRODUCTION)
ALICE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
BOB_KEY = "0x59c6995e998f97a5a0044966f0945382d1b83f5f8b2e70e9a1baddb5f9d0c2d7"

T0 = 1_700_000_000


class FakeClock:
    """Controllable unix-seconds clock."""

    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@dataclass(frozen=True)
class Wallet:
    address: str
    private_key: str

    def sign(self, message: str) -> str:
        return sign_message(message, self.private_key)


def _wallet(key: str) -> Wallet:
    return Wallet(address=Account.from_key(key).address, private_key=key)


@dataclass(frozen=True)
class BitcoinWallet:
    address: str
    private_key: str

    def sign(self, message: str) -> str:
        return sign_bitcoin_message(message, self.private_key)


def _btc_wallet(key: str) -> BitcoinWallet:
    return BitcoinWallet(address=bitcoin_address(key), private_key=key)


@pytest.fixture()
def temp_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture()
def test_config() -> Config:
    return Config.from_yaml(REPO_ROOT / "config" / "default.yaml")


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def alice() -> Wallet:
    return _wallet(ALICE_KEY)


@pytest.fixture()
def bob() -> Wallet:
    return _wallet(BOB_KEY)


@pytest.fixture()
def registry(test_config: Config, clock: FakeClock) -> StarRegistry:
    return StarRegistry.from_config(test_config, clock=clock)


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def btc_alice() -> BitcoinWallet:
    return _btc_wallet(ALICE_KEY)


@pytest.fixture()
def btc_bob() -> BitcoinWallet:
    return _btc_wallet(BOB_KEY)
