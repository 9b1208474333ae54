from __future__ import annotations

from datetime import UTC

import pytest

from starledger.core import time as sl_time
from starledger.core.time import elapsed_seconds, to_datetime, unix_now


def test_unix_now_is_whole_seconds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sl_time.time, "time", lambda: 1_700_000_000.9)
    assert unix_now() == 1_700_000_000


def test_elapsed_seconds_with_explicit_now() -> None:
    assert elapsed_seconds(100, now=399) == 299
    assert elapsed_seconds(100, now=100) == 0


def test_elapsed_seconds_can_be_negative_for_future_timestamps() -> None:
    assert elapsed_seconds(500, now=400) == -100


def test_to_datetime_is_aware_and_utc() -> None:
    dt = to_datetime(0)
    assert dt.tzinfo == UTC
    assert dt.year == 1970
