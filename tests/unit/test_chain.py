from __future__ import annotations

import threading

import pytest

from starledger import GENESIS_PREVIOUS_HASH
from starledger.core.chain import ChainStore
from starledger.core.exceptions import InvalidChainError
from starledger.core.validation import BrokenLinkError, TamperedBlockError


def _chain(clock, n: int = 0) -> ChainStore:
    chain = ChainStore(clock=clock)
    for i in range(n):
        clock.advance(1)
        chain.append_block({"owner": f"0x{i}", "star": {"story": f"star {i}"}})
    return chain


def test_genesis_block_exists_after_construction(clock) -> None:
    chain = ChainStore(clock=clock)
    assert chain.current_height() == 0
    assert len(chain) == 1

    genesis = chain.get_block_by_height(0)
    assert genesis is not None
    assert genesis.is_genesis
    assert genesis.previous_hash == GENESIS_PREVIOUS_HASH
    assert genesis.decode_body() == {"data": "Genesis Block"}
    assert genesis.timestamp == clock.now


def test_genesis_marker_is_configurable(clock) -> None:
    chain = ChainStore(clock=clock, genesis_data="First Light")
    assert chain.get_block_by_height(0).decode_body() == {"data": "First Light"}


def test_append_assigns_next_height_and_links_to_tail(clock) -> None:
    chain = _chain(clock)
    tail = chain.tail

    clock.advance(10)
    block = chain.append_block({"owner": "0xabc", "star": {"story": "s"}})

    assert block.height == 1
    assert block.previous_hash == tail.hash
    assert block.timestamp == clock.now
    assert chain.current_height() == 1
    assert chain.tail is block


def test_linkage_holds_for_every_height(clock) -> None:
    chain = _chain(clock, n=5)
    blocks = chain.blocks()
    for h in range(1, len(blocks)):
        assert blocks[h].previous_hash == blocks[h - 1].hash
        assert blocks[h].height == h
    assert chain.validate_chain() == []


def test_lookups_return_none_when_absent(clock) -> None:
    chain = _chain(clock, n=2)
    b1 = chain.get_block_by_height(1)

    assert chain.get_block_by_hash(b1.hash) is b1
    assert chain.get_block_by_hash("ff" * 32) is None
    assert chain.get_block_by_height(99) is None
    assert chain.get_block_by_height(-1) is None


def test_blocks_returns_a_snapshot(clock) -> None:
    chain = _chain(clock, n=1)
    snap = chain.blocks()
    chain.append_block({"owner": "0xabc", "star": {}})
    assert len(snap) == 2
    assert len(chain.blocks()) == 3


def test_overwritten_hash_reports_exactly_one_tampered_block(clock) -> None:
    chain = _chain(clock, n=2)  # heights 0..2
    chain.get_block_by_height(2).hash = "00" * 32

    errors = chain.validate_chain()
    assert len(errors) == 1
    assert isinstance(errors[0], TamperedBlockError)
    assert errors[0].height == 2
    assert errors[0].stored_hash == "00" * 32


def test_overwritten_hash_breaks_the_downstream_link(clock) -> None:
    chain = _chain(clock, n=3)  # heights 0..3
    original = chain.get_block_by_height(2).hash
    chain.get_block_by_height(2).hash = "00" * 32

    errors = chain.validate_chain()
    assert [type(e) for e in errors] == [TamperedBlockError, BrokenLinkError]
    link = errors[1]
    assert link.height == 3
    assert link.expected_prev == "00" * 32
    assert link.actual_prev == original


def test_append_onto_corrupted_chain_is_rolled_back(clock, caplog: pytest.LogCaptureFixture) -> None:
    chain = _chain(clock, n=2)
    chain.get_block_by_height(1).body = "7b7d"
    before = chain.blocks()

    caplog.set_level("ERROR", logger="starledger")
    with pytest.raises(InvalidChainError) as e:
        chain.append_block({"owner": "0xabc", "star": {}})

    assert chain.current_height() == 2
    assert chain.blocks() == before
    assert any(isinstance(err, TamperedBlockError) and err.height == 1 for err in e.value.errors)
    assert "chain_invalid_after_append" in caplog.text


def test_concurrent_appends_get_sequential_heights(clock) -> None:
    chain = _chain(clock)
    barrier = threading.Barrier(8)
    results = []
    lock = threading.Lock()

    def worker(i: int) -> None:
        barrier.wait()
        block = chain.append_block({"owner": f"0x{i}", "star": {}})
        with lock:
            results.append(block)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(b.height for b in results) == list(range(1, 9))
    assert chain.validate_chain() == []
    blocks = chain.blocks()
    for h in range(1, len(blocks)):
        assert blocks[h].previous_hash == blocks[h - 1].hash
