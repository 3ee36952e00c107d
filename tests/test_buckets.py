import pytest
from packages.lexicon import BucketStore


def test_insert_and_scan():
    store = BucketStore(5)
    store.insert_at(2, "apple")
    store.insert_at(2, "banana")
    assert store.scan(2, lambda e: e == "banana") is True
    assert store.scan(2, lambda e: e == "cherry") is False
    assert store.scan(3, lambda e: True) is False
    assert len(store) == 2


def test_scan_short_circuits():
    store = BucketStore(1)
    for w in ["a", "b", "c"]:
        store.insert_at(0, w)
    seen = []

    def pred(e):
        seen.append(e)
        return e == "b"

    assert store.scan(0, pred) is True
    assert seen == ["a", "b"]  # insertion order, stops at first match


def test_duplicates_kept():
    store = BucketStore(3)
    store.insert_at(1, "apple")
    store.insert_at(1, "apple")
    assert store.chain_lengths() == [0, 2, 0]


def test_clear_idempotent_and_safe_when_empty():
    store = BucketStore(4)
    store.clear()  # never populated
    store.insert_at(0, "x")
    store.clear()
    store.clear()
    assert len(store) == 0
    assert store.chain_lengths() == [0, 0, 0, 0]


@pytest.mark.parametrize("idx", [-1, 4, 100])
def test_index_out_of_range(idx):
    store = BucketStore(4)
    with pytest.raises(IndexError):
        store.insert_at(idx, "x")
    with pytest.raises(IndexError):
        store.scan(idx, lambda e: True)
