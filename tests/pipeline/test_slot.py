"""Tests for the versioned dataset slot."""

import threading

import pytest

pytestmark = pytest.mark.unit

from specscope.pipeline import DatasetSlot, parse_dataset


@pytest.fixture
def ds_a():
    return parse_dataset("1 2")


@pytest.fixture
def ds_b():
    return parse_dataset("3 4\n5 6")


class TestDatasetSlot:

    def test_starts_empty(self):
        slot = DatasetSlot()
        assert slot.current is None
        assert slot.version is None
        assert slot.latest_token == 0

    def test_tokens_increase(self):
        slot = DatasetSlot()
        assert [slot.issue_token() for _ in range(3)] == [1, 2, 3]

    def test_latest_offer_wins(self, ds_a):
        slot = DatasetSlot()
        token = slot.issue_token()
        assert slot.offer(token, ds_a) is True
        assert slot.current is ds_a
        assert slot.version == token

    def test_stale_completion_dropped(self, ds_a, ds_b):
        """First read finishes last: its result must not clobber the newer one."""
        slot = DatasetSlot()
        first = slot.issue_token()
        second = slot.issue_token()

        assert slot.offer(second, ds_b) is True
        assert slot.offer(first, ds_a) is False
        assert slot.current is ds_b

    def test_stale_completion_before_newer_is_still_dropped(self, ds_a):
        slot = DatasetSlot()
        first = slot.issue_token()
        slot.issue_token()
        assert slot.offer(first, ds_a) is False
        assert slot.current is None

    def test_is_current(self):
        slot = DatasetSlot()
        first = slot.issue_token()
        assert slot.is_current(first)
        slot.issue_token()
        assert not slot.is_current(first)

    @pytest.mark.parametrize("token", [0, 2])
    def test_unissued_token_rejected(self, ds_a, token):
        slot = DatasetSlot()
        slot.issue_token()
        with pytest.raises(ValueError, match="never issued"):
            slot.offer(token, ds_a)

    def test_concurrent_tokens_are_unique(self):
        slot = DatasetSlot()
        tokens = []
        lock = threading.Lock()

        def worker():
            for _ in range(100):
                t = slot.issue_token()
                with lock:
                    tokens.append(t)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(tokens) == list(range(1, 401))
