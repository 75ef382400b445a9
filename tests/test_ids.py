import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from listing_features.core.ids import MAX_OBJECTID, IdBatch, max_prefix_for, plan_ids


class MaxRng:
    """Always draws the top of the range."""

    def randint(self, a, b):
        return b


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        assert a <= self.value <= b
        return self.value


class TestMaxPrefix:
    def test_small_batches(self):
        assert max_prefix_for(0) == 214748363
        assert max_prefix_for(9) == 214748363
        assert max_prefix_for(10) == 21474835
        assert max_prefix_for(12345) == 21473

    def test_nine_digit_batch(self):
        assert max_prefix_for(999_999_999) == 1

    def test_ten_digit_batch_has_no_room(self):
        assert max_prefix_for(1_000_000_000) == -1


class TestPlanIds:
    @pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 99, 100, 101, 5000])
    def test_ids_bounded_and_unique(self, count):
        for rng in (random.Random(7), MaxRng(), FixedRng(0)):
            ids = list(plan_ids(count, rng))
            assert len(ids) == count
            assert len(set(ids)) == count
            assert all(0 <= i <= MAX_OBJECTID for i in ids)

    def test_prefix_is_concatenated(self):
        batch = plan_ids(25, FixedRng(41))
        assert batch.id_for(0) == 410
        assert batch.id_for(7) == 417
        assert batch.id_for(24) == 4124

    def test_largest_id_of_nine_digit_batch(self):
        batch = plan_ids(999_999_999, MaxRng())
        assert batch.prefix == 1
        assert batch.id_for(999_999_998) == 1_999_999_998

    def test_ten_digit_batch_uses_indices(self):
        batch = plan_ids(2_000_000_000, random.Random(1))
        assert batch.prefix is None
        assert batch.size == 2_000_000_000
        assert batch.id_for(1_999_999_999) == 1_999_999_999

    def test_full_id_space_uses_indices(self):
        batch = plan_ids(MAX_OBJECTID + 1, random.Random(1))
        assert batch.prefix is None
        assert batch.id_for(MAX_OBJECTID) == MAX_OBJECTID

    def test_overflow_truncates(self):
        batch = plan_ids(MAX_OBJECTID + 5000, random.Random(1))
        assert batch.prefix is None
        assert len(batch) == MAX_OBJECTID + 1
        assert batch.id_for(0) == 0
        assert batch.id_for(MAX_OBJECTID) == MAX_OBJECTID
        with pytest.raises(IndexError):
            batch.id_for(MAX_OBJECTID + 1)

    def test_same_seed_same_ids(self):
        assert list(plan_ids(50, random.Random(3))) == list(plan_ids(50, random.Random(3)))

    def test_default_rng(self):
        ids = list(plan_ids(100))
        assert len(set(ids)) == 100
        assert all(0 <= i <= MAX_OBJECTID for i in ids)

    def test_negative_count(self):
        with pytest.raises(ValueError):
            plan_ids(-1)


class TestIdBatch:
    def test_index_out_of_range(self):
        batch = IdBatch(size=3, prefix=5)
        with pytest.raises(IndexError):
            batch.id_for(3)
        with pytest.raises(IndexError):
            batch.id_for(-1)

    def test_prefix_zero_keeps_index(self):
        assert list(IdBatch(size=12, prefix=0)) == list(range(12))
