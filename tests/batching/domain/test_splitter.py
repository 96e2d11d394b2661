"""Tests for split_batches."""

import pytest

from job_relay.batching.domain.errors import InvalidBatchSizeError
from job_relay.batching.domain.splitter import split_batches


class TestSplitBatches:
    """Batches are consecutive, full-sized except the last, and order-preserving."""

    def test_uneven_split_leaves_short_last_batch(self) -> None:
        batches = split_batches(list(range(2500)), batch_size=1000)

        assert [len(b) for b in batches] == [1000, 1000, 500]

    def test_concatenation_reproduces_input(self) -> None:
        items = [f"cert-{i}" for i in range(23)]

        batches = split_batches(items, batch_size=5)

        assert [item for batch in batches for item in batch] == items

    def test_batch_count_is_ceiling(self) -> None:
        for total, size, expected in [(10, 5, 2), (11, 5, 3), (1, 5, 1), (5, 1, 5)]:
            assert len(split_batches(list(range(total)), batch_size=size)) == expected

    def test_exact_multiple_has_no_empty_batch(self) -> None:
        batches = split_batches(list(range(2000)), batch_size=1000)

        assert [len(b) for b in batches] == [1000, 1000]

    def test_empty_input_yields_no_batches(self) -> None:
        assert split_batches([], batch_size=1000) == []

    def test_batch_size_larger_than_input_yields_single_batch(self) -> None:
        assert split_batches(["a", "b"], batch_size=1000) == [["a", "b"]]

    def test_accepts_tuples(self) -> None:
        assert split_batches(("a", "b", "c"), batch_size=2) == [["a", "b"], ["c"]]

    @pytest.mark.parametrize("batch_size", [0, -1])
    def test_rejects_batch_size_below_one(self, batch_size: int) -> None:
        with pytest.raises(InvalidBatchSizeError) as exc_info:
            split_batches([1, 2, 3], batch_size=batch_size)

        assert exc_info.value.batch_size == batch_size
