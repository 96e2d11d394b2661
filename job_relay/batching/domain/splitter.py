"""Order-preserving split of a sequence into fixed-size batches."""

import math
from collections.abc import Sequence

from job_relay.batching.domain.errors import InvalidBatchSizeError

type Batch[T] = list[T]


def split_batches[T](items: Sequence[T], batch_size: int) -> list[Batch[T]]:
    """Split ``items`` into ``ceil(len(items) / batch_size)`` consecutive batches.

    Every batch holds ``batch_size`` items except possibly the last. Joining the
    batches in order reproduces ``items`` exactly. An empty input yields no
    batches.

    Raises:
        InvalidBatchSizeError: if batch_size < 1.
    """
    if batch_size < 1:
        raise InvalidBatchSizeError(batch_size=batch_size)

    count = math.ceil(len(items) / batch_size)
    return [list(items[i * batch_size : (i + 1) * batch_size]) for i in range(count)]
