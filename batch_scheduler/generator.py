from __future__ import annotations

import logging
import random
from typing import List, Optional

from .errors import EmptyBatchError
from .models import JobRecord, make_batch

logger = logging.getLogger(__name__)


def generate_batch(
    count: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_time: Optional[int] = None,
) -> List[JobRecord]:
    """
    Generate `count` jobs with requested times drawn uniformly from
    [1, max_time], where max_time defaults to `count`.

    Pass either a `random.Random` instance or a seed to get a reproducible
    batch; with neither, the batch is unseeded.
    """
    if count <= 0:
        raise EmptyBatchError(f"Batch size must be positive, got {count}")

    if rng is None:
        rng = random.Random(seed)
    upper = max_time if max_time is not None else count

    batch = make_batch(rng.randint(1, upper) for _ in range(count))
    logger.debug("Generated %d jobs (sizes 1..%d, %d units of work)", count, upper, sum(j.requested_time for j in batch))
    return batch
