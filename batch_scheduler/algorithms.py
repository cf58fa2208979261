from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, List, Optional, Sequence, Union

from .errors import EmptyBatchError, InvalidQuantumError
from .heap import MinHeap
from .metrics import average_turnaround
from .models import JobMetrics, JobRecord, ScheduledSlice, ScheduleResult

logger = logging.getLogger(__name__)

JobLike = Union[JobRecord, int]


def _working_copy(jobs: Iterable[JobLike]) -> List[JobRecord]:
    """
    Private copies of the batch, so callers never observe our mutations.
    Bare integers become labelled records.
    """
    batch: List[JobRecord] = []
    for i, job in enumerate(jobs, start=1):
        record = job.copy() if isinstance(job, JobRecord) else JobRecord(job)
        if record.job_id is None:
            record.job_id = f"J{i}"
        batch.append(record)

    if not batch:
        raise EmptyBatchError()
    return batch


def _complete(job: JobRecord, index: int, tally: int) -> JobMetrics:
    job.turnaround_time = tally
    return JobMetrics(
        job_id=job.job_id,
        index=index,
        requested_time=job.requested_time,
        turnaround_time=tally,
        waiting_time=tally - job.requested_time,
    )


def schedule_fifo(jobs: Sequence[JobLike], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-In First-Out (non-preemptive): jobs run to completion in input order.
    The quantum is irrelevant and ignored.
    """
    batch = _working_copy(jobs)

    tally = 0
    total = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[JobMetrics] = []

    for index, job in enumerate(batch):
        start = tally
        tally += job.requested_time
        job.run_for(job.remaining_time)
        timeline.append(ScheduledSlice(job_id=job.job_id, start_time=start, end_time=tally))
        metrics.append(_complete(job, index, tally))
        total += tally

    result = ScheduleResult(
        algorithm="FIFO",
        quantum=None,
        total_time=tally,
        avg_turnaround=average_turnaround(total, len(batch)),
        jobs=metrics,
        timeline=timeline,
    )
    logger.debug("FIFO processed %d jobs in %d units", len(batch), tally)
    return result


def schedule_rr(jobs: Sequence[JobLike], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin (preemptive).

    The front job runs for min(remaining, quantum) units. Unfinished jobs go
    to the back of the queue; finished ones record the current tally as their
    turnaround. Large quanta are not special-cased.
    """
    if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum < 1:
        raise InvalidQuantumError(quantum)

    batch = _working_copy(jobs)

    # Queue entries carry the input position so metrics can be reordered.
    queue: Deque[tuple[int, JobRecord]] = deque(enumerate(batch))

    tally = 0
    total = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[JobMetrics] = []

    while queue:
        index, job = queue.popleft()

        start = tally
        tally += job.run_for(quantum)
        timeline.append(ScheduledSlice(job_id=job.job_id, start_time=start, end_time=tally))

        if job.remaining_time > 0:
            queue.append((index, job))
        else:
            metrics.append(_complete(job, index, tally))
            total += tally

    result = ScheduleResult(
        algorithm="Round Robin",
        quantum=quantum,
        total_time=tally,
        avg_turnaround=average_turnaround(total, len(batch)),
        jobs=metrics,
        timeline=timeline,
    )
    logger.debug(
        "Round Robin (quantum=%d) processed %d jobs in %d units over %d slices",
        quantum,
        len(batch),
        tally,
        len(timeline),
    )
    return result


def schedule_sjf(jobs: Sequence[JobLike], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive), driven by a min-heap on remaining time.

    The loop services the root and extracts it while more than one job is
    left in the active range; the job left at index 0 is serviced last.
    """
    batch = _working_copy(jobs)
    position = {id(job): index for index, job in enumerate(batch)}

    heap = MinHeap(batch, key=lambda job: job.remaining_time)
    valid_end = len(batch) - 1

    tally = 0
    total = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[JobMetrics] = []

    def service(job: JobRecord) -> None:
        nonlocal tally, total
        start = tally
        tally += job.requested_time
        job.run_for(job.remaining_time)
        total += tally
        timeline.append(ScheduledSlice(job_id=job.job_id, start_time=start, end_time=tally))
        metrics.append(_complete(job, position[id(job)], tally))

    while valid_end > 0:
        service(heap.peek())
        heap.extract_min(valid_end)
        valid_end -= 1
    service(heap.peek())

    result = ScheduleResult(
        algorithm="SJF",
        quantum=None,
        total_time=tally,
        avg_turnaround=average_turnaround(total, len(batch)),
        jobs=metrics,
        timeline=timeline,
    )
    logger.debug("SJF processed %d jobs in %d units", len(batch), tally)
    return result


ALGORITHMS = {
    "fifo": schedule_fifo,
    "fcfs": schedule_fifo,
    "sjf": schedule_sjf,
    "rr": schedule_rr,
}


def run_algorithm(name: str, jobs: Sequence[JobLike], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum only matters for round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown or unimplemented algorithm '{name}'")

    func = ALGORITHMS[name]
    return func(jobs, quantum=quantum)
