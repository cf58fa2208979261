import random

import pytest

from batch_scheduler.algorithms import run_algorithm, schedule_fifo, schedule_rr, schedule_sjf
from batch_scheduler.errors import EmptyBatchError, InvalidJobDurationError, InvalidQuantumError
from batch_scheduler.models import JobRecord, make_batch


def _jobs():
    return make_batch([5, 3, 8])


def _random_batch(seed, n=30):
    rng = random.Random(seed)
    return make_batch(rng.randint(1, n) for _ in range(n))


def test_fifo_turnarounds_are_prefix_sums():
    res = schedule_fifo(_jobs())
    assert res.turnarounds == [5, 8, 16]
    assert res.completion_order == ["J1", "J2", "J3"]
    assert res.as_tuple() == (16, 9)


def test_sjf_services_shortest_first():
    res = schedule_sjf(_jobs())
    assert [m.requested_time for m in res.jobs] == [3, 5, 8]
    assert [m.turnaround_time for m in res.jobs] == [3, 8, 16]
    assert res.turnarounds == [8, 3, 16]
    assert res.as_tuple() == (16, 9)


def test_rr_quantum_2():
    res = schedule_rr(_jobs(), quantum=2)
    # J2 finishes at 9, J1 at 12, J3 at 16: (9 + 12 + 16) // 3 == 12
    assert res.completion_order == ["J2", "J1", "J3"]
    assert res.turnarounds == [12, 9, 16]
    assert res.as_tuple() == (16, 12)
    assert [(s.job_id, s.start_time, s.end_time) for s in res.timeline[:4]] == [
        ("J1", 0, 2),
        ("J2", 2, 4),
        ("J3", 4, 6),
        ("J1", 6, 8),
    ]


def test_rr_large_quantum_matches_fifo():
    jobs = _jobs()
    assert schedule_rr(jobs, quantum=100).turnarounds == schedule_fifo(jobs).turnarounds


def test_rr_quantum_1():
    res = schedule_rr(make_batch([2, 1]), quantum=1)
    assert res.turnarounds == [3, 2]
    assert res.as_tuple() == (3, 2)


def test_work_is_conserved():
    for seed in range(5):
        jobs = _random_batch(seed)
        expected = sum(j.requested_time for j in jobs)
        assert schedule_fifo(jobs).total_time == expected
        assert schedule_sjf(jobs).total_time == expected
        for q in (1, 3, 10, 50):
            assert schedule_rr(jobs, q).total_time == expected


def test_sjf_never_worse_than_fifo():
    for seed in range(10):
        jobs = _random_batch(seed)
        sjf = schedule_sjf(jobs)
        fifo = schedule_fifo(jobs)
        assert sjf.avg_turnaround <= fifo.avg_turnaround
        assert sum(sjf.turnarounds) <= sum(fifo.turnarounds)


def test_sjf_equals_fifo_on_sorted_batch():
    jobs = make_batch([1, 2, 2, 4, 7])
    sjf = schedule_sjf(jobs)
    fifo = schedule_fifo(jobs)
    assert sorted(sjf.turnarounds) == sorted(fifo.turnarounds)
    assert sjf.as_tuple() == fifo.as_tuple()


def test_rr_turnaround_at_least_requested_time():
    jobs = _random_batch(3)
    for q in (1, 4, 9):
        res = schedule_rr(jobs, q)
        assert len(res.jobs) == len(jobs)
        for m in res.jobs:
            assert m.turnaround_time >= m.requested_time
            assert m.waiting_time >= 0


def test_policies_do_not_mutate_input():
    jobs = _jobs()
    schedule_fifo(jobs)
    schedule_sjf(jobs)
    schedule_rr(jobs, 2)
    assert [j.requested_time for j in jobs] == [5, 3, 8]
    assert [j.remaining_time for j in jobs] == [5, 3, 8]
    assert [j.turnaround_time for j in jobs] == [0, 0, 0]


def test_bare_integers_accepted():
    assert schedule_fifo([5, 3, 8]).as_tuple() == (16, 9)
    assert schedule_rr([5, 3, 8], 2).completion_order == ["J2", "J1", "J3"]


def test_single_job():
    for res in (schedule_fifo([7]), schedule_sjf([7]), schedule_rr([7], 3)):
        assert res.as_tuple() == (7, 7)


@pytest.mark.parametrize("func", [schedule_fifo, schedule_sjf])
def test_empty_batch_rejected(func):
    with pytest.raises(EmptyBatchError):
        func([])


def test_empty_batch_rejected_by_rr():
    with pytest.raises(EmptyBatchError):
        schedule_rr([], 2)


@pytest.mark.parametrize("quantum", [0, -1, None, 1.5])
def test_invalid_quantum_rejected(quantum):
    with pytest.raises(InvalidQuantumError):
        schedule_rr(_jobs(), quantum)


def test_invalid_duration_rejected_at_construction():
    with pytest.raises(InvalidJobDurationError):
        JobRecord(0)
    with pytest.raises(InvalidJobDurationError):
        make_batch([3, -2])


def test_run_algorithm_dispatch():
    assert run_algorithm("FCFS", _jobs()).algorithm == "FIFO"
    assert run_algorithm("sjf", _jobs(), quantum=4).quantum is None
    assert run_algorithm("rr", _jobs(), quantum=2).as_tuple() == (16, 12)
    with pytest.raises(ValueError):
        run_algorithm("mlfq", _jobs())


@pytest.mark.parametrize("func", [schedule_fifo, schedule_sjf])
def test_empty_iterator_rejected(func):
    with pytest.raises(EmptyBatchError):
        func(iter([]))


def test_empty_iterator_rejected_by_rr():
    with pytest.raises(EmptyBatchError):
        schedule_rr(iter([]), 2)


def test_rr_checks_quantum_before_batch():
    with pytest.raises(InvalidQuantumError):
        schedule_rr([], 0)


def test_bool_quantum_rejected():
    with pytest.raises(InvalidQuantumError):
        schedule_rr(_jobs(), True)


def test_bool_duration_rejected():
    with pytest.raises(InvalidJobDurationError):
        JobRecord(True)


def test_generator_input_accepted():
    assert schedule_sjf(t for t in [5, 3, 8]).as_tuple() == (16, 9)
