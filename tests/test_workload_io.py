from pathlib import Path

import pytest

from batch_scheduler.errors import InvalidJobDurationError
from batch_scheduler.models import JobRecord
from batch_scheduler.workload_io import load_workload


def test_load_json_numbers(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text("[5, 3, 8]")
    jobs = load_workload(p)
    assert isinstance(jobs[0], JobRecord)
    assert [j.requested_time for j in jobs] == [5, 3, 8]
    assert [j.job_id for j in jobs] == ["J1", "J2", "J3"]


def test_load_json_objects(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"job_id":"A","requested_time":3},{"requested_time":2}]')
    jobs = load_workload(p)
    assert jobs[0].job_id == "A"
    assert jobs[1].job_id == "J2"
    assert jobs[1].requested_time == 2


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("job_id,requested_time\nA,3\n,2\n")
    jobs = load_workload(p)
    assert jobs[0].job_id == "A"
    assert jobs[1].job_id == "J2"
    assert jobs[1].remaining_time == 2


def test_unsupported_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("5")
    with pytest.raises(ValueError):
        load_workload(p)


def test_malformed_entry(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"job_id":"A"}]')
    with pytest.raises(ValueError):
        load_workload(p)


def test_non_positive_duration(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("requested_time\n4\n0\n")
    with pytest.raises(InvalidJobDurationError):
        load_workload(p)


@pytest.mark.parametrize("body", ["[5, 2.7]", "[true, 3]", '[{"requested_time": 1.5}]'])
def test_non_integral_json_duration(tmp_path: Path, body):
    p = tmp_path / "w.json"
    p.write_text(body)
    with pytest.raises(InvalidJobDurationError):
        load_workload(p)


def test_whole_float_duration_accepted(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text("[4.0, 2]")
    assert [j.requested_time for j in load_workload(p)] == [4, 2]
