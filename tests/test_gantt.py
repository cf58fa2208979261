from batch_scheduler.algorithms import schedule_fifo, schedule_rr
from batch_scheduler.gantt import build_rich_gantt, render_gantt
from batch_scheduler.models import make_batch


def test_render_fifo():
    chart = render_gantt(schedule_fifo(make_batch([2, 3])).timeline)
    lines = chart.splitlines()
    assert lines[0] == "Gantt Chart:"
    assert lines[1] == "|=====|"
    assert lines[2] == "J1J2 "
    assert lines[3] == "0  2  5"


def test_render_merges_back_to_back_slices():
    # J2 runs alone for its last two slices.
    res = schedule_rr(make_batch([1, 5]), quantum=2)
    assert len(res.timeline) == 4
    chart = render_gantt(res.timeline)
    assert chart.splitlines()[3] == "0  1  6"


def test_render_empty():
    assert render_gantt([]) == "(no execution)"


def test_rich_gantt_time_marks():
    panel, marks = build_rich_gantt(schedule_fifo(make_batch([2, 3])).timeline)
    assert marks == "0  2  5"
    assert panel.title == "Gantt Chart"


def test_rich_gantt_empty():
    _, marks = build_rich_gantt([])
    assert marks == ""
