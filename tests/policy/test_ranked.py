"""
Tests the ranked priority policy: ordering, draining, halting
"""

import pytest

from taskpolicy.low.core import TaskRunnerResponse
from taskpolicy.policy.api import SchedulerPolicy
from taskpolicy.policy.ranked import RankedPriorityPolicy, ranked_priority_schedule

ran = TaskRunnerResponse.ran_task
skip = TaskRunnerResponse.did_not_run_task
halt = TaskRunnerResponse.do_not_run_more_tasks


def test_is_policy():
    assert isinstance(RankedPriorityPolicy(), SchedulerPolicy)


def test_two_jobs(work_ab, launcher):
    assert RankedPriorityPolicy().schedule(work_ab, launcher) == 3
    assert launcher.calls == [("n2", "A"), ("n1", "A"), ("n3", "B")]
    assert work_ab == []


def test_priority_ordering(make_entry, launcher):
    work = [
        make_entry("low", -1, "a", "b"),
        make_entry("high", 100, "c", "d"),
        make_entry("mid", 3.5, "e"),
    ]
    assert ranked_priority_schedule(work, launcher) == 5
    jobs = [job for _, job in launcher.calls]
    assert jobs == ["high", "high", "mid", "low", "low"]


def test_greedy_draining(make_entry, launcher):
    only = make_entry("only", 1, *(f"n{i}" for i in range(7)))
    work = [only]
    assert ranked_priority_schedule(work, launcher) == 7
    assert only.nodes == []
    assert [node for node, _ in launcher.calls] == [f"n{i}" for i in reversed(range(7))]


def test_empty_entries(make_entry, launcher):
    work = [make_entry("empty", 50), make_entry("full", 1, "n1"), make_entry("empty2", 0)]
    assert ranked_priority_schedule(work, launcher) == 1
    assert launcher.calls == [("n1", "full")]
    assert work == []


def test_nothing(launcher):
    assert ranked_priority_schedule([], launcher) == 0
    assert launcher.calls == []


def test_halt(make_entry, make_launcher):
    launcher = make_launcher(responses=[ran, skip, ran, halt])
    high = make_entry("high", 10, "a", "b", "c", "d", "e")
    low = make_entry("low", 1, "f")
    work = [low, high]
    assert ranked_priority_schedule(work, launcher) == 2
    assert len(launcher.calls) == 4
    # the halting node is consumed, the rest is left over for the caller
    assert [n.name for n in high.nodes] == ["a"]
    assert [n.name for n in low.nodes] == ["f"]
    assert work == [high, low]


def test_halt_first(work_ab, make_launcher):
    launcher = make_launcher(default=halt)
    assert ranked_priority_schedule(work_ab, launcher) == 0
    assert launcher.calls == [("n2", "A")]


def test_halt_in_lower_job(work_ab, make_launcher):
    launcher = make_launcher(responses=[ran, ran, halt])
    assert ranked_priority_schedule(work_ab, launcher) == 2
    assert launcher.calls == [("n2", "A"), ("n1", "A"), ("n3", "B")]
    # the exhausted higher job is cut off, the interrupted one leads
    assert [e.job.name for e in work_ab] == ["B"]


def test_skips_are_inert(make_entry, make_launcher):
    def run(responses):
        launcher = make_launcher(responses=responses)
        work = [make_entry("x", 2, "a", "b", "c"), make_entry("y", 1, "d", "e")]
        return ranked_priority_schedule(work, launcher), launcher.calls

    all_ran, calls_ran = run([ran, ran, ran, ran, ran])
    one_skipped, calls_skipped = run([ran, skip, ran, ran, ran])
    assert all_ran == 5
    assert one_skipped == 4
    assert calls_ran == calls_skipped

    all_skipped, _ = run([skip] * 5)
    assert all_skipped == 0


def test_second_pass_is_empty(work_ab, make_launcher):
    policy = RankedPriorityPolicy()
    assert policy.schedule(work_ab, make_launcher()) == 3
    second = make_launcher()
    assert policy.schedule(work_ab, second) == 0
    assert second.calls == []


def test_second_pass_after_halt(work_ab, make_launcher):
    policy = RankedPriorityPolicy()
    assert policy.schedule(work_ab, make_launcher(responses=[ran, halt])) == 1
    second = make_launcher()
    assert policy.schedule(work_ab, second) == 1
    assert second.calls == [("n3", "B")]
    assert policy.schedule(work_ab, make_launcher()) == 0


def test_unknown_response(work_ab):
    with pytest.raises(TypeError):
        ranked_priority_schedule(work_ab, lambda node, job: True)


def test_many_jobs(make_entry, make_launcher):
    work = [make_entry(f"j{i}", i, f"n{i}") for i in range(5000)]
    launcher = make_launcher(responses=[ran] * 2999 + [halt])
    assert ranked_priority_schedule(work, launcher) == 2999
    assert launcher.calls[0] == ("n4999", "j4999")
    assert [e.job.name for e in work[:2]] == ["j2000", "j1999"]
    assert len(work) == 2001
    assert work[0].nodes == []


def test_nan_priority(make_entry, launcher):
    work = [make_entry("x", float("nan"), "a"), make_entry("y", 1, "b")]
    assert ranked_priority_schedule(work, launcher) == 2
    assert work == []
