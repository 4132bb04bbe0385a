"""
Defines the SchedulerPolicy protocol, and the single-attempt helper all policies launch through
"""

from typing import Callable, Protocol, runtime_checkable

from taskpolicy.low.core import JobWithNodes, Node, PendingWork, TaskRunnerCallback, TaskRunnerResponse
from taskpolicy.low.func import assert_never
from taskpolicy.low.tracing import AttemptLifecycle, Microtrace, mark, timer


@runtime_checkable
class SchedulerPolicy(Protocol):
    def schedule(self, work: PendingWork, launch: TaskRunnerCallback) -> int:
        """Offers (node, job) pairs from `work` to `launch` in the policy's order, until all nodes
        are drained or `launch` asks to stop. `work` is mutated in place. Returns the number of
        tasks that were started"""
        raise NotImplementedError


class ClasslessPolicy:
    def __init__(self, f: Callable[[PendingWork, TaskRunnerCallback], int]) -> None:
        self.f = f

    def schedule(self, work: PendingWork, launch: TaskRunnerCallback) -> int:
        return self.f(work, launch)

    def __repr__(self) -> str:
        return f"ClasslessPolicy({self.f.__name__})"


def try_to_schedule(node: Node, entry: JobWithNodes, launch: TaskRunnerCallback) -> TaskRunnerResponse:
    """Attempts exactly one launch, returning the response as is"""
    mark({"job": entry.job.name, "node": node.name, "action": AttemptLifecycle.attempted.value})
    response = timer(launch, Microtrace.pol_launch)(node, entry.job)
    if response == TaskRunnerResponse.ran_task:
        lifecycle = AttemptLifecycle.ran
    elif response == TaskRunnerResponse.did_not_run_task:
        lifecycle = AttemptLifecycle.skipped
    elif response == TaskRunnerResponse.do_not_run_more_tasks:
        lifecycle = AttemptLifecycle.halted
    else:
        assert_never(response)
    mark({"job": entry.job.name, "node": node.name, "action": lifecycle.value})
    return response
