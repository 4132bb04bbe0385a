from dataclasses import dataclass, field

import pytest

from taskpolicy.low.core import Job, JobWithNodes, Node, TaskRunnerResponse


@dataclass
class RecordingLauncher:
    """Replies with `responses` in order, then with `default`. Records every (node, job) it was offered"""

    responses: list[TaskRunnerResponse] = field(default_factory=list)
    default: TaskRunnerResponse = TaskRunnerResponse.ran_task
    calls: list[tuple[str, str]] = field(default_factory=list)

    def __call__(self, node: Node, job: Job) -> TaskRunnerResponse:
        self.calls.append((node.name, job.name))
        if len(self.calls) <= len(self.responses):
            return self.responses[len(self.calls) - 1]
        return self.default


def entry(name: str, priority: float, *nodes: str) -> JobWithNodes:
    return JobWithNodes(job=Job(name=name, priority=priority), nodes=[Node(name=n) for n in nodes])


@pytest.fixture(scope="function")
def launcher():
    return RecordingLauncher()


@pytest.fixture(scope="function")
def work_ab():
    """A (priority 10, nodes n1 n2), B (priority 5, node n3) -- given in reverse priority order"""
    return [entry("B", 5, "n3"), entry("A", 10, "n1", "n2")]


@pytest.fixture(scope="function")
def make_entry():
    return entry


@pytest.fixture(scope="function")
def make_launcher():
    return RecordingLauncher
