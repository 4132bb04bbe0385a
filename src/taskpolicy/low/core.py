"""
Core data structures -- prescribes most of the API
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

# NOTE jobs and nodes are owned by configuration and cluster state respectively -- policies only
# read them, hence frozen. The JobWithNodes pairing on the other hand is consumed by the policy


class Job(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    priority: float = Field(
        description="higher runs first. No validation -- negative values participate in ordering as given"
    )
    owner: str = Field("", description="informative only, not considered by any policy")


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    level: str = Field("instance", description="eg host, rack, instance; informative only")


@dataclass
class JobWithNodes:
    """A job and the nodes eligible & unassigned for it. Policies drain `nodes` from the
    end, so callers wanting some node tried first should put it last"""

    job: Job
    nodes: list[Node] = field(default_factory=list)


# NOTE handed over to the policy exclusively for the duration of one `schedule` call, and mutated
# in place. Callers should rebuild it for the next tick
PendingWork = list[JobWithNodes]


class TaskRunnerResponse(str, Enum):
    ran_task = "ran_task"  # counts towards the result
    did_not_run_task = "did_not_run_task"  # try the next node
    do_not_run_more_tasks = "do_not_run_more_tasks"  # environment saturated, stop the whole pass


TaskRunnerCallback = Callable[[Node, Job], TaskRunnerResponse]
