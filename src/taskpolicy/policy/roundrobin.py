"""
Round Robin policy:
 - jobs are visited in the order given, priority is ignored
 - each visit takes a single node from the end of the job's node list
 - exhausted jobs are dropped, and rounds repeat until nothing is left
 - `do_not_run_more_tasks` stops the whole pass
"""

import logging

from taskpolicy.low.core import PendingWork, TaskRunnerCallback, TaskRunnerResponse
from taskpolicy.policy.api import try_to_schedule

logger = logging.getLogger(__name__)


def round_robin_schedule(work: PendingWork, launch: TaskRunnerCallback) -> int:
    scheduled_tasks = 0
    rounds = 0
    while work:
        work[:] = [entry for entry in work if entry.nodes]
        for entry in work:
            node = entry.nodes.pop()
            response = try_to_schedule(node, entry, launch)
            if response == TaskRunnerResponse.ran_task:
                scheduled_tasks += 1
            elif response == TaskRunnerResponse.do_not_run_more_tasks:
                logger.debug(f"halted at {entry.job.name=} in {rounds=} after {scheduled_tasks=}")
                return scheduled_tasks
        rounds += 1
    return scheduled_tasks


class RoundRobinPolicy:
    def schedule(self, work: PendingWork, launch: TaskRunnerCallback) -> int:
        return round_robin_schedule(work, launch)

    def __repr__(self) -> str:
        return "RoundRobinPolicy()"
