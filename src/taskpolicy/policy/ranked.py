"""
Ranked Priority policy:
 - jobs are visited in descending priority, ties broken arbitrarily
 - each job is drained greedily, taking nodes from the end of its node list
 - a node is removed before its outcome is inspected, ie, attempted at most once per pass
 - `do_not_run_more_tasks` stops the whole pass, not just the current job
 - no fairness or aging -- lower priority jobs starve if higher ones keep consuming nodes
"""

import logging

from taskpolicy.low.core import PendingWork, TaskRunnerCallback, TaskRunnerResponse
from taskpolicy.policy.api import try_to_schedule

logger = logging.getLogger(__name__)


def ranked_priority_schedule(work: PendingWork, launch: TaskRunnerCallback) -> int:
    work.sort(key=lambda entry: entry.job.priority, reverse=True)

    scheduled_tasks = 0
    # NOTE exhausted entries, be it on arrival or by draining, are cut off in one go when the pass ends,
    # so that after a full pass `work` is empty, and after a halt it starts with the interrupted entry
    for i, entry in enumerate(work):
        while entry.nodes:
            node = entry.nodes.pop()
            response = try_to_schedule(node, entry, launch)
            if response == TaskRunnerResponse.ran_task:
                scheduled_tasks += 1
            elif response == TaskRunnerResponse.do_not_run_more_tasks:
                logger.debug(f"halted at {entry.job.name=} after {scheduled_tasks=}")
                del work[:i]
                return scheduled_tasks
    work.clear()
    return scheduled_tasks


class RankedPriorityPolicy:
    def schedule(self, work: PendingWork, launch: TaskRunnerCallback) -> int:
        return ranked_priority_schedule(work, launch)

    def __repr__(self) -> str:
        return "RankedPriorityPolicy()"
