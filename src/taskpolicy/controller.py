"""
A single scheduling tick: hands the pending work over to a policy and reports how it went.

The loop repeating ticks, and the rebuilding of pending work in between, belong to the caller.
"""

import logging

from taskpolicy.low.core import PendingWork, TaskRunnerCallback
from taskpolicy.low.tracing import Microtrace, TickPhases, mark, timer
from taskpolicy.low.views import total_nodes
from taskpolicy.policy.api import SchedulerPolicy

logger = logging.getLogger(__name__)


def schedule_tick(policy: SchedulerPolicy, work: PendingWork, launch: TaskRunnerCallback) -> int:
    """Runs `policy` once over `work`, which is mutated in place. Returns the number of started tasks.
    Exceptions from `launch` are propagated"""
    mark({"action": TickPhases.start.value})
    logger.debug(f"scheduling {len(work)} jobs with {total_nodes(work)} nodes via {policy=}")
    try:
        mark({"action": TickPhases.schedule.value})
        scheduled = timer(policy.schedule, Microtrace.pol_schedule)(work, launch)
    except Exception:
        mark({"action": TickPhases.crash.value})
        logger.error(f"crash in {policy=}, {total_nodes(work)} nodes left unattempted")
        raise
    mark({"action": TickPhases.done.value, "scheduled": str(scheduled)})
    logger.debug(f"scheduled {scheduled} tasks, {total_nodes(work)} nodes left unattempted")
    return scheduled
