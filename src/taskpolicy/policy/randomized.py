"""
Randomized Priority policy:
 - before each attempt, a job is drawn at random with probability proportional to its priority
 - negative priorities are clamped to zero; if all remaining weights are zero, the draw is uniform
 - the drawn job yields a single node from the end of its node list
 - exhausted jobs are dropped, `do_not_run_more_tasks` stops the whole pass

Gives lower priority jobs a chance to run, at the cost of determinism -- pass a seed for
reproducible runs.
"""

import logging

import numpy as np

from taskpolicy.low.core import PendingWork, TaskRunnerCallback, TaskRunnerResponse
from taskpolicy.policy.api import try_to_schedule

logger = logging.getLogger(__name__)


def _weights(work: PendingWork) -> np.ndarray:
    weights = np.fromiter((entry.job.priority for entry in work), dtype=np.float64, count=len(work))
    # nan counts as zero, inf as the largest float. Scaling by the peak keeps the sum finite
    weights = np.nan_to_num(weights, nan=0.0, posinf=np.finfo(np.float64).max, neginf=0.0)
    weights = np.clip(weights, 0.0, None)
    peak = weights.max()
    if not peak > 0:
        return np.full(len(work), 1.0 / len(work))
    weights = weights / peak
    return weights / weights.sum()


def randomized_priority_schedule(work: PendingWork, launch: TaskRunnerCallback, rng: np.random.Generator) -> int:
    scheduled_tasks = 0
    work[:] = [entry for entry in work if entry.nodes]
    while work:
        i = int(rng.choice(len(work), p=_weights(work)))
        entry = work[i]
        node = entry.nodes.pop()
        response = try_to_schedule(node, entry, launch)
        if response == TaskRunnerResponse.ran_task:
            scheduled_tasks += 1
        elif response == TaskRunnerResponse.do_not_run_more_tasks:
            logger.debug(f"halted at {entry.job.name=} after {scheduled_tasks=}")
            return scheduled_tasks
        if not entry.nodes:
            work.pop(i)
    return scheduled_tasks


class RandomizedPriorityPolicy:
    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def schedule(self, work: PendingWork, launch: TaskRunnerCallback) -> int:
        return randomized_priority_schedule(work, launch, self.rng)

    def __repr__(self) -> str:
        return f"RandomizedPriorityPolicy(seed={self.seed})"
