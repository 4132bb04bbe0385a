"""
Entrypoint for running a synthetic throughput benchmark of the policies

Example:
```
python -m taskpolicy.benchmarks --policy ranked_priority --jobs 100 --nodes 50 --capacity 2000
```

The launch callback is simulated: every attempt succeeds with probability `success_rate`, and
once `capacity` tasks are running the callback signals to stop.
"""

import logging
import logging.config
from time import perf_counter_ns

import fire
import numpy as np

from taskpolicy.config import PolicyConfig, logging_config
from taskpolicy.controller import schedule_tick
from taskpolicy.low.core import Job, JobWithNodes, Node, PendingWork, TaskRunnerCallback, TaskRunnerResponse
from taskpolicy.low.tracing import label
from taskpolicy.policy.registry import get_policy

logger = logging.getLogger("taskpolicy.benchmarks")


def get_work(jobs: int, nodes: int, rng: np.random.Generator) -> PendingWork:
    node_pool = [Node(name=f"n{i}") for i in range(nodes)]
    return [
        JobWithNodes(
            job=Job(name=f"j{i}", priority=float(rng.integers(0, 100))),
            nodes=[node_pool[k] for k in rng.permutation(nodes)],
        )
        for i in range(jobs)
    ]


def get_launch(capacity: int, success_rate: float, rng: np.random.Generator) -> TaskRunnerCallback:
    running = 0

    def launch(node: Node, job: Job) -> TaskRunnerResponse:
        nonlocal running
        if running >= capacity:
            return TaskRunnerResponse.do_not_run_more_tasks
        if rng.random() >= success_rate:
            return TaskRunnerResponse.did_not_run_task
        running += 1
        return TaskRunnerResponse.ran_task

    return launch


def main(
    policy: str = "ranked_priority",
    jobs: int = 100,
    nodes: int = 50,
    capacity: int = 2000,
    success_rate: float = 0.9,
    seed: int = 0,
    debug: bool = False,
) -> None:
    logging.config.dictConfig(logging_config)
    label("entrypoint", "benchmark")
    if debug:
        logging.getLogger("taskpolicy").setLevel(logging.DEBUG)
        logging.getLogger("taskpolicy.low.tracing").setLevel(logging.DEBUG)

    instance = get_policy(PolicyConfig(name=policy, seed=seed)).get_or_raise()
    rng = np.random.default_rng(seed)
    work = get_work(jobs, nodes, rng)
    launch = get_launch(capacity, success_rate, rng)
    logger.debug(f"benchmarking {instance=} with {jobs=} {nodes=} {capacity=}")

    start = perf_counter_ns()
    scheduled = schedule_tick(instance, work, launch)
    end = perf_counter_ns()
    print(f"{policy} scheduled {scheduled} tasks out of {jobs * nodes} candidates in {(end-start)/1e6:.3f}ms")


if __name__ == "__main__":
    fire.Fire(main)
