"""
Utility functions for building and inspecting pending work
"""

from typing import Iterable

from taskpolicy.low.core import Job, JobWithNodes, Node, PendingWork


def pending_work(jobs: Iterable[Job], eligible: dict[str, list[Node]]) -> PendingWork:
    """Pairs each job with its eligible nodes, keyed by job name. Jobs missing from `eligible`
    get an empty node list. Node lists are copied, so the policy draining them does not
    affect `eligible`"""
    return [JobWithNodes(job=job, nodes=list(eligible.get(job.name, []))) for job in jobs]


def remaining_nodes(work: PendingWork) -> dict[str, list[Node]]:
    """Returns map[job_name] = nodes not yet drained, omitting exhausted jobs"""
    return {entry.job.name: list(entry.nodes) for entry in work if entry.nodes}


def total_nodes(work: PendingWork) -> int:
    return sum(len(entry.nodes) for entry in work)
