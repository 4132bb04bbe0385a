"""
Policy module is responsible for determining the order in which (node, job) pairs
are offered to the task runner during one scheduling tick.

There are multiple submodules:
 - api: the SchedulerPolicy protocol and the single-attempt helper
 - ranked: strict priority order, greedy per job
 - roundrobin: one node per job per round
 - randomized: priority-weighted random choice of job per attempt
 - registry: lookup of policies by configured name

The outer loop is expected to obtain a policy via the `registry` and then only
interact with it via `SchedulerPolicy.schedule`.
"""
