"""
Scheduler policies for pairing pending jobs with eligible worker nodes.

A policy is invoked once per scheduling tick with a snapshot of the pending work
and a launch callback, and returns how many tasks it managed to start.
"""

from taskpolicy.version import __version__
