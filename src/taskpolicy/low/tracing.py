"""
Interface for tracing important events that can be used for extracting performance information

Currently, the export is handled just by logging, assuming to be parsed later. We log at debug
level since this is assumed to be high level tracing
"""

import logging
import time
from enum import Enum
from functools import wraps
from typing import Callable, TypeVar

d: dict[str, str] = {}

logger = logging.getLogger(__name__)

R = TypeVar("R")


class TickPhases(str, Enum):
    start = "tick_start"
    schedule = "tick_schedule"
    done = "tick_done"
    crash = "tick_crash"


class AttemptLifecycle(str, Enum):
    attempted = "attempt_attempted"
    ran = "attempt_ran"
    skipped = "attempt_skipped"
    halted = "attempt_halted"


class Microtrace(str, Enum):
    pol_schedule = "pol_schedule"
    pol_launch = "pol_launch"


def _labels(labels: dict) -> str:
    return ";".join(f"{k}={v}" for k, v in labels.items())


def label(key: str, value: str) -> None:
    """Makes all subsequent marks contain this KV"""
    global d
    d[key] = value


def mark(labels: dict) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    at = time.perf_counter_ns()
    event = _labels({**d, **labels})
    logger.debug(f"{event};{at=}")


def trace(kind: Microtrace, value_ns: int) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(f"microtrace={kind.value};ns={value_ns}")


def timer(f: Callable[..., R], kind: Microtrace) -> Callable[..., R]:
    """Wraps `f` such that each invocation's duration is traced under `kind`. Exceptions are traced too"""

    @wraps(f)
    def wrapper(*args, **kwargs) -> R:
        start = time.perf_counter_ns()
        try:
            return f(*args, **kwargs)
        finally:
            trace(kind, time.perf_counter_ns() - start)

    return wrapper
