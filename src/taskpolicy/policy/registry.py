"""
Lookup of policies by name, so that the outer loop can be configured rather than coded
"""

import logging
from typing import Callable

from taskpolicy.config import PolicyConfig
from taskpolicy.low.func import Either
from taskpolicy.policy.api import SchedulerPolicy
from taskpolicy.policy.randomized import RandomizedPriorityPolicy
from taskpolicy.policy.ranked import RankedPriorityPolicy
from taskpolicy.policy.roundrobin import RoundRobinPolicy

logger = logging.getLogger(__name__)

PolicyFactory = Callable[[PolicyConfig], SchedulerPolicy]

_registry: dict[str, PolicyFactory] = {
    "ranked_priority": lambda config: RankedPriorityPolicy(),
    "round_robin": lambda config: RoundRobinPolicy(),
    "randomized_priority": lambda config: RandomizedPriorityPolicy(seed=config.seed),
}


def register(name: str, factory: PolicyFactory) -> None:
    if name in _registry:
        raise ValueError(f"policy {name} already registered")
    _registry[name] = factory


def available_policies() -> list[str]:
    return sorted(_registry.keys())


def get_policy(config: PolicyConfig) -> Either[SchedulerPolicy, str]:
    factory = _registry.get(config.name, None)
    if factory is None:
        return Either.error(f"unknown policy {config.name}, available: {', '.join(available_policies())}")
    policy = factory(config)
    logger.debug(f"instantiated {policy=} from {config=}")
    return Either.ok(policy)
