"""
Configuration of the policy selection, and of logging for entrypoints
"""

import os

from pydantic import BaseModel, Field
from typing_extensions import Self

POLICY_ENVVAR = "TASKPOLICY_POLICY"
SEED_ENVVAR = "TASKPOLICY_SEED"


class PolicyConfig(BaseModel):
    name: str = Field("ranked_priority", description="key into the policy registry")
    seed: int | None = Field(None, description="for policies with randomness, None means nondeterministic")

    @classmethod
    def from_env(cls) -> Self:
        """Missing envvars fall back to defaults. Malformed values raise pydantic's ValidationError"""
        values: dict[str, str] = {}
        if name := os.environ.get(POLICY_ENVVAR, ""):
            values["name"] = name
        if seed := os.environ.get(SEED_ENVVAR, ""):
            values["seed"] = seed
        return cls.model_validate(values)


logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s %(process)d %(message)s",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "taskpolicy": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "taskpolicy.low.tracing": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}
