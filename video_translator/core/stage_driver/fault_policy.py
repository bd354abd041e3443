"""
Fault injection policies.

A policy decides, once per job at submission time, whether the job will be
routed to the error state instead of progressing.

Dependencies: random (stdlib)
System role: Injectable failure decision for the stage driver
"""

import random
from typing import Callable

from video_translator.models.job import JobRecord

FailurePolicy = Callable[[JobRecord], bool]


def probabilistic_failure(
    probability: float = 0.1,
    rng: random.Random | None = None,
) -> FailurePolicy:
    """
    Fail each job independently with the given probability.

    Args:
        probability: Chance in [0, 1] that a job fails
        rng: Random source; pass a seeded Random for reproducible runs
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be within [0, 1], got {probability}")
    source = rng or random.Random()

    def policy(job: JobRecord) -> bool:
        return source.random() < probability

    return policy


def never_fail(job: JobRecord) -> bool:
    return False


def always_fail(job: JobRecord) -> bool:
    return True
