"""Primary/replica selection for database engines.

Writes always go to the primary. Reads go to one of the replicas, picked by a
pluggable policy, or to the primary when no replica is configured.
"""
import random
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

Policy = Callable[[Sequence[T], random.Random], T]


def random_policy(replicas: Sequence[T], rng: random.Random) -> T:
    """Pick a replica uniformly at random."""
    return rng.choice(replicas)


class ReplicaRouter(Generic[T]):
    def __init__(
        self,
        primary: T,
        replicas: Sequence[T] = (),
        policy: Policy = random_policy,
        rng: Optional[random.Random] = None,
    ):
        if primary is None:
            raise ValueError("a primary connection is required")
        self.primary = primary
        self.replicas = tuple(replicas)
        self.policy = policy
        self.rng = rng or random.Random()

    def for_write(self) -> T:
        return self.primary

    def for_read(self) -> T:
        if not self.replicas:
            return self.primary
        return self.policy(self.replicas, self.rng)

    def all(self):
        return (self.primary, *self.replicas)
