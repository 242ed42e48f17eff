import random
from collections import Counter

import pytest

from payment_service.replica import ReplicaRouter, random_policy


def test_reads_go_to_primary_without_replicas():
    router = ReplicaRouter("primary")

    assert all(router.for_read() == "primary" for _ in range(50))


def test_writes_never_reach_a_replica():
    router = ReplicaRouter("primary", ["r1", "r2"], rng=random.Random(7))

    assert all(router.for_write() == "primary" for _ in range(50))


def test_reads_spread_over_every_replica():
    router = ReplicaRouter("primary", ["r1", "r2", "r3"], rng=random.Random(42))

    counts = Counter(router.for_read() for _ in range(600))

    assert set(counts) == {"r1", "r2", "r3"}
    assert "primary" not in counts


def test_random_policy_is_deterministic_for_a_seed():
    replicas = ["a", "b", "c", "d"]

    first = [random_policy(replicas, random.Random(3)) for _ in range(5)]
    second = [random_policy(replicas, random.Random(3)) for _ in range(5)]

    assert first == second
    assert first[0] in replicas


def test_custom_policy_is_used():
    calls = []

    def first_replica(replicas, rng):
        calls.append(tuple(replicas))
        return replicas[0]

    router = ReplicaRouter("primary", ["r1", "r2"], policy=first_replica)

    assert router.for_read() == "r1"
    assert calls == [("r1", "r2")]


def test_primary_is_mandatory():
    with pytest.raises(ValueError):
        ReplicaRouter(None, ["r1"])


def test_replica_list_is_fixed_at_construction():
    replicas = ["r1"]
    router = ReplicaRouter("primary", replicas)
    replicas.append("r2")

    assert router.replicas == ("r1",)
    assert router.all() == ("primary", "r1")
