"""Randomized operation sequences checked against a reference set."""
import random

import pytest

from skipmap import SkipMap, SkipMapConfig

from helpers import Recorder, check_invariants, value

SEEDS = [0, 1, 7, 42, 2024]


@pytest.fixture
def recorder():
    return Recorder(SkipMap(lambda i, j: i - j, config=SkipMapConfig(seed=99)))


@pytest.mark.parametrize("seed", SEEDS)
def test_ordered(recorder, seed):
    """A randomly built map iterates in strictly increasing order."""
    rng = random.Random(seed)
    for _ in range(100):
        recorder.set(rng.randrange(1000))
    keys = list(recorder.slm.keys())
    assert keys == sorted(set(keys)), recorder.replay()


@pytest.mark.parametrize("seed", SEEDS)
def test_contains_only_add(recorder, seed):
    """Every added key can be found again."""
    rng = random.Random(seed)
    keys = [rng.randrange(200) for _ in range(100)]
    for key in keys:
        recorder.set(key)
    missing = [k for k in keys if not recorder.slm.contains_key(k)]
    assert not missing, recorder.replay()
    assert len(recorder.slm) == len(set(keys))


@pytest.mark.parametrize("seed", SEEDS)
def test_round_trip(recorder, seed):
    """Random set/remove interleavings agree with a plain Python set."""
    rng = random.Random(seed)
    slm = recorder.slm
    reference = set()
    for _ in range(1000):
        key = rng.randrange(1000)
        if rng.random() < 0.5:
            recorder.set(key)
            reference.add(key)
            assert slm.contains_key(key), recorder.replay()
        else:
            removed = recorder.remove(key)
            if key in reference:
                assert removed == value(key), recorder.replay()
                reference.discard(key)
            else:
                assert removed is None, recorder.replay()
            assert not slm.contains_key(key), recorder.replay()
        assert len(slm) == len(reference), recorder.replay()
    assert list(slm.keys()) == sorted(reference), recorder.replay()
    check_invariants(slm)


@pytest.mark.parametrize("seed", SEEDS)
def test_invariants_after_every_step(seed):
    """Structural invariants hold after each mutation on a small universe."""
    rng = random.Random(seed)
    slm = SkipMap(config=SkipMapConfig(max_height=6, probability=0.5, seed=seed))
    recorder = Recorder(slm)
    for _ in range(300):
        key = rng.randrange(40)
        if rng.random() < 0.6:
            recorder.set(key)
        else:
            recorder.remove(key)
        try:
            check_invariants(slm)
        except AssertionError as exc:
            raise AssertionError(recorder.replay()) from exc


@pytest.mark.parametrize("probability", [0.25, 0.5, 0.75])
def test_probabilities(probability):
    slm = SkipMap(config=SkipMapConfig(probability=probability, seed=5))
    for i in range(500):
        slm.set(i, i)
    check_invariants(slm)
    for i in range(0, 500, 3):
        slm.remove(i)
    check_invariants(slm)
