"""Shared assertions for the skip-map test-suite."""
from skipmap import SkipMap
from skipmap.numerals import spell


def value(i):
    """Demo value stored under integer key *i*."""
    return spell(i)


def check_invariants(slm: SkipMap):
    """Assert every structural invariant of *slm*."""
    cmp = slm.comparator
    keys = list(slm.keys())
    heights = dict(slm.node_heights())

    # Strictly ordered level 0, size matches.
    assert all(cmp(a, b) < 0 for a, b in zip(keys, keys[1:])), keys
    assert len(keys) == len(slm)

    # Every level is an ordered subsequence made of nodes tall enough.
    for level in range(slm.max_height):
        level_keys = list(slm.level_keys(level))
        assert all(cmp(a, b) < 0 for a, b in zip(level_keys, level_keys[1:]))
        assert set(level_keys) <= set(keys)
        expected = [k for k in keys if heights[k] > level]
        assert level_keys == expected, f"level {level}: {level_keys} != {expected}"

    # Height is tight.
    tallest = max(heights.values(), default=1)
    assert slm.height == tallest
    assert 1 <= slm.height <= slm.max_height


class Recorder:
    """Wraps a map and logs every mutation so failures are reproducible."""

    def __init__(self, slm: SkipMap):
        self.slm = slm
        self.operations = []

    def set(self, key):
        self.operations.append(f"set({key!r})")
        return self.slm.set(key, value(key))

    def remove(self, key):
        self.operations.append(f"remove({key!r})")
        return self.slm.remove(key)

    def log(self, message):
        self.operations.append(f"# {message}")

    def replay(self):
        return "\n".join(self.operations)
