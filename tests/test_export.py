"""Tests for msgpack snapshots of a SkipMap."""
import msgpack
import pytest

from skipmap import InvalidKeyError, SkipMap
from skipmap.comparators import reverse_order
from skipmap.export import pack, unpack


@pytest.fixture
def sample():
    slm = SkipMap()
    for key, val in [(b"key3", b"value3"), (b"key1", b"value1"), (b"key2", None)]:
        slm.set(key, val)
    return slm


def test_pack_is_ordered_pairs(sample):
    """The snapshot is a plain msgpack array in key order."""
    assert msgpack.unpackb(pack(sample), raw=False) == [
        [b"key1", b"value1"],
        [b"key2", None],
        [b"key3", b"value3"],
    ]


def test_unpack_restores_entries(sample):
    restored = unpack(pack(sample))
    assert list(restored.items()) == list(sample.items())
    assert len(restored) == 3


def test_unpack_with_comparator(sample):
    restored = unpack(pack(sample), comparator=reverse_order)
    assert list(restored.keys()) == [b"key3", b"key2", b"key1"]


def test_empty_map():
    assert len(unpack(pack(SkipMap()))) == 0


@pytest.mark.parametrize("blob", [
    msgpack.packb({"a": 1}),
    msgpack.packb([[1, 2, 3]]),
    msgpack.packb([1]),
    b"\xc1",
])
def test_malformed_snapshot(blob):
    with pytest.raises(ValueError):
        unpack(blob)


def test_none_key_in_snapshot():
    with pytest.raises(InvalidKeyError):
        unpack(msgpack.packb([[None, 1]]))


def test_nested_maps_with_non_string_keys():
    """Values holding maps keyed by ints come back unchanged."""
    slm = SkipMap()
    slm.set(1, {2: "two", 3: [4, 5]})
    restored = unpack(pack(slm))
    assert list(restored.items()) == [(1, {2: "two", 3: [4, 5]})]


def test_tuple_keys_stay_tuples():
    """Tuple keys and values keep their type; lists stay lists."""
    slm = SkipMap()
    slm.set((1, 2), "a")
    slm.set((0, (9, 9)), [1, (2, 3)])
    restored = unpack(pack(slm))
    assert list(restored.items()) == [((0, (9, 9)), [1, (2, 3)]), ((1, 2), "a")]
    assert restored.get((1, 2)) == "a"


def test_subclassed_values_pack_as_base_types():
    from collections import OrderedDict
    from enum import IntEnum

    class Colour(IntEnum):
        RED = 1

    slm = SkipMap()
    slm.set(b"k", [Colour.RED, OrderedDict(a=1), bytearray(b"xy")])
    assert unpack(pack(slm)).get(b"k") == [1, {"a": 1}, b"xy"]
