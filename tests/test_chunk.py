"""
Tests for chunk slots and the UNSET marker
"""

import copy
import pickle

import pytest

from big_array.chunk import UNSET, BranchChunk, LeafChunk, _Unset


class TestUnset:
    def test_singleton(self):
        assert _Unset() is UNSET
        assert copy.copy(UNSET) is UNSET
        assert copy.deepcopy(UNSET) is UNSET
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    def test_falsy_and_distinct_from_none(self):
        assert not UNSET
        assert UNSET is not None
        assert repr(UNSET) == "UNSET"


class TestChunk:
    def test_starts_empty(self):
        chunk = LeafChunk()
        assert chunk.occupied() == 0
        assert all(chunk.read(i) is UNSET for i in range(256))

    def test_write_read(self):
        chunk = LeafChunk()
        chunk.write(3, "x")
        assert chunk.read(3) == "x"
        assert not chunk.is_empty(3)
        assert chunk.is_empty(4)
        assert chunk.occupied() == 1

    def test_none_is_a_value(self):
        chunk = LeafChunk()
        chunk.write(0, None)
        assert chunk.read(0) is None
        assert not chunk.is_empty(0)

    def test_overwrite(self):
        chunk = LeafChunk()
        chunk.write(9, "a")
        chunk.write(9, "b")
        assert chunk.read(9) == "b"
        assert chunk.occupied() == 1

    def test_containers_stored_as_is(self):
        chunk = LeafChunk()
        value = [1, 2, 3]
        chunk.write(1, value)
        assert chunk.read(1) is value

    @pytest.mark.parametrize("index", [-1, 256, 1000])
    def test_index_out_of_range(self, index):
        chunk = BranchChunk()
        with pytest.raises(IndexError):
            chunk.read(index)
        with pytest.raises(IndexError):
            chunk.write(index, "x")


class TestBranchChunk:
    def test_get_or_create_once(self):
        branch = BranchChunk()
        made = []

        def factory():
            made.append(LeafChunk())
            return made[-1]

        first = branch.get_or_create(7, factory)
        second = branch.get_or_create(7, factory)
        assert first is second is made[0]
        assert len(made) == 1
        assert branch.occupied() == 1


class TestLeafChunk:
    def test_read_many(self):
        leaf = LeafChunk()
        leaf.write(10, "a")
        leaf.write(12, None)
        assert leaf.read_many(9, 5) == [UNSET, "a", UNSET, None, UNSET]
        assert leaf.read_many(9, 2, default=0) == [0, "a"]
        assert leaf.read_many(255, 0) == []

    def test_read_many_past_end(self):
        with pytest.raises(IndexError):
            LeafChunk().read_many(250, 10)
