import pytest

from routefinder.hashing import HashFunction


def test_default_table_size():
    assert HashFunction().table_size == 10


def test_small_keys_map_to_themselves():
    h = HashFunction()
    assert h.get_hash(7) == 7


def test_keys_wrap_around_table():
    h = HashFunction(10)
    assert h.get_hash(17) == h.get_hash(7)
    assert h.get_hash(10) == h.get_hash(0)


@pytest.mark.parametrize("key", [0, 5, 123, 9999, -4])
def test_hash_in_range(key):
    h = HashFunction(13)
    assert 0 <= h.get_hash(key) < 13
    assert h.get_hash(key + 13) == h.get_hash(key)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_table_size(size):
    with pytest.raises(ValueError):
        HashFunction(size)