import pytest

from prefix_trie import StringTrie


@pytest.fixture
def words():
    """Keys from the ban/banana lookup scenario."""
    t = StringTrie()
    for key, value in [("ban", 1), ("banana", 2), ("boo", 3), ("bandana", 4), ("foo", 5)]:
        t.add(key, value)
    return t


@pytest.fixture
def stems():
    t = StringTrie()
    entries = {
        "car": 3, "carpet": 4, "cart": 5, "cartridge": 9,
        "probe": 10, "problem": 11, "probability": 12,
        "foo": 1, "food": 2,
    }
    for key, value in entries.items():
        t.add(key, value)
    return t
