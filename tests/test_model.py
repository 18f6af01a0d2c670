import random

import pytest

from prefix_trie import StringTrie


def random_key(rng):
    return "".join(rng.choice("abc") for _ in range(rng.randint(0, 5)))


def check_against(t, model):
    for key, value in model.items():
        assert t.find(key) == (value, True)
    assert len(t) == len(model)
    assert list(t) == sorted(model)

    for node, depth in t.walk_nodes():
        if depth > 0:
            assert not node.is_empty()

    for min_length in range(0, 6):
        reported = t.common("", min_length)
        for key in model:
            # The query prefix itself is never reported, so skip the empty key.
            if key and len(key) >= min_length:
                assert sum(key.startswith(p) for p in reported) == 1, (key, reported)


@pytest.mark.parametrize("seed", range(20))
def test_random_adds_and_deletes_match_dict(seed):
    rng = random.Random(seed)
    t = StringTrie()
    model = {}

    for step in range(200):
        key = random_key(rng)
        if rng.random() < 0.6:
            t.add(key, step)
            model[key] = step
        else:
            assert t.delete(key) == (key in model)
            model.pop(key, None)
            assert t.find(key) == (None, False)

    check_against(t, model)

    for key in list(model):
        assert t.delete(key)
        del model[key]
    check_against(t, model)
    assert str(t) == "root\n"
