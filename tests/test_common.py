import pytest

from prefix_trie import BytesTrie, StringTrie, Trie


def test_common_ranks_by_coverage(stems):
    assert stems.common("", 3) == ["car", "prob", "foo"]


def test_common_skips_pass_through_nodes():
    t = StringTrie()
    t.add("abcdef", 1)
    t.add("abcdeg", 2)

    # "abc" and "abcd" have a single child and no value.
    assert t.common("", 2) == ["abcde"]


def test_common_ties_keep_traversal_order():
    t = StringTrie()
    for key in ["xa", "xb", "ya", "yb", "za"]:
        t.add(key, None)

    # "z" only leads to "za", so the stored key itself is reported.
    assert t.common("", 1) == ["x", "y", "za"]


def test_common_explores_siblings_of_reported_nodes():
    t = StringTrie()
    t.add("ab", 1)
    t.add("ac", 2)
    t.add("acd", 3)

    assert t.common("a", 0) == ["ac", "ab"]


def test_common_below_prefix(stems):
    assert stems.common("car", 3) == ["cart", "carpet"]
    assert stems.common("pro", 4) == ["prob"]
    assert stems.common("prob", 0) == ["probability", "probe", "problem"]


def test_common_budget_counts_the_prefix(stems):
    # The budget left after "ca" is 3, so "car" already qualifies.
    assert stems.common("ca", 5) == ["car"]


def test_common_never_reports_the_prefix_itself(stems):
    assert "car" not in stems.common("car", 0)


def test_common_long_min_length(stems):
    assert stems.common("", 8) == ["cartridge", "probability"]
    assert stems.common("", 20) == []


@pytest.mark.parametrize("prefix", ["x", "carz"])
def test_common_missing_prefix(stems, prefix):
    assert stems.common(prefix, 3) == []


def test_common_empty_trie():
    assert StringTrie().common("", 0) == []


@pytest.mark.parametrize("min_length", [1, 2, 3, 4, 5, 6])
def test_common_covers_every_long_key(stems, min_length):
    reported = stems.common("", min_length)

    for key in stems:
        if len(key) < min_length:
            continue
        owners = [p for p in reported if key.startswith(p)]
        assert len(owners) == 1, (key, reported)


def test_common_after_delete(stems):
    stems.delete("carpet")
    stems.delete("cartridge")
    stems.delete("cart")

    assert stems.common("", 3) == ["prob", "foo", "car"]


def test_common_bytes():
    t = BytesTrie()
    t.add(b"GET /a", 1)
    t.add(b"GET /b", 2)
    t.add(b"PUT /a", 3)

    assert t.common(b"", 3) == [b"GET /", b"PUT /a"]


def test_common_generic():
    t = Trie()
    t.add(["a", "b", "c"], 1)
    t.add(["a", "b", "d"], 2)
    t.add(["e"], 3)

    assert t.common(None, 1) == [("a", "b"), ("e",)]
