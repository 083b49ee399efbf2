import pytest
from hypothesis import given, strategies as st

from algokit.dictionary import Dictionary, get_next_prime
from algokit.primes import test_prime as trial_prime


def test_next_prime_from_table():
    assert get_next_prime(0) == 3
    assert get_next_prime(4) == 7
    assert get_next_prime(7199369) == 7199369


def test_next_prime_beyond_table():
    n = 7199370
    p = get_next_prime(n)
    assert p >= n
    assert trial_prime(p)
    assert (p - 1) % 101 != 0


def test_next_prime_negative():
    with pytest.raises(ValueError):
        get_next_prime(-1)


def test_add_remove_update_sequence():
    d = Dictionary()
    assert d.add(0, 1)
    assert d.add(1, 2)
    assert d.add(5, 2)
    assert d.add(3, 3)
    assert d.remove(5)
    d.add_or_update(3, 4)
    assert list(d.items()) == [(0, 1), (1, 2), (3, 4)]
    assert len(d) == 3


def test_add_existing_returns_false():
    d = Dictionary()
    assert d.add("a", 1)
    assert not d.add("a", 2)
    assert d["a"] == 1


def test_missing_key_raises():
    d = Dictionary()
    d.add("a", 1)
    with pytest.raises(KeyError):
        _ = d["b"]
    assert "b" not in d
    assert d["a"] == 1
    assert len(d) == 1


def test_get_default_and_contains():
    d = Dictionary()
    d.add("x", 10)
    assert d.get("x") == 10
    assert d.get("y", "none") == "none"
    assert "x" in d
    assert "y" not in d


def test_contains_pair():
    d = Dictionary()
    d.add("k", "v")
    assert d.contains_pair("k", "v")
    assert not d.contains_pair("k", "w")
    assert not d.contains_pair("z", "v")


def test_freed_slot_is_reused_in_order():
    d = Dictionary()
    d.add("a", 1)
    d.add("b", 2)
    d.add("c", 3)
    d.remove("b")
    d.add("d", 4)
    assert list(d) == ["a", "d", "c"]


def test_remove_missing_returns_false():
    d = Dictionary()
    d.add(1, 1)
    assert not d.remove(2)
    assert len(d) == 1


def test_clear():
    d = Dictionary()
    for i in range(20):
        d.add(i, i * i)
    d.clear()
    assert len(d) == 0
    assert list(d.items()) == []
    assert 3 not in d
    d.add(3, 9)
    assert d[3] == 9


def test_colliding_hash_function():
    d = Dictionary(hash_func=lambda key: 0)
    for i in range(50):
        d.add(i, str(i))
    assert all(d[i] == str(i) for i in range(50))
    assert d.remove(25)
    assert 25 not in d
    assert len(d) == 49


def test_negative_int_keys():
    d = Dictionary()
    d.add(-5, "neg")
    d.add(5, "pos")
    assert d[-5] == "neg"
    assert d[5] == "pos"


@given(st.lists(st.tuples(st.sampled_from(["add", "upd", "rm"]),
                          st.integers(-30, 30), st.integers())))
def test_matches_builtin_dict(ops):
    d = Dictionary()
    model = {}
    for op, key, value in ops:
        if op == "add":
            assert d.add(key, value) == (key not in model)
            model.setdefault(key, value)
        elif op == "upd":
            d.add_or_update(key, value)
            model[key] = value
        else:
            assert d.remove(key) == (key in model)
            model.pop(key, None)
    assert len(d) == len(model)
    assert dict(d.items()) == model