import pytest

from bitfn import (
    add_to,
    add_to_set,
    get_or_add,
    increment,
    increment_all,
    increment_all_by,
    update_or_add,
)


def test_add_to_creates_and_appends():
    d = {}
    add_to(d, "a", 1)
    add_to(d, "a", 1)
    add_to(d, "b", 2)
    assert d == {"a": [1, 1], "b": [2]}


def test_add_to_set_reports_new_values():
    d = {}
    assert add_to_set(d, "a", 1) is True
    assert add_to_set(d, "a", 1) is False
    assert add_to_set(d, "a", 2) is True
    assert d == {"a": {1, 2}}


def test_get_or_add_value_and_factory():
    d = {"a": 1}
    assert get_or_add(d, "a", 5) == 1
    assert get_or_add(d, "b", 5) == 5

    calls = []

    def factory():
        calls.append(1)
        return []

    first = get_or_add(d, "c", factory=factory)
    second = get_or_add(d, "c", factory=factory)
    assert first is second
    assert len(calls) == 1


def test_get_or_add_keeps_falsy_existing_value():
    d = {"a": 0}
    assert get_or_add(d, "a", 7) == 0


def test_increment():
    d = {}
    assert increment(d, "a") == 1
    assert increment(d, "a") == 2
    assert increment(d, "b", 5) == 5
    assert increment(d, "b", -2) == 3


def test_increment_all_and_pairs():
    d = {"a": 1}
    increment_all(d, ["a", "b", "a"])
    assert d == {"a": 3, "b": 1}
    increment_all(d, ["b"], step=10)
    assert d["b"] == 11
    increment_all_by(d, [("a", 2), ("c", 4)])
    assert d == {"a": 5, "b": 11, "c": 4}


def test_update_or_add():
    d = {"a": 1}
    assert update_or_add(d, "a", lambda v: v * 10, 0) == 10
    assert update_or_add(d, "b", lambda v: v * 10, 3) == 3
    assert update_or_add(d, "c", lambda v: v + [1], factory=list) == []
    assert d == {"a": 10, "b": 3, "c": []}


@pytest.mark.parametrize(
    "call",
    [
        lambda d: add_to(d, None, 1),
        lambda d: add_to_set(d, None, 1),
        lambda d: get_or_add(d, None, 1),
        lambda d: increment(d, None),
        lambda d: increment_all(d, ["a", None]),
        lambda d: increment_all_by(d, [(None, 1)]),
        lambda d: update_or_add(d, None, lambda v: v, 1),
    ],
)
def test_none_keys_rejected(call):
    with pytest.raises(ValueError):
        call({})


def test_none_mapping_rejected():
    with pytest.raises(TypeError):
        increment(None, "a")
