import threading
from dataclasses import dataclass

import pytest

from ekit.atomic import AtomicValue


@dataclass
class User:
    name: str


@pytest.mark.parametrize("value", [None, User("Tom")])
def test_new_value_of(value):
    assert AtomicValue(value).load() == value


PAIRS = [
    (None, None),
    (None, User("Tom")),
    (User("Tom"), None),
    (User("Jerry"), User("Tom")),
]


@pytest.mark.parametrize("old,new", PAIRS)
def test_compare_and_swap(old, new):
    val = AtomicValue(old)
    assert val.compare_and_swap(old, new) is True
    assert val.load() == new


@pytest.mark.parametrize("old,new", PAIRS)
def test_swap(old, new):
    val = AtomicValue(old)
    assert val.swap(new) == old
    assert val.load() == new


@pytest.mark.parametrize("value,want", [(None, None), (User("Tom"), User("Tom"))])
def test_store_load(value, want):
    val = AtomicValue()
    val.store(value)
    assert val.load() == want


def test_default_holds_none():
    assert AtomicValue().load() is None


def test_examples():
    assert AtomicValue(123).load() == 123
    val = AtomicValue(123)
    val.store(456)
    assert val.load() == 456
    val = AtomicValue(123)
    assert (val.swap(456), val.load()) == (123, 456)


def test_compare_and_swap_example():
    val = AtomicValue(123)
    assert val.compare_and_swap(123, 456) is True
    assert val.compare_and_swap(455, 459) is False
    assert val.load() == 456


def test_concurrent_compare_and_swap_increments():
    val = AtomicValue(0)

    def worker():
        for _ in range(200):
            while True:
                current = val.load()
                if val.compare_and_swap(current, current + 1):
                    break

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert val.load() == 1600