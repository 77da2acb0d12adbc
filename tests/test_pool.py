import pytest

from ekit.pool import Pool


def _make_factory(counter):
    def factory():
        counter.append(1)
        return bytearray(b"A")

    return factory


def test_pool_reuses_put_item():
    calls = []
    p = Pool(_make_factory(calls))
    res = p.get()
    assert bytes(res) == b"A"
    res.extend(b"B")
    p.put(res)
    res = p.get()
    if len(calls) == 1:
        assert bytes(res) == b"AB"
    else:
        assert bytes(res) == b"A"


def test_pool_creates_new_when_empty():
    calls = []
    p = Pool(_make_factory(calls))
    first = p.get()
    second = p.get()
    assert first is not second
    assert len(calls) == 2


def test_pool_example():
    p = Pool(lambda: bytearray(b"A"))
    assert p.get().decode() == "A"


def test_pool_factory_returning_none_rejected():
    p = Pool(lambda: None)
    with pytest.raises(TypeError):
        p.get()