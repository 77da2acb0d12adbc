import json
from dataclasses import dataclass

import pytest

from ekit.json_column import JsonColumn


@dataclass
class User:
    Name: str


def test_value_dataclass():
    col = JsonColumn(val=User(Name="Tom"), valid=True)
    assert col.value() == b'{"Name":"Tom"}'


def test_value_dict():
    col = JsonColumn(val={"Name": "Tom"}, valid=True)
    assert col.value() == b'{"Name":"Tom"}'


def test_value_invalid():
    assert JsonColumn(val={"Name": "Tom"}).value() is None


def test_value_nil():
    assert JsonColumn().value() is None


def test_value_nil_but_valid():
    assert JsonColumn(valid=True).value() == b"null"


def test_scan_nil():
    col = JsonColumn()
    col.scan(None)
    assert col.valid is False
    assert col.val is None


@pytest.mark.parametrize("src", ['{"Name":"Tom"}', b'{"Name":"Tom"}'])
def test_scan_string_and_bytes(src):
    col = JsonColumn()
    col.scan(src)
    assert col.valid is True
    assert col.val == {"Name": "Tom"}


def test_scan_with_decode():
    col = JsonColumn(decode=lambda data: User(**data))
    col.scan('{"Name":"Tom"}')
    assert col.valid is True
    assert col.val == User(Name="Tom")


def test_scan_int_rejected():
    col = JsonColumn()
    with pytest.raises(TypeError) as info:
        col.scan(123)
    assert str(info.value) == "ekit: JsonColumn.scan does not support src type 123"
    assert col.valid is False


def test_scan_bad_json():
    col = JsonColumn()
    with pytest.raises(json.JSONDecodeError):
        col.scan("{not json")
    assert col.valid is False


def test_scan_types_slice():
    col = JsonColumn()
    col.scan('["a", "b", "c"]')
    assert col.val == ["a", "b", "c"]
    assert col.value() == b'["a","b","c"]'


def test_scan_types_map():
    col = JsonColumn()
    col.scan('{"a":"a value"}')
    assert col.value() == b'{"a":"a value"}'


def test_round_trip():
    col = JsonColumn(val={"list": [1, 2], "name": "大明"}, valid=True)
    other = JsonColumn()
    other.scan(col.value())
    assert other == col