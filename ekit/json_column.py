"""A database column value stored as a JSON document."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _dump_json(value: Any) -> bytes:
    """Serialise ``value`` to compact UTF-8 JSON; dataclasses become objects."""
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_json_default
    ).encode("utf-8")


@dataclasses.dataclass
class JsonColumn(Generic[T]):
    """A column whose value is kept as JSON text.

    ``decode``, when given, turns the parsed JSON into the wanted type,
    for instance a dataclass.  An invalid column is stored as NULL.
    """

    val: T | None = None
    valid: bool = False
    decode: Callable[[Any], T] | None = dataclasses.field(
        default=None, compare=False, repr=False
    )

    def value(self) -> bytes | None:
        """Return the JSON bytes to store, or ``None`` when not valid."""
        if not self.valid:
            return None
        return _dump_json(self.val)

    def scan(self, src: Any) -> None:
        """Load the column from ``src``: bytes, str or ``None``.

        ``None`` leaves the column untouched.
        """
        if src is None:
            return
        if isinstance(src, (bytes, bytearray, memoryview)):
            raw: str | bytes = bytes(src)
        elif isinstance(src, str):
            raw = src
        else:
            raise TypeError(f"ekit: JsonColumn.scan does not support src type {src}")
        parsed = json.loads(raw)
        self.val = self.decode(parsed) if self.decode is not None else parsed
        self.valid = True