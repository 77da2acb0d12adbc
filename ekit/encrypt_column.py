"""A database column value stored encrypted with AES-GCM."""

from __future__ import annotations

import dataclasses
import enum
import json
import os
import struct
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ekit.json_column import _dump_json

T = TypeVar("T")

_NONCE_SIZE = 12
_KEY_SIZES = (16, 24, 32)


class InvalidColumnError(ValueError):
    """Raised when an invalid column is asked for its stored value."""

    def __init__(self) -> None:
        super().__init__("ekit: EncryptColumn is not valid")


class KeyLengthError(ValueError):
    """Raised when the key is not 16, 24 or 32 bytes long."""

    def __init__(self) -> None:
        super().__init__("ekit: EncryptColumn only supports 16/24/32 byte keys")


class ValueKind(enum.Enum):
    """How the plain value is turned into bytes before encryption."""

    STRING = "string"
    BYTES = "bytes"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT = "int"
    UINT = "uint"
    JSON = "json"


# Big-endian fixed-width layouts; INT and UINT are stored as 64 bits.
_FORMATS = {
    ValueKind.INT8: ">b",
    ValueKind.INT16: ">h",
    ValueKind.INT32: ">i",
    ValueKind.INT64: ">q",
    ValueKind.UINT8: ">B",
    ValueKind.UINT16: ">H",
    ValueKind.UINT32: ">I",
    ValueKind.UINT64: ">Q",
    ValueKind.FLOAT32: ">f",
    ValueKind.FLOAT64: ">d",
    ValueKind.INT: ">q",
    ValueKind.UINT: ">Q",
}


def _infer_kind(value: Any) -> ValueKind:
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.BYTES
    if isinstance(value, bool):
        return ValueKind.JSON
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT64
    return ValueKind.JSON


@dataclasses.dataclass
class EncryptColumn(Generic[T]):
    """A column whose value is encrypted with AES-GCM under ``key``.

    Strings and bytes are encrypted as they are, numbers in big-endian
    fixed width, anything else as JSON.  ``kind`` picks the layout; when it
    is ``None`` it is taken from the current ``val``.  ``decode``, when
    given, turns parsed JSON into the wanted type.
    """

    val: T | None = None
    valid: bool = False
    key: str | bytes = b""
    kind: ValueKind | None = None
    decode: Callable[[Any], T] | None = dataclasses.field(
        default=None, compare=False, repr=False
    )

    def _kind(self) -> ValueKind:
        return self.kind if self.kind is not None else _infer_kind(self.val)

    def _cipher(self) -> AESGCM:
        key = self.key.encode("utf-8") if isinstance(self.key, str) else bytes(self.key)
        if len(key) not in _KEY_SIZES:
            raise KeyLengthError()
        return AESGCM(key)

    def _plain_bytes(self) -> bytes:
        kind = self._kind()
        if kind is ValueKind.STRING:
            return str(self.val).encode("utf-8", "surrogateescape")
        if kind is ValueKind.BYTES:
            return bytes(self.val)  # type: ignore[arg-type]
        if kind is ValueKind.JSON:
            return _dump_json(self.val)
        try:
            return struct.pack(_FORMATS[kind], self.val)
        except struct.error as exc:
            raise ValueError(f"ekit: cannot encode {self.val!r} as {kind.value}") from exc

    def _load_plain(self, plain: bytes) -> None:
        kind = self._kind()
        if kind is ValueKind.STRING:
            self.val = plain.decode("utf-8", "surrogateescape")  # type: ignore[assignment]
        elif kind is ValueKind.BYTES:
            self.val = plain  # type: ignore[assignment]
        elif kind is ValueKind.JSON:
            parsed = json.loads(plain)
            self.val = self.decode(parsed) if self.decode is not None else parsed
        else:
            try:
                (self.val,) = struct.unpack_from(_FORMATS[kind], plain)
            except struct.error as exc:
                raise ValueError(
                    f"ekit: cannot decode {kind.value} from {len(plain)} bytes"
                ) from exc

    def _decrypt(self, data: bytes) -> bytes:
        cipher = self._cipher()
        nonce, payload = data[:_NONCE_SIZE], data[_NONCE_SIZE:]
        return cipher.decrypt(nonce, payload, None)

    def value(self) -> bytes:
        """Return nonce followed by the sealed value."""
        if not self.valid:
            raise InvalidColumnError()
        cipher = self._cipher()
        plain = self._plain_bytes()
        nonce = os.urandom(_NONCE_SIZE)
        return nonce + cipher.encrypt(nonce, plain, None)

    def scan(self, src: Any) -> None:
        """Decrypt ``src`` (bytes or str) and load the value from it.

        A ``str`` that fails to decrypt is ignored and leaves the column as it was.
        """
        if isinstance(src, (bytes, bytearray, memoryview)):
            plain = self._decrypt(bytes(src))
        elif isinstance(src, str):
            try:
                plain = self._decrypt(src.encode("utf-8", "surrogateescape"))
            except (InvalidTag, ValueError):
                return
        else:
            raise TypeError(f"ekit: EncryptColumn.scan does not support src type {src}")
        try:
            self._load_plain(plain)
        except Exception:
            self.valid = False
            raise
        self.valid = True