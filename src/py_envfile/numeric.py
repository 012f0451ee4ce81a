"""Typed numeric values from environment strings.

Environment variables are always text.  The typed accessors turn that
text into a number of a fixed machine width, and can then present the
number's bytes in a chosen order:

    - **NumericKind** — the closed set of supported types: fixed-width
      signed/unsigned integers and IEEE-754 single/double floats.
    - **ByteOrder** — native, little-endian, or big-endian.

Parsing is strict and locale-independent: the *whole* string must be a
number of the requested kind.  Trailing junk, surrounding whitespace, a
leading ``+``, or a value out of range all count as failure and yield
None, with no partial result.

Byte order is a post-parse transform.  When the requested order differs
from the machine's (``sys.byteorder``), the value is packed with
``struct`` and read back with the opposite order, so ``42`` as an
``int32`` becomes ``0x2A000000`` on a little-endian machine when asked
for big-endian.  Single-byte kinds are never swapped.
"""

import math
import re
import struct
import sys
from enum import StrEnum

Number = int | float


class ByteOrder(StrEnum):
    """Requested byte order for a typed value."""

    NATIVE = "native"
    LITTLE = "little"
    BIG = "big"


class NumericKind(StrEnum):
    """The supported arithmetic types."""

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

    @property
    def struct_code(self) -> str:
        """Return the ``struct`` format character for this kind."""
        return _STRUCT_CODES[self]

    @property
    def size(self) -> int:
        """Return the width of this kind in bytes."""
        return struct.calcsize(f"<{self.struct_code}")

    @property
    def is_float(self) -> bool:
        """Return True for the floating-point kinds."""
        return self in {NumericKind.FLOAT32, NumericKind.FLOAT64}

    @property
    def is_signed(self) -> bool:
        """Return True if the kind can hold negative values."""
        return not self.value.startswith("uint")

    @property
    def bounds(self) -> tuple[int, int]:
        """Return the inclusive (min, max) range of an integer kind."""
        bits = self.size * 8
        if self.is_signed:
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1


_STRUCT_CODES: dict[NumericKind, str] = {
    NumericKind.INT8: "b",
    NumericKind.INT16: "h",
    NumericKind.INT32: "i",
    NumericKind.INT64: "q",
    NumericKind.UINT8: "B",
    NumericKind.UINT16: "H",
    NumericKind.UINT32: "I",
    NumericKind.UINT64: "Q",
    NumericKind.FLOAT32: "f",
    NumericKind.FLOAT64: "d",
}

_SIGNED_INT = re.compile(r"-?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")
_FLOAT = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_NONZERO_MANTISSA = re.compile(r"^[^eE]*[1-9]")
# Digits in the largest uint64.
_MAX_INT_DIGITS = 20


def resolve_kind(kind: NumericKind | str) -> NumericKind:
    """Return *kind* as a NumericKind.

    Raises:
        ValueError: If *kind* names no supported type.

    """
    try:
        return NumericKind(kind)
    except ValueError:
        names = ", ".join(k.value for k in NumericKind)
        msg = f"Unknown numeric kind {kind!r} (expected one of: {names})"
        raise ValueError(msg) from None


def native_order() -> ByteOrder:
    """Return the byte order of this machine."""
    return ByteOrder.LITTLE if sys.byteorder == "little" else ByteOrder.BIG


def _parse_int(text: str, kind: NumericKind) -> int | None:
    pattern = _SIGNED_INT if kind.is_signed else _UNSIGNED_INT
    if pattern.fullmatch(text) is None:
        return None
    if len(text.lstrip("-").lstrip("0")) > _MAX_INT_DIGITS:
        return None
    value = int(text)
    low, high = kind.bounds
    if not low <= value <= high:
        return None
    return value


def _parse_float(text: str, kind: NumericKind) -> float | None:
    if _FLOAT.fullmatch(text) is None:
        return None
    value = float(text)
    literal_special = text.lstrip("-").lower() in {"inf", "infinity", "nan"}
    if not literal_special:
        if math.isinf(value):
            return None
        if value == 0.0 and _NONZERO_MANTISSA.match(text):
            return None
    if kind is NumericKind.FLOAT32:
        try:
            packed = struct.pack("<f", value)
        except OverflowError:
            return None
        narrowed = struct.unpack("<f", packed)[0]
        if narrowed == 0.0 and value != 0.0:
            return None
        return narrowed
    return value


def parse_number(text: str, kind: NumericKind | str) -> Number | None:
    """Parse the whole of *text* as a value of *kind*.

    Args:
        text: The textual value, exactly as stored.
        kind: The target type.

    Returns:
        The parsed value, or None if *text* is not a valid, in-range
        number of that kind.

    """
    resolved = resolve_kind(kind)
    if resolved.is_float:
        return _parse_float(text, resolved)
    return _parse_int(text, resolved)


def swap_bytes(value: Number, kind: NumericKind | str) -> Number:
    """Reverse the in-memory byte order of *value* stored as *kind*."""
    code = resolve_kind(kind).struct_code
    return struct.unpack(f">{code}", struct.pack(f"<{code}", value))[0]


def convert(text: str, kind: NumericKind | str, order: ByteOrder = ByteOrder.NATIVE) -> Number | None:
    """Parse *text* as *kind* and present it in the requested byte *order*.

    The value is swapped only when *order* is not native, differs from
    the machine's order, and the kind is wider than one byte.
    """
    resolved = resolve_kind(kind)
    value = parse_number(text, resolved)
    if value is None:
        return None
    order = ByteOrder(order)
    wants_swap = order is not ByteOrder.NATIVE and order is not native_order()
    if wants_swap and resolved.size > 1:
        return swap_bytes(value, resolved)
    return value
