"""Sentence container and typed access to its fields."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import NoReturn

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_INT_RE = re.compile(r"[+-]?[0-9A-Fa-f]+")
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9A-Fa-f]+\.?[0-9A-Fa-f]*|\.[0-9A-Fa-f]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:infinity|inf)|nan", re.IGNORECASE)


class ParseError(ValueError):
    """Raised when a sentence or one of its fields cannot be decoded."""


@dataclass
class BaseSentence:
    """The parts common to every sentence: address, data fields and raw text."""

    talker: str
    type: str
    fields: list[str] = field(default_factory=list)
    checksum: str = ""
    raw: str = ""

    def prefix(self) -> str:
        """Return the talker and type joined, e.g. ``GPRMC``."""
        return self.talker + self.type


def _parse_int64(text: str, base: int) -> int:
    pattern = _INT_RE if base == 10 else _HEX_INT_RE
    if not pattern.fullmatch(text):
        raise ValueError("invalid syntax")
    value = int(text, base)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError("value out of range")
    return value


def _parse_float(text: str) -> float:
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)
    if _DEC_FLOAT_RE.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT_RE.fullmatch(text):
        value = float.fromhex(text)
    else:
        raise ValueError("invalid syntax")
    if math.isinf(value):
        raise ValueError("value out of range")
    return value


class Parser:
    """Reads typed values out of a sentence's fields, raising on the first bad one."""

    def __init__(self, sentence: BaseSentence) -> None:
        self.sentence = sentence

    def fail(self, context: str, value: str) -> NoReturn:
        """Raise a ParseError naming the sentence, the field context and the value."""
        raise ParseError(f"nmea: {self.sentence.prefix()} invalid {context}: {value}")

    def assert_type(self, typ: str) -> None:
        """Check that the sentence has the given type."""
        if self.sentence.type != typ:
            self.fail("type", self.sentence.type)

    def string(self, i: int, context: str) -> str:
        """Return the raw field at index ``i``."""
        fields = self.sentence.fields
        if not 0 <= i < len(fields):
            self.fail(context, "index out of range")
        return fields[i]

    def list_string(self, start: int, context: str) -> list[str]:
        """Return all fields from ``start`` on; at least one must exist."""
        fields = self.sentence.fields
        if not 0 <= start < len(fields):
            self.fail(context, "index out of range")
        return list(fields[start:])

    def enum_string(self, i: int, context: str, *options: str) -> str:
        """Return the field if it is empty or one of ``options``."""
        value = self.string(i, context)
        if value == "" or value in options:
            return value
        self.fail(context, value)

    def enum_chars(self, i: int, context: str, *options: str) -> list[str]:
        """Return the field's characters, each of which must be one of ``options``."""
        value = self.string(i, context)
        if value == "":
            return []
        matched = [char for char in value if char in options]
        if len(matched) != len(value):
            self.fail(context, value)
        return matched

    def hex_int64(self, i: int, context: str) -> int:
        """Return the field as a hexadecimal integer; an empty field is 0."""
        value = self.string(i, context)
        if value == "":
            return 0
        try:
            return _parse_int64(value, 16)
        except ValueError:
            self.fail(context, value)

    def int64(self, i: int, context: str) -> int:
        """Return the field as a decimal integer; an empty field is 0."""
        value = self.null_int64(i, context)
        return 0 if value is None else value

    def null_int64(self, i: int, context: str) -> int | None:
        """Return the field as a decimal integer, or None when it is empty."""
        value = self.string(i, context)
        if value == "":
            return None
        try:
            return _parse_int64(value, 10)
        except ValueError:
            self.fail(context, value)

    def float64(self, i: int, context: str) -> float:
        """Return the field as a float; an empty field is 0.0."""
        value = self.null_float64(i, context)
        return 0.0 if value is None else value

    def null_float64(self, i: int, context: str) -> float | None:
        """Return the field as a float, or None when it is empty."""
        value = self.string(i, context)
        if value == "":
            return None
        try:
            return _parse_float(value)
        except ValueError:
            self.fail(context, value)

    def six_bit_ascii_armour(self, i: int, fill_bits: int, context: str) -> bytes:
        """Decode the 6-bit ASCII armoured payload used by AIS messages into bits."""
        if not 0 <= fill_bits < 6:
            self.fail(context, "fill bits")
        payload = self.string(i, "encoded payload").encode()
        num_bits = len(payload) * 6 - fill_bits
        if num_bits < 0:
            self.fail(context, "num bits")
        bits = bytearray()
        for byte in payload:
            if not 48 <= byte < 120:
                self.fail(context, "data byte")
            value = byte - 48
            if value > 40:
                value -= 8
            bits.extend((value >> shift) & 1 for shift in range(5, -1, -1))
        return bytes(bits[:num_bits])