"""NMEA 2000 frames carried in 0183 sentences, MTK acknowledgements and queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from .parser import BaseSentence, ParseError, Parser

TYPE_PCDIN = "CDIN"
TYPE_PGN = "PGN"
TYPE_MTK = "MTK001"
TYPE_PMTK001 = "MTK001"
TYPE_QUERY = "Q"

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_T = TypeVar("_T")


def _parse_hex_uint(text: str, bits: int) -> int:
    if not text or any(char not in _HEX_DIGITS for char in text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    value = int(text, 16)
    if value >= 1 << bits:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


def _decode_hex(text: str) -> bytes:
    for char in text:
        if char not in _HEX_DIGITS:
            raise ValueError(f"invalid byte: U+{ord(char):04X} {char!r}")
    if len(text) % 2:
        raise ValueError("odd length hex string")
    return bytes.fromhex(text)


def _convert(sentence: BaseSentence, action: str, convert: Callable[..., _T], *args: object) -> _T:
    try:
        return convert(*args)
    except ValueError as exc:
        raise ParseError(f"nmea: {sentence.prefix()} failed to {action}: {exc}") from exc


@dataclass
class PCDIN:
    """SeaSmart.Net sentence carrying one NMEA 2000 message."""

    sentence: BaseSentence
    pgn: int
    timestamp: int
    source: int
    data: bytes


@dataclass
class PGN:
    """A single NMEA 2000 frame carried as an 0183 sentence."""

    sentence: BaseSentence
    pgn: int
    is_send: bool
    priority: int
    address: int
    data: bytes


@dataclass
class MTK:
    """MTK packet acknowledgement (command 001); superseded by PMTK001."""

    sentence: BaseSentence
    cmd: int
    flag: int


@dataclass
class PMTK001:
    """Acknowledgement of a previously sent MTK command."""

    sentence: BaseSentence
    cmd: int
    flag: int


@dataclass
class Query:
    """A listener's request for a particular sentence from a talker."""

    sentence: BaseSentence
    destination_talker_id: str
    requested_sentence: str


def parse_pcdin(sentence: BaseSentence) -> PCDIN:
    """Decode a PCDIN sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PCDIN)
    fields = sentence.fields
    if len(fields) != 4:
        parser.fail("fields", "invalid number of fields in sentence")
    pgn = _convert(sentence, "parse PGN field", _parse_hex_uint, fields[0], 24)
    timestamp = _convert(sentence, "parse timestamp field", _parse_hex_uint, fields[1], 32)
    source = _convert(sentence, "parse source field", _parse_hex_uint, fields[2], 8)
    data = _convert(sentence, "decode data", _decode_hex, fields[3])
    return PCDIN(sentence=sentence, pgn=pgn, timestamp=timestamp, source=source, data=data)


def parse_pgn(sentence: BaseSentence) -> PGN:
    """Decode a PGN sentence holding one NMEA 2000 frame."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PGN)
    fields = sentence.fields
    if len(fields) != 3:
        parser.fail("fields", "invalid number of fields in sentence")
    pgn = _convert(sentence, "parse PGN field", _parse_hex_uint, fields[0], 24)
    attributes = _convert(sentence, "parse attributes field", _parse_hex_uint, fields[1], 16)
    data_length = (attributes >> 8) & 0b1111
    if data_length * 2 != len(fields[2]):
        parser.fail("dlc", "data length does not match actual data length")
    data = _convert(sentence, "decode data", _decode_hex, fields[2])
    return PGN(
        sentence=sentence,
        pgn=pgn,
        is_send=attributes >> 15 == 1,
        priority=(attributes >> 12) & 0b111,
        address=attributes & 0xFF,
        data=data,
    )


def parse_mtk(sentence: BaseSentence) -> MTK:
    """Decode a PMTK001 acknowledgement, checking its type."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_MTK)
    cmd = parser.int64(0, "command")
    flag = parser.int64(1, "flag")
    return MTK(sentence=sentence, cmd=cmd, flag=flag)


def parse_pmtk001(sentence: BaseSentence) -> PMTK001:
    """Decode a PMTK001 acknowledgement."""
    parser = Parser(sentence)
    cmd = parser.int64(0, "command")
    flag = parser.int64(1, "flag")
    return PMTK001(sentence=sentence, cmd=cmd, flag=flag)


def parse_query(sentence: BaseSentence) -> Query:
    """Decode a query sentence such as ``$CCGPQ,GGA``."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_QUERY)
    destination = sentence.raw[3:5]
    requested = parser.string(0, "requested sentence")
    return Query(sentence=sentence, destination_talker_id=destination, requested_sentence=requested)