import pytest

from nmeakit.nmea2000 import (
    MTK,
    PCDIN,
    PGN,
    PMTK001,
    Query,
    parse_mtk,
    parse_pcdin,
    parse_pgn,
    parse_pmtk001,
    parse_query,
)
from nmeakit.parser import BaseSentence, ParseError


def make_sentence(raw, talker, typ):
    body, _, checksum = raw[1:].partition("*")
    return BaseSentence(
        talker=talker,
        type=typ,
        fields=body.split(",")[1:],
        checksum=checksum,
        raw=raw,
    )


def expect_error(parse, sentence, message):
    with pytest.raises(ParseError) as exc:
        parse(sentence)
    assert str(exc.value) == message


def test_pcdin_good():
    sentence = make_sentence("$PCDIN,01F112,000C72EA,09,28C36A0000B40AFD*56", "P", "CDIN")
    assert parse_pcdin(sentence) == PCDIN(
        sentence=sentence,
        pgn=127250,
        timestamp=815850,
        source=9,
        data=bytes([0x28, 0xC3, 0x6A, 0x00, 0x00, 0xB4, 0x0A, 0xFD]),
    )


@pytest.mark.parametrize(
    "raw, message",
    [
        (
            "$PCDIN,01F112,000C72EA,28C36A0000B40AFD*73",
            "nmea: PCDIN invalid fields: invalid number of fields in sentence",
        ),
        (
            "$PCDIN,x1F112,000C72EA,09,28C36A0000B40AFD*1e",
            'nmea: PCDIN failed to parse PGN field: parsing "x1F112": invalid syntax',
        ),
        (
            "$PCDIN,01F112,x00C72EA,09,28C36A0000B40AFD*1e",
            'nmea: PCDIN failed to parse timestamp field: parsing "x00C72EA": invalid syntax',
        ),
        (
            "$PCDIN,01F112,000C72EA,x9,28C36A0000B40AFD*1e",
            'nmea: PCDIN failed to parse source field: parsing "x9": invalid syntax',
        ),
        (
            "$PCDIN,01F112,000C72EA,09,x8C36A0000B40AFD*1c",
            "nmea: PCDIN failed to decode data: invalid byte: U+0078 'x'",
        ),
        (
            "$PCDIN,01F112,000C72EA,100,28C36A0000B40AFD*00",
            'nmea: PCDIN failed to parse source field: parsing "100": value out of range',
        ),
        (
            "$PCDIN,01F112,000C72EA,09,28C*00",
            "nmea: PCDIN failed to decode data: odd length hex string",
        ),
    ],
)
def test_pcdin_errors(raw, message):
    expect_error(parse_pcdin, make_sentence(raw, "P", "CDIN"), message)


def test_pcdin_wrong_type():
    sentence = make_sentence("$PXYZ,01F112,000C72EA,09,28*00", "P", "XYZ")
    expect_error(parse_pcdin, sentence, "nmea: PXYZ invalid type: XYZ")


def test_pgn_good():
    sentence = make_sentence("$MXPGN,01F112,2807,FC7FFF7FFF168012*11", "MX", "PGN")
    assert parse_pgn(sentence) == PGN(
        sentence=sentence,
        pgn=127250,
        is_send=False,
        priority=2,
        address=7,
        data=bytes([0xFC, 0x7F, 0xFF, 0x7F, 0xFF, 0x16, 0x80, 0x12]),
    )


def test_pgn_send_bit():
    sentence = make_sentence("$MXPGN,01F112,A807,FC7FFF7FFF168012*00", "MX", "PGN")
    result = parse_pgn(sentence)
    assert result.is_send is True
    assert result.priority == 2
    assert result.address == 7


@pytest.mark.parametrize(
    "raw, message",
    [
        (
            "$MXPGN,01F112,FC7FFF7FFF168012*30",
            "nmea: MXPGN invalid fields: invalid number of fields in sentence",
        ),
        (
            "$MXPGN,0xF112,2807,FC7FFF7FFF168012*58",
            'nmea: MXPGN failed to parse PGN field: parsing "0xF112": invalid syntax',
        ),
        (
            "$MXPGN,01F112,x807,FC7FFF7FFF168012*5b",
            'nmea: MXPGN failed to parse attributes field: parsing "x807": invalid syntax',
        ),
        (
            "$MXPGN,01F112,2207,FC7FFF7FFF168012*1b",
            "nmea: MXPGN invalid dlc: data length does not match actual data length",
        ),
        (
            "$MXPGN,01F112,2807,xC7FFF7FFF168012*2f",
            "nmea: MXPGN failed to decode data: invalid byte: U+0078 'x'",
        ),
    ],
)
def test_pgn_errors(raw, message):
    expect_error(parse_pgn, make_sentence(raw, "MX", "PGN"), message)


def test_mtk_good():
    sentence = make_sentence("$PMTK001,604,3*32", "P", "MTK001")
    assert parse_mtk(sentence) == MTK(sentence=sentence, cmd=604, flag=3)


@pytest.mark.parametrize(
    "raw, message",
    [
        ("$PMTK001,604*2d", "nmea: PMTK001 invalid flag: index out of range"),
        ("$PMTK001*33", "nmea: PMTK001 invalid command: index out of range"),
    ],
)
def test_mtk_errors(raw, message):
    expect_error(parse_mtk, make_sentence(raw, "P", "MTK001"), message)


def test_mtk_wrong_type():
    sentence = make_sentence("$PMTK010,001*00", "P", "MTK010")
    expect_error(parse_mtk, sentence, "nmea: PMTK010 invalid type: MTK010")


def test_pmtk001_good():
    sentence = make_sentence("$PMTK001,604,3*32", "P", "MTK001")
    assert parse_pmtk001(sentence) == PMTK001(sentence=sentence, cmd=604, flag=3)


@pytest.mark.parametrize(
    "raw, message",
    [
        ("$PMTK001,604*2d", "nmea: PMTK001 invalid flag: index out of range"),
        ("$PMTK001*33", "nmea: PMTK001 invalid command: index out of range"),
    ],
)
def test_pmtk001_errors(raw, message):
    expect_error(parse_pmtk001, make_sentence(raw, "P", "MTK001"), message)


def test_query_good():
    sentence = make_sentence("$CCGPQ,GGA*2B", "CC", "Q")
    assert parse_query(sentence) == Query(
        sentence=sentence,
        destination_talker_id="GP",
        requested_sentence="GGA",
    )


def test_query_missing_requested_sentence():
    sentence = make_sentence("$CCGPQ*46", "CC", "Q")
    expect_error(parse_query, sentence, "nmea: CCQ invalid requested sentence: index out of range")