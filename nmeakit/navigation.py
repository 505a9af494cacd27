"""Navigation sentences: satellites in view, headings, rate of turn, own ship, radar and routes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    DISTANCE_UNIT_KILOMETRE,
    DISTANCE_UNIT_NAUTICAL_MILE,
    DISTANCE_UNIT_STATUTE_MILE,
    EAST,
    HEADING_MAGNETIC,
    HEADING_TRUE,
    STATUS_INVALID,
    STATUS_VALID,
    WEST,
)
from .parser import BaseSentence, Parser

TYPE_GSV = "GSV"
TYPE_HDG = "HDG"
TYPE_HDM = "HDM"
TYPE_HDT = "HDT"
TYPE_HSC = "HSC"
TYPE_ROT = "ROT"
TYPE_OSD = "OSD"
TYPE_RSD = "RSD"
TYPE_RTE = "RTE"

MAGNETIC_HDM = "M"

VALID_ROT = "A"
INVALID_ROT = "V"

OSD_REFERENCE_BOTTOM_TRACKING_LOG = "B"
OSD_REFERENCE_MANUAL = "M"
OSD_REFERENCE_WATER_REFERENCED = "W"
OSD_REFERENCE_RADAR_TRACKING = "R"
OSD_REFERENCE_POSITIONING_SYSTEM_GROUND_REFERENCE = "P"

RSD_DISPLAY_ROTATION_COURSE_UP = "C"
RSD_DISPLAY_ROTATION_HEADING_UP = "H"
RSD_DISPLAY_ROTATION_NORTH_UP = "N"

ACTIVE_ROUTE = "c"
WAYPOINT_LIST = "w"

_OSD_REFERENCES = (
    OSD_REFERENCE_BOTTOM_TRACKING_LOG,
    OSD_REFERENCE_MANUAL,
    OSD_REFERENCE_WATER_REFERENCED,
    OSD_REFERENCE_RADAR_TRACKING,
    OSD_REFERENCE_POSITIONING_SYSTEM_GROUND_REFERENCE,
)
_DISTANCE_UNITS = (
    DISTANCE_UNIT_KILOMETRE,
    DISTANCE_UNIT_NAUTICAL_MILE,
    DISTANCE_UNIT_STATUTE_MILE,
)


@dataclass
class GSVInfo:
    """One visible satellite."""

    sv_prn_number: int
    elevation: int
    azimuth: int
    snr: int


@dataclass
class GSV:
    """Satellites in view; ``system_id`` is set by NMEA 4.1+ talkers."""

    sentence: BaseSentence
    total_messages: int
    message_number: int
    number_svs_in_view: int
    info: list[GSVInfo] = field(default_factory=list)
    system_id: int = 0


@dataclass
class HDG:
    """Heading with magnetic deviation and variation."""

    sentence: BaseSentence
    heading: float
    deviation: float
    deviation_direction: str
    variation: float
    variation_direction: str


@dataclass
class HDM:
    """Heading relative to magnetic north."""

    sentence: BaseSentence
    heading: float
    magnetic_valid: bool


@dataclass
class HDT:
    """Heading relative to true north."""

    sentence: BaseSentence
    heading: float
    true: bool


@dataclass
class HSC:
    """Heading steering command."""

    sentence: BaseSentence
    true_heading: float
    true_heading_type: str
    magnetic_heading: float
    magnetic_heading_type: str


@dataclass
class ROT:
    """Rate of turn in degrees per minute; negative means the bow turns to port."""

    sentence: BaseSentence
    rate_of_turn: float
    valid: bool


@dataclass
class OSD:
    """Own ship data."""

    sentence: BaseSentence
    heading: float
    heading_status: str
    vessel_true_course: float
    course_reference: str
    vessel_speed: float
    speed_reference: str
    vessel_set_true: float
    vessel_drift: float
    speed_units: str


@dataclass
class RSD:
    """Radar system data."""

    sentence: BaseSentence
    origin1_range: float
    origin1_bearing: float
    variable_range_marker1: float
    bearing_line1: float
    origin2_range: float
    origin2_bearing: float
    variable_range_marker2: float
    bearing_line2: float
    cursor_range_from_own_ship: float
    cursor_bearing_degrees: float
    range_scale: float
    range_unit: str
    display_rotation: str


@dataclass
class RTE:
    """A route of waypoints."""

    sentence: BaseSentence
    number_of_sentences: int
    sentence_number: int
    active_route_or_waypoint_list: str
    name: str
    idents: list[str]


def parse_gsv(sentence: BaseSentence) -> GSV:
    """Decode a GSV sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_GSV)
    total = parser.int64(0, "total number of messages")
    number = parser.int64(1, "message number")
    in_view = parser.int64(2, "number of SVs in view")
    fields = sentence.fields
    info: list[GSVInfo] = []
    for block in range(4):
        base = 3 + block * 4
        if base + 3 >= len(fields):
            break
        info.append(
            GSVInfo(
                sv_prn_number=parser.int64(base, "SV prn number"),
                elevation=parser.int64(base + 1, "elevation"),
                azimuth=parser.int64(base + 2, "azimuth"),
                snr=parser.int64(base + 3, "SNR"),
            )
        )
    system_index = 6 + (len(info) - 1) * 4 + 1
    system_id = 0
    if len(fields) == system_index + 1:
        system_id = parser.int64(system_index, "system ID")
    return GSV(
        sentence=sentence,
        total_messages=total,
        message_number=number,
        number_svs_in_view=in_view,
        info=info,
        system_id=system_id,
    )


def parse_hdg(sentence: BaseSentence) -> HDG:
    """Decode an HDG sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_HDG)
    return HDG(
        sentence=sentence,
        heading=parser.float64(0, "heading"),
        deviation=parser.float64(1, "deviation"),
        deviation_direction=parser.enum_string(2, "deviation direction", EAST, WEST),
        variation=parser.float64(3, "variation"),
        variation_direction=parser.enum_string(4, "variation direction", EAST, WEST),
    )


def parse_hdm(sentence: BaseSentence) -> HDM:
    """Decode an HDM sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_HDM)
    return HDM(
        sentence=sentence,
        heading=parser.float64(0, "heading"),
        magnetic_valid=parser.enum_string(1, "magnetic", MAGNETIC_HDM) == MAGNETIC_HDM,
    )


def parse_hdt(sentence: BaseSentence) -> HDT:
    """Decode an HDT sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_HDT)
    return HDT(
        sentence=sentence,
        heading=parser.float64(0, "heading"),
        true=parser.enum_string(1, "true", "T") == "T",
    )


def parse_hsc(sentence: BaseSentence) -> HSC:
    """Decode an HSC sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_HSC)
    return HSC(
        sentence=sentence,
        true_heading=parser.float64(0, "true heading"),
        true_heading_type=parser.enum_string(1, "true heading type", HEADING_TRUE),
        magnetic_heading=parser.float64(2, "magnetic heading"),
        magnetic_heading_type=parser.enum_string(3, "magnetic heading type", HEADING_MAGNETIC),
    )


def parse_rot(sentence: BaseSentence) -> ROT:
    """Decode a ROT sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_ROT)
    return ROT(
        sentence=sentence,
        rate_of_turn=parser.float64(0, "rate of turn"),
        valid=parser.enum_string(1, "status valid", VALID_ROT, INVALID_ROT) == VALID_ROT,
    )


def parse_osd(sentence: BaseSentence) -> OSD:
    """Decode an OSD sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_OSD)
    return OSD(
        sentence=sentence,
        heading=parser.float64(0, "heading"),
        heading_status=parser.enum_string(1, "heading status", STATUS_VALID, STATUS_INVALID),
        vessel_true_course=parser.float64(2, "vessel course true"),
        course_reference=parser.enum_string(3, "course reference", *_OSD_REFERENCES),
        vessel_speed=parser.float64(4, "vessel speed"),
        speed_reference=parser.enum_string(5, "speed reference", *_OSD_REFERENCES),
        vessel_set_true=parser.float64(6, "vessel set"),
        vessel_drift=parser.float64(7, "vessel drift"),
        speed_units=parser.enum_string(8, "speed units", *_DISTANCE_UNITS),
    )


def parse_rsd(sentence: BaseSentence) -> RSD:
    """Decode an RSD sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_RSD)
    return RSD(
        sentence=sentence,
        origin1_range=parser.float64(0, "origin 1 range"),
        origin1_bearing=parser.float64(1, "origin 1 bearing"),
        variable_range_marker1=parser.float64(2, "variable range marker 1"),
        bearing_line1=parser.float64(3, "bearing line 1"),
        origin2_range=parser.float64(4, "origin 2 range"),
        origin2_bearing=parser.float64(5, "origin 2 bearing"),
        variable_range_marker2=parser.float64(6, "variable range marker 2"),
        bearing_line2=parser.float64(7, "bearing line 2"),
        cursor_range_from_own_ship=parser.float64(8, "cursor range from own ship"),
        cursor_bearing_degrees=parser.float64(9, "cursor bearing"),
        range_scale=parser.float64(10, "range scale"),
        range_unit=parser.enum_string(11, "range units", *_DISTANCE_UNITS),
        display_rotation=parser.enum_string(
            12,
            "display rotation",
            RSD_DISPLAY_ROTATION_COURSE_UP,
            RSD_DISPLAY_ROTATION_HEADING_UP,
            RSD_DISPLAY_ROTATION_NORTH_UP,
        ),
    )


def parse_rte(sentence: BaseSentence) -> RTE:
    """Decode an RTE sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_RTE)
    return RTE(
        sentence=sentence,
        number_of_sentences=parser.int64(0, "number of sentences"),
        sentence_number=parser.int64(1, "sentence number"),
        active_route_or_waypoint_list=parser.enum_string(
            2, "active route or waypoint list", ACTIVE_ROUTE, WAYPOINT_LIST
        ),
        name=parser.string(3, "name or number"),
        idents=parser.list_string(4, "ident of waypoints"),
    )