"""Vendor proprietary sentences: Garmin, attitude sensors, Skipper depth and Kenwood FleetSync."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import BaseSentence, Parser

TYPE_PGRME = "GRME"
TYPE_PGRMT = "GRMT"
TYPE_PHTRO = "HTRO"
TYPE_PRDID = "RDID"
TYPE_PSKPDPT = "SKPDPT"
TYPE_PSONCMS = "SONCMS"
TYPE_PKLID = "KLID"
TYPE_PKNID = "KNID"

ERROR_UNIT = "M"

PASS_PGRMT = "P"
FAIL_PGRMT = "F"
DATA_RETAINED_PGRMT = "R"
DATA_LOST_PGRMT = "L"
DATA_COLLECTING_PGRMT = "C"

PHTRO_BOW_UP = "M"
PHTRO_BOW_DOWN = "P"
PHTRO_PORT_UP = "T"
PHTRO_PORT_DOWN = "B"


@dataclass
class PGRME:
    """Garmin estimated position error, in metres."""

    sentence: BaseSentence
    horizontal: float
    vertical: float
    spherical: float


@dataclass
class PGRMT:
    """Garmin sensor status information."""

    sentence: BaseSentence
    model_and_firmware_version: str
    rom_checksum_test: str
    receiver_failure_discrete: str
    stored_data_lost: str
    realtime_clock_lost: str
    oscillator_drift_discrete: str
    data_collection_discrete: str
    sensor_temperature: float
    sensor_configuration_data: str


@dataclass
class PHTRO:
    """Vessel pitch and roll."""

    sentence: BaseSentence
    pitch: float
    bow: str
    roll: float
    port: str


@dataclass
class PRDID:
    """Vessel pitch, roll and true heading."""

    sentence: BaseSentence
    pitch: float
    roll: float
    heading: float


@dataclass
class PSKPDPT:
    """Depth of water for a multiple transducer installation."""

    sentence: BaseSentence
    depth: float
    offset: float
    range_scale: float
    bottom_echo_strength: int
    channel_number: int
    transducer_location: str


@dataclass
class PSONCMS:
    """Xsens quaternion, acceleration, rate of turn, magnetic field and temperature."""

    sentence: BaseSentence
    quaternion0: float
    quaternion1: float
    quaternion2: float
    quaternion3: float
    acceleration_x: float
    acceleration_y: float
    acceleration_z: float
    rate_of_turn_x: float
    rate_of_turn_y: float
    rate_of_turn_z: float
    magnetic_field_x: float
    magnetic_field_y: float
    magnetic_field_z: float
    sensor_temperature: float


@dataclass
class PKLID:
    """Kenwood FleetSync identification."""

    sentence: BaseSentence
    sentance_version: str
    fleet: str
    unit_id: str
    status: str
    extension: str


@dataclass
class PKNID:
    """Kenwood NEXTEDGE identification."""

    sentence: BaseSentence
    sentance_version: str
    unit_id: str
    status: str
    extension: str


def parse_pgrme(sentence: BaseSentence) -> PGRME:
    """Decode a PGRME sentence; every unit field must be metres."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PGRME)
    horizontal = parser.float64(0, "horizontal error")
    parser.enum_string(1, "horizontal error unit", ERROR_UNIT)
    vertical = parser.float64(2, "vertical error")
    parser.enum_string(3, "vertical error unit", ERROR_UNIT)
    spherical = parser.float64(4, "spherical error")
    parser.enum_string(5, "spherical error unit", ERROR_UNIT)
    return PGRME(sentence=sentence, horizontal=horizontal, vertical=vertical, spherical=spherical)


def parse_pgrmt(sentence: BaseSentence) -> PGRMT:
    """Decode a PGRMT sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PGRMT)
    pass_fail = (PASS_PGRMT, FAIL_PGRMT)
    retained_lost = (DATA_RETAINED_PGRMT, DATA_LOST_PGRMT)
    return PGRMT(
        sentence=sentence,
        model_and_firmware_version=parser.string(0, "product, model and software version"),
        rom_checksum_test=parser.enum_string(1, "rom checksum test", *pass_fail),
        receiver_failure_discrete=parser.enum_string(2, "receiver failure discrete", *pass_fail),
        stored_data_lost=parser.enum_string(3, "stored data lost", *retained_lost),
        realtime_clock_lost=parser.enum_string(4, "realtime clock lost", *retained_lost),
        oscillator_drift_discrete=parser.enum_string(5, "oscillator drift discrete", *pass_fail),
        data_collection_discrete=parser.enum_string(
            6, "data collection discrete", DATA_COLLECTING_PGRMT
        ),
        sensor_temperature=parser.float64(7, "sensor temperature in degrees celsius"),
        sensor_configuration_data=parser.enum_string(
            8, "sensor configuration data", *retained_lost
        ),
    )


def parse_phtro(sentence: BaseSentence) -> PHTRO:
    """Decode a PHTRO sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PHTRO)
    return PHTRO(
        sentence=sentence,
        pitch=parser.float64(0, "pitch"),
        bow=parser.enum_string(1, "bow", PHTRO_BOW_UP, PHTRO_BOW_DOWN),
        roll=parser.float64(2, "roll"),
        port=parser.enum_string(3, "port", PHTRO_PORT_UP, PHTRO_PORT_DOWN),
    )


def parse_prdid(sentence: BaseSentence) -> PRDID:
    """Decode a PRDID sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PRDID)
    return PRDID(
        sentence=sentence,
        pitch=parser.float64(0, "pitch"),
        roll=parser.float64(1, "roll"),
        heading=parser.float64(2, "heading"),
    )


def parse_pskpdpt(sentence: BaseSentence) -> PSKPDPT:
    """Decode a PSKPDPT sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PSKPDPT)
    return PSKPDPT(
        sentence=sentence,
        depth=parser.float64(0, "depth"),
        offset=parser.float64(1, "offset"),
        range_scale=parser.float64(2, "range scale"),
        bottom_echo_strength=parser.int64(3, "bottom echo strength"),
        channel_number=parser.int64(4, "channel number"),
        transducer_location=parser.string(5, "transducer location"),
    )


def parse_psoncms(sentence: BaseSentence) -> PSONCMS:
    """Decode a PSONCMS sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PSONCMS)
    return PSONCMS(
        sentence=sentence,
        quaternion0=parser.float64(0, "q0 from quaternions"),
        quaternion1=parser.float64(1, "q1 from quaternions"),
        quaternion2=parser.float64(2, "q2 from quaternions"),
        quaternion3=parser.float64(3, "q3 from quaternions"),
        acceleration_x=parser.float64(4, "acceleration X"),
        acceleration_y=parser.float64(5, "acceleration Y"),
        acceleration_z=parser.float64(6, "acceleration Z"),
        rate_of_turn_x=parser.float64(7, "rate of turn X"),
        rate_of_turn_y=parser.float64(8, "rate of turn Y"),
        rate_of_turn_z=parser.float64(9, "rate of turn Z"),
        magnetic_field_x=parser.float64(10, "magnetic field X"),
        magnetic_field_y=parser.float64(11, "magnetic field Y"),
        magnetic_field_z=parser.float64(12, "magnetic field Z"),
        sensor_temperature=parser.float64(13, "sensor temperature"),
    )


def parse_pklid(sentence: BaseSentence) -> PKLID:
    """Decode a PKLID sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PKLID)
    return PKLID(
        sentence=sentence,
        sentance_version=parser.string(0, "sentance version, range of 00 to 15"),
        fleet=parser.string(1, "fleet, range of 100 to 349"),
        unit_id=parser.string(2, "subscriber unit id, range of 1000 to 4999"),
        status=parser.string(3, "subscriber unit status id, range of 10 to 99"),
        extension=parser.string(4, "reserved for future use, range of 00 to 99"),
    )


def parse_pknid(sentence: BaseSentence) -> PKNID:
    """Decode a PKNID sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_PKNID)
    return PKNID(
        sentence=sentence,
        sentance_version=parser.string(0, "sentance version, range of 00 to 15"),
        unit_id=parser.string(
            1, "unit ID, NXDN range U00001 to U65519, DMR range of  U00000001 to U16776415"
        ),
        status=parser.string(2, "status NXDN, range of 001 to 255"),
        extension=parser.string(3, "reserved for future use, range of 00 to 99"),
    )