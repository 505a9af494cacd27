"""Environmental and machinery sentences: heartbeat, weather, temperatures, wind, RPM and rudder."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import STATUS_INVALID, STATUS_VALID, TEMPERATURE_CELSIUS
from .parser import BaseSentence, Parser

TYPE_HBT = "HBT"
TYPE_MDA = "MDA"
TYPE_MTA = "MTA"
TYPE_MTW = "MTW"
TYPE_MWD = "MWD"
TYPE_MWV = "MWV"
TYPE_RPM = "RPM"
TYPE_RSA = "RSA"

INCH_MDA = "I"
BARS_MDA = "B"
DEGREES_C_MDA = "C"
TRUE_MDA = "T"
MAGNETIC_MDA = "M"
KNOTS_MDA = "N"
METERS_SECOND_MDA = "M"

CELSIUS_MTW = "C"

TRUE_MWD = "T"
MAGNETIC_MWD = "M"
KNOTS_MWD = "N"
METERS_SECOND_MWD = "M"

RELATIVE_MWV = "R"
THEORETICAL_MWV = "T"
UNIT_KMH_MWV = "K"
UNIT_MS_MWV = "M"
UNIT_KNOTS_MWV = "N"
UNIT_S_MILES_H_MWV = "S"
VALID_MWV = "A"
INVALID_MWV = "V"

SOURCE_ENGINE_RPM = "E"
SOURCE_SHAFT_RPM = "S"


@dataclass
class HBT:
    """Heartbeat supervision: whether the equipment is operating normally."""

    sentence: BaseSentence
    interval: float
    operation_status: str
    message_id: int


@dataclass
class MDA:
    """Meteorological composite: pressure, temperatures, humidity and wind."""

    sentence: BaseSentence
    pressure_inch: float
    inches_valid: bool
    pressure_bar: float
    bars_valid: bool
    air_temp: float
    air_temp_valid: bool
    water_temp: float
    water_temp_valid: bool
    relative_hum: float
    absolute_hum: float
    dew_point: float
    dew_point_valid: bool
    wind_direction_true: float
    true_valid: bool
    wind_direction_magnetic: float
    magnetic_valid: bool
    wind_speed_knots: float
    knots_valid: bool
    wind_speed_meters: float
    meters_valid: bool


@dataclass
class MTA:
    """Air temperature."""

    sentence: BaseSentence
    temperature: float
    unit: str


@dataclass
class MTW:
    """Mean temperature of water."""

    sentence: BaseSentence
    temperature: float
    celsius_valid: bool


@dataclass
class MWD:
    """Wind direction and speed with respect to north."""

    sentence: BaseSentence
    wind_direction_true: float
    true_valid: bool
    wind_direction_magnetic: float
    magnetic_valid: bool
    wind_speed_knots: float
    knots_valid: bool
    wind_speed_meters: float
    meters_valid: bool


@dataclass
class MWV:
    """Wind speed and angle relative to the vessel's bow."""

    sentence: BaseSentence
    wind_angle: float
    reference: str
    wind_speed: float
    wind_speed_unit: str
    status_valid: bool


@dataclass
class RPM:
    """Engine or shaft revolutions and propeller pitch."""

    sentence: BaseSentence
    source: str
    engine_number: int
    speed_rpm: float
    pitch_percent: float
    status: str


@dataclass
class RSA:
    """Rudder sensor angle."""

    sentence: BaseSentence
    starboard_rudder_angle: float
    starboard_rudder_angle_status: str
    port_rudder_angle: float
    port_rudder_angle_status: str


def parse_hbt(sentence: BaseSentence) -> HBT:
    """Decode an HBT sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_HBT)
    return HBT(
        sentence=sentence,
        interval=parser.float64(0, "interval"),
        operation_status=parser.enum_string(1, "operation status", STATUS_VALID, STATUS_INVALID),
        message_id=parser.int64(2, "message ID"),
    )


def parse_mda(sentence: BaseSentence) -> MDA:
    """Decode an MDA sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_MDA)

    def flag(i: int, context: str, expected: str) -> bool:
        return parser.enum_string(i, context, expected) == expected

    return MDA(
        sentence=sentence,
        pressure_inch=parser.float64(0, "pressure in inch"),
        inches_valid=flag(1, "inches valid", INCH_MDA),
        pressure_bar=parser.float64(2, "pressure in bar"),
        bars_valid=flag(3, "bars valid", BARS_MDA),
        air_temp=parser.float64(4, "air temp"),
        air_temp_valid=flag(5, "air temp valid", DEGREES_C_MDA),
        water_temp=parser.float64(6, "water temp"),
        water_temp_valid=flag(7, "water temp valid", DEGREES_C_MDA),
        relative_hum=parser.float64(8, "relative humidity"),
        absolute_hum=parser.float64(9, "absolute humidity"),
        dew_point=parser.float64(10, "dewpoint"),
        dew_point_valid=flag(11, "dewpoint valid", DEGREES_C_MDA),
        wind_direction_true=parser.float64(12, "wind direction true"),
        true_valid=flag(13, "wind direction true valid", TRUE_MDA),
        wind_direction_magnetic=parser.float64(14, "wind direction magnetic"),
        magnetic_valid=flag(15, "wind direction magnetic valid", MAGNETIC_MDA),
        wind_speed_knots=parser.float64(16, "windspeed knots"),
        knots_valid=flag(17, "windspeed knots valid", KNOTS_MDA),
        wind_speed_meters=parser.float64(18, "windspeed m/s"),
        meters_valid=flag(19, "windspeed m/s valid", METERS_SECOND_MDA),
    )


def parse_mta(sentence: BaseSentence) -> MTA:
    """Decode an MTA sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_MTA)
    return MTA(
        sentence=sentence,
        temperature=parser.float64(0, "temperature"),
        unit=parser.enum_string(1, "temperature unit", TEMPERATURE_CELSIUS),
    )


def parse_mtw(sentence: BaseSentence) -> MTW:
    """Decode an MTW sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_MTW)
    return MTW(
        sentence=sentence,
        temperature=parser.float64(0, "temperature"),
        celsius_valid=parser.enum_string(1, "unit of measurement celsius", CELSIUS_MTW)
        == CELSIUS_MTW,
    )


def parse_mwd(sentence: BaseSentence) -> MWD:
    """Decode an MWD sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_MWD)

    def flag(i: int, context: str, expected: str) -> bool:
        return parser.enum_string(i, context, expected) == expected

    return MWD(
        sentence=sentence,
        wind_direction_true=parser.float64(0, "true wind direction"),
        true_valid=flag(1, "true wind valid", TRUE_MWD),
        wind_direction_magnetic=parser.float64(2, "magnetic wind direction"),
        magnetic_valid=flag(3, "magnetic direction valid", MAGNETIC_MWD),
        wind_speed_knots=parser.float64(4, "windspeed knots"),
        knots_valid=flag(5, "windspeed knots valid", KNOTS_MWD),
        wind_speed_meters=parser.float64(6, "windspeed m/s"),
        meters_valid=flag(7, "windspeed m/s valid", METERS_SECOND_MWD),
    )


def parse_mwv(sentence: BaseSentence) -> MWV:
    """Decode an MWV sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_MWV)
    return MWV(
        sentence=sentence,
        wind_angle=parser.float64(0, "wind angle"),
        reference=parser.enum_string(1, "reference", RELATIVE_MWV, THEORETICAL_MWV),
        wind_speed=parser.float64(2, "wind speed"),
        wind_speed_unit=parser.enum_string(
            3, "wind speed unit", UNIT_KMH_MWV, UNIT_MS_MWV, UNIT_KNOTS_MWV, UNIT_S_MILES_H_MWV
        ),
        status_valid=parser.enum_string(4, "status", VALID_MWV, INVALID_MWV) == VALID_MWV,
    )


def parse_rpm(sentence: BaseSentence) -> RPM:
    """Decode an RPM sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_RPM)
    return RPM(
        sentence=sentence,
        source=parser.enum_string(0, "source", SOURCE_ENGINE_RPM, SOURCE_SHAFT_RPM),
        engine_number=parser.int64(1, "engine number"),
        speed_rpm=parser.float64(2, "speed"),
        pitch_percent=parser.float64(3, "pitch"),
        status=parser.enum_string(4, "status", STATUS_VALID, STATUS_INVALID),
    )


def parse_rsa(sentence: BaseSentence) -> RSA:
    """Decode an RSA sentence."""
    parser = Parser(sentence)
    parser.assert_type(TYPE_RSA)
    return RSA(
        sentence=sentence,
        starboard_rudder_angle=parser.float64(0, "starboard rudder angle"),
        starboard_rudder_angle_status=parser.enum_string(
            1, "starboard rudder angle status", STATUS_VALID, STATUS_INVALID
        ),
        port_rudder_angle=parser.float64(2, "port rudder angle"),
        port_rudder_angle_status=parser.enum_string(
            3, "port rudder angle status", STATUS_VALID, STATUS_INVALID
        ),
    )