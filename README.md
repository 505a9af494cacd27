# nmeakit

Typed parsers for NMEA 0183 sentences. Each parser takes a sentence that has
already been split into talker, type and fields. It returns a dataclass that
holds the decoded values. If a field is malformed, the parser raises
`ParseError`, a subclass of `ValueError`. The message looks like
`nmea: HCHDG invalid heading: X`.

## Installation

```
pip install nmeakit
```

The package has no runtime dependencies. To run the test suite, install the `test` extra:

```
pip install "nmeakit[test]"
pytest
```

## What it covers

- **Field access** (`nmeakit.parser`): `BaseSentence`, `Parser` and
  `ParseError`. `BaseSentence` holds `talker`, `type`, `fields`, `checksum`
  and `raw`. Its `prefix()` method returns the talker and type joined
  together. `Parser` reads the following from a sentence's fields:
  - strings (`string`, `list_string`)
  - enumerations (`enum_string`, `enum_chars`)
  - decimal and hexadecimal integers (`int64`, `hex_int64`)
  - floats (`float64`)
  - values that may be absent (`null_int64` and `null_float64`, which return `None` for an empty field)
  - AIS six-bit armoured payloads (`six_bit_ascii_armour`)

  The first bad field raises `ParseError`.
- **Shared field values** (`nmeakit.constants`): status, compass direction,
  heading reference, temperature and distance unit letters.
- **Navigation** (`nmeakit.navigation`):
  - satellites in view (`GSV`, `GSVInfo`)
  - headings (`HDG`, `HDM`, `HDT`, `HSC`)
  - rate of turn (`ROT`)
  - own ship data (`OSD`)
  - radar system data (`RSD`)
  - routes (`RTE`)

  Each type has its `parse_*` function.
- **Environment and machinery** (`nmeakit.environment`):
  - heartbeat (`HBT`)
  - meteorological composite (`MDA`)
  - air and water temperature (`MTA`, `MTW`)
  - wind (`MWD`, `MWV`)
  - revolutions (`RPM`)
  - rudder angle (`RSA`)
- **NMEA 2000 bridges and commands** (`nmeakit.nmea2000`):
  - SeaSmart `PCDIN`
  - `PGN` frames
  - MTK acknowledgements (`MTK`, `PMTK001`)
  - `Query` sentences
- **Proprietary sentences** (`nmeakit.proprietary`):
  - Garmin (`PGRME`, `PGRMT`)
  - attitude (`PHTRO`, `PRDID`)
  - Skipper depth (`PSKPDPT`)
  - Xsens (`PSONCMS`)
  - Kenwood FleetSync and NEXTEDGE identification (`PKLID`, `PKNID`)

## Example

```python
from nmeakit.parser import BaseSentence, ParseError
from nmeakit.navigation import parse_hdt

sentence = BaseSentence(
    talker="GP",
    type="HDT",
    fields=["274.07", "T"],
    raw="$GPHDT,274.07,T*03",
)
hdt = parse_hdt(sentence)
print(hdt.heading, hdt.true)   # 274.07 True

try:
    parse_hdt(BaseSentence(talker="GP", type="HDT", fields=["XXX", "T"]))
except ParseError as exc:
    print(exc)                 # nmea: GPHDT invalid heading: XXX
```

When an optional numeric field is empty, the parser reads it as zero. To tell
a missing value from a real zero, use `Parser.null_int64` and
`Parser.null_float64`.

`parse_query` takes the destination talker from `raw`. For queries, fill in
the raw text as well as the fields.

## What it does not do

- It does not split raw sentence text into a `BaseSentence`.
- It does not check checksums.
- It has no single entry point that picks a parser by sentence type. You
  build the `BaseSentence` yourself and call the matching `parse_*` function.
- It does not parse times, dates or latitude/longitude fields.
- It has no parsers for sentence types other than those listed above, such
  as position fixes.
- It provides no command-line tool.