# gnsskit

Tools for working with the output of GNSS receivers:

- parsers for the NMEA sentences GGA, RMC and GSA (`gnsskit.gga`,
  `gnsskit.rmc`, `gnsskit.gsa`);
- strict number parsing for NMEA fields (`gnsskit.strings`,
  `gnsskit.parsing`), and little-endian field readers for SBF binary block
  headers (CRC, block id, length, time of week, week number);
- unit conversions such as `hhmmss.ss` to seconds of day and `ddmm.mmmm` to
  decimal degrees;
- consistency checks and auto-publish defaults for receiver settings
  (`gnsskit.settings`);
- serial baud rate stepping (`gnsskit.baudrate`) and NMEA sentence end
  search in received data (`gnsskit.framing`).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Parsing NMEA sentences

Each parser takes the sentence body already split at commas, with the
message id as the first field and the checksum as the last. A sentence that
cannot be parsed raises `gnsskit.parsing.ParseError`, a subclass of
`ValueError`.

```python
from gnsskit.gga import GgaParser

body = "$GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,,*47".split(",")

parser = GgaParser()
msg = parser.parse(body, "gnss", False, 0, None)
print(msg.lat, msg.lon, msg.num_sats)   # 48.1173 11.516666... 8
print(parser.was_last_valid())          # True
```

`RmcParser` in `gnsskit.rmc` and `GsaParser` in `gnsskit.gsa` take the same
arguments and return `RmcMessage` and `GsaMessage` dataclasses. `GgaParser`
and `RmcParser` remember whether the last sentence they parsed was valid,
reported by `was_last_valid()`.

The arguments after `body` are `frame_id`, `use_gnss_time`, `timestamp` and
`now`. With `use_gnss_time` true, GGA and RMC compute `stamp` in
nanoseconds from the sentence's UTC time combined with the UTC date of `now`
(a `datetime`, a Unix time in seconds, or `None` for the current time);
otherwise `stamp` is set to `timestamp`. GSA carries no time and ignores
these arguments. RMC speeds are converted from knots to metres per second.

## Field helpers

```python
from gnsskit import parsing, strings

parsing.convert_dms_to_degrees(4807.038)          # 48.1173
parsing.convert_utc_double_to_seconds(123519.0)   # 45319.0
parsing.convert_user_period_to_rx_command(500)    # "msec500"
strings.trim_decimal_places(1.23456)              # "1.235"
```

The `parsing.parse_*` functions treat an empty field as zero and raise
`ParseError` on text that is not a number or is out of range; the
`strings.to_*` functions reject empty text too and raise `ValueError`.

SBF header fields are read from a bytes-like block with `parsing.get_crc`,
`parsing.get_id`, `parsing.get_length`, `parsing.get_tow` and
`parsing.get_wnc`; `parsing.unpack_*` read single little-endian values at an
offset.

## Settings checks

`gnsskit.settings` holds the `Settings` and `IpServer` dataclasses. The
functions `check_uniqueness_of_ips`, `check_uniqueness_of_ips_ports`,
`check_uniqueness_of_ips_vsm` and `check_uniqueness_of_ips_ports_vsm` return
a list of error messages for IP servers and ports that are used more than
once. `auto_publish` switches on every publisher in place when
`auto_publish` is set and `configure_rx` is not, and returns a warning when
both are set.

## Serial and framing helpers

```python
from gnsskit.baudrate import BAUDRATES, baudrate_steps
from gnsskit.framing import find_nmea_end

list(baudrate_steps(115200, 460800))       # [230400, 460800]
find_nmea_end(b"$GPGGA,1*00\r\n$GP", 0)    # 12, the index of the LF
```

## What it does not do

The package does not open serial ports, TCP or UDP connections, or log
files, and does not configure a receiver; `baudrate` and `framing` only
compute the steps and offsets. It has no command-line program. Of the NMEA
sentences it parses only GGA, RMC and GSA; GSV sentences are not parsed, and
SBF blocks are read only as far as their header fields.