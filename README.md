# fpdriver

Building blocks for working with the output of a Fixposition positioning
sensor:

- **GNSS coordinate transforms** (`fpdriver.gnss_tf`): WGS84 geodetic ⇄ ECEF,
  ECEF ⇄ ENU and ECEF ⇄ NED about a geodetic reference point, the matching
  rotation matrices, and yaw–pitch–roll in the local ENU frame from an ECEF
  pose (`ecef_pose_to_enu_eul`).
- **Rotations** (`fpdriver.geometry`): a frozen `Quaternion` (w, x, y, z) with
  `identity`, `from_rotation_matrix`, `to_rotation_matrix`, `squared_norm`,
  `inverse` and the Hamilton product `*`, plus `quat_to_eul` and `rot_to_eul`
  for intrinsic ZYX Euler angles (yaw, pitch, roll) in radians.
- **GPS time** (`fpdriver.gps_time`): `GpsTime` (week number and time of
  week, normalised into one week) with `+`, `-`, ordering and tolerant
  equality (1 ms), and `gps_time_to_datetime`, `datetime_to_gps_time` and
  `gps_time_to_stamp` (seconds and nanoseconds since the Unix epoch). The
  GPS–UTC leap offset is fixed at 18 s.
- **Stream framing** (`fpdriver.parser`): `is_nmea_message` and
  `is_nov_message` report the length of a complete NMEA sentence or NovAtel
  binary frame at the start of a buffer, `0` if the buffer does not start with
  one, or `-1` if more data is needed to decide.
- **NovAtel binary types** (`fpdriver.novatel`): message ids and status enums,
  `nov_crc32`, and packed little-endian payload records (`MessageHeader`,
  `ShortMessageHeader`, `BestPos`, `BestGnssPos`, `BestXyz`, `BestVel`,
  `InsPvas`, `InsPvax`, `InsStdev`, `CorrImus`, `ImuRateCorrImus`, `Heading2`,
  `BestUtm`, `RxStatus`, `TimeMessage`, `PsrDop2Fixed`, `RawImu`, `RawDmi`),
  each with `from_bytes`, `to_bytes` and `size`.
- **Data records** (`fpdriver.messages`): dataclasses such as `ImuData`,
  `TfData`, `OdometryData`, `VrtkData` and `NavSatFixData`.
- **Configuration** (`fpdriver.params`): driver settings
  (`FixpositionDriverParams`, `FpOutputParams`, `CustomerInputParams`) read
  from a plain mapping, either nested (`{"fp_output": {"rate": 50}}`) or with
  dotted keys (`{"fp_output.rate": 50}`). Missing values fall back to defaults;
  invalid ones raise `ParamsError`.
- **Wheel-speed conversion** (`fpdriver.odom_converter`): `OdomInputParams`
  and `OdomConverter`, which scale a forward velocity (and optionally a yaw
  rate) into rounded integer speed values.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Geodetic to ECEF and back, and ENU about a reference point:

```python
import math
from fpdriver.gnss_tf import tf_ecef_wgs84llh, tf_wgs84llh_ecef, tf_enu_ecef

ref = (math.radians(47.4), math.radians(8.46), 450.0)   # lat, lon [rad], height [m]
ecef = tf_ecef_wgs84llh(ref)
lat, lon, height = tf_wgs84llh_ecef(ecef)
enu = tf_enu_ecef(ecef, ref)                             # ~ (0, 0, 0)
```

Euler angles from a quaternion:

```python
from fpdriver.geometry import Quaternion, quat_to_eul

yaw, pitch, roll = quat_to_eul(Quaternion.identity())   # 0, 0, 0
```

GPS time arithmetic:

```python
from fpdriver.gps_time import GpsTime, gps_time_to_datetime, gps_time_to_stamp

t = GpsTime(2197, 604790.0) + 20.0   # rolls over into week 2198, tow 10.0
when = gps_time_to_datetime(t)
sec, nanosec = gps_time_to_stamp(t)
```

Framing a byte stream:

```python
from fpdriver.novatel import ShortMessageHeader, nov_crc32
from fpdriver.parser import is_nmea_message, is_nov_message

is_nmea_message(b"$GP")     # -1: incomplete
is_nmea_message(b"hello")   # 0: not an NMEA sentence

header = ShortMessageHeader(message_length=0, message_id=1).to_bytes()
frame = header + nov_crc32(header).to_bytes(4, "little")
is_nov_message(frame)       # 16
```

Loading driver settings:

```python
from fpdriver.params import InputType, load_driver_params

params = load_driver_params(
    {"fp_output": {"type": "serial", "port": "/dev/ttyUSB0", "formats": ["ODOMETRY", "LLH"]}}
)
assert params.fp_output.type is InputType.SERIAL
assert params.fp_output.baudrate == 115200
```

Converting velocities to wheel-speed values:

```python
from fpdriver.odom_converter import OdomConverter, OdomInputParams

params = OdomInputParams.from_mapping(
    {"input_topic": "/odom", "topic_type": "Odometry", "use_angular": True}
)
converter = OdomConverter(params)
converter.convert(0.5, 0.25)   # [500, 250]
converter.convert_message({"twist": {"twist": {"linear": {"x": 0.5}, "angular": {"z": 0.25}}}})
```

## What this package does not do

- It does not turn `$FP,...` ASCII sentences (ODOMETRY, LLH, RAWIMU/CORRIMU,
  TF) into the data records in `fpdriver.messages`; the `fpdriver.converters`
  sub-package is empty.
- It does not open TCP or serial connections to a device, run a read loop, or
  publish anything; it only frames, decodes and transforms data you hand it.
- It installs no command-line programs.