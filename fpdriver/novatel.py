"""NovAtel OEM7 binary message types, enumerations and the CRC32 checksum."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar

SYNC_CHAR_1 = 0xAA
SYNC_CHAR_2 = 0x44
SYNC_CHAR_3_LONG = 0x12
SYNC_CHAR_3_SHORT = 0x13

_CRC32_POLYNOMIAL = 0xEDB88320


def nov_crc32(data: bytes) -> int:
    """NovAtel CRC32: reflected polynomial 0xEDB88320, zero start, no final xor."""
    crc = 0
    for byte in bytes(data):
        crc ^= byte
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ _CRC32_POLYNOMIAL
            else:
                crc >>= 1
    return crc


class MessageId(IntEnum):
    GPGGA = 218
    RAWIMU = 268
    INSPVA = 507
    HEADING2 = 1335
    BESTPOS = 42
    BERSTXYZ = 241
    BESTGNSSPOS = 1429
    INSPVAX = 1465
    BESTXYZ = 241
    BESTUTM = 726
    BESTVEL = 99
    CORRIMUS = 2264
    IMURATECORRIMUS = 1362
    INSCONFIG = 1945
    INSPVAS = 508
    INSSTDEV = 2051
    PSRDOP2 = 1163
    RXSTATUS = 93
    TIME = 101


class ExtendedSolutionStatusIns(IntFlag):
    """Bit masks of the INS extended solution status word."""

    POSITION_UPDATE = 0x00000001
    PHASE_UPDATE = 0x00000002
    ZERO_VEOLICYT_UPDATE = 0x00000004
    WHEEL_SENSOR_UPDATE = 0x00000008
    HEADING_UPDATE = 0x00000010
    EXTERNAL_POSITION_UPDATE = 0x00000020
    INS_SOLUTION_CONVERGENCE = 0x00000040
    DOPPLER_UPDATE = 0x00000080
    PSEUDORANGE_UPDATE = 0x00000100
    VELOCITY_UPDATE = 0x00000200
    DR_UPDATE = 0x00000800
    PHASE_WINDUP_UPDATE = 0x00001000
    COURSE_OVER_GROUND_UPDATE = 0x00002000
    EXTERNAL_VELOCITY_UPDATE = 0x00004000
    EXTERNAL_ATTITUDE_UPDATE = 0x00008000
    EXTERNAL_HEADING_UPDATE = 0x00010000
    EXTERNAL_HEIGHT_UPDATE = 0x00020000
    TURN_ON_BIAS_ESTIMATED = 0x01000000
    ALIGNMENT_DIRECTION_VERIFIED = 0x02000000
    ALIGNMENT_INDICATION_1 = 0x04000000
    ALIGNMENT_INDICATION_2 = 0x08000000
    ALIGNMENT_INDICATION_3 = 0x10000000
    NVM_SEED_INDICATION_1 = 0x20000000
    NVM_SEED_INDICATION_2 = 0x40000000
    NVM_SEED_INDICATION_3 = 0x80000000


class GpsGlonassSignalUsed(IntFlag):
    GPS_L1 = 0x01
    GPS_L2 = 0x02
    GPS_L5 = 0x04
    GLONASS_L1 = 0x10
    GLONASS_L2 = 0x20
    GLONASS_L5 = 0x40


class GalileoBeidouSignalUsed(IntFlag):
    GALILEO_L1 = 0x01
    GALILEO_L2 = 0x02
    GALILEO_L5 = 0x04
    BEIDOU_L1 = 0x10
    BEIDOU_L2 = 0x20
    BEIDOU_L5 = 0x40


class InertialSolutionStatus(IntEnum):
    INS_INACTIVE = 0
    INS_ALIGNING = 1
    INS_HIGH_VARIANCE = 2
    INS_SOLUTION_GOOD = 3
    INS_SOLUTION_FREE = 6
    INS_ALIGNMENT_COMPLETE = 7
    DETERMINING_ORIENTATION = 8
    WAITING_INITIAL_POS = 9
    WAITING_AZIMUTH = 10
    INITIALIZING_BIASES = 11
    MOTION_DETECT = 12


class PositionOrVelocityType(IntEnum):
    NONE = 0
    FIXEDPOS = 1
    FIXEDHEIGHT = 2
    DOPPLER_VELOCITY = 8
    SINGLE = 16
    PSRDIFF = 17
    WAAS = 18
    PROPAGATED = 19
    L1_FLOAT = 32
    NARROW_FLOAT = 34
    L1_INT = 48
    WIDE_INT = 49
    NARROW_INT = 50
    RTK_DIRECT_INS = 51
    INS_SBAS = 52
    INS_PSRSP = 53
    INS_PSRDIFF = 54
    INS_RTKFLOAT = 55
    INS_RTKFIXED = 56
    PPP_CONVERGING = 68
    PPP = 69
    OPERATIONAL = 70
    WARNING = 71
    OUT_OF_BOUNDS = 72
    INS_PPP_CONVERGING = 73
    INS_PPP = 74
    PPP_BASIC_CONVERGING = 77
    PPP_BASIC = 78
    INS_PPP_BASIC_CONVERGING = 79
    INS_PPP_BASIC = 80


class GpsReferenceTimeStatus(IntEnum):
    UNKNOWN = 20
    APPROXIMATE = 60
    COARSEADJUSTING = 80
    COARSE = 100
    COARSESTEERING = 120
    FREEWHEELING = 130
    FINEADJUSTING = 140
    FINE = 160
    FINEBACKUPSTEERING = 170
    FINESTEERING = 180
    SATTIME = 200


class MessageTypeSource(IntEnum):
    PRIMARY = 0b00000000
    SECONDARY = 0b00000001
    MASK = 0b00011111


class MessageTypeFormat(IntEnum):
    BINARY = 0b00000000
    ASCII = 0b00100000
    AASCII_NMEA = 0b01000000
    RESERVED = 0b01100000
    MASK = 0b01100000


class MessageTypeResponse(IntEnum):
    ORIGINAL = 0b00000000
    RESPONSE = 0b10000000
    MASK = 0b10000000


class PortAddress(IntEnum):
    NO_PORTS = 0x00
    ALL_PORTS = 0x80
    THISPORT = 0xC0


class SolStat(IntEnum):
    SOL_COMPUTED = 0
    INSUFFICIENT_OBS = 1
    NO_CONVERGENCE = 2
    SINGULARITY = 3
    COV_TRACE = 4
    TEST_DIST = 5
    COLD_START = 6
    V_H_LIMIT = 7
    VARIANCE = 8
    RESIDUALS = 9


class DatumId(IntEnum):
    WGS84 = 61
    USER = 63


class SolutionSource(IntEnum):
    PRIMARY = 0b00000100
    SECONDARY = 0b00001000
    MASK = 0b00001100


class ExtendedSolutionStatusGnss(IntFlag):
    SOL_VERIFIED = 0b00000001


_EMPTY4 = b"\x00\x00\x00\x00"


class NovStruct:
    """Base for fixed-layout little-endian packed binary records."""

    _FORMAT: ClassVar[str] = "<"

    @classmethod
    def _layout(cls) -> struct.Struct:
        return struct.Struct(cls._FORMAT)

    @classmethod
    def size(cls) -> int:
        """Size of the record on the wire in bytes."""
        return cls._layout().size

    @classmethod
    def from_bytes(cls, data):
        """Decode the record from the start of ``data``; trailing bytes are ignored."""
        layout = cls._layout()
        raw = bytes(data)
        if len(raw) < layout.size:
            raise ValueError(f"{cls.__name__} needs {layout.size} bytes, got {len(raw)}")
        return cls(*layout.unpack_from(raw))

    def to_bytes(self) -> bytes:
        """Encode the record in its wire layout."""
        return self._layout().pack(*astuple(self))


@dataclass
class MessageHeader(NovStruct):
    """Long binary message header."""

    _FORMAT: ClassVar[str] = "<BBBBHBBHHBBHiIHH"

    sync1: int = SYNC_CHAR_1
    sync2: int = SYNC_CHAR_2
    sync3: int = SYNC_CHAR_3_LONG
    header_length: int = 28
    message_id: int = 0
    message_type: int = 0
    port_address: int = 0
    message_length: int = 0
    sequence: int = 0
    idle_time: int = 0
    time_status: int = 0
    gps_week: int = 0
    gps_milliseconds: int = 0
    receiver_status: int = 0
    reserved: int = 0
    receiver_version: int = 0


@dataclass
class ShortMessageHeader(NovStruct):
    """Short binary message header."""

    _FORMAT: ClassVar[str] = "<BBBBHHi"

    sync1: int = SYNC_CHAR_1
    sync2: int = SYNC_CHAR_2
    sync3: int = SYNC_CHAR_3_SHORT
    message_length: int = 0
    message_id: int = 0
    gps_week: int = 0
    gps_milliseconds: int = 0


@dataclass
class BestPos(NovStruct):
    _FORMAT: ClassVar[str] = "<IIdddfIfff4sffBBBBBBBB"

    sol_stat: int = 0
    pos_type: int = 0
    lat: float = 0.0
    lon: float = 0.0
    hgt: float = 0.0
    undulation: float = 0.0
    datum_id: int = 0
    lat_stdev: float = 0.0
    lon_stdev: float = 0.0
    hgt_stdev: float = 0.0
    stn_id: bytes = _EMPTY4
    diff_age: float = 0.0
    sol_age: float = 0.0
    num_svs: int = 0
    num_sol_svs: int = 0
    num_sol_l1_svs: int = 0
    num_sol_multi_svs: int = 0
    reserved: int = 0
    ext_sol_stat: int = 0
    galileo_beidou_sig_mask: int = 0
    gps_glonass_sig_mask: int = 0


@dataclass
class BestGnssPos(BestPos):
    """BESTGNSSPOS payload; same layout as BESTPOS."""


@dataclass
class BestXyz(NovStruct):
    _FORMAT: ClassVar[str] = "<IIdddfffIIdddfff"

    p_sol_stat: int = 0
    pos_type: int = 0
    p_x: float = 0.0
    p_y: float = 0.0
    p_z: float = 0.0
    p_x_stdev: float = 0.0
    p_y_stdev: float = 0.0
    p_z_stdev: float = 0.0
    v_sol_stat: int = 0
    vel_type: int = 0
    v_x: float = 0.0
    v_y: float = 0.0
    v_z: float = 0.0
    v_x_stdev: float = 0.0
    v_y_stdev: float = 0.0
    v_z_stdev: float = 0.0


@dataclass
class BestVel(NovStruct):
    _FORMAT: ClassVar[str] = "<IIffdddf"

    sol_stat: int = 0
    vel_type: int = 0
    latency: float = 0.0
    diff_age: float = 0.0
    hor_speed: float = 0.0
    track_gnd: float = 0.0
    ver_speed: float = 0.0
    reserved: float = 0.0


@dataclass
class InsPvas(NovStruct):
    _FORMAT: ClassVar[str] = "<I10dI"

    gnss_week: int = 0
    seconds: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    height: float = 0.0
    north_velocity: float = 0.0
    east_velocity: float = 0.0
    up_velocity: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    azimuth: float = 0.0
    status: int = 0


@dataclass
class CorrImus(NovStruct):
    _FORMAT: ClassVar[str] = "<I6dII"

    imu_data_count: int = 0
    pitch_rate: float = 0.0
    roll_rate: float = 0.0
    yaw_rate: float = 0.0
    lateral_acc: float = 0.0
    longitudinal_acc: float = 0.0
    vertical_acc: float = 0.0
    reserved1: int = 0
    reserved2: int = 0


@dataclass
class ImuRateCorrImus(NovStruct):
    _FORMAT: ClassVar[str] = "<I7d"

    week: int = 0
    seconds: float = 0.0
    pitch_rate: float = 0.0
    roll_rate: float = 0.0
    yaw_rate: float = 0.0
    lateral_acc: float = 0.0
    longitudinal_acc: float = 0.0
    vertical_acc: float = 0.0


@dataclass
class InsStdev(NovStruct):
    _FORMAT: ClassVar[str] = "<9fIHHII"

    latitude_stdev: float = 0.0
    longitude_stdev: float = 0.0
    height_stdev: float = 0.0
    north_velocity_stdev: float = 0.0
    east_velocity_stdev: float = 0.0
    up_velocity_stdev: float = 0.0
    roll_stdev: float = 0.0
    pitch_stdev: float = 0.0
    azimuth_stdev: float = 0.0
    ext_sol_status: int = 0
    time_since_last_update: int = 0
    reserved1: int = 0
    reserved2: int = 0
    reserved3: int = 0


@dataclass
class InsPvax(NovStruct):
    _FORMAT: ClassVar[str] = "<IIdddf6d9fIH"

    ins_status: int = 0
    pos_type: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    height: float = 0.0
    undulation: float = 0.0
    north_velocity: float = 0.0
    east_velocity: float = 0.0
    up_velocity: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    azimuth: float = 0.0
    latitude_stdev: float = 0.0
    longitude_stdev: float = 0.0
    height_stdev: float = 0.0
    north_velocity_stdev: float = 0.0
    east_velocity_stdev: float = 0.0
    up_velocity_stdev: float = 0.0
    roll_stdev: float = 0.0
    pitch_stdev: float = 0.0
    azimuth_stdev: float = 0.0
    extended_status: int = 0
    time_since_update: int = 0


@dataclass
class Heading2(NovStruct):
    _FORMAT: ClassVar[str] = "<II6f4s4sBBBBBBBB"

    sol_status: int = 0
    pos_type: int = 0
    length: float = 0.0
    heading: float = 0.0
    pitch: float = 0.0
    reserved: float = 0.0
    heading_stdev: float = 0.0
    pitch_stdev: float = 0.0
    rover_stn_id: bytes = _EMPTY4
    master_stn_id: bytes = _EMPTY4
    num_sv_tracked: int = 0
    num_sv_in_sol: int = 0
    num_sv_obs: int = 0
    num_sv_multi: int = 0
    sol_source: int = 0
    ext_sol_status: int = 0
    galileo_beidou_sig_mask: int = 0
    gps_glonass_sig_mask: int = 0


@dataclass
class BestUtm(NovStruct):
    _FORMAT: ClassVar[str] = "<IIIIdddfIfff4sffBBBBBBBB"

    sol_stat: int = 0
    pos_type: int = 0
    lon_zone_number: int = 0
    lat_zone_letter: int = 0
    northing: float = 0.0
    easting: float = 0.0
    height: float = 0.0
    undulation: float = 0.0
    datum_id: int = 0
    northing_stddev: float = 0.0
    easting_stddev: float = 0.0
    height_stddev: float = 0.0
    stn_id: bytes = _EMPTY4
    diff_age: float = 0.0
    sol_age: float = 0.0
    num_svs: int = 0
    num_sol_svs: int = 0
    num_sol_ggl1_svs: int = 0
    num_sol_multi_svs: int = 0
    reserved: int = 0
    ext_sol_stat: int = 0
    galileo_beidou_sig_mask: int = 0
    gps_glonass_sig_mask: int = 0


@dataclass
class RxStatus(NovStruct):
    _FORMAT: ClassVar[str] = "<22I"

    error: int = 0
    num_status_codes: int = 0
    rxstat: int = 0
    rxstat_pri_mask: int = 0
    rxstat_set_mask: int = 0
    rxstat_clr_mask: int = 0
    aux1_stat: int = 0
    aux1_stat_pri: int = 0
    aux1_stat_set: int = 0
    aux1_stat_clr: int = 0
    aux2_stat: int = 0
    aux2_stat_pri: int = 0
    aux2_stat_set: int = 0
    aux2_stat_clr: int = 0
    aux3_stat: int = 0
    aux3_stat_pri: int = 0
    aux3_stat_set: int = 0
    aux3_stat_clr: int = 0
    aux4_stat: int = 0
    aux4_stat_pri: int = 0
    aux4_stat_set: int = 0
    aux4_stat_clr: int = 0


@dataclass
class TimeMessage(NovStruct):
    """TIME log payload."""

    _FORMAT: ClassVar[str] = "<IdddIBBBBII"

    clock_status: int = 0
    offset: float = 0.0
    offset_std: float = 0.0
    utc_offset: float = 0.0
    utc_year: int = 0
    utc_month: int = 0
    utc_day: int = 0
    utc_hour: int = 0
    utc_min: int = 0
    utc_msec: int = 0
    utc_status: int = 0


@dataclass
class PsrDop2Fixed(NovStruct):
    _FORMAT: ClassVar[str] = "<4f"

    gdop: float = 0.0
    pdop: float = 0.0
    hdop: float = 0.0
    vdop: float = 0.0


@dataclass
class RawImu(NovStruct):
    _FORMAT: ClassVar[str] = "<IdIiiiiii"

    week: int = 0
    seconds: float = 0.0
    imu_stat: int = 0
    z_accel: int = 0
    y_accel: int = 0
    x_accel: int = 0
    z_gyro: int = 0
    y_gyro: int = 0
    x_gyro: int = 0


@dataclass
class RawDmi(NovStruct):
    """RAWDMI message: short header followed by four wheel-tick counters and a mask."""

    _FORMAT: ClassVar[str] = "<BBBBHHiiiiii"

    head1: int = SYNC_CHAR_1
    head2: int = SYNC_CHAR_2
    head3: int = SYNC_CHAR_3_SHORT
    payload_len: int = 0
    msg_id: int = 0
    wno: int = 0
    tow: int = 0
    dmi1: int = 0
    dmi2: int = 0
    dmi3: int = 0
    dmi4: int = 0
    mask: int = 0


OEM7_BINARY_MSG_HDR_LEN = MessageHeader.size()
OEM7_BINARY_MSG_SHORT_HDR_LEN = ShortMessageHeader.size()