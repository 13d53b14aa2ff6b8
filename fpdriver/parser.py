"""Detection of NMEA sentences and NovAtel binary frames at the start of a buffer."""

from __future__ import annotations

from fpdriver.novatel import (
    SYNC_CHAR_1,
    SYNC_CHAR_2,
    SYNC_CHAR_3_LONG,
    SYNC_CHAR_3_SHORT,
    nov_crc32,
)

NMEA_PREAMBLE = ord("$")
MAX_NMEA_SIZE = 400
MAX_NOV_SIZE = 4096

_NMEA_TERMINATORS = frozenset(b"\r\n*")
_NMEA_RESERVED = frozenset(b"$\\!~")
_SHORT_HEADER_LEN = 12
_CRC_LEN = 4


def _as_bytes(buf) -> bytes:
    if isinstance(buf, str):
        return buf.encode("utf-8")
    return bytes(buf)


def is_nmea_message(buf) -> int:
    """Length of the NMEA sentence at the start of ``buf``.

    Returns 0 if ``buf`` does not start with a valid sentence and -1 if more
    data is needed to decide.
    """
    data = _as_bytes(buf)
    size = len(data)
    if size == 0:
        return -1
    if data[0] != NMEA_PREAMBLE:
        return 0

    length = 1  # length of the sentence excluding the terminator
    ck = 0
    while True:
        if length > MAX_NMEA_SIZE:
            return 0
        if length >= size:
            return -1
        char = data[length]
        if char in _NMEA_TERMINATORS:
            break
        if char < 0x20 or char > 0x7E or char in _NMEA_RESERVED:
            return 0
        ck ^= char
        length += 1

    # star, two checksum digits and \r\n
    if size < length + 5:
        return -1

    if data[length] == ord("*") and data[length + 3] == ord("\r") and data[length + 4] == ord("\n"):
        c1 = ord("0") + ((ck >> 4) & 0x0F)
        c2 = ord("0") + (ck & 0x0F)
        if c2 > ord("9"):
            c2 += ord("A") - ord("9") - 1
        if data[length + 1] == c1 and data[length + 2] == c2:
            return length + 5
    return 0


def is_nov_message(buf) -> int:
    """Length of the NovAtel binary frame at the start of ``buf``.

    Returns 0 if ``buf`` does not start with a valid frame and -1 if more
    data is needed to decide.
    """
    data = _as_bytes(buf)
    size = len(data)
    if size == 0:
        return -1
    if data[0] != SYNC_CHAR_1:
        return 0
    if size < 3:
        return -1
    if data[1] != SYNC_CHAR_2 or data[2] not in (SYNC_CHAR_3_LONG, SYNC_CHAR_3_SHORT):
        return 0
    if size < 12:
        return -1

    if data[2] == SYNC_CHAR_3_LONG:
        header_len = data[3]
        msg_len = data[8] | (data[9] << 8)
    else:
        header_len = _SHORT_HEADER_LEN
        msg_len = data[3]
    length = header_len + msg_len + _CRC_LEN

    if length > MAX_NOV_SIZE:
        return 0
    if size < length:
        return -1

    crc = int.from_bytes(data[length - _CRC_LEN : length], "little")
    if crc == nov_crc32(data[: length - _CRC_LEN]):
        return length
    return 0