"""Streaming of sensor frames read from the robot's serial port."""

import logging
import time
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

import serial

from roombot.checksum import extract_sublist

logger = logging.getLogger(__name__)

T = TypeVar("T")

STREAM = 148
HEADER_BYTE = 19
NR_OF_SENSOR_PACKS_REQUESTED = 15
NR_OF_SENSOR_BYTES_RECEIVED = 39
SENSOR_BUFFER_SIZE = 84  # twice the size of one frame
BUFFER_SLICE = 42  # header + nbytes + sensor bytes + checksum
READ_INTERVAL = 0.02  # s

SENSOR_PACKAGES_WANTED = bytes(
    [STREAM, NR_OF_SENSOR_PACKS_REQUESTED, 13, 21, 22, 24, 25, 26, 35, 39, 40, 41, 42, 43, 44, 45, 58]
)


def sanitize_and_read(
    byte_data: Sequence[int], nbytes: int, decoder: Callable[[list[int]], T]
) -> T | None:
    """Check a frame's header and length byte, then decode its body.

    The body is what remains once the header, the length byte and the
    trailing checksum are stripped. Returns None when the header or the
    length byte is wrong.
    """
    data = list(byte_data)
    if len(data) < 2:
        raise ValueError("frame is too short to hold a header and a length byte")
    header, length = data[0], data[1]
    if header != HEADER_BYTE or length != nbytes:
        return None
    return decoder(data[2:-1])


def yield_sensor_stream(port, decoder: Callable[[list[int]], T]) -> Iterator[T]:
    """Request the sensor stream and yield each valid frame, decoded.

    Frames that are corrupted or fail their checksum are skipped.
    """
    port.flush()
    port.write(SENSOR_PACKAGES_WANTED)

    # Like a fixed read buffer, bytes not overwritten by a short read stay in place.
    buffer = bytearray(SENSOR_BUFFER_SIZE)
    while True:
        try:
            chunk = port.read(SENSOR_BUFFER_SIZE)
        except serial.SerialException as exc:
            logger.error("reading the sensor stream failed: %s", exc)
            chunk = b""

        if chunk:
            buffer[: len(chunk)] = chunk
            frame = extract_sublist(
                buffer, (HEADER_BYTE, NR_OF_SENSOR_BYTES_RECEIVED), BUFFER_SLICE
            )
            if frame is not None:
                reading = sanitize_and_read(frame, NR_OF_SENSOR_BYTES_RECEIVED, decoder)
                if reading is None:
                    logger.warning("sanitizing failed")
                else:
                    yield reading

        port.flush()
        time.sleep(READ_INTERVAL)