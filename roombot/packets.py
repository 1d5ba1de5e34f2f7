"""Decoding of whole sensor frames into named readings and messages."""

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple

from roombot.decode import (
    decode_packet_7,
    decode_packet_8,
    decode_packet_9,
    decode_packet_10,
    decode_packet_11,
    decode_packet_12,
    decode_packet_13,
    decode_packet_14,
    decode_packet_15,
    decode_packet_16,
    decode_packet_17,
    decode_packet_18,
    decode_packet_19,
    decode_packet_20,
    decode_packet_21,
    decode_packet_22,
    decode_packet_23,
    decode_packet_24,
    decode_packet_25,
    decode_packet_26,
    decode_packet_27,
    decode_packet_28,
    decode_packet_29,
    decode_packet_30,
    decode_packet_31,
)
from roombot.decode_extended import (
    decode_packet_32_and_33,
    decode_packet_34,
    decode_packet_35,
    decode_packet_36,
    decode_packet_37,
    decode_packet_38,
    decode_packet_39,
    decode_packet_40,
    decode_packet_41,
    decode_packet_42,
    decode_packet_43,
    decode_packet_44,
    decode_packet_45,
    decode_packet_46,
    decode_packet_47,
    decode_packet_48,
    decode_packet_49,
    decode_packet_50,
    decode_packet_51,
    decode_packet_52,
    decode_packet_53,
    decode_packet_54,
    decode_packet_55,
    decode_packet_56,
    decode_packet_57,
    decode_packet_58,
)

ALL_PACKETS_SIZE = 80
BATTERY_PACKETS_SIZE = 10


class _Field(NamedTuple):
    packet_id: int
    key: str
    decoder: Callable[..., Any]
    width: int


_SENSOR_FIELDS = (
    _Field(13, "virtual wall", decode_packet_13, 1),
    _Field(21, "charging state", decode_packet_21, 1),
    _Field(22, "voltage", decode_packet_22, 2),
    _Field(24, "temperature", decode_packet_24, 1),
    _Field(25, "battery charge", decode_packet_25, 2),
    _Field(26, "battery capacity", decode_packet_26, 2),
    _Field(35, "oi mode", decode_packet_35, 1),
    _Field(39, "requested velocity", decode_packet_39, 2),
    _Field(40, "requested radius", decode_packet_40, 2),
    _Field(41, "requested right velocity", decode_packet_41, 2),
    _Field(42, "requested left velocity", decode_packet_42, 2),
    _Field(43, "left encoder counts", decode_packet_43, 2),
    _Field(44, "right encoder counts", decode_packet_44, 2),
    _Field(45, "light bumper", decode_packet_45, 1),
    _Field(58, "stasis", decode_packet_58, 1),
)

_EXAMPLE_FIELDS = (
    _Field(29, "cliff front left signal", decode_packet_29, 2),
    _Field(13, "virtual wall", decode_packet_13, 1),
)

_ALL_FIELDS = (
    _Field(7, "wheel drop and bumps", decode_packet_7, 1),
    _Field(8, "wall seen", decode_packet_8, 1),
    _Field(9, "cliff left", decode_packet_9, 1),
    _Field(10, "cliff front left", decode_packet_10, 1),
    _Field(11, "cliff front right", decode_packet_11, 1),
    _Field(12, "cliff right", decode_packet_12, 1),
    _Field(13, "virtual wall", decode_packet_13, 1),
    _Field(14, "wheel overcurrents", decode_packet_14, 1),
    _Field(15, "dirt detect", decode_packet_15, 1),
    _Field(16, "ignored2", decode_packet_16, 1),
    _Field(17, "infrared char omni", decode_packet_17, 1),
    _Field(18, "buttons", decode_packet_18, 1),
    _Field(19, "distance", decode_packet_19, 2),
    _Field(20, "angle", decode_packet_20, 2),
    _Field(21, "charging state", decode_packet_21, 1),
    _Field(22, "voltage", decode_packet_22, 2),
    _Field(23, "current", decode_packet_23, 2),
    _Field(24, "temperature", decode_packet_24, 1),
    _Field(25, "battery charge", decode_packet_25, 2),
    _Field(26, "battery capacity", decode_packet_26, 2),
    _Field(27, "wall signal", decode_packet_27, 2),
    _Field(28, "cliff left signal", decode_packet_28, 2),
    _Field(29, "cliff front left signal", decode_packet_29, 2),
    _Field(30, "cliff front right signal", decode_packet_30, 2),
    _Field(31, "cliff right signal", decode_packet_31, 2),
    _Field(32, "ignored1", decode_packet_32_and_33, 3),
    _Field(34, "charging sources available", decode_packet_34, 1),
    _Field(35, "io mode", decode_packet_35, 1),
    _Field(36, "song number", decode_packet_36, 1),
    _Field(37, "song playing", decode_packet_37, 1),
    _Field(38, "number of stream packets", decode_packet_38, 1),
    _Field(39, "requested velocity", decode_packet_39, 2),
    _Field(40, "requested radius", decode_packet_40, 2),
    _Field(41, "requested right velocity", decode_packet_41, 2),
    _Field(42, "requested left velocity", decode_packet_42, 2),
    _Field(43, "left encoder counts", decode_packet_43, 2),
    _Field(44, "right encoder counts", decode_packet_44, 2),
    _Field(45, "light bumper", decode_packet_45, 1),
    _Field(46, "light bump left signal", decode_packet_46, 2),
    _Field(47, "light bump front left signal", decode_packet_47, 2),
    _Field(48, "light bump center left signal", decode_packet_48, 2),
    _Field(49, "light bump center right signal", decode_packet_49, 2),
    _Field(50, "light bump front right signal", decode_packet_50, 2),
    _Field(51, "light bump right signal", decode_packet_51, 2),
    _Field(52, "infrared char left", decode_packet_52, 1),
    _Field(53, "infrared char right", decode_packet_53, 1),
    _Field(54, "left motor current", decode_packet_54, 2),
    _Field(55, "right motor current", decode_packet_55, 2),
    _Field(56, "main brush motor current", decode_packet_56, 2),
    _Field(57, "side brush motor current", decode_packet_57, 2),
    _Field(58, "stasis", decode_packet_58, 1),
)

_BATTERY_FIELDS = (
    _Field(21, "charging state", decode_packet_21, 1),
    _Field(22, "voltage", decode_packet_22, 2),
    _Field(23, "current", decode_packet_23, 2),
    _Field(24, "temperature", decode_packet_24, 1),
    _Field(25, "battery charge", decode_packet_25, 2),
    _Field(26, "battery capacity", decode_packet_26, 2),
)


@dataclass(frozen=True)
class LightBumper:
    bumper_left: bool = False
    bumper_front_left: bool = False
    bumper_center_left: bool = False
    bumper_center_right: bool = False
    bumper_front_right: bool = False
    bumper_right: bool = False


@dataclass(frozen=True)
class Stasis:
    toggling: int = 0
    disabled: int = 0


@dataclass(frozen=True)
class SensorData:
    """The sensor readings streamed by the robot."""

    virtual_wall: bool = False
    charging_state: int = 0
    voltage: int = 0
    temperature: int = 0
    battery_charge: int = 0
    battery_capacity: int = 0
    oi_mode: int = 0
    requested_velocity: int = 0
    requested_radius: int = 0
    requested_right_velocity: int = 0
    requested_left_velocity: int = 0
    left_encoder_counts: int = 0
    right_encoder_counts: int = 0
    light_bumper: LightBumper | None = None
    stasis: Stasis | None = None


def inspect(value: Any) -> str:
    """Render a decoded reading as text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int)):
        return str(value)
    if isinstance(value, Mapping):
        items = ", ".join(f'"{key}": {item}' for key, item in value.items())
        return "{" + items + "}"
    raise TypeError(f"cannot inspect value of type {type(value).__name__}")


def _take(stream: Iterator[int], count: int) -> list[int]:
    chunk = [next(stream, None) for _ in range(count)]
    if None in chunk:
        raise ValueError("sensor data ended before all packets were read")
    return chunk  # type: ignore[return-value]


def _decode(field: _Field, stream: Iterator[int]) -> Any:
    # Multi-byte values arrive high byte first; decoders take them low byte first.
    return field.decoder(*reversed(_take(stream, field.width)))


def _decode_tagged(byte_data: Sequence[int], fields: Sequence[_Field]) -> dict[str, Any]:
    stream = iter(byte_data)
    readings: dict[str, Any] = {}
    for field in fields:
        (packet_id,) = _take(stream, 1)
        if packet_id == field.packet_id:
            readings[field.key] = _decode(field, stream)
    return readings


def _decode_fixed(
    byte_data: Sequence[int], fields: Sequence[_Field], size: int
) -> dict[str, Any]:
    if len(byte_data) != size:
        raise ValueError(f"expected {size} bytes, got {len(byte_data)}")
    stream = iter(byte_data)
    return {field.key: _decode(field, stream) for field in fields}


def decode_sensor_packets(byte_data: Sequence[int]) -> dict[str, Any]:
    """Decode the streamed sensor packets, each preceded by its packet id.

    A packet whose id byte does not match the expected one is skipped
    without consuming its data bytes.
    """
    return _decode_tagged(byte_data, _SENSOR_FIELDS)


def decode_sensor_packets_as_message(byte_data: Sequence[int]) -> SensorData:
    """Decode the streamed sensor packets into a SensorData message."""
    readings = decode_sensor_packets(byte_data)

    light_bumper = None
    if "light bumper" in readings:
        bits = readings["light bumper"]
        light_bumper = LightBumper(**{name: value > 0 for name, value in bits.items()})

    stasis = None
    if "stasis" in readings:
        bits = readings["stasis"]
        stasis = Stasis(toggling=bits["toggling"], disabled=bits["disabled"])

    return SensorData(
        virtual_wall=readings.get("virtual wall", False),
        charging_state=readings.get("charging state", 0),
        voltage=readings.get("voltage", 0),
        temperature=readings.get("temperature", 0),
        battery_charge=readings.get("battery charge", 0),
        battery_capacity=readings.get("battery capacity", 0),
        oi_mode=readings.get("oi mode", 0),
        requested_velocity=readings.get("requested velocity", 0),
        requested_radius=readings.get("requested radius", 0),
        requested_right_velocity=readings.get("requested right velocity", 0),
        requested_left_velocity=readings.get("requested left velocity", 0),
        left_encoder_counts=readings.get("left encoder counts", 0),
        right_encoder_counts=readings.get("right encoder counts", 0),
        light_bumper=light_bumper,
        stasis=stasis,
    )


def decode_all_sensor_packets(byte_data: Sequence[int]) -> dict[str, Any]:
    """Decode the 80-byte reply holding every sensor packet from 7 to 58."""
    return _decode_fixed(byte_data, _ALL_FIELDS, ALL_PACKETS_SIZE)


def decode_battery_packets(byte_data: Sequence[int]) -> dict[str, Any]:
    """Decode the 10-byte reply holding the battery packets 21 to 26."""
    return _decode_fixed(byte_data, _BATTERY_FIELDS, BATTERY_PACKETS_SIZE)


def decode_example_packets(byte_data: Sequence[int]) -> dict[str, Any]:
    """Decode a stream of packets 29 and 13, each preceded by its packet id."""
    return _decode_tagged(byte_data, _EXAMPLE_FIELDS)