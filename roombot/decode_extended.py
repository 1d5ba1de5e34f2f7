"""Decoders for the Roomba Open Interface sensor packets 32 to 58."""

from roombot.decode import (
    decode_bool,
    decode_individual_bits,
    decode_short,
    decode_unsigned_byte,
    decode_unsigned_short,
)


def _named_bits(byte: int, names: dict[str, int]) -> dict[str, int]:
    bits = decode_individual_bits(byte)
    return {name: bits[f"bit{pos}"] for name, pos in names.items()}


def decode_packet_32_and_33(low: int, mid: int, high: int) -> str:
    """Packets 32 and 33: three unused bytes, ignored."""
    low, mid, high = (decode_unsigned_byte(b) for b in (low, mid, high))
    return f"ignoring 3 consecutive bytes: {low}, {mid}, {high}"


def decode_packet_34(byte: int) -> dict[str, int]:
    """Packet 34: charging sources available (home base and internal charger)."""
    return _named_bits(byte, {"home": 1, "internal": 0})


def decode_packet_35(byte: int) -> int:
    """Packet 35: current OI mode (0-3)."""
    return decode_unsigned_byte(byte)


def decode_packet_36(byte: int) -> int:
    """Packet 36: selected song number (0-15)."""
    return decode_unsigned_byte(byte)


def decode_packet_37(byte: int) -> bool:
    """Packet 37: whether a song is playing."""
    return decode_bool(byte)


def decode_packet_38(byte: int) -> int:
    """Packet 38: number of data stream packets."""
    return decode_unsigned_byte(byte)


def decode_packet_39(low: int, high: int) -> int:
    """Packet 39: requested velocity in mm/s."""
    return decode_short(low, high)


def decode_packet_40(low: int, high: int) -> int:
    """Packet 40: requested radius in mm."""
    return decode_short(low, high)


def decode_packet_41(low: int, high: int) -> int:
    """Packet 41: requested right wheel velocity in mm/s."""
    return decode_short(low, high)


def decode_packet_42(low: int, high: int) -> int:
    """Packet 42: requested left wheel velocity in mm/s."""
    return decode_short(low, high)


def decode_packet_43(low: int, high: int) -> int:
    """Packet 43: cumulative left encoder counts, as unsigned 0-65535."""
    return decode_unsigned_short(low, high)


def decode_packet_44(low: int, high: int) -> int:
    """Packet 44: cumulative right encoder counts, as unsigned 0-65535."""
    return decode_unsigned_short(low, high)


def decode_packet_45(byte: int) -> dict[str, int]:
    """Packet 45: light bumper detections."""
    return _named_bits(
        byte,
        {
            "bumper_left": 0,
            "bumper_front_left": 1,
            "bumper_center_left": 2,
            "bumper_center_right": 3,
            "bumper_front_right": 4,
            "bumper_right": 5,
        },
    )


def decode_packet_46(low: int, high: int) -> int:
    """Packet 46: light bump left signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_47(low: int, high: int) -> int:
    """Packet 47: light bump front left signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_48(low: int, high: int) -> int:
    """Packet 48: light bump center left signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_49(low: int, high: int) -> int:
    """Packet 49: light bump center right signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_50(low: int, high: int) -> int:
    """Packet 50: light bump front right signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_51(low: int, high: int) -> int:
    """Packet 51: light bump right signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_52(byte: int) -> int:
    """Packet 52: infrared character left."""
    return decode_unsigned_byte(byte)


def decode_packet_53(byte: int) -> int:
    """Packet 53: infrared character right."""
    return decode_unsigned_byte(byte)


def decode_packet_54(low: int, high: int) -> int:
    """Packet 54: left motor current in mA."""
    return decode_short(low, high)


def decode_packet_55(low: int, high: int) -> int:
    """Packet 55: right motor current in mA."""
    return decode_short(low, high)


def decode_packet_56(low: int, high: int) -> int:
    """Packet 56: main brush motor current in mA."""
    return decode_short(low, high)


def decode_packet_57(low: int, high: int) -> int:
    """Packet 57: side brush motor current in mA."""
    return decode_short(low, high)


def decode_packet_58(byte: int) -> dict[str, int]:
    """Packet 58: stasis caster state (disabled and toggling bits)."""
    return _named_bits(byte, {"disabled": 1, "toggling": 0})