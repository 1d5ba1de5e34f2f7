"""Decoders for the Roomba Open Interface sensor packets 7 to 31."""

HEX_PREFIX = "0x"


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range 0-255: {value}")
    return value


def get_bit_at(input_byte: int, bit_pos: int) -> int:
    """Return the masked value of bit ``bit_pos`` (0 = least significant).

    Example: ``get_bit_at(46, 1) == 2``.
    """
    _check_byte(input_byte)
    if not 0 <= bit_pos < 8:
        raise ValueError(
            f"bit position {bit_pos} not valid. Valid range is 0 <= bit_pos <= 7"
        )
    return input_byte & (1 << bit_pos)


def decode_individual_bits(byte: int) -> dict[str, int]:
    """Split a byte into its eight masked bits, keyed ``bit0`` to ``bit7``."""
    return {f"bit{pos}": get_bit_at(byte, pos) for pos in range(8)}


def _named_bits(byte: int, names: dict[str, int]) -> dict[str, int]:
    bits = decode_individual_bits(byte)
    return {name: bits[f"bit{pos}"] for name, pos in names.items()}


def decode_unsigned_byte(byte: int) -> int:
    """Decode an unsigned byte (0-255)."""
    return _check_byte(byte)


def decode_byte(byte: int) -> int:
    """Decode a signed byte using two's complement (-128 to 127)."""
    return int.from_bytes(bytes([_check_byte(byte)]), "big", signed=True)


def decode_unsigned_short(low: int, high: int) -> int:
    """Decode an unsigned 16-bit value, high byte first on the wire."""
    raw = bytes([_check_byte(high), _check_byte(low)])
    return int.from_bytes(raw, "big", signed=False)


def decode_short(low: int, high: int) -> int:
    """Decode a signed 16-bit two's complement value, high byte first on the wire."""
    raw = bytes([_check_byte(high), _check_byte(low)])
    return int.from_bytes(raw, "big", signed=True)


def decode_bool(byte: int) -> bool:
    """True for any non-zero byte."""
    return _check_byte(byte) != 0


def decode_packet_7(byte: int) -> dict[str, int]:
    """Packet 7: bumps and wheel drops."""
    return _named_bits(
        byte,
        {"bump_right": 0, "bump_left": 1, "wheel_drop_right": 2, "wheel_drop_left": 3},
    )


def decode_packet_8(byte: int) -> bool:
    """Packet 8: wall seen."""
    return decode_bool(byte)


def decode_packet_9(byte: int) -> bool:
    """Packet 9: cliff left."""
    return decode_bool(byte)


def decode_packet_10(byte: int) -> bool:
    """Packet 10: cliff front left."""
    return decode_bool(byte)


def decode_packet_11(byte: int) -> bool:
    """Packet 11: cliff front right."""
    return decode_bool(byte)


def decode_packet_12(byte: int) -> bool:
    """Packet 12: cliff right."""
    return decode_bool(byte)


def decode_packet_13(byte: int) -> bool:
    """Packet 13: virtual wall."""
    return decode_bool(byte)


def decode_packet_14(byte: int) -> dict[str, int]:
    """Packet 14: wheel overcurrents."""
    return _named_bits(
        byte, {"side_brush": 0, "main_brush": 1, "right_wheel": 2, "left_wheel": 3}
    )


def decode_packet_15(byte: int) -> str:
    """Packet 15: dirt detect, ignored."""
    return f"ignoring byte: {_check_byte(byte)}"


def decode_packet_16(byte: int) -> str:
    """Packet 16: unused byte, ignored."""
    return f"ignoring byte: {_check_byte(byte)}"


def decode_packet_17(byte: int) -> int:
    """Packet 17: infrared character omni."""
    return decode_unsigned_byte(byte)


def decode_packet_18(byte: int) -> dict[str, int]:
    """Packet 18: buttons."""
    return _named_bits(
        byte,
        {
            "clean": 0,
            "spot": 1,
            "dock": 2,
            "minute": 3,
            "hour": 4,
            "day": 5,
            "schedule": 6,
            "clock": 7,
        },
    )


def decode_packet_19(low: int, high: int) -> int:
    """Packet 19: distance in mm."""
    return decode_short(low, high)


def decode_packet_20(low: int, high: int) -> int:
    """Packet 20: angle in degrees."""
    return decode_short(low, high)


def decode_packet_21(byte: int) -> int:
    """Packet 21: charging state (0-5)."""
    return decode_unsigned_byte(byte)


def decode_packet_22(low: int, high: int) -> int:
    """Packet 22: battery voltage in mV."""
    return decode_unsigned_short(low, high)


def decode_packet_23(low: int, high: int) -> int:
    """Packet 23: battery current in mA."""
    return decode_short(low, high)


def decode_packet_24(byte: int) -> int:
    """Packet 24: battery temperature in degrees Celsius."""
    return decode_byte(byte)


def decode_packet_25(low: int, high: int) -> int:
    """Packet 25: battery charge in mAh."""
    return decode_unsigned_short(low, high)


def decode_packet_26(low: int, high: int) -> int:
    """Packet 26: battery capacity in mAh."""
    return decode_unsigned_short(low, high)


def decode_packet_27(low: int, high: int) -> int:
    """Packet 27: wall signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_28(low: int, high: int) -> int:
    """Packet 28: cliff left signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_29(low: int, high: int) -> int:
    """Packet 29: cliff front left signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_30(low: int, high: int) -> int:
    """Packet 30: cliff front right signal strength."""
    return decode_unsigned_short(low, high)


def decode_packet_31(low: int, high: int) -> int:
    """Packet 31: cliff right signal strength."""
    return decode_unsigned_short(low, high)