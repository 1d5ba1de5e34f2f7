import pytest

from roombot.decode import (
    decode_bool,
    decode_byte,
    decode_individual_bits,
    decode_packet_7,
    decode_packet_13,
    decode_packet_14,
    decode_packet_15,
    decode_packet_16,
    decode_packet_18,
    decode_packet_19,
    decode_packet_22,
    decode_packet_24,
    decode_packet_29,
    decode_short,
    decode_unsigned_byte,
    decode_unsigned_short,
    get_bit_at,
)


def test_decode_individual_bits_of_byte():
    bits = decode_individual_bits(46)
    assert len(bits) == 8
    assert bits == {
        "bit0": 0,
        "bit1": 2,
        "bit2": 4,
        "bit3": 8,
        "bit4": 0,
        "bit5": 32,
        "bit6": 0,
        "bit7": 0,
    }


def test_get_bit_at():
    assert get_bit_at(46, 1) == 2
    assert get_bit_at(46, 0) == 0


def test_get_bit_at_invalid_position():
    with pytest.raises(ValueError):
        get_bit_at(46, 8)


def test_decode_unsigned_byte():
    assert decode_unsigned_byte(255) == 255


def test_decode_byte():
    assert decode_byte(255) == -1
    assert decode_byte(127) == 127


def test_decode_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        decode_byte(256)


def test_decode_two_bytes_as_signed_16_bit():
    byte_array = [255, 56]
    assert decode_short(byte_array.pop(), byte_array.pop()) == -200


def test_decode_two_bytes_as_unsigned_16_bit():
    byte_array = [255, 56]
    assert decode_unsigned_short(byte_array.pop(), byte_array.pop()) == 65336


def test_decode_one_byte_as_boolean():
    assert decode_bool(6) is True
    assert decode_bool(0) is False


def test_decode_two_bytes_as_signed_16_bit_2():
    byte_array = [2, 25]
    assert decode_short(byte_array.pop(), byte_array.pop()) == 537


def test_decode_two_bytes_as_unsigned_16_bit_2():
    byte_array = [2, 25]
    assert decode_unsigned_short(byte_array.pop(), byte_array.pop()) == 537


def test_packet_7():
    assert decode_packet_7(0b1111) == {
        "bump_right": 1,
        "bump_left": 2,
        "wheel_drop_right": 4,
        "wheel_drop_left": 8,
    }


def test_packet_14():
    assert decode_packet_14(0b0101) == {
        "side_brush": 1,
        "main_brush": 0,
        "right_wheel": 4,
        "left_wheel": 0,
    }


def test_packet_18_all_pressed():
    buttons = decode_packet_18(0xFF)
    assert buttons["clean"] == 1
    assert buttons["clock"] == 128
    assert len(buttons) == 8


def test_ignored_packets():
    assert decode_packet_15(7) == "ignoring byte: 7"
    assert decode_packet_16(0) == "ignoring byte: 0"


def test_packet_wrappers():
    assert decode_packet_13(1) is True
    assert decode_packet_19(56, 255) == -200
    assert decode_packet_22(160, 61) == 15776
    assert decode_packet_24(20) == 20
    assert decode_packet_29(56, 255) == 65336