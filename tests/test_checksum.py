import pytest

from roombot.checksum import Checksum, extract_sublist


def test_calculate_checksum_256():
    checksum = Checksum()
    checksum.push_slice([19, 5, 29, 2, 25, 13, 0, 163])
    assert checksum.calculate() == 256
    assert checksum.calculate_low_byte_sum() == 0


def test_calculate_checksum_512():
    checksum = Checksum()
    checksum.push_slice([19, 5, 29, 9, 215, 13, 0, 222])
    assert checksum.calculate() == 512
    assert checksum.calculate_low_byte_sum() == 0


def test_push_and_reset():
    checksum = Checksum()
    checksum.push(200)
    checksum.push(100)
    assert checksum.calculate() == 300
    assert checksum.calculate_low_byte_sum() == 44
    checksum.reset()
    assert checksum.calculate() == 0


def test_push_rejects_non_byte():
    checksum = Checksum()
    with pytest.raises(ValueError):
        checksum.push(256)


def test_sum_wraps_at_16_bits():
    checksum = Checksum()
    checksum.push_slice([255] * 257)
    assert checksum.calculate() == 65535
    checksum.push(1)
    assert checksum.calculate() == 0


def test_decode_serial_stream():
    buffer_output = [13, 0, 168, 19, 5, 29, 2, 25, 13, 0, 163, 19, 5, 29, 4]
    result = extract_sublist(buffer_output, (19, 5), 8)
    assert result == [19, 5, 29, 2, 25, 13, 0, 163]


def test_decode_sensor_serial_stream_succeed():
    buffer_output = [
        0, 58, 0, 207, 19, 39, 13, 0, 21, 0, 22, 61, 160, 24, 20, 25, 7, 98, 26, 8, 20, 35, 3, 39,
        0, 0, 40, 0, 0, 41, 0, 0, 42, 0, 0, 43, 10, 253, 44, 9, 105, 45, 0, 58, 0, 206, 19, 39, 13,
        0, 21, 0, 22, 61, 160, 24, 20, 25, 7, 98, 26, 8, 20, 35, 3, 39, 0, 0, 40, 0, 0, 41, 0, 0,
        42, 0, 0, 43, 10, 253, 44, 9, 105, 45,
    ]
    result = extract_sublist(buffer_output, (19, 39), 42)
    assert result == [
        19, 39, 13, 0, 21, 0, 22, 61, 160, 24, 20, 25, 7, 98, 26, 8, 20, 35, 3, 39, 0, 0, 40,
        0, 0, 41, 0, 0, 42, 0, 0, 43, 10, 253, 44, 9, 105, 45, 0, 58, 0, 206,
    ]
    checksum = Checksum()
    checksum.push_slice(result)
    assert checksum.calculate_low_byte_sum() == 0


def test_decode_serial_stream_fail():
    buffer_output = [
        20, 35, 3, 39, 0, 0, 40, 0, 0, 41, 0, 43, 42, 0, 43, 43, 4, 222, 44, 4, 114, 45, 0, 58, 1,
        122, 19, 39, 13, 0, 21, 0, 22, 59, 225, 24, 17, 25, 6, 69, 26, 8, 20, 35, 3, 39, 8, 59, 0,
        0, 40, 0, 0, 41, 0, 43, 42, 0, 43, 43, 3, 59, 44, 2, 238, 45, 0, 58, 1, 165, 19, 39, 13, 0,
        21, 0, 22, 59, 225, 24, 16, 25, 6, 69,
    ]
    assert extract_sublist(buffer_output, (19, 39), 42) is None


def test_extract_sublist_without_header():
    assert extract_sublist([1, 2, 3, 4, 5, 6], (19, 5), 2) is None


def test_extract_sublist_header_too_close_to_end():
    assert extract_sublist([0, 0, 19, 5, 1, 2], (19, 5), 4) is None


def test_extract_sublist_length_byte_mismatch():
    assert extract_sublist([19, 6, 231, 0, 0, 0, 0, 0], (19, 5), 3) is None


def test_extract_sublist_accepts_bytes():
    data = bytes([7, 19, 5, 232, 9, 9, 9])
    assert extract_sublist(data, (19, 5), 3) == [19, 5, 232]