"""Checksum for the serial sensor stream and frame extraction from raw reads."""

from collections.abc import Iterable, Sequence


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


class Checksum:
    """Running 16-bit sum of bytes."""

    def __init__(self) -> None:
        self.current = 0

    def reset(self) -> None:
        """Start the sum over at zero."""
        self.current = 0

    def push(self, data: int) -> None:
        """Add one byte to the sum."""
        self.current = (self.current + _check_byte(data)) & 0xFFFF

    def push_slice(self, data: Iterable[int]) -> None:
        """Add every byte of data to the sum."""
        for byte in data:
            self.push(byte)

    def calculate(self) -> int:
        """The sum so far."""
        return self.current

    def calculate_low_byte_sum(self) -> int:
        """The lowest 8 bits of the sum."""
        return self.current & 0xFF


def extract_sublist(
    byte_data: Sequence[int], seq: Sequence[int], slice_size: int
) -> list[int] | None:
    """Find a frame starting with seq and return it if its checksum is valid.

    The frame starts at the first occurrence of seq[0], must be followed by
    seq[1], and spans slice_size bytes whose sum has a zero low byte.
    Returns None when no such frame is found.
    """
    data = list(byte_data)
    header, length = seq
    try:
        index = data.index(header)
    except ValueError:
        return None

    last_index = len(data) - 1
    if index == last_index or index + slice_size >= last_index:
        return None
    if data[index + 1] != length:
        return None

    sublist = data[index:index + slice_size]
    checksum = Checksum()
    checksum.push_slice(sublist)
    return sublist if checksum.calculate_low_byte_sum() == 0 else None