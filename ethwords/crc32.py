"""Byte-wise Ethernet frame check sequence (CRC-32)."""

from __future__ import annotations

from functools import reduce
from operator import or_
from typing import Iterable

# Value of a correct frame with its FCS appended, as returned by CRC32.value.
CRC32_RESIDUE = 0x1CDF4421
# The same residue as seen in the raw accumulator.
CRC32_RESIDUE_INV_BREV = 0xC704DD7B

_MASK32 = 0xFFFFFFFF
_PRESET_BYTES = 4

# For every output bit: the data bits and previous CRC bits that are XORed.
_TAPS = (
    ((6, 0), (24, 30)),
    ((7, 6, 1, 0), (24, 25, 30, 31)),
    ((7, 6, 2, 1, 0), (24, 25, 26, 30, 31)),
    ((7, 3, 2, 1), (25, 26, 27, 31)),
    ((6, 4, 3, 2, 0), (24, 26, 27, 28, 30)),
    ((7, 6, 5, 4, 3, 1, 0), (24, 25, 27, 28, 29, 30, 31)),
    ((7, 6, 5, 4, 2, 1), (25, 26, 28, 29, 30, 31)),
    ((7, 5, 3, 2, 0), (24, 26, 27, 29, 31)),
    ((4, 3, 1, 0), (0, 24, 25, 27, 28)),
    ((5, 4, 2, 1), (1, 25, 26, 28, 29)),
    ((5, 3, 2, 0), (2, 24, 26, 27, 29)),
    ((4, 3, 1, 0), (3, 24, 25, 27, 28)),
    ((6, 5, 4, 2, 1, 0), (4, 24, 25, 26, 28, 29, 30)),
    ((7, 6, 5, 3, 2, 1), (5, 25, 26, 27, 29, 30, 31)),
    ((7, 6, 4, 3, 2), (6, 26, 27, 28, 30, 31)),
    ((7, 5, 4, 3), (7, 27, 28, 29, 31)),
    ((5, 4, 0), (8, 24, 28, 29)),
    ((6, 5, 1), (9, 25, 29, 30)),
    ((7, 6, 2), (10, 26, 30, 31)),
    ((7, 3), (11, 27, 31)),
    ((4,), (12, 28)),
    ((5,), (13, 29)),
    ((0,), (14, 24)),
    ((6, 1, 0), (15, 24, 25, 30)),
    ((7, 2, 1), (16, 25, 26, 31)),
    ((3, 2), (17, 26, 27)),
    ((6, 4, 3, 0), (18, 24, 27, 28, 30)),
    ((7, 5, 4, 1), (19, 25, 28, 29, 31)),
    ((6, 5, 2), (20, 26, 29, 30)),
    ((7, 6, 3), (21, 27, 30, 31)),
    ((7, 4), (22, 28, 31)),
    ((5,), (23, 29)),
)


def _mask(positions: Iterable[int]) -> int:
    return reduce(or_, (1 << p for p in positions), 0)


_TAP_MASKS = tuple((_mask(d), _mask(c)) for d, c in _TAPS)

_REVERSED_BYTE = tuple(int(f"{b:08b}"[::-1], 2) for b in range(256))


def _parity(value: int) -> int:
    return bin(value).count("1") & 1


def _check_uint(name: str, value: int, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} {value:#x} does not fit in {bits} bits")


def crc32_preview(next_byte: int, prev_crc: int, add_count: int) -> int:
    """Advance a CRC-32 register by one (bit-reversed) byte.

    While fewer than four bytes have been added the byte is inverted, which
    stands in for presetting the register to all ones.
    """
    _check_uint("next_byte", next_byte, 8)
    _check_uint("prev_crc", prev_crc, 32)
    _check_uint("add_count", add_count, 3)
    data = next_byte ^ 0xFF if add_count < _PRESET_BYTES else next_byte
    return sum(
        (_parity(data & d_mask) ^ _parity(prev_crc & c_mask)) << bit
        for bit, (d_mask, c_mask) in enumerate(_TAP_MASKS)
    )


class CRC32:
    """Running Ethernet FCS, fed one byte at a time in transmission order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._accumulator = 0
        self._add_count = 0

    @property
    def accumulator(self) -> int:
        """The raw 32-bit CRC register."""
        return self._accumulator

    @property
    def value(self) -> int:
        """The FCS: each register byte bit-reversed, then inverted.

        The most significant byte is the first one sent on the wire.
        """
        acc = self._accumulator
        reversed_bytes = sum(
            _REVERSED_BYTE[(acc >> shift) & 0xFF] << shift for shift in (0, 8, 16, 24)
        )
        return ~reversed_bytes & _MASK32

    def add(self, byte: int) -> None:
        """Feed one byte."""
        _check_uint("byte", byte, 8)
        self._accumulator = crc32_preview(
            _REVERSED_BYTE[byte], self._accumulator, self._add_count
        )
        if self._add_count < _PRESET_BYTES:
            self._add_count += 1

    def update(self, data: Iterable[int]) -> None:
        """Feed every byte of data in order."""
        for byte in data:
            self.add(byte)

    def reset(self) -> None:
        """Start over with an empty register."""
        self._accumulator = 0
        self._add_count = 0

    def bits(self, high: int, low: int) -> int:
        """The bits high..low (inclusive) of the FCS value."""
        if not 0 <= low <= high < 32:
            raise ValueError(f"invalid bit range {high}..{low}")
        return (self.value >> low) & ((1 << (high - low + 1)) - 1)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CRC32):
            return (
                self._accumulator == other._accumulator
                and self._add_count == other._add_count
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"CRC32(accumulator={self._accumulator:#010x})"