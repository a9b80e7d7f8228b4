"""Ones' complement Internet checksum as used by IPv4, UDP and TCP."""

from __future__ import annotations

from typing import Union

VALUE_BITS = 16
# (2**16 - 1) * 1536 words needs 27 bits, enough for a jumbo-free frame.
ACCUMULATOR_BITS = 27

_VALUE_MASK = (1 << VALUE_BITS) - 1
_ACCUMULATOR_MASK = (1 << ACCUMULATOR_BITS) - 1


def _check_uint(name: str, value: int, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} {value:#x} does not fit in {bits} bits")


class Checksum:
    """Running Internet checksum over 16-bit words or single bytes.

    The words are summed into a 27-bit accumulator; the checksum value folds
    the carries back once and takes the ones' complement.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, accumulator: int = 0) -> None:
        _check_uint("accumulator", accumulator, ACCUMULATOR_BITS)
        self._accumulator = accumulator
        self._next_byte_high = True

    @property
    def accumulator(self) -> int:
        """The raw 27-bit sum of everything added so far."""
        return self._accumulator

    @property
    def value(self) -> int:
        """The 16-bit checksum of everything added so far."""
        acc = self._accumulator
        folded = ((acc >> VALUE_BITS) + (acc & _VALUE_MASK)) & _VALUE_MASK
        return ~folded & _VALUE_MASK

    def add(self, other: Union[int, "Checksum"]) -> None:
        """Add a 16-bit word, or the accumulated sum of another checksum."""
        if isinstance(other, Checksum):
            amount = other._accumulator
        else:
            _check_uint("word", other, VALUE_BITS)
            amount = other
        self._accumulator = (self._accumulator + amount) & _ACCUMULATOR_MASK

    def add_half(self, byte: int) -> None:
        """Add one byte, alternating between the high and the low half of a word."""
        _check_uint("byte", byte, 8)
        self.add(byte << 8 if self._next_byte_high else byte)
        self._next_byte_high = not self._next_byte_high

    def reset(self) -> None:
        """Start over with an empty sum; the next byte is a high half again."""
        self._accumulator = 0
        self._next_byte_high = True

    def bits(self, high: int, low: int) -> int:
        """The bits high..low (inclusive) of the checksum value."""
        if not 0 <= low <= high < VALUE_BITS:
            raise ValueError(f"invalid bit range {high}..{low}")
        return (self.value >> low) & ((1 << (high - low + 1)) - 1)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Checksum):
            return (
                self._accumulator == other._accumulator
                and self._next_byte_high == other._next_byte_high
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Checksum(accumulator={self._accumulator:#x})"