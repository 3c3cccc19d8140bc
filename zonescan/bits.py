"""Bit manipulation helpers on 64-bit masks."""

from __future__ import annotations

MASK64 = (1 << 64) - 1


def trailing_zeroes(mask: int) -> int:
    """Return the number of trailing zero bits in a 64-bit mask (64 for zero)."""
    mask &= MASK64
    if not mask:
        return 64
    return (mask & -mask).bit_length() - 1


def leading_zeroes(mask: int) -> int:
    """Return the number of leading zero bits in a 64-bit mask (64 for zero)."""
    return 64 - (mask & MASK64).bit_length()


def count_ones(mask: int) -> int:
    """Return the number of set bits in a 64-bit mask."""
    return bin(mask & MASK64).count("1")


def clear_lowest_bit(mask: int) -> int:
    """Return the mask with its lowest set bit cleared."""
    mask &= MASK64
    return mask & (mask - 1)


def prefix_xor(mask: int) -> int:
    """Return a mask where each bit is the xor of that bit and all lower bits."""
    result = mask & MASK64
    for shift in (1, 2, 4, 8, 16, 32):
        result ^= (result << shift) & MASK64
    return result


def add_overflow(value1: int, value2: int) -> tuple[bool, int]:
    """Add two unsigned 64-bit values; return (overflowed, wrapped sum)."""
    total = (value1 & MASK64) + (value2 & MASK64)
    return total > MASK64, total & MASK64