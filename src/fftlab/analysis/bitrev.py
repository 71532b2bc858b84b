"""Bit-reversal permutation for in-place decimation-in-time FFTs."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def reverse_bits(index: int, bit_width: int) -> int:
    """Reverse the low ``bit_width`` bits of ``index``."""
    result = 0
    for _ in range(bit_width):
        result = (result << 1) | (index & 1)
        index >>= 1
    return result


def bit_reverse_indices(length: int) -> List[int]:
    """
    Return the source index for every slot of a bit-reversed array.

    ``length`` must be a power of 2.
    """
    if not is_power_of_two(length):
        raise ValueError(f"length must be a power of 2, got {length}")
    nbits = length.bit_length() - 1
    return [reverse_bits(i, nbits) for i in range(length)]


def bit_reverse_permute(values: Sequence[T]) -> List[T]:
    """Return a new list with ``values`` reordered in bit-reversed index order."""
    return [values[i] for i in bit_reverse_indices(len(values))]
