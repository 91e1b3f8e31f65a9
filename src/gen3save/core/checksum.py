"""Gen 3 section checksum."""

import struct
from typing import Optional

from .errors import ChecksumMismatch


def compute_checksum(data: bytes) -> int:
    """
    Sum the data as little-endian 32-bit words and fold the result to 16 bits.

    A trailing partial word is zero-padded. The fold happens once: the carry
    out of ``upper + lower`` is dropped, matching what the game writes.
    """
    remainder = len(data) % 4
    if remainder:
        data = bytes(data) + b'\x00' * (4 - remainder)
    words = struct.unpack_from(f'<{len(data) // 4}I', data)
    total = sum(words) & 0xFFFFFFFF
    return ((total >> 16) + (total & 0xFFFF)) & 0xFFFF


def verify_checksum(
    data: bytes,
    expected: int,
    slot_index: Optional[int] = None,
    section_index: Optional[int] = None,
) -> int:
    """Return the computed checksum, or raise ChecksumMismatch if it differs from ``expected``."""
    computed = compute_checksum(data)
    if computed != expected:
        raise ChecksumMismatch(expected, computed, slot_index, section_index)
    return computed
