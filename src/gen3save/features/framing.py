"""
Save image framing.

Cuts a 128 KB save into its two slots and 14 sections per slot, and reads
each section's footer. Nothing is validated here except the image size.
"""

import struct
import logging
from typing import List
from dataclasses import dataclass, field

from ..core.constants import (
    SAVE_SIZE, SLOT_COUNT, SLOT_SIZE, SECTION_COUNT, SECTION_SIZE, SECTION_DATA_SIZE,
    SECTION_ID_OFF, CHECKSUM_OFF, SIGNATURE_OFF, SAVE_COUNTER_OFF,
)
from ..core.errors import SizeMismatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionHeader:
    """Footer fields of one 4096-byte section, as stored."""
    slot_index:    int
    section_index: int
    offset:        int      # Absolute offset of the section in the image
    identifier:    int
    checksum:      int
    signature:     int
    save_counter:  int

    @classmethod
    def from_window(cls, window: bytes, slot_index: int, section_index: int,
                    offset: int = 0) -> 'SectionHeader':
        identifier, checksum = struct.unpack_from('<HH', window, SECTION_ID_OFF)
        signature  = struct.unpack_from('<I', window, SIGNATURE_OFF)[0]
        counter    = struct.unpack_from('<I', window, SAVE_COUNTER_OFF)[0]
        return cls(slot_index=slot_index, section_index=section_index, offset=offset,
                   identifier=identifier, checksum=checksum,
                   signature=signature, save_counter=counter)


@dataclass(frozen=True)
class SectionFrame:
    """A section window copied out of the image, with its parsed footer."""
    header: SectionHeader
    window: bytes = field(repr=False)

    @property
    def payload(self) -> bytes:
        """The checksummed data area (first 0xF80 bytes)."""
        return self.window[:SECTION_DATA_SIZE]


def section_offset(slot_index: int, section_index: int) -> int:
    if not (0 <= slot_index < SLOT_COUNT):
        raise ValueError(f"slot_index must be in range 0..{SLOT_COUNT - 1}")
    if not (0 <= section_index < SECTION_COUNT):
        raise ValueError(f"section_index must be in range 0..{SECTION_COUNT - 1}")
    return slot_index * SLOT_SIZE + section_index * SECTION_SIZE


def frame_image(data: bytes) -> List[SectionFrame]:
    """
    Split a save image into its 28 sections in physical order.

    Raises:
        SizeMismatch: ``data`` is not exactly SAVE_SIZE bytes long.
    """
    if len(data) != SAVE_SIZE:
        raise SizeMismatch(len(data), SAVE_SIZE)

    frames = []
    for slot_index in range(SLOT_COUNT):
        for section_index in range(SECTION_COUNT):
            start  = section_offset(slot_index, section_index)
            window = bytes(data[start:start + SECTION_SIZE])
            header = SectionHeader.from_window(window, slot_index, section_index, start)
            logger.debug(
                f"Slot {slot_index} section {section_index} @0x{start:05X}: "
                f"id={header.identifier} counter={header.save_counter}"
            )
            frames.append(SectionFrame(header=header, window=window))
    return frames
