"""
Gen 3 save image decoding.

``decode`` is the entry point: it frames the image, validates every section
(signature, then checksum) and decodes the payloads. The first invalid
section aborts the whole decode.
"""

import logging
from typing import Dict, List, Mapping, Optional, Any, Tuple, Union
from dataclasses import dataclass
from pathlib import Path

from ..core.checksum import verify_checksum
from ..core.constants import SECTION_SIGNATURE, SECTION_TRAINER_INFO, SLOT_COUNT
from ..core.errors import DecodeError, SignatureMismatch
from .framing import SectionFrame, frame_image
from .sections import PayloadDecoder, Section, decode_payload
from .trainer_info import TrainerInfo

logger = logging.getLogger(__name__)

COUNTER_MASK = 0xFFFFFFFF


def counter_is_newer(candidate: int, current: int) -> bool:
    """True if ``candidate`` was written after ``current``, allowing for u32 wraparound."""
    distance = (candidate - current) & COUNTER_MASK
    return 0 < distance < 0x80000000


@dataclass(frozen=True)
class SaveSlot:
    """One of the two redundant copies of the game state."""
    index:    int
    sections: Tuple[Section, ...]

    def section(self, identifier: int) -> Optional[Section]:
        """First section carrying ``identifier``, in physical order."""
        for sec in self.sections:
            if sec.identifier == identifier:
                return sec
        return None

    @property
    def save_counter(self) -> int:
        """Save counter from the trainer info section, else the highest one in the slot."""
        sec = self.section(SECTION_TRAINER_INFO)
        if sec is not None:
            return sec.save_counter
        return max((s.save_counter for s in self.sections), default=0)

    @property
    def trainer_info(self) -> Optional[TrainerInfo]:
        sec = self.section(SECTION_TRAINER_INFO)
        if sec is None or not isinstance(sec.payload, TrainerInfo):
            return None
        return sec.payload

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index':        self.index,
            'save_counter': self.save_counter,
            'sections':     [s.to_dict() for s in self.sections],
        }


@dataclass(frozen=True)
class SaveImage:
    """A fully decoded and validated save: both slots, all sections."""
    slots: Tuple[SaveSlot, SaveSlot]

    @property
    def active_slot(self) -> SaveSlot:
        """The most recently written slot; ties go to slot A."""
        slot_a, slot_b = self.slots
        return slot_b if counter_is_newer(slot_b.save_counter, slot_a.save_counter) else slot_a

    @property
    def trainer_info(self) -> Optional[TrainerInfo]:
        return self.active_slot.trainer_info

    def to_dict(self) -> Dict[str, Any]:
        return {
            'active_slot': self.active_slot.index,
            'slots':       [s.to_dict() for s in self.slots],
        }


def _decode_section(
    frame: SectionFrame,
    decoders: Optional[Mapping[int, PayloadDecoder]] = None,
) -> Section:
    header = frame.header
    if header.signature != SECTION_SIGNATURE:
        raise SignatureMismatch(header.signature, SECTION_SIGNATURE,
                                header.slot_index, header.section_index)

    verify_checksum(frame.payload, header.checksum, header.slot_index, header.section_index)

    return Section(
        index=header.section_index,
        identifier=header.identifier,
        checksum=header.checksum,
        signature=header.signature,
        save_counter=header.save_counter,
        payload=decode_payload(header.identifier, frame.payload, decoders),
    )


def decode(
    data: bytes,
    decoders: Optional[Mapping[int, PayloadDecoder]] = None,
) -> SaveImage:
    """
    Decode a raw 128 KB Gen 3 save image.

    Args:
        data: The complete save image.
        decoders: Section decoder table for this call only; defaults to the
            built-in table (trainer info).

    Returns:
        The decoded SaveImage.

    Raises:
        SizeMismatch: the buffer is not exactly 131072 bytes.
        SignatureMismatch: a section footer has the wrong magic value.
        ChecksumMismatch: a section's stored checksum does not match its data.
    """
    try:
        frames = frame_image(data)
        slots: List[List[Section]] = [[] for _ in range(SLOT_COUNT)]
        for frame in frames:
            slots[frame.header.slot_index].append(_decode_section(frame, decoders))
    except DecodeError as e:
        logger.warning(f"Save decode aborted: {e}")
        raise

    image = SaveImage(slots=tuple(
        SaveSlot(index=i, sections=tuple(sections)) for i, sections in enumerate(slots)
    ))
    logger.info(
        f"Decoded save image: active slot {image.active_slot.index}, "
        f"counters {[s.save_counter for s in image.slots]}"
    )
    return image


def read_save_file(file_path: Union[str, Path]) -> SaveImage:
    """Read a .sav file from disk and decode it. OSError propagates."""
    path = Path(file_path)
    data = path.read_bytes()
    logger.info(f"Read {len(data)} bytes from {path}")
    return decode(data)
