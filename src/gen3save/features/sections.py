"""
Section payload dispatch.

Each section identifier maps to a payload decoder. Only trainer info is
decoded so far; every other section comes back as ``Unrecognized`` with its
raw bytes intact. The default table is read-only; callers with extra
decoders pass their own mapping to ``decode_payload`` for that call only.
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Any, Mapping, Optional, Union
from dataclasses import dataclass, field

from ..core.constants import SECTION_NAMES, SECTION_TRAINER_INFO
from .trainer_info import TrainerInfo, decode_trainer_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unrecognized:
    """A section whose kind has no decoder yet."""
    identifier: int
    raw:        bytes = field(repr=False)

    def to_dict(self, include_raw: bool = False) -> Dict[str, Any]:
        d = {'identifier': self.identifier, 'raw_length': len(self.raw)}
        if include_raw:
            d['raw'] = self.raw.hex()
        return d


SectionPayload = Union[TrainerInfo, Unrecognized]
PayloadDecoder = Callable[[bytes], SectionPayload]

SECTION_DECODERS: Mapping[int, PayloadDecoder] = MappingProxyType({
    SECTION_TRAINER_INFO: decode_trainer_info,
})


def decode_payload(
    identifier: int,
    payload: bytes,
    decoders: Optional[Mapping[int, PayloadDecoder]] = None,
) -> SectionPayload:
    """
    Decode one section payload.

    Args:
        identifier: Section ID from the footer.
        payload:    The 0xF80-byte data area.
        decoders:   Decoder table for this call; defaults to SECTION_DECODERS.

    Raises:
        TypeError: a decoder returned something without ``to_dict()``.
    """
    table = SECTION_DECODERS if decoders is None else decoders
    decoder = table.get(identifier)
    if decoder is None:
        logger.debug(f"No decoder for section {identifier}, keeping raw bytes")
        return Unrecognized(identifier=identifier, raw=bytes(payload))
    result = decoder(payload)
    if not callable(getattr(result, 'to_dict', None)):
        raise TypeError(
            f"Decoder for section {identifier} returned {type(result).__name__}, "
            f"expected a record with to_dict()"
        )
    return result


def section_name(identifier: int) -> str:
    return SECTION_NAMES.get(identifier, f"Unknown Section {identifier}")


@dataclass(frozen=True)
class Section:
    """One validated section of a save slot."""
    index:         int      # Physical position within the slot
    identifier:    int
    checksum:      int
    signature:     int
    save_counter:  int
    payload:       SectionPayload

    @property
    def name(self) -> str:
        return section_name(self.identifier)

    @property
    def is_recognized(self) -> bool:
        return not isinstance(self.payload, Unrecognized)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index':        self.index,
            'identifier':   self.identifier,
            'name':         self.name,
            'checksum':     self.checksum,
            'signature':    self.signature,
            'save_counter': self.save_counter,
            'kind':         type(self.payload).__name__,
            'payload':      self.payload.to_dict(),
        }
