"""
Decode errors.

Every failure aborts the whole decode; there is no partial result.
"""

from typing import Any, Dict, Optional

from .constants import SAVE_SIZE, SECTION_SIGNATURE


class DecodeError(ValueError):
    """Base class for everything that can go wrong while decoding a save."""

    def to_dict(self) -> Dict[str, Any]:
        return {'error': type(self).__name__, 'message': str(self)}


class SizeMismatch(DecodeError):
    """The buffer is not exactly one save image long."""

    def __init__(self, actual: int, expected: int = SAVE_SIZE):
        self.actual   = actual
        self.expected = expected
        super().__init__(f"Unexpected size: {actual}. Expected: {expected}.")

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({'actual': self.actual, 'expected': self.expected})
        return d


class SectionError(DecodeError):
    """A single section failed validation."""

    def __init__(self, message: str, slot_index: Optional[int] = None,
                 section_index: Optional[int] = None):
        self.slot_index    = slot_index
        self.section_index = section_index
        if slot_index is not None and section_index is not None:
            message = f"{message} (slot {slot_index}, section {section_index})"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({'slot_index': self.slot_index, 'section_index': self.section_index})
        return d


class SignatureMismatch(SectionError):
    def __init__(self, actual: int, expected: int = SECTION_SIGNATURE,
                 slot_index: Optional[int] = None, section_index: Optional[int] = None):
        self.expected = expected
        self.actual   = actual
        super().__init__(
            f"Signature mismatch! Expected: 0x{expected:08x} - Result: 0x{actual:08x}",
            slot_index, section_index,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({'expected': self.expected, 'actual': self.actual})
        return d


class ChecksumMismatch(SectionError):
    def __init__(self, expected: int, computed: int,
                 slot_index: Optional[int] = None, section_index: Optional[int] = None):
        self.expected = expected
        self.computed = computed
        super().__init__(
            f"Checksum mismatch! Expected: 0x{expected:04x} - Result: 0x{computed:04x}",
            slot_index, section_index,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({'expected': self.expected, 'computed': self.computed})
        return d
