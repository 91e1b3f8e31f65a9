"""
gen3save — read-only decoder for Generation III (GBA) Pokemon save images.

    from gen3save import decode
    image = decode(raw_bytes)
    print(image.trainer_info.player_name)
"""

from .core.charset import CHAR_TABLE_US, decode_char, decode_string
from .core.checksum import compute_checksum, verify_checksum
from .core.errors import (
    DecodeError, SizeMismatch, SectionError, SignatureMismatch, ChecksumMismatch,
)
from .features.framing import SectionHeader, SectionFrame, frame_image
from .features.sections import SECTION_DECODERS, Section, Unrecognized, decode_payload
from .features.trainer_info import (
    TrainerInfo, TrainerOptions, PlayerGender, GameVersion, decode_trainer_info,
)
from .features.save_image import SaveImage, SaveSlot, decode, read_save_file

__version__ = "1.0.0"

__all__ = [
    "CHAR_TABLE_US", "decode_char", "decode_string",
    "compute_checksum", "verify_checksum",
    "DecodeError", "SizeMismatch", "SectionError", "SignatureMismatch", "ChecksumMismatch",
    "SectionHeader", "SectionFrame", "frame_image",
    "SECTION_DECODERS", "Section", "Unrecognized", "decode_payload",
    "TrainerInfo", "TrainerOptions", "PlayerGender", "GameVersion", "decode_trainer_info",
    "SaveImage", "SaveSlot", "decode", "read_save_file",
]
