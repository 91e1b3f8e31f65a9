"""
Trainer info (section 0) decoding.

All offsets are relative to the start of the section and fall inside the
0xF80-byte checksummed data area, so a framed payload never needs bounds
checks.
"""

import struct
from typing import Dict, Any, Tuple
from dataclasses import dataclass, asdict
from enum import Enum

from ..core.charset import decode_string
from ..core.constants import (
    PLAYER_NAME_OFF, PLAYER_NAME_LEN, PLAYER_GENDER_OFF, TRAINER_ID_OFF,
    PLAY_HOURS_OFF, PLAY_MINUTES_OFF, PLAY_SECONDS_OFF, PLAY_FRAMES_OFF,
    OPTIONS_OFF, OPTIONS_LEN, GAME_CODE_OFF, SECURITY_KEY_OFF,
    GAME_CODE_RUBY_SAPPHIRE, GAME_CODE_FIRERED_LEAFGREEN, GAME_CODE_EMERALD,
)


# ── Enums ──────────────────────────────────────────────────────────────────────

class PlayerGender(Enum):
    MALE   = "male"
    FEMALE = "female"

    @classmethod
    def from_byte(cls, value: int) -> 'PlayerGender':
        return cls.MALE if value == 0 else cls.FEMALE

    def to_byte(self) -> int:
        return 0 if self is PlayerGender.MALE else 1


class GameVersion(Enum):
    """Game family, from the code at 0xAC in section 0."""
    RUBY_SAPPHIRE     = "ruby_sapphire"
    FIRERED_LEAFGREEN = "firered_leafgreen"
    EMERALD           = "emerald"

    @classmethod
    def from_code(cls, code: int) -> 'GameVersion':
        # Emerald keeps its security key in this field, so anything else is Emerald
        if code == GAME_CODE_RUBY_SAPPHIRE:
            return cls.RUBY_SAPPHIRE
        if code == GAME_CODE_FIRERED_LEAFGREEN:
            return cls.FIRERED_LEAFGREEN
        return cls.EMERALD

    def to_code(self) -> int:
        return {
            GameVersion.RUBY_SAPPHIRE:     GAME_CODE_RUBY_SAPPHIRE,
            GameVersion.FIRERED_LEAFGREEN: GAME_CODE_FIRERED_LEAFGREEN,
            GameVersion.EMERALD:           GAME_CODE_EMERALD,
        }[self]


class ButtonMode(Enum):
    NORMAL = 0
    LR     = 1
    L_IS_A = 2
    UNKNOWN = -1


class TextSpeed(Enum):
    SLOW = 0
    MID  = 1
    FAST = 2
    UNKNOWN = -1


# ── Data Classes ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TrainerOptions:
    """The options menu settings packed into the 24-bit options field."""
    button_mode:       ButtonMode
    text_speed:        TextSpeed
    window_frame:      int      # Frame style 0-19, shown as 1-20 in game
    stereo_sound:      bool
    battle_style_set:  bool     # False = Shift
    battle_scene_off:  bool

    @classmethod
    def from_bits(cls, options: int) -> 'TrainerOptions':
        button_byte = options & 0xFF
        text_byte   = (options >> 8) & 0xFF
        flags_byte  = (options >> 16) & 0xFF
        try:
            button_mode = ButtonMode(button_byte)
        except ValueError:
            button_mode = ButtonMode.UNKNOWN
        try:
            text_speed = TextSpeed(text_byte & 0x07)
        except ValueError:
            text_speed = TextSpeed.UNKNOWN
        return cls(
            button_mode=button_mode,
            text_speed=text_speed,
            window_frame=text_byte >> 3,
            stereo_sound=bool(flags_byte & 0x01),
            battle_style_set=bool(flags_byte & 0x02),
            battle_scene_off=bool(flags_byte & 0x04),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'button_mode':      self.button_mode.name.lower(),
            'text_speed':       self.text_speed.name.lower(),
            'window_frame':     self.window_frame,
            'stereo_sound':     self.stereo_sound,
            'battle_style_set': self.battle_style_set,
            'battle_scene_off': self.battle_scene_off,
        }


@dataclass(frozen=True)
class TrainerInfo:
    """Decoded contents of the trainer info section."""
    player_name:     str
    gender:          PlayerGender
    public_id:       int
    secret_id:       int
    hours_played:    int
    minutes_played:  int
    seconds_played:  int
    frames_played:   int
    options:         int
    game_code:       int
    game_version:    GameVersion
    security_key:    int

    @property
    def trainer_id(self) -> int:
        """The full 32-bit trainer ID as stored."""
        return (self.secret_id << 16) | self.public_id

    @property
    def play_time(self) -> Tuple[int, int, int]:
        return self.hours_played, self.minutes_played, self.seconds_played

    @property
    def option_settings(self) -> TrainerOptions:
        return TrainerOptions.from_bits(self.options)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['gender']       = self.gender.value
        d['game_version'] = self.game_version.value
        d['trainer_id']   = self.trainer_id
        d['option_settings'] = self.option_settings.to_dict()
        return d


# ── Decoder ────────────────────────────────────────────────────────────────────

def decode_trainer_info(payload: bytes) -> TrainerInfo:
    """Decode a section 0 payload (the first 0xF80 bytes of the section)."""
    player_name = decode_string(payload[PLAYER_NAME_OFF:PLAYER_NAME_OFF + PLAYER_NAME_LEN])

    # One 32-bit read; the halves are the public and secret IDs
    trainer_id = struct.unpack_from('<I', payload, TRAINER_ID_OFF)[0]

    hours   = struct.unpack_from('<H', payload, PLAY_HOURS_OFF)[0]
    options = int.from_bytes(payload[OPTIONS_OFF:OPTIONS_OFF + OPTIONS_LEN], 'little')

    game_code    = struct.unpack_from('<I', payload, GAME_CODE_OFF)[0]
    security_key = struct.unpack_from('<I', payload, SECURITY_KEY_OFF)[0]

    return TrainerInfo(
        player_name=player_name,
        gender=PlayerGender.from_byte(payload[PLAYER_GENDER_OFF]),
        public_id=trainer_id & 0xFFFF,
        secret_id=trainer_id >> 16,
        hours_played=hours,
        minutes_played=payload[PLAY_MINUTES_OFF],
        seconds_played=payload[PLAY_SECONDS_OFF],
        frames_played=payload[PLAY_FRAMES_OFF],
        options=options,
        game_code=game_code,
        game_version=GameVersion.from_code(game_code),
        security_key=security_key,
    )
