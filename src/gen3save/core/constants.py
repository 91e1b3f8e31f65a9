"""
Gen 3 save format constants.

Layout of a 128 KB (0x20000) Ruby/Sapphire/Emerald/FireRed/LeafGreen save:

  - Two 65536-byte (0x10000) save slots (A/B), written alternately
  - Each slot starts with 14 sections of 4096 bytes (0x1000); the
    remaining 0x2000 bytes of the slot are not framed
  - Only the first 3968 bytes (0xF80) of a section carry checksummed data
  - Section footer: last 12 bytes of each section
    - 0xFF4: section ID (2 bytes)
    - 0xFF6: checksum (2 bytes)
    - 0xFF8: signature (4 bytes) — always 0x08012025
    - 0xFFC: save counter (4 bytes)

Note: cartridge dumps written by the games place slot B directly after
slot A, at 0xE000, with no gap. Those files fail framing with a signature
mismatch under the 0x10000 stride used here (SLOT_SIZE).

Reference: https://bulbapedia.bulbagarden.net/wiki/Save_data_structure_(Generation_III)
"""

# ── Image Layout ───────────────────────────────────────────────────────────────

SECTION_SIZE        = 0x1000    # 4 KB per section
SECTION_COUNT       = 14        # Sections per slot
SLOT_COUNT          = 2         # Save slots A and B
SLOT_SIZE           = 0x10000   # 65536 bytes per slot (14 sections + unused tail)
SAVE_SIZE           = 0x20000   # 131072 bytes total
SECTION_DATA_SIZE   = 0xF80     # Checksummed payload bytes per section

# ── Section Footer ─────────────────────────────────────────────────────────────

SECTION_ID_OFF      = 0xFF4     # u16
CHECKSUM_OFF        = 0xFF6     # u16
SIGNATURE_OFF       = 0xFF8     # u32
SAVE_COUNTER_OFF    = 0xFFC     # u32

SECTION_SIGNATURE   = 0x08012025

# ── Section IDs ────────────────────────────────────────────────────────────────

SECTION_TRAINER_INFO    = 0     # Trainer name, ID, play time, options
SECTION_TEAM_ITEMS      = 1     # Party Pokemon + items
SECTION_GAME_STATE      = 2     # Game flags, events
SECTION_MISC_DATA       = 3     # Misc game data
SECTION_RIVAL_INFO      = 4     # Rival name
SECTION_PC_BUFFER_A     = 5     # PC box data (part 1)
SECTION_PC_BUFFER_B     = 6
SECTION_PC_BUFFER_C     = 7
SECTION_PC_BUFFER_D     = 8
SECTION_PC_BUFFER_E     = 9
SECTION_PC_BUFFER_F     = 10
SECTION_PC_BUFFER_G     = 11
SECTION_PC_BUFFER_H     = 12
SECTION_PC_BUFFER_I     = 13    # PC box data (part 9)

SECTION_NAMES = {
    SECTION_TRAINER_INFO: "Trainer Info",
    SECTION_TEAM_ITEMS:   "Team / Items",
    SECTION_GAME_STATE:   "Game State",
    SECTION_MISC_DATA:    "Misc Data",
    SECTION_RIVAL_INFO:   "Rival Info",
    SECTION_PC_BUFFER_A:  "PC Buffer A",
    SECTION_PC_BUFFER_B:  "PC Buffer B",
    SECTION_PC_BUFFER_C:  "PC Buffer C",
    SECTION_PC_BUFFER_D:  "PC Buffer D",
    SECTION_PC_BUFFER_E:  "PC Buffer E",
    SECTION_PC_BUFFER_F:  "PC Buffer F",
    SECTION_PC_BUFFER_G:  "PC Buffer G",
    SECTION_PC_BUFFER_H:  "PC Buffer H",
    SECTION_PC_BUFFER_I:  "PC Buffer I",
}

# ── Trainer Info (section 0) ───────────────────────────────────────────────────

PLAYER_NAME_LEN     = 7
PLAYER_NAME_OFF     = 0x00
PLAYER_GENDER_OFF   = 0x08
TRAINER_ID_OFF      = 0x0A      # u32: low half public ID, high half secret ID
PLAY_HOURS_OFF      = 0x0E      # u16
PLAY_MINUTES_OFF    = 0x10
PLAY_SECONDS_OFF    = 0x11
PLAY_FRAMES_OFF     = 0x12
OPTIONS_OFF         = 0x13      # 3 bytes
OPTIONS_LEN         = 3
GAME_CODE_OFF       = 0xAC      # u32
SECURITY_KEY_OFF    = 0xAF8     # u32

# Game codes stored at GAME_CODE_OFF (Emerald stores its security key there)
GAME_CODE_RUBY_SAPPHIRE     = 0x00000000
GAME_CODE_FIRERED_LEAFGREEN = 0x00000001
GAME_CODE_EMERALD           = 0xFFFFFFFF
