import pytest

from gen3save.features.trainer_info import (
    ButtonMode, GameVersion, PlayerGender, TextSpeed, TrainerOptions, decode_trainer_info,
)

from builders import make_trainer_payload


def test_decode_trainer_fields():
    payload = make_trainer_payload(
        name="Brendan", gender=0, public_id=12345, secret_id=54321,
        hours=123, minutes=45, seconds=59, frames=30,
        options=b"\x01\x2a\x05", game_code=1, security_key=0xCAFEBABE,
    )
    info = decode_trainer_info(payload)
    assert info.player_name == "Brendan"
    assert info.gender is PlayerGender.MALE
    assert info.public_id == 12345
    assert info.secret_id == 54321
    assert info.trainer_id == (54321 << 16) | 12345
    assert info.play_time == (123, 45, 59)
    assert info.frames_played == 30
    assert info.options == 0x052A01
    assert info.game_code == 1
    assert info.game_version is GameVersion.FIRERED_LEAFGREEN
    assert info.security_key == 0xCAFEBABE


@pytest.mark.parametrize("byte,expected", [
    (0, PlayerGender.MALE),
    (1, PlayerGender.FEMALE),
    (0x80, PlayerGender.FEMALE),
])
def test_gender(byte, expected):
    assert decode_trainer_info(make_trainer_payload(gender=byte)).gender is expected


def test_gender_round_trip():
    assert PlayerGender.MALE.to_byte() == 0
    assert PlayerGender.FEMALE.to_byte() == 1
    for gender in PlayerGender:
        assert PlayerGender.from_byte(gender.to_byte()) is gender


@pytest.mark.parametrize("code,expected", [
    (0, GameVersion.RUBY_SAPPHIRE),
    (1, GameVersion.FIRERED_LEAFGREEN),
    (0xFFFFFFFF, GameVersion.EMERALD),
    (0x1234ABCD, GameVersion.EMERALD),
])
def test_game_version(code, expected):
    assert GameVersion.from_code(code) is expected


def test_game_version_canonical_codes():
    for version in GameVersion:
        assert GameVersion.from_code(version.to_code()) is version


def test_options_top_byte_is_zero():
    info = decode_trainer_info(make_trainer_payload(options=b"\xff\xff\xff"))
    assert info.options == 0x00FFFFFF


def test_option_settings():
    opts = TrainerOptions.from_bits(0x052A01)
    assert opts.button_mode is ButtonMode.LR
    assert opts.text_speed is TextSpeed.FAST
    assert opts.window_frame == 5
    assert opts.stereo_sound is True
    assert opts.battle_style_set is False
    assert opts.battle_scene_off is True


def test_option_settings_unknown_values():
    opts = TrainerOptions.from_bits(0x000007)
    assert opts.button_mode is ButtonMode.UNKNOWN
    assert opts.text_speed is TextSpeed.SLOW


def test_to_dict_is_json_friendly():
    d = decode_trainer_info(make_trainer_payload(gender=1)).to_dict()
    assert d["player_name"] == "RED"
    assert d["gender"] == "female"
    assert d["game_version"] == "ruby_sapphire"
    assert d["trainer_id"] == (54321 << 16) | 12345
    assert d["option_settings"]["text_speed"] == "slow"
