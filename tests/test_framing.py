import pytest

from gen3save.core import constants as c
from gen3save.core.errors import SizeMismatch
from gen3save.features.framing import SectionHeader, frame_image, section_offset

from builders import make_section, offset_of


@pytest.mark.parametrize("size", [0, 1, c.SAVE_SIZE - 1, c.SAVE_SIZE + 1, c.SLOT_SIZE])
def test_wrong_size_is_rejected(size):
    with pytest.raises(SizeMismatch) as exc:
        frame_image(bytes(size))
    assert exc.value.actual == size
    assert exc.value.expected == c.SAVE_SIZE


def test_frames_cover_both_slots_in_physical_order(valid_image):
    frames = frame_image(valid_image)
    assert len(frames) == c.SLOT_COUNT * c.SECTION_COUNT
    positions = [(f.header.slot_index, f.header.section_index) for f in frames]
    assert positions == [(s, i) for s in range(2) for i in range(14)]
    assert frames[14].header.offset == c.SLOT_SIZE


def test_header_fields_read_from_footer():
    window = make_section(identifier=5, counter=0xDEADBEEF, checksum=0xABCD)
    header = SectionHeader.from_window(window, slot_index=1, section_index=3)
    assert header.identifier == 5
    assert header.checksum == 0xABCD
    assert header.signature == c.SECTION_SIGNATURE
    assert header.save_counter == 0xDEADBEEF
    assert (header.slot_index, header.section_index) == (1, 3)


def test_frame_payload_is_checksummed_area(valid_image):
    frame = frame_image(valid_image)[0]
    assert len(frame.window) == c.SECTION_SIZE
    assert len(frame.payload) == c.SECTION_DATA_SIZE
    assert frame.payload == valid_image[:c.SECTION_DATA_SIZE]


def test_frames_do_not_alias_input(valid_image):
    data = bytearray(valid_image)
    frames = frame_image(data)
    data[0] ^= 0xFF
    assert frames[0].window[0] == valid_image[0]


def test_section_offset_bounds():
    assert section_offset(0, 0) == 0
    assert section_offset(1, 13) == offset_of(1, 13)
    with pytest.raises(ValueError):
        section_offset(2, 0)
    with pytest.raises(ValueError):
        section_offset(0, 14)
