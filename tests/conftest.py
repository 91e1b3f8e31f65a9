import pytest

from builders import make_image


@pytest.fixture
def valid_image() -> bytes:
    return make_image()
