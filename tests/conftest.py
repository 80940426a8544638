import logging
import struct

import pytest
from PIL import Image

from analogue_labels.constants import ENTRY_SIZE, HEADER, IMAGE_HEIGHT, IMAGE_WIDTH, MAX_SLOTS, UNUSED_ENTRY
from analogue_labels.logging_config import PACKAGE_LOGGER


def fake_block(n):
    """A pixel block that is easy to recognise: every byte is n"""
    return bytes([n % 256]) * ENTRY_SIZE


def write_db(path, signatures, blocks=None):
    if blocks is None:
        blocks = [fake_block(i + 1) for i in range(len(signatures))]

    index = struct.pack(f"<{len(signatures)}I", *signatures)
    index += struct.pack("<I", UNUSED_ENTRY) * (MAX_SLOTS - len(signatures))
    with open(path, "wb") as f:
        f.write(HEADER)
        f.write(index)
        for block in blocks:
            f.write(block)
    return path


def save_image(path, color, size=(IMAGE_WIDTH, IMAGE_HEIGHT), mode="RGBA"):
    Image.new(mode, size, color).save(path)
    return str(path)


@pytest.fixture
def labels_db(tmp_path):
    return str(write_db(tmp_path / "labels.db", [0x10, 0x20, 0x30]))


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
