"""Image table: fixed size BGRA pixel blocks stored back to back from IMAGE_START"""

from .constants import ENTRY_SIZE, IMAGE_START
from .errors import TruncatedDataError, WriteError


def read_blocks(f, count, block_size=ENTRY_SIZE, offset=IMAGE_START):
    """Read count blocks. The nth block belongs to the nth signature in the index."""
    f.seek(offset)

    blocks = []
    for i in range(count):
        block = f.read(block_size)
        if len(block) != block_size:
            raise TruncatedDataError(
                f"image {i} of {count} is truncated: expected {block_size} bytes, got {len(block)}"
            )
        blocks.append(block)
    return blocks


def write_blocks(f, blocks, block_size=ENTRY_SIZE, offset=IMAGE_START):
    # No count is stored, the index length says how many blocks there are
    for i, block in enumerate(blocks):
        if len(block) != block_size:
            raise WriteError(f"image {i} is {len(block)} bytes, expected {block_size}")

    f.seek(offset)
    for block in blocks:
        f.write(block)
