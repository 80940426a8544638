"""
Cartridge signature index.

Signatures are stored as little-endian 32-bit words in ascending order,
starting at INDEX_START and terminated by a single UNUSED_ENTRY word. Only the
slots between INDEX_START and IMAGE_START are available.
"""

import logging
import struct

from .constants import INDEX_START, MAX_SLOTS, SIGNATURE_SIZE, UNUSED_ENTRY
from .errors import FormatError, IndexFullError, TruncatedDataError

logger = logging.getLogger(__name__)


def read_index(f, max_slots=MAX_SLOTS, offset=INDEX_START):
    """Read signatures until the end-of-index word or until max_slots words have been read"""
    f.seek(offset)

    signatures = []
    for i in range(max_slots):
        word = f.read(SIGNATURE_SIZE)
        if len(word) != SIGNATURE_SIZE:
            raise TruncatedDataError(
                f"index ends after {i} signatures at offset {offset + i * SIGNATURE_SIZE:#x}"
            )
        signature = struct.unpack("<I", word)[0]
        if signature == UNUSED_ENTRY:
            break
        signatures.append(signature)
    else:
        logger.warning("Index has no end marker, all %d slots are in use", max_slots)

    return signatures


def check_index(signatures, max_slots=MAX_SLOTS):
    """Raise if signatures can't be written as an index of max_slots words"""
    if len(signatures) + 1 > max_slots:
        raise IndexFullError(
            f"{len(signatures)} signatures don't fit in the index, the limit is {max_slots - 1}"
        )
    for signature in signatures:
        if signature == UNUSED_ENTRY:
            raise FormatError(f"signature {UNUSED_ENTRY:#010x} is reserved for end of index")
        if not 0 <= signature < UNUSED_ENTRY:
            raise FormatError(f"signature {signature:#x} is not a 32 bit value")


def write_index(f, signatures, max_slots=MAX_SLOTS, offset=INDEX_START):
    """
    Write signatures followed by one end-of-index word.

    Everything is checked before the first byte is written, so a rejected
    index leaves the file untouched.
    """
    check_index(signatures, max_slots)

    data = struct.pack(f"<{len(signatures) + 1}I", *signatures, UNUSED_ENTRY)
    f.seek(offset)
    f.write(data)
