"""
Reading and rewriting labels.db in place.

An update is always a full cycle: the whole index and image table are read,
merged with the pending images and written back, index first and images
second. There is no rollback, a failure part way through the write leaves the
file inconsistent, so take a backup first if that matters.
"""

import io
import logging
import os

from .blocks import read_blocks, write_blocks
from .constants import HEADER, IMAGE_START, INDEX_START, MAX_SLOTS, UNUSED_ENTRY
from .encoder import decode_bgra_image, load_image
from .errors import TruncatedDataError
from .index import check_index, read_index, write_index
from .merge import build_new_db
from .signature import check_pending_images

logger = logging.getLogger(__name__)


def file_size(f):
    cur = f.tell()
    f.seek(0, io.SEEK_END)
    end = f.tell()
    f.seek(cur, io.SEEK_SET)
    return end


def read_labels_db(f):
    """Read the signature index and the matching pixel blocks from an open labels.db"""
    size = file_size(f)
    if size < IMAGE_START:
        raise TruncatedDataError(f"File too small: {size} bytes, the image table starts at {IMAGE_START:#x}")

    signatures = read_index(f, MAX_SLOTS, INDEX_START)
    images = read_blocks(f, len(signatures))
    return signatures, images


def update_labels_db(path, pending, resolve=load_image, dry_run=False):
    """
    Merge pending images into the labels.db at path.

    Pending images replace entries with the same signature and are inserted in
    order otherwise. Only pending images are loaded through `resolve`.
    Returns the merged signature list.
    """
    pending = check_pending_images(pending)

    with open(path, "r+b") as f:
        signatures, images = read_labels_db(f)
        logger.debug("Read %d signatures from %s", len(signatures), path)

        signatures, images = build_new_db(signatures, images, pending, resolve)
        check_index(signatures, MAX_SLOTS)

        if dry_run:
            logger.info("Dry run, not writing %d images to %s", len(images), path)
            return signatures

        logger.info("Writing %d images to %s", len(images), path)
        write_index(f, signatures, MAX_SLOTS, INDEX_START)
        write_blocks(f, images)

    return signatures


def create_labels_db(path):
    """Write an empty labels.db: factory header and an index holding only the end marker"""
    if os.path.exists(path):
        raise FileExistsError(path)

    with open(path, "wb") as f:
        f.write(HEADER)
        f.write(UNUSED_ENTRY.to_bytes(4, "little") * MAX_SLOTS)
    logger.info("Created empty labels.db at %s", path)


def list_signatures(path):
    with open(path, "rb") as f:
        if file_size(f) < IMAGE_START:
            raise TruncatedDataError(f"File too small: {path}")
        return read_index(f, MAX_SLOTS, INDEX_START)


def export_images(path, export_dir, only=None):
    """
    Save stored labels as PNG files named image_<signature>.png.

    `only` limits the export to a collection of signatures. Returns the paths
    written.
    """
    with open(path, "rb") as f:
        signatures, images = read_labels_db(f)

    exported = []
    for sig, block in zip(signatures, images):
        if only is not None and sig not in only:
            continue
        file_path = os.path.join(export_dir, f"image_{sig:08x}.png")
        decode_bgra_image(block).save(file_path, "PNG")
        exported.append(file_path)

    logger.info("Exported %d images to %s", len(exported), export_dir)
    return exported
