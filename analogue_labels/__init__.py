"""
Analogue 3D labels.db editor.

Adds custom cartridge label images to the labels.db an Analogue 3D reads from
its SD card, replacing labels that already exist and inserting new ones in
signature order.
"""

from .encoder import decode_bgra_image, encode_bgra_image, load_image
from .errors import (
    DecodeError,
    EncodeError,
    FormatError,
    IndexFullError,
    LabelsDBError,
    ReadError,
    TruncatedDataError,
    WriteError,
)
from .labels_db import create_labels_db, export_images, read_labels_db, update_labels_db
from .merge import build_new_db, iter_merged
from .signature import PendingImage, hex_string_transform, pending_images_from_paths

__all__ = [
    "DecodeError",
    "EncodeError",
    "FormatError",
    "IndexFullError",
    "LabelsDBError",
    "PendingImage",
    "ReadError",
    "TruncatedDataError",
    "WriteError",
    "build_new_db",
    "create_labels_db",
    "decode_bgra_image",
    "encode_bgra_image",
    "export_images",
    "hex_string_transform",
    "iter_merged",
    "load_image",
    "pending_images_from_paths",
    "read_labels_db",
    "update_labels_db",
]
