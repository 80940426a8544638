"""Cartridge signatures and the image files named after them"""

import os
import string
from collections import namedtuple

from .constants import UNUSED_ENTRY
from .errors import FormatError

HEX_DIGITS = frozenset(string.hexdigits)

# A custom label waiting to be merged into the database. The file is only
# opened if the signature survives into the merged output.
PendingImage = namedtuple("PendingImage", ["signature", "filepath"])


def hex_string_transform(s):
    """
    Validate a 32 bit hex string and return it as an int.

    The string may or may not be prefixed with ``0x`` and leading/trailing
    whitespace is ignored. Strings shorter than 8 digits are zero padded on the
    left, longer ones are rejected. A blank string is signature 0.
    """
    s = s.strip()
    if s == "":
        return 0

    s = s.lower()
    if s.startswith("0x"):
        s = s[2:]
    if s == "":
        raise FormatError("invalid signature string: 0x with no digits")

    if len(s) > 8:
        raise FormatError(f"hex string too long: {s}")
    s = s.rjust(8, "0")

    if not HEX_DIGITS.issuperset(s):
        raise FormatError(f"invalid hex string: {s}")

    return int.from_bytes(bytes.fromhex(s), "big")


def format_signature(signature):
    return f"0x{signature:08x}"


def signature_from_path(path):
    """
    The signature is the file's base name without its extension, e.g. 3274bdaf.png.

    Everything from the last dot is the extension, so a bare ".png" has an
    empty name and is signature 0.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot != -1:
        name = name[:dot]
    return hex_string_transform(name)


def pending_images_from_paths(paths):
    """Turn image paths into PendingImage records. Files are not checked for existence."""
    pending = []
    for path in paths:
        pending.append(PendingImage(signature_from_path(path), os.path.abspath(path)))
    return pending


def check_pending_images(pending):
    """Sort pending images by signature, rejecting duplicates and the end-of-index marker"""
    ordered = sorted(pending, key=lambda p: p.signature)
    for prev, cur in zip(ordered, ordered[1:]):
        if prev.signature == cur.signature:
            raise FormatError(
                f"signature {format_signature(cur.signature)} given more than once: "
                f"{prev.filepath}, {cur.filepath}"
            )
    for p in ordered:
        if p.signature == UNUSED_ENTRY:
            raise FormatError(
                f"{p.filepath}: signature {format_signature(p.signature)} is reserved for end of index"
            )
        if not 0 <= p.signature < UNUSED_ENTRY:
            raise FormatError(f"{p.filepath}: signature {p.signature:#x} is not a 32 bit value")
    return ordered
