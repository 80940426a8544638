"""Conversion between Pillow images and labels.db pixel blocks"""

import logging

from PIL import Image

from .constants import IMAGE_HEIGHT, IMAGE_PADDING, IMAGE_WIDTH, PADDING_BYTE
from .errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

RESAMPLE_FILTER = Image.Resampling.LANCZOS


def encode_bgra_image(img, width=IMAGE_WIDTH, height=IMAGE_HEIGHT, padding=IMAGE_PADDING):
    """
    Encode a PIL Image to a pixel block.

    The image is stretched to exactly width x height (aspect ratio is not
    kept), then written row by row from the top left as B, G, R, A bytes and
    followed by `padding` bytes of 0xFF.
    """
    try:
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        if img.size != (width, height):
            img = img.resize((width, height), RESAMPLE_FILTER)
        rgba_data = img.tobytes("raw", "RGBA")
    except (OSError, ValueError) as e:
        raise EncodeError(f"failed to convert image to {width}x{height} RGBA: {e}") from e

    pixel_size = width * height * 4
    bgra_data = bytearray([PADDING_BYTE]) * (pixel_size + padding)
    bgra_data[0:pixel_size:4] = rgba_data[2::4]
    bgra_data[1:pixel_size:4] = rgba_data[1::4]
    bgra_data[2:pixel_size:4] = rgba_data[0::4]
    bgra_data[3:pixel_size:4] = rgba_data[3::4]
    return bytes(bgra_data)


def decode_bgra_image(bgra_data, width=IMAGE_WIDTH, height=IMAGE_HEIGHT):
    """Decode a pixel block to an RGBA PIL Image, ignoring the padding"""
    pixel_size = width * height * 4
    if len(bgra_data) < pixel_size:
        raise DecodeError(f"pixel block is {len(bgra_data)} bytes, need at least {pixel_size}")

    return Image.frombytes("RGBA", (width, height), bytes(bgra_data[:pixel_size]), "raw", "BGRA")


def load_image(filepath, width=IMAGE_WIDTH, height=IMAGE_HEIGHT, padding=IMAGE_PADDING):
    """Load an image file from disk and encode it as a pixel block"""
    logger.info("Loading %s", filepath)

    # Problems opening the file itself are left as OSError
    with open(filepath, "rb") as f:
        try:
            img = Image.open(f)
            img.load()
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError(f"{filepath}: {e}") from e

        return encode_bgra_image(img, width, height, padding)
