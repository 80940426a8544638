import pytest
from PIL import Image

from analogue_labels.constants import ENTRY_SIZE, IMAGE_HEIGHT, IMAGE_PADDING, IMAGE_WIDTH, PIXEL_DATA_SIZE
from analogue_labels.encoder import decode_bgra_image, encode_bgra_image, load_image
from analogue_labels.errors import DecodeError

from .conftest import save_image


def test_encode_uniform_image():
    img = Image.new("RGBA", (IMAGE_WIDTH, IMAGE_HEIGHT), (10, 20, 30, 200))
    block = encode_bgra_image(img)

    assert len(block) == ENTRY_SIZE == 25600
    assert block[:PIXEL_DATA_SIZE] == bytes([30, 20, 10, 200]) * (IMAGE_WIDTH * IMAGE_HEIGHT)
    assert block[PIXEL_DATA_SIZE:] == b"\xff" * IMAGE_PADDING


def test_encode_is_row_major_from_top_left():
    img = Image.new("RGBA", (3, 2), (0, 0, 0, 255))
    img.putpixel((1, 0), (1, 2, 3, 4))
    img.putpixel((0, 1), (5, 6, 7, 8))
    block = encode_bgra_image(img, width=3, height=2, padding=2)

    assert block == (
        bytes([0, 0, 0, 255, 3, 2, 1, 4, 0, 0, 0, 255])
        + bytes([7, 6, 5, 8, 0, 0, 0, 255, 0, 0, 0, 255])
        + b"\xff\xff"
    )


def test_encode_rgb_gets_opaque_alpha():
    img = Image.new("RGB", (IMAGE_WIDTH, IMAGE_HEIGHT), (1, 2, 3))
    block = encode_bgra_image(img)
    assert block[:8] == bytes([3, 2, 1, 255, 3, 2, 1, 255])


def test_encode_palette_image():
    img = Image.new("RGB", (IMAGE_WIDTH, IMAGE_HEIGHT), (0, 0, 255)).convert("P")
    block = encode_bgra_image(img)
    assert block[:4] == bytes([255, 0, 0, 255])


def test_encode_stretches_to_fit():
    # wider than tall, no letterboxing: every pixel is still the fill colour
    img = Image.new("RGBA", (300, 40), (200, 100, 50, 255))
    block = encode_bgra_image(img)

    assert len(block) == ENTRY_SIZE
    pixels = block[:PIXEL_DATA_SIZE]
    for i in range(0, PIXEL_DATA_SIZE, 4):
        b, g, r, a = pixels[i:i + 4]
        assert abs(b - 50) <= 1 and abs(g - 100) <= 1 and abs(r - 200) <= 1 and a >= 254
    assert block[PIXEL_DATA_SIZE:] == b"\xff" * IMAGE_PADDING


def test_decode_bgra_image():
    block = bytes([30, 20, 10, 200]) * (IMAGE_WIDTH * IMAGE_HEIGHT) + b"\xff" * IMAGE_PADDING
    img = decode_bgra_image(block)

    assert img.mode == "RGBA"
    assert img.size == (IMAGE_WIDTH, IMAGE_HEIGHT)
    assert img.getpixel((0, 0)) == (10, 20, 30, 200)
    assert img.getpixel((IMAGE_WIDTH - 1, IMAGE_HEIGHT - 1)) == (10, 20, 30, 200)


def test_decode_then_encode_gives_same_block():
    img = Image.new("RGBA", (IMAGE_WIDTH, IMAGE_HEIGHT), (0, 0, 0, 0))
    for x in range(IMAGE_WIDTH):
        img.putpixel((x, x % IMAGE_HEIGHT), (x, 255 - x, 7, 255))
    block = encode_bgra_image(img)
    assert encode_bgra_image(decode_bgra_image(block)) == block


def test_decode_short_block():
    with pytest.raises(DecodeError):
        decode_bgra_image(b"\x00" * 100)


def test_load_image(tmp_path):
    path = save_image(tmp_path / "3274bdaf.png", (10, 20, 30, 255))
    block = load_image(path)
    assert block[:4] == bytes([30, 20, 10, 255])
    assert len(block) == ENTRY_SIZE


def test_load_image_not_an_image(tmp_path):
    path = tmp_path / "3274bdaf.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(DecodeError):
        load_image(str(path))


def test_load_image_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(str(tmp_path / "nope.png"))


def test_load_image_too_large(tmp_path, monkeypatch):
    path = save_image(tmp_path / "3274bdaf.png", (1, 2, 3, 255), size=(100, 100))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(DecodeError):
        load_image(path)
