"""
labels.db layout

- 0x0000-0x00FF: Header
- 0x0100-0x40FF: Cartridge signature index (32-bit LE CRC32, sorted ascending, terminated by 0xFFFFFFFF)
- 0x4100-EOF: Image data (74x86 pixels, 4 bytes/pixel BGRA, then 0x90 bytes of 0xFF padding)
"""

HEADER_SIZE = 0x100
INDEX_START = 0x100
INDEX_END = 0x4100
IMAGE_START = 0x4100

IMAGE_WIDTH = 74
IMAGE_HEIGHT = 86
BYTES_PER_PIXEL = 4
PIXEL_DATA_SIZE = IMAGE_WIDTH * IMAGE_HEIGHT * BYTES_PER_PIXEL  # 25,456 bytes
IMAGE_PADDING = 0x90
PADDING_BYTE = 0xFF
ENTRY_SIZE = PIXEL_DATA_SIZE + IMAGE_PADDING  # 25,600 bytes

UNUSED_ENTRY = 0xFFFFFFFF
SIGNATURE_SIZE = 4
MAX_SLOTS = (IMAGE_START - INDEX_START) // SIGNATURE_SIZE

# Header of a factory labels.db. Only written when creating a fresh database,
# the in-place rewrite leaves the existing header alone.
HEADER = (
    b"\x07Analogue-Co"
    + b"\x00" * 20
    + b"Analogue-3D.labels"
    + b"\x00" * 16
    + b"\x02"
).ljust(HEADER_SIZE, b"\x00")

# Where the Analogue 3D SD card keeps the database, relative to the card root
DEFAULT_DB_LOCATIONS = (
    "labels.db",
    "Library/N64/Images/labels.db",
    "root/Library/N64/Images/labels.db",
)
