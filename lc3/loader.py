"""Program image loading.

An image file is a big-endian origin word followed by big-endian program
words, stored contiguously from the origin.
"""
import logging
import struct
from pathlib import Path
from typing import Iterable, List, Tuple

from .errors import ImageLoadError
from .memory import MEM_SIZE, Memory

logger = logging.getLogger(__name__)


def parse_image(data: bytes) -> Tuple[int, List[int]]:
    """Split raw image bytes into (origin, words). A trailing odd byte is ignored."""
    if len(data) < 2:
        raise ValueError("image is shorter than its origin word")
    (origin,) = struct.unpack(">H", data[:2])
    count = (len(data) - 2) // 2
    words = list(struct.unpack(f">{count}H", data[2:2 + 2*count]))
    return origin, words


def load_image(mem: Memory, path) -> Tuple[int, int]:
    """Load one image file into `mem`; returns (origin, words stored)."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImageLoadError(path, e.strerror or str(e)) from e
    try:
        origin, words = parse_image(data)
    except ValueError as e:
        raise ImageLoadError(path, str(e)) from e

    stored = mem.load(origin, words)
    if stored < len(words):
        logger.warning("%s: %d words past 0x%04X dropped",
                       path, len(words) - stored, MEM_SIZE - 1)
    logger.info("Loaded %s at 0x%04X (%d words)", path, origin, stored)
    return origin, stored


def load_images(mem: Memory, paths: Iterable) -> List[Tuple[int, int]]:
    """Load images in order; later images overwrite earlier ones where they overlap."""
    return [load_image(mem, p) for p in paths]
