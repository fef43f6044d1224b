import struct

import pytest

from lc3.errors import ImageLoadError
from lc3.loader import load_image, load_images, parse_image
from lc3.memory import Memory


def write_image(path, origin, words):
    path.write_bytes(struct.pack(f">{len(words) + 1}H", origin, *words))
    return path


def test_parse_image_is_big_endian():
    origin, words = parse_image(bytes([0x30, 0x00, 0x12, 0x34, 0xF0, 0x25]))
    assert origin == 0x3000
    assert words == [0x1234, 0xF025]


def test_parse_image_ignores_trailing_byte():
    assert parse_image(bytes([0x30, 0x00, 0x12, 0x34, 0x56])) == (0x3000, [0x1234])


def test_parse_image_too_short():
    with pytest.raises(ValueError):
        parse_image(b"\x30")


def test_load_image(tmp_path):
    mem = Memory()
    path = write_image(tmp_path / "prog.obj", 0x3000, [0x1234, 0xF025])
    assert load_image(mem, path) == (0x3000, 2)
    assert mem.peek(0x3000) == 0x1234
    assert mem.peek(0x3001) == 0xF025
    assert mem.peek(0x2FFF) == 0


def test_load_image_truncated_at_top_of_memory(tmp_path):
    mem = Memory()
    path = write_image(tmp_path / "top.obj", 0xFFFF, [1, 2])
    assert load_image(mem, path) == (0xFFFF, 1)
    assert mem.peek(0xFFFF) == 1
    assert mem.peek(0) == 0


def test_missing_image(tmp_path):
    with pytest.raises(ImageLoadError) as exc:
        load_image(Memory(), tmp_path / "nope.obj")
    assert exc.value.path.name == "nope.obj"


def test_empty_image(tmp_path):
    path = tmp_path / "empty.obj"
    path.write_bytes(b"")
    with pytest.raises(ImageLoadError):
        load_image(Memory(), path)


def test_later_images_overwrite_earlier(tmp_path):
    mem = Memory()
    first = write_image(tmp_path / "a.obj", 0x3000, [1, 2, 3])
    second = write_image(tmp_path / "b.obj", 0x3001, [9])
    assert load_images(mem, [first, second]) == [(0x3000, 3), (0x3001, 1)]
    assert [mem.peek(a) for a in range(0x3000, 0x3003)] == [1, 9, 3]
