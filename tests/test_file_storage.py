"""
Tests for local image storage.
"""

import io

import pytest
from PIL import Image

from agroscan.shared.core.exceptions import ValidationError
from agroscan.shared.infrastructure.storage.file_manager import LocalFileStorage


def png_bytes(size=(16, 16)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(30, 140, 60)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(root=str(tmp_path), url_prefix="/uploads", max_size=1024 * 1024)


async def test_save_writes_file_and_returns_url(storage, tmp_path):
    url = await storage.save(png_bytes(), "leaf.PNG")

    assert url.startswith("/uploads/inspections/")
    assert url.endswith(".png")
    stored = tmp_path / "inspections" / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == png_bytes()


async def test_empty_file_rejected(storage):
    with pytest.raises(ValidationError):
        await storage.save(b"", "leaf.png")


async def test_unsupported_extension_rejected(storage):
    with pytest.raises(ValidationError):
        await storage.save(png_bytes(), "leaf.exe")


async def test_non_image_bytes_rejected(storage):
    with pytest.raises(ValidationError):
        await storage.save(b"definitely not an image", "leaf.png")


async def test_tiny_image_rejected(storage):
    with pytest.raises(ValidationError):
        await storage.save(png_bytes((4, 4)), "leaf.png")


async def test_oversized_file_rejected(tmp_path):
    storage = LocalFileStorage(root=str(tmp_path), max_size=10)
    with pytest.raises(ValidationError):
        await storage.save(png_bytes(), "leaf.png")


async def test_delete_removes_stored_file(storage, tmp_path):
    url = await storage.save(png_bytes(), "leaf.png")

    assert await storage.delete(url) is True
    assert not any((tmp_path / "inspections").iterdir())
    assert await storage.delete(url) is False


async def test_delete_ignores_paths_outside_root(storage, tmp_path):
    outside = tmp_path.parent / "outside.png"
    outside.write_bytes(b"x")

    assert await storage.delete("/uploads/../outside.png") is False
    assert await storage.delete("https://cdn.example.com/leaf.png") is False
    assert outside.exists()
