"""Unit tests for saucedemo_qa.imaging.raster – decode/encode helpers."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from saucedemo_qa.imaging import DecodeError, RasterImage, StorageWriteError, load_image, save_image


def _chunk_offsets(png: bytes, chunk_type: bytes) -> list[int]:
    """Byte offsets of every chunk of *chunk_type* in a PNG stream."""
    offsets = []
    pos = 8
    while pos < len(png):
        length = int.from_bytes(png[pos:pos + 4], "big")
        if png[pos + 4:pos + 8] == chunk_type:
            offsets.append(pos)
        pos += 12 + length
    return offsets


@pytest.mark.unit
class TestRasterImage:
    def test_rejects_wrong_buffer_length(self):
        with pytest.raises(ValueError, match="expected 16"):
            RasterImage(width=2, height=2, data=b"\x00" * 15)

    def test_rejects_empty_dimensions(self):
        with pytest.raises(ValueError, match="positive"):
            RasterImage(width=0, height=2, data=b"")

    def test_array_view_is_row_major(self):
        pixels = np.zeros((2, 3, 4), dtype=np.uint8)
        pixels[1, 2] = (1, 2, 3, 4)

        img = RasterImage.from_array(pixels)

        assert img.size == (3, 2)
        assert img.data[-4:] == bytes((1, 2, 3, 4))
        assert np.array_equal(img.to_array(), pixels)

    def test_from_array_requires_four_channels(self):
        with pytest.raises(ValueError, match="RGBA"):
            RasterImage.from_array(np.zeros((2, 2, 3), dtype=np.uint8))


@pytest.mark.unit
class TestLoadImage:
    def test_rgb_png_is_converted_to_rgba(self, tmp_path):
        path = tmp_path / "rgb.png"
        Image.new("RGB", (4, 3), (10, 20, 30)).save(path)

        img = load_image(path)

        assert img.size == (4, 3)
        assert img.data[:4] == bytes((10, 20, 30, 255))

    def test_missing_file(self, tmp_path):
        with pytest.raises(DecodeError, match="file not found"):
            load_image(tmp_path / "missing.png")

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png")

        with pytest.raises(DecodeError, match="not a valid image"):
            load_image(path)

    def test_damaged_later_chunk(self, tmp_path):
        rng = np.random.default_rng(7)
        noise = rng.integers(0, 256, size=(400, 400, 4), dtype=np.uint8)
        path = tmp_path / "noise.png"
        Image.fromarray(noise).save(path)

        data = bytearray(path.read_bytes())
        idat_offsets = _chunk_offsets(bytes(data), b"IDAT")
        assert len(idat_offsets) > 1
        second = idat_offsets[1]
        data[second + 4:second + 8] = b"\x00\x01\x02\x03"
        path.write_bytes(bytes(data))

        with pytest.raises(DecodeError) as excinfo:
            load_image(path)

        assert isinstance(excinfo.value.__cause__, SyntaxError)

    def test_over_pixel_limit(self, make_png, monkeypatch):
        path = make_png("big.png", size=(100, 150))
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        with pytest.raises(DecodeError, match="pixel limit"):
            load_image(path)


@pytest.mark.unit
class TestSaveImage:
    def test_round_trips_pixels(self, tmp_path):
        pixels = np.full((3, 2, 4), 200, dtype=np.uint8)
        original = RasterImage.from_array(pixels)

        path = save_image(original, tmp_path / "out.png")

        assert load_image(path) == original

    def test_missing_directory_raises_storage_error(self, tmp_path):
        img = RasterImage.from_array(np.zeros((1, 1, 4), dtype=np.uint8))

        with pytest.raises(StorageWriteError) as excinfo:
            save_image(img, tmp_path / "missing" / "out.png")

        assert excinfo.value.diff_pixels is None
