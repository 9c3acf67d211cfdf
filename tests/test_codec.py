"""Tests for the mask image codec."""

import numpy as np
import pytest
from PIL import Image

from stratum.errors import EncodeError
from stratum.image import CodecType, IImageCodec, PillowPngCodec
from stratum.raster import PixelMask


class TestPillowPngCodec:
    """Tests for PNG encoding."""

    def test_factory_default(self):
        assert isinstance(IImageCodec.create(), PillowPngCodec)
        assert isinstance(IImageCodec.create(CodecType.PillowPng, compress_level=1), PillowPngCodec)

    def test_encode_writes_png(self, tmp_path):
        mask = PixelMask(3, 2, np.array([[1, 0, 0], [0, 1, 1]]))
        target = tmp_path / "00000.png"

        result = PillowPngCodec().encode(3, 2, mask.to_rgba_bytes(), target)

        assert result == target
        with Image.open(target) as img:
            assert img.format == "PNG"
            assert img.mode == "RGBA"
            assert img.size == (3, 2)
            pixels = np.asarray(img)
        np.testing.assert_array_equal(pixels[:, :, 0] // 255, mask.bits)

    def test_buffer_size_mismatch(self, tmp_path):
        with pytest.raises(EncodeError):
            PillowPngCodec().encode(2, 2, bytes(15), tmp_path / "bad.png")

    def test_invalid_dimensions(self, tmp_path):
        with pytest.raises(EncodeError):
            PillowPngCodec().encode(0, 2, b"", tmp_path / "bad.png")

    def test_unwritable_target(self, tmp_path):
        """Pillow's OSError surfaces as EncodeError."""
        with pytest.raises(EncodeError):
            PillowPngCodec().encode(1, 1, bytes(4), tmp_path / "missing" / "x.png")
