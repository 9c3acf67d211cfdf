# -*- coding: utf-8 -*-
"""
PNG mask codec backed by Pillow.
"""
from pathlib import Path
from typing import Union

from PIL import Image

from .codec_interface import IImageCodec
from ..errors import EncodeError


class PillowPngCodec(IImageCodec):
    """Writes RGBA mask buffers as PNG files."""

    def __init__(self, compress_level: int = 6, **kwargs):
        super().__init__(**kwargs)
        self.compress_level = compress_level

    def encode(self, width: int, height: int, buffer: bytes, path: Union[str, Path]) -> Path:
        if width <= 0 or height <= 0:
            raise EncodeError(f"invalid mask dimensions {width}x{height}")
        expected = self.expected_size(width, height)
        if len(buffer) != expected:
            raise EncodeError(
                f"mask buffer has {len(buffer)} bytes, expected {expected} for {width}x{height} RGBA"
            )

        target = Path(path)
        try:
            img = Image.frombytes("RGBA", (width, height), bytes(buffer))
            img.save(target, format="PNG", compress_level=self.compress_level)
        except (OSError, ValueError) as e:
            raise EncodeError(f"failed to encode mask {target}: {e}") from e
        return target
