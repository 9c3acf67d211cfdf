# -*- coding: utf-8 -*-
"""
Stratum Mask Codec Package
==========================

Turns rasterized layer masks into image files for mask-projection printers.

- `codec_interface`: abstract base `IImageCodec` and its `create()` factory.
- `pillow_codec`: `PillowPngCodec`, PNG output through Pillow.
- `codec_type`: `CodecType` enum selecting the backend.

.. code-block:: python

    from stratum.image import IImageCodec, CodecType

    codec = IImageCodec.create(CodecType.PillowPng)
    codec.encode(width, height, rgba_bytes, "00000.png")
"""

from .codec_type import CodecType
from .codec_interface import IImageCodec
from .pillow_codec import PillowPngCodec

__all__ = ["CodecType", "IImageCodec", "PillowPngCodec"]
