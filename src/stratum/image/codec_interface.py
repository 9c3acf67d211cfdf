# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .codec_type import CodecType

DEFAULT_CODEC = CodecType.PillowPng
CHANNELS = 4


class IImageCodec(ABC):
    """
    Abstract Base Class for mask image codecs.
    Decouples the toolpath emitter from a specific imaging library.

    Contract: ``encode`` accepts a width, a height and a byte buffer of
    exactly width * height * 4 bytes (RGBA, each channel 0 or 255).
    """

    def __init__(self, **kwargs):
        pass

    @staticmethod
    def expected_size(width: int, height: int) -> int:
        return width * height * CHANNELS

    @abstractmethod
    def encode(self, width: int, height: int, buffer: bytes, path: Union[str, Path]) -> Path:
        """
        Encode the buffer and write it to ``path``.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.
            buffer: RGBA bytes, row-major.
            path: Target file.

        Returns:
            The written path.

        Raises:
            EncodeError: Size mismatch or internal codec failure.
        """
        pass

    @staticmethod
    def create(codec_type: Optional[CodecType] = DEFAULT_CODEC, **kwargs) -> "IImageCodec":
        """
        Factory method to create a codec instance based on the specified type.

        Args:
            codec_type: Type of the codec to initialize.
            **kwargs: Arguments passed to the codec constructor.

        Returns:
            An instance of a concrete IImageCodec implementation.
        """
        if codec_type is None:
            codec_type = DEFAULT_CODEC

        if codec_type == CodecType.PillowPng:
            from .pillow_codec import PillowPngCodec
            return PillowPngCodec(**kwargs)
        else:
            raise ValueError(f"Unsupported codec type: {codec_type}")
