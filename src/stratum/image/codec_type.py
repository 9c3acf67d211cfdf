from enum import IntEnum
class CodecType(IntEnum):
    """
    Enum class for the available mask image codecs.
    """
    PillowPng = 0
