# -*- coding: utf-8 -*-
"""
Program writer.

Streams instructions to a temporary file beside the target and moves it into
place only after the whole stream has been consumed. Any error raised while
the stream is produced (parsing, encoding, ...) leaves the target untouched.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Union

from .instruction import Instruction
from ..errors import MeshIOError

logger = logging.getLogger(__name__)


def write_program(instructions: Iterable[Instruction], path: Union[str, Path]) -> int:
    """
    Write a program atomically.

    Args:
        instructions: Any (possibly lazy) instruction sequence.
        path: Target file.

    Returns:
        Number of lines written.

    Raises:
        MeshIOError: If the target directory cannot be written.
        Any exception raised by ``instructions`` propagates unchanged.
    """
    target = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    except OSError as e:
        raise MeshIOError(f"Cannot write program to {target}: {e}") from e

    count = 0
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for instruction in instructions:
                f.write(f"{instruction}\n")
                count += 1
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info("Wrote %d lines to %s", count, target)
    return count
