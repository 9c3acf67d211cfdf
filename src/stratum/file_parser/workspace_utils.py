import hashlib
from pathlib import Path
from typing import Union

from ..errors import MeshIOError


def sha256_of_file(filepath: Union[str, Path]) -> str:
    sha256_hash = hashlib.sha256()
    try:
        with open(filepath, "rb") as f:
            # read in chunks, large meshes do not fit comfortably in memory twice
            for chunk in iter(lambda: f.read(4096), b""):
                sha256_hash.update(chunk)
    except OSError as e:
        raise MeshIOError(f"Cannot read {filepath}: {e}") from e
    return sha256_hash.hexdigest()


def ensure_directory(directory: Union[str, Path]) -> Path:
    """
    Create ``directory`` (and parents) if needed and return it.

    Raises:
        MeshIOError: If the path exists as a file or cannot be created.
    """
    path = Path(directory)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MeshIOError(f"Cannot create output directory {path}: {e}") from e
    return path
