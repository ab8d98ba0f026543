"""
Content hashing and name/path derivation.

The three helpers layer on each other::

    data → get_file_hash → digest
         → get_file_name → "<digest>.<ext>"
         → get_file_path → absolute path inside the target directory

All of them are pure: nothing here touches the filesystem.
"""

import hashlib
import os
from typing import Union

from .config import EXTENSION_SEPARATOR, HASH_ALGORITHM, HASH_TEXT_ENCODING

Data = Union[str, bytes, bytearray, memoryview]


def to_hash_bytes(data: Data) -> bytes:
    """Return the byte form of *data* that is fed to the hash function."""
    if isinstance(data, str):
        return data.encode(HASH_TEXT_ENCODING)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"data must be str or bytes-like, not {type(data).__name__}"
    )


def get_file_hash(data: Data) -> str:
    """Return the lowercase SHA-256 hex digest of *data*."""
    return hashlib.new(HASH_ALGORITHM, to_hash_bytes(data)).hexdigest()


def get_file_name(extension: str, data: Data) -> str:
    """Return ``<digest><sep><extension>`` for *data*.

    A separator is prepended to *extension* unless it already starts with
    one, so ``"txt"`` and ``".txt"`` give the same name.  An empty
    extension yields ``"<digest>."``.
    """
    connector = "" if extension.startswith(EXTENSION_SEPARATOR) else EXTENSION_SEPARATOR
    return f"{get_file_hash(data)}{connector}{extension}"


def get_file_path(directory: Union[str, os.PathLike], extension: str, data: Data) -> str:
    """Resolve the content-derived file name against *directory*.

    Relative directories resolve against the current working directory.
    The result is normalised but symlinks are not followed, and the
    directory is not required to exist.
    """
    file_name = get_file_name(extension, data)
    return os.path.abspath(os.path.join(os.fspath(directory), file_name))
