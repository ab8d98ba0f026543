"""
Idempotent content-addressed writes.

Both variants follow the same steps:

1. derive the path from the data (see :mod:`uniqfile.hashing`);
2. stat the path – if it exists, return the name without touching it;
3. otherwise write the data and return the name.

An ``OSError`` from the stat is read as "absent" so that the write is still
attempted; errors from the write itself propagate unchanged.  Concurrent
writes of identical data to the same directory are not coordinated: both
may see "absent" and both write the same bytes.
"""

import asyncio
import os
from typing import NamedTuple, Union

from .hashing import Data, get_file_path
from .options import OptionsArg, WriteOptions


class WriteResult(NamedTuple):
    file_name: str
    path: str
    written: bool


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def _write_file(path: str, payload: bytes, options: WriteOptions) -> None:
    fd = os.open(path, options.open_flags(), options.mode)
    with os.fdopen(fd, "wb") as fh:
        fh.write(payload)


def _prepare(directory, extension: str, data: Data, options: OptionsArg):
    opts = WriteOptions.of(options)
    path = get_file_path(directory, extension, data)
    return path, os.path.basename(path), opts


def write_file_sync(
    directory: Union[str, os.PathLike],
    extension: str,
    data: Data,
    options: OptionsArg = None,
) -> WriteResult:
    """Blocking write that also reports whether a file was created."""
    path, file_name, opts = _prepare(directory, extension, data, options)
    if _exists(path):
        return WriteResult(file_name, path, False)
    _write_file(path, opts.encode(data), opts)
    return WriteResult(file_name, path, True)


async def write_file(
    directory: Union[str, os.PathLike],
    extension: str,
    data: Data,
    options: OptionsArg = None,
) -> WriteResult:
    """Non-blocking counterpart of :func:`write_file_sync`.

    The stat and the write each run in a worker thread via
    :func:`asyncio.to_thread`; the write is only started once the stat
    has completed.
    """
    path, file_name, opts = _prepare(directory, extension, data, options)
    if await asyncio.to_thread(_exists, path):
        return WriteResult(file_name, path, False)
    payload = opts.encode(data)
    await asyncio.to_thread(_write_file, path, payload, opts)
    return WriteResult(file_name, path, True)


def write_sync(
    directory: Union[str, os.PathLike],
    extension: str,
    data: Data,
    options: OptionsArg = None,
) -> str:
    """Write *data* to a unique file in *directory*.

    Calling multiple times with the exact same data results in the same
    file name and a single file on disk.

    Parameters
    ----------
    directory : str | os.PathLike
        Existing output directory (relative paths use the current working
        directory).
    extension : str
        File extension, with or without the leading ``"."``.
    data : str | bytes-like
        The file's content.
    options : WriteOptions | str | None
        Write options, or just an encoding name.

    Returns
    -------
    str
        File name of the (possibly pre-existing) file.

    Raises
    ------
    OSError
        When the file cannot be created, e.g. ``FileNotFoundError`` if the
        directory does not exist.
    """
    return write_file_sync(directory, extension, data, options).file_name


async def write(
    directory: Union[str, os.PathLike],
    extension: str,
    data: Data,
    options: OptionsArg = None,
) -> str:
    """Asynchronous :func:`write_sync`; resolves with the file name."""
    result = await write_file(directory, extension, data, options)
    return result.file_name
