"""
uniqfile
========
Content-addressed, idempotent file writes: data is stored under
``<sha256-hex>.<extension>`` inside a caller-supplied directory, and only
written when no file of that name exists yet.

Package structure
-----------------
uniqfile/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── hashing.py        – digest, file-name and file-path derivation
├── options.py        – WriteOptions (encoding / mode / flag)
├── writer.py         – write_sync() and async write()
├── logging_setup.py  – colorlog console + optional file logging (CLI only)
├── cli.py            – argparse CLI (``python -m uniqfile``)
└── __main__.py

Quick start
-----------
    import uniqfile

    name = uniqfile.write_sync("out", "txt", "Hello, world!")
    name == uniqfile.write_sync("out", "txt", "Hello, world!")   # True, one file

    name = await uniqfile.write("out", "txt", b"\\x00\\x01")
"""

from .hashing import get_file_hash, get_file_name, get_file_path
from .options import WriteOptions
from .writer  import WriteResult, write, write_file, write_file_sync, write_sync

__all__ = [
    "get_file_hash",
    "get_file_name",
    "get_file_path",
    "WriteOptions",
    "WriteResult",
    "write",
    "write_sync",
    "write_file",
    "write_file_sync",
]
