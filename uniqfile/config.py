"""Configuration constants for the uniqfile content-addressed writer."""

import os

HASH_ALGORITHM = "sha256"
# str data is always hashed as UTF-8, whatever encoding it is written with
HASH_TEXT_ENCODING = "utf-8"
EXTENSION_SEPARATOR = "."

DEFAULT_ENCODING = "utf8"
DEFAULT_MODE     = 0o666   # umask still applies on creation
DEFAULT_FLAG     = "w"

# Node-style open flags → os.open() flags.  O_CREAT is implied by every
# entry; "x" makes the create exclusive.
_WRITE_FLAGS: dict[str, int] = {
    "w":   os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "wx":  os.O_WRONLY | os.O_CREAT | os.O_TRUNC | os.O_EXCL,
    "xw":  os.O_WRONLY | os.O_CREAT | os.O_TRUNC | os.O_EXCL,
    "w+":  os.O_RDWR | os.O_CREAT | os.O_TRUNC,
    "wx+": os.O_RDWR | os.O_CREAT | os.O_TRUNC | os.O_EXCL,
    "xw+": os.O_RDWR | os.O_CREAT | os.O_TRUNC | os.O_EXCL,
    "a":   os.O_WRONLY | os.O_CREAT | os.O_APPEND,
    "ax":  os.O_WRONLY | os.O_CREAT | os.O_APPEND | os.O_EXCL,
    "xa":  os.O_WRONLY | os.O_CREAT | os.O_APPEND | os.O_EXCL,
    "a+":  os.O_RDWR | os.O_CREAT | os.O_APPEND,
    "ax+": os.O_RDWR | os.O_CREAT | os.O_APPEND | os.O_EXCL,
    "xa+": os.O_RDWR | os.O_CREAT | os.O_APPEND | os.O_EXCL,
}
# Windows needs O_BINARY or "\n" bytes get translated on write
_O_BINARY = getattr(os, "O_BINARY", 0)

# CLI defaults – can also be supplied via UNIQFILE_OUTPUT / UNIQFILE_ENCODING
DEFAULT_OUTPUT = os.environ.get("UNIQFILE_OUTPUT", ".")
DEFAULT_CLI_ENCODING = os.environ.get("UNIQFILE_ENCODING", DEFAULT_ENCODING)
# Extension used for stdin or suffix-less sources when --ext is not given
FALLBACK_EXTENSION = "bin"
