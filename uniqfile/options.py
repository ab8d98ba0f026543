"""Write options forwarded to the underlying file write."""

from dataclasses import dataclass
from typing import Optional, Union

from .config import DEFAULT_ENCODING, DEFAULT_FLAG, DEFAULT_MODE, _O_BINARY, _WRITE_FLAGS


@dataclass(frozen=True)
class WriteOptions:
    """How a new file is written.

    Attributes
    ----------
    encoding : str
        Codec used to encode ``str`` data (default ``"utf8"``).  Ignored for
        bytes-like data.
    mode : int
        Permission bits for a newly created file (default ``0o666``,
        subject to the process umask).
    flag : str
        Node-style open flag (default ``"w"``: create or truncate).  See
        ``config._WRITE_FLAGS`` for the accepted values.
    """

    encoding: str = DEFAULT_ENCODING
    mode: int = DEFAULT_MODE
    flag: str = DEFAULT_FLAG

    @classmethod
    def of(cls, value: Union["WriteOptions", str, None]) -> "WriteOptions":
        """Coerce *value*: ``None`` → defaults, a string → encoding only."""
        if value is None:
            return cls()
        if isinstance(value, WriteOptions):
            return value
        if isinstance(value, str):
            return cls(encoding=value)
        raise TypeError(
            f"options must be WriteOptions, str or None, not {type(value).__name__}"
        )

    def open_flags(self) -> int:
        """Translate :attr:`flag` into ``os.open`` flags."""
        try:
            flags = _WRITE_FLAGS[self.flag]
        except KeyError:
            raise ValueError(f"unsupported write flag: {self.flag!r}") from None
        return flags | _O_BINARY

    def encode(self, data) -> bytes:
        """Return the bytes to put on disk for *data*."""
        if isinstance(data, str):
            return data.encode(self.encoding)
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise TypeError(
            f"data must be str or bytes-like, not {type(data).__name__}"
        )


OptionsArg = Optional[Union[WriteOptions, str]]
