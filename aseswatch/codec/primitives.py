# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Big-endian primitives of the ASE wire format.

Reads pull exactly as many bytes as a field needs from the underlying
binary stream, so files are decoded without loading them whole.

Field layouts:
- integers: 16 or 32 bits, big-endian, signed or unsigned
- floats: IEEE-754 float32, big-endian
- text: u16 count of UTF-16 code units (null terminator included),
  followed by that many big-endian code units
"""

from __future__ import annotations

import struct
from typing import BinaryIO, Sequence

import numpy as np

from aseswatch.codec.errors import InvalidText, TruncatedInput


_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")
_I32 = struct.Struct(">i")

_F32 = np.dtype(">f4")

_TERMINATOR = "\x00"
MAX_TEXT_UNITS = 0xFFFF


class ByteReader:
    """Sequential big-endian reader over a binary stream."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._offset = 0

    def tell(self) -> int:
        """Bytes consumed through this reader so far."""
        return self._offset

    def read_tag(self, n: int, what: str = "tag") -> bytes:
        """
        Read exactly ``n`` raw bytes.

        Short reads from raw streams (pipes, sockets, unbuffered files) are
        retried until ``n`` bytes arrive or the stream reports EOF.
        """
        chunks = []
        got = 0
        while got < n:
            chunk = self._stream.read(n - got)
            if chunk is None:
                raise BlockingIOError(f"stream has no data ready while reading {what}")
            if not chunk:
                raise TruncatedInput(what, n, got, self._offset)
            chunks.append(chunk)
            got += len(chunk)
        self._offset += n
        return b"".join(chunks)

    def read_u16(self, what: str = "u16") -> int:
        return _U16.unpack(self.read_tag(2, what))[0]

    def read_i16(self, what: str = "i16") -> int:
        return _I16.unpack(self.read_tag(2, what))[0]

    def read_u32(self, what: str = "u32") -> int:
        return _U32.unpack(self.read_tag(4, what))[0]

    def read_i32(self, what: str = "i32") -> int:
        return _I32.unpack(self.read_tag(4, what))[0]

    def read_f32_array(self, count: int, what: str = "float values") -> tuple[float, ...]:
        """Read ``count`` float32 values."""
        raw = self.read_tag(4 * count, what)
        return tuple(float(v) for v in np.frombuffer(raw, dtype=_F32))

    def read_text(self, what: str = "text") -> str:
        """
        Read a length-prefixed UTF-16BE string.

        The trailing null terminator is counted on the wire but dropped from
        the returned value.
        """
        start = self._offset
        units = self.read_u16(f"{what} length")
        raw = self.read_tag(2 * units, what)
        try:
            text = raw.decode("utf-16-be")
        except UnicodeDecodeError as e:
            raise InvalidText(f"malformed UTF-16 in {what}: {e.reason}", start) from e
        if text.endswith(_TERMINATOR):
            text = text[:-1]
        return text


class ByteWriter:
    """Sequential big-endian writer over a binary stream."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._offset = 0

    def tell(self) -> int:
        """Bytes written through this writer so far."""
        return self._offset

    def write_tag(self, data: bytes) -> None:
        """
        Write all of ``data``, retrying partial writes on raw streams.

        Sinks whose ``write`` returns None are taken to have written
        everything.
        """
        view = memoryview(data)
        while view:
            written = self._stream.write(view)
            if written is None:
                break
            if written == 0:
                raise BlockingIOError("stream accepted no bytes")
            view = view[written:]
        self._offset += len(data)

    def write_u16(self, value: int) -> None:
        self.write_tag(_U16.pack(value))

    def write_i16(self, value: int) -> None:
        self.write_tag(_I16.pack(value))

    def write_u32(self, value: int) -> None:
        self.write_tag(_U32.pack(value))

    def write_i32(self, value: int) -> None:
        self.write_tag(_I32.pack(value))

    def write_f32_array(self, values: Sequence[float]) -> None:
        self.write_tag(np.asarray(values, dtype=_F32).tobytes())

    def write_text(self, text: str) -> None:
        """Write ``text`` as a null-terminated, length-prefixed UTF-16BE string."""
        self.write_tag(encode_text(text))


def encode_text(text: str) -> bytes:
    """Wire bytes of a text field, length prefix included."""
    try:
        raw = (text + _TERMINATOR).encode("utf-16-be")
    except UnicodeEncodeError as e:
        raise InvalidText(f"cannot encode {text!r} as UTF-16: {e.reason}") from e
    units = len(raw) // 2
    if units > MAX_TEXT_UNITS:
        raise InvalidText(
            f"text of {units} UTF-16 code units exceeds the {MAX_TEXT_UNITS} limit"
        )
    return _U16.pack(units) + raw
