# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Binary codec for Adobe Swatch Exchange files.

Layers, bottom up:

1. primitives -- Big-endian integers, float32 arrays and UTF-16 text
2. records -- Color entry and group name payloads
3. stream -- Header, block dispatch and group framing

Decoding stops at the first error; nothing is skipped or repaired.
"""

from aseswatch.codec.errors import (
    ASEError,
    InvalidBlockType,
    InvalidFileFormat,
    InvalidText,
    TruncatedInput,
    UnexpectedNesting,
    UnknownColorModel,
    UnknownColorType,
    UnmatchedGroupEnd,
    UnsupportedVersion,
    UnterminatedGroup,
)
from aseswatch.codec.stream import (
    BlockType,
    decode,
    decode_file,
    encode,
    encode_file,
)

__all__ = [
    # Operations
    "decode",
    "decode_file",
    "encode",
    "encode_file",
    "BlockType",
    # Errors
    "ASEError",
    "InvalidFileFormat",
    "UnsupportedVersion",
    "TruncatedInput",
    "InvalidBlockType",
    "UnknownColorModel",
    "UnknownColorType",
    "UnexpectedNesting",
    "UnmatchedGroupEnd",
    "UnterminatedGroup",
    "InvalidText",
]
