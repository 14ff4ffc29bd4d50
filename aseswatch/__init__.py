# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Aseswatch -- Adobe Swatch Exchange (ASE) reader and writer.

Decodes .ase palettes into immutable Python objects and encodes them back.

Quick start::

    from aseswatch import decode_file, encode_file

    doc = decode_file("palette.ase")
    for color in doc.colors:
        print(color.name, color.model.name, color.values, color.hex)
    encode_file(doc, "copy.ase")
"""

from __future__ import annotations

__version__ = "1.0.0"

from aseswatch.codec import (
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
    decode,
    decode_file,
    encode,
    encode_file,
)
from aseswatch.schema import (
    Color,
    ColorModel,
    ColorType,
    Document,
    Group,
)

__all__ = [
    # Core API
    "decode",
    "decode_file",
    "encode",
    "encode_file",
    # Types
    "Document",
    "Group",
    "Color",
    "ColorModel",
    "ColorType",
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
    # Version
    "__version__",
]
