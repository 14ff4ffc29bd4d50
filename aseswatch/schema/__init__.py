# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Schema definitions for swatch documents.

All types in this module are immutable (frozen dataclasses).
A decoded document is a snapshot of the file; build a new one to change it.
"""

from aseswatch.schema.swatch import (
    FORMAT_SIGNATURE,
    FORMAT_VERSION,
    Color,
    ColorModel,
    ColorType,
    Document,
    Group,
)

__all__ = [
    # Format constants
    "FORMAT_SIGNATURE",
    "FORMAT_VERSION",
    # Enumerations
    "ColorModel",
    "ColorType",
    # Core types
    "Color",
    "Group",
    # Top-level container
    "Document",
]
