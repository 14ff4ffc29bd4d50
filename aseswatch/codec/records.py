# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Block payload records: color entries and group names.

These functions handle only the payload of a block. The block type and
length prefix, and the pairing of group start and end blocks, belong to
the stream driver.

Color entry payload:
    text    name
    4 bytes model tag ("RGB ", "CMYK", "LAB ", "Gray")
    N x f32 channel values, N fixed by the model
    u16     color type (0 global, 1 spot, 2 normal)

Group start payload:
    text    name
"""

from __future__ import annotations

import io

from aseswatch.codec.errors import UnknownColorModel, UnknownColorType
from aseswatch.codec.primitives import ByteReader, ByteWriter
from aseswatch.schema import Color, ColorModel, ColorType


# =============================================================================
# Color Record
# =============================================================================


def read_color(reader: ByteReader) -> Color:
    """
    Decode one color entry payload.

    Reads exactly as many channel floats as the model defines, whatever
    the enclosing block claims its length to be.
    """
    name = reader.read_text("color name")

    offset = reader.tell()
    tag = reader.read_tag(4, "color model")
    try:
        model = ColorModel.from_tag(tag)
    except KeyError:
        raise UnknownColorModel(tag, offset) from None

    values = reader.read_f32_array(model.channel_count, f"{model.name} values")

    offset = reader.tell()
    type_tag = reader.read_u16("color type")
    try:
        color_type = ColorType(type_tag)
    except ValueError:
        raise UnknownColorType(type_tag, offset) from None

    return Color(name=name, model=model, values=values, type=color_type)


def write_color(writer: ByteWriter, color: Color) -> None:
    """Encode one color entry payload."""
    writer.write_text(color.name)
    writer.write_tag(color.model.tag)
    writer.write_f32_array(color.values)
    writer.write_u16(color.type.value)


def encode_color(color: Color) -> bytes:
    """Payload bytes of a color entry block."""
    buf = io.BytesIO()
    write_color(ByteWriter(buf), color)
    return buf.getvalue()


# =============================================================================
# Group Record
# =============================================================================


def read_group_name(reader: ByteReader) -> str:
    """Decode a group start payload (the group's name)."""
    return reader.read_text("group name")


def write_group_name(writer: ByteWriter, name: str) -> None:
    """Encode a group start payload."""
    writer.write_text(name)


def encode_group_name(name: str) -> bytes:
    """Payload bytes of a group start block."""
    buf = io.BytesIO()
    write_group_name(ByteWriter(buf), name)
    return buf.getvalue()
