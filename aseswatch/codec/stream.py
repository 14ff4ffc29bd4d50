# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Block stream driver: whole-file decode and encode.

File layout (big-endian):
    4 bytes  signature "ASEF"
    i16 x 2  version major, minor
    i32      block count
    blocks   u16 type, u32 payload length, payload

Groups are framed by a start block carrying the name and an empty end
block. Color entries between the two belong to the group.

Encoding writes blocks in a fixed order: all top-level colors, then each
group with its colors. A file that interleaves top-level colors with
groups therefore re-encodes in a different (but equivalent) order.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from typing import BinaryIO, Optional, Union

from aseswatch.codec.errors import (
    InvalidBlockType,
    InvalidFileFormat,
    UnexpectedNesting,
    UnmatchedGroupEnd,
    UnsupportedVersion,
    UnterminatedGroup,
)
from aseswatch.codec.primitives import ByteReader, ByteWriter
from aseswatch.codec.records import (
    encode_color,
    encode_group_name,
    read_color,
    read_group_name,
)
from aseswatch.schema import FORMAT_SIGNATURE, FORMAT_VERSION, Color, Document, Group

logger = logging.getLogger(__name__)


# =============================================================================
# Format Constants
# =============================================================================

SIGNATURE = FORMAT_SIGNATURE.encode("ascii")
VERSION = FORMAT_VERSION
SUPPORTED_MAJOR_VERSION = 1


class BlockType(IntEnum):
    """Block type tags."""
    COLOR_ENTRY = 0x0001
    GROUP_START = 0xC001
    GROUP_END = 0xC002


@dataclass
class _GroupAccumulator:
    """The group currently open during decode."""
    name: str
    colors: list[Color] = field(default_factory=list)

    def close(self) -> Group:
        return Group(name=self.name, colors=tuple(self.colors))


# =============================================================================
# Decode
# =============================================================================


def decode(stream: BinaryIO) -> Document:
    """
    Decode an ASE document from a binary stream.

    Args:
        stream: Readable binary stream positioned at the signature.

    Returns:
        The decoded Document. ``num_blocks`` holds the block count from the
        header.

    Raises:
        InvalidFileFormat: The signature is not "ASEF".
        UnsupportedVersion: The major version is not 1.
        TruncatedInput: The stream ends mid-field.
        InvalidBlockType: A block has an unknown type tag.
        UnknownColorModel, UnknownColorType: A color entry is malformed.
        UnexpectedNesting: A group starts inside another group.
        UnmatchedGroupEnd: A group ends without having started.
        UnterminatedGroup: The last group is never closed.
        InvalidText: A name is not valid UTF-16.
    """
    reader = ByteReader(stream)

    signature = reader.read_tag(4, "signature")
    if signature != SIGNATURE:
        raise InvalidFileFormat(signature)

    major = reader.read_i16("version major")
    minor = reader.read_i16("version minor")
    if major != SUPPORTED_MAJOR_VERSION:
        raise UnsupportedVersion(major, minor)
    if minor != VERSION[1]:
        logger.warning("ASE minor version %d.%d is untested, decoding anyway", major, minor)

    num_blocks = reader.read_i32("block count")
    logger.debug("ASE %d.%d header declares %d blocks", major, minor, num_blocks)

    colors: list[Color] = []
    groups: list[Group] = []
    current: Optional[_GroupAccumulator] = None

    for index in range(num_blocks):
        block_offset = reader.tell()
        block_type = reader.read_u16(f"block {index} type")
        block_length = reader.read_u32(f"block {index} length")
        payload_start = reader.tell()

        if block_type == BlockType.COLOR_ENTRY:
            color = read_color(reader)
            if current is not None:
                current.colors.append(color)
            else:
                colors.append(color)

        elif block_type == BlockType.GROUP_START:
            name = read_group_name(reader)
            if current is not None:
                raise UnexpectedNesting(current.name, name, block_offset)
            current = _GroupAccumulator(name)
            logger.debug("group %r opened at block %d", name, index)

        elif block_type == BlockType.GROUP_END:
            if current is None:
                raise UnmatchedGroupEnd(block_offset)
            groups.append(current.close())
            logger.debug(
                "group %r closed with %d colors", current.name, len(current.colors)
            )
            current = None

        else:
            raise InvalidBlockType(block_type, block_offset)

        consumed = reader.tell() - payload_start
        if consumed != block_length:
            logger.debug(
                "block %d declares %d payload bytes, decoded %d",
                index, block_length, consumed,
            )

    if current is not None:
        raise UnterminatedGroup(current.name)

    return Document(
        colors=tuple(colors),
        groups=tuple(groups),
        version_info=(major, minor),
        num_blocks=num_blocks,
    )


def decode_file(path: Union[str, PathLike]) -> Document:
    """Decode the ASE file at ``path``."""
    with open(path, "rb") as f:
        return decode(f)


# =============================================================================
# Encode
# =============================================================================


def encode(document: Document, stream: BinaryIO) -> None:
    """
    Encode a Document to a binary stream.

    The header always carries version 1.0 and a block count computed from
    the document's contents; ``document.num_blocks`` is ignored.

    Args:
        document: The document to write.
        stream: Writable binary stream.

    Raises:
        InvalidText: A name cannot be written as UTF-16 or is too long.
    """
    writer = ByteWriter(stream)

    writer.write_tag(SIGNATURE)
    writer.write_i16(VERSION[0])
    writer.write_i16(VERSION[1])
    writer.write_i32(document.block_count)

    for color in document.colors:
        _write_block(writer, BlockType.COLOR_ENTRY, encode_color(color))

    for group in document.groups:
        _write_block(writer, BlockType.GROUP_START, encode_group_name(group.name))
        for color in group.colors:
            _write_block(writer, BlockType.COLOR_ENTRY, encode_color(color))
        _write_block(writer, BlockType.GROUP_END, b"")

    logger.debug("encoded %d blocks, %d bytes", document.block_count, writer.tell())


def encode_file(document: Document, path: Union[str, PathLike]) -> None:
    """
    Encode ``document`` to an ASE file at ``path``.

    The document is encoded in memory first, so a failed encode leaves any
    existing file at ``path`` untouched.
    """
    buf = io.BytesIO()
    encode(document, buf)
    with open(path, "wb") as f:
        f.write(buf.getvalue())


def _write_block(writer: ByteWriter, block_type: BlockType, payload: bytes) -> None:
    writer.write_u16(block_type)
    writer.write_u32(len(payload))
    writer.write_tag(payload)
