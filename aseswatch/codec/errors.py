# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Errors raised while decoding or encoding ASE data.

Every error derives from ASEError, itself a ValueError, so callers can catch
malformed input broadly or one failure mode at a time. The first error
aborts the whole operation; no partial document is returned.
"""

from __future__ import annotations

from typing import Optional


class ASEError(ValueError):
    """Base class for all ASE codec errors."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)
        self.offset = offset


class InvalidFileFormat(ASEError):
    """The stream does not start with the ASEF signature."""

    def __init__(self, signature: bytes):
        super().__init__(f"not an ASE file: signature {signature!r}, expected b'ASEF'", 0)
        self.signature = signature


class UnsupportedVersion(ASEError):
    """The major version is not 1."""

    def __init__(self, major: int, minor: int):
        super().__init__(f"unsupported ASE version {major}.{minor}", 4)
        self.version = (major, minor)


class TruncatedInput(ASEError, EOFError):
    """The stream ended in the middle of a field."""

    def __init__(self, what: str, expected: int, got: int, offset: Optional[int] = None):
        super().__init__(
            f"truncated input reading {what}: expected {expected} bytes, got {got}",
            offset,
        )
        self.expected = expected
        self.got = got


class InvalidBlockType(ASEError):
    """A block carries an unrecognized type tag."""

    def __init__(self, block_type: int, offset: Optional[int] = None):
        super().__init__(f"invalid block type 0x{block_type:04X}", offset)
        self.block_type = block_type


class UnknownColorModel(ASEError):
    """A color entry names a color model other than RGB, CMYK, LAB or Gray."""

    def __init__(self, tag: bytes, offset: Optional[int] = None):
        super().__init__(f"unknown color model {tag!r}", offset)
        self.tag = tag


class UnknownColorType(ASEError):
    """A color entry carries a type tag other than global, spot or normal."""

    def __init__(self, tag: int, offset: Optional[int] = None):
        super().__init__(f"unknown color type {tag}", offset)
        self.tag = tag


class UnexpectedNesting(ASEError):
    """A group starts while another group is still open."""

    def __init__(self, open_group: str, new_group: str, offset: Optional[int] = None):
        super().__init__(
            f"group {new_group!r} starts inside group {open_group!r}; "
            "nested groups are not supported",
            offset,
        )


class UnmatchedGroupEnd(ASEError):
    """A group-end block appears with no group open."""

    def __init__(self, offset: Optional[int] = None):
        super().__init__("group end without a matching group start", offset)


class UnterminatedGroup(ASEError):
    """The block stream finished while a group was still open."""

    def __init__(self, group: str):
        super().__init__(f"group {group!r} is never closed")
        self.group = group


class InvalidText(ASEError):
    """A text field is not well-formed UTF-16, or cannot be written as one."""
