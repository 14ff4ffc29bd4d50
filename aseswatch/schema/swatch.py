# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Swatch document model for Adobe Swatch Exchange files.

Design principles:
- Immutable: All types are frozen dataclasses
- Self-consistent: A Color always holds exactly as many channel values as
  its model requires, so an encoder never sees a mismatched color
- Wire-faithful: Channel values are stored at float32 precision, the
  precision of the file format, so decode(encode(doc)) == doc

Layout of a document:
    Document
    ├── colors   top-level colors (outside any group)
    └── groups   named groups, each holding its own colors (no nesting)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional

import numpy as np


# =============================================================================
# Format Constants
# =============================================================================

FORMAT_SIGNATURE = "ASEF"
FORMAT_VERSION = (1, 0)


# =============================================================================
# Color Models and Types
# =============================================================================


class ColorModel(Enum):
    """
    Color space a color's channel values are expressed in.

    The enum value is the 4-byte ASCII tag written to the file.
    """
    RGB = b"RGB "
    CMYK = b"CMYK"
    LAB = b"LAB "
    GRAY = b"Gray"

    @property
    def tag(self) -> bytes:
        return self.value

    @property
    def channel_count(self) -> int:
        """Number of float channels a color of this model carries."""
        return _CHANNEL_COUNTS[self]

    @classmethod
    def from_tag(cls, tag: bytes) -> ColorModel:
        """
        Look up a model by its wire tag.

        Matching ignores case and padding spaces, so b"GRAY" and b"RGB"
        resolve the same as the canonical tags.

        Raises:
            KeyError: If the tag names no known model.
        """
        key = bytes(tag).rstrip(b" \x00").upper()
        for model in cls:
            if model.value.rstrip(b" ").upper() == key:
                return model
        raise KeyError(tag)


_CHANNEL_COUNTS = {
    ColorModel.RGB: 3,
    ColorModel.CMYK: 4,
    ColorModel.LAB: 3,
    ColorModel.GRAY: 1,
}


class ColorType(Enum):
    """How a color behaves when referenced by a document."""
    GLOBAL = 0
    SPOT = 1
    NORMAL = 2


def _as_float32_tuple(values: Iterable[float]) -> tuple[float, ...]:
    """Round values to float32, the precision they have on the wire."""
    arr = np.asarray(list(values), dtype=np.float32)
    return tuple(float(v) for v in arr)


# =============================================================================
# Core Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A named swatch color.

    Attributes:
        name: Display name of the swatch
        model: Color space of ``values``
        values: Channel values, exactly ``model.channel_count`` of them.
            RGB, CMYK and Gray channels are 0-1. LAB stores L as 0-1 and
            a/b in their natural -128..127 range.
        type: Global, spot or normal (process) color

    Usage:
        red = Color("Red", ColorModel.RGB, (1.0, 0.0, 0.0), ColorType.GLOBAL)
    """
    name: str
    model: ColorModel
    values: tuple[float, ...]
    type: ColorType = ColorType.NORMAL

    def __post_init__(self) -> None:
        """Coerce values to float32 and check them against the model."""
        if not isinstance(self.model, ColorModel):
            raise TypeError(f"model must be a ColorModel, got {self.model!r}")
        if not isinstance(self.type, ColorType):
            raise TypeError(f"type must be a ColorType, got {self.type!r}")
        values = _as_float32_tuple(self.values)
        if len(values) != self.model.channel_count:
            raise ValueError(
                f"{self.model.name} color needs {self.model.channel_count} "
                f"values, got {len(values)}"
            )
        object.__setattr__(self, "values", values)

    def to_srgb(self) -> tuple[float, float, float]:
        """Approximate sRGB rendering of this color, channels in [0, 1]."""
        from aseswatch.colorspace import model_to_srgb
        r, g, b = model_to_srgb(self.model, self.values)
        return float(r), float(g), float(b)

    @property
    def hex(self) -> str:
        """
        Approximate hex preview like "#FF0000".

        CMYK and LAB are converted without an ICC profile, so this is a
        preview, not a color-managed value.
        """
        from aseswatch.colorspace import srgb_to_hex
        return srgb_to_hex(self.to_srgb())

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "model": self.model.name,
            "values": list(self.values),
            "type": self.type.name.lower(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            model=ColorModel[data["model"].upper()],
            values=tuple(data["values"]),
            type=ColorType[data.get("type", "normal").upper()],
        )


@dataclass(frozen=True, slots=True)
class Group:
    """
    A named collection of colors.

    Groups never contain other groups.
    """
    name: str
    colors: tuple[Color, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "colors": [c.to_dict() for c in self.colors],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Group:
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            colors=tuple(Color.from_dict(c) for c in data.get("colors", ())),
        )


# =============================================================================
# Top-Level Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document:
    """
    Complete contents of one ASE file.

    Attributes:
        colors: Top-level colors, in file order
        groups: Groups, in file order
        version_info: (major, minor) version read from the header.
            Encoding always writes FORMAT_VERSION.
        num_blocks: Block count read from the header, or None for a
            document built in memory. Informational only: it does not take
            part in equality and is never written back. See ``block_count``.

    Usage:
        doc = Document(
            colors=(Color("Red", ColorModel.RGB, (1, 0, 0), ColorType.GLOBAL),),
            groups=(Group("G1", (Color("Blue", ColorModel.RGB, (0, 0, 1)),)),),
        )
        doc.block_count  # 4
    """
    colors: tuple[Color, ...] = ()
    groups: tuple[Group, ...] = ()
    version_info: tuple[int, int] = FORMAT_VERSION
    num_blocks: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "groups", tuple(self.groups))
        object.__setattr__(self, "version_info", tuple(self.version_info))

    @property
    def signature(self) -> str:
        """File signature as a display string."""
        return FORMAT_SIGNATURE

    @property
    def version(self) -> str:
        """File version as a display string, e.g. "1.0"."""
        major, minor = self.version_info
        return f"{major}.{minor}"

    @property
    def block_count(self) -> int:
        """
        Number of blocks this document encodes to.

        One per color, plus a start and an end block per group.
        """
        grouped = sum(len(g.colors) for g in self.groups)
        return len(self.colors) + 2 * len(self.groups) + grouped

    def iter_colors(self) -> Iterator[Color]:
        """Yield every color, top-level first, then group by group."""
        yield from self.colors
        for group in self.groups:
            yield from group.colors

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "signature": self.signature,
            "version": self.version,
            "colors": [c.to_dict() for c in self.colors],
            "groups": [g.to_dict() for g in self.groups],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Document:
        """Deserialize from dictionary."""
        version = data.get("version")
        if version is None:
            version_info = FORMAT_VERSION
        else:
            major, _, minor = str(version).partition(".")
            version_info = (int(major), int(minor or 0))
        return cls(
            colors=tuple(Color.from_dict(c) for c in data.get("colors", ())),
            groups=tuple(Group.from_dict(g) for g in data.get("groups", ())),
            version_info=version_info,
        )

    @classmethod
    def from_json(cls, json_str: str) -> Document:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
