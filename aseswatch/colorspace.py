# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""
Preview conversions from swatch color models to sRGB.

Conversion chains:
- RGB: used as-is (ASE stores sRGB channels in [0, 1])
- Gray: single level replicated to three channels
- CMYK: naive subtractive model, no ink profile
- LAB: CIELAB (D50) → XYZ (D50) → Bradford-adapted linear sRGB → sRGB

References:
- CIELAB: http://www.brucelindbloom.com/Eqn_Lab_to_XYZ.html
- Bradford-adapted matrix: http://www.brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html

These are approximations for display. They are never used by the codec,
which round-trips the stored channel values untouched.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from aseswatch.schema.swatch import ColorModel


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# CIELAB (D50) → sRGB
# =============================================================================

# D50 reference white, the illuminant Adobe applications use for Lab
_D50_WHITE = np.array([0.96422, 1.0, 0.82521], dtype=np.float64)

# XYZ (D50) to linear sRGB, Bradford chromatic adaptation
_XYZ_D50_TO_LINEAR_SRGB = np.array([
    [3.1338561, -1.6168667, -0.4906146],
    [-0.9787684, 1.9161415, 0.0334540],
    [0.0719453, -0.2289914, 1.4052427],
], dtype=np.float64)

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELAB to XYZ relative to the D50 white point.

    Args:
        lab: Array of shape (..., 3) with L in [0, 100] and a/b unbounded.

    Returns:
        Array of shape (..., 3) with XYZ, Y in [0, 1].
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    xr = np.where(fx ** 3 > _EPSILON, fx ** 3, (116.0 * fx - 16.0) / _KAPPA)
    yr = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    zr = np.where(fz ** 3 > _EPSILON, fz ** 3, (116.0 * fz - 16.0) / _KAPPA)

    return np.stack([xr, yr, zr], axis=-1) * _D50_WHITE


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIELAB (D50, L in [0, 100]) to sRGB [0, 1]."""
    xyz = lab_to_xyz(lab)
    linear = np.einsum('...j,ij->...i', xyz, _XYZ_D50_TO_LINEAR_SRGB)
    return linear_to_srgb(linear)


# =============================================================================
# CMYK / Gray → sRGB
# =============================================================================


def cmyk_to_srgb(cmyk: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CMYK [0,1] to sRGB [0,1] without an ink profile.

    Args:
        cmyk: Array of shape (..., 4).
    """
    cmyk = np.clip(np.asarray(cmyk, dtype=np.float64), 0.0, 1.0)
    cmy, k = cmyk[..., :3], cmyk[..., 3:]
    return (1.0 - cmy) * (1.0 - k)


def gray_to_srgb(gray: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert a gray level [0,1] (0 = black) to sRGB [0,1].

    Treated as an additive DeviceGray level, red = green = blue = gray
    (PostScript Language Reference Manual, section 6.2.1).
    """
    gray = np.clip(np.asarray(gray, dtype=np.float64), 0.0, 1.0)
    return np.repeat(gray[..., :1], 3, axis=-1)


# =============================================================================
# Swatch helpers
# =============================================================================


def model_to_srgb(model: ColorModel, values: Sequence[float]) -> NDArray[np.float64]:
    """
    Convert the stored channel values of a swatch to sRGB.

    ASE keeps LAB lightness in [0, 1]; it is scaled to [0, 100] here.

    Returns:
        Array of shape (3,) with sRGB values in [0, 1].
    """
    v = np.asarray(values, dtype=np.float64)
    if model is ColorModel.RGB:
        return np.clip(v, 0.0, 1.0)
    if model is ColorModel.GRAY:
        return gray_to_srgb(v)
    if model is ColorModel.CMYK:
        return cmyk_to_srgb(v)
    if model is ColorModel.LAB:
        return lab_to_srgb(v * np.array([100.0, 1.0, 1.0]))
    raise ValueError(f"No sRGB conversion for model {model!r}")


def srgb_to_hex(srgb: Sequence[float]) -> str:
    """
    Convert sRGB [0,1] to a hex color string.

    Returns:
        Hex string like "#3941C8"
    """
    rgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = (rgb * 255).round().astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"
