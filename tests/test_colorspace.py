# Copyright (c) 2026 Aseswatch
# SPDX-License-Identifier: MIT

"""Tests for swatch model to sRGB preview conversions."""

import numpy as np
import pytest

from aseswatch.colorspace import (
    cmyk_to_srgb,
    gray_to_srgb,
    lab_to_srgb,
    lab_to_xyz,
    linear_to_srgb,
    model_to_srgb,
    srgb_to_hex,
    srgb_to_linear,
)
from aseswatch.schema import ColorModel


class TestSRGBLinearRoundtrip:

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_out_of_gamut_clipped(self):
        np.testing.assert_allclose(linear_to_srgb(np.array([-0.2, 1.5])), [0.0, 1.0])


class TestLab:

    def test_white_point(self):
        np.testing.assert_allclose(lab_to_xyz(np.array([100.0, 0.0, 0.0])),
                                   [0.96422, 1.0, 0.82521], atol=1e-9)

    def test_white_is_white(self):
        np.testing.assert_allclose(lab_to_srgb(np.array([100.0, 0.0, 0.0])),
                                   [1.0, 1.0, 1.0], atol=1e-3)

    def test_black_is_black(self):
        np.testing.assert_allclose(lab_to_srgb(np.array([0.0, 0.0, 0.0])),
                                   [0.0, 0.0, 0.0], atol=1e-9)

    def test_neutral_axis_is_gray(self):
        r, g, b = lab_to_srgb(np.array([50.0, 0.0, 0.0]))
        assert r == pytest.approx(g, abs=2e-3)
        assert g == pytest.approx(b, abs=2e-3)

    def test_yellow(self):
        r, g, b = model_to_srgb(ColorModel.LAB, (0.9137255, -5.0, 94.0))
        assert r > 0.8 and g > 0.8 and b < 0.3

    def test_batch_shape(self):
        lab = np.zeros((5, 3))
        assert lab_to_srgb(lab).shape == (5, 3)


class TestCmykGray:

    def test_cmyk_primaries(self):
        np.testing.assert_allclose(cmyk_to_srgb(np.array([0, 0, 0, 0])), [1, 1, 1])
        np.testing.assert_allclose(cmyk_to_srgb(np.array([0, 1, 0, 0])), [1, 0, 1])
        np.testing.assert_allclose(cmyk_to_srgb(np.array([0, 0, 0, 1])), [0, 0, 0])

    def test_cmyk_gray_key(self):
        np.testing.assert_allclose(cmyk_to_srgb(np.array([0, 0, 0, 0.5])), [0.5, 0.5, 0.5])

    def test_gray(self):
        np.testing.assert_allclose(gray_to_srgb(np.array([0.25])), [0.25, 0.25, 0.25])


class TestModelToSRGB:

    def test_rgb_passthrough(self):
        np.testing.assert_allclose(model_to_srgb(ColorModel.RGB, (0.2, 0.4, 0.6)), [0.2, 0.4, 0.6])

    def test_gray(self):
        np.testing.assert_allclose(model_to_srgb(ColorModel.GRAY, (1.0,)), [1, 1, 1])


class TestHex:

    def test_primaries(self):
        assert srgb_to_hex((1.0, 0.0, 0.0)) == "#FF0000"
        assert srgb_to_hex((0.0, 0.0, 1.0)) == "#0000FF"

    def test_clamps(self):
        assert srgb_to_hex((1.5, -0.2, 0.5)) == "#FF0080"
