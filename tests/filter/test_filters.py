#  Copyright (c) 2021-2025  The University of Texas Southwestern Medical Center.
#  All rights reserved.
#  Redistribution and use in source and binary forms, with or without
#  modification, are permitted for academic and research use only (subject to the
#  limitations in the disclaimer below) provided that the following conditions are met:
#       * Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#       * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#       * Neither the name of the copyright holders nor the names of its
#       contributors may be used to endorse or promote products derived from this
#       software without specific prior written permission.
#  NO EXPRESS OR IMPLIED LICENSES TO ANY PARTY'S PATENT RIGHTS ARE GRANTED BY
#  THIS LICENSE. THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND
#  CONTRIBUTORS "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
#  LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A
#  PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR
#  CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL,
#  EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO,
#  PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR
#  BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER
#  IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
#  ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
#  POSSIBILITY OF SUCH DAMAGE.

import numpy as np
import pytest
from scipy import ndimage

from volfilter.exceptions import InvalidArgumentError
from volfilter.filter.border import BorderMode
from volfilter.filter.filters import gaussian_filter, gaussian_filter1d, sobel
from volfilter.volume import AXIS_TO_DIM

SCIPY_MODES = {
    BorderMode.CONSTANT: "constant",
    BorderMode.REPLICATE: "nearest",
    BorderMode.REFLECT: "reflect",
    BorderMode.REFLECT_101: "mirror",
}


@pytest.fixture
def volume():
    rng = np.random.default_rng(7)
    return rng.integers(0, 4096, size=(9, 10, 11)).astype(np.float64)


class TestGaussianFilter:
    def test_zero_sigma_is_identity(self, volume):
        np.testing.assert_array_equal(gaussian_filter(volume, 0.0), volume)

    @pytest.mark.parametrize("mode", list(SCIPY_MODES))
    @pytest.mark.parametrize("sigma", [0.5, 1.0, 2.0])
    def test_matches_scipy(self, volume, mode, sigma):
        out = gaussian_filter(volume, sigma, mode=mode, cval=12.0)
        expected = ndimage.gaussian_filter(
            volume, sigma, mode=SCIPY_MODES[mode], cval=12.0, truncate=4.0
        )
        np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-7)

    def test_per_axis_sigma(self, volume):
        # (rows, columns, depth) here; scipy takes (depth, rows, columns).
        out = gaussian_filter(volume, (1.0, 0.5, 1.5))
        expected = ndimage.gaussian_filter(
            volume, (1.5, 1.0, 0.5), mode="nearest", truncate=4.0
        )
        np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-7)

    def test_constant_volume_is_preserved(self):
        vol = np.full((4, 5, 6), 300.0)
        np.testing.assert_allclose(gaussian_filter(vol, 1.5), vol)
        np.testing.assert_allclose(
            gaussian_filter(vol, 1.5, mode=BorderMode.CONSTANT, cval=300.0), vol
        )

    def test_truncate_changes_radius(self, volume):
        out = gaussian_filter(volume, 1.0, truncate=2.0)
        expected = ndimage.gaussian_filter(volume, 1.0, mode="nearest", truncate=2.0)
        np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-7)

    def test_integer_border_code(self, volume):
        np.testing.assert_allclose(
            gaussian_filter(volume, 1.0, mode=3),
            gaussian_filter(volume, 1.0, mode=BorderMode.REFLECT_101),
        )

    def test_sigma_wider_than_volume_axis(self):
        vol = np.arange(8, dtype=float).reshape(2, 2, 2)
        out = gaussian_filter(vol, 2.0, mode=BorderMode.REFLECT)
        assert out.shape == vol.shape
        assert np.all(np.isfinite(out))
        assert out.min() >= vol.min() - 1e-9
        assert out.max() <= vol.max() + 1e-9

    def test_input_is_not_modified(self, volume):
        original = volume.copy()
        gaussian_filter(volume, 1.0)
        np.testing.assert_array_equal(volume, original)

    def test_wrong_number_of_sigmas(self, volume):
        with pytest.raises(InvalidArgumentError):
            gaussian_filter(volume, (1.0, 2.0))

    def test_empty_volume(self):
        with pytest.raises(InvalidArgumentError):
            gaussian_filter(np.zeros((0, 4, 4)), 1.0)


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_gaussian_filter1d_matches_scipy(volume, axis):
    out = gaussian_filter1d(volume, 1.3, axis)
    expected = ndimage.gaussian_filter1d(
        volume, 1.3, axis=AXIS_TO_DIM[axis], mode="nearest", truncate=4.0
    )
    np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-7)


class TestSobel:
    @pytest.mark.parametrize("axis", [0, 1, 2])
    @pytest.mark.parametrize("mode", list(SCIPY_MODES))
    def test_matches_scipy(self, volume, axis, mode):
        out = sobel(volume, axis, mode=mode, cval=5.0)
        # ndimage.sobel smooths in array-dimension order; with a nonzero cval
        # that differs from rows, columns, depth, so chain the passes here.
        expected = ndimage.correlate1d(
            volume,
            [-1.0, 0.0, 1.0],
            axis=AXIS_TO_DIM[axis],
            mode=SCIPY_MODES[mode],
            cval=5.0,
        )
        for other in range(3):
            if other != axis:
                expected = ndimage.correlate1d(
                    expected,
                    [1.0, 2.0, 1.0],
                    axis=AXIS_TO_DIM[other],
                    mode=SCIPY_MODES[mode],
                    cval=5.0,
                )
        np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-7)

    @pytest.mark.parametrize("axis", [0, 1, 2])
    @pytest.mark.parametrize("mode", list(SCIPY_MODES))
    def test_matches_ndimage_sobel_with_zero_fill(self, volume, axis, mode):
        out = sobel(volume, axis, mode=mode)
        expected = ndimage.sobel(
            volume, axis=AXIS_TO_DIM[axis], mode=SCIPY_MODES[mode]
        )
        np.testing.assert_allclose(out, expected, rtol=1e-9, atol=1e-7)

    def test_nonzero_fill_depends_on_pass_order(self, volume):
        out = sobel(volume, 0, mode=BorderMode.CONSTANT, cval=5.0)
        scipy_order = ndimage.sobel(volume, axis=1, mode="constant", cval=5.0)
        assert not np.allclose(out, scipy_order)

    def test_tolerance_zero_matches_default(self, volume):
        for axis in range(3):
            np.testing.assert_allclose(
                sobel(volume, axis, tolerance=0.0), sobel(volume, axis), atol=1e-9
            )

    def test_step_gives_positive_plateau(self):
        # Each single-sample axis scales the result by 1 + 2 + 1.
        row = np.array([[[0.0, 0.0, 0.0, 10.0, 10.0, 10.0]]])
        out = sobel(row, axis=1, mode=BorderMode.REPLICATE)
        np.testing.assert_allclose(out[0, 0], 16 * np.array([0, 0, 10, 10, 0, 0]))

    def test_flat_volume_has_zero_gradient(self):
        vol = np.full((3, 4, 5), 42.0)
        for axis in range(3):
            np.testing.assert_allclose(sobel(vol, axis), 0.0)

    def test_default_axis_is_rows(self, volume):
        np.testing.assert_allclose(sobel(volume), sobel(volume, 0))

    @pytest.mark.parametrize("axis", [-1, 3])
    def test_invalid_axis(self, volume, axis):
        with pytest.raises(InvalidArgumentError):
            sobel(volume, axis)

    def test_empty_volume(self):
        with pytest.raises(InvalidArgumentError):
            sobel(np.zeros((2, 0, 2)), 0)


def test_gaussian_rejects_2d_nested_list():
    with pytest.raises(InvalidArgumentError):
        gaussian_filter([[1.0, 2.0], [3.0, 4.0]], 1.0)
