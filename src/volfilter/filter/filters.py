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

# Standard Library Imports
import logging
from typing import Optional, Sequence, Union

# Third Party Imports
import numpy as np

# Local Imports
from volfilter.exceptions import InvalidArgumentError
from volfilter.filter.border import BorderMode, as_border_mode
from volfilter.filter.correlate import correlate1d
from volfilter.filter.kernels import (
    SOBEL_GRADIENT,
    SOBEL_SMOOTHING,
    gaussian_kernel1d,
    gaussian_radius,
)
from volfilter.filter.parameters import GAUSSIAN_TRUNCATE
from volfilter.volume import AXIS_NAMES, as_volume, require_non_empty, validate_axis

# Start logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _per_axis_sigma(sigma: Union[float, Sequence[float]]) -> list[float]:
    if np.ndim(sigma) == 0:
        return [float(sigma)] * 3
    sigmas = [float(s) for s in sigma]
    if len(sigmas) != 3:
        raise InvalidArgumentError(
            f"sigma must be a scalar or have one value per axis, got {len(sigmas)}"
        )
    return sigmas


def gaussian_filter1d(
    volume,
    sigma: float,
    axis: int,
    mode=BorderMode.REPLICATE,
    cval: float = 0.0,
    truncate: float = GAUSSIAN_TRUNCATE,
    tolerance: Optional[float] = None,
) -> np.ndarray:
    """Smooth a volume with a 1D Gaussian along one axis.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume.
    sigma : float
        The standard deviation of the Gaussian, in samples.
    axis : int
        0 for rows, 1 for columns, 2 for depth.
    mode : BorderMode or int
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.
    truncate : float
        The kernel radius is ``int(truncate * sigma + 0.5)``.
    tolerance : float, optional
        Absolute tolerance of the kernel symmetry test.

    Returns
    -------
    np.ndarray
        The smoothed volume.
    """
    kernel = gaussian_kernel1d(sigma, gaussian_radius(sigma, truncate))
    # Reversed for convolution; a no-op for the symmetric Gaussian.
    kernel = kernel[::-1]
    return correlate1d(volume, kernel, axis, mode, cval, tolerance)


def gaussian_filter(
    volume,
    sigma: Union[float, Sequence[float]],
    mode=BorderMode.REPLICATE,
    cval: float = 0.0,
    truncate: float = GAUSSIAN_TRUNCATE,
    tolerance: Optional[float] = None,
) -> np.ndarray:
    """Separable 3D Gaussian filter.

    A 1D Gaussian is applied along rows, then columns, then depth, each pass
    consuming the previous pass's output.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume. It is not modified.
    sigma : float or sequence of float
        Standard deviation in samples; either one value for all axes or one
        per axis in the order (rows, columns, depth).
    mode : BorderMode or int
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.
    truncate : float
        Kernel radius in units of sigma.
    tolerance : float, optional
        Absolute tolerance of the kernel symmetry test.

    Returns
    -------
    np.ndarray
        The smoothed volume, unclamped.
    """
    result = as_volume(volume)
    require_non_empty(result)
    mode = as_border_mode(mode)
    sigmas = _per_axis_sigma(sigma)

    logger.info(
        f"Gaussian filter: sigma={sigmas}, mode={mode.name}, shape={result.shape}"
    )
    for axis, axis_sigma in enumerate(sigmas):
        result = gaussian_filter1d(
            result, axis_sigma, axis, mode, cval, truncate, tolerance
        )
    return result


def sobel(
    volume,
    axis: int = 0,
    mode=BorderMode.REPLICATE,
    cval: float = 0.0,
    tolerance: Optional[float] = None,
) -> np.ndarray:
    """3D Sobel gradient along one axis.

    The gradient taps ``[-1, 0, 1]`` are correlated along ``axis`` without
    reversal, so a rising edge gives a positive response. The smoothing taps
    ``[1, 2, 1]`` are then applied along the two remaining axes in ascending
    order.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume. It is not modified.
    axis : int
        Gradient axis: 0 for rows, 1 for columns, 2 for depth.
    mode : BorderMode or int
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.
    tolerance : float, optional
        Absolute tolerance of the kernel symmetry test.

    Returns
    -------
    np.ndarray
        The gradient volume, unclamped.

    Raises
    ------
    InvalidArgumentError
        If the volume is empty or ``axis`` is not 0, 1 or 2.
    """
    axis = validate_axis(axis)
    result = as_volume(volume)
    require_non_empty(result)
    mode = as_border_mode(mode)

    logger.info(
        f"Sobel filter: axis={AXIS_NAMES[axis]}, mode={mode.name}, shape={result.shape}"
    )
    result = correlate1d(result, SOBEL_GRADIENT, axis, mode, cval, tolerance)
    for other in range(3):
        if other != axis:
            result = correlate1d(
                result, SOBEL_SMOOTHING, other, mode, cval, tolerance
            )
    return result
