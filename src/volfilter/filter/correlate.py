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

"""One-dimensional correlation of a volume along a single axis.

The input is padded once along the filtered axis so the weighted sum never
has to check bounds. Each tap is then a shifted view of the padded buffer,
and the sum is accumulated one whole-array multiply-add at a time. Kernels
that are symmetric or antisymmetric about the center tap add (or subtract)
mirrored taps first and multiply once per pair.
"""

# Standard Library Imports
from enum import Enum
import logging
from typing import Optional

# Third Party Imports
import numpy as np

# Local Imports
from volfilter.exceptions import InvalidArgumentError
from volfilter.filter.border import BorderMode, as_border_mode
from volfilter.filter.parameters import SYMMETRY_TOLERANCE
from volfilter.preprocess.pad import pad3d
from volfilter.volume import AXIS_TO_DIM, as_volume, require_non_empty, validate_axis

# Start logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class KernelSymmetry(Enum):
    SYMMETRIC = "symmetric"
    ANTISYMMETRIC = "antisymmetric"
    GENERAL = "general"


def is_close(a: float, b: float, eps: float = SYMMETRY_TOLERANCE) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``eps``."""
    return abs(a - b) < eps


def as_kernel(weights) -> np.ndarray:
    """Validate a weight sequence and return it as a ``float64`` array.

    Raises
    ------
    InvalidArgumentError
        If the kernel is empty, not one-dimensional or of even length.
    """
    kernel = np.array(weights, dtype=np.float64)
    if kernel.ndim != 1:
        raise InvalidArgumentError(
            f"Kernel must be one-dimensional, got {kernel.ndim} dimensions"
        )
    if kernel.size == 0:
        raise InvalidArgumentError("Kernel is empty")
    if kernel.size % 2 == 0:
        raise InvalidArgumentError(
            f"Kernel length must be odd to have a center tap, got {kernel.size}"
        )
    return kernel


def kernel_symmetry(weights, tolerance: Optional[float] = None) -> KernelSymmetry:
    """Classify a kernel by its symmetry about the center tap.

    Parameters
    ----------
    weights : array-like
        Odd-length kernel.
    tolerance : float, optional
        Absolute tolerance of the comparisons. Defaults to
        ``SYMMETRY_TOLERANCE``.

    Returns
    -------
    KernelSymmetry
        ``SYMMETRIC`` takes precedence when both tests pass (e.g. a single
        tap kernel).
    """
    kernel = as_kernel(weights)
    eps = SYMMETRY_TOLERANCE if tolerance is None else float(tolerance)
    r = kernel.size // 2

    symmetric = True
    antisymmetric = True
    for i in range(1, r + 1):
        if not is_close(kernel[r + i], kernel[r - i], eps):
            symmetric = False
        if not is_close(kernel[r + i], -kernel[r - i], eps):
            antisymmetric = False

    if symmetric:
        return KernelSymmetry.SYMMETRIC
    if antisymmetric:
        return KernelSymmetry.ANTISYMMETRIC
    return KernelSymmetry.GENERAL


def correlate1d(
    volume,
    weights,
    axis: int,
    mode=BorderMode.REPLICATE,
    cval: float = 0.0,
    tolerance: Optional[float] = None,
) -> np.ndarray:
    """Correlate a volume with a 1D kernel along one axis.

    ``output[x] = sum_k weights[k] * input[x + k - r]`` along ``axis``, where
    ``r`` is the kernel radius and samples outside the volume come from the
    border mode.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume. It is not modified.
    weights : array-like
        Odd-length kernel, applied without reversal.
    axis : int
        0 for rows, 1 for columns, 2 for depth.
    mode : BorderMode or int
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.
    tolerance : float, optional
        Absolute tolerance of the kernel symmetry test.

    Returns
    -------
    np.ndarray
        A new volume with the input's shape.

    Raises
    ------
    InvalidArgumentError
        If the volume or kernel is empty, the kernel has even length, or
        ``axis`` is not 0, 1 or 2.
    """
    axis = validate_axis(axis)
    volume = as_volume(volume)
    require_non_empty(volume)
    kernel = as_kernel(weights)
    mode = as_border_mode(mode)
    symmetry = kernel_symmetry(kernel, tolerance)

    r = kernel.size // 2
    pads = [0, 0, 0]
    pads[axis] = r
    padded = pad3d(volume, pads, mode, cval)

    dim = AXIS_TO_DIM[axis]
    n = volume.shape[dim]

    def tap(offset: int) -> np.ndarray:
        # Samples at distance ``offset`` from every output position.
        index = [slice(None)] * 3
        index[dim] = slice(r + offset, r + offset + n)
        return padded[tuple(index)]

    logger.debug(
        f"Correlating {volume.shape} volume along axis {axis} with a "
        f"{symmetry.value} kernel of length {kernel.size}."
    )

    if symmetry is KernelSymmetry.SYMMETRIC:
        output = tap(0) * kernel[r]
        for i in range(1, r + 1):
            output += (tap(-i) + tap(i)) * kernel[r + i]
    elif symmetry is KernelSymmetry.ANTISYMMETRIC:
        output = tap(0) * kernel[r]
        for i in range(1, r + 1):
            output += (tap(-i) - tap(i)) * kernel[r - i]
    else:
        output = np.zeros_like(volume)
        for k in range(kernel.size):
            output += tap(k - r) * kernel[k]

    return output
