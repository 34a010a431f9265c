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

# Third Party Imports
import numpy as np

# Local Imports
from volfilter.exceptions import InvalidArgumentError
from volfilter.filter.parameters import GAUSSIAN_TRUNCATE

# Central difference and binomial smoothing taps of the Sobel operator.
SOBEL_GRADIENT = np.array([-1.0, 0.0, 1.0])
SOBEL_SMOOTHING = np.array([1.0, 2.0, 1.0])


def gaussian_radius(sigma: float, truncate: float = GAUSSIAN_TRUNCATE) -> int:
    """Radius of a Gaussian kernel truncated at ``truncate`` standard deviations.

    Parameters
    ----------
    sigma : float
        The standard deviation of the Gaussian kernel.
    truncate : float
        Number of standard deviations kept on each side of the center.

    Returns
    -------
    int
        ``int(truncate * sigma + 0.5)``.
    """
    if sigma < 0:
        raise InvalidArgumentError(f"sigma must be non-negative, got {sigma}")
    if truncate < 0:
        raise InvalidArgumentError(f"truncate must be non-negative, got {truncate}")
    return int(truncate * float(sigma) + 0.5)


def gaussian_kernel1d(sigma: float, radius: int) -> np.ndarray:
    """Create a normalized 1D Gaussian kernel.

    Parameters
    ----------
    sigma : float
        The standard deviation of the Gaussian kernel.
    radius : int
        Half width of the kernel; its length is ``2 * radius + 1``.

    Returns
    -------
    np.ndarray
        The 1D Gaussian kernel, summing to one. A zero radius gives the
        identity kernel ``[1.0]``.
    """
    radius = int(radius)
    if radius < 0:
        raise InvalidArgumentError(f"radius must be non-negative, got {radius}")
    if radius == 0:
        return np.ones(1)
    if sigma <= 0:
        raise InvalidArgumentError(
            f"sigma must be positive for a kernel of radius {radius}, got {sigma}"
        )

    x = np.arange(-radius, radius + 1, dtype=np.float64)
    g = np.exp(-0.5 / (float(sigma) ** 2) * x**2)
    g /= g.sum()
    return g
