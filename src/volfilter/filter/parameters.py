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

"""Default values for the filtering engine and the command line program."""

# Standard Library Imports
from dataclasses import dataclass

# Third Party Imports

# Local Imports
from volfilter.filter.border import BorderMode

# Absolute tolerance used to decide whether a kernel is symmetric or
# antisymmetric about its center tap.
SYMMETRY_TOLERANCE = 1e-6

# Gaussian kernels are truncated at ``truncate * sigma`` samples.
GAUSSIAN_TRUNCATE = 4.0

DEFAULT_SIGMA = 4.0
DEFAULT_BORDER_MODE = BorderMode.REPLICATE
DEFAULT_CVAL = 0.0

# Sobel axis of the original processing run: depth.
DEFAULT_SOBEL_AXIS = 2


@dataclass
class FilterParameters:
    """Settings for one filtering run.

    Attributes
    ----------
    filter_name : str
        Either ``"gaussian"`` or ``"sobel"``.
    sigma : float
        Standard deviation of the Gaussian, in samples.
    truncate : float
        Gaussian radius in units of sigma.
    axis : int
        Gradient axis for the Sobel filter (0: rows, 1: columns, 2: depth).
    border_mode : BorderMode
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.
    symmetry_tolerance : float
        Absolute tolerance of the kernel symmetry test.
    """

    filter_name: str = "gaussian"
    sigma: float = DEFAULT_SIGMA
    truncate: float = GAUSSIAN_TRUNCATE
    axis: int = DEFAULT_SOBEL_AXIS
    border_mode: BorderMode = DEFAULT_BORDER_MODE
    cval: float = DEFAULT_CVAL
    symmetry_tolerance: float = SYMMETRY_TOLERANCE
