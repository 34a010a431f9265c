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

"""Separable Gaussian and Sobel filtering of 3D volumes."""

from volfilter.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    OutOfRangeError,
    VolumeFilterError,
)
from volfilter.filter.border import BorderMode, resolve_index
from volfilter.filter.correlate import correlate1d
from volfilter.filter.filters import gaussian_filter, gaussian_filter1d, sobel
from volfilter.filter.kernels import gaussian_kernel1d, gaussian_radius
from volfilter.preprocess.pad import pad2d, pad3d
from volfilter.volume import extract_slice

__version__ = "0.1.0"

__all__ = [
    "BorderMode",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "VolumeFilterError",
    "correlate1d",
    "extract_slice",
    "gaussian_filter",
    "gaussian_filter1d",
    "gaussian_kernel1d",
    "gaussian_radius",
    "pad2d",
    "pad3d",
    "resolve_index",
    "sobel",
]
