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
from typing import Sequence

# Third Party Imports
import numpy as np

# Local Imports
from volfilter.exceptions import InvalidArgumentError
from volfilter.filter.border import BorderMode, as_border_mode, resolve_indices
from volfilter.volume import as_volume, require_non_empty


def _check_pad(pad: int, name: str) -> int:
    pad = int(pad)
    if pad < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {pad}")
    return pad


def _pad_dim(
    data: np.ndarray, pad: int, dim: int, mode: BorderMode, cval: float
) -> np.ndarray:
    """Pad ``data`` by ``pad`` samples on both sides of dimension ``dim``.

    Parameters
    ----------
    data : np.ndarray
        The array to pad. It is not modified.
    pad : int
        Number of samples added before and after the existing ones.
    dim : int
        Array dimension to pad.
    mode : BorderMode
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.

    Returns
    -------
    np.ndarray
        The padded array.
    """
    if pad == 0:
        return data.copy()

    size = data.shape[dim]
    if mode == BorderMode.CONSTANT:
        shape = list(data.shape)
        shape[dim] = size + 2 * pad
        padded = np.full(shape, cval, dtype=data.dtype)
        center = [slice(None)] * data.ndim
        center[dim] = slice(pad, pad + size)
        padded[tuple(center)] = data
        return padded

    source = resolve_indices(np.arange(-pad, size + pad), size, mode)
    return np.take(data, source, axis=dim)


def pad2d(
    image, pad_rows: int, pad_cols: int, mode=BorderMode.REPLICATE, cval: float = 0.0
) -> np.ndarray:
    """Pad a 2D image on its rows and columns.

    Every border sample comes either from ``cval`` (constant mode) or from
    the source sample found by resolving its row and column indices
    independently, so corners mirror both coordinates.

    Parameters
    ----------
    image : array-like
        The ``(rows, columns)`` image.
    pad_rows : int
        Number of rows added above and below.
    pad_cols : int
        Number of columns added left and right.
    mode : BorderMode or int
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.

    Returns
    -------
    np.ndarray
        Array of shape ``(rows + 2 * pad_rows, columns + 2 * pad_cols)``.

    Raises
    ------
    InvalidArgumentError
        If the image is empty, not 2D, or a pad amount is negative.
    """
    image = np.array(image, dtype=np.float64)
    if image.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2D image, got {image.ndim} dimensions")
    require_non_empty(image, "Input image")
    mode = as_border_mode(mode)
    pad_rows = _check_pad(pad_rows, "pad_rows")
    pad_cols = _check_pad(pad_cols, "pad_cols")

    padded = _pad_dim(image, pad_rows, 0, mode, cval)
    return _pad_dim(padded, pad_cols, 1, mode, cval)


def pad3d(
    volume, pads: Sequence[int], mode=BorderMode.REPLICATE, cval: float = 0.0
) -> np.ndarray:
    """Pad a volume on its rows, columns and depth.

    Rows and columns of every slice are padded first, exactly as ``pad2d``
    does. The depth halo is then made of whole slices: ``cval`` slices in
    constant mode, otherwise copies of the already padded slice selected by
    resolving the depth index.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume.
    pads : sequence of int
        ``[pad_rows, pad_cols]`` or ``[pad_rows, pad_cols, pad_depth]``.
    mode : BorderMode or int
        Boundary extension policy.
    cval : float
        Fill value for ``BorderMode.CONSTANT``.

    Returns
    -------
    np.ndarray
        The padded volume. Its central block, offset by the pad amounts, is
        equal to the input.

    Raises
    ------
    InvalidArgumentError
        If the volume is empty, fewer than two pad values are given, or a
        pad amount is negative.
    """
    volume = as_volume(volume)
    require_non_empty(volume)
    if pads is None or len(pads) < 2:
        raise InvalidArgumentError("pads must have at least 2 elements")
    mode = as_border_mode(mode)

    pad_rows = _check_pad(pads[0], "pad_rows")
    pad_cols = _check_pad(pads[1], "pad_cols")
    pad_depth = _check_pad(pads[2], "pad_depth") if len(pads) > 2 else 0

    padded = _pad_dim(volume, pad_rows, 1, mode, cval)
    padded = _pad_dim(padded, pad_cols, 2, mode, cval)
    return _pad_dim(padded, pad_depth, 0, mode, cval)
