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

"""Validation of input volumes and the mapping between axis codes and array
dimensions.

Volumes are ``float64`` arrays laid out as ``(depth, rows, columns)``. The
engine addresses axes with the codes used on the command line: 0 for rows,
1 for columns and 2 for depth.
"""

# Standard Library Imports
from typing import Sequence

# Third Party Imports
import numpy as np

# Local Imports
from volfilter.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    OutOfRangeError,
)

# Axis code -> array dimension of a (depth, rows, columns) volume.
AXIS_TO_DIM = {0: 1, 1: 2, 2: 0}
AXIS_NAMES = {0: "rows", 1: "columns", 2: "depth"}


def validate_axis(axis: int) -> int:
    """Check an axis code and return it as an ``int``.

    Raises
    ------
    InvalidArgumentError
        If ``axis`` is not 0, 1 or 2.
    """
    if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
        raise InvalidArgumentError(f"Invalid axis {axis!r}, expected 0, 1 or 2")
    if axis not in AXIS_TO_DIM:
        raise InvalidArgumentError(f"Invalid axis {axis}, expected 0, 1 or 2")
    return int(axis)


def _is_sequence(value) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def _check_nested_shape(data: Sequence) -> None:
    """Raise if a nested slice/row/column sequence is ragged or not 3D."""
    n_rows = None
    n_cols = None
    for z, plane in enumerate(data):
        if not _is_sequence(plane):
            raise InvalidArgumentError(
                "Expected a 3D (depth, rows, columns) volume, got fewer dimensions"
            )
        if n_rows is None:
            n_rows = len(plane)
        elif len(plane) != n_rows:
            raise DimensionMismatchError(
                f"Slice {z} has {len(plane)} rows, expected {n_rows}"
            )
        for y, row in enumerate(plane):
            if not _is_sequence(row):
                raise InvalidArgumentError(
                    "Expected a 3D (depth, rows, columns) volume, got fewer dimensions"
                )
            if n_cols is None:
                n_cols = len(row)
            elif len(row) != n_cols:
                raise DimensionMismatchError(
                    f"Row {y} of slice {z} has {len(row)} columns, expected {n_cols}"
                )


def as_volume(data) -> np.ndarray:
    """Convert array-like input into a ``float64`` volume.

    Parameters
    ----------
    data : array-like
        A ``(depth, rows, columns)`` array or nested sequence.

    Returns
    -------
    np.ndarray
        A new ``float64`` array; the input is never modified.

    Raises
    ------
    DimensionMismatchError
        If a nested sequence is ragged.
    InvalidArgumentError
        If the data is not three-dimensional.
    """
    if not isinstance(data, np.ndarray):
        if isinstance(data, (list, tuple)):
            _check_nested_shape(data)
        data = np.asarray(data)

    if data.ndim != 3:
        raise InvalidArgumentError(
            f"Expected a 3D (depth, rows, columns) volume, got {data.ndim} dimensions"
        )
    return np.array(data, dtype=np.float64, copy=True)


def require_non_empty(volume: np.ndarray, what: str = "Input volume") -> None:
    """Raise ``InvalidArgumentError`` if the volume holds no samples."""
    if volume.size == 0:
        raise InvalidArgumentError(f"{what} is empty")


def extract_slice(volume, z: int) -> np.ndarray:
    """Return a copy of depth slice ``z``.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume.
    z : int
        Slice index in ``[0, depth)``.

    Returns
    -------
    np.ndarray
        The 2D slice.

    Raises
    ------
    InvalidArgumentError
        If the volume is empty.
    OutOfRangeError
        If ``z`` is outside the volume.
    """
    volume = as_volume(volume)
    require_non_empty(volume)
    depth = volume.shape[0]
    if z < 0 or z >= depth:
        raise OutOfRangeError(f"Slice index {z} out of range [0, {depth})")
    return volume[z].copy()
