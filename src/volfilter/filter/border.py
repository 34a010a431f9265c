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

"""Boundary index resolution for the padding and correlation routines."""

# Standard Library Imports
from enum import IntEnum
from typing import Optional

# Third Party Imports
import numpy as np

# Local Imports
from volfilter.exceptions import InvalidArgumentError


class BorderMode(IntEnum):
    """Policy used to synthesize samples beyond the edge of an axis.

    The integer values are the codes accepted on the command line.

    ``CONSTANT``     ``k k k | a b c d | k k k``
    ``REPLICATE``    ``a a a | a b c d | d d d``
    ``REFLECT``      ``c b a | a b c d | d c b``
    ``REFLECT_101``  ``d c b | a b c d | c b a``
    """

    CONSTANT = 0
    REPLICATE = 1
    REFLECT = 2
    REFLECT_101 = 3


def as_border_mode(mode) -> BorderMode:
    """Convert an integer code or a name into a ``BorderMode``.

    Parameters
    ----------
    mode : int, str or BorderMode
        Either the integer code (0-3) or the case-insensitive member name.

    Returns
    -------
    BorderMode
        The matching border mode.

    Raises
    ------
    InvalidArgumentError
        If the value does not name a border mode.
    """
    if isinstance(mode, BorderMode):
        return mode
    if isinstance(mode, str):
        try:
            return BorderMode[mode.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown border mode: {mode!r}")
    try:
        return BorderMode(int(mode))
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"Border mode must be one of {[m.value for m in BorderMode]}, got {mode!r}"
        )


def resolve_indices(indices: np.ndarray, size: int, mode: BorderMode) -> np.ndarray:
    """Map (possibly out-of-range) indices onto ``[0, size - 1]``.

    Reflection is applied repeatedly, so indices further than ``size``
    samples outside the axis keep mirroring back and forth instead of
    leaving the valid range.

    Parameters
    ----------
    indices : np.ndarray
        Integer indices along an axis of length ``size``.
    size : int
        Length of the axis.
    mode : BorderMode
        Any mode except ``BorderMode.CONSTANT``, whose out-of-range samples
        have no source index.

    Returns
    -------
    np.ndarray
        Source indices, same shape as ``indices``.

    Raises
    ------
    InvalidArgumentError
        If ``mode`` is ``BorderMode.CONSTANT``.
    """
    indices = np.asarray(indices, dtype=np.intp)
    if size <= 0:
        return np.zeros_like(indices)

    mode = as_border_mode(mode)
    if mode == BorderMode.REPLICATE:
        return np.clip(indices, 0, size - 1)
    if mode == BorderMode.REFLECT:
        period = 2 * size
        folded = np.mod(indices, period)
        return np.where(folded >= size, period - folded - 1, folded)
    if mode == BorderMode.REFLECT_101:
        if size == 1:
            return np.zeros_like(indices)
        period = 2 * (size - 1)
        folded = np.mod(indices, period)
        return np.where(folded >= size, period - folded, folded)

    raise InvalidArgumentError(
        "Constant border mode has no source index; use the fill value instead."
    )


def resolve_index(idx: int, size: int, mode: BorderMode) -> Optional[int]:
    """Resolve a single index along an axis of length ``size``.

    Returns ``None`` when ``mode`` is ``BorderMode.CONSTANT`` and ``idx`` is
    outside the axis, meaning the fill value should be used.
    """
    if size <= 0:
        return 0
    mode = as_border_mode(mode)
    if 0 <= idx < size:
        return int(idx)
    if mode == BorderMode.CONSTANT:
        return None
    return int(resolve_indices(np.array([idx]), size, mode)[0])
