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

"""Reading DICOM series into volumes and writing filtered volumes back.

A series is a directory of single-frame ``.dcm`` files. Slices are ordered
by their position along the patient z axis, stacked into a
``(depth, rows, columns)`` volume and kept alongside their datasets so the
metadata can be reused when the filtered volume is written back.
"""

# Standard Library Imports
import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple, Union

# Third Party Imports
import numpy as np
import pydicom
from pydicom.dataset import Dataset
from pydicom.uid import ExplicitVRLittleEndian
from pydicom.valuerep import DSfloat

# Local Imports
from volfilter.exceptions import DimensionMismatchError, InvalidArgumentError

# Start logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PathLike = Union[str, Path]
Spacing = Tuple[float, float, float]

UINT16_MAX = 65535.0
MIN_SLICE_SPACING = 0.01
PROGRESS_INTERVAL = 50


@dataclass
class DicomSlice:
    path: Path
    pixels: np.ndarray
    z_position: float
    rows: int
    columns: int
    dataset: Dataset = field(repr=False)


@dataclass
class DicomSeries:
    volume: np.ndarray
    spacing: Spacing
    slices: List[DicomSlice]


def list_dicom_files(folder: PathLike) -> List[Path]:
    """List the ``.dcm`` files of a directory, sorted by name.

    Parameters
    ----------
    folder : str or Path
        The directory to search. Subdirectories are not visited.

    Returns
    -------
    list of Path
        Paths of the DICOM files.

    Raises
    ------
    FileNotFoundError
        If the folder does not exist, is not a directory, or holds no
        ``.dcm`` files.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(f"Folder does not exist or is not a directory: {folder}")

    paths = sorted(
        p for p in folder.iterdir() if p.is_file() and p.suffix.lower() == ".dcm"
    )
    if not paths:
        raise FileNotFoundError(f"No DICOM files found in: {folder}")
    return paths


def _slice_position(ds: Dataset, path: Path) -> float:
    location = ds.get("SliceLocation")
    if location is not None and location != "":
        return float(location)

    position = ds.get("ImagePositionPatient")
    if position is not None and len(position) >= 3:
        z = float(position[2])
        logger.warning(
            f"{path.name} has no SliceLocation, using ImagePositionPatient z: {z}"
        )
        return z

    raise ValueError(
        f"Cannot determine slice position of {path}: "
        "no SliceLocation or ImagePositionPatient"
    )


def read_dicom_slice(path: PathLike) -> DicomSlice:
    """Read one single-frame DICOM file.

    Parameters
    ----------
    path : str or Path
        The DICOM file.

    Returns
    -------
    DicomSlice
        Pixels widened to ``float64``, the slice position and the dataset.

    Raises
    ------
    ValueError
        If the image size, slice position or a 2D pixel array cannot be
        obtained.
    """
    path = Path(path)
    ds = pydicom.dcmread(path)

    rows = ds.get("Rows")
    columns = ds.get("Columns")
    if rows is None or columns is None:
        raise ValueError(f"Cannot read image size (Rows/Columns) of {path}")

    z_position = _slice_position(ds, path)

    pixels = np.asarray(ds.pixel_array, dtype=np.float64)
    if pixels.ndim != 2:
        raise ValueError(
            f"Expected a single-frame grayscale image in {path}, got shape {pixels.shape}"
        )

    return DicomSlice(
        path=path,
        pixels=pixels,
        z_position=z_position,
        rows=int(rows),
        columns=int(columns),
        dataset=ds,
    )


def slices_to_volume(slices: Sequence[DicomSlice]) -> np.ndarray:
    """Stack slices into a ``(depth, rows, columns)`` volume.

    Raises
    ------
    InvalidArgumentError
        If there are no slices.
    DimensionMismatchError
        If a slice's size differs from the first slice's.
    """
    if not slices:
        raise InvalidArgumentError("No slices to stack into a volume")

    rows, columns = slices[0].pixels.shape
    for z, s in enumerate(slices):
        if s.pixels.shape != (rows, columns):
            raise DimensionMismatchError(
                f"Slice {z} ({s.path.name}) has size {s.pixels.shape}, "
                f"expected {(rows, columns)}"
            )
    return np.stack([s.pixels for s in slices]).astype(np.float64)


def get_dicom_spacing(slices: Sequence[DicomSlice]) -> Spacing:
    """Physical sample spacing of a sorted series.

    The first two values come from ``PixelSpacing`` of the first slice and
    the third from its ``SliceThickness``. When the thickness is missing or
    not above 0.01, the distance between the first two slice positions is
    used instead.

    Parameters
    ----------
    slices : sequence of DicomSlice
        The slices, sorted by position.

    Returns
    -------
    tuple of float
        ``(row spacing, column spacing, slice spacing)``, defaulting to 1.0.
    """
    spacing = [1.0, 1.0, 1.0]
    if not slices:
        return tuple(spacing)

    ds = slices[0].dataset
    pixel_spacing = ds.get("PixelSpacing")
    if pixel_spacing is not None and len(pixel_spacing) >= 2:
        spacing[0] = float(pixel_spacing[0])
        spacing[1] = float(pixel_spacing[1])
    else:
        logger.warning("No PixelSpacing found, using default (1.0, 1.0)")

    thickness = ds.get("SliceThickness")
    if thickness is not None and thickness != "":
        spacing[2] = float(thickness)

    if len(slices) >= 2 and spacing[2] <= MIN_SLICE_SPACING:
        z_diff = abs(slices[1].z_position - slices[0].z_position)
        if z_diff > MIN_SLICE_SPACING:
            spacing[2] = z_diff

    return tuple(spacing)


def read_dicom_series(folder: PathLike) -> DicomSeries:
    """Read a directory of DICOM slices into a volume.

    Parameters
    ----------
    folder : str or Path
        Directory holding one ``.dcm`` file per slice.

    Returns
    -------
    DicomSeries
        The volume, its spacing and the slices sorted by ascending position.
    """
    paths = list_dicom_files(folder)
    logger.info(f"Found {len(paths)} DICOM files in {folder}")

    slices = []
    for i, path in enumerate(paths):
        logger.debug(f"Reading slice {i + 1}/{len(paths)}: {path}")
        slices.append(read_dicom_slice(path))

    slices.sort(key=lambda s: s.z_position)
    volume = slices_to_volume(slices)
    spacing = get_dicom_spacing(slices)

    logger.info(
        f"Volume size: z={volume.shape[0]} x y={volume.shape[1]} x x={volume.shape[2]}"
    )
    logger.info(
        f"Spacing: x={spacing[0]}mm, y={spacing[1]}mm, z={spacing[2]}mm"
    )
    return DicomSeries(volume=volume, spacing=spacing, slices=slices)


def to_uint16(values) -> np.ndarray:
    """Clamp to ``[0, 65535]`` and round half away from zero to ``uint16``."""
    clipped = np.clip(np.asarray(values, dtype=np.float64), 0.0, UINT16_MAX)
    return np.floor(clipped + 0.5).astype(np.uint16)


def _ds(value: float) -> DSfloat:
    return DSfloat(value, auto_format=True)


def save_volume_to_dicom(
    volume,
    output_folder: PathLike,
    slices: Sequence[DicomSlice],
    spacing: Sequence[float],
    prefix: str = "filtered_slice_",
) -> List[Path]:
    """Write a volume as a DICOM series reusing the source slices' metadata.

    Slice ``z`` of the volume is written with a copy of ``slices[z]``'s
    dataset, its pixels clamped to the unsigned 16-bit range and the
    spacing and position tags updated.

    Parameters
    ----------
    volume : array-like
        The ``(depth, rows, columns)`` volume, e.g. a filter output.
    output_folder : str or Path
        Destination directory, created if missing.
    slices : sequence of DicomSlice
        Source slices, one per depth index.
    spacing : sequence of float
        ``(row spacing, column spacing[, slice spacing])``.
    prefix : str
        File name prefix; files are named ``<prefix><z + 1>.dcm``.

    Returns
    -------
    list of Path
        The written files, in depth order.

    Raises
    ------
    InvalidArgumentError
        If the volume is empty or not 3D.
    DimensionMismatchError
        If the volume depth differs from the number of slices, or a slice's
        size differs from its source.
    """
    volume = np.asarray(volume)
    if volume.ndim != 3 or volume.size == 0:
        raise InvalidArgumentError("Volume is empty, nothing to save")
    if volume.shape[0] != len(slices):
        raise DimensionMismatchError(
            f"Volume depth ({volume.shape[0]}) does not match the number of "
            f"source slices ({len(slices)})"
        )

    output_folder = Path(output_folder)
    os.makedirs(output_folder, exist_ok=True)

    depth = volume.shape[0]
    written = []
    for z in range(depth):
        source = slices[z]
        if volume[z].shape != source.pixels.shape:
            raise DimensionMismatchError(
                f"Slice {z} has size {volume[z].shape}, source slice has "
                f"{source.pixels.shape}"
            )

        ds = copy.deepcopy(source.dataset)
        pixels = to_uint16(volume[z])

        ds.Rows, ds.Columns = (int(n) for n in pixels.shape)
        ds.SamplesPerPixel = 1
        ds.BitsAllocated = 16
        ds.BitsStored = 16
        ds.HighBit = 15
        ds.PixelRepresentation = 0
        if "PixelData" in ds:
            del ds.PixelData
        ds.PixelData = pixels.tobytes()
        ds["PixelData"].VR = "OW"

        if len(spacing) >= 2:
            ds.PixelSpacing = [_ds(spacing[0]), _ds(spacing[1])]
        if len(spacing) >= 3:
            ds.SliceThickness = _ds(spacing[2])
        ds.SliceLocation = _ds(source.z_position)

        # Range tags describe the source pixels and carry a VR tied to its
        # pixel representation.
        for keyword in ("SmallestImagePixelValue", "LargestImagePixelValue"):
            if keyword in ds:
                delattr(ds, keyword)

        # The new pixel data is native little-endian uint16.
        file_meta = getattr(ds, "file_meta", None)
        if file_meta is not None and "TransferSyntaxUID" in file_meta:
            syntax = file_meta.TransferSyntaxUID
            if (
                not syntax.is_transfer_syntax
                or syntax.is_compressed
                or not syntax.is_little_endian
            ):
                file_meta.TransferSyntaxUID = ExplicitVRLittleEndian

        path = output_folder / f"{prefix}{z + 1}.dcm"
        ds.save_as(path, enforce_file_format=True)
        written.append(path)

        if (z + 1) % PROGRESS_INTERVAL == 0:
            logger.info(f"Saved {z + 1}/{depth} DICOM files")

    logger.info(f"Saved {depth} DICOM files to {output_folder}")
    return written
