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

from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from pydicom.dataset import Dataset, FileMetaDataset
from pydicom.uid import ExplicitVRLittleEndian, SecondaryCaptureImageStorage, generate_uid


def write_dicom_slice(
    path: Path,
    pixels: np.ndarray,
    z_position: Optional[float] = None,
    image_position_z: Optional[float] = None,
    pixel_spacing: Optional[Sequence[float]] = (0.5, 0.75),
    slice_thickness: Optional[float] = 2.0,
) -> Path:
    """Write a single-frame, unsigned 16-bit DICOM file.

    Parameters
    ----------
    path : Path
        Destination file.
    pixels : np.ndarray
        2D image, cast to uint16.
    z_position : float, optional
        Value of SliceLocation; omitted if None.
    image_position_z : float, optional
        Third component of ImagePositionPatient; omitted if None.
    pixel_spacing : sequence of float, optional
        PixelSpacing; omitted if None.
    slice_thickness : float, optional
        SliceThickness; omitted if None.

    Returns
    -------
    Path
        The written file.
    """
    pixels = np.asarray(pixels, dtype=np.uint16)

    meta = FileMetaDataset()
    meta.MediaStorageSOPClassUID = SecondaryCaptureImageStorage
    meta.MediaStorageSOPInstanceUID = generate_uid()
    meta.TransferSyntaxUID = ExplicitVRLittleEndian

    ds = Dataset()
    ds.file_meta = meta
    ds.SOPClassUID = meta.MediaStorageSOPClassUID
    ds.SOPInstanceUID = meta.MediaStorageSOPInstanceUID
    ds.PatientName = "Phantom^Test"
    ds.PatientID = "PHANTOM-001"
    ds.Modality = "CT"
    ds.Rows, ds.Columns = (int(n) for n in pixels.shape)
    ds.SamplesPerPixel = 1
    ds.PhotometricInterpretation = "MONOCHROME2"
    ds.BitsAllocated = 16
    ds.BitsStored = 16
    ds.HighBit = 15
    ds.PixelRepresentation = 0
    if pixel_spacing is not None:
        ds.PixelSpacing = [str(v) for v in pixel_spacing]
    if slice_thickness is not None:
        ds.SliceThickness = str(slice_thickness)
    if z_position is not None:
        ds.SliceLocation = str(z_position)
    if image_position_z is not None:
        ds.ImagePositionPatient = ["0", "0", str(image_position_z)]
    ds.PixelData = pixels.tobytes()

    ds.save_as(path, enforce_file_format=True)
    return path


def write_dicom_series(
    folder: Path,
    volume: np.ndarray,
    z_positions: Sequence[float],
    **kwargs,
) -> list:
    """Write one DICOM file per depth slice of ``volume``.

    Files are named so that their alphabetical order is the reverse of the
    slice order, which exercises sorting by position.
    """
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)
    paths = []
    depth = len(volume)
    for z, (plane, position) in enumerate(zip(volume, z_positions)):
        path = folder / f"slice_{depth - z:03d}.dcm"
        paths.append(write_dicom_slice(path, plane, z_position=position, **kwargs))
    return paths
