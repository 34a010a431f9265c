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
import os
import sys
from typing import Optional, Sequence

# Third Party Imports
import numpy as np
from pydicom.errors import InvalidDicomError

# Local Imports
from volfilter.exceptions import VolumeFilterError
from volfilter.filter.filters import gaussian_filter, sobel
from volfilter.filter.parameters import FilterParameters
from volfilter.io.cli import create_parser, display_logo, parameters_from_args
from volfilter.io.dicom import read_dicom_series, save_volume_to_dicom
from volfilter.io.log import initialize_logging

logger = logging.getLogger(__name__)


def run_filter(volume: np.ndarray, params: FilterParameters) -> np.ndarray:
    """Apply the filter selected in ``params`` to a volume."""
    if params.filter_name == "gaussian":
        return gaussian_filter(
            volume,
            params.sigma,
            mode=params.border_mode,
            cval=params.cval,
            truncate=params.truncate,
            tolerance=params.symmetry_tolerance,
        )
    if params.filter_name == "sobel":
        return sobel(
            volume,
            params.axis,
            mode=params.border_mode,
            cval=params.cval,
            tolerance=params.symmetry_tolerance,
        )
    raise ValueError(f"Unknown filter: {params.filter_name!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the volfilter command line interface.

    Reads a DICOM series, filters it and writes the result as a new series.
    Returns the process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    display_logo()

    log_directory = args.log_directory or os.getcwd()
    level = logging.DEBUG if args.verbose else logging.INFO
    initialize_logging(log_directory, enable_logging=args.logging, level=level)
    logger.info("Starting volfilter")
    logger.info(f"Command line arguments: {args}")

    params = parameters_from_args(args)
    try:
        series = read_dicom_series(args.input)
        logger.info(f"Applying {params.filter_name} filter")
        filtered = run_filter(series.volume, params)
        logger.info("Filtering complete")
        save_volume_to_dicom(filtered, args.output, series.slices, series.spacing)
    except (
        VolumeFilterError,
        InvalidDicomError,
        FileNotFoundError,
        ValueError,
    ) as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
