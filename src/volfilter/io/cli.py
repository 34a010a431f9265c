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
import argparse

from volfilter.filter.border import BorderMode
from volfilter.filter.parameters import (
    DEFAULT_BORDER_MODE,
    DEFAULT_CVAL,
    DEFAULT_SIGMA,
    DEFAULT_SOBEL_AXIS,
    GAUSSIAN_TRUNCATE,
    SYMMETRY_TOLERANCE,
    FilterParameters,
)

FILTER_NAMES = ("gaussian", "sobel")


def create_parser() -> argparse.ArgumentParser:
    """Build the command line parser of the ``volfilter`` program.

    Returns
    -------
    argparse.ArgumentParser
        Parser with input/output, filter and logging argument groups.
    """
    parser = argparse.ArgumentParser(
        description="Gaussian or Sobel filtering of a DICOM series."
    )

    io_args = parser.add_argument_group("Input/Output Arguments")
    io_args.add_argument(
        "-i",
        "--input",
        required=True,
        help="Directory holding the source DICOM series (one .dcm file per slice).",
    )
    io_args.add_argument(
        "-o",
        "--output",
        required=True,
        help="Directory where the filtered DICOM series is written.",
    )

    filter_args = parser.add_argument_group("Filter Arguments")
    filter_args.add_argument(
        "-f",
        "--filter",
        choices=FILTER_NAMES,
        default="gaussian",
        help="Filter to apply.",
    )
    filter_args.add_argument(
        "--sigma",
        type=float,
        default=DEFAULT_SIGMA,
        help="Gaussian standard deviation in voxels.",
    )
    filter_args.add_argument(
        "--truncate",
        type=float,
        default=GAUSSIAN_TRUNCATE,
        help="Gaussian kernel radius in units of sigma.",
    )
    filter_args.add_argument(
        "--axis",
        type=int,
        choices=(0, 1, 2),
        default=DEFAULT_SOBEL_AXIS,
        help="Sobel gradient axis (0: rows, 1: columns, 2: depth).",
    )
    filter_args.add_argument(
        "--border-mode",
        type=int,
        choices=[m.value for m in BorderMode],
        default=int(DEFAULT_BORDER_MODE),
        help="Border mode (0: constant, 1: replicate, 2: reflect, 3: reflect-101).",
    )
    filter_args.add_argument(
        "--cval",
        type=float,
        default=DEFAULT_CVAL,
        help="Fill value used with the constant border mode.",
    )
    filter_args.add_argument(
        "--symmetry-tolerance",
        type=float,
        default=SYMMETRY_TOLERANCE,
        help="Absolute tolerance of the kernel symmetry test.",
    )

    log_args = parser.add_argument_group("Logging Arguments")
    log_args.add_argument(
        "--log-directory",
        default=None,
        help="Directory for the log file (defaults to the current directory).",
    )
    log_args.add_argument(
        "--logging",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Write a log file (use --no-logging to disable).",
    )
    log_args.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug messages.",
    )

    return parser


def parameters_from_args(args: argparse.Namespace) -> FilterParameters:
    """Collect the filter settings of parsed arguments."""
    return FilterParameters(
        filter_name=args.filter,
        sigma=args.sigma,
        truncate=args.truncate,
        axis=args.axis,
        border_mode=BorderMode(args.border_mode),
        cval=args.cval,
        symmetry_tolerance=args.symmetry_tolerance,
    )


def display_logo():
    logo = r"""
                _  __ _ _ _
     __   _____ | |/ _(_) | |_ ___ _ __
     \ \ / / _ \| | |_| | | __/ _ \ '__|
      \ V / (_) | |  _| | | ||  __/ |
       \_/ \___/|_|_| |_|_|\__\___|_|
    """
    print(logo)
