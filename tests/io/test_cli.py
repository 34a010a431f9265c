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

import pytest

from volfilter.filter.border import BorderMode
from volfilter.filter.parameters import FilterParameters
from volfilter.io.cli import create_parser, parameters_from_args


def test_defaults():
    args = create_parser().parse_args(["-i", "in", "-o", "out"])
    assert args.input == "in"
    assert args.output == "out"
    assert args.filter == "gaussian"
    assert args.sigma == 4.0
    assert args.border_mode == 1
    assert args.axis == 2
    assert args.logging is True
    assert args.verbose is False


def test_parameters_from_args():
    args = create_parser().parse_args(
        [
            "-i", "in",
            "-o", "out",
            "-f", "sobel",
            "--axis", "0",
            "--border-mode", "3",
            "--cval", "2.5",
            "--symmetry-tolerance", "1e-3",
            "--no-logging",
        ]
    )
    params = parameters_from_args(args)
    assert params == FilterParameters(
        filter_name="sobel",
        sigma=4.0,
        truncate=4.0,
        axis=0,
        border_mode=BorderMode.REFLECT_101,
        cval=2.5,
        symmetry_tolerance=1e-3,
    )
    assert args.logging is False


@pytest.mark.parametrize(
    "extra",
    [["--border-mode", "4"], ["--axis", "3"], ["-f", "median"]],
)
def test_invalid_choices_exit(extra):
    with pytest.raises(SystemExit):
        create_parser().parse_args(["-i", "in", "-o", "out"] + extra)


def test_input_and_output_are_required():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["-i", "in"])
