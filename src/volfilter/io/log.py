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
import socket
import sys
from datetime import datetime

# Third Party Imports

# Local Imports

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def initialize_logging(
    log_directory: str, enable_logging: bool, level: int = logging.INFO
) -> logging.Logger:
    """Initialize logging if not already configured.

    If the root logger already has handlers and a level, it is returned as
    is. Otherwise a log file is created in ``log_directory`` when
    ``enable_logging`` is True. When it is False no file is written and only
    warnings and errors are reported, on stderr.

    Parameters
    ----------
    log_directory : str
        Directory for the log file.
    enable_logging : bool
        Whether to set up file and console logging.
    level : int
        Logging level of the handlers.

    Returns
    -------
    logging.Logger
        The root logger instance.
    """
    root_logger = logging.getLogger()

    if root_logger.hasHandlers() and root_logger.level != logging.NOTSET:
        return root_logger

    if enable_logging:
        return initiate_logger(log_directory=log_directory, level=level)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.WARNING)
    sh.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(sh)
    return root_logger


def initiate_logger(log_directory: str, level: int = logging.INFO) -> logging.Logger:
    """Set up the root logger to write to a file and to stdout.

    The log file is named ``volfilter-YYYY-MM-DD-HH-MM-SS-hostname-pid.log``
    so concurrent runs on one machine do not share a file.

    Parameters
    ----------
    log_directory : str
        The directory where the log file will be created.
    level : int
        Logging level of the root logger and its handlers.

    Returns
    -------
    logging.Logger
        The configured root logger instance.
    """
    os.makedirs(log_directory, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_filename = f"volfilter-{timestamp}-{socket.gethostname()}-{os.getpid()}.log"
    log_path = os.path.join(log_directory, log_filename)

    root_logger = logging.getLogger()

    # Remove existing handlers to avoid duplicate records on repeated setup.
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT)

    fh = logging.FileHandler(log_path, mode="a")
    fh.setLevel(level)
    fh.setFormatter(formatter)
    root_logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    root_logger.addHandler(sh)

    root_logger.setLevel(level)
    return root_logger
