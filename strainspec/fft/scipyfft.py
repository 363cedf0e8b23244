# Copyright (C) 2024  The strainspec developers
#
# This program is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation; either version 3 of the License, or (at your
# option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.
#
# You should have received a copy of the GNU General Public License along
# with this program; if not, write to the Free Software Foundation, Inc.,
# 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
"""
This module provides the scipy.fft backend of the fast Fourier transform
for the strainspec package. Unlike numpy, scipy keeps single precision
input in single precision.
"""

import numpy
import scipy.fft

_workers = 1


def insert_fft_options(optgroup):
    """Add the options controlling the scipy backend to an argparse group.
    """
    optgroup.add_argument("--scipy-fft-workers", type=int, default=1,
                          help="Number of threads scipy.fft may use for "
                               "each transform. Default 1.")


def verify_fft_options(opt, parser):
    if opt.scipy_fft_workers < 1 and opt.scipy_fft_workers != -1:
        parser.error("--scipy-fft-workers must be positive or -1")


def from_cli(opt):
    global _workers
    _workers = opt.scipy_fft_workers


def fft(idata, odata, plan):
    out = scipy.fft.rfft(idata.astype(plan.real_dtype, copy=False),
                         workers=_workers)
    odata[:] = numpy.asarray(out, dtype=odata.dtype)


def ifft(idata, odata, plan):
    out = scipy.fft.irfft(idata.astype(plan.complex_dtype, copy=False),
                          plan.size, norm='forward', workers=_workers)
    odata[:] = numpy.asarray(out, dtype=odata.dtype)
