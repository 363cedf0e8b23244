# Copyright (C) 2012  Josh Willis
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

#
# =============================================================================
#
#                                   Preamble
#
# =============================================================================
#
"""
This module provides the numpy backend of the fast Fourier transform
for the strainspec package.
"""

import numpy.fft


def fft(idata, odata, plan):
    if numpy.may_share_memory(idata, odata):
        raise NotImplementedError("numpy backend of strainspec.fft does not "
                                  "support in-place transforms")
    odata[:] = numpy.asarray(numpy.fft.rfft(idata.astype(plan.real_dtype)),
                             dtype=odata.dtype)


def ifft(idata, odata, plan):
    if numpy.may_share_memory(idata, odata):
        raise NotImplementedError("numpy backend of strainspec.fft does not "
                                  "support in-place transforms")
    out = numpy.fft.irfft(idata.astype(plan.complex_dtype), plan.size)
    odata[:] = numpy.asarray(out * plan.size, dtype=odata.dtype)
