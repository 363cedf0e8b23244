# Copyright (C) 2012--2013  Alex Nitz, Josh Willis, Andrew Miller
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
This module contains a few helper functions designed to make writing
strainspec unit tests easier.

Each test module can be run directly, in which case it runs its own suite
and exits through simple_exit, or collected by pytest from the repository
root.
"""

from sys import exit as _exit

import numpy

from strainspec.types import TimeSeries, FrequencySeries
from strainspec.fft import create_reverse_plan, reverse_fft


def simple_exit(results):
    """
    A simpler version of exit_based_on_results(); this function causes the script
    to exit normally with return value of zero if and only if all tests within the
    script passed and had no errors. Otherwise it returns the number of failures
    plus the number of errors

    Parameters
    ----------
    results: an instance of unittest.TestResult, returned (for instance) from a call such as
        results = unittest.TextTestRunner(verbosity=2).run(suite)
    """
    if results.wasSuccessful():
        _exit(0)
    else:
        nfail = len(results.errors)+len(results.failures)
        _exit(nfail)


def colored_noise(noise_size, sample_freq, seed, dtype=numpy.float64):
    """Return a TimeSeries of Gaussian noise whose one-sided PSD falls as
    ``linspace(1, 100, noise_size // 2 + 1) ** -2`` from DC to Nyquist.
    """
    delta_f = sample_freq / noise_size
    rng = numpy.random.RandomState(seed)
    nbins = noise_size // 2 + 1
    noise = rng.normal(loc=0, scale=1, size=nbins) + \
        1j * rng.normal(loc=0, scale=1, size=nbins)
    noise_model = 1. / numpy.linspace(1., 100., nbins)
    noise *= noise_model / numpy.sqrt(delta_f) / 2
    noise[0] = noise[0].real
    noise_fs = FrequencySeries(noise, delta_f=delta_f)
    noise_ts = TimeSeries(numpy.zeros(noise_size), delta_t=1./sample_freq)
    reverse_fft(noise_fs, noise_ts, create_reverse_plan(noise_size))
    noise_ts *= delta_f
    return noise_ts.astype(dtype)
