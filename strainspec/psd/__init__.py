#!/usr/bin/python
# Copyright (C) 2014 Alex Nitz, Andrew Miller, Tito Dal Canton
#
# This program is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation; either version 2 of the License, or (at your
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
import logging

from strainspec.psd.estimate import *
from strainspec.types import float32, float64
from strainspec.types import required_opts, positive_float, positive_int
from strainspec.types import nonnegative_float
from strainspec.pool import choose_pool


def from_cli(opt, strain, delta_f=None, precision=None):
    """Parses the CLI options related to the noise PSD and returns a
    FrequencySeries with the PSD measured from `strain`. If necessary, the
    PSD is linearly interpolated to achieve the resolution `delta_f`.

    Parameters
    ----------
    opt : object
        Result of parsing the CLI with ArgumentParser, or any object with the
        required attributes (psd_estimation, psd_segment_length,
        psd_segment_stride, psd_num_segments, psd_window, psd_inverse_length,
        psd_low_frequency_cutoff, psd_processes, psd_output).
    strain : TimeSeries
        Time series containing the data from which the PSD should be measured.
    delta_f : {None, float}
        The frequency step of the output PSD. By default the resolution
        given by the segment length.
    precision : str, choices (None,'single','double')
        If not specified, or specified as None, the precision of the returned
        PSD will match the precision of the data. If 'single' the PSD will be
        converted to float32, if not already in that precision. If 'double'
        the PSD will be converted to float64, if not already in that
        precision.

    Returns
    -------
    psd : FrequencySeries
        The frequency series containing the PSD.
    """
    sample_rate = strain.sample_rate
    window = getattr(opt, 'psd_window', 'hann')
    if window == 'none':
        window = None

    processes = getattr(opt, 'psd_processes', 1) or 1
    pool = choose_pool(processes) if processes != 1 else None
    try:
        psd = welch(strain, avg_method=opt.psd_estimation,
                    seg_len=int(round(opt.psd_segment_length * sample_rate)),
                    seg_stride=int(round(opt.psd_segment_stride * sample_rate)),
                    window=window,
                    num_segments=opt.psd_num_segments,
                    require_exact_data_fit=False, pool=pool)
    finally:
        if pool is not None:
            pool.close()
            pool.join()

    if delta_f is not None and delta_f != psd.delta_f:
        psd = interpolate(psd, delta_f)

    if opt.psd_inverse_length:
        psd = inverse_spectrum_truncation(psd,
            int(round(opt.psd_inverse_length * sample_rate)),
            low_frequency_cutoff=opt.psd_low_frequency_cutoff)

    if getattr(opt, 'psd_output', None):
        logging.info('Writing PSD to %s', opt.psd_output)
        psd.astype(float64).save(opt.psd_output)

    if precision is None:
        return psd
    elif precision == 'single':
        return psd.astype(float32)
    elif precision == 'double':
        return psd.astype(float64)
    else:
        err_msg = "If provided the precision kwarg must be either 'single' "
        err_msg += "or 'double'. You provided %s." %(precision)
        raise ValueError(err_msg)


def insert_psd_option_group(parser, output=True):
    """
    Adds the options used to call the strainspec.psd.from_cli function to an
    argparser as an argument group. This should be used if you want to use
    these options in your code.

    Parameters
    -----------
    parser : object
        ArgumentParser instance.
    """
    psd_options = parser.add_argument_group(
                          "Options to control PSD estimation")
    psd_options.add_argument("--psd-estimation",
                             help="Measure PSD from the data, using "
                             "given average method.",
                             choices=["mean", "median", "median-mean"])
    psd_options.add_argument("--psd-segment-length", type=positive_float,
                             help="(Required for --psd-estimation) The "
                             "segment length for PSD estimation (s)")
    psd_options.add_argument("--psd-segment-stride", type=positive_float,
                             help="(Required for --psd-estimation) "
                             "The separation between consecutive "
                             "segments (s)")
    psd_options.add_argument("--psd-num-segments", type=positive_int,
                             default=None,
                             help="(Optional) If given, PSDs will "
                             "be estimated using only this number of "
                             "segments. If more data is given than "
                             "needed to make this number of segments "
                             "then excess data will not be used in "
                             "the PSD estimate. If not enough data "
                             "is given, the code will fail.")
    psd_options.add_argument("--psd-window", default="hann",
                             help="Window applied to each segment before "
                             "Fourier transforming, or 'none'. Any window "
                             "name known to scipy.signal.get_window is "
                             "accepted. Default hann.")
    psd_options.add_argument("--psd-inverse-length", type=positive_float,
                             help="(Optional) The maximum length of the "
                             "impulse response of the overwhitening "
                             "filter (s)")
    psd_options.add_argument("--psd-low-frequency-cutoff",
                             type=nonnegative_float, default=0.,
                             help="Frequency below which the truncated "
                             "inverse PSD is zeroed (Hz). Default 0.")
    psd_options.add_argument("--psd-processes", type=int, default=1,
                             help="Number of processes computing segment "
                             "periodograms, -1 for one per cpu. Default 1.")
    if output:
        psd_options.add_argument("--psd-output",
                          help="(Optional) Write PSD to specified file")

    return psd_options


def verify_psd_options(opt, parser):
    """Parses the CLI options and verifies that they are consistent and
    reasonable.

    Parameters
    ----------
    opt : object
        Result of parsing the CLI with ArgumentParser, or any object with the
        required attributes (psd_estimation, psd_segment_length,
        psd_segment_stride, psd_processes).
    parser : object
        ArgumentParser instance.
    """
    required_opts(opt, parser,
                  ['--psd-estimation', '--psd-segment-stride',
                   '--psd-segment-length'])

    if opt.psd_segment_stride > opt.psd_segment_length:
        parser.error("--psd-segment-stride must not exceed "
                     "--psd-segment-length")
    if opt.psd_estimation == 'median-mean' and \
            2 * opt.psd_segment_stride < opt.psd_segment_length:
        parser.error("median-mean averaging needs --psd-segment-stride of "
                     "at least half --psd-segment-length")
    processes = getattr(opt, 'psd_processes', 1)
    if processes == 0 or processes < -1:
        parser.error("--psd-processes must be positive or -1")
