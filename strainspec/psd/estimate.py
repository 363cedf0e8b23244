# Copyright (C) 2012 Tito Dal Canton
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
"""Utilites to estimate PSDs from data, and to invert and apply them.

PSDs are one-sided and normalised following LIGO-T010095: for a segment of
``N`` samples at interval ``delta_t`` the periodogram of bin ``k`` is
``2 delta_t |X_k|^2 / sum(w^2)`` (without the factor 2 at DC and Nyquist),
where ``X`` is the unnormalised DFT of the windowed segment and ``w`` the
window.

The routines taking an output series as first argument write into it and
leave its contents undefined if they raise.
"""

import logging

import numpy
from astropy import units

from strainspec.types import FrequencySeries, TimeSeries, zeros
from strainspec.types import real_same_precision_as, complex_same_precision_as
from strainspec.fft import create_forward_plan, create_reverse_plan
from strainspec.fft import reverse_fft, power_spectrum
from strainspec.window import Window, create_window, window_from_array
from strainspec.errors import SpectrumError, Fault, Invalid, BadLength
from strainspec.errors import OutOfMemory, FunctionFailure
from strainspec.errors import FloatingPointDivideByZero

# number of segments from which the median bias is taken to be ln(2)
MEDIAN_BIAS_NMAX = 1000


def median_bias(n):
    """Calculate the bias of the median average PSD computed from `n` segments.

    Parameters
    ----------
    n : int
        Number of segments used in PSD estimation.

    Returns
    -------
    ans : float
        Calculated bias.

    Raises
    ------
    Invalid
        For non-integer or non-positive `n`.

    Notes
    -----
    See arXiv:gr-qc/0509116 appendix B for details. The correction assumes
    independent segments; for overlapping segments it is approximate.
    """
    if isinstance(n, bool) or not isinstance(n, (int, numpy.integer)) \
            or n <= 0:
        raise Invalid('n must be a positive integer', func='median_bias')
    if n >= MEDIAN_BIAS_NMAX:
        return numpy.log(2)
    ans = 1
    for i in range(1, (int(n) - 1) // 2 + 1):
        ans -= 1.0 / (2*i)
        ans += 1.0 / (2*i + 1)
    return ans


def _median(values):
    """Median along the first axis: the middle value for an odd count, the
    mean of the two central values for an even one.
    """
    values = numpy.sort(values, axis=0)
    n = len(values)
    if n % 2:
        return values[n // 2]
    return 0.5 * (values[n // 2 - 1] + values[n // 2])


def _check_tseries(tseries, func):
    if tseries.kind != 'real':
        raise Invalid('time series must be real, not {}'.format(
                      tseries.dtype), func=func)
    if not tseries.delta_t > 0:
        raise Invalid('delta_t must be positive', func=func)


def _check_output(spectrum, seglen, func):
    if spectrum.kind != 'real':
        raise Invalid('output spectrum must be real, not {}'.format(
                      spectrum.dtype), func=func)
    if len(spectrum) != seglen // 2 + 1:
        raise BadLength('output length {} must be seglen/2+1 = {}'.format(
                        len(spectrum), seglen // 2 + 1), func=func)


def _check_window(window, seglen, func):
    if window is None:
        return
    if window.data is None or len(window.data) == 0:
        raise Invalid('window has no data', func=func)
    if not window.sum_of_squares > 0:
        raise Invalid('window sum of squares must be positive', func=func)
    if len(window.data) != seglen:
        raise BadLength('window length {} does not match segment length '
                        '{}'.format(len(window.data), seglen), func=func)


def _segmentation(nsamples, seglen, stride, func):
    """Return the number of segments covering `nsamples` exactly."""
    for name, value in (('seglen', seglen), ('stride', stride)):
        if isinstance(value, bool) or \
                not isinstance(value, (int, numpy.integer)) or value <= 0:
            raise Invalid('{} must be a positive integer'.format(name),
                          func=func)
    if seglen > nsamples:
        raise BadLength('segment length {} exceeds the {} samples of '
                        'data'.format(seglen, nsamples), func=func)
    numseg = 1 + (nsamples - seglen) // stride
    if (numseg - 1) * stride + seglen != nsamples:
        raise BadLength('{} segments of length {} and stride {} do not '
                        'cover {} samples'.format(numseg, seglen, stride,
                                                  nsamples), func=func)
    return int(numseg)


def _segment(tseries, start, seglen):
    """Return a read-only view of `seglen` samples of `tseries` beginning at
    `start`. The view keeps the epoch of the whole record.
    """
    view = tseries.numpy()[start:start + seglen]
    view.flags.writeable = False
    return TimeSeries(view, delta_t=tseries.delta_t, epoch=tseries.epoch,
                      copy=False, f0=tseries.f0,
                      sample_units=tseries.sample_units)


def _copy_metadata(spectrum, other):
    spectrum._epoch = other.epoch
    spectrum._f0 = other.f0
    spectrum._delta_f = other.delta_f
    spectrum._sample_units = other.sample_units


def modified_periodogram(periodogram, tseries, window=None, plan=None):
    """Compute the modified periodogram, i.e. the power spectrum of a
    windowed time series.

    Parameters
    ----------
    periodogram : FrequencySeries
        Real output series of length ``len(tseries) // 2 + 1``. Its data
        and metadata are overwritten.
    tseries : TimeSeries
        The segment to transform. It is never modified.
    window : {None, Window}
        Window applied to a copy of the segment before transforming.
    plan : FFTPlan
        Forward plan of size ``len(tseries)``.

    Returns
    -------
    periodogram : FrequencySeries
        The output series.

    Raises
    ------
    Fault
        If periodogram, tseries or plan is missing.
    Invalid
        For non-real data, non-positive delta_t or a malformed window.
    BadLength
        If the output or window length does not match the segment.
    FunctionFailure
        If the power spectrum cannot be computed with `plan`.
    """
    func = 'modified_periodogram'
    if periodogram is None or tseries is None or plan is None:
        raise Fault('periodogram, tseries and plan must be given', func=func)
    _check_tseries(tseries, func)
    seglen = len(tseries)
    _check_output(periodogram, seglen, func)
    _check_window(window, seglen, func)

    if window is not None:
        work = tseries.numpy() * window.data.numpy()
    else:
        work = tseries.numpy()

    try:
        power_spectrum(work, periodogram.numpy(), plan)
    except SpectrumError as err:
        raise FunctionFailure('power spectrum failed: {}'.format(err),
                              func=func) from err

    if window is not None:
        normfac = tseries.delta_t / window.sum_of_squares
    else:
        normfac = tseries.delta_t / seglen
    periodogram *= float(normfac)

    periodogram._epoch = tseries.epoch
    periodogram._f0 = tseries.f0
    periodogram._delta_f = 1.0 / (seglen * tseries.delta_t)
    periodogram._sample_units = tseries.sample_units ** 2 * units.s
    return periodogram


def _periodogram_task(args):
    segment, window, plan, length, dtype = args
    work = FrequencySeries(zeros(length, dtype=dtype), delta_f=1.,
                           copy=False)
    return modified_periodogram(work, segment, window, plan)


def _segment_periodograms(tseries, starts, seglen, window, plan, length,
                          dtype, pool, func):
    """Yield the periodogram of each segment beginning at `starts`, in
    order. Each periodogram is a fresh scratch series.
    """
    tasks = ((_segment(tseries, start, seglen), window, plan, length, dtype)
             for start in starts)
    mapper = map if pool is None else pool.map
    try:
        for work in mapper(_periodogram_task, tasks):
            yield work
    except MemoryError as err:
        raise OutOfMemory('cannot allocate segment periodograms',
                          func=func) from err
    except SpectrumError as err:
        raise FunctionFailure('segment periodogram failed: {}'.format(err),
                              func=func) from err


def _check_averager_args(spectrum, tseries, seglen, stride, window, plan,
                         func):
    if spectrum is None or tseries is None or plan is None:
        raise Fault('spectrum, tseries and plan must be given', func=func)
    _check_tseries(tseries, func)
    numseg = _segmentation(len(tseries), seglen, stride, func)
    _check_output(spectrum, seglen, func)
    return numseg


def average_spectrum_welch(spectrum, tseries, seglen, stride, window=None,
                           plan=None, pool=None):
    """Use Welch's method to compute the average power spectrum of a time
    series: the mean of the modified periodograms of overlapping segments.

    See: Peter D. Welch "The Use of Fast Fourier Transform for the
    Estimation of Power Spectra: A Method Based on Time Averaging Over
    Short, Modified Periodograms", IEEE Transactions on Audio and
    Electroacoustics, Vol. AU-15, No. 2, June 1967.

    Parameters
    ----------
    spectrum : FrequencySeries
        Real output series of length ``seglen // 2 + 1``.
    tseries : TimeSeries
        The data. Its length must be exactly ``(numseg - 1) * stride +
        seglen`` for some number of segments ``numseg``.
    seglen : int
        Segment length in samples.
    stride : int
        Separation between the starts of consecutive segments, in samples.
    window : {None, Window}
        Window applied to each segment.
    plan : FFTPlan
        Forward plan of size `seglen`.
    pool : {None, pool}
        Object with a ``map`` method used to compute the segment
        periodograms in parallel.

    Returns
    -------
    spectrum : FrequencySeries
        The output series.
    """
    func = 'average_spectrum_welch'
    numseg = _check_averager_args(spectrum, tseries, seglen, stride, window,
                                  plan, func)
    _check_window(window, seglen, func)
    logging.debug('%s: %d segments of %d samples with stride %d', func,
                  numseg, seglen, stride)

    spectrum.clear()
    total = spectrum.numpy()
    work = None
    for work in _segment_periodograms(tseries,
                                      [seg * stride for seg in range(numseg)],
                                      seglen, window, plan, len(spectrum),
                                      spectrum.dtype, pool, func):
        total += work.numpy()

    _copy_metadata(spectrum, work)
    total /= numseg
    return spectrum


def average_spectrum_median(spectrum, tseries, seglen, stride, window=None,
                            plan=None, pool=None):
    """Compute the power spectrum of a time series as the bin-by-bin median
    of the modified periodograms of its segments, corrected for the median
    bias.

    The segments are not statistically independent when they overlap
    (stride < seglen), so in that case the bias correction, which assumes
    independence, is only approximate even for Gaussian noise.

    Parameters are as for :func:`average_spectrum_welch`.
    """
    func = 'average_spectrum_median'
    numseg = _check_averager_args(spectrum, tseries, seglen, stride, window,
                                  plan, func)
    _check_window(window, seglen, func)
    logging.debug('%s: %d segments of %d samples with stride %d', func,
                  numseg, seglen, stride)

    periodograms = list(_segment_periodograms(
        tseries, [seg * stride for seg in range(numseg)], seglen, window,
        plan, len(spectrum), spectrum.dtype, pool, func))

    try:
        bins = numpy.array([p.numpy() for p in periodograms])
    except MemoryError as err:
        raise OutOfMemory('cannot allocate bin values', func=func) from err

    normfac = 1.0 / median_bias(numseg)
    spectrum.numpy()[:] = _median(bins) * normfac
    _copy_metadata(spectrum, periodograms[0])
    return spectrum


def average_spectrum_median_mean(spectrum, tseries, seglen, stride,
                                 window=None, plan=None, pool=None):
    """Compute the power spectrum of a time series with the median-mean
    method: the segments are split into "even" and "odd" ones, the
    bias-corrected median of each set is taken bin by bin, and the two
    medians are averaged.

    The number of segments must be even and the stride at least half the
    segment length, so that no two segments of the same set overlap.

    Parameters are as for :func:`average_spectrum_welch`.

    Raises
    ------
    BadLength
        In addition to the cases of :func:`average_spectrum_welch`, if the
        number of segments is odd or the stride is less than half the
        segment length.
    """
    func = 'average_spectrum_median_mean'
    numseg = _check_averager_args(spectrum, tseries, seglen, stride, window,
                                  plan, func)
    if numseg % 2 or stride < seglen // 2:
        raise BadLength('median-mean needs an even number of segments (got '
                        '{}) and a stride of at least half the segment '
                        'length'.format(numseg), func=func)
    _check_window(window, seglen, func)
    halfnumseg = numseg // 2
    logging.debug('%s: 2 x %d segments of %d samples with stride %d', func,
                  halfnumseg, seglen, stride)

    periodograms = list(_segment_periodograms(
        tseries, [seg * stride for seg in range(numseg)], seglen, window,
        plan, len(spectrum), spectrum.dtype, pool, func))

    try:
        even = numpy.array([p.numpy() for p in periodograms[0::2]])
        odd = numpy.array([p.numpy() for p in periodograms[1::2]])
    except MemoryError as err:
        raise OutOfMemory('cannot allocate bin values', func=func) from err

    # the factor two averages the even and odd medians
    normfac = 1.0 / (2.0 * median_bias(halfnumseg))
    spectrum.numpy()[:] = normfac * (_median(even) + _median(odd))
    _copy_metadata(spectrum, periodograms[0])
    return spectrum


def spectrum_invert_truncate(spectrum, low_frequency_cutoff, seglen,
                             trunclen=0, fwdplan=None, revplan=None):
    """Invert a PSD in place, optionally truncating the impulse response of
    the corresponding inverse-square-root (whitening) filter to `trunclen`
    samples. Truncation bounds the length of the whitening filter at the
    price of a smoothed inverse spectrum.

    Bins below `low_frequency_cutoff`, the DC bin and the last (Nyquist)
    bin are set to zero.

    Parameters
    ----------
    spectrum : FrequencySeries
        Real PSD of length ``seglen // 2 + 1``; replaced by its inverse.
    low_frequency_cutoff : float
        Frequency in Hertz below which the output is zero.
    seglen : int
        Length of the time-domain segments the PSD describes.
    trunclen : int
        Length of the truncated filter in samples; 0 disables truncation.
    fwdplan : {None, FFTPlan}
        Forward plan of size `seglen`, required when truncating.
    revplan : {None, FFTPlan}
        Reverse plan of size `seglen`, required when truncating.

    Returns
    -------
    spectrum : FrequencySeries
        The inverted series, with units the inverse of the input ones.
    """
    func = 'spectrum_invert_truncate'
    if spectrum is None:
        raise Fault('spectrum must be given', func=func)
    if spectrum.kind != 'real':
        raise Invalid('spectrum must be real, not {}'.format(spectrum.dtype),
                      func=func)
    if not spectrum.delta_f > 0:
        raise Invalid('delta_f must be positive', func=func)
    if low_frequency_cutoff < 0:
        raise Invalid('low_frequency_cutoff must not be negative', func=func)
    if not seglen or len(spectrum) != seglen // 2 + 1:
        raise BadLength('spectrum length {} must be seglen/2+1 for seglen '
                        '{}'.format(len(spectrum), seglen), func=func)
    if trunclen < 0:
        raise Invalid('trunclen must not be negative', func=func)
    if trunclen and (revplan is None or fwdplan is None):
        raise Fault('truncation needs forward and reverse plans', func=func)
    if trunclen > seglen:
        raise BadLength('trunclen {} exceeds seglen {}'.format(
                        trunclen, seglen), func=func)

    nyquist = len(spectrum) - 1
    if low_frequency_cutoff > nyquist * spectrum.delta_f:
        raise Invalid('low_frequency_cutoff must be within the bandwidth '
                      'of the PSD', func=func)
    # always get rid of DC
    cut = min(max(int(low_frequency_cutoff / spectrum.delta_f), 1),
              len(spectrum))

    psd = spectrum.numpy()
    if trunclen:
        vtilde = numpy.zeros(len(spectrum),
                             dtype=complex_same_precision_as(spectrum))
        vtilde[cut:nyquist] = 1.0 / numpy.sqrt(psd[cut:nyquist])
        vector = numpy.zeros(seglen, dtype=real_same_precision_as(spectrum))
        try:
            reverse_fft(vtilde, vector, revplan)
            # keep only the trunclen samples wrapped around t = 0
            vector[trunclen // 2:trunclen // 2 + seglen - trunclen] = 0
            power_spectrum(vector, psd, fwdplan)
        except SpectrumError as err:
            raise FunctionFailure('filter truncation failed: {}'.format(err),
                                  func=func) from err

        psd[:cut] = 0
        psd[nyquist] = 0
        # 0.5 undoes the doubling of power_spectrum, seglen**2 the
        # unnormalised reverse transform
        psd[cut:nyquist] *= 0.5 / (float(seglen) * float(seglen))
    else:
        psd[:cut] = 0
        psd[cut:nyquist] = 1.0 / psd[cut:nyquist]
        psd[nyquist] = 0

    spectrum._sample_units = spectrum.sample_units ** -1
    return spectrum


def whiten(fseries, psd, fmin, fmax):
    """Normalise a complex frequency series in place by a PSD.

    Each bin is multiplied by ``sqrt(2 delta_f / psd)``. If the frequency
    series is the Fourier transform of coloured Gaussian noise, and the PSD
    is of the same noise, both normalised as in this module, the output bins
    are complex Gaussian random variables with mean squares of 1.

    PSDs computed from high- or low-passed data can contain zeros. Zeros are
    permitted outside the band ``fmin <= f < fmax``, where the output bins
    are set to zero; a zero inside the band is an error.

    Parameters
    ----------
    fseries : FrequencySeries
        Complex series to whiten; modified in place.
    psd : FrequencySeries
        Real PSD with the same delta_f, spanning at least the bins of
        `fseries`, starting on one of its own samples.
    fmin, fmax : float
        The band of interest in Hertz.

    Returns
    -------
    fseries : FrequencySeries
        The whitened series.

    Raises
    ------
    Invalid
        For a resolution mismatch or a PSD not covering `fseries`.
    FloatingPointDivideByZero
        If the PSD is zero in the band of interest. `fseries` is not
        modified in that case.
    """
    func = 'whiten'
    if fseries is None or psd is None:
        raise Fault('fseries and psd must be given', func=func)
    if fseries.kind != 'complex':
        raise Invalid('fseries must be complex', func=func)
    if psd.delta_f != fseries.delta_f or fseries.f0 < psd.f0:
        raise Invalid('PSD resolution does not match, or PSD does not span '
                      'the frequency series at the low end', func=func)
    j = int((fseries.f0 - psd.f0) / psd.delta_f)
    if j * psd.delta_f + psd.f0 != fseries.f0:
        raise Invalid('frequency series does not start on a PSD sample',
                      func=func)
    n = len(fseries)
    if j + n > len(psd):
        raise Invalid('PSD does not span the frequency series at the high '
                      'end', func=func)

    pdata = psd.numpy()[j:j + n]
    freqs = fseries.f0 + numpy.arange(n) * fseries.delta_f
    zero = pdata == 0
    inband = zero & (fmin <= freqs) & (freqs < fmax)
    if inband.any():
        f = freqs[numpy.flatnonzero(inband)[0]]
        raise FloatingPointDivideByZero('PSD is zero at {} Hz, inside the '
                                        'band [{}, {})'.format(f, fmin, fmax),
                                        func=func)

    factor = numpy.zeros(n, dtype=numpy.float64)
    factor[~zero] = numpy.sqrt(2 * fseries.delta_f /
                               pdata[~zero].astype(numpy.float64))
    fseries.numpy()[:] *= factor.astype(real_same_precision_as(fseries))
    return fseries


_averagers = {
    'mean': average_spectrum_welch,
    'median': average_spectrum_median,
    'median-mean': average_spectrum_median_mean,
}


def welch(timeseries, seg_len=4096, seg_stride=2048, window='hann',
          avg_method='median', num_segments=None, require_exact_data_fit=False,
          pool=None):
    """PSD estimator based on Welch's method.

    Parameters
    ----------
    timeseries : TimeSeries
        Time series for which the PSD is to be estimated.
    seg_len : int
        Segment length in samples.
    seg_stride : int
        Separation between consecutive segments, in samples.
    window : {'hann', str, numpy.ndarray, Window, None}
        Function used to window segments before Fourier transforming: a
        name understood by :func:`strainspec.window.create_window`, a
        `numpy.ndarray` or `Window` that specifies the window, or None for
        no windowing.
    avg_method : {'median', 'mean', 'median-mean'}
        Method used for averaging individual segment PSDs.
    num_segments : {None, int}
        Number of segments to use. By default as many as fit in the data,
        rounded down to an even number for median-mean averaging.
    require_exact_data_fit : bool
        If False, data not covered by the segments is trimmed evenly from
        both ends of `timeseries`. If True the segments must cover the data
        exactly.
    pool : {None, pool}
        Object with a ``map`` method used to compute the segment
        periodograms in parallel.

    Returns
    -------
    psd : FrequencySeries
        Frequency series containing the estimated PSD.

    Raises
    ------
    Invalid
        For invalid choices of `seg_len`, `seg_stride`, `window` and
        `avg_method`.
    BadLength
        For a window array of the wrong length and for inconsistent
        combinations of len(`timeseries`), `seg_len`, `seg_stride` and
        `num_segments`.
    FunctionFailure
        If a segment periodogram cannot be computed.

    Notes
    -----
    See arXiv:gr-qc/0509116 for details.
    """
    func = 'welch'
    # sanity checks
    if avg_method not in _averagers:
        raise Invalid('Invalid averaging method {!r}'.format(avg_method),
                      func=func)
    if type(seg_len) is not int or type(seg_stride) is not int \
        or seg_len <= 0 or seg_stride <= 0:
        raise Invalid('Segment length and stride must be positive integers',
                      func=func)
    if isinstance(window, numpy.ndarray):
        if window.size != seg_len:
            raise BadLength('Invalid window: incorrect window length',
                            func=func)
        window = window_from_array(window)
    elif isinstance(window, str):
        try:
            window = create_window(window, seg_len)
        except ValueError as err:
            raise Invalid('Invalid window: {}'.format(err), func=func) from err
    elif window is not None and not isinstance(window, Window):
        raise Invalid('Invalid window: unknown window {!r}'.format(window),
                      func=func)

    num_samples = len(timeseries)
    if num_samples < seg_len:
        raise BadLength('{} samples are too few for a segment of {}'.format(
                        num_samples, seg_len), func=func)
    if num_segments is None:
        num_segments = 1 + (num_samples - seg_len) // seg_stride
        # median-mean splits the segments into two equal sets
        if avg_method == 'median-mean' and num_segments % 2:
            num_segments -= 1
    if num_segments < 1:
        raise BadLength('{} segments requested from {} samples'.format(
                        num_segments, num_samples), func=func)

    data_len = (num_segments - 1) * seg_stride + seg_len
    if not require_exact_data_fit:
        # Get the correct amount of data
        if data_len < num_samples:
            diff = num_samples - data_len
            start = diff // 2
            end = num_samples - diff // 2
            # Want this to be integers so if diff is odd, catch it here.
            if diff % 2:
                start = start + 1

            timeseries = timeseries[start:end]
            num_samples = len(timeseries)
    if data_len > num_samples:
        raise BadLength('I was asked to estimate a PSD on {} data samples. '
                        'However the data provided only contains {} data '
                        'samples.'.format(data_len, num_samples), func=func)

    logging.info('Estimating %s PSD from %d segments of %d samples',
                 avg_method, num_segments, seg_len)
    delta_f = 1. / timeseries.delta_t / seg_len
    psd = FrequencySeries(zeros(seg_len // 2 + 1,
                                dtype=real_same_precision_as(timeseries)),
                          delta_f=delta_f, copy=False)
    plan = create_forward_plan(seg_len, precision=timeseries.precision)
    _averagers[avg_method](psd, timeseries, seg_len, seg_stride, window,
                           plan, pool=pool)
    return psd


def inverse_spectrum_truncation(psd, max_filter_len, low_frequency_cutoff=None):
    """Modify a PSD such that the impulse response associated with its inverse
    square root is no longer than `max_filter_len` time samples. In practice
    this corresponds to a coarse graining or smoothing of the PSD.

    Parameters
    ----------
    psd : FrequencySeries
        PSD whose inverse spectrum is to be truncated.
    max_filter_len : int
        Maximum length of the time-domain filter in samples.
    low_frequency_cutoff : {None, float}
        Frequencies below `low_frequency_cutoff` are zeroed in the output.

    Returns
    -------
    psd : FrequencySeries
        PSD whose inverse spectrum has been truncated. Bins with no
        information (below the cutoff, DC and Nyquist) are zero.

    Raises
    ------
    Invalid
        For invalid types or values of `max_filter_len` and
        `low_frequency_cutoff`.
    BadLength
        If `max_filter_len` exceeds the segment length of `psd`.

    Notes
    -----
    See arXiv:gr-qc/0509116 for details.
    """
    if type(max_filter_len) is not int or max_filter_len <= 0:
        raise Invalid('max_filter_len must be a positive integer',
                      func='inverse_spectrum_truncation')

    seglen = (len(psd) - 1) * 2
    out = FrequencySeries(psd, copy=True)
    fwdplan = create_forward_plan(seglen, precision=psd.precision)
    revplan = create_reverse_plan(seglen, precision=psd.precision)
    spectrum_invert_truncate(out, low_frequency_cutoff or 0., seglen,
                             max_filter_len, fwdplan, revplan)

    data = out.numpy()
    nonzero = data > 0
    data[nonzero] = 1. / data[nonzero]
    out._sample_units = psd.sample_units
    return out


def interpolate(series, delta_f):
    """Return a new PSD that has been interpolated to the desired delta_f.

    Parameters
    ----------
    series : FrequencySeries
        Frequency series to be interpolated.
    delta_f : float
        The desired delta_f of the output

    Returns
    -------
    interpolated series : FrequencySeries
        A new FrequencySeries that has been interpolated.
    """
    new_n = (len(series)-1) * series.delta_f / delta_f + 1
    samples = series.f0 + numpy.arange(0, numpy.rint(new_n)) * delta_f
    interpolated_series = numpy.interp(samples, series.sample_frequencies.numpy(), series.numpy())
    return FrequencySeries(interpolated_series, epoch=series.epoch,
                           delta_f=delta_f, dtype=series.dtype, f0=series.f0,
                           sample_units=series.sample_units)
