# Copyright (C) 2012  Tito Dal Canton, Josh Willis
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
'''
These are the unittests for the strainspec PSD module.
'''

import unittest
import numpy
from astropy import units
import strainspec.psd
from strainspec.psd import estimate
from strainspec.types import TimeSeries, FrequencySeries, zeros
from strainspec.fft import create_forward_plan, create_reverse_plan
from strainspec.window import create_window, window_from_array
from strainspec.pool import choose_pool, SinglePool
from strainspec.errors import Fault, Invalid, BadLength, FunctionFailure
from strainspec.errors import FloatingPointDivideByZero
from utils import simple_exit, colored_noise

_averagers = (estimate.average_spectrum_welch,
              estimate.average_spectrum_median,
              estimate.average_spectrum_median_mean)


class TestPSD(unittest.TestCase):
    def setUp(self):
        self.psd_low_freq_cutoff = 10.
        # generate 1/f noise for testing PSD estimation
        self.noise = colored_noise(524288, 4096., 132435)

    def test_estimate_welch(self):
        """Test estimating PSDs from data using Welch's method"""
        for seg_len in (2048, 4096, 8192):
            noise_model = (numpy.linspace(1., 100., seg_len // 2 + 1)) ** (-2)
            for seg_stride in (seg_len, seg_len // 2):
                for method in ('mean', 'median', 'median-mean'):
                    psd = strainspec.psd.welch(self.noise, seg_len=seg_len,
                        seg_stride=seg_stride, avg_method=method)
                    self.assertEqual(len(psd), seg_len // 2 + 1)
                    self.assertAlmostEqual(psd.delta_f, 4096. / seg_len)
                    error = (psd.numpy() - noise_model) / noise_model
                    err_rms = numpy.sqrt(numpy.mean(error ** 2))
                    self.assertTrue(err_rms < 0.2,
                        msg='seg_len=%d seg_stride=%d method=%s -> rms=%.3f' % \
                        (seg_len, seg_stride, method, err_rms))

    def test_estimate_single_precision(self):
        """Test that single precision data gives a single precision PSD"""
        noise = self.noise.astype(numpy.float32)
        noise_model = (numpy.linspace(1., 100., 2049)) ** (-2)
        psd = strainspec.psd.welch(noise, seg_len=4096, seg_stride=2048,
                                   avg_method='median')
        self.assertEqual(psd.dtype, numpy.float32)
        error = (psd.numpy() - noise_model) / noise_model
        self.assertTrue(numpy.sqrt(numpy.mean(error ** 2)) < 0.2)

    def test_truncation(self):
        """Test inverse PSD truncation"""
        for seg_len in (2048, 4096, 8192):
            noise_model = (numpy.linspace(1., 100., seg_len // 2 + 1)) ** (-2)
            for max_len in (1024, 512, 256):
                psd = strainspec.psd.welch(self.noise, seg_len=seg_len,
                                           seg_stride=seg_len // 2,
                                           avg_method='mean')
                psd_trunc = strainspec.psd.inverse_spectrum_truncation(
                        psd, max_len,
                        low_frequency_cutoff=self.psd_low_freq_cutoff)
                freq = psd.sample_frequencies.numpy()
                self.assertEqual(len(psd_trunc), len(psd))
                self.assertEqual(psd_trunc.sample_units, psd.sample_units)
                self.assertTrue((psd_trunc.numpy()[freq < self.psd_low_freq_cutoff] == 0).all())
                self.assertEqual(psd_trunc[len(psd) - 1], 0)
                band = (freq > 100.) & (freq < 1500.)
                error = (psd_trunc.numpy() - noise_model) / noise_model
                err_rms = numpy.sqrt(numpy.mean(error[band] ** 2))
                self.assertTrue(err_rms < 0.1,
                                msg='seg_len=%d max_len=%d -> rms=%.3f' \
                                % (seg_len, max_len, err_rms))

    def test_pool(self):
        """Test that computing segments in worker processes changes nothing"""
        noise = self.noise[:65536]
        for method in ('mean', 'median', 'median-mean'):
            serial = strainspec.psd.welch(noise, seg_len=4096,
                                          seg_stride=2048, avg_method=method)
            for processes in (1, 2):
                pool = choose_pool(processes)
                if processes == 1:
                    self.assertIsInstance(pool, SinglePool)
                try:
                    parallel = strainspec.psd.welch(noise, seg_len=4096,
                                                    seg_stride=2048,
                                                    avg_method=method,
                                                    pool=pool)
                finally:
                    pool.close()
                    pool.join()
                self.assertTrue(numpy.array_equal(serial.numpy(),
                                                  parallel.numpy()))


class TestAverageSpectrum(unittest.TestCase):
    def setUp(self):
        self.rng = numpy.random.RandomState(4321)
        self.delta_t = 1. / 256
        self.epoch = 1126259462.

    def series(self, length, dtype=numpy.float64):
        return TimeSeries(self.rng.normal(size=length), delta_t=self.delta_t,
                          epoch=self.epoch, dtype=dtype, sample_units='m')

    def output(self, seglen, dtype=numpy.float64):
        return FrequencySeries(zeros(seglen // 2 + 1, dtype=dtype),
                               delta_f=1., copy=False)

    def test_periodogram_parseval(self):
        """Test that an unwindowed periodogram sums to delta_t sum(x^2)"""
        for seglen in (64, 65):
            data = self.series(seglen)
            periodogram = self.output(seglen)
            estimate.modified_periodogram(periodogram, data, None,
                                          create_forward_plan(seglen))
            expected = self.delta_t * (data.numpy() ** 2).sum()
            self.assertAlmostEqual(periodogram.sum() / expected, 1., places=10)
            self.assertAlmostEqual(periodogram.delta_f,
                                   1. / (seglen * self.delta_t))
            self.assertEqual(periodogram.epoch, self.epoch)
            self.assertEqual(periodogram.sample_units, units.m ** 2 * units.s)

    def test_periodogram_window_normalization(self):
        """Test that a constant window gives the unwindowed periodogram"""
        seglen = 128
        data = self.series(seglen)
        plan = create_forward_plan(seglen)
        plain = self.output(seglen)
        windowed = self.output(seglen)
        estimate.modified_periodogram(plain, data, None, plan)
        estimate.modified_periodogram(windowed, data,
                                      window_from_array(3. * numpy.ones(seglen)),
                                      plan)
        self.assertTrue(numpy.allclose(plain.numpy(), windowed.numpy(),
                                       rtol=1e-12, atol=0))

    def test_welch_single_segment(self):
        """Test that one segment averages to its own periodogram"""
        seglen = 256
        data = self.series(seglen)
        window = create_window('hann', seglen)
        plan = create_forward_plan(seglen)
        direct = self.output(seglen)
        estimate.modified_periodogram(direct, data, window, plan)
        for averager in (estimate.average_spectrum_welch,
                         estimate.average_spectrum_median):
            out = self.output(seglen)
            averager(out, data, seglen, seglen // 2, window, plan)
            self.assertTrue(numpy.allclose(out.numpy(), direct.numpy(),
                                           rtol=1e-12, atol=0),
                            msg=averager.__name__)
            self.assertEqual(out.delta_f, direct.delta_f)
            self.assertEqual(out.epoch, self.epoch)
            self.assertEqual(out.sample_units, direct.sample_units)

    def test_median_of_segments(self):
        """Test the median average against a direct computation"""
        seglen, stride, numseg = 32, 16, 5
        data = self.series((numseg - 1) * stride + seglen)
        plan = create_forward_plan(seglen)
        periodograms = []
        for seg in range(numseg):
            work = self.output(seglen)
            estimate.modified_periodogram(
                work, data[seg * stride:seg * stride + seglen], None, plan)
            periodograms.append(work.numpy())
        out = self.output(seglen)
        estimate.average_spectrum_median(out, data, seglen, stride, None, plan)
        expected = numpy.median(periodograms, axis=0) / estimate.median_bias(numseg)
        self.assertTrue(numpy.allclose(out.numpy(), expected, rtol=1e-12,
                                       atol=0))

        out = self.output(seglen)
        estimate.average_spectrum_welch(out, data, seglen, stride, None, plan)
        self.assertTrue(numpy.allclose(out.numpy(),
                                       numpy.mean(periodograms, axis=0),
                                       rtol=1e-12, atol=0))

    def test_median_mean_of_segments(self):
        """Test the median-mean average against a direct computation"""
        seglen, stride, numseg = 32, 16, 6
        data = self.series((numseg - 1) * stride + seglen)
        plan = create_forward_plan(seglen)
        periodograms = []
        for seg in range(numseg):
            work = self.output(seglen)
            estimate.modified_periodogram(
                work, data[seg * stride:seg * stride + seglen], None, plan)
            periodograms.append(work.numpy())
        bias = estimate.median_bias(numseg // 2)
        expected = (numpy.median(periodograms[0::2], axis=0) +
                    numpy.median(periodograms[1::2], axis=0)) / (2 * bias)
        out = self.output(seglen)
        estimate.average_spectrum_median_mean(out, data, seglen, stride,
                                              None, plan)
        self.assertTrue(numpy.allclose(out.numpy(), expected, rtol=1e-12,
                                       atol=0))

    def test_median_bias(self):
        self.assertEqual(estimate.median_bias(1), 1)
        self.assertEqual(estimate.median_bias(2), 1)
        self.assertAlmostEqual(estimate.median_bias(3), 1 - 1 / 2. + 1 / 3.)
        self.assertAlmostEqual(estimate.median_bias(999),
                               estimate.median_bias(1000), delta=6e-4)
        self.assertEqual(estimate.median_bias(10 ** 6), numpy.log(2))
        previous = estimate.median_bias(1)
        for n in range(3, 200, 2):
            bias = estimate.median_bias(n)
            self.assertTrue(numpy.log(2) < bias < previous)
            previous = bias
        for n in (0, -1, 2.5):
            self.assertRaises(Invalid, estimate.median_bias, n)

    def test_segment_coverage(self):
        """Test that segments must cover the data exactly"""
        seglen, stride = 4, 2
        plan = create_forward_plan(seglen)
        for averager in _averagers:
            out = self.output(seglen)
            averager(out, self.series(10), seglen, stride, None, plan)
            self.assertEqual(len(out), seglen // 2 + 1)
            self.assertRaises(BadLength, averager, self.output(seglen),
                              self.series(9), seglen, stride, None, plan)
            self.assertRaises(BadLength, averager, self.output(seglen),
                              self.series(3), seglen, stride, None, plan)
            for bad in (0, -2, 2.):
                self.assertRaises(Invalid, averager, self.output(seglen),
                                  self.series(10), seglen, bad, None, plan)

    def test_median_mean_preconditions(self):
        # odd number of segments
        plan = create_forward_plan(4)
        self.assertRaises(BadLength, estimate.average_spectrum_median_mean,
                          self.output(4), self.series(8), 4, 2, None, plan)
        # stride below half the segment length
        plan = create_forward_plan(8)
        self.assertRaises(BadLength, estimate.average_spectrum_median_mean,
                          self.output(8), self.series(14), 8, 2, None, plan)

    def test_output_length(self):
        """Test that a mismatched output fails before anything is written"""
        seglen = 16
        plan = create_forward_plan(seglen)
        data = self.series(56)
        for averager in _averagers:
            for length in (seglen // 2, seglen // 2 + 2, seglen):
                out = FrequencySeries(numpy.full(length, 7.), delta_f=3.)
                self.assertRaises(BadLength, averager, out, data, seglen, 8,
                                  None, plan)
                self.assertTrue((out.numpy() == 7.).all())
                self.assertEqual(out.delta_f, 3.)

    def test_bad_arguments(self):
        seglen = 16
        plan = create_forward_plan(seglen)
        data = self.series(56)
        for averager in _averagers:
            self.assertRaises(Fault, averager, None, data, seglen, 8, None,
                              plan)
            self.assertRaises(Fault, averager, self.output(seglen), None,
                              seglen, 8, None, plan)
            self.assertRaises(Fault, averager, self.output(seglen), data,
                              seglen, 8, None, None)
            self.assertRaises(BadLength, averager, self.output(seglen), data,
                              seglen, 8, create_window('hann', seglen + 1),
                              plan)
            self.assertRaises(Invalid, averager, self.output(seglen), data,
                              seglen, 8, window_from_array(numpy.zeros(seglen)),
                              plan)
            self.assertRaises(Invalid, averager,
                              FrequencySeries(zeros(seglen // 2 + 1,
                                                    dtype=numpy.complex128),
                                              delta_f=1.),
                              data, seglen, 8, None, plan)
            # a plan of the wrong size fails inside the power spectrum
            self.assertRaises(FunctionFailure, averager, self.output(seglen),
                              data, seglen, 8, None,
                              create_forward_plan(2 * seglen))
            self.assertRaises(FunctionFailure, averager, self.output(seglen),
                              data, seglen, 8, None,
                              create_reverse_plan(seglen))

    def test_input_untouched(self):
        """Test that estimation leaves the data and window unchanged"""
        seglen = 32
        data = self.series(144)
        window = create_window('tukey', seglen)
        data_before = data.numpy().copy()
        window_before = window.data.numpy().copy()
        plan = create_forward_plan(seglen)
        for averager in _averagers:
            averager(self.output(seglen), data, seglen, seglen // 2, window,
                     plan)
            self.assertTrue(numpy.array_equal(data.numpy(), data_before))
            self.assertTrue(numpy.array_equal(window.data.numpy(),
                                              window_before))
            self.assertTrue(data.numpy().flags.writeable)
            self.assertEqual(data.epoch, self.epoch)

    def test_single_precision(self):
        seglen = 64
        data = self.series(4 * seglen, dtype=numpy.float32)
        out = self.output(seglen, dtype=numpy.float32)
        plan = create_forward_plan(seglen, precision='single')
        estimate.average_spectrum_median(out, data, seglen, seglen // 2,
                                         create_window('hann', seglen,
                                                       dtype=numpy.float32),
                                         plan)
        self.assertEqual(out.dtype, numpy.float32)
        self.assertTrue((out.numpy() > 0).all())

    def test_welch_options(self):
        data = self.series(1000)
        self.assertRaises(Invalid, strainspec.psd.welch, data, seg_len=64,
                          seg_stride=32, avg_method='mode')
        self.assertRaises(Invalid, strainspec.psd.welch, data, seg_len=64.,
                          seg_stride=32)
        self.assertRaises(BadLength, strainspec.psd.welch, data, seg_len=64,
                          seg_stride=32, window=numpy.ones(63))
        self.assertRaises(Invalid, strainspec.psd.welch, data, seg_len=64,
                          seg_stride=32, window='nonexistent')
        self.assertRaises(BadLength, strainspec.psd.welch, data, seg_len=64,
                          seg_stride=32, require_exact_data_fit=True)
        self.assertRaises(BadLength, strainspec.psd.welch, data, seg_len=64,
                          seg_stride=32, num_segments=40)
        self.assertRaises(BadLength, strainspec.psd.welch, data[:32],
                          seg_len=64, seg_stride=32)

        # excess data is trimmed evenly from both ends
        psd = strainspec.psd.welch(data, seg_len=64, seg_stride=32,
                                   num_segments=4, avg_method='mean')
        self.assertEqual(len(psd), 33)
        trimmed = (1000 - 160) // 2
        self.assertAlmostEqual(psd.epoch, self.epoch + trimmed * self.delta_t)
        explicit = FrequencySeries(zeros(33), delta_f=1., copy=False)
        estimate.average_spectrum_welch(explicit,
                                        data[trimmed:trimmed + 160], 64, 32,
                                        create_window('hann', 64),
                                        create_forward_plan(64))
        self.assertTrue(numpy.allclose(psd.numpy(), explicit.numpy(),
                                       rtol=1e-12, atol=0))

        # strides shorter than half a segment
        exact = self.series(160)
        psd = strainspec.psd.welch(exact, seg_len=64, seg_stride=16,
                                   avg_method='mean',
                                   require_exact_data_fit=True)
        explicit = FrequencySeries(zeros(33), delta_f=1., copy=False)
        estimate.average_spectrum_welch(explicit, exact, 64, 16,
                                        create_window('hann', 64),
                                        create_forward_plan(64))
        self.assertTrue(numpy.allclose(psd.numpy(), explicit.numpy(),
                                       rtol=1e-12, atol=0))

        psd = strainspec.psd.welch(data, seg_len=64, seg_stride=16,
                                   avg_method='median')
        # 59 segments cover 992 samples
        self.assertAlmostEqual(psd.epoch, self.epoch + 4 * self.delta_t)
        explicit = FrequencySeries(zeros(33), delta_f=1., copy=False)
        estimate.average_spectrum_median(explicit, data[4:996], 64, 16,
                                         create_window('hann', 64),
                                         create_forward_plan(64))
        self.assertTrue(numpy.allclose(psd.numpy(), explicit.numpy(),
                                       rtol=1e-12, atol=0))

        for window in (None, 'rectangular', numpy.hanning(64),
                       create_window('kaiser', 64)):
            psd = strainspec.psd.welch(data, seg_len=64, seg_stride=32,
                                       window=window, avg_method='median-mean')
            self.assertEqual(len(psd), 33)

    def test_interpolate(self):
        psd = FrequencySeries(numpy.arange(5.), delta_f=2., epoch=10.,
                              sample_units='m')
        out = strainspec.psd.interpolate(psd, 1.)
        self.assertEqual(len(out), 9)
        self.assertEqual(out.delta_f, 1.)
        self.assertEqual(out.epoch, 10.)
        self.assertEqual(out.sample_units, units.m)
        self.assertTrue(numpy.allclose(out.numpy(), numpy.arange(9.) / 2))


class TestInvertTruncate(unittest.TestCase):
    def setUp(self):
        self.seglen = 128
        rng = numpy.random.RandomState(8765)
        self.values = rng.uniform(1., 2., size=self.seglen // 2 + 1)
        self.delta_f = 0.5

    def spectrum(self):
        return FrequencySeries(self.values.copy(), delta_f=self.delta_f,
                               sample_units=units.m ** 2 * units.s)

    def test_no_truncation(self):
        for low_freq, cut in ((0., 1), (0.2, 1), (2.5, 5), (2.7, 5)):
            spectrum = self.spectrum()
            estimate.spectrum_invert_truncate(spectrum, low_freq, self.seglen)
            out = spectrum.numpy()
            self.assertTrue((out[:cut] == 0).all())
            self.assertEqual(out[-1], 0)
            self.assertTrue(numpy.allclose(out[cut:-1],
                                           1. / self.values[cut:-1],
                                           rtol=1e-14, atol=0))
            self.assertEqual(spectrum.sample_units,
                             units.m ** -2 * units.s ** -1)

    def test_full_length_truncation(self):
        """Test that a filter as long as the segment is not truncated"""
        spectrum = self.spectrum()
        expected = self.spectrum()
        estimate.spectrum_invert_truncate(expected, 3., self.seglen)
        estimate.spectrum_invert_truncate(spectrum, 3., self.seglen,
                                          self.seglen,
                                          create_forward_plan(self.seglen),
                                          create_reverse_plan(self.seglen))
        self.assertTrue(numpy.allclose(spectrum.numpy(), expected.numpy(),
                                       rtol=1e-10, atol=1e-14))
        self.assertEqual(spectrum.sample_units, expected.sample_units)

    def test_truncation_flat(self):
        """Test that truncation keeps a flat inverse spectrum flat away from
        the zeroed DC and Nyquist bins
        """
        spectrum = FrequencySeries(numpy.full(self.seglen // 2 + 1, 4.),
                                   delta_f=self.delta_f)
        estimate.spectrum_invert_truncate(spectrum, 0., self.seglen, 32,
                                          create_forward_plan(self.seglen),
                                          create_reverse_plan(self.seglen))
        out = spectrum.numpy()
        self.assertEqual(out[0], 0)
        self.assertEqual(out[-1], 0)
        self.assertTrue((out[1:-1] > 0).all())
        self.assertTrue(numpy.allclose(out[24:41], 0.25, rtol=0.1, atol=0))

    def test_bad_arguments(self):
        seglen = self.seglen
        fwd = create_forward_plan(seglen)
        rev = create_reverse_plan(seglen)
        invert = estimate.spectrum_invert_truncate
        self.assertRaises(Fault, invert, None, 0., seglen)
        self.assertRaises(Fault, invert, self.spectrum(), 0., seglen, 16)
        self.assertRaises(Fault, invert, self.spectrum(), 0., seglen, 16,
                          fwd, None)
        self.assertRaises(BadLength, invert, self.spectrum(), 0., seglen,
                          seglen + 2, fwd, rev)
        self.assertRaises(BadLength, invert, self.spectrum(), 0., seglen + 4)
        self.assertRaises(BadLength, invert, self.spectrum(), 0., 0)
        self.assertRaises(Invalid, invert, self.spectrum(), -1., seglen)
        self.assertRaises(Invalid, invert, self.spectrum(), 100., seglen)
        self.assertRaises(Invalid, invert, self.spectrum(), 0., seglen, -1)
        # plans of the wrong size are caught by the transforms
        self.assertRaises(FunctionFailure, invert, self.spectrum(), 0.,
                          seglen, 16, create_forward_plan(2 * seglen), rev)


class TestWhiten(unittest.TestCase):
    def setUp(self):
        rng = numpy.random.RandomState(2468)
        self.delta_f = 0.25
        self.length = 33
        self.data = rng.normal(size=self.length) + \
            1j * rng.normal(size=self.length)

    def fseries(self, f0=0., length=None):
        length = length or self.length
        return FrequencySeries(self.data[:length].copy(), delta_f=self.delta_f,
                               f0=f0)

    def psd(self, value=None, length=None, f0=0.):
        length = length or self.length
        if value is None:
            value = 2 * self.delta_f
        return FrequencySeries(numpy.full(length, value),
                               delta_f=self.delta_f, f0=f0)

    def test_unit_scale(self):
        fseries = self.fseries()
        out = estimate.whiten(fseries, self.psd(), 0., 100.)
        self.assertIs(out, fseries)
        self.assertTrue(numpy.array_equal(fseries.numpy(), self.data))

    def test_scale(self):
        fseries = self.fseries()
        estimate.whiten(fseries, self.psd(value=8 * self.delta_f), 0., 100.)
        self.assertTrue(numpy.allclose(fseries.numpy(), self.data / 2.,
                                       rtol=1e-14, atol=0))

    def test_zero_in_band(self):
        psd = self.psd()
        psd[10] = 0.
        fseries = self.fseries()
        # bin 10 is at 2.5 Hz
        self.assertRaises(FloatingPointDivideByZero, estimate.whiten,
                          fseries, psd, 2., 3.)
        self.assertRaises(FloatingPointDivideByZero, estimate.whiten,
                          fseries, psd, 2.5, 3.)
        self.assertTrue(numpy.array_equal(fseries.numpy(), self.data))

    def test_zero_out_of_band(self):
        psd = self.psd()
        psd[10] = 0.
        psd[0] = 0.
        for fmin, fmax in ((3., 8.), (0.25, 2.5)):
            fseries = self.fseries()
            estimate.whiten(fseries, psd, fmin, fmax)
            out = fseries.numpy()
            self.assertEqual(out[10], 0)
            self.assertEqual(out[0], 0)
            keep = numpy.ones(self.length, dtype=bool)
            keep[[0, 10]] = False
            self.assertTrue(numpy.array_equal(out[keep], self.data[keep]))

    def test_offset_series(self):
        """Test a frequency series starting above the PSD"""
        values = numpy.arange(1., 65.)
        psd = FrequencySeries(values, delta_f=self.delta_f)
        fseries = self.fseries(f0=10 * self.delta_f, length=20)
        estimate.whiten(fseries, psd, 0., 100.)
        expected = self.data[:20] * numpy.sqrt(2 * self.delta_f /
                                               values[10:30])
        self.assertTrue(numpy.allclose(fseries.numpy(), expected,
                                       rtol=1e-14, atol=0))

    def test_single_precision(self):
        fseries = FrequencySeries(self.data, delta_f=self.delta_f,
                                  dtype=numpy.complex64)
        estimate.whiten(fseries, self.psd(value=8 * self.delta_f), 0., 100.)
        self.assertEqual(fseries.dtype, numpy.complex64)
        self.assertTrue(numpy.allclose(fseries.numpy(), self.data / 2.,
                                       rtol=1e-6, atol=0))

    def test_bad_arguments(self):
        whiten = estimate.whiten
        self.assertRaises(Fault, whiten, None, self.psd(), 0., 1.)
        self.assertRaises(Fault, whiten, self.fseries(), None, 0., 1.)
        # resolution mismatch
        psd = FrequencySeries(numpy.ones(self.length), delta_f=0.5)
        self.assertRaises(Invalid, whiten, self.fseries(), psd, 0., 1.)
        # psd starting above the series
        self.assertRaises(Invalid, whiten, self.fseries(),
                          self.psd(f0=self.delta_f), 0., 1.)
        # series not starting on a psd sample
        self.assertRaises(Invalid, whiten, self.fseries(f0=0.1,
                          length=10), self.psd(), 0., 1.)
        # psd too short
        self.assertRaises(Invalid, whiten, self.fseries(),
                          self.psd(length=self.length - 1), 0., 1.)
        self.assertRaises(Invalid, whiten,
                          self.fseries(f0=2 * self.delta_f, length=32),
                          self.psd(), 0., 1.)
        # real series
        self.assertRaises(Invalid, whiten, self.psd(), self.psd(), 0., 1.)


suite = unittest.TestSuite()
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(TestPSD))
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(TestAverageSpectrum))
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(TestInvertTruncate))
suite.addTest(unittest.TestLoader().loadTestsFromTestCase(TestWhiten))

if __name__ == '__main__':
    results = unittest.TextTestRunner(verbosity=2).run(suite)
    simple_exit(results)
