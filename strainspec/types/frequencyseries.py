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

"""
Provides a class representing a frequency series.
"""
import os as _os

import h5py
import numpy as _numpy
from astropy import units as _units

from strainspec.types.array import Array


def as_unit(unit):
    """Return `unit` as an astropy unit. None means dimensionless."""
    if unit is None:
        return _units.dimensionless_unscaled
    return _units.Unit(unit)


def as_epoch(epoch):
    """Return `epoch` as a float number of GPS seconds."""
    if epoch is None:
        return 0.
    try:
        return float(epoch)
    except (TypeError, ValueError):
        raise TypeError('epoch must be a number of GPS seconds, '
                        'not {!r}'.format(epoch))


class FrequencySeries(Array):
    """Models a frequency series consisting of uniformly sampled scalar values.

    Parameters
    ----------
    initial_array : array-like
        Array containing sampled data.
    delta_f : float
        Frequency between consecutive samples in Hertz.
    epoch : {None, float}, optional
        Start time of the associated time domain data in GPS seconds.
    dtype : {None, data-type}, optional
        Sample data type.
    copy : boolean, optional
        If True, samples are copied to a new array.
    f0 : {None, float}, optional
        Frequency of the first sample in Hertz.
    sample_units : {None, astropy unit or str}, optional
        Physical units of the samples.
    """

    def __init__(self, initial_array, delta_f=None, epoch="", dtype=None,
                 copy=True, f0=None, sample_units=None):
        if len(initial_array) < 1:
            raise ValueError('initial_array must contain at least one sample.')
        if delta_f is None:
            try:
                delta_f = initial_array.delta_f
            except AttributeError:
                raise TypeError('must provide either an initial_array with a delta_f attribute, or a value for delta_f')
        if not delta_f > 0:
            raise ValueError('delta_f must be a positive number')
        # Metadata not given explicitly is inherited from initial_array when
        # that is a frequency series; epoch uses "" for "not given" so that
        # None can still be passed to mean zero.
        inherit = isinstance(initial_array, FrequencySeries)
        if isinstance(epoch, str) and epoch == "":
            epoch = initial_array._epoch if inherit else None
        if f0 is None:
            f0 = initial_array._f0 if inherit else 0.
        if sample_units is None and inherit:
            sample_units = initial_array._sample_units

        Array.__init__(self, initial_array, dtype=dtype, copy=copy)
        self._delta_f = delta_f
        self._epoch = as_epoch(epoch)
        self._f0 = float(f0)
        self._sample_units = as_unit(sample_units)

    def _return(self, ary):
        return FrequencySeries(ary, self._delta_f, epoch=self._epoch,
                               copy=False, f0=self._f0,
                               sample_units=self._sample_units)

    def _typecheck(self, other):
        if isinstance(other, FrequencySeries):
            if not _numpy.isclose(other._delta_f, self._delta_f,
                                  rtol=1e-7, atol=0):
                raise ValueError('different delta_f')
            # consistency of _epoch is not required because we may want
            # to combine frequency series estimated at different times
            # (e.g. PSD estimation)

    def get_delta_f(self):
        """Return frequency between consecutive samples in Hertz.
        """
        return self._delta_f
    delta_f = property(get_delta_f,
                       doc="Frequency between consecutive samples in Hertz.")

    def get_epoch(self):
        """Return frequency series epoch in GPS seconds.
        """
        return self._epoch
    epoch = property(get_epoch,
                     doc="Frequency series epoch in GPS seconds.")

    @property
    def f0(self):
        """Frequency of the first sample in Hertz."""
        return self._f0

    @property
    def sample_units(self):
        """Physical units of the samples, as an astropy unit."""
        return self._sample_units

    def get_sample_frequencies(self):
        """Return an Array containing the sample frequencies.
        """
        return Array(self._f0 + _numpy.arange(len(self)) * self._delta_f)
    sample_frequencies = property(get_sample_frequencies,
                                  doc="Array of the sample frequencies.")

    def _getslice(self, index):
        start = index.start or 0
        if start < 0:
            start += len(self)
        if index.step is not None:
            new_delta_f = self._delta_f * index.step
        else:
            new_delta_f = self._delta_f
        return FrequencySeries(self._data[index],
                               delta_f=new_delta_f,
                               epoch=self._epoch,
                               copy=False,
                               f0=self._f0 + start * self._delta_f,
                               sample_units=self._sample_units)

    def at_frequency(self, freq):
        """ Return the value at the specified frequency
        """
        return self[int((freq - self._f0) / self.delta_f)]

    @property
    def start_time(self):
        """Return the start time of this vector
        """
        return self.epoch

    @property
    def duration(self):
        """Return the time duration of this vector
        """
        return 1.0 / self.delta_f

    @property
    def delta_t(self):
        """Return the time between samples if this were a time series.
        This assume the time series is even in length!
        """
        return 1.0 / self.sample_rate

    @property
    def sample_rate(self):
        """Return the sample rate this would have in the time domain. This
        assumes even length time series!
        """
        return (len(self) - 1) * self.delta_f * 2.0

    def __eq__(self,other):
        """
        Return True if the types, dtypes, lengths, data and all metadata
        (epoch, delta_f, f0, sample_units) of the two objects are identical.
        """
        if super(FrequencySeries,self).__eq__(other):
            return (self._epoch == other._epoch and
                    self._delta_f == other._delta_f and
                    self._f0 == other._f0 and
                    self._sample_units == other._sample_units)
        else:
            return False

    def almost_equal_elem(self,other,tol,relative=True,dtol=0.0):
        """
        Compare whether two frequency series are almost equal, element
        by element.

        The data comparison is that of :meth:`Array.almost_equal_elem`.
        The method also checks that self.delta_f is within 'dtol' of
        other.delta_f; if 'dtol' has its default value of 0 then exact
        equality between the two is required. Epochs must be exactly equal.
        """
        if (dtol < 0.0):
            raise ValueError("Tolerance in delta_f cannot be negative")
        if super(FrequencySeries,self).almost_equal_elem(other,tol=tol,relative=relative):
            if relative:
                return (self._epoch == other._epoch and
                        abs(self._delta_f-other._delta_f) <= dtol*self._delta_f)
            else:
                return (self._epoch == other._epoch and
                        abs(self._delta_f-other._delta_f) <= dtol)
        else:
            return False

    def save(self, path, group=None):
        """
        Save frequency series to a Numpy .npy, hdf, or text file. The first
        column contains the sample frequencies, the second contains the
        values. In the case of a complex frequency series saved as text, the
        imaginary part is written as a third column. When using hdf format,
        the data is stored as a single vector, along with its metadata as
        attributes.

        Parameters
        ----------
        path: string
            Destination file path. Must end with either .hdf, .npy or .txt.
        group: string
            Additional name for internal storage use. Ex. hdf storage uses
            this as the key value.

        Raises
        ------
        ValueError
            If path does not end in .npy, .txt or .hdf.
        """
        ext = _os.path.splitext(path)[1]
        if ext == '.npy':
            output = _numpy.vstack((self.sample_frequencies.numpy(),
                                    self.numpy())).T
            _numpy.save(path, output)
        elif ext == '.txt':
            if self.kind == 'real':
                output = _numpy.vstack((self.sample_frequencies.numpy(),
                                        self.numpy())).T
            elif self.kind == 'complex':
                output = _numpy.vstack((self.sample_frequencies.numpy(),
                                        self.numpy().real,
                                        self.numpy().imag)).T
            _numpy.savetxt(path, output)
        elif ext == '.hdf':
            key = 'data' if group is None else group
            with h5py.File(path, 'a') as f:
                ds = f.create_dataset(key, data=self.numpy(),
                                      compression='gzip',
                                      compression_opts=9, shuffle=True)
                ds.attrs['epoch'] = float(self.epoch)
                ds.attrs['delta_f'] = float(self.delta_f)
                ds.attrs['f0'] = float(self.f0)
                ds.attrs['sample_units'] = self.sample_units.to_string()
        else:
            raise ValueError('Path must end with .npy, .txt or .hdf')


def load_frequencyseries(path, group=None):
    """Load a FrequencySeries from an HDF5, ASCII or Numpy file. The file type
    is inferred from the file extension, which must be `.hdf`, `.txt` or
    `.npy`.

    For ASCII and Numpy files, the first column of the array is assumed to
    contain the frequency. If the array has two columns, a real frequency
    series is returned. If the array has three columns, the second and third
    ones are assumed to contain the real and imaginary parts of a complex
    frequency series.

    For HDF files, the dataset carries the `delta_f`, `epoch`, `f0` and
    `sample_units` attributes written by :meth:`FrequencySeries.save`.

    Parameters
    ----------
    path: string
        Input file path. Must end with either `.npy`, `.txt` or `.hdf`.
    group: string
        When reading HDF files, the path to the HDF dataset to read.

    Raises
    ------
    ValueError
        If the path does not end in a supported extension.
        For Numpy and ASCII input files, this is also raised if the array
        does not have 2 or 3 columns.
    """
    ext = _os.path.splitext(path)[1]
    if ext == '.npy':
        data = _numpy.load(path)
    elif ext == '.txt':
        data = _numpy.loadtxt(path)
    elif ext == '.hdf':
        key = 'data' if group is None else group
        with h5py.File(path, 'r') as f:
            attrs = f[key].attrs
            series = FrequencySeries(f[key][:], delta_f=attrs['delta_f'],
                                     epoch=attrs.get('epoch', None),
                                     f0=attrs.get('f0', None),
                                     sample_units=attrs.get('sample_units',
                                                            None))
        return series
    else:
        raise ValueError('Path must end with .npy, .hdf, or .txt')

    delta_f = (data[-1][0] - data[0][0]) / (len(data) - 1)
    if data.shape[1] == 2:
        return FrequencySeries(data[:,1], delta_f=delta_f, epoch=None,
                               f0=data[0][0])
    elif data.shape[1] == 3:
        return FrequencySeries(data[:,1] + 1j*data[:,2], delta_f=delta_f,
                               epoch=None, f0=data[0][0])

    raise ValueError('File has %s columns, cannot convert to FrequencySeries, '
                     'must be 2 (real) or 3 (complex)' % data.shape[1])
