# Copyright (C) 2014  Tito Dal Canton, Josh Willis, Alex Nitz
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
Provides a class representing a time series.
"""
import os as _os

import h5py
import numpy as _numpy

from strainspec.types.array import Array
from strainspec.types.frequencyseries import as_epoch, as_unit


class TimeSeries(Array):
    """Models a time series consisting of uniformly sampled scalar values.

    Parameters
    ----------
    initial_array : array-like
        Array containing sampled data.
    delta_t : float
        Time between consecutive samples in seconds.
    epoch : {None, float}, optional
        Time of the first sample in GPS seconds.
    dtype : {None, data-type}, optional
        Sample data type.
    copy : boolean, optional
        If True, samples are copied to a new array.
    f0 : {None, float}, optional
        Heterodyne frequency of the data in Hertz.
    sample_units : {None, astropy unit or str}, optional
        Physical units of the samples.
    """

    def __init__(self, initial_array, delta_t=None,
                 epoch=None, dtype=None, copy=True, f0=None,
                 sample_units=None):
        if len(initial_array) < 1:
            raise ValueError('initial_array must contain at least one sample.')
        if delta_t is None:
            try:
                delta_t = initial_array.delta_t
            except AttributeError:
                raise TypeError('must provide either an initial_array with a delta_t attribute, or a value for delta_t')
        if not delta_t > 0:
            raise ValueError('delta_t must be a positive number')

        # Get metadata from initial_array if not given (or given as None).
        inherit = isinstance(initial_array, TimeSeries)
        if epoch is None and inherit:
            epoch = initial_array._epoch
        if f0 is None:
            f0 = initial_array._f0 if inherit else 0.
        if sample_units is None and inherit:
            sample_units = initial_array._sample_units

        Array.__init__(self, initial_array, dtype=dtype, copy=copy)
        self._delta_t = delta_t
        self._epoch = as_epoch(epoch)
        self._f0 = float(f0)
        self._sample_units = as_unit(sample_units)

    def epoch_close(self, other):
        """ Check if the epoch is close enough to allow operations """
        dt = abs(float(self.start_time - other.start_time))
        return dt <= 1e-7

    def sample_rate_close(self, other):
        """ Check if the sample rate is close enough to allow operations """

        # compare our delta_t either to a another time series' or
        # to a given sample rate (float)
        if isinstance(other, TimeSeries):
            odelta_t = other.delta_t
        else:
            odelta_t = 1.0/other

        if (odelta_t - self.delta_t) / self.delta_t > 1e-4:
            return False

        if abs(1 - odelta_t / self.delta_t) * len(self) > 0.5:
            return False

        return True

    def _return(self, ary):
        return TimeSeries(ary, self._delta_t, epoch=self._epoch, copy=False,
                          f0=self._f0, sample_units=self._sample_units)

    def _typecheck(self, other):
        if isinstance(other, TimeSeries):
            if not self.sample_rate_close(other):
                raise ValueError('different delta_t, {} vs {}'.format(
                    self.delta_t, other.delta_t))
            if not self.epoch_close(other):
                raise ValueError('different epoch, {} vs {}'.format(
                    self.start_time, other.start_time))

    def _getslice(self, index):
        # Set the new epoch---note that index.start may also be None
        if index.start is None:
            new_epoch = self._epoch
        else:
            if index.start < 0:
                raise ValueError(('Negative start index ({})'
                                  ' not supported').format(index.start))
            new_epoch = self._epoch + index.start * self._delta_t

        if index.step is not None:
            new_delta_t = self._delta_t * index.step
        else:
            new_delta_t = self._delta_t

        return TimeSeries(self._data[index], new_delta_t,
                          new_epoch, copy=False, f0=self._f0,
                          sample_units=self._sample_units)

    def get_delta_t(self):
        """Return time between consecutive samples in seconds.
        """
        return self._delta_t
    delta_t = property(get_delta_t,
                       doc="Time between consecutive samples in seconds.")

    def get_duration(self):
        """Return duration of time series in seconds.
        """
        return len(self) * self._delta_t
    duration = property(get_duration,
                        doc="Duration of time series in seconds.")

    def get_sample_rate(self):
        """Return the sample rate of the time series.
        """
        return 1.0/self.delta_t
    sample_rate = property(get_sample_rate,
                           doc="The sample rate of the time series.")

    def get_start_time(self):
        """Return time series start time in GPS seconds.
        """
        return self._epoch
    start_time = property(get_start_time,
                          doc="Time series start time in GPS seconds.")

    def get_end_time(self):
        """Return time series end time in GPS seconds.
        """
        return self._epoch + self.get_duration()
    end_time = property(get_end_time,
                        doc="Time series end time in GPS seconds.")

    def get_sample_times(self):
        """Return an Array containing the sample times.
        """
        return Array(self._epoch + _numpy.arange(len(self)) * self._delta_t)
    sample_times = property(get_sample_times,
                            doc="Array containing the sample times.")

    @property
    def epoch(self):
        """Time of the first sample in GPS seconds."""
        return self._epoch

    @property
    def f0(self):
        """Heterodyne frequency of the data in Hertz."""
        return self._f0

    @property
    def sample_units(self):
        """Physical units of the samples, as an astropy unit."""
        return self._sample_units

    def __eq__(self,other):
        """
        Return True if the types, dtypes, lengths, data and all metadata
        (epoch, delta_t, f0, sample_units) of the two objects are identical.
        """
        if super(TimeSeries,self).__eq__(other):
            return (self._epoch == other._epoch and
                    self._delta_t == other._delta_t and
                    self._f0 == other._f0 and
                    self._sample_units == other._sample_units)
        else:
            return False

    def save(self, path, group=None):
        """
        Save time series to a Numpy .npy, hdf, or text file. The first column
        contains the sample times, the second contains the values.
        When using hdf format, the data is stored as a single vector, along
        with its metadata as attributes.

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
        if ext in ('.npy', '.txt'):
            output = _numpy.vstack((self.sample_times.numpy(),
                                    self.numpy())).T
            if ext == '.npy':
                _numpy.save(path, output)
            else:
                _numpy.savetxt(path, output)
        elif ext == '.hdf':
            key = 'data' if group is None else group
            with h5py.File(path, 'a') as f:
                ds = f.create_dataset(key, data=self.numpy(),
                                      compression='gzip',
                                      compression_opts=9, shuffle=True)
                ds.attrs['start_time'] = float(self.start_time)
                ds.attrs['delta_t'] = float(self.delta_t)
                ds.attrs['f0'] = float(self.f0)
                ds.attrs['sample_units'] = self.sample_units.to_string()
        else:
            raise ValueError('Path must end with .npy, .txt or .hdf')


def load_timeseries(path, group=None):
    """Load a TimeSeries from an HDF5, ASCII or Numpy file. The file type is
    inferred from the file extension, which must be `.hdf`, `.txt` or `.npy`.

    For ASCII and Numpy files, the first column of the array is assumed to
    contain the sample times and the second the sample values.

    Parameters
    ----------
    path: string
        Input file path. Must end with either `.npy`, `.txt` or `.hdf`.
    group: string
        When reading HDF files, the path to the HDF dataset to read.

    Raises
    ------
    ValueError
        If path does not end in a supported extension, or the array does
        not have two columns.
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
            series = TimeSeries(f[key][:], delta_t=attrs['delta_t'],
                                epoch=attrs.get('start_time', None),
                                f0=attrs.get('f0', None),
                                sample_units=attrs.get('sample_units', None))
        return series
    else:
        raise ValueError('Path must end with .npy, .hdf, or .txt')

    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError('Input must have two columns, time and value')
    delta_t = (data[-1][0] - data[0][0]) / (len(data) - 1)
    return TimeSeries(data[:,1], delta_t=delta_t, epoch=data[0][0])
