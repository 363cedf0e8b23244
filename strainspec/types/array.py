# Copyright (C) 2012  Alex Nitz, Josh Willis, Andrew Miller, Tito Dal Canton
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
This modules provides the Array class, a thin wrapper around a one
dimensional numpy array that the time and frequency series build on.
"""

from functools import wraps

import numpy as _numpy
from numpy import float32, float64, complex64, complex128

_ALLOWED_DTYPES = [_numpy.float32, _numpy.float64, _numpy.complex64,
                   _numpy.complex128]
_ALLOWED_SCALARS = [int, float, complex] + _ALLOWED_DTYPES


def force_precision_to_match(scalar, precision):
    if _numpy.iscomplexobj(scalar):
        if precision == 'single':
            return _numpy.complex64(scalar)
        else:
            return _numpy.complex128(scalar)
    else:
        if precision == 'single':
            return _numpy.float32(scalar)
        else:
            return _numpy.float64(scalar)


def check_same_len_precision(a, b):
    """Check that the two arguments have the same length and precision.
    Raises ValueError if they do not.
    """
    if len(a) != len(b):
        msg = 'lengths do not match ({} vs {})'.format(
                len(a), len(b))
        raise ValueError(msg)
    if a.precision != b.precision:
        msg = 'precisions do not match ({} vs {})'.format(
                a.precision, b.precision)
        raise TypeError(msg)


class Array(object):
    """Array used to do numeric calculations. It is a convenience wrapper
    around a one dimensional numpy array.

    Parameters
    ----------
    initial_array : array-like
        An array-like object as specified by NumPy, or another Array. This
        object is used to populate the data of the array.
    dtype : {None, data-type}
        A NumPy style dtype that describes the type of encapsulated data
        (float32, complex64, etc).
    copy : boolean
        Whether the initial_array is copied or simply referenced. If copy
        is False the data is not duplicated and `dtype` must either be
        None or agree with the data.
    """

    def __init__(self, initial_array, dtype=None, copy=True):
        if isinstance(initial_array, Array):
            initial_array = initial_array._data

        if not copy:
            if not isinstance(initial_array, _numpy.ndarray):
                raise TypeError("Cannot avoid a copy of this array")
            self._data = initial_array

            if self._data.dtype not in _ALLOWED_DTYPES:
                raise TypeError(str(self._data.dtype) + ' is not supported')

            if dtype and dtype != self._data.dtype:
                raise TypeError("Can only set dtype when allowed to copy data")
        else:
            if not hasattr(initial_array, 'dtype'):
                initial_array = _numpy.array(initial_array)

            if dtype is not None:
                dtype = _numpy.dtype(dtype)
                if dtype not in _ALLOWED_DTYPES:
                    raise TypeError(str(dtype) + ' is not supported')
                if dtype.kind != 'c' and initial_array.dtype.kind == 'c':
                    raise TypeError(str(initial_array.dtype) +
                                    ' cannot be cast as ' + str(dtype))
            elif initial_array.dtype in _ALLOWED_DTYPES:
                dtype = initial_array.dtype
            else:
                if initial_array.dtype.kind == 'c':
                    dtype = complex128
                else:
                    dtype = float64

            self._data = _numpy.array(initial_array, dtype=dtype, ndmin=1)

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        inputs = [i.numpy() if isinstance(i, Array) else i for i in inputs]
        ret = getattr(ufunc, method)(*inputs, **kwargs)
        if hasattr(ret, 'shape') and ret.shape == self.shape:
            ret = self._return(ret)
        return ret

    def __array__(self, dtype=None, copy=None):
        arr = self.numpy()
        if dtype is not None:
            arr = arr.astype(dtype)
        return arr

    @property
    def shape(self):
        return self._data.shape

    def _returntype(func):
        @wraps(func)
        def returntype(self, *args, **kwargs):
            ary = func(self, *args, **kwargs) # pylint:disable=not-callable
            if ary is NotImplemented:
                return NotImplemented
            return self._return(ary)
        return returntype

    def _return(self, ary):
        """Wrap the ary to return an Array type """
        if isinstance(ary, Array):
            return ary
        return Array(ary, copy=False)

    def _checkother(func):
        @wraps(func)
        def checkother(self, *args):
            nargs = ()
            for other in args:
                self._typecheck(other)
                if type(other) in _ALLOWED_SCALARS:
                    other = force_precision_to_match(other, self.precision)
                    nargs +=(other,)
                elif isinstance(other, type(self)) or type(other) is Array:
                    check_same_len_precision(self, other)
                    nargs += (other._data,)
                else:
                    return NotImplemented

            return func(self, *nargs) # pylint:disable=not-callable
        return checkother

    def _icheckother(func):
        @wraps(func)
        def icheckother(self, other):
            """ Checks the input to in-place operations """
            self._typecheck(other)
            if type(other) in _ALLOWED_SCALARS:
                if self.kind == 'real' and type(other) == complex:
                    raise TypeError('dtypes are incompatible')
                other = force_precision_to_match(other, self.precision)
            elif isinstance(other, type(self)) or type(other) is Array:
                check_same_len_precision(self, other)
                if self.kind == 'real' and other.kind == 'complex':
                    raise TypeError('dtypes are incompatible')
                other = other._data
            else:
                return NotImplemented

            return func(self, other) # pylint:disable=not-callable
        return icheckother

    def _typecheck(self, other):
        """ Additional typechecking for other. Placeholder for use by derived
        types.
        """
        pass

    @_returntype
    @_checkother
    def __mul__(self,other):
        """ Multiply by an Array or a scalar and return an Array. """
        return self._data * other

    __rmul__ = __mul__

    @_icheckother
    def __imul__(self,other):
        """ Multiply by an Array or a scalar and return an Array. """
        self._data *= other
        return self

    @_returntype
    @_checkother
    def __add__(self,other):
        """ Add Array to Array or scalar and return an Array. """
        return self._data + other

    __radd__ = __add__

    @_icheckother
    def __iadd__(self,other):
        """ Add Array to Array or scalar and return an Array. """
        self._data += other
        return self

    @_returntype
    @_checkother
    def __truediv__(self,other):
        """ Divide Array by Array or scalar and return an Array. """
        return self._data / other

    @_returntype
    @_checkother
    def __rtruediv__(self,other):
        """ Divide Array by Array or scalar and return an Array. """
        return self._data.__rtruediv__(other)

    @_icheckother
    def __itruediv__(self,other):
        """ Divide Array by Array or scalar and return an Array. """
        self._data /= other
        return self

    @_returntype
    def __neg__(self):
        """ Return negation of self """
        return - self._data

    @_returntype
    @_checkother
    def __sub__(self,other):
        """ Subtract Array or scalar from Array and return an Array. """
        return self._data - other

    @_returntype
    @_checkother
    def __rsub__(self,other):
        """ Subtract Array or scalar from Array and return an Array. """
        return self._data.__rsub__(other)

    @_icheckother
    def __isub__(self,other):
        """ Subtract Array or scalar from Array and return an Array. """
        self._data -= other
        return self

    @_returntype
    @_checkother
    def __pow__(self,other):
        """ Exponentiate Array by scalar """
        return self._data ** other

    @_returntype
    def __abs__(self):
        """ Return absolute value of Array """
        return abs(self._data)

    def __len__(self):
        """ Return length of Array """
        return len(self._data)

    def __str__(self):
        return str(self._data)

    def __eq__(self,other):
        """
        Return True if the types, dtypes, lengths and data of the two
        objects are each identical. Unlike numpy this returns a single
        boolean; use the numpy() method of both objects for an elementwise
        comparison.
        """
        if type(self) != type(other):
            return False
        if self.dtype != other.dtype:
            return False
        if len(self) != len(other):
            return False

        return (self.numpy() == other.numpy()).all()

    def almost_equal_elem(self,other,tol,relative=True):
        """Return True if `other` has the same type, dtype and length as
        this array and every element agrees within `tol`.

        With `relative` the bound for element i is ``tol * abs(self[i])``,
        otherwise it is `tol` itself.
        """
        if (tol<0):
            raise ValueError("Tolerance cannot be negative")
        if type(other) != type(self):
            return False
        if self.dtype != other.dtype:
            return False
        if len(self) != len(other):
            return False

        diff = abs(self.numpy()-other.numpy())
        if relative:
            cmpary = tol*abs(self.numpy())
        else:
            cmpary = tol

        return (diff<=cmpary).all()

    def clear(self):
        """ Clear out the values of the array. """
        self._data[:] = 0

    def sum(self):
        """ Return the sum of the the array. """
        return self._data.sum()

    def _getslice(self, index):
        return self._return(self._data[index])

    def __getitem__(self, index):
        """ Return items from the Array. Slices share memory with self. """
        if isinstance(index, slice):
            return self._getslice(index)
        else:
            return self._data[index]

    def __setitem__(self, index, other):
        if isinstance(other, Array):
            if self.kind == 'real' and other.kind == 'complex':
                raise ValueError('Cannot set real value with complex')
            self._data[index] = other._data
        elif type(other) in _ALLOWED_SCALARS or _numpy.isscalar(other):
            self._data[index] = other
        elif isinstance(other, _numpy.ndarray):
            if self.kind == 'real' and other.dtype.kind == 'c':
                raise ValueError('Cannot set real value with complex')
            self._data[index] = other
        else:
            raise TypeError('Can only copy data from another Array')

    @property
    def precision(self):
        if self.dtype == float32 or self.dtype == complex64:
            return 'single'
        else:
            return 'double'

    @property
    def kind(self):
        if self.dtype == float32 or self.dtype == float64:
            return 'real'
        elif self.dtype == complex64 or self.dtype == complex128:
            return 'complex'
        else:
            return 'unknown'

    @property
    def data(self):
        """Returns the internal numpy array """
        return self._data

    def numpy(self):
        """ Returns a Numpy Array that contains this data """
        return self._data

    @property
    def dtype(self):
        return self._data.dtype

    @_returntype
    def astype(self, dtype):
        if _numpy.dtype(self.dtype) == _numpy.dtype(dtype):
            return self
        else:
            return self._data.astype(dtype)


# Convenience functions for determining dtypes
def real_same_precision_as(data):
    if data.precision == 'single':
        return float32
    elif data.precision == 'double':
        return float64


def complex_same_precision_as(data):
    if data.precision == 'single':
        return complex64
    elif data.precision == 'double':
        return complex128


def zeros(length, dtype=float64):
    """ Return an Array filled with zeros.
    """
    return Array(_numpy.zeros(length, dtype=dtype), copy=False)
