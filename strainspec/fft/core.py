# Copyright (C) 2012  Josh Willis, Andrew Miller
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
Plan objects and argument checking shared by all FFT backends.
"""
import numpy

from strainspec.types import Array as _Array
from strainspec.errors import Fault, Invalid, BadLength

_precisions = {'single': (numpy.float32, numpy.complex64),
               'double': (numpy.float64, numpy.complex128)}

# The following helper function is in this module because it is used by
# backend_support to build the list of available backends. It cannot go in
# backend_support itself as that would cause circular imports.

def _list_available(possible_list, possible_dict):
    # The name the user specifies for a backend, e.g. 'numpy', need not be
    # the name of the submodule implementing it, so we keep a dict mapping
    # one to the other. The list gives the order of preference.
    available_list = []
    available_dict = {}
    for backend in possible_list:
        try:
            mod = __import__('strainspec.fft.' + possible_dict[backend],
                             fromlist=['strainspec.fft'])
            available_dict.update({backend:mod})
            available_list.append(backend)
        except (ImportError, OSError):
            pass
    return available_list, available_dict


class FFTPlan(object):
    """A plan for real-to-complex (forward) or complex-to-real (reverse)
    transforms of one fixed length.

    Plans are created by :func:`create_forward_plan` and
    :func:`create_reverse_plan`. They hold no buffers, so a single plan can
    be reused by any number of calls and shipped to worker processes.

    Parameters
    ----------
    size : int
        Length of the real time-domain vector.
    forward : bool
        True for a real-to-complex plan, False for complex-to-real.
    precision : {'double', 'single'}
        Precision in which the transform is carried out.
    backend : str
        Name of the backend executing the transform.
    """
    def __init__(self, size, forward, precision, backend):
        if type(size) is not int or size <= 0:
            raise Invalid('plan size must be a positive integer, '
                          'not {!r}'.format(size), func='FFTPlan')
        if precision not in _precisions:
            raise Invalid('precision must be single or double, '
                          'not {!r}'.format(precision), func='FFTPlan')
        self.size = size
        self.forward = forward
        self.precision = precision
        self.backend = backend

    @property
    def real_dtype(self):
        return _precisions[self.precision][0]

    @property
    def complex_dtype(self):
        return _precisions[self.precision][1]

    @property
    def freq_size(self):
        """Number of bins of the one-sided complex vector."""
        return self.size // 2 + 1

    def __repr__(self):
        return '<FFTPlan {} size={} precision={} backend={}>'.format(
            'forward' if self.forward else 'reverse', self.size,
            self.precision, self.backend)

    def __eq__(self, other):
        return (isinstance(other, FFTPlan) and
                (self.size, self.forward, self.precision) ==
                (other.size, other.forward, other.precision))

    def __hash__(self):
        return hash((self.size, self.forward, self.precision))


def _as_numpy(vec):
    if isinstance(vec, _Array):
        return vec.numpy()
    return numpy.asarray(vec)


def _check_plan(plan, forward, func):
    if plan is None:
        raise Fault('an FFT plan must be given', func=func)
    if not isinstance(plan, FFTPlan):
        raise Invalid('expected an FFTPlan, got {!r}'.format(plan), func=func)
    if plan.forward != forward:
        raise Invalid('a {} plan is required'.format(
                      'forward' if forward else 'reverse'), func=func)


def _check_fwd_args(invec, outvec, plan, func, out_kind='c'):
    """Checks for transforms taking a real time-domain vector."""
    _check_plan(plan, True, func)
    if invec is None or outvec is None:
        raise Fault('input and output vectors must be given', func=func)
    idata = _as_numpy(invec)
    odata = _as_numpy(outvec)
    if idata.dtype.kind != 'f':
        raise Invalid('input must be real, not {}'.format(idata.dtype),
                      func=func)
    if odata.dtype.kind != out_kind:
        raise Invalid('output has the wrong type {}'.format(odata.dtype),
                      func=func)
    if len(idata) != plan.size:
        raise BadLength('input length {} does not match plan size {}'.format(
                        len(idata), plan.size), func=func)
    if len(odata) != plan.freq_size:
        raise BadLength('output length {} must be {}'.format(
                        len(odata), plan.freq_size), func=func)
    return idata, odata


def _check_inv_args(invec, outvec, plan, func):
    """Checks for the complex-to-real transform."""
    _check_plan(plan, False, func)
    if invec is None or outvec is None:
        raise Fault('input and output vectors must be given', func=func)
    idata = _as_numpy(invec)
    odata = _as_numpy(outvec)
    if idata.dtype.kind != 'c':
        raise Invalid('input must be complex, not {}'.format(idata.dtype),
                      func=func)
    if odata.dtype.kind != 'f':
        raise Invalid('output must be real, not {}'.format(odata.dtype),
                      func=func)
    if len(odata) != plan.size:
        raise BadLength('output length {} does not match plan size {}'.format(
                        len(odata), plan.size), func=func)
    if len(idata) != plan.freq_size:
        raise BadLength('input length {} must be {}'.format(
                        len(idata), plan.freq_size), func=func)
    return idata, odata
