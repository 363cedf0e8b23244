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
Function based interface to the FFT backends.

None of these functions rescale their output: a forward transform followed
by a reverse transform multiplies the data by the transform length. Neither
do they touch the metadata of time or frequency series; that is up to the
caller.
"""
import numpy

from strainspec.errors import Invalid
from .core import FFTPlan, _check_fwd_args, _check_inv_args
from .backend_support import get_backend_name, get_backend_module


def create_forward_plan(size, precision='double', backend=None):
    """Create a plan for real-to-complex transforms of `size` samples.

    Parameters
    ----------
    size : int
        Length of the real input vector.
    precision : {'double', 'single'}
        Precision of the transform.
    backend : {None, str}
        Backend to execute the transform with. By default the backend in
        use when the plan is created.

    Returns
    -------
    plan : FFTPlan
    """
    return FFTPlan(size, True, precision, _resolve(backend))


def create_reverse_plan(size, precision='double', backend=None):
    """Create a plan for complex-to-real transforms producing `size`
    samples. Parameters are as for :func:`create_forward_plan`.
    """
    return FFTPlan(size, False, precision, _resolve(backend))


def _resolve(backend):
    if backend is None:
        return get_backend_name()
    try:
        get_backend_module(backend)
    except KeyError:
        raise Invalid('FFT backend {!r} is not available'.format(backend),
                      func='create_plan')
    return backend


def forward_fft(invec, outvec, plan):
    """ Fourier transform the real vector invec into the complex vector
    outvec, using `plan`.

    Parameters
    ----------
    invec : Array or numpy.ndarray
        Real input vector of length `plan.size`.
    outvec : Array or numpy.ndarray
        Complex output vector of length `plan.size // 2 + 1`.
    plan : FFTPlan
        A forward plan.
    """
    idata, odata = _check_fwd_args(invec, outvec, plan, 'forward_fft')
    get_backend_module(plan.backend).fft(idata, odata, plan)


def reverse_fft(invec, outvec, plan):
    """ Inverse Fourier transform the one-sided complex vector invec into
    the real vector outvec, using `plan`. The imaginary parts of the DC and
    Nyquist bins are ignored.

    Parameters
    ----------
    invec : Array or numpy.ndarray
        Complex input vector of length `plan.size // 2 + 1`.
    outvec : Array or numpy.ndarray
        Real output vector of length `plan.size`.
    plan : FFTPlan
        A reverse plan.
    """
    idata, odata = _check_inv_args(invec, outvec, plan, 'reverse_fft')
    get_backend_module(plan.backend).ifft(idata, odata, plan)


def power_spectrum(invec, outvec, plan):
    """ Compute the one-sided power spectrum of the real vector invec.

    With X the forward transform of invec and N the plan size, the output
    is |X[0]|^2 at DC, 2 |X[k]|^2 for 0 < k < N/2 and, when N is even,
    |X[N/2]|^2 at Nyquist. Its sum is N times the sum of squares of invec.

    Parameters
    ----------
    invec : Array or numpy.ndarray
        Real input vector of length `plan.size`.
    outvec : Array or numpy.ndarray
        Real output vector of length `plan.size // 2 + 1`.
    plan : FFTPlan
        A forward plan.
    """
    idata, odata = _check_fwd_args(invec, outvec, plan, 'power_spectrum',
                                   out_kind='f')
    tmp = numpy.empty(plan.freq_size, dtype=plan.complex_dtype)
    get_backend_module(plan.backend).fft(idata, tmp, plan)
    power = tmp.real ** 2 + tmp.imag ** 2
    power[1:(plan.size + 1) // 2] *= 2
    odata[:] = power
