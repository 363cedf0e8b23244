# Copyright (C) 2017  Collin Capano
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
This modules provides the Window class used to taper data segments before
Fourier transforming them.
"""

import numpy
from scipy import signal

from strainspec.types import Array, float64

# windows that take a shape parameter, and the parameter used when none is
# given
_window_beta = {
    'kaiser': 6.,
    'tukey': 0.5,
    'gaussian': None,
}


class Window(object):
    """A tapering window together with the sum of the squares of its weights.

    Parameters
    ----------
    data : array-like
        The window weights.
    dtype : {float64, float32}, optional
        Precision of the stored weights.
    name : {None, str}, optional
        Name of the window function, for reference only.

    Attributes
    ----------
    data : Array
        The window weights.
    sum_of_squares : float
        Sum of the squared weights, used to normalise periodograms.
    """
    def __init__(self, data, dtype=float64, name=None):
        self.data = Array(data, dtype=dtype)
        self.sum_of_squares = float((self.data.numpy().astype(float64) ** 2).sum())
        self.name = name

    def __len__(self):
        return len(self.data)

    def __repr__(self):
        return '<Window {} length={} sum_of_squares={}>'.format(
            self.name, len(self), self.sum_of_squares)

    def astype(self, dtype):
        """Return a copy of this window stored with the given dtype. The
        sum of squares is kept from this window.
        """
        win = Window(self.data.numpy().astype(dtype), dtype=dtype,
                     name=self.name)
        win.sum_of_squares = self.sum_of_squares
        return win


def create_window(name, length, beta=None, dtype=float64):
    """Create a symmetric window of the given length.

    Parameters
    ----------
    name : str
        Any window name recognised by `scipy.signal.get_window`, e.g.
        'hann', 'hamming', 'blackman', 'bartlett', 'parzen', 'kaiser',
        'tukey', 'gaussian' or 'boxcar'. 'rectangular' is accepted as an
        alias of 'boxcar'.
    length : int
        Number of samples.
    beta : {None, float}
        Shape parameter of windows that take one ('kaiser', 'tukey',
        'gaussian'). Ignored for other windows.
    dtype : {float64, float32}, optional
        Precision of the stored weights.

    Returns
    -------
    window : Window

    Raises
    ------
    ValueError
        If the window is unknown, the length is not positive, or a
        required shape parameter is missing.
    """
    if type(length) is not int or length <= 0:
        raise ValueError('window length must be a positive integer')
    if name == 'rectangular':
        name = 'boxcar'
    if name in _window_beta:
        if beta is None:
            beta = _window_beta[name]
        if beta is None:
            raise ValueError('the {} window needs a shape '
                             'parameter'.format(name))
        spec = (name, beta)
    else:
        spec = name
    weights = signal.get_window(spec, length, fftbins=False)
    return Window(numpy.asarray(weights), dtype=dtype, name=name)


def window_from_array(array, dtype=float64):
    """Wrap an array of weights as a Window."""
    return Window(array, dtype=dtype, name='custom')
