# Copyright (C) 2024  The strainspec developers
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
Exceptions raised by the spectral estimation routines.

Every exception derives from both :class:`SpectrumError` and the builtin
exception that best matches its meaning, so callers may catch either
``strainspec.errors.BadLength`` or a plain ``ValueError``.
"""


class SpectrumError(Exception):
    """Base class of all strainspec errors.

    Parameters
    ----------
    message : str
        Human readable description of the failure.
    func : {None, str}
        Name of the routine that detected the failure.

    Attributes
    ----------
    kind : str
        Short machine readable error code, one per subclass.
    """
    kind = 'error'

    def __init__(self, message, func=None):
        self.message = message
        self.func = func
        super(SpectrumError, self).__init__(message)

    def __str__(self):
        if self.func is None:
            return self.message
        return '{}: {}'.format(self.func, self.message)


class Fault(SpectrumError, TypeError):
    """A required argument was not supplied."""
    kind = 'fault'


class Invalid(SpectrumError, ValueError):
    """A supplied value violates a precondition."""
    kind = 'invalid'


class BadLength(SpectrumError, ValueError):
    """Lengths of related buffers, or the segmentation, are inconsistent."""
    kind = 'badlength'


class OutOfMemory(SpectrumError, MemoryError):
    """A scratch allocation failed."""
    kind = 'nomem'


class FunctionFailure(SpectrumError, RuntimeError):
    """A called routine (FFT service, nested estimator) failed."""
    kind = 'func'


class FloatingPointDivideByZero(SpectrumError, ZeroDivisionError):
    """A zero PSD bin was found inside the band of interest."""
    kind = 'fpdiv0'

