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
Bookkeeping of the available FFT backends and of the one in use.
"""
import logging

from .core import _list_available

_backend_dict = {'scipy' : 'scipyfft',
                 'numpy' : 'npfft'}
_backend_list = ['scipy', 'numpy']

_alist, _adict = _list_available(_backend_list, _backend_dict)

_backend = None


def get_backend_modules():
    return [_adict[name] for name in _alist]


def get_backend_names():
    return list(_alist)


def set_backend(backend_list):
    """Use the first available backend of `backend_list`. Names that are
    not available are skipped; an empty list leaves the choice unchanged.
    """
    global _backend
    for backend in backend_list:
        if backend in _alist:
            if backend != _backend:
                logging.info('Using the %s FFT backend', backend)
            _backend = backend
            break


def get_backend_name():
    return _backend


def get_backend_module(name=None):
    """Return the module implementing backend `name`, by default the one
    currently in use.
    """
    if name is None:
        name = _backend
    return _adict[name]


set_backend(_backend_list)
