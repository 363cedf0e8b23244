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
Command line options selecting the FFT backend.
"""

from .backend_support import get_backend_modules, get_backend_names
from .backend_support import set_backend, get_backend_module


def insert_fft_option_group(parser):
    """
    Adds the options used to choose an FFT backend. This should be used
    if your program supports the ability to select the FFT backend; otherwise
    you may simply create plans and rely on the default choice. This
    function will also add any options exported by available backends
    through a function called insert_fft_options, which takes the
    argument group as argument.

    Parameters
    ----------
    parser : object
        ArgumentParser instance
    """
    fft_group = parser.add_argument_group("Options for selecting the"
                                          " FFT backend and controlling its performance"
                                          " in this program.")
    # This argument expects a *list* of inputs, giving an order of
    # preference, as indicated by the nargs='*'.
    fft_group.add_argument("--fft-backends",
                      help="Preference list of the FFT backends. "
                           "Choices are: \n" + str(get_backend_names()),
                      nargs='*', default=[])

    for backend in get_backend_modules():
        try:
            backend.insert_fft_options(fft_group)
        except AttributeError:
            pass
    return fft_group


def verify_fft_options(opt, parser):
    """Parses the FFT options and verifies that they are
       reasonable.

    Parameters
    ----------
    opt : object
        Result of parsing the CLI with ArgumentParser, or any object with the
        required attributes.
    parser : object
        ArgumentParser instance.
    """

    if len(opt.fft_backends) > 0:
        _all_backends = get_backend_names()
        for backend in opt.fft_backends:
            if backend not in _all_backends:
                parser.error("Backend {0} is not available".format(backend))

    for backend in get_backend_modules():
        try:
            backend.verify_fft_options(opt, parser)
        except AttributeError:
            pass


def from_cli(opt):
    """Parses the command line options and sets the FFT backend. Aside from
    setting the default backend, this function will also call (if it
    exists) the from_cli function of the selected backend.

    Parameters
    ----------
    opt: object
        Result of parsing the CLI with ArgumentParser, or any object with
        the required attributes.
    """

    set_backend(opt.fft_backends)

    backend = get_backend_module()
    try:
        backend.from_cli(opt)
    except AttributeError:
        pass
