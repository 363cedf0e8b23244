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
This package provides a front-end to the fast Fourier transform
implementations used by strainspec.
"""
from .core import FFTPlan
from .func_api import create_forward_plan, create_reverse_plan
from .func_api import forward_fft, reverse_fft, power_spectrum
from .backend_support import set_backend, get_backend_name, get_backend_names
from .parser_support import insert_fft_option_group, verify_fft_options
from .parser_support import from_cli
