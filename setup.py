#!/usr/bin/env python
# Copyright (C) 2012 Alex Nitz, Andrew Miller, Josh Willis
#
# This program is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation; either version 2 of the License, or (at your
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
setup.py file for the strainspec package
"""

import os, shutil

from setuptools import setup, find_packages, Command

install_requires = ['numpy>=1.16',
                    'scipy>=1.4',
                    'astropy>=4.0',
                    'h5py>=2.10',
                    ]

extras_require = {'test': ['pytest']}


class clean(Command):
    user_options = []
    description = "remove build products"
    def initialize_options(self):
        self.clean_folders = ['build', 'dist', 'strainspec.egg-info']
    def finalize_options(self):
        pass
    def run(self):
        for fol in self.clean_folders:
            shutil.rmtree(fol, ignore_errors=True)
            print('removed {0}'.format(fol))


# versioning info lives in strainspec/version.py
def get_version_info():
    version = {}
    with open(os.path.join('strainspec', 'version.py')) as f:
        exec(f.read(), version)
    return version['version']


cmdclass = {'clean' : clean}

VERSION = get_version_info()

setup (
    name = 'strainspec',
    version = VERSION,
    description = 'Estimate, invert and apply noise power spectral densities of gravitational-wave strain data.',
    author = 'strainspec team',
    keywords = ['ligo', 'physics', 'signal processing', 'power spectral density', 'gravitational waves'],
    cmdclass = cmdclass,
    extras_require = extras_require,
    install_requires = install_requires,
    python_requires = '>=3.8',
    scripts  = [
               'bin/strainspec_estimate_psd',
               ],
    packages = find_packages(exclude=['test', 'test.*']),
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Science/Research',
        'Natural Language :: English',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Astronomy',
        'Topic :: Scientific/Engineering :: Physics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
)
