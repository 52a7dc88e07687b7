#!/usr/bin/env python 
# -*- coding: utf-8 -*-

# Copyright (C) 2026 Modelon AB
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import os

from setuptools import setup

NAME = "PyFMD"
AUTHOR = "Modelon AB"
AUTHOR_EMAIL = ""
VERSION = "1.0.0"
LICENSE = "LGPL"
DESCRIPTION = "A package for loading the model description of Functional Mock-Up Units compliant with FMI 2.0."
PLATFORMS = ["Linux", "Windows", "MacOS X"]
CLASSIFIERS = [ 'Programming Language :: Python',
                'Programming Language :: Python :: 3',
                'Operating System :: MacOS :: MacOS X',
                'Operating System :: Microsoft :: Windows',
                'Operating System :: Unix']

LONG_DESCRIPTION = """
PyFMD is a package for loading the modelDescription.xml of Functional
Mock-Up Units (FMUs), which are compiled dynamic models compliant with the
Functional Mock-Up Interface (FMI), see https://www.fmi-standard.org/ for
more information.

The model description is read into immutable Python objects: the model
identity, the supported co-simulation and model exchange capabilities, the
default experiment, all scalar variables with their typed attributes and
the model structure (outputs, derivatives and initial unknowns with their
dependencies).

Requirements:
-------------
- `Python 3.9 or newer`_
- `lxml <https://pypi.org/project/lxml/>`_
- `numpy <https://pypi.org/project/numpy/>`_
"""

setup(name=NAME,
      version=VERSION,
      license=LICENSE,
      description=DESCRIPTION,
      long_description=LONG_DESCRIPTION,
      author=AUTHOR,
      author_email=AUTHOR_EMAIL,
      platforms=PLATFORMS,
      classifiers=CLASSIFIERS,
      python_requires=">=3.9",
      install_requires=["lxml>=4.6", "numpy>=1.20"],
      extras_require={"tests": ["pytest"]},
      package_dir = {'pyfmd':        os.path.join('src', 'pyfmd'),
                     'pyfmd.common': os.path.join('src', 'common')},
      packages=[
        'pyfmd',
        'pyfmd.common',
      ],
      )
