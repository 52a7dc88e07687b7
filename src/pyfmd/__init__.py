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
"""
PyFMD, a package for loading the model description of Functional Mock-Up
Units (FMUs) compliant with the FMI 2.0 standard into immutable Python
data structures.
"""

__all__ = ['common', 'exceptions', 'fmi2', 'loader', 'model_description', 'parser']

__version__ = "1.0.0"

from pyfmd.loader import load_model_description
from pyfmd.parser import (
    ParseOptions,
    parse_model_description,
    parse_model_description_from_string
)
from pyfmd.fmi2 import FMI2_Type, FMI2_Causality, FMI2_Variability, FMI2_Initial
from pyfmd.model_description import ModelDescription
