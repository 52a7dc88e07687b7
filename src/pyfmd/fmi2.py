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
Enumerations of the FMI 2.0 model description and the translation of their
XML tags.
"""
from enum import IntEnum

from pyfmd.exceptions import InvalidXMLException

class FMI2_Type(IntEnum):
    REAL = 0
    INTEGER = 1
    BOOLEAN = 2
    STRING = 3
    ENUMERATION = 4

class FMI2_Causality(IntEnum):
    PARAMETER = 0
    CALCULATED_PARAMETER = 1
    INPUT = 2
    OUTPUT = 3
    LOCAL = 4
    INDEPENDENT = 5

class FMI2_Variability(IntEnum):
    CONSTANT = 0
    FIXED = 1
    TUNABLE = 2
    DISCRETE = 3
    CONTINUOUS = 4

class FMI2_Initial(IntEnum):
    EXACT = 0
    APPROX = 1
    CALCULATED = 2
    UNKNOWN = 3

# The empty tag is what an absent attribute is read as
_CAUSALITY_TAGS = {
    "parameter": FMI2_Causality.PARAMETER,
    "calculatedParameter": FMI2_Causality.CALCULATED_PARAMETER,
    "input": FMI2_Causality.INPUT,
    "output": FMI2_Causality.OUTPUT,
    "local": FMI2_Causality.LOCAL,
    "independent": FMI2_Causality.INDEPENDENT,
    "": FMI2_Causality.LOCAL,
}

_VARIABILITY_TAGS = {
    "constant": FMI2_Variability.CONSTANT,
    "fixed": FMI2_Variability.FIXED,
    "tunable": FMI2_Variability.TUNABLE,
    "discrete": FMI2_Variability.DISCRETE,
    "continuous": FMI2_Variability.CONTINUOUS,
    "": FMI2_Variability.CONTINUOUS,
}

_INITIAL_TAGS = {
    "exact": FMI2_Initial.EXACT,
    "approx": FMI2_Initial.APPROX,
    "calculated": FMI2_Initial.CALCULATED,
    "": FMI2_Initial.UNKNOWN,
}

def parse_causality(causality):
    """
    Translates the causality attribute to FMI2_Causality, '' gives LOCAL.
    """
    try:
        return _CAUSALITY_TAGS[causality]
    except KeyError:
        raise InvalidXMLException("Causality: "+str(causality)+" is unknown.") from None

def parse_variability(variability):
    """
    Translates the variability attribute to FMI2_Variability, '' gives
    CONTINUOUS.
    """
    try:
        return _VARIABILITY_TAGS[variability]
    except KeyError:
        raise InvalidXMLException("Variability: "+str(variability)+" is unknown.") from None

def parse_initial(initial):
    """
    Translates the initial attribute to FMI2_Initial, '' gives UNKNOWN.
    """
    try:
        return _INITIAL_TAGS[initial]
    except KeyError:
        raise InvalidXMLException("Initial: "+str(initial)+" is unknown.") from None
