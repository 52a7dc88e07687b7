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

# This file contains the various exceptions classes used in PyFMD

class FMDException(Exception):
    """
    An FMD exception.
    """
    pass

class InvalidFMUException(FMDException):
    """
    Exception covering problems with the loaded FMU, e.g. a missing
    model description file.
    """
    pass

class InvalidXMLException(FMDException):
    """
    Exception covering problems with the model description XML.
    """
    pass

class MissingAttributeException(InvalidXMLException):
    """
    A required attribute is absent from its element.
    """
    def __init__(self, element_tag, attribute):
        self.element_tag = element_tag
        self.attribute = attribute
        super().__init__(
            "The required attribute '%s' is missing on element '%s'." % (attribute, element_tag))

class MalformedVariableException(InvalidXMLException):
    """
    A ScalarVariable element carries no Integer, Real, String, Boolean
    or Enumeration child.
    """
    pass

class AttributeConversionException(InvalidXMLException):
    """
    An attribute value could not be converted to its declared type.
    """
    pass
