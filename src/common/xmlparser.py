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
Module containing the lxml based XML reading and the attribute converters
used to populate the model description data structures.

Every attribute lookup goes through get_attribute or get_required_attribute.
An absent attribute is never an error for get_attribute; a present value
which cannot be converted to the expected type always is.
"""
import re
import logging

from lxml import etree
import numpy as np

from pyfmd.exceptions import (
    InvalidXMLException,
    MissingAttributeException,
    AttributeConversionException
)

logger = logging.getLogger(__name__)

INT32_INFO = np.iinfo(np.int32)
UINT32_INFO = np.iinfo(np.uint32)

_signed_pattern   = re.compile(r"^[-+]?[0-9]+$")
_unsigned_pattern = re.compile(r"^\+?[0-9]+$")

# ==== Converters ==== #

def to_str(value):
    return value

def _checked_int(value, pattern, info, type_name):
    text = value.strip()
    if not pattern.match(text):
        raise ValueError("'%s' is not a valid %s" % (value, type_name))
    result = int(text)
    if not info.min <= result <= info.max:
        raise ValueError("%d is out of range for %s [%d, %d]" % (result, type_name, info.min, info.max))
    return result

def to_int(value):
    """ Convert to a 32 bit signed integer. """
    return _checked_int(value, _signed_pattern, INT32_INFO, "integer")

def to_unsigned(value):
    """ Convert to a 32 bit unsigned integer. """
    return _checked_int(value, _unsigned_pattern, UINT32_INFO, "unsigned integer")

def to_float(value):
    """
    Convert to float. Accepts the xs:double lexical space, i.e. also INF,
    -INF and NaN.
    """
    if '_' in value:
        raise ValueError("'%s' is not a valid floating point value" % value)
    return float(value)

def to_bool(xmlbool):
    """
    Translates the xs:boolean literals 'true', 'false', '1' and '0' to bool.
    """
    text = xmlbool.strip()
    if text in ('true', '1'):
        return True
    elif text in ('false', '0'):
        return False
    raise ValueError("The xml boolean '%s' does not have a valid value" % xmlbool)

# ==== Attribute lookup ==== #

def get_attribute(element, name, converter=to_str, default=None):
    """
    Get an optional attribute from an element.

    Parameters::

        element --
            The lxml element to read from.

        name --
            The name of the attribute.

        converter --
            Function converting the attribute string to the expected type.
            Default: to_str

        default --
            Returned when the attribute is absent.
            Default: None

    Returns::

        The converted attribute value, or default if the attribute is absent.
    """
    value = element.get(name)
    if value is None:
        return default
    try:
        return converter(value)
    except ValueError as e:
        raise AttributeConversionException(
            "Could not convert the attribute '%s' on element '%s': %s." % (name, element.tag, e)) from e

def get_required_attribute(element, name, converter=to_str):
    """
    Get a required attribute from an element, raises
    MissingAttributeException if it is absent.
    """
    if element.get(name) is None:
        raise MissingAttributeException(element.tag, name)
    return get_attribute(element, name, converter)

def iter_children(element, tag=None):
    """
    Iterate over the child elements of element in document order. Comments,
    processing instructions and entities are skipped. If tag is given only
    children with exactly that tag are yielded.
    """
    for child in element:
        if not isinstance(child.tag, str):
            continue
        if tag is None or child.tag == tag:
            yield child

# ==== Document reading ==== #

def _create_parser(huge_tree=False, resolve_entities=False):
    return etree.XMLParser(huge_tree=huge_tree,
                           resolve_entities=resolve_entities,
                           remove_comments=True,
                           remove_pis=True)

def parse_XML(source, huge_tree=False, resolve_entities=False):
    """
    Parse an XML document and return its root element.

    Parameters::

        source --
            Name of XML file to parse including absolute or relative path,
            or a file object opened in binary mode.

        huge_tree --
            Disable the lxml security restrictions on very deep trees and
            very long text content.
            Default: False

        resolve_entities --
            Replace entities by their text value.
            Default: False

    Exceptions::

        InvalidXMLException --
            If the XML file can not be read or is not well-formed.

    Returns::

        The root element of the parsed document.
    """
    name = getattr(source, 'name', source)
    logger.debug("Reading XML document %s", name)
    try:
        element_tree = etree.parse(source, _create_parser(huge_tree, resolve_entities))
    except etree.XMLSyntaxError as detail:
        raise InvalidXMLException("The XML file: %s is not well-formed. %s"
            %(name, detail)) from detail
    except OSError as detail:
        raise InvalidXMLException("The XML file: %s could not be read. %s"
            %(name, detail)) from detail
    return element_tree.getroot()

def parse_XML_string(text, huge_tree=False, resolve_entities=False):
    """
    Parse an in-memory XML document (str or bytes) and return its root
    element. A str is encoded as UTF-8 before parsing.
    """
    if isinstance(text, str):
        text = text.encode('utf-8')
    try:
        return etree.fromstring(text, _create_parser(huge_tree, resolve_entities))
    except etree.XMLSyntaxError as detail:
        raise InvalidXMLException("The XML string is not well-formed. %s" % detail) from detail
