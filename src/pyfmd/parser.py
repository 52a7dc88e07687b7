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
Parser building a ModelDescription from an FMI 2.0 modelDescription.xml.

The document is read in one linear pass. Leaf parsers convert a single
element, composite parsers collect the children of an element and
parse_model_description assembles the result from the root element.
Elements with unrecognized tags are ignored throughout.
"""
import re
import logging

from pyfmd.common.options import OptionBase, InvalidOptionsException
from pyfmd.common.xmlparser import (
    parse_XML,
    parse_XML_string,
    get_attribute,
    get_required_attribute,
    iter_children,
    to_str,
    to_int,
    to_unsigned,
    to_float,
    to_bool,
)
from pyfmd.exceptions import InvalidXMLException, MalformedVariableException
from pyfmd.fmi2 import parse_causality, parse_variability, parse_initial
from pyfmd.model_description import (
    DEFAULT_VARIABLE_NAMING_CONVENTION,
    DefaultExperiment,
    SourceFile,
    FmuAttributes,
    CoSimulationAttributes,
    ModelExchangeAttributes,
    IntegerAttribute,
    RealAttribute,
    StringAttribute,
    BooleanAttribute,
    EnumerationAttribute,
    ScalarVariable,
    ModelVariables,
    Unknown,
    ModelStructure,
    ModelDescription,
)

logger = logging.getLogger(__name__)

ROOT_TAG = "fmiModelDescription"

class ParseOptions(OptionBase):
    """
    Options for loading a model description.

    Options::

        huge_tree --
            Disable the lxml security restrictions and support very deep
            trees and very long text content.
            Default: False

        resolve_entities --
            Let lxml replace entities by their text value.
            Default: False

        model_description_file --
            Name of the model description inside an FMU archive or an
            unzipped FMU directory.
            Default: 'modelDescription.xml'
    """
    def __init__(self, *args, **kw):
        _defaults = {
            'huge_tree': False,
            'resolve_entities': False,
            'model_description_file': 'modelDescription.xml',
        }
        super(ParseOptions,self).__init__(_defaults)
        self.update(*args, **kw)

def get_parse_options(options=None):
    """
    Turn the options argument into a ParseOptions instance. None and plain
    dicts are accepted.
    """
    if options is None:
        return ParseOptions()
    elif isinstance(options, ParseOptions):
        return options
    elif isinstance(options, dict):
        return ParseOptions(options)
    raise InvalidOptionsException(options)

# ==== Leaf parsers ==== #

def parse_default_experiment(element):
    return DefaultExperiment(
        start_time = get_attribute(element, "startTime", to_float),
        stop_time = get_attribute(element, "stopTime", to_float),
        step_size = get_attribute(element, "stepSize", to_float),
        tolerance = get_attribute(element, "tolerance", to_float),
    )

def parse_file(element):
    return SourceFile(get_required_attribute(element, "name"))

_dependency_pattern = re.compile(r"\s*(\+?[0-9]+)")

def parse_unknown_dependencies(text):
    """
    Scan a dependencies string into a tuple of unsigned integers.

    Numbers, optionally signed with "+", are read one at a time, leading
    whitespace is skipped and a single ',' or ' ' directly after a number
    is consumed as separator, so "1,2 3", "1, 2" and "1 2" are all
    accepted. Scanning stops at the
    first position where no number can be read.
    """
    dependencies = []
    pos = 0
    while True:
        match = _dependency_pattern.match(text, pos)
        if match is None:
            break
        dependencies.append(to_unsigned(match.group(1)))
        pos = match.end()
        if pos < len(text) and text[pos] in ", ":
            pos += 1
    if text[pos:].strip():
        logger.warning("Ignoring trailing content '%s' in dependencies '%s'.", text[pos:], text)
    return tuple(dependencies)

def parse_unknown_dependencies_kind(text):
    """
    Split a dependenciesKind string on single spaces. Unlike the
    dependencies, commas are not separators and empty tokens are kept.
    """
    return tuple(text.split(' '))

def parse_unknown(element):
    return Unknown(
        index = get_required_attribute(element, "index", to_unsigned),
        dependencies = get_attribute(element, "dependencies", parse_unknown_dependencies),
        dependencies_kind = get_attribute(element, "dependenciesKind", parse_unknown_dependencies_kind),
    )

def _scalar_variable_attributes(element, converter):
    return dict(
        start = get_attribute(element, "start", converter),
        declared_type = get_attribute(element, "declaredType"),
    )

def _bounded_scalar_variable_attributes(element, converter):
    attributes = _scalar_variable_attributes(element, converter)
    attributes.update(
        min = get_attribute(element, "min", converter),
        max = get_attribute(element, "max", converter),
        quantity = get_attribute(element, "quantity"),
    )
    return attributes

def parse_integer_attribute(element):
    return IntegerAttribute(**_bounded_scalar_variable_attributes(element, to_int))

def parse_real_attribute(element):
    return RealAttribute(
        nominal = get_attribute(element, "nominal", to_float),
        unit = get_attribute(element, "unit"),
        derivative = get_attribute(element, "derivative", to_unsigned),
        reinit = get_attribute(element, "reinit", to_bool, False),
        unbounded = get_attribute(element, "unbounded", to_bool, False),
        relative_quantity = get_attribute(element, "relativeQuantity", to_bool, False),
        **_bounded_scalar_variable_attributes(element, to_float)
    )

def parse_string_attribute(element):
    return StringAttribute(**_scalar_variable_attributes(element, to_str))

def parse_boolean_attribute(element):
    return BooleanAttribute(**_scalar_variable_attributes(element, to_bool))

def parse_enumeration_attribute(element):
    return EnumerationAttribute(**_bounded_scalar_variable_attributes(element, to_int))

SCALAR_VARIABLE_ATTRIBUTE_PARSERS = {
    "Integer": parse_integer_attribute,
    "Real": parse_real_attribute,
    "String": parse_string_attribute,
    "Boolean": parse_boolean_attribute,
    "Enumeration": parse_enumeration_attribute,
}

def parse_scalar_variable(element):
    """
    Parse a ScalarVariable element. The typed attribute set is taken from
    the first child named Integer, Real, String, Boolean or Enumeration.

    Exceptions::

        MissingAttributeException --
            If name or valueReference is missing.

        MalformedVariableException --
            If no typed attribute child is present.
    """
    name = get_required_attribute(element, "name")
    base = dict(
        name = name,
        value_reference = get_required_attribute(element, "valueReference", to_unsigned),
        description = get_attribute(element, "description", default=""),
        can_handle_multiple_set_per_time_instant = get_attribute(
            element, "canHandleMultipleSetPerTimelnstant", to_bool, False),
        causality = parse_causality(get_attribute(element, "causality", default="")),
        variability = parse_variability(get_attribute(element, "variability", default="")),
        initial = parse_initial(get_attribute(element, "initial", default="")),
    )

    for child in iter_children(element):
        parser = SCALAR_VARIABLE_ATTRIBUTE_PARSERS.get(child.tag)
        if parser is not None:
            return ScalarVariable(attribute = parser(child), **base)

    raise MalformedVariableException(
        "ScalarVariable: "+name+" does not have a valid fundamental type.")

# ==== Composite parsers ==== #

def parse_source_files(element):
    return tuple(parse_file(e) for e in iter_children(element, "File"))

def load_unknowns(element):
    return tuple(parse_unknown(e) for e in iter_children(element, "Unknown"))

def parse_model_variables(element):
    return ModelVariables(parse_scalar_variable(e) for e in iter_children(element, "ScalarVariable"))

_MODEL_STRUCTURE_GROUPS = {
    "Outputs": "outputs",
    "Derivatives": "derivatives",
    "InitialUnknowns": "initial_unknowns",
}

def parse_model_structure(element):
    """
    Parse the Outputs, Derivatives and InitialUnknowns groups of the
    ModelStructure element. An absent group gives an empty tuple.
    """
    groups = {}
    for child in iter_children(element):
        key = _MODEL_STRUCTURE_GROUPS.get(child.tag)
        if key is not None:
            groups[key] = groups.get(key, ()) + load_unknowns(child)
    return ModelStructure(**groups)

def _fmu_attributes(element):
    source_files = ()
    for child in iter_children(element, "SourceFiles"):
        source_files += parse_source_files(child)
    return dict(
        model_identifier = get_required_attribute(element, "modelIdentifier"),
        needs_execution_tool = get_attribute(element, "needsExecutionTool", to_bool, False),
        can_get_and_set_fmu_state = get_attribute(element, "canGetAndSetFMUstate", to_bool, False),
        can_serialize_fmu_state = get_attribute(element, "canSerializeFMUstate", to_bool, False),
        provides_directional_derivative = get_attribute(
            element, "providesDirectionalDerivative", to_bool, False),
        can_not_use_memory_management_functions = get_attribute(
            element, "canNotUseMemoryManagementFunctions", to_bool, False),
        can_be_instantiated_only_once_per_process = get_attribute(
            element, "canBeInstantiatedOnlyOncePerProcess", to_bool, False),
        source_files = source_files,
    )

def parse_fmu_attributes(element):
    """
    Parse the attributes shared by the CoSimulation and ModelExchange
    elements.
    """
    return FmuAttributes(**_fmu_attributes(element))

def parse_co_simulation_attributes(element):
    return CoSimulationAttributes(
        max_output_derivative_order = get_attribute(
            element, "maxOutputDerivativeOrder", to_unsigned, 0),
        can_interpolate_inputs = get_attribute(element, "canInterpolateInputs", to_bool, False),
        can_run_asynchronuously = get_attribute(element, "canRunAsynchronuously", to_bool, False),
        can_handle_variable_communication_step_size = get_attribute(
            element, "canHandleVariableCommunicationStepSize", to_bool, False),
        **_fmu_attributes(element)
    )

def parse_model_exchange_attributes(element):
    return ModelExchangeAttributes(
        completed_integrator_step_not_needed = get_attribute(
            element, "completedIntegratorStepNotNeeded", to_bool, False),
        **_fmu_attributes(element)
    )

# ==== Top-level assembler ==== #

_ROOT_CHILD_PARSERS = {
    "CoSimulation": ("co_simulation", parse_co_simulation_attributes),
    "ModelExchange": ("model_exchange", parse_model_exchange_attributes),
    "DefaultExperiment": ("default_experiment", parse_default_experiment),
    "ModelVariables": ("model_variables", parse_model_variables),
    "ModelStructure": ("model_structure", parse_model_structure),
}

def build_model_description(root):
    """
    Assemble a ModelDescription from the fmiModelDescription root element.
    """
    if root.tag != ROOT_TAG:
        raise InvalidXMLException(
            "Expected the root element '%s', found '%s'." % (ROOT_TAG, root.tag))

    attributes = dict(
        guid = get_required_attribute(root, "guid"),
        fmi_version = get_required_attribute(root, "fmiVersion"),
        model_name = get_required_attribute(root, "modelName"),
        description = get_attribute(root, "description", default=""),
        author = get_attribute(root, "author", default=""),
        version = get_attribute(root, "version", default=""),
        license = get_attribute(root, "license", default=""),
        copyright = get_attribute(root, "copyright", default=""),
        generation_tool = get_attribute(root, "generationTool", default=""),
        generation_date_and_time = get_attribute(root, "generationDateAndTime", default=""),
        number_of_event_indicators = get_attribute(
            root, "numberOfEventIndicators", to_unsigned, 0),
        variable_naming_convention = get_attribute(
            root, "variableNamingConvention", default=DEFAULT_VARIABLE_NAMING_CONVENTION),
    )

    for child in iter_children(root):
        try:
            key, parser = _ROOT_CHILD_PARSERS[child.tag]
        except KeyError:
            logger.debug("Ignoring element '%s' of %s.", child.tag, ROOT_TAG)
            continue
        attributes[key] = parser(child)

    md = ModelDescription(**attributes)
    logger.debug("Parsed model description of '%s' with %d variables (co-simulation: %s, model exchange: %s).",
                 md.model_name, len(md.model_variables), md.supports_co_simulation, md.supports_model_exchange)
    return md

def parse_model_description(source, options=None):
    """
    Parse a modelDescription.xml document.

    Parameters::

        source --
            Path of the XML file or a file object opened in binary mode.

        options --
            A ParseOptions instance or a dict with options.
            Default: None (default options)

    Exceptions::

        InvalidXMLException --
            If the document can not be read, is not well-formed, lacks a
            required attribute, holds a malformed ScalarVariable or an
            attribute value which cannot be converted to its type.

    Returns::

        A ModelDescription.
    """
    options = get_parse_options(options)
    root = parse_XML(source, options['huge_tree'], options['resolve_entities'])
    return build_model_description(root)

def parse_model_description_from_string(text, options=None):
    """
    Parse an in-memory modelDescription.xml document given as str or bytes.
    """
    options = get_parse_options(options)
    root = parse_XML_string(text, options['huge_tree'], options['resolve_entities'])
    return build_model_description(root)
