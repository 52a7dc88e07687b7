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
Immutable data structures describing an FMI 2.0 model description.

Optional attributes which are absent from the XML are None. Boolean flags
and counts with a default in the standard always carry their value.
"""
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

import numpy as np

from pyfmd.exceptions import FMDException
from pyfmd.fmi2 import FMI2_Type, FMI2_Causality, FMI2_Variability, FMI2_Initial

DEFAULT_VARIABLE_NAMING_CONVENTION = "flat"

@dataclass(frozen=True)
class DefaultExperiment:
    start_time: Optional[float] = None
    stop_time: Optional[float] = None
    step_size: Optional[float] = None
    tolerance: Optional[float] = None

@dataclass(frozen=True)
class SourceFile:
    name: str

@dataclass(frozen=True)
class FmuAttributes:
    """
    Attributes shared by the CoSimulation and ModelExchange elements.
    """
    model_identifier: str
    needs_execution_tool: bool = False
    can_get_and_set_fmu_state: bool = False
    can_serialize_fmu_state: bool = False
    provides_directional_derivative: bool = False
    can_not_use_memory_management_functions: bool = False
    can_be_instantiated_only_once_per_process: bool = False
    source_files: Tuple[SourceFile, ...] = ()

@dataclass(frozen=True)
class CoSimulationAttributes(FmuAttributes):
    max_output_derivative_order: int = 0
    can_interpolate_inputs: bool = False
    can_run_asynchronuously: bool = False
    can_handle_variable_communication_step_size: bool = False

@dataclass(frozen=True)
class ModelExchangeAttributes(FmuAttributes):
    completed_integrator_step_not_needed: bool = False

# ==== Typed attributes of a ScalarVariable ==== #

@dataclass(frozen=True)
class ScalarVariableAttribute:
    declared_type: Optional[str] = None
    start: Optional[Union[int, float, bool, str]] = None

@dataclass(frozen=True)
class BoundedScalarVariableAttribute(ScalarVariableAttribute):
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    quantity: Optional[str] = None

@dataclass(frozen=True)
class IntegerAttribute(BoundedScalarVariableAttribute):
    pass

@dataclass(frozen=True)
class RealAttribute(BoundedScalarVariableAttribute):
    nominal: Optional[float] = None
    unit: Optional[str] = None
    derivative: Optional[int] = None
    reinit: bool = False
    unbounded: bool = False
    relative_quantity: bool = False

@dataclass(frozen=True)
class StringAttribute(ScalarVariableAttribute):
    pass

@dataclass(frozen=True)
class BooleanAttribute(ScalarVariableAttribute):
    pass

@dataclass(frozen=True)
class EnumerationAttribute(BoundedScalarVariableAttribute):
    pass

_ATTRIBUTE_TYPES = {
    IntegerAttribute: FMI2_Type.INTEGER,
    RealAttribute: FMI2_Type.REAL,
    StringAttribute: FMI2_Type.STRING,
    BooleanAttribute: FMI2_Type.BOOLEAN,
    EnumerationAttribute: FMI2_Type.ENUMERATION,
}

@dataclass(frozen=True)
class ScalarVariable:
    """
    Data structure based on the XML element ScalarVariable. The typed
    attribute set is one of IntegerAttribute, RealAttribute,
    StringAttribute, BooleanAttribute or EnumerationAttribute.
    """
    name: str
    value_reference: int
    attribute: ScalarVariableAttribute
    description: str = ""
    can_handle_multiple_set_per_time_instant: bool = False
    causality: FMI2_Causality = FMI2_Causality.LOCAL
    variability: FMI2_Variability = FMI2_Variability.CONTINUOUS
    initial: FMI2_Initial = FMI2_Initial.UNKNOWN

    @property
    def type(self):
        """ The FMI2_Type of the variable, given by its typed attribute. """
        return _ATTRIBUTE_TYPES[type(self.attribute)]

class ModelVariables(Sequence):
    """
    The ordered, immutable list of scalar variables. The position of a
    variable (starting at 1) is the index used by the model structure.
    """

    def __init__(self, variables=()):
        self._variables = tuple(variables)

    def __getitem__(self, item):
        return self._variables[item]

    def __len__(self):
        return len(self._variables)

    def __eq__(self, other):
        if not isinstance(other, ModelVariables):
            return NotImplemented
        return self._variables == other._variables

    def __hash__(self):
        return hash(self._variables)

    def __repr__(self):
        return '<ModelVariables with ' + repr(len(self._variables)) + ' variables>'

    def get_by_index(self, index):
        """
        Get a variable by its 1-based index, as used in the ModelStructure
        element.
        """
        if not 1 <= index <= len(self._variables):
            raise FMDException("The variable index %d is out of range [1, %d]."
                %(index, len(self._variables)))
        return self._variables[index - 1]

    def get_by_name(self, name):
        """
        Get a variable by its name.

        Raises FMDException if no variable has the given name.
        """
        for variable in self._variables:
            if variable.name == name:
                return variable
        raise FMDException("The variable %s could not be found." % name)

    def get_by_value_reference(self, value_reference, type=None):
        """
        Get all variables with a given value reference. Value references are
        only unique per type, so the result can be narrowed with type.

        Parameters::

            value_reference --
                The value reference to look for.

            type --
                An FMI2_Type to filter on.
                Default: None (all types)

        Returns::

            A tuple of ScalarVariable, in declaration order.
        """
        return tuple(v for v in self._variables
                     if v.value_reference == value_reference
                     and (type is None or v.type is type))

    def get_model_variables(self, type=None, causality=None, variability=None):
        """
        Get the variables matching all given filters.

        Returns::

            A dict mapping variable name to ScalarVariable, in declaration
            order.
        """
        variables = {}
        for v in self._variables:
            if type is not None and v.type is not type:
                continue
            if causality is not None and v.causality is not causality:
                continue
            if variability is not None and v.variability is not variability:
                continue
            variables[v.name] = v
        return variables

    @property
    def value_references(self):
        """ The value references of all variables as a uint32 array. """
        return np.array([v.value_reference for v in self._variables], dtype=np.uint32)

# ==== Model structure ==== #

@dataclass(frozen=True)
class Unknown:
    index: int
    dependencies: Optional[Tuple[int, ...]] = None
    dependencies_kind: Optional[Tuple[str, ...]] = None

@dataclass(frozen=True)
class ModelStructure:
    outputs: Tuple[Unknown, ...] = ()
    derivatives: Tuple[Unknown, ...] = ()
    initial_unknowns: Tuple[Unknown, ...] = ()

@dataclass(frozen=True)
class ModelDescription:
    """
    Data structure based on the XML root element fmiModelDescription.

    co_simulation and model_exchange are independent; a model may support
    either, both or neither.
    """
    guid: str
    fmi_version: str
    model_name: str
    description: str = ""
    author: str = ""
    version: str = ""
    license: str = ""
    copyright: str = ""
    generation_tool: str = ""
    generation_date_and_time: str = ""
    number_of_event_indicators: int = 0
    variable_naming_convention: str = DEFAULT_VARIABLE_NAMING_CONVENTION
    default_experiment: Optional[DefaultExperiment] = None
    model_variables: ModelVariables = field(default_factory=ModelVariables)
    model_structure: ModelStructure = field(default_factory=ModelStructure)
    co_simulation: Optional[CoSimulationAttributes] = None
    model_exchange: Optional[ModelExchangeAttributes] = None

    @property
    def supports_co_simulation(self):
        return self.co_simulation is not None

    @property
    def supports_model_exchange(self):
        return self.model_exchange is not None

    @property
    def number_of_continuous_states(self):
        """ The number of continuous states, one per listed derivative. """
        return len(self.model_structure.derivatives)
