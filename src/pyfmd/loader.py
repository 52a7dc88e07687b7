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
Loading of model descriptions from FMU archives, unzipped FMU directories
or plain XML files.
"""
import os
import zipfile
import logging

from pyfmd.exceptions import InvalidFMUException
from pyfmd.parser import get_parse_options, parse_model_description

logger = logging.getLogger(__name__)

def load_model_description(fmu, options=None):
    """
    Load the model description of an FMU.

    Parameters::

        fmu --
            Path to one of: an FMU archive (a zip file, usually with the
            extension .fmu), an unzipped FMU directory or the model
            description XML file itself.

        options --
            A ParseOptions instance or a dict with options, see
            pyfmd.parser.ParseOptions. The option 'model_description_file'
            names the model description inside archives and directories.
            Default: None (default options)

    Exceptions::

        InvalidFMUException --
            If the path does not exist or the archive/directory does not
            contain a model description.

        InvalidXMLException --
            If the model description could not be parsed.

    Returns::

        A ModelDescription.
    """
    options = get_parse_options(options)
    fmu = os.fspath(fmu)
    member = options['model_description_file']

    if os.path.isdir(fmu):
        path = os.path.join(fmu, member)
        if not os.path.isfile(path):
            raise InvalidFMUException(
                "The FMU directory %s does not contain %s." % (fmu, member))
        return parse_model_description(path, options)

    if not os.path.isfile(fmu):
        raise InvalidFMUException("Could not locate the file: %s" % fmu)

    if zipfile.is_zipfile(fmu):
        logger.debug("Reading %s from the FMU archive %s", member, fmu)
        with zipfile.ZipFile(fmu) as archive:
            if member not in archive.namelist():
                raise InvalidFMUException(
                    "The FMU archive %s does not contain %s." % (fmu, member))
            with archive.open(member) as xml_file:
                return parse_model_description(xml_file, options)

    return parse_model_description(fmu, options)
