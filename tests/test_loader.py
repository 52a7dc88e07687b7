#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2026 Modelon AB
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.


# Testing loading of model descriptions from FMU archives and directories

import shutil

import pytest

from pyfmd import load_model_description
from pyfmd.exceptions import InvalidFMUException, InvalidXMLException

from utils import ATTRIBUTES_XML, BOUNCING_BALL_XML


class TestLoadModelDescription:
    def test_load_xml_file(self):
        md = load_model_description(str(ATTRIBUTES_XML))
        assert md.model_name == "myModelName"

    def test_load_unzipped_fmu(self):
        md = load_model_description(BOUNCING_BALL_XML.parent)
        assert md.model_name == "BouncingBall"

    def test_load_fmu_archive(self, make_fmu):
        md = load_model_description(make_fmu(BOUNCING_BALL_XML))
        assert md.model_name == "BouncingBall"
        assert md.supports_co_simulation
        assert md.supports_model_exchange

    def test_load_fmu_archive_custom_member(self, make_fmu):
        fmu = make_fmu(ATTRIBUTES_XML, member = 'md.xml')
        md = load_model_description(fmu, {'model_description_file': 'md.xml'})
        assert md.guid == "myGuid"

    def test_fmu_archive_without_model_description(self, make_fmu):
        fmu = make_fmu(ATTRIBUTES_XML, member = 'other.xml')
        with pytest.raises(InvalidFMUException, match = "does not contain modelDescription.xml"):
            load_model_description(fmu)

    def test_directory_without_model_description(self, tmp_path):
        with pytest.raises(InvalidFMUException, match = "does not contain modelDescription.xml"):
            load_model_description(tmp_path)

    def test_directory_custom_member(self, tmp_path):
        shutil.copy(ATTRIBUTES_XML, tmp_path / 'md.xml')
        md = load_model_description(tmp_path, {'model_description_file': 'md.xml'})
        assert md.author == "myAuthor"

    def test_missing_path(self, tmp_path):
        with pytest.raises(InvalidFMUException, match = "Could not locate the file"):
            load_model_description(tmp_path / "idontexist.fmu")

    def test_not_xml(self, tmp_path):
        path = tmp_path / "model.fmu"
        path.write_text("this is not a zip file nor xml")
        with pytest.raises(InvalidXMLException, match = "is not well-formed"):
            load_model_description(path)
