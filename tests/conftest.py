from pathlib import Path
from zipfile import ZipFile
from typing import Callable
import pytest

@pytest.fixture
def make_fmu(tmp_path) -> Callable[..., Path]:
    """Returns a function packing a model description XML file into an FMU
    archive in a temporary directory."""
    def _make_fmu(xml_file: Path, name: str = 'model.fmu', member: str = 'modelDescription.xml') -> Path:
        fmu_path = tmp_path / name
        with ZipFile(fmu_path, 'w') as zf:
            zf.write(xml_file, member)
            zf.writestr('sources/model.c', '/* empty */\n')
        return fmu_path
    return _make_fmu
