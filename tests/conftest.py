import pytest
from photo_lib.models import PhotoFile


@pytest.fixture
def photo_dir(tmp_path, monkeypatch):
    """Runs the test inside an empty directory, since PhotoFile paths are relative."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def photo():
    """Returns a Fujifilm-style PhotoFile with default extensions."""
    return PhotoFile("DSCF1022")
