import pytest

from license_headers.headers import LICENSE_HEADERS


@pytest.fixture
def js_header():
    """Canonical header for .ts/.js files."""
    return LICENSE_HEADERS[0]


@pytest.fixture
def cpp_header():
    """Canonical header for C/C++ files."""
    return LICENSE_HEADERS[1]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary directory used as the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
