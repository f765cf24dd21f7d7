"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed yars_format package.
"""

import pytest
from pathlib import Path


@pytest.fixture
def write_yaml(tmp_path):
    """Write text to a YAML file under tmp_path and return its path."""
    def _write(text: str, name: str = "sample.yaml") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write
