"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path
from pretty_json.models import to_value


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_person_json():
    """Sample object mixing scalars, a short array and a nested object."""
    return to_value({
        "name": "Alice Wonderland",
        "age": 21,
        "isVIP": True,
        "email": None,
        "friends": ["Bob", "Clair", "Dan"],
        "dictionary": {
            "one": "eins",
            "two": "zwei"
        }
    })


@pytest.fixture
def sample_nested_json():
    """Sample structure with arrays of objects and arrays of arrays."""
    return to_value({
        "metadata": {"version": "1.0", "tags": []},
        "data": [
            {"type": "A", "values": [1, 2, 3]},
            {"type": "B", "values": [4, 5, 6, 7]},
        ],
        "matrix": [[1, 0], [0, 1]],
        "empty": {}
    })
