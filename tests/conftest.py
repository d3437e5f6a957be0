import json
import pytest
from sharerecover.names import *

# Initialize the list of solver backends with the ones that are always installed
backends = [FRACTION, SYMPY]

# Add FLINT to the list if the python-flint package is installed
try:
    import flint
    backends.append(FLINT)
except ImportError:
    pass  # FLINT is not installed


@pytest.fixture(params=backends, scope="session")
def backend(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized solver backends."""
    return request.param


@pytest.fixture
def descriptor_data() -> dict:
    """Shares of y = x^2 + 3 (secret 3) in mixed bases."""
    return {
        KEYS: {N: 4, K: 3},
        "1": {BASE: "10", VALUE: "4"},
        "2": {BASE: "2", VALUE: "111"},
        "3": {BASE: "10", VALUE: "12"},
        "6": {BASE: "4", VALUE: "213"},
    }


@pytest.fixture
def write_descriptor(tmp_path):
    """Write a descriptor dict to a JSON file and return its path."""

    def _write(data, name="shares.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write
