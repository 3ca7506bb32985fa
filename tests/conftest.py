import os
import tempfile
import pytest # type: ignore

def pytest_configure(config):
    """Add markers to the pytest configuration."""
    config.addinivalue_line("markers", "quick: mark test as quick to run")
    config.addinivalue_line("markers", "full: mark test as part of the full test suite")
    config.addinivalue_line("markers", "slow: mark test as very slow to run")

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdirname:
        yield tmpdirname

@pytest.fixture
def ip_elements():
    """Return a factory for n distinct IPv4-style byte strings."""
    def make(n: int, offset: int = 0):
        return [
            f"10.{(i >> 16) & 255}.{(i >> 8) & 255}.{i & 255}".encode()
            for i in range(offset, offset + n)
        ]
    return make

@pytest.fixture
def write_lines(temp_dir):
    """Write byte lines to a file in temp_dir and return its path."""
    def write(name: str, lines, terminator: bytes = b"\n", final_newline: bool = True):
        path = os.path.join(temp_dir, name)
        data = terminator.join(lines)
        if final_newline and lines:
            data += terminator
        with open(path, "wb") as f:
            f.write(data)
        return path
    return write
