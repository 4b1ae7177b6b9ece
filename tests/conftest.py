import logging
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def setup_logging():
    """Setup logging for tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@pytest.fixture
def write_yaml():
    """Write text (or raw bytes) to a temporary .yaml file and return its path."""
    temp_dir = tempfile.TemporaryDirectory()

    def _write(content, name="input.yaml"):
        path = Path(temp_dir.name) / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    yield _write

    temp_dir.cleanup()
