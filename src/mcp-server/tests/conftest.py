"""
Pytest fixtures for Testscout tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmp = tempfile.mkdtemp()
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_project_path(temp_dir):
    """Create a sample JS project: proj/src/app.js with a mocha manifest."""
    project = temp_dir / "proj"
    (project / "src").mkdir(parents=True)
    (project / "package.json").write_text('{"devDependencies": {"mocha": "^10"}}')
    (project / "src" / "app.js").write_text(
        "import { readFile } from 'fs/promises'\n"
        "export function add(a, b) { return a + b }\n"
    )
    return project
