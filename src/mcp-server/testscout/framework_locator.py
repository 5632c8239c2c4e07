"""
TESTSCOUT - Framework Locator Module

Infers which test runner a project uses by walking up from a source file
and inspecting package manifests, pyproject.toml and known config files.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.

Usage:
    from testscout.framework_locator import locate

    framework = await locate("proj/src/app.js")
"""

import json
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

import aiofiles
import aiofiles.os

from .config import FRAMEWORK_SEARCH_DEPTH, logger


class TestFramework(str, Enum):
    """Test runners the locator can recognize."""
    __test__ = False  # not a pytest test class

    JEST = "jest"
    VITEST = "vitest"
    MOCHA = "mocha"
    PYTEST = "pytest"
    UNKNOWN = "unknown"


# Checked in this order; many setups list more than one runner
DEPENDENCY_PRIORITY: List[TestFramework] = [
    TestFramework.VITEST,
    TestFramework.JEST,
    TestFramework.MOCHA,
]

MANIFEST_SECTIONS = ["dependencies", "devDependencies", "scripts"]

PYPROJECT_MARKERS = ["[tool.pytest", "pytest"]

FRAMEWORK_CONFIG_FILES: Dict[TestFramework, List[str]] = {
    TestFramework.JEST: [
        "jest.config.js", "jest.config.ts", "jest.config.mjs", "jest.config.cjs",
    ],
    TestFramework.VITEST: [
        "vitest.config.js", "vitest.config.ts", "vitest.config.mts",
    ],
    TestFramework.MOCHA: [
        ".mocharc.js", ".mocharc.cjs", ".mocharc.yaml", ".mocharc.yml", ".mocharc.json",
    ],
    TestFramework.PYTEST: [
        "pytest.ini", "conftest.py",
    ],
}


def search_dirs(file_path: Union[str, Path], max_parents: int = FRAMEWORK_SEARCH_DEPTH) -> List[Path]:
    """The file's directory followed by up to max_parents ancestors."""
    current = Path(file_path).parent
    dirs = [current]
    for _ in range(max_parents):
        parent = current.parent
        if parent == current:
            break
        dirs.append(parent)
        current = parent
    return dirs


async def _read_text(path: Path) -> Optional[str]:
    """Read a UTF-8 file, returning None when it is missing or unreadable."""
    try:
        async with aiofiles.open(path, 'r', encoding='utf-8', newline='') as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping {path}: {e}")
        return None


async def _from_package_json(directory: Path) -> Optional[TestFramework]:
    content = await _read_text(directory / "package.json")
    if content is None:
        return None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug(f"Invalid package.json in {directory}: {e}")
        return None
    if not isinstance(data, dict):
        return None

    # Object sections contribute keys and values, array sections their items
    sections = [
        data[section] for section in MANIFEST_SECTIONS
        if isinstance(data.get(section), (dict, list))
    ]

    blob = json.dumps(sections).lower()
    for framework in DEPENDENCY_PRIORITY:
        if framework.value in blob:
            return framework
    return None


async def _from_pyproject(directory: Path) -> Optional[TestFramework]:
    content = await _read_text(directory / "pyproject.toml")
    if content is None:
        return None
    if any(marker in content for marker in PYPROJECT_MARKERS):
        return TestFramework.PYTEST
    return None


async def _from_config_files(directory: Path) -> Optional[TestFramework]:
    for framework, filenames in FRAMEWORK_CONFIG_FILES.items():
        for filename in filenames:
            if await aiofiles.os.path.exists(directory / filename):
                return framework
    return None


async def locate(
    file_path: Union[str, Path],
    max_parents: int = FRAMEWORK_SEARCH_DEPTH
) -> TestFramework:
    """
    Detect the test framework for a source file.

    Each directory is checked for package.json dependencies, then
    pyproject.toml, then framework config files. The first hit wins.

    Args:
        file_path: Source file whose project should be inspected
        max_parents: How many ancestor directories to search

    Returns:
        The detected TestFramework, or TestFramework.UNKNOWN
    """
    for directory in search_dirs(file_path, max_parents):
        framework = (
            await _from_package_json(directory)
            or await _from_pyproject(directory)
            or await _from_config_files(directory)
        )
        if framework:
            logger.debug(f"Detected {framework.value} in {directory}")
            return framework

    return TestFramework.UNKNOWN
