"""
TESTSCOUT - Configuration Module

Constants, environment overrides and the shared logger.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

import os
import sys
import logging


VERSION = "1.0.0"


# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.environ.get("TESTSCOUT_LOG_LEVEL", "INFO").upper()

# stdout carries the MCP protocol, so logs go to stderr
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("testscout")


def env_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring {name}={raw!r}: negative, using {default}")
        return default
    return value


# =============================================================================
# Framework Locator
# =============================================================================
# Number of ancestor directories searched above the file's own directory
FRAMEWORK_SEARCH_DEPTH = env_int("TESTSCOUT_SEARCH_DEPTH", 4)


# =============================================================================
# Export Extraction
# =============================================================================
NAMED_EXPORT_ASYNC_WINDOW = 25      # export async function name(
ARROW_EXPORT_ASYNC_WINDOW = 45      # export const name = async (
DEFAULT_EXPORT_ASYNC_WINDOW = 35    # export default async function (
DEFAULT_SYMBOL_NAME = "default"     # Name for anonymous default exports
