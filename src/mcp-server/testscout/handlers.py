"""
TESTSCOUT - Tool Handlers

Dispatches MCP tool calls to the analyzer.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp.types import TextContent

from .analyzer import AnalysisError, analyze
from .config import logger
from .framework_locator import TestFramework, locate
from .languages import classify


def _text(content: str) -> List[TextContent]:
    return [TextContent(type="text", text=content)]


def _parse_framework(name: Optional[str]) -> Optional[TestFramework]:
    if not name:
        return None
    try:
        framework = TestFramework(name.lower())
    except ValueError:
        framework = TestFramework.UNKNOWN
    if framework == TestFramework.UNKNOWN:
        raise ValueError(f"Unknown framework: {name}")
    return framework


async def handle_analyze(args: Dict[str, Any]) -> List[TextContent]:
    framework = _parse_framework(args.get("framework"))
    analysis = await analyze(args["file"], framework=framework)

    if args.get("format") == "text":
        return _text(analysis.to_text())
    return _text(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))


async def handle_detect_language(args: Dict[str, Any]) -> List[TextContent]:
    language = classify(args["file"])
    return _text(language.value if language else "unsupported")


async def handle_detect_framework(args: Dict[str, Any]) -> List[TextContent]:
    framework = await locate(args["file"])
    return _text(framework.value)


HANDLERS: Dict[str, Callable[[Dict[str, Any]], Awaitable[List[TextContent]]]] = {
    "testscout_analyze": handle_analyze,
    "testscout_detect_language": handle_detect_language,
    "testscout_detect_framework": handle_detect_framework,
}


async def handle_tool_call(name: str, args: Dict[str, Any]) -> List[TextContent]:
    """Run a tool; failures come back as an 'Error:' text item."""
    handler = HANDLERS.get(name)
    if handler is None:
        return _text(f"Error: Unknown tool: {name}")

    try:
        return await handler(args or {})
    except KeyError as e:
        return _text(f"Error: Missing argument: {e.args[0]}")
    except (AnalysisError, ValueError) as e:
        logger.error(f"{name} failed: {e}")
        return _text(f"Error: {e}")
