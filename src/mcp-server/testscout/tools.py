"""
TESTSCOUT - Tool Definitions

MCP tool schemas exposed by the server.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from typing import List

from mcp.types import Tool

from .framework_locator import TestFramework


FRAMEWORK_CHOICES = [f.value for f in TestFramework if f != TestFramework.UNKNOWN]


async def get_tool_definitions() -> List[Tool]:
    return [
        Tool(
            name="testscout_analyze",
            description="Analyze a JS/TS/Python source file: exports, class methods, imports and test framework",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {"type": "string", "description": "Path to the source file"},
                    "framework": {
                        "type": "string",
                        "enum": FRAMEWORK_CHOICES,
                        "description": "Override the detected test framework"
                    },
                    "format": {
                        "type": "string",
                        "enum": ["json", "text"],
                        "description": "Output format (default: json)"
                    }
                },
                "required": ["file"]
            }
        ),
        Tool(
            name="testscout_detect_language",
            description="Detect the source language of a file from its extension",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {"type": "string", "description": "Path to the source file"}
                },
                "required": ["file"]
            }
        ),
        Tool(
            name="testscout_detect_framework",
            description="Detect the test framework by searching package.json, pyproject.toml and config files",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {"type": "string", "description": "Path to the source file"}
                },
                "required": ["file"]
            }
        ),
    ]
