#!/usr/bin/env python3
"""
Tool functions for the NBA assistant.

Implementations are in the tools/ directory for easy individual testing.
Each tool file contains both the implementation and its TOOL_DEFINITION.
"""

from tools.get_nba_data import TOOL_DEFINITION as GET_NBA_DATA_DEF
from tools.get_nba_data import get_nba_data

# Tool definitions for the Messages API
TOOLS = [
    GET_NBA_DATA_DEF,
]

# Tool execution mapping
TOOL_FUNCTIONS = {
    "get_nba_data": get_nba_data,
}
