"""Tool executor with result serialization."""

import logging
import time
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Executes tool functions on behalf of the model.

    Responsibilities:
    - Look up and call tool functions by name
    - Serialize Pydantic models to dicts
    - Track execution time
    - Turn unknown tools and raised exceptions into {"error": ...} results
    """

    def __init__(self, tool_functions: dict[str, Callable[..., Any]]):
        """
        Initialize executor.

        Args:
            tool_functions: Mapping of tool name to tool function
        """
        self.tool_functions = tool_functions

    def execute(self, tool_name: str, tool_input: dict[str, Any]) -> tuple[Any, float]:
        """
        Execute a tool function and return result with execution time.

        Args:
            tool_name: Name of the tool to execute
            tool_input: Input parameters for the tool

        Returns:
            Tuple of (JSON-ready tool result, execution time in ms)
        """
        if tool_name not in self.tool_functions:
            logger.warning(f"Model requested unknown tool '{tool_name}'")
            return {"error": f"Unknown tool: {tool_name}"}, 0.0

        try:
            start_time = time.time()
            result = self.tool_functions[tool_name](**tool_input)
            execution_time_ms = (time.time() - start_time) * 1000

            result = self._serialize_result(result)

            logger.info(f"Tool '{tool_name}' executed in {execution_time_ms:.2f}ms")
            return result, execution_time_ms

        except Exception as e:
            logger.error(f"Tool '{tool_name}' failed: {e!s}")
            return {"error": str(e)}, 0.0

    def _serialize_result(self, result: Any) -> Any:
        """Serialize Pydantic models to JSON-compatible dicts."""
        if isinstance(result, BaseModel):
            return result.model_dump(mode="json")
        elif isinstance(result, list) and result and isinstance(result[0], BaseModel):
            return [item.model_dump(mode="json") for item in result]
        return result
