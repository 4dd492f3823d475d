#!/usr/bin/env python3
"""Base class for NBA assistant tools."""

import sys
from abc import ABC, abstractmethod
from typing import Any, ClassVar


class BaseTool(ABC):
    """
    Abstract base class for tools exposed to the model.

    Subclasses declare an Anthropic tool definition and a synchronous run().
    Defining a subclass exports TOOL_DEFINITION plus a
    function named after the tool into the subclass's module.
    """

    TOOL_DEFINITION: ClassVar[dict[str, Any]]

    def __init_subclass__(cls, **kwargs):
        """Validate TOOL_DEFINITION and export it to its module."""
        super().__init_subclass__(**kwargs)

        if "TOOL_DEFINITION" not in cls.__dict__:
            raise TypeError(f"Tool '{cls.__name__}' must define TOOL_DEFINITION")

        tool_def = cls.TOOL_DEFINITION
        if not isinstance(tool_def, dict):
            raise TypeError(f"TOOL_DEFINITION in '{cls.__name__}' must be a dictionary")

        required_keys = ["name", "description", "input_schema"]
        missing_keys = [key for key in required_keys if key not in tool_def]
        if missing_keys:
            raise ValueError(
                f"TOOL_DEFINITION in '{cls.__name__}' is missing required keys: {missing_keys}"
            )

        if tool_def["input_schema"].get("type") != "object":
            raise ValueError(f"input_schema in '{cls.__name__}' must be an object schema")

        tool_name = tool_def["name"]
        module = sys.modules[cls.__module__]
        setattr(module, "TOOL_DEFINITION", tool_def)
        setattr(module, tool_name, cls.run)

    @classmethod
    @abstractmethod
    def run(cls, **kwargs) -> Any:
        """Execute the tool with the given parameters."""
        raise NotImplementedError(f"Tool '{cls.__name__}' must implement run() method")
