"""Agent orchestrator for the tool-use conversation loop."""

import json
import logging
import time
from typing import Any

from anthropic import Anthropic
from pydantic import BaseModel, Field

from modules.logger import AgentLogger
from modules.message_handler import MessageHandler
from modules.tool_executor import ToolExecutor

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class AgentTurn(BaseModel):
    """Result of answering one user message."""

    text: str = Field(description="Final assistant text")
    tool_calls: list[str] = Field(default_factory=list, description="Tools called, in order")
    api_calls: int = Field(default=0, description="Model calls made for this turn")


class AgentOrchestrator:
    """
    Orchestrates the agent conversation loop.

    Responsibilities:
    - Make API calls to Claude
    - Process assistant responses
    - Execute tools
    - Keep conversation history across turns of a session
    """

    def __init__(
        self,
        client: Anthropic,
        system_blocks: list[dict[str, Any]],
        tools: list[dict[str, Any]],
        tool_functions: dict[str, Any],
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4096,
        max_turns: int = 8,
        verbose: bool = True,
    ):
        """
        Initialize orchestrator.

        Args:
            client: Anthropic API client
            system_blocks: System prompt blocks
            tools: Tool definitions for API
            tool_functions: Mapping of tool name to function
            model: Model to use
            max_tokens: Output token limit per model call
            max_turns: Maximum model calls per user message
            verbose: If True, log detailed info
        """
        self.client = client
        self.system_blocks = system_blocks
        self.tools = self._prepare_cached_tools(tools)
        self.model = model
        self.max_tokens = max_tokens
        self.max_turns = max_turns
        self.verbose = verbose

        self.message_handler = MessageHandler()
        self.tool_executor = ToolExecutor(tool_functions)

        self.api_call_count = 0

    def _prepare_cached_tools(self, tools: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Add cache_control to the last tool definition."""
        if not tools:
            return []

        return tools[:-1] + [{**tools[-1], "cache_control": {"type": "ephemeral"}}]

    def ask(self, prompt: str) -> AgentTurn:
        """
        Answer one user message, calling tools as the model requests.

        Args:
            prompt: User message

        Returns:
            AgentTurn with the final text and the tools called
        """
        self.message_handler.add_user_message(prompt)
        tool_calls: list[str] = []
        response = None

        for turn in range(1, self.max_turns + 1):
            response = self._call_model()

            assistant_content = [block for block in response.content if block.type in ("text", "tool_use")]
            self.message_handler.add_assistant_response(assistant_content)

            if self.verbose:
                logger.info(f"Stop reason: {response.stop_reason}")

            if response.stop_reason == "tool_use":
                tool_blocks = self.message_handler.extract_tool_uses(response.content)
                tool_calls.extend(block.name for block in tool_blocks)
                self.message_handler.add_tool_results(self._process_tool_blocks(tool_blocks))
                continue

            return AgentTurn(
                text=self.message_handler.extract_final_text(response.content),
                tool_calls=tool_calls,
                api_calls=turn,
            )

        logger.warning(f"Stopped after {self.max_turns} model calls without a final answer")
        text = self.message_handler.extract_final_text(response.content) if response else ""
        return AgentTurn(
            text=text or "Agent stopped without a final response.",
            tool_calls=tool_calls,
            api_calls=self.max_turns,
        )

    def _call_model(self) -> Any:
        self.api_call_count += 1

        api_call_start = time.time()
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=self.system_blocks,
            tools=self.tools,
            messages=self.message_handler.get_messages(),
        )
        api_call_time_ms = (time.time() - api_call_start) * 1000

        usage = getattr(response, "usage", None)
        if usage is not None:
            AgentLogger.log_token_usage(
                step=f"model_call_{self.api_call_count}",
                input_tokens=getattr(usage, "input_tokens", 0) or 0,
                output_tokens=getattr(usage, "output_tokens", 0) or 0,
                cache_creation_tokens=getattr(usage, "cache_creation_input_tokens", 0) or 0,
                cache_read_tokens=getattr(usage, "cache_read_input_tokens", 0) or 0,
                execution_time_ms=api_call_time_ms,
            )

        return response

    def _process_tool_blocks(self, tool_blocks: list[Any]) -> list[dict[str, Any]]:
        """
        Run tool_use blocks and build the matching tool_result blocks.

        Args:
            tool_blocks: List of tool_use blocks

        Returns:
            List of tool result dictionaries
        """
        tool_results = []

        for block in tool_blocks:
            if self.verbose:
                logger.info(f"Tool: {block.name} {block.input}")

            tool_result, execution_time_ms = self.tool_executor.execute(block.name, block.input)

            AgentLogger.log_token_usage(
                step=f"tool_{block.name}",
                input_tokens=0,
                output_tokens=0,
                execution_time_ms=execution_time_ms,
            )

            tool_results.append(
                {
                    "type": "tool_result",
                    "tool_use_id": block.id,
                    "content": json.dumps(tool_result),
                }
            )

        return tool_results

    def reset(self) -> None:
        """Start a new conversation."""
        self.message_handler.clear()
