"""Message handler for conversation history."""

from typing import Any


class MessageHandler:
    """
    Keeps the conversation history sent to the Messages API.

    History lives only in memory, for the lifetime of one session, so
    follow-up questions can refer to earlier answers.
    """

    def __init__(self, initial_prompt: str | None = None):
        """
        Initialize handler.

        Args:
            initial_prompt: Optional first user message
        """
        self._messages: list[dict[str, Any]] = []
        if initial_prompt:
            self.add_user_message(initial_prompt)

    def get_messages(self) -> list[dict[str, Any]]:
        return self._messages

    def add_user_message(self, text: str) -> None:
        self._messages.append({"role": "user", "content": text})

    def add_assistant_response(self, content: list[Any]) -> None:
        """
        Add assistant's response to message history.

        Args:
            content: List of content blocks from API response
        """
        self._messages.append({"role": "assistant", "content": content})

    def add_tool_results(self, tool_results: list[dict[str, Any]]) -> None:
        """Add tool_result blocks as the next user message."""
        self._messages.append({"role": "user", "content": tool_results})

    def extract_final_text(self, content_blocks: list[Any]) -> str:
        """Concatenate all text blocks of a response."""
        return "".join(block.text for block in content_blocks if block.type == "text")

    def extract_tool_uses(self, content_blocks: list[Any]) -> list[Any]:
        return [block for block in content_blocks if block.type == "tool_use"]

    def clear(self) -> None:
        """Forget the conversation."""
        self._messages = []
