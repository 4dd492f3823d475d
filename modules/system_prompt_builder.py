"""System prompt builder."""

from typing import Any

from modules.date_utils import today_utc


class SystemPromptBuilder:
    """
    Builds system prompt blocks for the Messages API.

    The instruction block is static and cached; an optional context block
    tells the model today's date so "tonight's games" resolves correctly.
    """

    def __init__(self, instruction_text: str):
        """
        Initialize builder with instruction text.

        Args:
            instruction_text: Core instructions for the assistant
        """
        self.instruction_text = instruction_text

    def build(self, include_date: bool = True, today: str | None = None) -> list[dict[str, Any]]:
        """
        Build system prompt blocks.

        Args:
            include_date: Append a block with today's date
            today: Date to report (defaults to today, UTC)

        Returns:
            List of prompt blocks suitable for the Anthropic API
        """
        blocks: list[dict[str, Any]] = [
            {
                "type": "text",
                "text": self.instruction_text,
                "cache_control": {"type": "ephemeral"},
            }
        ]

        if include_date:
            blocks.append(
                {
                    "type": "text",
                    "text": f"Today's date is {today or today_utc()} (UTC). Dates for the get_nba_data tool use YYYY-MM-DD.",
                }
            )

        return blocks
