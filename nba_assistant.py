#!/usr/bin/env python3
"""
NBA assistant using Claude and the Anthropic SDK.

Ask a single question:
    python nba_assistant.py "Who did the Lakers play last night?"

Start an interactive session (blank line or 'exit' to quit):
    python nba_assistant.py

Call the data tool directly, without the model:
    python nba_assistant.py --category standings --season 2024
"""

import argparse
import json
import os
import sys

from anthropic import Anthropic
from dotenv import load_dotenv

from agents.nba_agent import AgentAnswer, NbaAgent
from models.request import DataCategory
from modules.logger import AgentLogger
from nba_tools import TOOL_FUNCTIONS

load_dotenv()

logger = AgentLogger.get_logger(__name__)


def print_answer(answer: AgentAnswer) -> None:
    print(f"\n{answer.text}\n")
    for result in answer.scores:
        print(f"  [{result.scorer}] {result.score:.2f}  {result.reason}")
    if answer.scores:
        print()


def run_tool(args: argparse.Namespace) -> int:
    """Call get_nba_data directly and print the envelope as JSON."""
    result = TOOL_FUNCTIONS["get_nba_data"](
        category=args.category, date=args.date, team=args.team, season=args.season
    )
    print(json.dumps(result, indent=2))
    return 0 if result["success"] else 1


def run_session(agent: NbaAgent, score: bool) -> None:
    """Interactive question loop keeping the conversation between questions."""
    print(f"{agent.name} ready. Ask about NBA games, standings, players or teams.")
    while True:
        try:
            question = input("> ").strip()
        except EOFError:
            break
        if not question or question.lower() in ("exit", "quit"):
            break
        print_answer(agent.ask(question, score=score))


def main() -> int:
    """
    Main function to run the NBA assistant.
    """
    parser = argparse.ArgumentParser(
        description="NBA Assistant - answers questions with live SportsData.io data"
    )
    parser.add_argument("question", nargs="?", help="Question to ask (omit for interactive mode)")
    parser.add_argument("--model", help="Claude model to answer with")
    parser.add_argument(
        "--no-score", action="store_true", help="Do not run the scorers on answers"
    )
    parser.add_argument(
        "--category",
        choices=[c.value for c in DataCategory],
        help="Call the data tool directly for this category instead of asking the model",
    )
    parser.add_argument("--date", help="Game date, YYYY-MM-DD (with --category games)")
    parser.add_argument("--team", help="Team abbreviation, e.g. LAL")
    parser.add_argument("--season", help="Season year, e.g. 2024 (with --category standings)")
    args = parser.parse_args()

    if args.category:
        return run_tool(args)

    if not os.getenv("ANTHROPIC_API_KEY"):
        logger.error("ANTHROPIC_API_KEY not found in environment variables")
        logger.error("Please add it to your .env file")
        return 1

    agent = NbaAgent(client=Anthropic(), model=args.model)
    score = not args.no_score

    if args.question:
        print_answer(agent.ask(args.question, score=score))
    else:
        run_session(agent, score)

    AgentLogger.print_usage_summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())
