#!/usr/bin/env python3
"""
Centralized logging for the NBA assistant.

Provides one logging setup for the assistant, its tools and scorers, and tracks:
- Token usage per model call
- Execution time per tool call
- Summary statistics for the session

Usage:
    from modules.logger import AgentLogger

    logger = AgentLogger.get_logger(__name__)
    logger.info("Fetching standings")

    AgentLogger.log_token_usage(step="model_call_1", input_tokens=1500, output_tokens=300)
    AgentLogger.print_usage_summary()
"""

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

NOISY_LIBRARIES = ("urllib3", "requests", "httpx", "httpcore", "anthropic")


@dataclass
class TokenUsageRecord:
    """Record of token usage for a single step."""

    timestamp: str
    step: str
    input_tokens: int
    output_tokens: int
    cache_creation_tokens: int = 0
    cache_read_tokens: int = 0
    total_tokens: int = 0
    execution_time_ms: float | None = None

    def __post_init__(self):
        self.total_tokens = self.input_tokens + self.output_tokens + self.cache_creation_tokens


class AgentLogger:
    """
    Centralized logger for the NBA assistant.

    The root logger is configured once, on the first get_logger() call:
    INFO to stdout, DEBUG to a per-session file under NBA_AGENT_LOG_DIR (default ./logs).
    """

    _usage_records: ClassVar[list[TokenUsageRecord]] = []
    _session_start: datetime = datetime.now()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}

    _log_dir = Path(os.getenv("NBA_AGENT_LOG_DIR", "logs"))
    _log_file = _log_dir / f"nba_agent_{_session_start.strftime('%Y%m%d_%H%M%S')}.log"
    _token_log_file = _log_dir / f"tokens_{_session_start.strftime('%Y%m%d_%H%M%S')}.json"

    @classmethod
    def _ensure_log_dir(cls):
        cls._log_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def _configure_root_logger(cls):
        """Configure the root logger so third-party logs share the same handlers."""
        cls._ensure_log_dir()

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)-30s | %(levelname)-8s | %(message)s", datefmt="%H:%M:%S"
            )
        )

        file_handler = logging.FileHandler(cls._log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        root_logger.addHandler(console_handler)
        root_logger.addHandler(file_handler)

        for library in NOISY_LIBRARIES:
            cls.set_library_log_level(library, logging.WARNING)

    @classmethod
    def get_logger(cls, name: str, level: int = logging.INFO) -> logging.Logger:
        """
        Get or create a logger with consistent formatting.

        Args:
            name: Logger name (typically __name__ from calling module)
            level: Logging level (default: INFO)

        Returns:
            Configured logger instance
        """
        if not cls._loggers:
            cls._configure_root_logger()

        if name in cls._loggers:
            return cls._loggers[name]

        logger = logging.getLogger(name)
        logger.setLevel(level)

        cls._loggers[name] = logger
        return logger

    @classmethod
    def log_token_usage(
        cls,
        step: str,
        input_tokens: int,
        output_tokens: int,
        cache_creation_tokens: int = 0,
        cache_read_tokens: int = 0,
        execution_time_ms: float | None = None,
    ):
        """
        Record token usage for a step and persist the session's records.

        Args:
            step: Name of the step (e.g., "model_call_1", "tool_get_nba_data")
            input_tokens: Number of input tokens
            output_tokens: Number of output tokens
            cache_creation_tokens: Tokens written to the prompt cache
            cache_read_tokens: Tokens read from the prompt cache
            execution_time_ms: Execution time in milliseconds
        """
        record = TokenUsageRecord(
            timestamp=datetime.now().isoformat(),
            step=step,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cache_creation_tokens=cache_creation_tokens,
            cache_read_tokens=cache_read_tokens,
            execution_time_ms=execution_time_ms,
        )

        cls._usage_records.append(record)
        cls._save_token_records()

        logger = cls.get_logger("token_tracker")
        logger.info(
            f"[{step}] Tokens: in={input_tokens}, out={output_tokens}, "
            f"cache_create={cache_creation_tokens}, cache_read={cache_read_tokens}, "
            f"total={record.total_tokens}"
        )

    @classmethod
    def _save_token_records(cls):
        cls._ensure_log_dir()

        records_dict = {
            "session_start": cls._session_start.isoformat(),
            "records": [asdict(r) for r in cls._usage_records],
        }

        with open(cls._token_log_file, "w") as f:
            json.dump(records_dict, f, indent=2)

    @classmethod
    def get_usage_summary(cls) -> dict[str, Any]:
        """
        Get summary statistics of token usage.

        Returns:
            Dictionary with totals and a per-step breakdown sorted by total tokens
        """
        if not cls._usage_records:
            return {"total_calls": 0, "total_tokens": 0, "message": "No token usage recorded yet"}

        step_stats: dict[str, dict[str, Any]] = {}
        for record in cls._usage_records:
            stats = step_stats.setdefault(
                record.step,
                {"calls": 0, "total_tokens": 0, "execution_time_ms": []},
            )
            stats["calls"] += 1
            stats["total_tokens"] += record.total_tokens
            if record.execution_time_ms:
                stats["execution_time_ms"].append(record.execution_time_ms)

        for stats in step_stats.values():
            times = stats.pop("execution_time_ms")
            if times:
                stats["avg_execution_time_ms"] = sum(times) / len(times)

        sorted_steps = sorted(step_stats.items(), key=lambda x: x[1]["total_tokens"], reverse=True)

        return {
            "session_start": cls._session_start.isoformat(),
            "session_duration": str(datetime.now() - cls._session_start),
            "total_calls": len(cls._usage_records),
            "total_input_tokens": sum(r.input_tokens for r in cls._usage_records),
            "total_output_tokens": sum(r.output_tokens for r in cls._usage_records),
            "total_cache_creation_tokens": sum(r.cache_creation_tokens for r in cls._usage_records),
            "total_cache_read_tokens": sum(r.cache_read_tokens for r in cls._usage_records),
            "total_tokens": sum(r.total_tokens for r in cls._usage_records),
            "steps": [{"step": step, **stats} for step, stats in sorted_steps],
        }

    @classmethod
    def print_usage_summary(cls):
        """Print a formatted usage summary to console."""
        summary = cls.get_usage_summary()
        if not summary["total_calls"]:
            print(summary["message"])
            return

        print("\n" + "=" * 80)
        print("TOKEN USAGE SUMMARY")
        print("=" * 80)
        print(f"Duration: {summary['session_duration']}")
        print(f"Total Steps: {summary['total_calls']}")
        print(f"  Input Tokens:         {summary['total_input_tokens']:>10,}")
        print(f"  Output Tokens:        {summary['total_output_tokens']:>10,}")
        print(f"  Cache Creation:       {summary['total_cache_creation_tokens']:>10,}")
        print(f"  Cache Read:           {summary['total_cache_read_tokens']:>10,}")
        print(f"  Total Tokens:         {summary['total_tokens']:>10,}")
        print(f"{'─' * 80}")
        print(f"{'Step':<30} {'Calls':<8} {'Total Tokens':<15}")
        for step in summary["steps"]:
            print(f"{step['step']:<30} {step['calls']:<8} {step['total_tokens']:<15,}")
        print("=" * 80)
        print(f"Main log: {cls._log_file}")
        print("=" * 80 + "\n")

    @classmethod
    def set_library_log_level(cls, library_name: str, level: int):
        """
        Set the logging level for a specific library.

        Example:
            AgentLogger.set_library_log_level('urllib3', logging.WARNING)
        """
        logging.getLogger(library_name).setLevel(level)

    @classmethod
    def reset(cls):
        """Reset all tracking data (useful for testing)."""
        cls._usage_records = []
        cls._session_start = datetime.now()


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Convenience wrapper around AgentLogger.get_logger."""
    return AgentLogger.get_logger(name, level)
