"""Structured slug workflow logging.

Responsibilities:
- Emit concise, deterministic stage-level runtime logs through `loguru`.
- Record uniqueness collisions without leaking record payloads.
"""

from __future__ import annotations

from itertools import count
import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_LOGGER_TOKENS = count(1)


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class SlugLogger:
    """Emit deterministic stage logs for CLI-observable slug activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Add a loguru handler for `sink` that only receives this logger's lines.

        Handlers registered elsewhere in the process are left in place.
        """

        self._sink = sink or sys.stdout
        token = next(_LOGGER_TOKENS)
        self._logger = _loguru_logger.bind(slug_logger=token)
        self._handler_id: int | None = _loguru_logger.add(
            self._sink,
            format="{message}",
            level=level,
            colorize=False,
            filter=lambda record: record["extra"].get("slug_logger") == token,
        )

    def close(self) -> None:
        """Remove the handler added for this logger."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            self._handler_id = None

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[slug] level={level} stage={stage} event={event}{_format_context(context)}"
        self._logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_collision(self, value: str, attempt: int) -> None:
        """Emit one event for a candidate reported as already taken."""

        self._emit("INFO", "collision", "unique", value=value, attempt=attempt)
