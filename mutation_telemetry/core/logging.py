# Structured outcome logging for processed mutation events.

import logging
from datetime import UTC, datetime
from typing import Any, Dict, List, Optional

OUTCOME_LOGGER_NAME = "mutation_telemetry.tracker.outcome"

# Outcomes logged above DEBUG; everything else is routine noise on a per-edit path
_OUTCOME_LEVELS = {
    "invalid": logging.WARNING,
    "error": logging.ERROR,
}


def log_mutation_outcome(
    session_id: Optional[str],
    tool_name: Optional[str],
    outcome: str,
    reason: Optional[str] = None,
    errors: Optional[List[Any]] = None,
    warnings: Optional[List[Any]] = None,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Log the outcome of processing one mutation event.

    Args:
        session_id: Session the edit belongs to.
        tool_name: Editing tool that produced the event.
        outcome: One of "recorded", "invalid", "excluded", "duplicate" or "error".
        reason: Human-readable detail for rejections.
        errors: Validation errors, for "invalid" outcomes.
        warnings: Validation warnings, for "invalid" outcomes.
        details: Extra fields attached to the log record.
    """
    logger = logging.getLogger(OUTCOME_LOGGER_NAME)
    log_data: Dict[str, Any] = {
        "session_id": session_id,
        "tool_name": tool_name,
        "outcome": outcome,
        "timestamp": datetime.now(UTC).isoformat(),
    }

    if reason:
        log_data["reason"] = reason

    if errors:
        log_data["validation_errors"] = errors

    if warnings:
        log_data["validation_warnings"] = warnings

    if details:
        log_data.update(details)

    message = f"[{session_id}] Mutation from {tool_name} {outcome}"
    if reason:
        message = f"{message}: {reason}"
    if errors:
        message = f"{message} errors={errors}"
    if warnings:
        message = f"{message} warnings={warnings}"

    logger.log(_OUTCOME_LEVELS.get(outcome, logging.DEBUG), message, extra=log_data)
