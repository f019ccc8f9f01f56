"""Data models for mutation events, diff operations and mutation records."""

from .diff_operations import OPERATION_TYPE_TO_CLASS, DiffOperation, parse_operation
from .mutation import (
    ChangeMetrics,
    MutationEvent,
    MutationRecord,
    ValidationMetrics,
    ValidationResult,
    ValidationSnapshot,
    WorkflowSnapshot,
)

__all__ = [
    "OPERATION_TYPE_TO_CLASS",
    "ChangeMetrics",
    "DiffOperation",
    "MutationEvent",
    "MutationRecord",
    "ValidationMetrics",
    "ValidationResult",
    "ValidationSnapshot",
    "WorkflowSnapshot",
    "parse_operation",
]
