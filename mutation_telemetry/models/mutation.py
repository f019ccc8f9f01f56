"""Mutation events as handed in by editors, and the records produced from them."""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, SerializeAsAny, field_validator

from mutation_telemetry.models.base import TelemetryModel
from mutation_telemetry.models.diff_operations import DiffOperation, parse_operation

# Workflow snapshots are opaque nested JSON-like structures
WorkflowSnapshot = Dict[str, Any]


class ValidationSnapshot(TelemetryModel):
    """Result of validating a workflow, captured before or after an edit."""

    valid: Optional[bool] = Field(default=None)
    errors: Optional[List[Any]] = Field(default=None)
    warnings: Optional[List[Any]] = Field(default=None)

    model_config = ConfigDict(extra="allow")

    @property
    def error_count(self) -> int:
        return len(self.errors or [])


class ValidationResult(TelemetryModel):
    """Structural validity of a mutation event, as reported by a Validator."""

    valid: bool = Field()
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class MutationEvent(TelemetryModel):
    """One edit applied to a workflow, as reported by the editing tool."""

    workflow_before: Optional[WorkflowSnapshot] = Field(default=None)
    workflow_after: Optional[WorkflowSnapshot] = Field(default=None)
    operations: List[SerializeAsAny[DiffOperation]] = Field(default_factory=list)
    user_intent: Optional[str] = Field(default=None)
    tool_name: str = Field()
    session_id: str = Field()
    validation_before: Optional[ValidationSnapshot] = Field(default=None)
    validation_after: Optional[ValidationSnapshot] = Field(default=None)
    mutation_success: bool = Field(default=True)
    mutation_error: Optional[str] = Field(default=None)
    duration_ms: Optional[float] = Field(default=None)

    @field_validator("operations", mode="before")
    @classmethod
    def parse_operations(cls, value):
        """Dispatch raw operation mappings to their typed models."""
        if value is None:
            return []
        return [parse_operation(op) for op in value]


class ChangeMetrics(TelemetryModel):
    nodes_added: int = Field(default=0)
    nodes_removed: int = Field(default=0)
    nodes_modified: int = Field(default=0)
    connections_added: int = Field(default=0)
    connections_removed: int = Field(default=0)
    properties_changed: int = Field(default=0)


class ValidationMetrics(TelemetryModel):
    # None when either side of the edit was not validated
    validation_improved: Optional[bool] = Field(default=None)
    errors_resolved: int = Field(default=0)
    errors_introduced: int = Field(default=0)


class MutationRecord(TelemetryModel):
    """Redacted, metric-annotated record of an accepted mutation.

    Change and validation metrics are spread into the record rather than nested,
    so exporters can map it onto a flat analytics row.
    """

    user_id: str = Field()
    session_id: str = Field()
    workflow_before: Optional[WorkflowSnapshot] = Field(default=None)
    workflow_after: Optional[WorkflowSnapshot] = Field(default=None)
    workflow_hash_before: str = Field()
    workflow_hash_after: str = Field()
    user_intent: Optional[str] = Field(default=None)
    intent_classification: Optional[str] = Field(default=None)
    tool_name: str = Field()
    operations: List[SerializeAsAny[DiffOperation]] = Field(default_factory=list)
    operation_count: int = Field()
    operation_types: List[str] = Field(default_factory=list)
    validation_before: Optional[ValidationSnapshot] = Field(default=None)
    validation_after: Optional[ValidationSnapshot] = Field(default=None)

    validation_improved: Optional[bool] = Field(default=None)
    errors_resolved: int = Field(default=0)
    errors_introduced: int = Field(default=0)

    nodes_added: int = Field(default=0)
    nodes_removed: int = Field(default=0)
    nodes_modified: int = Field(default=0)
    connections_added: int = Field(default=0)
    connections_removed: int = Field(default=0)
    properties_changed: int = Field(default=0)

    mutation_success: bool = Field()
    mutation_error: Optional[str] = Field(default=None)
    duration_ms: Optional[float] = Field(default=None)
