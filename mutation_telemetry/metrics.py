"""Change and validation metrics computed for each accepted mutation."""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from mutation_telemetry.models.diff_operations import DiffOperation, parse_operation
from mutation_telemetry.models.mutation import ChangeMetrics, ValidationMetrics, ValidationSnapshot

# Operations that touch neither node nor connection counts, but each change one property
PROPERTY_CHANGE_OPERATIONS = frozenset(
    {
        "moveNode",
        "enableNode",
        "disableNode",
        "updateName",
        "addTag",
        "removeTag",
        "activateWorkflow",
        "deactivateWorkflow",
        "cleanStaleConnections",
    }
)


def _payload(operation: DiffOperation, name: str) -> Any:
    value = getattr(operation, name, None)
    if value is None and operation.model_extra:
        value = operation.model_extra.get(name)
    return value


def _key_count(payload: Any) -> int:
    return len(payload) if isinstance(payload, Mapping) else 0


def compute_change_metrics(operations: Iterable[Union[DiffOperation, Mapping[str, Any]]]) -> ChangeMetrics:
    """Aggregates diff operations into node, connection and property counters.

    Unknown operation types are ignored.

    Args:
        operations: The operations applied by one mutation, typed or as raw mappings.

    Returns:
        The accumulated ChangeMetrics.
    """
    metrics = ChangeMetrics()

    for raw_operation in operations:
        operation = parse_operation(raw_operation)
        op_type = operation.type

        if op_type == "addNode":
            metrics.nodes_added += 1
        elif op_type == "removeNode":
            metrics.nodes_removed += 1
        elif op_type == "updateNode":
            metrics.nodes_modified += 1
            metrics.properties_changed += _key_count(_payload(operation, "updates"))
        elif op_type == "addConnection":
            metrics.connections_added += 1
        elif op_type == "removeConnection":
            metrics.connections_removed += 1
        elif op_type == "rewireConnection":
            metrics.connections_removed += 1
            metrics.connections_added += 1
        elif op_type == "replaceConnections":
            # Counted once however many links the replacement touches
            if _payload(operation, "connections") is not None:
                metrics.connections_removed += 1
                metrics.connections_added += 1
        elif op_type == "updateSettings":
            metrics.properties_changed += _key_count(_payload(operation, "settings"))
        elif op_type in PROPERTY_CHANGE_OPERATIONS:
            metrics.properties_changed += 1

    return metrics


def compute_validation_metrics(
    validation_before: Optional[ValidationSnapshot],
    validation_after: Optional[ValidationSnapshot],
) -> ValidationMetrics:
    """Compares error counts before and after an edit.

    Args:
        validation_before: Validation of the workflow before the edit, if any.
        validation_after: Validation of the workflow after the edit, if any.

    Returns:
        ValidationMetrics. `validation_improved` is None when either side is
        missing, and True only when the error count strictly decreased.
    """
    if validation_before is None or validation_after is None:
        return ValidationMetrics(validation_improved=None, errors_resolved=0, errors_introduced=0)

    errors_before = validation_before.error_count
    errors_after = validation_after.error_count

    return ValidationMetrics(
        validation_improved=errors_before > errors_after,
        errors_resolved=max(0, errors_before - errors_after),
        errors_introduced=max(0, errors_after - errors_before),
    )
