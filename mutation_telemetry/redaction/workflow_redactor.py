"""Redaction of credentials and secret-shaped strings from workflow snapshots.

Every function here returns new data and leaves its input untouched, and running
a redactor over its own output returns an equal value.
"""

import copy
from typing import Any, Optional

from mutation_telemetry.models.diff_operations import DiffOperation, parse_operation
from mutation_telemetry.models.mutation import WorkflowSnapshot
from mutation_telemetry.redaction.redaction_utils import (
    REDACTED_PLACEHOLDER,
    SENSITIVE_WORKFLOW_FIELDS,
    STRING_REDACTION_PATTERNS,
    is_sensitive_key,
)


def redact_workflow(workflow: Optional[WorkflowSnapshot]) -> Optional[WorkflowSnapshot]:
    """Returns a redacted deep copy of a workflow snapshot.

    Workflow-level owner and credential fields are dropped, each node loses its
    `credentials` and has its `parameters` redacted. Ids, positions, types and
    connections are kept as they are.

    Args:
        workflow: The workflow snapshot, or None.

    Returns:
        The redacted copy, or None if no workflow was given.
    """
    if workflow is None:
        return None

    redacted = copy.deepcopy(workflow)

    for field in SENSITIVE_WORKFLOW_FIELDS:
        redacted.pop(field, None)

    nodes = redacted.get("nodes")
    if isinstance(nodes, list):
        redacted["nodes"] = [_redact_node(node) for node in nodes]

    return redacted


def _redact_node(node: Any) -> Any:
    if not isinstance(node, dict):
        return node

    node.pop("credentials", None)
    parameters = node.get("parameters")
    if isinstance(parameters, (dict, list)):
        node["parameters"] = redact_parameters(parameters)
    return node


def redact_parameters(value: Any) -> Any:
    """Recursively redacts a JSON-like parameters structure (dicts and lists).

    Values under sensitive keys are replaced by the redaction placeholder whatever
    their type. Other strings inside the structure go through `redact_string_value`.

    Args:
        value: The parameters structure. Anything other than a dict or list is
            returned as is.

    Returns:
        A new structure of the same shape with sensitive content redacted.
    """
    if isinstance(value, dict):
        return {
            key: REDACTED_PLACEHOLDER if is_sensitive_key(str(key)) else _redact_value(item)
            for key, item in value.items()
        }
    elif isinstance(value, list):
        return [_redact_value(item) for item in value]
    else:
        return value


def _redact_value(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return redact_parameters(value)
    elif isinstance(value, str):
        return redact_string_value(value)
    else:
        return value


def redact_string_value(value: str) -> str:
    """Replaces URLs with credentials, long tokens, provider keys and bearer tokens.

    Patterns are applied one after another in a fixed order, so when matches
    overlap the earlier pattern wins.
    """
    if not value:
        return value

    redacted = value
    for pattern, replacement in STRING_REDACTION_PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted


def redact_operation(operation: DiffOperation) -> DiffOperation:
    """Returns a redacted copy of a diff operation.

    A node carried by the operation is redacted like a workflow node. Every other
    payload field goes through `redact_parameters`, so sensitive keys inside
    `updates` or `settings` are replaced and secret-shaped strings are scanned.
    """
    data = operation.model_dump(by_alias=True)
    node = data.pop("node", None)

    redacted = redact_parameters(data)
    if node is not None:
        redacted["node"] = _redact_node(copy.deepcopy(node))
    return parse_operation(redacted)
