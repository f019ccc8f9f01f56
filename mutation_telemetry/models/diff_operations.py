"""Diff operations: the atomic edit instructions applied to a workflow.

Each operation is tagged by its `type` field. Known types parse into a dedicated
subclass carrying that type's payload; unknown types stay plain `DiffOperation`
instances so newer editors do not break older trackers. Payload fields are
not type-checked here; judging their shape is the Validator's job.

Example operation as emitted by an editor:
{
  "type": "updateNode",
  "nodeName": "HTTP Request",
  "updates": {"parameters.url": "https://example.com", "name": "Fetch"}
}
"""

from collections.abc import Mapping
from typing import Any, Dict, Literal, Type, Union

from pydantic import ConfigDict, Field

from mutation_telemetry.models.base import TelemetryModel


class DiffOperation(TelemetryModel):
    type: str = Field()
    description: Any = Field(default=None)

    model_config = ConfigDict(extra="allow")


class AddNodeOperation(DiffOperation):
    type: Literal["addNode"] = "addNode"
    node: Any = Field(default=None)


class RemoveNodeOperation(DiffOperation):
    type: Literal["removeNode"] = "removeNode"
    node_id: Any = Field(default=None)
    node_name: Any = Field(default=None)


class UpdateNodeOperation(DiffOperation):
    type: Literal["updateNode"] = "updateNode"
    node_id: Any = Field(default=None)
    node_name: Any = Field(default=None)
    updates: Any = Field(default=None)


class MoveNodeOperation(DiffOperation):
    type: Literal["moveNode"] = "moveNode"
    node_id: Any = Field(default=None)
    node_name: Any = Field(default=None)
    position: Any = Field(default=None)


class EnableNodeOperation(DiffOperation):
    type: Literal["enableNode"] = "enableNode"
    node_id: Any = Field(default=None)
    node_name: Any = Field(default=None)


class DisableNodeOperation(DiffOperation):
    type: Literal["disableNode"] = "disableNode"
    node_id: Any = Field(default=None)
    node_name: Any = Field(default=None)


class AddConnectionOperation(DiffOperation):
    type: Literal["addConnection"] = "addConnection"
    source: Any = Field(default=None)
    target: Any = Field(default=None)
    source_output: Any = Field(default=None)
    target_input: Any = Field(default=None)
    source_index: Any = Field(default=None)
    target_index: Any = Field(default=None)
    branch: Any = Field(default=None)
    case: Any = Field(default=None)


class RemoveConnectionOperation(DiffOperation):
    type: Literal["removeConnection"] = "removeConnection"
    source: Any = Field(default=None)
    target: Any = Field(default=None)
    source_output: Any = Field(default=None)
    target_input: Any = Field(default=None)
    ignore_errors: Any = Field(default=None)


class RewireConnectionOperation(DiffOperation):
    type: Literal["rewireConnection"] = "rewireConnection"
    source: Any = Field(default=None)
    from_: Any = Field(default=None, alias="from")
    to: Any = Field(default=None)
    source_output: Any = Field(default=None)
    source_index: Any = Field(default=None)
    branch: Any = Field(default=None)
    case: Any = Field(default=None)


class ReplaceConnectionsOperation(DiffOperation):
    type: Literal["replaceConnections"] = "replaceConnections"
    connections: Any = Field(default=None)


class UpdateSettingsOperation(DiffOperation):
    type: Literal["updateSettings"] = "updateSettings"
    settings: Any = Field(default=None)


class UpdateNameOperation(DiffOperation):
    type: Literal["updateName"] = "updateName"
    name: Any = Field(default=None)


class AddTagOperation(DiffOperation):
    type: Literal["addTag"] = "addTag"
    tag: Any = Field(default=None)


class RemoveTagOperation(DiffOperation):
    type: Literal["removeTag"] = "removeTag"
    tag: Any = Field(default=None)


class ActivateWorkflowOperation(DiffOperation):
    type: Literal["activateWorkflow"] = "activateWorkflow"


class DeactivateWorkflowOperation(DiffOperation):
    type: Literal["deactivateWorkflow"] = "deactivateWorkflow"


class CleanStaleConnectionsOperation(DiffOperation):
    type: Literal["cleanStaleConnections"] = "cleanStaleConnections"
    dry_run: Any = Field(default=None)


# Registry mapping operation type names (as emitted by editors) to their classes
OPERATION_TYPE_TO_CLASS: Dict[str, Type[DiffOperation]] = {
    "addNode": AddNodeOperation,
    "removeNode": RemoveNodeOperation,
    "updateNode": UpdateNodeOperation,
    "moveNode": MoveNodeOperation,
    "enableNode": EnableNodeOperation,
    "disableNode": DisableNodeOperation,
    "addConnection": AddConnectionOperation,
    "removeConnection": RemoveConnectionOperation,
    "rewireConnection": RewireConnectionOperation,
    "replaceConnections": ReplaceConnectionsOperation,
    "updateSettings": UpdateSettingsOperation,
    "updateName": UpdateNameOperation,
    "addTag": AddTagOperation,
    "removeTag": RemoveTagOperation,
    "activateWorkflow": ActivateWorkflowOperation,
    "deactivateWorkflow": DeactivateWorkflowOperation,
    "cleanStaleConnections": CleanStaleConnectionsOperation,
}


def parse_operation(data: Union[DiffOperation, Mapping[str, Any]]) -> DiffOperation:
    """Build the typed operation for a raw mapping.

    Args:
        data: An already-built operation, or a mapping with a 'type' key.

    Returns:
        An instance of the registered subclass for the type, or a plain
        `DiffOperation` when the type is not registered.

    Raises:
        ValueError: If data is neither an operation nor a mapping, or has no string 'type'.
    """
    if isinstance(data, DiffOperation):
        return data
    if not isinstance(data, Mapping):
        raise ValueError(f"Diff operation must be a mapping, got {type(data).__name__}")

    op_type = data.get("type")
    if not isinstance(op_type, str):
        raise ValueError("Diff operation must include a string 'type' field")

    operation_class = OPERATION_TYPE_TO_CLASS.get(op_type, DiffOperation)
    return operation_class.model_validate(dict(data))
