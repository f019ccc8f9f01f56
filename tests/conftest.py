from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
from mutation_telemetry.interfaces import Classifier, Sanitizer, Validator
from mutation_telemetry.models.mutation import ValidationResult
from mutation_telemetry.tracker import MutationTracker


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """AUTOUSE: Keeps tracker settings from the developer's environment out of the tests."""
    monkeypatch.delenv("MUTATION_RING_CAPACITY", raising=False)


@pytest.fixture
def mock_validator() -> MagicMock:
    """Provides a Validator that accepts everything and hashes by node count."""
    validator = MagicMock(spec=Validator)
    validator.validate.return_value = ValidationResult(valid=True)
    validator.should_exclude.return_value = False
    validator.is_duplicate.return_value = False
    validator.hash_workflow.side_effect = lambda wf: f"hash-{len((wf or {}).get('nodes', []))}"
    return validator


@pytest.fixture
def mock_classifier() -> MagicMock:
    classifier = MagicMock(spec=Classifier)
    classifier.classify.return_value = "add_functionality"
    return classifier


@pytest.fixture
def mock_sanitizer() -> MagicMock:
    """Provides a Sanitizer that upper-cases text so its output is recognisable."""
    sanitizer = MagicMock(spec=Sanitizer)
    sanitizer.sanitize.side_effect = lambda text: text.upper() if text else text
    return sanitizer


@pytest.fixture
def tracker(mock_validator, mock_classifier, mock_sanitizer) -> MutationTracker:
    return MutationTracker(validator=mock_validator, classifier=mock_classifier, sanitizer=mock_sanitizer)


@pytest.fixture
def workflow() -> Dict[str, Any]:
    """A small workflow with credentials at workflow and node level."""
    return {
        "id": "wf-1",
        "name": "Sync contacts",
        "ownedBy": {"id": "user-1", "email": "owner@example.com"},
        "createdBy": "user-1",
        "credentials": {"httpBasicAuth": {"id": "7"}},
        "nodes": [
            {
                "id": "node-1",
                "name": "HTTP Request",
                "type": "n8n-nodes-base.httpRequest",
                "position": [250, 300],
                "credentials": {"httpHeaderAuth": {"id": "3", "name": "Prod key"}},
                "parameters": {
                    "url": "https://example.com/contacts",
                    "apiKey": "abc",
                    "options": {"timeout": 5000, "headers": [{"name": "X-Trace", "value": "on"}]},
                },
            },
            {
                "id": "node-2",
                "name": "Set",
                "type": "n8n-nodes-base.set",
                "position": [450, 300],
                "parameters": {"values": {"string": [{"name": "status", "value": "done"}]}},
            },
        ],
        "connections": {"HTTP Request": {"main": [[{"node": "Set", "type": "main", "index": 0}]]}},
        "settings": {"executionOrder": "v1"},
    }


@pytest.fixture
def event_data(workflow) -> Dict[str, Any]:
    """Raw camelCase event as an editor would emit it."""
    return {
        "workflowBefore": workflow,
        "workflowAfter": workflow,
        "operations": [
            {"type": "addNode", "node": {"name": "Filter", "type": "n8n-nodes-base.filter"}},
            {"type": "addConnection", "source": "Set", "target": "Filter"},
        ],
        "userIntent": "add a filter after set",
        "toolName": "n8n_update_partial_workflow",
        "sessionId": "session-1",
        "mutationSuccess": True,
        "durationMs": 42,
    }
