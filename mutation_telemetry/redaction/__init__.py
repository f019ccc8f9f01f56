"""Workflow redaction: removal of credentials and secrets before telemetry."""

from .redaction_utils import (
    REDACTED_API_KEY,
    REDACTED_PLACEHOLDER,
    REDACTED_TOKEN,
    REDACTED_URL_WITH_AUTH,
    SENSITIVE_PARAMETER_KEYS,
    SENSITIVE_WORKFLOW_FIELDS,
)
from .workflow_redactor import redact_operation, redact_parameters, redact_string_value, redact_workflow

__all__ = [
    "REDACTED_API_KEY",
    "REDACTED_PLACEHOLDER",
    "REDACTED_TOKEN",
    "REDACTED_URL_WITH_AUTH",
    "SENSITIVE_PARAMETER_KEYS",
    "SENSITIVE_WORKFLOW_FIELDS",
    "redact_operation",
    "redact_parameters",
    "redact_string_value",
    "redact_workflow",
]
