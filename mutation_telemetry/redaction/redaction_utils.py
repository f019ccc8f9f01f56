"""Markers, sensitive-key lists and secret patterns used by workflow redaction."""

import re
from typing import List, Tuple

REDACTED_PLACEHOLDER: str = "[REDACTED]"
REDACTED_URL_WITH_AUTH: str = "[REDACTED_URL_WITH_AUTH]"
REDACTED_TOKEN: str = "[REDACTED_TOKEN]"
REDACTED_API_KEY: str = "[REDACTED_APIKEY]"

# Top-level workflow fields that identify owners or carry credentials
SENSITIVE_WORKFLOW_FIELDS: List[str] = [
    "credentials",
    "sharedWorkflows",
    "ownedBy",
    "createdBy",
    "updatedBy",
]

# Matched case-insensitively as substrings of parameter keys
SENSITIVE_PARAMETER_KEYS: List[str] = [
    "apiKey",
    "api_key",
    "token",
    "secret",
    "password",
    "credential",
    "auth",
    "authorization",
    "privateKey",
    "accessToken",
    "refreshToken",
]

# Applied in order; each pattern sees the output of the previous one.
# A bearer token long enough to be a generic token is caught by the second
# pattern first, then normalised by the last.
STRING_REDACTION_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"https?://[^:]+:[^@]+@[^\s/]+"), REDACTED_URL_WITH_AUTH),
    (re.compile(r"\b[A-Za-z0-9_-]{32,}\b", re.ASCII), REDACTED_TOKEN),
    (re.compile(r"\bsk-[A-Za-z0-9]{32,}\b", re.ASCII), REDACTED_API_KEY),
    (re.compile(r"Bearer\s+\S+", re.IGNORECASE), f"Bearer {REDACTED_PLACEHOLDER}"),
]


def is_sensitive_key(key: str, sensitive_keys: List[str] = SENSITIVE_PARAMETER_KEYS) -> bool:
    """Returns True if any sensitive key occurs in `key`, ignoring case."""
    lower_key = key.lower()
    return any(sensitive.lower() in lower_key for sensitive in sensitive_keys)
