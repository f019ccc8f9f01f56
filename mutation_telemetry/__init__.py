"""Redacted, metric-annotated telemetry for workflow mutations."""

from .dependency_container import DependencyContainer
from .interfaces import Classifier, Sanitizer, Validator
from .models import DiffOperation, MutationEvent, MutationRecord
from .recent_mutations import RecentMutation, RecentMutationRing
from .tracker import MutationTracker

__all__ = [
    "Classifier",
    "DependencyContainer",
    "DiffOperation",
    "MutationEvent",
    "MutationRecord",
    "MutationTracker",
    "RecentMutation",
    "RecentMutationRing",
    "Sanitizer",
    "Validator",
]
