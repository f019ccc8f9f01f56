# Interfaces for the collaborators a MutationTracker delegates to.

import abc
from typing import Optional, Sequence

from mutation_telemetry.models.diff_operations import DiffOperation
from mutation_telemetry.models.mutation import MutationEvent, ValidationResult, WorkflowSnapshot
from mutation_telemetry.recent_mutations import RecentMutation


class Validator(abc.ABC):
    """Checks mutation events for structural validity, policy exclusion and duplication."""

    @abc.abstractmethod
    def validate(self, event: MutationEvent) -> ValidationResult:
        """Check that the event is structurally usable."""
        raise NotImplementedError

    @abc.abstractmethod
    def should_exclude(self, event: MutationEvent) -> bool:
        """
        Decide whether the event is filtered out by quality policy.

        Args:
            event: The original event, before any redaction.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def is_duplicate(
        self,
        workflow_before: Optional[WorkflowSnapshot],
        workflow_after: Optional[WorkflowSnapshot],
        operations: Sequence[DiffOperation],
        recent_mutations: Sequence[RecentMutation],
    ) -> bool:
        """
        Decide whether the mutation repeats one already in the recency window.

        Args:
            workflow_before: Redacted snapshot before the edit.
            workflow_after: Redacted snapshot after the edit.
            operations: The raw operations of the edit.
            recent_mutations: The recency window, oldest first.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def hash_workflow(self, workflow: Optional[WorkflowSnapshot]) -> str:
        """Return a content hash, stable for structurally identical redacted snapshots."""
        raise NotImplementedError


class Classifier(abc.ABC):
    """Labels the intent behind a mutation."""

    @abc.abstractmethod
    def classify(self, operations: Sequence[DiffOperation], user_intent: Optional[str]) -> str:
        raise NotImplementedError


class Sanitizer(abc.ABC):
    """Scrubs personal or secret content from free text."""

    @abc.abstractmethod
    def sanitize(self, text: Optional[str]) -> Optional[str]:
        raise NotImplementedError
