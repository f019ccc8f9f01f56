"""Mutation tracker: turns editor mutation events into redacted telemetry records."""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from mutation_telemetry.core.events import Event
from mutation_telemetry.core.logging import log_mutation_outcome
from mutation_telemetry.exceptions import (
    DuplicateRejection,
    ExclusionRejection,
    MutationRejectedError,
    ValidationRejection,
)
from mutation_telemetry.interfaces import Classifier, Sanitizer, Validator
from mutation_telemetry.metrics import compute_change_metrics, compute_validation_metrics
from mutation_telemetry.models.diff_operations import DiffOperation
from mutation_telemetry.models.mutation import MutationEvent, MutationRecord, ValidationSnapshot
from mutation_telemetry.recent_mutations import RecentMutation, RecentMutationRing
from mutation_telemetry.redaction.workflow_redactor import redact_operation, redact_workflow
from mutation_telemetry.settings import DEFAULT_RING_CAPACITY

logger = logging.getLogger(__name__)


class TrackerEvents:
    def __init__(self) -> None:
        self.recorded: Event[MutationRecord] = Event[MutationRecord]("mutation_recorded")


def _copy_operations(operations: List[DiffOperation]) -> List[DiffOperation]:
    return [op.model_copy(deep=True) for op in operations]


def _copy_validation(snapshot: Optional[ValidationSnapshot]) -> Optional[ValidationSnapshot]:
    return snapshot.model_copy(deep=True) if snapshot is not None else None


class MutationTracker:
    """Validates, redacts and annotates workflow mutations for telemetry.

    Each tracker owns its duplicate suppression window. Accepted records are
    returned to the caller and dispatched to listeners of `events.recorded`;
    rejected events and internal failures produce no record and are only
    visible in the logs.
    """

    def __init__(
        self,
        validator: Validator,
        classifier: Classifier,
        sanitizer: Sanitizer,
        ring: Optional[RecentMutationRing] = None,
        ring_capacity: int = DEFAULT_RING_CAPACITY,
    ) -> None:
        """
        Args:
            validator: Checks validity, exclusion and duplication, and hashes workflows.
            classifier: Labels the intent of each mutation.
            sanitizer: Scrubs the free-text user intent.
            ring: Recency window to use. A new one of `ring_capacity` is created if omitted.
            ring_capacity: Capacity of the created ring.

        Raises:
            TrackerConfigurationError: If ring_capacity is invalid and no ring is given.
        """
        self.validator = validator
        self.classifier = classifier
        self.sanitizer = sanitizer
        self.ring = ring if ring is not None else RecentMutationRing(ring_capacity)
        self.events = TrackerEvents()

    def process_mutation(
        self, event: Union[MutationEvent, Mapping[str, Any]], user_id: str
    ) -> Optional[MutationRecord]:
        """
        Build the telemetry record for one mutation event.

        Args:
            event: The mutation event, or its raw camelCase mapping.
            user_id: Identifier of the user who made the edit.

        Returns:
            The MutationRecord, or None if the event was rejected or processing failed.
        """
        session_id = _get(event, "session_id", "sessionId")
        tool_name = _get(event, "tool_name", "toolName")

        try:
            record = self._build_record(event, user_id)
        except ValidationRejection as e:
            log_mutation_outcome(
                session_id, tool_name, e.reason, reason=e.detail, errors=e.errors, warnings=e.warnings
            )
            return None
        except MutationRejectedError as e:
            log_mutation_outcome(session_id, tool_name, e.reason, reason=e.detail)
            return None
        except Exception as e:
            logger.exception(f"Error processing mutation: {e}")
            log_mutation_outcome(session_id, tool_name, "error", reason=f"{type(e).__name__}: {e}")
            return None

        log_mutation_outcome(
            session_id,
            tool_name,
            "recorded",
            details={"operation_count": record.operation_count, "ring_size": self.ring.size()},
        )
        self.events.recorded.dispatch(record)
        return record

    def _build_record(self, event: Union[MutationEvent, Mapping[str, Any]], user_id: str) -> MutationRecord:
        event = self._coerce_event(event)

        result = self.validator.validate(event)
        if not result.valid:
            raise ValidationRejection(
                "Mutation data validation failed", errors=result.errors, warnings=result.warnings
            )
        if result.warnings:
            logger.debug(f"Mutation data validation warnings: {result.warnings}")

        workflow_before = redact_workflow(event.workflow_before)
        workflow_after = redact_workflow(event.workflow_after)
        user_intent = self.sanitizer.sanitize(event.user_intent)

        # Exclusion is judged on what the user actually sent, not the redacted copy
        if self.validator.should_exclude(event):
            raise ExclusionRejection("Mutation excluded from tracking based on quality criteria")

        # The duplicate check and the append must see the same ring
        with self.ring.lock:
            if self.validator.is_duplicate(workflow_before, workflow_after, event.operations, self.ring.snapshot()):
                raise DuplicateRejection("Duplicate mutation detected")

            hash_before = self.validator.hash_workflow(workflow_before)
            hash_after = self.validator.hash_workflow(workflow_after)
            intent_classification = self.classifier.classify(event.operations, user_intent)

            change_metrics = compute_change_metrics(event.operations)
            validation_metrics = compute_validation_metrics(event.validation_before, event.validation_after)

            record = MutationRecord(
                user_id=user_id,
                session_id=event.session_id,
                workflow_before=workflow_before,
                workflow_after=workflow_after,
                workflow_hash_before=hash_before,
                workflow_hash_after=hash_after,
                user_intent=user_intent,
                intent_classification=intent_classification,
                tool_name=event.tool_name,
                operations=[redact_operation(op) for op in event.operations],
                operation_count=len(event.operations),
                operation_types=list(dict.fromkeys(op.type for op in event.operations)),
                validation_before=_copy_validation(event.validation_before),
                validation_after=_copy_validation(event.validation_after),
                mutation_success=event.mutation_success,
                mutation_error=event.mutation_error,
                duration_ms=event.duration_ms,
                **validation_metrics.model_dump(),
                **change_metrics.model_dump(),
            )

            self.ring.append(
                RecentMutation(
                    hash_before=hash_before,
                    hash_after=hash_after,
                    operations=tuple(_copy_operations(event.operations)),
                )
            )

        return record

    @staticmethod
    def _coerce_event(event: Union[MutationEvent, Mapping[str, Any]]) -> MutationEvent:
        if isinstance(event, MutationEvent):
            return event
        try:
            return MutationEvent.model_validate(event)
        except ValidationError as e:
            raise ValidationRejection(
                "Mutation event is malformed",
                errors=[f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()],
            ) from e

    def clear_ring(self) -> None:
        """Empty the duplicate suppression window."""
        self.ring.clear()

    def ring_size(self) -> int:
        return self.ring.size()


def _get(event: Any, attribute: str, key: str) -> Any:
    if isinstance(event, Mapping):
        return event.get(key, event.get(attribute))
    return getattr(event, attribute, None)
