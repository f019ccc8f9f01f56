# Mutation telemetry exceptions


class MutationTelemetryError(Exception):
    """Base exception for all mutation telemetry errors."""

    pass


class MutationRejectedError(MutationTelemetryError):
    """Base exception for an event that will not produce a mutation record.

    Rejections are raised inside the tracker pipeline and caught at its boundary,
    so callers only ever observe them through logs.
    """

    reason: str = "rejected"

    def __init__(self, *args, detail: str | None = None):
        super().__init__(*args)
        # Use the first arg as detail if detail kwarg is not provided and args exist
        self.detail = detail or (args[0] if args else None)


class ValidationRejection(MutationRejectedError):
    """Raised when the event fails structural validation."""

    reason = "invalid"

    def __init__(self, *args, errors: list | None = None, warnings: list | None = None, detail: str | None = None):
        super().__init__(*args, detail=detail)
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])


class ExclusionRejection(MutationRejectedError):
    """Raised when the exclusion policy filters the event out."""

    reason = "excluded"


class DuplicateRejection(MutationRejectedError):
    """Raised when the event matches a mutation in the recency window."""

    reason = "duplicate"


class TrackerConfigurationError(ValueError, MutationTelemetryError):
    """Raised when a tracker or ring is constructed with invalid settings."""

    pass
