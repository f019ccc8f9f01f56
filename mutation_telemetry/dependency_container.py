# Dependency Injection Container.

from typing import Optional

from mutation_telemetry.interfaces import Classifier, Sanitizer, Validator
from mutation_telemetry.settings import Settings
from mutation_telemetry.tracker import MutationTracker


class DependencyContainer:
    """Holds the collaborators a mutation tracker depends on.

    Keeping them in one place makes it easy to substitute fakes in tests and to
    see which parts of the system reach outside the tracker.
    """

    def __init__(
        self,
        validator: Validator,
        classifier: Classifier,
        sanitizer: Sanitizer,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initializes the container.

        Args:
            validator: Validity, exclusion, duplicate and hashing collaborator.
            classifier: Intent classifier.
            sanitizer: Free-text sanitizer.
            settings: Application settings. Defaults to a fresh Settings().
        """
        self.settings = settings or Settings()
        self.validator = validator
        self.classifier = classifier
        self.sanitizer = sanitizer

    def create_mutation_tracker(self) -> MutationTracker:
        """
        Creates a tracker that owns a new duplicate suppression window.

        Returns:
            A MutationTracker whose ring capacity comes from the settings.

        Raises:
            ValueError: If the configured ring capacity is invalid.
        """
        return MutationTracker(
            validator=self.validator,
            classifier=self.classifier,
            sanitizer=self.sanitizer,
            ring_capacity=self.settings.get_ring_capacity(),
        )
