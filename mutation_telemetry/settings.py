import os

from dotenv import load_dotenv

# Load .env file variables into environment
load_dotenv(verbose=True)

DEFAULT_RING_CAPACITY = 100


class Settings:
    """Mutation telemetry configuration loaded from environment variables."""

    # --- Tracker Settings ---
    def get_ring_capacity(self) -> int:
        """Returns the size of the duplicate suppression window."""
        raw = os.getenv("MUTATION_RING_CAPACITY", str(DEFAULT_RING_CAPACITY))
        try:
            capacity = int(raw)
        except ValueError:
            raise ValueError("MUTATION_RING_CAPACITY environment variable must be an integer.")
        if capacity <= 0:
            raise ValueError(f"MUTATION_RING_CAPACITY must be positive, got {capacity}.")
        return capacity
