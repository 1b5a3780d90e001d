"""Configuration classes for netalgo algorithms."""

from dataclasses import dataclass


@dataclass
class AlgorithmConfig:
    """Tunables shared by the heap, shortest-path and flow algorithms."""

    # Default number of children per node for d-ary heaps
    heap_arity: int = 2

    # Residual capacity at or below this value counts as exhausted
    min_residual_capacity: float = 0.0

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if self.heap_arity < 2:
            raise ValueError(f"heap_arity must be at least 2, got {self.heap_arity}.")
        if self.min_residual_capacity < 0:
            raise ValueError(
                "min_residual_capacity must be non-negative, "
                f"got {self.min_residual_capacity}."
            )


# Global configuration instance
ALGORITHM_CONFIG = AlgorithmConfig()
