"""Configuration classes for graphsolve components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Limits applied to the graph solvers."""

    # Upper bound on augmenting paths found by a single max-flow call.
    # None disables the bound.
    max_augmentations: Optional[int] = 100_000

    def resolve_limit(self, override: Optional[int] = None) -> Optional[int]:
        """Return the effective augmentation limit for one call.

        Args:
            override: Per-call limit. Takes precedence over the configured value
                when given.

        Returns:
            The limit to enforce, or None when unbounded.

        Raises:
            ValueError: If the effective limit is negative.
        """
        limit = self.max_augmentations if override is None else override
        if limit is not None and limit < 0:
            raise ValueError(f"max_augmentations must be non-negative, got {limit}")
        return limit


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
