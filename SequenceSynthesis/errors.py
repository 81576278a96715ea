"""Error taxonomy for sequence synthesis.

All errors abort the current generation call; none of them is retried.
"""

from __future__ import annotations


class SequenceSynthesisError(ValueError):
    """Base class for generation contract violations."""


class InvalidConfiguration(SequenceSynthesisError):
    """Requested parameters cannot support region-based generation."""


class InvalidRegion(SequenceSynthesisError):
    """A planned region is empty or falls outside the remaining budget."""


class InvalidDistribution(SequenceSynthesisError):
    """A base probability vector cannot be normalized."""
