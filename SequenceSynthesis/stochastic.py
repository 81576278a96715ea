"""Stochastic base sampling.

Maps a region's composition state to a categorical distribution over
A, T, G, C and draws one base from it with a single uniform draw.
"""

from __future__ import annotations

import numpy as np

from SequenceSynthesis.errors import InvalidDistribution
from SequenceSynthesis.region import ALPHABET, Region


# -----------------------------------------------------------------------------
# Probability vector
# -----------------------------------------------------------------------------

def gc_mass(region: Region, feedback_gain: float = 0.0) -> float:
    """Return the GC probability mass for the next base of region.

    The mass is the region target. With a positive feedback_gain, a region
    that has already emitted bases is pushed away from its running GC
    fraction: gc = target + gain * (target - running), clipped to [0, 1].
    """
    target = float(region.target_gc_fraction)
    if not np.isfinite(target) or not 0.0 <= target <= 1.0:
        raise InvalidDistribution(
            f"target_gc_fraction must be in [0, 1]; got {region.target_gc_fraction}"
        )
    if feedback_gain and region.bases_emitted_so_far > 0:
        shifted = target + feedback_gain * (target - region.running_gc_fraction)
        return float(np.clip(shifted, 0.0, 1.0))
    return target


def _normalize(probs: np.ndarray) -> np.ndarray:
    if probs.shape != (len(ALPHABET),):
        raise InvalidDistribution(f"Expected {len(ALPHABET)} probabilities; got shape {probs.shape}")
    if np.any(np.isnan(probs)) or np.any(probs < 0):
        raise InvalidDistribution(f"Degenerate base distribution: {probs.tolist()}")
    total = probs.sum()
    if not np.isfinite(total) or total <= 0:
        raise InvalidDistribution(f"Base distribution cannot be normalized: {probs.tolist()}")
    return probs / total


class BaseSampler:
    """Stateless sampler over the A, T, G, C ordering."""

    def __init__(self, feedback_gain: float = 0.0) -> None:
        self.feedback_gain = float(feedback_gain)

    def probabilities_for(self, region: Region) -> np.ndarray:
        """Return normalized [p_A, p_T, p_G, p_C] for the next base of region."""
        gc = gc_mass(region, self.feedback_gain)
        at = 1.0 - gc
        probs = np.array([at / 2.0, at / 2.0, gc / 2.0, gc / 2.0], dtype=np.float64)
        return _normalize(probs)

    def sample(self, region: Region, rng: np.random.Generator) -> str:
        """Draw one base; a draw on a bucket boundary falls in the right bucket."""
        cumulative = np.cumsum(self.probabilities_for(region))
        cumulative[-1] = 1.0
        r = rng.random()
        idx = int(np.searchsorted(cumulative, r, side="right"))
        return ALPHABET[min(idx, len(ALPHABET) - 1)]
