"""Region planning for sequence synthesis.

The planner decides the kind, composition target and length of the next
region from the amount of sequence generated so far. It keeps no state
between calls; every random decision is drawn from the generator passed in,
so a fixed seed and call sequence reproduce the same plan.
"""

from __future__ import annotations

import numpy as np

from SequenceSynthesis.config import GenerationConfig
from SequenceSynthesis.errors import InvalidConfiguration, InvalidRegion
from SequenceSynthesis.region import (
    CodingMetadata,
    FeatureType,
    Region,
    RegulatoryMetadata,
    Strand,
)

READING_FRAMES = (1, 2, 3, -1, -2, -3)


class RegionPlanner:
    """Draws region plans within the configured length range and GC bands."""

    def __init__(self, config: GenerationConfig) -> None:
        self.config = config
        self.kinds = [FeatureType(kind) for kind in config.kind_weights]
        weights = np.array(list(config.kind_weights.values()), dtype=np.float64)
        self.kind_probs = weights / weights.sum()

    def _draw_kind(self, rng: np.random.Generator) -> FeatureType:
        idx = int(rng.choice(len(self.kinds), p=self.kind_probs))
        return self.kinds[idx]

    def _draw_target_gc(self, kind: FeatureType, rng: np.random.Generator) -> float:
        lo, hi = self.config.gc_bands[kind.value]
        return float(rng.uniform(lo, hi))

    def _draw_length(self, remaining: int, rng: np.random.Generator) -> int:
        """Draw a region length clamped to the remaining budget.

        When fewer than min_region_length bases remain, the final region is
        exactly the remainder.
        """
        if remaining < self.config.min_region_length:
            return remaining
        drawn = int(
            rng.integers(
                self.config.min_region_length,
                self.config.max_region_length,
                endpoint=True,
            )
        )
        return min(drawn, remaining)

    def plan_next_region(
        self,
        generated_so_far: int,
        total_target_length: int,
        rng: np.random.Generator,
        index: int = 0,
    ) -> Region:
        """Plan the region starting at generated_so_far."""
        if total_target_length < self.config.min_total_length:
            raise InvalidConfiguration(
                f"total_target_length must be at least {self.config.min_total_length}; "
                f"got {total_target_length}"
            )
        if not 0 <= generated_so_far < total_target_length:
            raise InvalidRegion(
                f"No budget left to plan a region at offset {generated_so_far} "
                f"of {total_target_length}"
            )
        kind = self._draw_kind(rng)
        target_gc = self._draw_target_gc(kind, rng)
        length = self._draw_length(total_target_length - generated_so_far, rng)

        coding = None
        regulatory = None
        strand = Strand.PLUS
        if kind is FeatureType.CODING:
            frame = int(rng.choice(READING_FRAMES))
            coding = CodingMetadata(reading_frame=frame)
            if frame < 0:
                strand = Strand.MINUS
        elif kind is FeatureType.REGULATORY:
            regulatory = RegulatoryMetadata(accessibility=float(rng.uniform(0.0, 1.0)))

        return Region(
            index=index,
            start_offset=generated_so_far,
            length=length,
            kind=kind,
            target_gc_fraction=target_gc,
            strand=strand,
            coding=coding,
            regulatory=regulatory,
        )
