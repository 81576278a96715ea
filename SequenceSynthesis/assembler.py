"""Sequence assembler for region-segmented synthesis.

Alternates between two states until the requested length is reached:
    PlanningRegion: ask the planner for the next region and push it on the ledger
    EmittingBase:   sample a base under the active region's running composition,
                    append it and advance the region counters
A region is exhausted exactly when bases_emitted_so_far == length. The planner
clamps every region to the remaining budget, so a run takes exactly
total_target_length base draws.
"""

from __future__ import annotations

import logging

import numpy as np

from SequenceSynthesis.config import GenerationConfig
from SequenceSynthesis.errors import InvalidConfiguration, InvalidRegion
from SequenceSynthesis.planner import RegionPlanner
from SequenceSynthesis.region import Region
from SequenceSynthesis.sequence import Base, Sequence
from SequenceSynthesis.stochastic import BaseSampler

logger = logging.getLogger(__name__)


class SequenceAssembler:
    """Builds a sequence region by region from a GenerationConfig."""

    def __init__(
        self,
        config: GenerationConfig,
        planner: RegionPlanner | None = None,
        sampler: BaseSampler | None = None,
    ) -> None:
        self.config = config
        self.planner = planner if planner is not None else RegionPlanner(config)
        self.sampler = sampler if sampler is not None else BaseSampler(config.feedback_gain)

    def _check_region(self, region: Region, generated_so_far: int, total: int) -> None:
        if region.length <= 0:
            raise InvalidRegion(f"Region {region.index} has non-positive length {region.length}")
        if region.start_offset != generated_so_far:
            raise InvalidRegion(
                f"Region {region.index} starts at {region.start_offset}, expected {generated_so_far}"
            )
        if region.end_offset > total:
            raise InvalidRegion(
                f"Region {region.index} ends at {region.end_offset}, past target length {total}"
            )
        if region.bases_emitted_so_far != 0:
            raise InvalidRegion(f"Region {region.index} was planned with bases already emitted")

    def _emit_base(self, region: Region, position: int, rng: np.random.Generator) -> Base:
        symbol = self.sampler.sample(region, rng)
        region.record_base(symbol)
        return Base(
            symbol=symbol,
            position=position,
            region_index=region.index,
            coding=region.is_coding,
            chromatin_access=region.chromatin_access,
        )

    def generate(
        self,
        total_target_length: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> Sequence:
        """Generate a sequence of exactly total_target_length bases.

        Each call draws from its own generator seeded with config.random_seed
        unless one is passed in.
        """
        total = self.config.total_length if total_target_length is None else int(total_target_length)
        if total < self.config.min_total_length:
            raise InvalidConfiguration(
                f"total_target_length must be at least {self.config.min_total_length}; got {total}"
            )
        if rng is None:
            rng = np.random.default_rng(self.config.random_seed)

        sequence = Sequence()
        generated_so_far = 0
        while generated_so_far < total:
            region = self.planner.plan_next_region(
                generated_so_far, total, rng, index=len(sequence.regions)
            )
            self._check_region(region, generated_so_far, total)
            sequence.regions.append(region)
            logger.debug(
                "Region %d: type=%s target_gc=%.3f target_at=%.3f length=%d",
                region.index,
                region.kind.value,
                region.target_gc_fraction,
                1.0 - region.target_gc_fraction,
                region.length,
            )

            while not region.is_exhausted:
                sequence.append(self._emit_base(region, generated_so_far, rng))
                generated_so_far += 1

        logger.info(
            "Generated %d bases in %d regions (GC=%.3f)",
            len(sequence),
            len(sequence.regions),
            sequence.gc_content(),
        )
        return sequence
