"""Generation configuration for region-based sequence synthesis.

Defines the requested sequence length, the region length range, the kind
mix and GC bands used by the planner, and the export targets. The requested
length must be at least min_total_length so that one region of meaningful
size fits.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from SequenceSynthesis.errors import InvalidConfiguration
from SequenceSynthesis.region import FeatureType

DEFAULT_KIND_WEIGHTS = {
    FeatureType.CODING.value: 0.5,
    FeatureType.NON_CODING.value: 0.5,
}

DEFAULT_GC_BANDS = {
    FeatureType.CODING.value: (0.55, 0.65),
    FeatureType.NON_CODING.value: (0.35, 0.45),
    FeatureType.REGULATORY.value: (0.45, 0.55),
    FeatureType.REPEAT.value: (0.30, 0.40),
}


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration parameters for sequence synthesis."""
    total_length: int = 10000
    random_seed: int | None = None
    min_total_length: int = 100
    min_region_length: int = 50
    max_region_length: int = 500
    kind_weights: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_KIND_WEIGHTS))
    gc_bands: dict[str, tuple[float, float]] = field(default_factory=lambda: dict(DEFAULT_GC_BANDS))
    feedback_gain: float = 0.0
    out_path: str | None = "results/genome.rtf"
    ledger_path: str | None = None
    wrap_width: int = 80

    def __post_init__(self) -> None:
        if self.min_total_length <= 0:
            raise InvalidConfiguration("min_total_length must be positive")
        if self.total_length < self.min_total_length:
            raise InvalidConfiguration(
                f"total_length must be at least {self.min_total_length}; got {self.total_length}"
            )
        if self.min_region_length <= 0:
            raise InvalidConfiguration("min_region_length must be positive")
        if self.max_region_length < self.min_region_length:
            raise InvalidConfiguration("max_region_length must be >= min_region_length")
        if self.random_seed is not None and self.random_seed < 0:
            raise InvalidConfiguration("random_seed must be non-negative")
        if not math.isfinite(self.feedback_gain) or self.feedback_gain < 0:
            raise InvalidConfiguration("feedback_gain must be a non-negative finite number")
        if self.wrap_width <= 0:
            raise InvalidConfiguration("wrap_width must be positive")

        kinds = {kind.value for kind in FeatureType}
        if not self.kind_weights:
            raise InvalidConfiguration("kind_weights must be non-empty")
        for kind, weight in self.kind_weights.items():
            if kind not in kinds:
                raise InvalidConfiguration(f"Unknown region kind in kind_weights: {kind}")
            if not math.isfinite(weight) or weight < 0:
                raise InvalidConfiguration(f"Weight for {kind} must be non-negative")
            if kind not in self.gc_bands:
                raise InvalidConfiguration(f"No GC band configured for region kind {kind}")
        if sum(self.kind_weights.values()) <= 0:
            raise InvalidConfiguration("kind_weights must have a positive total")

        bands: dict[str, tuple[float, float]] = {}
        for kind, band in self.gc_bands.items():
            if kind not in kinds:
                raise InvalidConfiguration(f"Unknown region kind in gc_bands: {kind}")
            lo, hi = (float(v) for v in band)
            if not 0.0 <= lo <= hi <= 1.0:
                raise InvalidConfiguration(
                    f"GC band for {kind} must satisfy 0 <= low <= high <= 1; got ({lo}, {hi})"
                )
            bands[kind] = (lo, hi)
        object.__setattr__(self, "gc_bands", bands)
        object.__setattr__(
            self, "kind_weights", {k: float(v) for k, v in self.kind_weights.items()}
        )
