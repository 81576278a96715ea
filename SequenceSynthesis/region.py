"""Region state container for sequence synthesis.

A region is a contiguous span of the sequence with one composition target.
Coding and regulatory regions carry an optional payload selected by kind.
Only the running composition counters change after construction; they are
advanced by the assembler one base at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from SequenceSynthesis.errors import InvalidRegion

ALPHABET = ("A", "T", "G", "C")
GC_SYMBOLS = frozenset({"G", "C"})


class FeatureType(str, Enum):
    CODING = "coding"
    NON_CODING = "non_coding"
    REGULATORY = "regulatory"
    REPEAT = "repeat"


class Strand(str, Enum):
    PLUS = "plus"
    MINUS = "minus"


@dataclass(frozen=True)
class CodingMetadata:
    """Reading frame of a coding region: 1, 2, 3 or -1, -2, -3."""
    reading_frame: int

    def __post_init__(self) -> None:
        if self.reading_frame not in (1, 2, 3, -1, -2, -3):
            raise ValueError(f"reading_frame must be in +/-(1, 2, 3); got {self.reading_frame}")


@dataclass(frozen=True)
class RegulatoryMetadata:
    """Chromatin accessibility of a regulatory region, 0 (closed) to 1 (open)."""
    accessibility: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.accessibility <= 1.0:
            raise ValueError(f"accessibility must be in [0, 1]; got {self.accessibility}")


@dataclass
class Region:
    """Mutable region state tracked while its bases are emitted."""
    index: int
    start_offset: int
    length: int
    kind: FeatureType
    target_gc_fraction: float
    strand: Strand = Strand.PLUS
    coding: Optional[CodingMetadata] = None
    regulatory: Optional[RegulatoryMetadata] = None
    bases_emitted_so_far: int = 0
    gc_count: int = field(default=0, repr=False)

    @property
    def end_offset(self) -> int:
        """Exclusive end position of the region."""
        return self.start_offset + self.length

    @property
    def remaining(self) -> int:
        return self.length - self.bases_emitted_so_far

    @property
    def is_exhausted(self) -> bool:
        return self.bases_emitted_so_far >= self.length

    @property
    def running_gc_fraction(self) -> float:
        """GC fraction of the bases emitted so far, 0 before the first base."""
        if self.bases_emitted_so_far == 0:
            return 0.0
        return self.gc_count / self.bases_emitted_so_far

    @property
    def is_coding(self) -> bool:
        return self.kind is FeatureType.CODING

    @property
    def chromatin_access(self) -> float:
        if self.regulatory is None:
            return 0.0
        return self.regulatory.accessibility

    def record_base(self, symbol: str) -> None:
        """Advance the composition counters by one emitted base."""
        if symbol not in ALPHABET:
            raise ValueError(f"Base must be one of {''.join(ALPHABET)}; got {symbol!r}")
        if self.is_exhausted:
            raise InvalidRegion(
                f"Region {self.index} already holds {self.length} bases"
            )
        self.bases_emitted_so_far += 1
        if symbol in GC_SYMBOLS:
            self.gc_count += 1

    def snapshot(self) -> dict:
        """Return a flat dictionary for ledger serialization."""
        return {
            "index": self.index,
            "kind": self.kind.value,
            "strand": self.strand.value,
            "start": self.start_offset,
            "end": self.end_offset,
            "length": self.length,
            "target_gc": self.target_gc_fraction,
            "realized_gc": self.running_gc_fraction,
            "reading_frame": self.coding.reading_frame if self.coding else None,
            "accessibility": self.regulatory.accessibility if self.regulatory else None,
        }
