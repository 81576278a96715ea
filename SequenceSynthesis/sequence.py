"""Sequence container produced by the assembler.

A sequence is an append-only list of bases plus the region ledger whose
lengths partition it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from SequenceSynthesis.region import GC_SYMBOLS, Region


@dataclass(frozen=True)
class Base:
    """One emitted nucleotide with the annotations of its region."""
    symbol: str
    position: int
    region_index: Optional[int] = None
    coding: bool = False
    repair_efficiency: float = 1.0
    methylation: float = 0.0
    chromatin_access: float = 0.0


@dataclass
class Sequence:
    bases: List[Base] = field(default_factory=list)
    regions: List[Region] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.bases)

    def __iter__(self) -> Iterator[Base]:
        return iter(self.bases)

    def __getitem__(self, idx: int) -> Base:
        return self.bases[idx]

    def append(self, base: Base) -> None:
        if base.position != len(self.bases):
            raise ValueError(
                f"Base position {base.position} does not extend sequence of length {len(self.bases)}"
            )
        self.bases.append(base)

    def to_string(self) -> str:
        return "".join(base.symbol for base in self.bases)

    def gc_content(self) -> float:
        """GC fraction over the whole sequence, 0 for an empty sequence."""
        if not self.bases:
            return 0.0
        gc = sum(1 for base in self.bases if base.symbol in GC_SYMBOLS)
        return gc / len(self.bases)

    def region_at(self, position: int) -> Region | None:
        for region in self.regions:
            if region.start_offset <= position < region.end_offset:
                return region
        return None

    @classmethod
    def from_string(cls, text: str) -> "Sequence":
        """Build an unannotated sequence from text, normalized to upper case."""
        return cls(
            bases=[Base(symbol=symbol, position=pos) for pos, symbol in enumerate(text.strip().upper())]
        )
