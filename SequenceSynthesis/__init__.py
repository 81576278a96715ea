"""Region-segmented synthetic DNA generation package.

Builds a single-stranded DNA sequence from contiguous coding/non-coding
regions, each drawn toward its own GC target, and derives its complement.

Main entry points:
- SequenceSynthesis.assembler: SequenceAssembler class for programmatic use
- SequenceSynthesis.planner: RegionPlanner deciding region kind, length and GC target
- SequenceSynthesis.stochastic: BaseSampler drawing bases from region composition
- SequenceSynthesis.strand: complementary strand
- SequenceSynthesis.io: config loading, RTF export and region ledger I/O
"""

from SequenceSynthesis.assembler import SequenceAssembler
from SequenceSynthesis.config import GenerationConfig
from SequenceSynthesis.errors import (
    InvalidConfiguration,
    InvalidDistribution,
    InvalidRegion,
    SequenceSynthesisError,
)
from SequenceSynthesis.io import (
    load_generation_config,
    load_region_ledger_csv,
    save_region_ledger_csv,
    write_rtf,
)
from SequenceSynthesis.planner import RegionPlanner
from SequenceSynthesis.region import (
    CodingMetadata,
    FeatureType,
    Region,
    RegulatoryMetadata,
    Strand,
)
from SequenceSynthesis.sequence import Base, Sequence
from SequenceSynthesis.stochastic import BaseSampler
from SequenceSynthesis.strand import complement, complement_string

__all__ = [
    # Core classes
    "Base",
    "BaseSampler",
    "CodingMetadata",
    "FeatureType",
    "GenerationConfig",
    "Region",
    "RegionPlanner",
    "RegulatoryMetadata",
    "Sequence",
    "SequenceAssembler",
    "Strand",
    # Errors
    "SequenceSynthesisError",
    "InvalidConfiguration",
    "InvalidDistribution",
    "InvalidRegion",
    # Functions
    "complement",
    "complement_string",
    "load_generation_config",
    "load_region_ledger_csv",
    "save_region_ledger_csv",
    "write_rtf",
]
