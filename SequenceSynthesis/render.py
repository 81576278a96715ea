"""Plain-text views of sequences for console output."""

from __future__ import annotations

from SequenceSynthesis.sequence import Sequence


def sequence_to_string(sequence: Sequence) -> str:
    return sequence.to_string()


def format_double_helix(strand1: Sequence, strand2: Sequence) -> str:
    """Pair two same-length strands, one "X - Y" line per position."""
    if len(strand1) != len(strand2):
        raise ValueError(f"Strand lengths differ: {len(strand1)} vs {len(strand2)}")
    lines = ["=== Double Helix Representation ==="]
    lines.extend(f"{b1.symbol} - {b2.symbol}" for b1, b2 in zip(strand1, strand2))
    return "\n".join(lines)


def format_region_summary(sequence: Sequence) -> str:
    """One line per region with its kind, span and GC target vs. realized."""
    lines = []
    for region in sequence.regions:
        lines.append(
            f"[{region.index:>3}] {region.kind.value:<10} {region.strand.value:<5} "
            f"{region.start_offset}-{region.end_offset} len={region.length} "
            f"gc_target={region.target_gc_fraction:.3f} gc_realized={region.running_gc_fraction:.3f}"
        )
    return "\n".join(lines)
