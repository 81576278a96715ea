"""Watson-Crick complementary strand.

A <-> T and G <-> C in the same positional order. Symbols outside the
alphabet map to N. Region ledger and base annotations carry over unchanged;
the complement gets its own copy of each region.
"""

from __future__ import annotations

import dataclasses

from SequenceSynthesis.sequence import Sequence

UNKNOWN_SYMBOL = "N"
COMPLEMENT = {"A": "T", "T": "A", "G": "C", "C": "G"}


def complement_symbol(symbol: str) -> str:
    return COMPLEMENT.get(symbol, UNKNOWN_SYMBOL)


def complement_string(text: str) -> str:
    return "".join(complement_symbol(symbol) for symbol in text)


def complement(sequence: Sequence) -> Sequence:
    """Return the complementary strand without touching the input."""
    return Sequence(
        bases=[
            dataclasses.replace(base, symbol=complement_symbol(base.symbol))
            for base in sequence.bases
        ],
        regions=[dataclasses.replace(region) for region in sequence.regions],
    )
