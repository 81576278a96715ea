from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Sequence

from SequenceSynthesis.assembler import SequenceAssembler
from SequenceSynthesis.io import load_generation_config, save_region_ledger_csv, write_rtf
from SequenceSynthesis.render import format_region_summary
from SequenceSynthesis.strand import complement


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a region-segmented synthetic DNA sequence.")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to generation YAML config (default: config.yaml)",
    )
    parser.add_argument("--length", type=int, default=None, help="Override total_length")
    parser.add_argument("--seed", type=int, default=None, help="Override random_seed")
    parser.add_argument("--out", default=None, help="Override out_path for the RTF export")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return parser.parse_args(argv)


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING if verbose == 0 else (logging.INFO if verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    gen_config = load_generation_config(args.config)
    overrides = {}
    if args.length is not None:
        overrides["total_length"] = args.length
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.out is not None:
        overrides["out_path"] = args.out
    if overrides:
        gen_config = dataclasses.replace(gen_config, **overrides)

    assembler = SequenceAssembler(gen_config)
    sequence = assembler.generate()
    complementary = complement(sequence)  # Paired strand, same region ledger.

    if gen_config.out_path is not None:
        if not write_rtf(sequence, gen_config.out_path, gen_config.wrap_width):
            print(f"Skipped RTF export: could not write {gen_config.out_path}")
    if gen_config.ledger_path is not None:
        save_region_ledger_csv(sequence, gen_config.ledger_path)
        print(f"Wrote region ledger to {gen_config.ledger_path}")

    print(format_region_summary(sequence))
    print(
        f"Generated {len(sequence)} bases in {len(sequence.regions)} regions "
        f"(GC={sequence.gc_content():.3f}, complement GC={complementary.gc_content():.3f})"
    )


if __name__ == "__main__":
    main()
