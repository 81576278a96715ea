"""I/O utilities for sequence synthesis.

Handles loading the generation config, exporting a colored RTF view of a
sequence, and saving/loading the region ledger.
"""

from __future__ import annotations

import csv
import logging
import pathlib
from typing import Any, Mapping

import yaml

from SequenceSynthesis.config import GenerationConfig
from SequenceSynthesis.errors import InvalidConfiguration
from SequenceSynthesis.sequence import Sequence

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration loading
# -----------------------------------------------------------------------------

_CONFIG_FIELDS = {
    "total_length",
    "random_seed",
    "min_total_length",
    "min_region_length",
    "max_region_length",
    "kind_weights",
    "gc_bands",
    "feedback_gain",
    "out_path",
    "ledger_path",
    "wrap_width",
}


def _resolve_path(value: str, base_dir: pathlib.Path) -> pathlib.Path:
    path = pathlib.Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


def _require(raw: Mapping[str, Any], key: str) -> Any:
    if key not in raw:
        raise InvalidConfiguration(f"Missing required config field: {key}")
    return raw[key]


def _optional_path(raw: Mapping[str, Any], key: str, base_dir: pathlib.Path) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return str(_resolve_path(str(value), base_dir))


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"{key} must be an integer; got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidConfiguration(f"{key} must be an integer; got {value}")
    return int(value)


def load_generation_config(path: str | pathlib.Path) -> GenerationConfig:
    """Load and validate generation configuration from YAML."""
    path = pathlib.Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"Config file must contain a YAML mapping: {path}")
    unknown = set(raw) - _CONFIG_FIELDS
    if unknown:
        raise InvalidConfiguration(f"Unknown config fields: {sorted(unknown)}")

    base_dir = path.resolve().parent
    kwargs: dict[str, Any] = {"total_length": _as_int(_require(raw, "total_length"), "total_length")}
    for key in ("random_seed", "min_total_length", "min_region_length", "max_region_length", "wrap_width"):
        if raw.get(key) is not None:
            kwargs[key] = _as_int(raw[key], key)
    if raw.get("feedback_gain") is not None:
        kwargs["feedback_gain"] = float(raw["feedback_gain"])
    if raw.get("kind_weights") is not None:
        kwargs["kind_weights"] = {str(k): float(v) for k, v in dict(raw["kind_weights"]).items()}
    if raw.get("gc_bands") is not None:
        bands = {}
        for kind, band in dict(raw["gc_bands"]).items():
            if not isinstance(band, (list, tuple)) or len(band) != 2:
                raise InvalidConfiguration(f"GC band for {kind} must be a [low, high] pair")
            bands[str(kind)] = (float(band[0]), float(band[1]))
        kwargs["gc_bands"] = bands
    if "out_path" in raw:
        kwargs["out_path"] = _optional_path(raw, "out_path", base_dir)
    kwargs["ledger_path"] = _optional_path(raw, "ledger_path", base_dir)
    return GenerationConfig(**kwargs)


# -----------------------------------------------------------------------------
# RTF export
# -----------------------------------------------------------------------------

# Colour table index per base: A red, T blue, G green, C orange.
_RTF_COLOURS = {"A": 1, "T": 2, "G": 3, "C": 4}
_RTF_HEADER = (
    "{\\rtf1\\ansi\\deff0\n"
    "{\\fonttbl{\\f0 Courier New;}}\n"
    "{\\colortbl;"
    "\\red255\\green0\\blue0;"
    "\\red0\\green0\\blue255;"
    "\\red0\\green200\\blue0;"
    "\\red255\\green165\\blue0;}\n"
    "\\f0\\fs20\n"
    "Colored DNA Sequence:\\line\n"
)


def render_rtf(sequence: Sequence, wrap_width: int = 80) -> str:
    """Render sequence as an RTF document with one colour per base."""
    if wrap_width <= 0:
        raise ValueError("wrap_width must be positive")
    parts = [_RTF_HEADER]
    for idx, base in enumerate(sequence):
        colour = _RTF_COLOURS.get(base.symbol)
        if colour is None:
            parts.append(base.symbol)
        else:
            parts.append(f"\\cf{colour} {base.symbol}")
        if (idx + 1) % wrap_width == 0:
            parts.append("\\line\n")
    parts.append("\\cf0\\line\n}\n")
    return "".join(parts)


def write_rtf(sequence: Sequence, path: str | pathlib.Path, wrap_width: int = 80) -> bool:
    """Write the RTF view of sequence to path.

    Returns False and logs the error if the destination cannot be written;
    the sequence itself is unaffected.
    """
    path_obj = pathlib.Path(path)
    document = render_rtf(sequence, wrap_width)
    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        with open(path_obj, "w", encoding="utf-8") as f:
            f.write(document)
    except OSError as exc:
        logger.error("Error opening file %s: %s", path_obj, exc)
        return False
    logger.info("Colored DNA sequence written to %s", path_obj)
    return True


# -----------------------------------------------------------------------------
# Region ledger I/O
# -----------------------------------------------------------------------------

_LEDGER_FIELDS = [
    "index",
    "kind",
    "strand",
    "start",
    "end",
    "length",
    "target_gc",
    "realized_gc",
    "reading_frame",
    "accessibility",
]


def save_region_ledger_csv(sequence: Sequence, path: str | pathlib.Path) -> None:
    """Save one row per region of sequence to CSV."""
    if not sequence.regions:
        raise ValueError("No regions to write")
    path_obj = pathlib.Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)

    with open(path_obj, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=_LEDGER_FIELDS)
        writer.writeheader()
        for region in sequence.regions:
            writer.writerow(region.snapshot())


def load_region_ledger_csv(path: str | pathlib.Path) -> list[dict[str, object]]:
    """Load a region ledger from CSV with numeric columns parsed."""
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = set(_LEDGER_FIELDS) - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Missing columns in region ledger CSV: {missing}")
        rows = []
        for row in reader:
            rows.append(
                {
                    "index": int(row["index"]),
                    "kind": row["kind"],
                    "strand": row["strand"],
                    "start": int(row["start"]),
                    "end": int(row["end"]),
                    "length": int(row["length"]),
                    "target_gc": float(row["target_gc"]),
                    "realized_gc": float(row["realized_gc"]),
                    "reading_frame": int(row["reading_frame"]) if row["reading_frame"] else None,
                    "accessibility": float(row["accessibility"]) if row["accessibility"] else None,
                }
            )
    if not rows:
        raise ValueError(f"No region rows found in {path}")
    return rows
