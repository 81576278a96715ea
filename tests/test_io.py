import pathlib

import pytest

from SequenceSynthesis.assembler import SequenceAssembler
from SequenceSynthesis.errors import InvalidConfiguration
from SequenceSynthesis.io import (
    load_generation_config,
    load_region_ledger_csv,
    render_rtf,
    save_region_ledger_csv,
    write_rtf,
)
from SequenceSynthesis.render import format_double_helix, format_region_summary, sequence_to_string
from SequenceSynthesis.sequence import Sequence
from SequenceSynthesis.strand import complement


def test_render_rtf_colours_and_wraps():
    doc = render_rtf(Sequence.from_string("ATGC" * 40 + "X"), wrap_width=80)
    assert doc.startswith("{\\rtf1\\ansi\\deff0\n")
    assert "{\\fonttbl{\\f0 Courier New;}}" in doc
    assert "\\cf1 A\\cf2 T\\cf3 G\\cf4 C" in doc
    assert doc.count("\\line\n") == 4
    assert doc.endswith("X\\cf0\\line\n}\n")


def test_write_rtf(tmp_path):
    seq = Sequence.from_string("ATGC")
    out = tmp_path / "results" / "genome.rtf"
    assert write_rtf(seq, out)
    assert out.read_text(encoding="utf-8") == render_rtf(seq)


def test_write_rtf_failure_is_reported(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    seq = Sequence.from_string("ATGC")
    assert write_rtf(seq, blocker / "genome.rtf") is False
    assert "Error opening file" in caplog.text
    assert seq.to_string() == "ATGC"


def test_region_ledger_round_trip(config, tmp_path):
    seq = SequenceAssembler(config).generate()
    path = tmp_path / "regions.csv"
    save_region_ledger_csv(seq, path)
    rows = load_region_ledger_csv(path)
    assert len(rows) == len(seq.regions)
    assert sum(row["length"] for row in rows) == len(seq)
    for row, region in zip(rows, seq.regions):
        assert row["kind"] == region.kind.value
        assert row["start"] == region.start_offset
        assert row["realized_gc"] == pytest.approx(region.running_gc_fraction)


def test_save_ledger_requires_regions(tmp_path):
    with pytest.raises(ValueError):
        save_region_ledger_csv(Sequence(), tmp_path / "regions.csv")


def test_load_generation_config(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "total_length: 500\n"
        "random_seed: 9\n"
        "kind_weights: {coding: 0.3, non_coding: 0.5, regulatory: 0.2}\n"
        "gc_bands:\n"
        "  coding: [0.55, 0.65]\n"
        "  non_coding: [0.35, 0.45]\n"
        "  regulatory: [0.45, 0.55]\n"
        "out_path: out/genome.rtf\n"
        "ledger_path: out/regions.csv\n",
        encoding="utf-8",
    )
    cfg = load_generation_config(cfg_path)
    assert cfg.total_length == 500
    assert cfg.random_seed == 9
    assert cfg.kind_weights["regulatory"] == 0.2
    assert cfg.gc_bands["regulatory"] == (0.45, 0.55)
    assert pathlib.Path(cfg.out_path) == (tmp_path / "out" / "genome.rtf").resolve()
    assert pathlib.Path(cfg.ledger_path) == (tmp_path / "out" / "regions.csv").resolve()


@pytest.mark.parametrize(
    "text",
    [
        "- not\n- a mapping\n",
        "random_seed: 1\n",
        "total_length: 500\ncolour: red\n",
        "total_length: 50\n",
        "total_length: 500\ngc_bands: {coding: [0.5]}\n",
        "total_length: 99.9\n",
        "total_length: 500\nmax_region_length: 120.5\n",
        "total_length: \"500\"\n",
        "total_length: true\n",
    ],
)
def test_load_generation_config_rejects(tmp_path, text):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(text, encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        load_generation_config(cfg_path)


def test_format_double_helix():
    seq = Sequence.from_string("ATG")
    assert format_double_helix(seq, complement(seq)).splitlines()[1:] == [
        "A - T",
        "T - A",
        "G - C",
    ]
    with pytest.raises(ValueError):
        format_double_helix(seq, Sequence.from_string("AT"))


def test_format_region_summary(config):
    seq = SequenceAssembler(config).generate()
    lines = format_region_summary(seq).splitlines()
    assert len(lines) == len(seq.regions)
    assert "gc_target=" in lines[0]


def test_integral_float_length_is_accepted(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("total_length: 500.0\nrandom_seed: 3\n", encoding="utf-8")
    cfg = load_generation_config(cfg_path)
    assert cfg.total_length == 500
    assert isinstance(cfg.total_length, int)


def test_sequence_to_string():
    seq = Sequence.from_string("atgcx")
    assert sequence_to_string(seq) == "ATGCX"
    assert sequence_to_string(complement(seq)) == "TACGN"
    assert sequence_to_string(Sequence()) == ""
