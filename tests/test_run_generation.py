import run_generation


def test_main_writes_outputs(tmp_path, capsys):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "total_length: 1000\n"
        "random_seed: 1\n"
        "out_path: results/genome.rtf\n"
        "ledger_path: results/regions.csv\n",
        encoding="utf-8",
    )
    run_generation.main(["--config", str(cfg_path), "--length", "300"])
    assert (tmp_path / "results" / "genome.rtf").exists()
    assert (tmp_path / "results" / "regions.csv").exists()
    out = capsys.readouterr().out
    assert "Generated 300 bases" in out
