import os

from sample_size_explorer import explore


def test_run_writes_one_chart_per_analysis(tmp_path):
    paths = explore.run(str(tmp_path))
    assert [os.path.basename(p) for p in paths] == [
        "sample_size_by_mde.png",
        "sample_size_by_alpha.png",
        "sample_size_by_baseline_rate.png",
    ]
    for path in paths:
        assert os.path.getsize(path) > 0


def test_main_prints_written_paths(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(explore, "OUTPUT_DIR", str(tmp_path))
    explore.main()
    out = capsys.readouterr().out
    assert out.count("Wrote: ") == 3
    assert str(tmp_path) in out
