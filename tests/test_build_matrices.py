import json
import runpy
import sys
from pathlib import Path

import pytest

from test_ingest import LEGACY_EXPORT

SCRIPT = Path(__file__).parent.parent / "scripts" / "build_matrices.py"


def run_script(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name="__main__")


def test_writes_all_outputs(monkeypatch, tmp_path):
    export = tmp_path / "daylio.csv"
    export.write_text(LEGACY_EXPORT, encoding="utf-8")
    out = tmp_path / "out"

    run_script(monkeypatch, "--input", str(export), "--output", str(out))

    for name in [
        "flatmatrix.csv",
        "gephi-matrix.csv",
        "cooccurrence.gexf",
        "cooccurrence_pairs.csv",
        "cooccurrence_heatmap.png",
        "summary.json",
    ]:
        assert (out / name).exists(), name

    summary = json.loads((out / "summary.json").read_text())
    assert summary["n_days"] == 3
    assert summary["n_pairs"] == 2


def test_unknown_tags_abort_exits(monkeypatch, tmp_path):
    export = tmp_path / "daylio.csv"
    export.write_text(LEGACY_EXPORT, encoding="utf-8")
    config = tmp_path / "config.yaml"
    config.write_text("activities: [run]\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        run_script(
            monkeypatch,
            "--input", str(export),
            "--output", str(tmp_path / "out"),
            "--config", str(config),
            "--no-plot",
        )
    assert excinfo.value.code == 1
