import json
import logging

import pytest

from notegraph import __main__ as cli
from notegraph.settings import APP_NAME


@pytest.fixture(autouse=True)
def _no_file_logging(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "setup_logging", lambda console=False: logging.LoggerAdapter(logging.getLogger(APP_NAME), {}))
    monkeypatch.setattr(cli, "install_global_exception_hooks", lambda log: None)


def test_prints_graph(tmp_path, capsys):
    (tmp_path / "A.md").write_text("[[B]] [[Ghost]]", encoding="utf-8")
    (tmp_path / "B.md").write_text("", encoding="utf-8")

    assert cli.main([str(tmp_path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["nodes"] == [
        {"id": "A", "kind": "materialized"},
        {"id": "B", "kind": "materialized"},
        {"id": "Ghost", "kind": "ghost"},
    ]
    assert payload["edges"] == [{"from": "A", "to": "B"}, {"from": "A", "to": "Ghost"}]


def test_center(tmp_path, capsys):
    (tmp_path / "A.md").write_text("[[B]]", encoding="utf-8")
    (tmp_path / "B.md").write_text("[[C]]", encoding="utf-8")
    (tmp_path / "C.md").write_text("", encoding="utf-8")

    assert cli.main([str(tmp_path), "--center", "C"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [n["id"] for n in payload["nodes"]] == ["B", "C"]


def test_missing_dir(tmp_path):
    assert cli.main([str(tmp_path / "nope")]) == 2


def test_depth_below_one_rejected(tmp_path):
    with pytest.raises(SystemExit):
        cli.main([str(tmp_path), "--center", "A", "--depth", "0"])
