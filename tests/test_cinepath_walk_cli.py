"""Tests for the ``cinepath_walk`` command line demo."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import cinepath_walk


def test_demo_walks_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert cinepath_walk.main(["--json"]) == 0

    payload = json.loads(capsys.readouterr().out)

    assert len(payload) == 10
    comedy, action = payload[0], payload[1]
    assert comedy["name"] == "Pure comedy"
    assert comedy["tags"] == [35]
    assert comedy["genres"] == ["Comedy"]
    assert comedy["comparison"]["efficiency_percent"] == 50.0
    assert action["tags"] == [28, 878]
    assert action["depth"] == 10


def test_custom_answers(capsys: pytest.CaptureFixture[str]) -> None:
    assert cinepath_walk.main(["--answers", "nnnnyyy", "--json"]) == 0

    (walk,) = json.loads(capsys.readouterr().out)

    assert walk["name"] == "Custom"
    assert walk["tags"] == [27, 53, 14]
    assert walk["genres"] == ["Horror", "Thriller", "Fantasy"]


def test_table_output_lists_tree_statistics(capsys: pytest.CaptureFixture[str]) -> None:
    assert cinepath_walk.main(["--answers", "1,0,1"]) == 0

    out = capsys.readouterr().out

    assert "Recommended genres" in out
    assert "Tree statistics" in out
    assert "409" in out


def test_invalid_answers_exit_with_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cinepath_walk.main(["--answers", "maybe"])
    assert exc.value.code == 2
    assert "use y/n or 1/0" in capsys.readouterr().err


def test_invalid_config_exits_with_usage_error(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.json"
    config_path.write_text(json.dumps({"max_sessions": -1}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cinepath_walk.main(["--config", str(config_path)])
    assert exc.value.code == 2


def test_every_demo_walk_reaches_a_recommendation() -> None:
    engine = cinepath_walk.DecisionTree()
    for walk in cinepath_walk._iter_demo_walks():
        assert engine.traverse(walk.answers).reached_leaf, walk.name
