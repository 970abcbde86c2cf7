from __future__ import annotations

import io
import logging

import pytest
import yaml

import yahtzee.cli.main as cli_main
from yahtzee.utils.logging import configure_logging as real_configure_logging


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch, preserve_root_logger):
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kw: calls.append(kw))
    return calls


def _run(argv: list[str]) -> str:
    out = io.StringIO()
    cli_main.main(argv, out=out)
    return out.getvalue()


def test_score_prints_every_category() -> None:
    text = _run(["score", "3", "3", "3", "2", "2"])
    lines = text.splitlines()
    assert len(lines) == 13
    assert lines[0] == "ones: 0"
    assert "three_of_a_kind: 13" in lines
    assert "full_house: 25" in lines
    assert lines[-1] == "chance: 13"


def test_score_selected_categories() -> None:
    text = _run(["score", "1", "2", "3", "4", "6", "--category", "smallStraight", "--category", "chance"])
    assert text.splitlines() == ["small_straight: 30", "chance: 16"]


def test_score_uses_overrides() -> None:
    text = _run(["--set", "rules.yahtzee=75", "score", "4", "4", "4", "4", "4", "--category", "yahtzee"])
    assert text == "yahtzee: 75\n"


def test_score_uses_config_file(write_yaml) -> None:
    cfg_path = write_yaml("cfg.yaml", {"rules": {"large_straight": 45}})
    text = _run(["--config", str(cfg_path), "score", "2", "3", "4", "5", "6", "--category", "large_straight"])
    assert text == "large_straight: 45\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["score", "1", "2", "3", "4"],
        ["score", "1", "2", "3", "4", "9"],
        ["score", "1", "2", "3", "4", "5", "--category", "two_pairs"],
        ["--set", "rules.full_house=-1", "score", "1", "1", "2", "2", "2"],
        ["--set", "rules.bogus=1", "score", "1", "1", "2", "2", "2"],
    ],
)
def test_errors_exit_with_usage(argv: list[str], capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(argv)
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_table_writes_yaml(tmp_path) -> None:
    target = tmp_path / "out" / "scores.yaml"
    _run(["table", "--output", str(target)])

    rows = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert len(rows) == 252
    assert rows[0] == {
        "dice": [1, 1, 1, 1, 1],
        "scores": {
            "ones": 5,
            "twos": 0,
            "threes": 0,
            "fours": 0,
            "fives": 0,
            "sixes": 0,
            "three_of_a_kind": 5,
            "four_of_a_kind": 5,
            "full_house": 0,
            "small_straight": 0,
            "large_straight": 0,
            "yahtzee": 50,
            "chance": 5,
        },
    }
    assert not list(target.parent.glob("._tmp_*"))


def test_log_level_flag_wins_over_config(_quiet_logging) -> None:
    _run(["--log-level", "debug", "score", "1", "1", "1", "1", "1"])
    assert _quiet_logging[-1]["level"] == logging.DEBUG


def test_log_level_from_config(_quiet_logging) -> None:
    _run(["--set", "logging.level=ERROR", "score", "1", "1", "1", "1", "1"])
    assert _quiet_logging[-1]["level"] == logging.ERROR


def test_log_file_directory_exits_with_usage(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli_main, "configure_logging", real_configure_logging)
    log_dir = tmp_path / "logs"
    log_dir.mkdir()

    with pytest.raises(SystemExit) as excinfo:
        _run(["--set", f"logging.log_file={log_dir}", "score", "1", "1", "1", "1", "1"])

    assert excinfo.value.code == 2
    assert "cannot open log file" in capsys.readouterr().err


def test_table_output_directory_exits_with_usage(tmp_path, capsys) -> None:
    target = tmp_path / "already_a_dir"
    target.mkdir()

    with pytest.raises(SystemExit) as excinfo:
        _run(["table", "--output", str(target)])

    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err
    assert not list(tmp_path.glob("._tmp_*"))
