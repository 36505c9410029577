"""End-to-end runs through the cli entry point."""

import io

import pytest

from helpers import noisy_group, timing_file
from timeblind.sqli import cli

SEEDED = {"TIMEBLIND_SEED": "1234"}


def run(text, environ=SEEDED):
    return cli.run(io.StringIO(text), environ=environ)


def test_clear_delay_exits_with_one(caplog, capsys):
    baseline = noisy_group(0.05, 0.003, 60, seed=21)
    delayed = noisy_group(0.5, 0.01, 60, seed=22)
    assert run(timing_file(baseline, delayed)) == cli.EXIT_REJECTED
    assert "blind sql injection highly likely" in caplog.text
    assert "Time:Bootstrap" in caplog.text
    assert "blind sql injection highly likely" in capsys.readouterr().err


@pytest.mark.slow
def test_identical_noisy_groups_exit_with_zero(caplog, capsys):
    caplog.set_level("ERROR", logger="TimeBlind")
    group = noisy_group(0.2, 0.05, 60, seed=23)
    assert run(timing_file(group, group)) == cli.EXIT_NO_EVIDENCE
    assert "no evidence" not in caplog.text
    assert "no evidence of a timing difference" in capsys.readouterr().err


def test_short_backlog_exits_with_two(caplog):
    group = noisy_group(0.2, 0.05, 30, seed=24)
    assert run(timing_file(group, group)) == cli.EXIT_ERROR
    assert "at least 60 are required" in caplog.text


def test_empty_input_exits_with_two(caplog):
    assert run("# nothing here\n") == cli.EXIT_ERROR
    assert "no observation count" in caplog.text


def test_garbage_count_exits_with_two():
    assert run("sixty\n1 2\n3 4\n") == cli.EXIT_ERROR


def test_bad_seed_exits_with_two(caplog):
    baseline = noisy_group(0.05, 0.003, 60, seed=25)
    assert run(timing_file(baseline, baseline), environ={"TIMEBLIND_SEED": "abc"}) == cli.EXIT_ERROR
    assert "TIMEBLIND_SEED" in caplog.text


def test_main_exits_with_the_verdict(monkeypatch):
    baseline = noisy_group(0.05, 0.003, 60, seed=26)
    delayed = noisy_group(0.9, 0.01, 60, seed=27)
    monkeypatch.setattr("sys.stdin", io.StringIO(timing_file(baseline, delayed)))
    monkeypatch.setenv("TIMEBLIND_SEED", "5")
    monkeypatch.delenv("TIMEBLIND_LOG_FILE", raising=False)
    with pytest.raises(SystemExit) as info:
        cli.main()
    assert info.value.code == cli.EXIT_REJECTED


def test_main_with_a_broken_log_level(monkeypatch, capsys):
    monkeypatch.setenv("TIMEBLIND_LOG_LEVEL", "LOUD")
    with pytest.raises(SystemExit) as info:
        cli.main()
    assert info.value.code == cli.EXIT_ERROR
    assert "TIMEBLIND_LOG_LEVEL" in capsys.readouterr().err
