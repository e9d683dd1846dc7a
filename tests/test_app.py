"""Tests for the procstat command-line entry point."""

import logging

import pytest

from procstat.app import build_parser, main, process_id

PID = 555


@pytest.fixture
def proc_root(tmp_path, monkeypatch):
    """A fake /proc tree with one process, selected through the environment."""
    process_dir = tmp_path / str(PID)
    process_dir.mkdir()
    (process_dir / "statm").write_text("100 50 10 5 2 20 0\n")
    (process_dir / "stat").write_text(
        f"{PID} (sleep) S 1 {PID} {PID} 0 -1 0 10 0 0 0 250 50 0 0 20 0 1 0\n"
    )
    (process_dir / "status").write_text("Name:\tsleep\nUmask:\t0022\nPid:\t555\n")
    monkeypatch.setenv("PROCSTAT_PROC_ROOT", str(tmp_path))
    monkeypatch.setattr("procstat.sysinfo.page_size", lambda: 4096)
    monkeypatch.setattr("procstat.sysinfo.clock_ticks", lambda: 100)
    return tmp_path


def test_process_id_parses_integers():
    """Test process IDs are parsed as integers."""
    assert process_id("1234") == 1234


def test_parser_prog():
    """Test the parser reports its program name."""
    assert build_parser().prog == "procstat"


def test_main_runs_all_reporters(proc_root, capsys):
    """Test the three blocks print in order, separated by blank lines."""
    assert main([str(PID)]) == 0

    blocks = capsys.readouterr().out.split("\n\n")
    assert len(blocks) == 3
    assert blocks[0].startswith(f"Memory Usage Statistics for Process {PID}:")
    assert "Virtual:      100 pages (400 KiB)" in blocks[0]
    assert blocks[1].startswith(f"Process Statistics for Process {PID}:")
    assert "User Mode Time: 2.5 seconds" in blocks[1]
    assert blocks[2] == "Name:\tsleep\nPid:\t555\n"


def test_missing_source_does_not_stop_other_reporters(proc_root, capsys, caplog):
    """Test a missing statm is reported and the other reporters still run."""
    (proc_root / str(PID) / "statm").unlink()

    assert main([str(PID)]) == 0

    out = capsys.readouterr().out
    assert "Memory Usage Statistics" not in out
    assert f"Process Statistics for Process {PID}:" in out
    assert "Name:\tsleep" in out
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "statm" in errors[0].getMessage()


def test_negative_page_count_does_not_stop_other_reporters(proc_root, capsys, caplog):
    """Test a statm record with a negative field only skips the memory block."""
    (proc_root / str(PID) / "statm").write_text("-1 50 10 5 2 20 0\n")

    assert main([str(PID)]) == 0

    out = capsys.readouterr().out
    assert "Memory Usage Statistics" not in out
    assert f"Process Statistics for Process {PID}:" in out
    assert "Name:\tsleep" in out
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "Malformed record" in errors[0].getMessage()


def test_unknown_process_exits_zero(proc_root, capsys, caplog):
    """Test a process with no records still exits with status 0."""
    assert main(["999999"]) == 0

    assert capsys.readouterr().out.strip() == ""
    assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 3


@pytest.mark.parametrize("argv", [[], ["1", "2"], ["1", "2", "3"]])
def test_wrong_argument_count(argv, proc_root, capsys):
    """Test zero or several arguments exit with status 1 and no report."""
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: procstat" in captured.err


@pytest.mark.parametrize("value", ["abc", "12abc", "1.5"])
def test_invalid_process_id(value, proc_root, capsys):
    """Test a non-integer argument exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        main([value])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid process ID" in captured.err
