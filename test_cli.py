#!/usr/bin/env python3
"""
Command line smoke runs on a reduced sweep.
"""

import pytest

from dspbench.cli import build_parser, main

SMALL_ARGS = ["--sample-count", "256", "--filter-count", "2",
              "--low-exp", "2", "--high-exp", "4"]


def test_defaults_match_fixed_benchmark():
    a = build_parser().parse_args([])
    assert a.sample_rate == 48000.0
    assert a.sample_count == 524288
    assert a.filter_count == 100
    assert (a.low_exp, a.high_exp) == (3, 13)
    assert a.backend == "vector"
    assert a.write_buffers is None


def test_runs_sweep(capsys):
    assert main(SMALL_ARGS) == 0
    out = capsys.readouterr().out
    assert out.startswith("DSP Bench Python\n")
    assert "Buffer size: 4 samples" in out
    assert "Buffer size: 8 samples" in out
    assert "Buffer size: 16 samples" not in out
    assert out.count("x for generator + IIR filter") == 2


def test_scalar_backend_label(capsys):
    assert main(SMALL_ARGS + ["--backend", "scalar"]) == 0
    assert "\tscalar\t" in capsys.readouterr().out


def test_verify_prints_response(capsys):
    assert main(SMALL_ARGS + ["--verify"]) == 0
    out = capsys.readouterr().out
    assert "Cascade response" in out
    assert "center gain" in out


def test_write_buffers(tmp_path):
    assert main(SMALL_ARGS + ["--write-buffers", str(tmp_path)]) == 0
    assert (tmp_path / "vec_overhead_py_4").stat().st_size == 256 * 8
    assert (tmp_path / "vec_overhead_py_8").stat().st_size == 256 * 8


def test_log_file(tmp_path):
    log_path = tmp_path / "bench.log"
    assert main(SMALL_ARGS + ["--debug", "--log-file", str(log_path)]) == 0
    text = log_path.read_text()
    assert "Sweeping buffer lengths" in text
    assert "DEBUG" in text


def test_invalid_range_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--low-exp", "5", "--high-exp", "5"])
    assert exc.value.code == 2
    assert "exponent range" in capsys.readouterr().err
