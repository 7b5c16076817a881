#!/usr/bin/env python3
"""
Buffer sinks.
"""

import numpy as np
import pytest

from dspbench.sinks import NullSink, PcmFileSink


def test_pcm_sink_writes_little_endian_float64(tmp_path):
    sink = PcmFileSink(tmp_path)
    sink.open(4)
    buf = np.array([0.5, -0.5, 0.25, 1.0])
    sink.write(buf)
    buf[:] = [1.0, 2.0, 3.0, 4.0]
    sink.write(buf)
    sink.close()

    path = tmp_path / "vec_overhead_py_4"
    data = np.fromfile(path, dtype="<f8")
    np.testing.assert_array_equal(data, [0.5, -0.5, 0.25, 1.0, 1.0, 2.0, 3.0, 4.0])
    assert path.stat().st_size == 8 * 8


def test_pcm_sink_replaces_stale_file(tmp_path):
    stale = tmp_path / "dump_8"
    stale.write_bytes(b"x" * 1000)

    sink = PcmFileSink(tmp_path, prefix="dump_")
    sink.open(8)
    assert not stale.exists()
    sink.write(np.zeros(8))
    sink.close()
    assert stale.stat().st_size == 64


def test_pcm_sink_creates_directory(tmp_path):
    sink = PcmFileSink(tmp_path / "nested" / "out")
    sink.open(2)
    sink.close()
    assert (tmp_path / "nested" / "out" / "vec_overhead_py_2").exists()


def test_pcm_sink_write_before_open(tmp_path):
    with pytest.raises(RuntimeError):
        PcmFileSink(tmp_path).write(np.zeros(2))


def test_null_sink_accepts_everything():
    sink = NullSink()
    sink.open(16)
    sink.write(np.zeros(16))
    sink.close()
