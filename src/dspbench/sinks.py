#!/usr/bin/env python3
"""
Destinations for processed buffers.

The benchmark hands every processed buffer to a sink. ``NullSink`` discards
them. ``PcmFileSink`` keeps copies in memory during the trial and writes a
raw little-endian float64 stream when the trial closes, so disk I/O stays
out of the timed loop.
"""

import logging
import numpy as np
from pathlib import Path
from typing import List, Optional, Union

log = logging.getLogger(__name__)

PCM_DTYPE = np.dtype("<f8")


class BufferSink:
    """Interface for per-trial buffer consumers."""

    def open(self, buffer_len: int) -> None:
        raise NotImplementedError

    def write(self, buf: np.ndarray) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class NullSink(BufferSink):

    def open(self, buffer_len: int) -> None:
        pass

    def write(self, buf: np.ndarray) -> None:
        pass

    def close(self) -> None:
        pass


class PcmFileSink(BufferSink):
    """
    Dump each trial to ``<directory>/<prefix><buffer_len>``.

    Parameters
    ----------
    directory : str or Path
        Output directory, created if missing
    prefix : str
        File name stem, followed by the trial's buffer length
    """

    def __init__(self, directory: Union[str, Path], prefix: str = "vec_overhead_py_"):
        self.directory = Path(directory)
        self.prefix = prefix
        self.path: Optional[Path] = None
        self._chunks: List[np.ndarray] = []

    def path_for(self, buffer_len: int) -> Path:
        return self.directory / f"{self.prefix}{buffer_len}"

    def open(self, buffer_len: int) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self.path = self.path_for(buffer_len)
        if self.path.exists():
            self.path.unlink()
        self._chunks = []

    def write(self, buf: np.ndarray) -> None:
        if self.path is None:
            raise RuntimeError("PcmFileSink.write() called before open()")
        self._chunks.append(buf.copy())

    def close(self) -> None:
        if self.path is None:
            return
        if self._chunks:
            data = np.concatenate(self._chunks).astype(PCM_DTYPE, copy=False)
        else:
            data = np.empty(0, dtype=PCM_DTYPE)
        data.tofile(self.path)
        log.info("Wrote %d samples to %s", len(data), self.path)
        self._chunks = []
        self.path = None
