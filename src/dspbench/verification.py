#!/usr/bin/env python3
"""
Frequency response checks for peaking-EQ cascades.
"""

import numpy as np
from scipy import signal
import matplotlib.pyplot as plt
from typing import Any, Dict, List

from .biquad import Biquad
from .cascade import FilterCascade


def _gain_db(sos: np.ndarray, freqs: np.ndarray, sample_rate: float) -> np.ndarray:
    _, h = signal.sosfreqz(sos, worN=freqs, fs=sample_rate)
    return 20 * np.log10(np.abs(h) + 1e-300)


def stage_gain_db(bq: Biquad, freq: float, sample_rate: float) -> float:
    """Magnitude of one stage at ``freq`` in dB."""
    return float(_gain_db(bq.sos()[np.newaxis, :], np.array([freq]), sample_rate)[0])


def verify_cascade_response(
    cascade: FilterCascade,
    sample_rate: float = 48000.0,
    center_freq: float = 50.0,
    n_points: int = 8192,
    plot: bool = False
) -> Dict[str, Any]:
    """
    Measure the combined response of a cascade.

    Parameters
    ----------
    cascade : FilterCascade
        Stages to analyse (state is not used)
    sample_rate : float
        Sample rate in Hz
    center_freq : float
        Frequency the stages were designed around
    n_points : int
        Frequency grid size, log-spaced from 1 Hz to Nyquist
    plot : bool
        Whether to plot magnitude and phase

    Returns
    -------
    dict
        Verification results
    """
    sos = cascade.sos()
    nyquist = sample_rate / 2
    probes = np.array([0.0, center_freq, nyquist])
    dc_db, center_db, nyq_db = _gain_db(sos, probes, sample_rate)

    freq = np.geomspace(1.0, nyquist, n_points)
    _, h = signal.sosfreqz(sos, worN=freq, fs=sample_rate)
    mag_db = 20 * np.log10(np.abs(h) + 1e-300)
    peak_idx = int(np.argmax(np.abs(mag_db)))

    stage_gains: List[float] = [stage_gain_db(bq, center_freq, sample_rate) for bq in cascade]

    results = {
        'stage_count': len(cascade),
        'center_gain_db': float(center_db),
        'dc_gain_db': float(dc_db),
        'nyquist_gain_db': float(nyq_db),
        'peak_gain_db': float(mag_db[peak_idx]),
        'peak_freq': float(freq[peak_idx]),
        'stage_center_gains_db': stage_gains,
    }

    if plot:
        phase = np.unwrap(np.angle(h))
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 8))

        ax1.semilogx(freq, mag_db)
        ax1.axvline(center_freq, color='g', linestyle='--', label=f'f0: {center_freq:.1f} Hz')
        ax1.set_xlabel('Frequency (Hz)')
        ax1.set_ylabel('Magnitude (dB)')
        ax1.set_title(f'Cascade Response ({len(cascade)} stages)')
        ax1.grid(True, alpha=0.3)
        ax1.legend()

        ax2.semilogx(freq, phase)
        ax2.set_xlabel('Frequency (Hz)')
        ax2.set_ylabel('Phase (radians)')
        ax2.set_title('Phase Response')
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        plt.show()

    return results
