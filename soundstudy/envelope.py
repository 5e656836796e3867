from __future__ import annotations

import numpy as np

from .errors import BoundaryError
from .models import Waveform


def fade_period(sampling_rate: int, duration_ms: int) -> int:
	"""Number of samples a fade of duration_ms covers.

	Samples per millisecond are truncated first, so 44100 Hz gives 44 per ms.
	"""
	if duration_ms < 0:
		raise BoundaryError(f"fade duration must not be negative, got {duration_ms} ms")
	return (sampling_rate // 1000) * duration_ms


def _checked_period(w: Waveform, duration_ms: int) -> int:
	period = fade_period(w.sampling_rate, duration_ms)
	if period > len(w):
		raise BoundaryError(
			f"fade of {duration_ms} ms ({period} samples) exceeds waveform of {len(w)} samples"
		)
	return period


def fade_in(w: Waveform, duration_ms: int) -> Waveform:
	"""Ramp the first samples linearly from 0 up to (period - 1) / period."""
	period = _checked_period(w, duration_ms)
	x = w.samples.copy()
	if period > 0:
		x[:period] *= np.arange(period, dtype=np.float64) / period
	return w.derive(x, w.peak)


def fade_out(w: Waveform, duration_ms: int) -> Waveform:
	"""Ramp the last samples linearly from 1 down to 1 / period."""
	period = _checked_period(w, duration_ms)
	x = w.samples.copy()
	if period > 0:
		start = len(x) - period
		x[start:] *= (period - np.arange(period, dtype=np.float64)) / period
	return w.derive(x, w.peak)
