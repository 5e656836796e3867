from __future__ import annotations

import logging
from functools import reduce
from typing import Sequence

import numpy as np

from .errors import IncompatibleWaveformError
from .models import Waveform


logger = logging.getLogger(__name__)


def _check_compatible(a: Waveform, b: Waveform) -> None:
	if a.channel_depth != b.channel_depth:
		raise IncompatibleWaveformError(
			f"channel depth differs: {a.channel_depth} vs {b.channel_depth}"
		)
	if a.sampling_rate != b.sampling_rate:
		raise IncompatibleWaveformError(
			f"sampling rate differs: {a.sampling_rate} vs {b.sampling_rate}"
		)
	if a.stereo != b.stereo:
		raise IncompatibleWaveformError("waveforms must be both stereo or both monaural")


def add(a: Waveform, b: Waveform) -> Waveform:
	"""Sum two waveforms sample by sample over their common length.

	The peak is taken from the summed signal, not from the inputs' peaks.
	"""
	_check_compatible(a, b)
	n = min(len(a), len(b))
	if len(a) != len(b):
		logger.debug("Adding waveforms of different length (%d, %d), keeping %d", len(a), len(b), n)
	x = a.samples[:n] + b.samples[:n]
	peak = max(0.0, float(np.max(x))) if n else 0.0
	return a.derive(x, peak)


def gain(w: Waveform, factor: float) -> Waveform:
	return w.derive(w.samples * factor, w.peak * factor)


def mix(waveforms: Sequence[Waveform]) -> Waveform:
	"""Stack a sequence of waveforms, e.g. the partials of a harmonic series."""
	if not waveforms:
		raise ValueError("mix needs at least one waveform")
	return reduce(add, waveforms[1:], waveforms[0])
