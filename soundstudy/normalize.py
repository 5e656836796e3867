from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .errors import DegenerateSignalError, UnsupportedFormatError
from .models import INT16_MAX, INT16_MIN, PCM16, Waveform


logger = logging.getLogger(__name__)

PEAK_EPSILON = 1e-12


def normalize(w: Waveform, reference: Optional[float] = None) -> PCM16:
	"""Map floating-point samples to signed 16-bit PCM relative to a peak.

	Each sample becomes (s / peak) * 32767, clipped to the int16 range and
	truncated toward zero. `reference` replaces `w.peak`, which lets several
	signals share one scale.
	"""
	if w.channel_depth != 16:
		raise UnsupportedFormatError(f"cannot normalize to {w.channel_depth}-bit samples")
	peak = w.peak if reference is None else float(reference)
	if not math.isfinite(peak) or peak <= PEAK_EPSILON:
		raise DegenerateSignalError(f"reference peak {peak!r} is not usable for normalization")
	if not np.all(np.isfinite(w.samples)):
		raise DegenerateSignalError("waveform contains NaN or infinite samples")

	scaled = (w.samples / peak) * float(INT16_MAX)
	clipped = np.clip(scaled, INT16_MIN, INT16_MAX)
	n_clipped = int(np.count_nonzero(clipped != scaled))
	if n_clipped:
		logger.debug("Clipped %d of %d samples", n_clipped, len(w))
	return PCM16(sampling_rate=w.sampling_rate, samples=np.trunc(clipped).astype(np.int16))
