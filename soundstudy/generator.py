from __future__ import annotations

import logging
from typing import List

import numpy as np

from .errors import UnsupportedFormatError
from .models import Waveform


logger = logging.getLogger(__name__)

SUPPORTED_DEPTH = 16


def generate_sine(
	frequency: float,
	amplitude: float,
	sampling_rate: int,
	channel_depth: int = SUPPORTED_DEPTH,
	stereo: bool = False,
) -> Waveform:
	"""Generate exactly one second of a pure sine tone.

	Args:
		frequency: Frequency in Hz, must be positive
		amplitude: Linear amplitude of the tone
		sampling_rate: Samples per second, also the number of samples produced
		channel_depth: Bits per sample; only 16 is supported
		stereo: Carried on the waveform, samples stay a single sequence
	"""
	if frequency <= 0:
		raise ValueError(f"frequency must be positive, got {frequency}")
	if sampling_rate <= 0:
		raise ValueError(f"sampling_rate must be positive, got {sampling_rate}")
	if channel_depth != SUPPORTED_DEPTH:
		logger.warning("Unsupported channel depth %d for sine generation", channel_depth)
		raise UnsupportedFormatError(f"channel depth {channel_depth} is not supported")

	i = np.arange(sampling_rate, dtype=np.float64)
	x = amplitude * np.sin(2.0 * np.pi * frequency * i / sampling_rate)
	# Peak tracking starts from silence, as the running maximum does
	peak = max(0.0, float(np.max(x)))
	logger.debug("Generated %.2f Hz tone at %d Hz, peak %.6f", frequency, sampling_rate, peak)
	return Waveform(
		sampling_rate=sampling_rate,
		channel_depth=channel_depth,
		stereo=stereo,
		samples=x,
		peak=peak,
	)


def harmonic_series(
	fundamental: float,
	count: int,
	amplitude: float,
	sampling_rate: int,
	channel_depth: int = SUPPORTED_DEPTH,
) -> List[Waveform]:
	"""Partials k * fundamental for k = 1..count, partial k at amplitude / k.

	Overtones at or above the Nyquist frequency are left out; the fundamental
	is always kept, like a single `generate_sine` call.
	"""
	if count < 1:
		raise ValueError(f"count must be at least 1, got {count}")
	nyquist = sampling_rate / 2.0
	partials: List[Waveform] = []
	for k in range(1, count + 1):
		freq = fundamental * k
		if k > 1 and freq >= nyquist:
			logger.debug("Skipping partial %d at %.2f Hz (Nyquist %.2f Hz)", k, freq, nyquist)
			continue
		partials.append(generate_sine(freq, amplitude / k, sampling_rate, channel_depth))
	return partials
