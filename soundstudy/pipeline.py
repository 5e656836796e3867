from __future__ import annotations

import logging

from .combinator import gain, mix
from .envelope import fade_in, fade_out
from .errors import UnsupportedFormatError
from .generator import harmonic_series
from .models import SynthesisSettings, Waveform
from .normalize import normalize
from .riff import encode_pcm
from .sink import write_bytes, write_wave_data


logger = logging.getLogger(__name__)


def render(w: Waveform, fade_in_ms: int = 0, fade_out_ms: int = 0) -> bytes:
	"""Fade, normalize and encode a mono waveform into WAV bytes."""
	if w.stereo:
		# No interleave order is defined for stereo waveforms yet
		raise UnsupportedFormatError("stereo rendering is not supported")
	shaped = fade_out(fade_in(w, fade_in_ms), fade_out_ms)
	return encode_pcm(normalize(shaped))


def synthesize(settings: SynthesisSettings) -> Waveform:
	partials = harmonic_series(
		settings.frequency,
		settings.harmonics,
		settings.amplitude,
		settings.sampling_rate,
		settings.channel_depth,
	)
	w = mix(partials)
	if settings.gain != 1.0:
		w = gain(w, settings.gain)
	logger.debug("Synthesized %d partial(s), peak %.6f", len(partials), w.peak)
	return w


def run(settings: SynthesisSettings) -> int:
	"""Synthesize, optionally dump and write the WAV file; returns bytes written."""
	w = synthesize(settings)
	if settings.dump:
		write_wave_data(settings.dump, w)
	data = render(w, settings.fade_in_ms, settings.fade_out_ms)
	return write_bytes(settings.output, data)
