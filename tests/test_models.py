import numpy as np

from soundstudy.generator import generate_sine
from soundstudy.models import PCM16, Waveform
from soundstudy.normalize import normalize


def test_generated_waveforms_compare_by_value():
	a = generate_sine(440.0, 1.0, 8000)
	b = generate_sine(440.0, 1.0, 8000)
	assert a == b
	assert hash(a) == hash(b)
	assert len({a, b}) == 1


def test_waveforms_differ_on_samples_or_format():
	w = generate_sine(440.0, 1.0, 8000)
	assert w != generate_sine(441.0, 1.0, 8000)
	assert w != w.derive(w.samples, w.peak * 2)
	assert w != Waveform(sampling_rate=8000, stereo=True, samples=w.samples, peak=w.peak)
	assert w != "not a waveform"


def test_signed_zero_hashes_alike():
	a = Waveform(sampling_rate=2, samples=[0.0, 1.0])
	b = Waveform(sampling_rate=2, samples=[-0.0, 1.0])
	assert a == b
	assert hash(a) == hash(b)


def test_pcm16_compare_by_value():
	w = generate_sine(440.0, 1.0, 8000)
	assert normalize(w) == normalize(w)
	assert hash(normalize(w)) == hash(normalize(w))
	assert PCM16(sampling_rate=8000, samples=np.array([1, 2], dtype=np.int16)) != PCM16(
		sampling_rate=8000, samples=np.array([1, 3], dtype=np.int16)
	)
