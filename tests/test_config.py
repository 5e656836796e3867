import json

import pytest
from pydantic import ValidationError

from soundstudy.config import load_settings, save_settings
from soundstudy.models import SynthesisSettings


def test_defaults_when_missing(tmp_path):
	s = load_settings(tmp_path / "missing.json")
	assert s == SynthesisSettings()
	assert (s.frequency, s.amplitude, s.sampling_rate) == (440.0, 1.0, 44100)
	assert (s.fade_in_ms, s.fade_out_ms, s.output) == (10, 10, "test.wav")


def test_save_and_load(tmp_path):
	p = tmp_path / "settings.json"
	s = SynthesisSettings(frequency=261.63, harmonics=4, dump="wavedata")
	save_settings(s, p)
	assert load_settings(p) == s


def test_partial_file_keeps_defaults(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"harmonics": 2}))
	s = load_settings(p)
	assert s.harmonics == 2
	assert s.frequency == 440.0


def test_invalid_values(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"frequency": -1}))
	with pytest.raises(ValidationError):
		load_settings(p)
	p.write_text(json.dumps([1, 2]))
	with pytest.raises(ValueError):
		load_settings(p)
