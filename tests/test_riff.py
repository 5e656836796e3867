import io
import struct

import numpy as np
import pytest
import soundfile as sf

from soundstudy.errors import BoundaryError, EncodingSizeMismatchError, UnsupportedFormatError
from soundstudy.models import PCM16
from soundstudy import riff
from soundstudy.riff import HEADER_LEN, encode, encode_pcm, parse_header, verify_layout


def _ramp(n):
	return (np.arange(n, dtype=np.int64) * 37 % 65536 - 32768).astype(np.int16)


def test_header_fields_round_trip():
	samples = _ramp(1000)
	data = encode(samples, 22050, 16, 1)
	hdr = parse_header(data)
	assert data[0:4] == b"RIFF"
	assert data[8:12] == b"WAVE"
	assert data[12:16] == b"fmt "
	assert data[36:40] == b"data"
	assert hdr.fmt_size == 16
	assert hdr.format_code == 1
	assert hdr.num_channels == 1
	assert hdr.sample_rate == 22050
	assert hdr.bits_per_sample == 16
	assert hdr.block_align == 2
	assert hdr.byte_rate == 22050 * 2
	assert hdr.data_size == 1000 * hdr.block_align
	assert hdr.riff_size == 4 + 24 + 8 + hdr.data_size


def test_declared_sizes_match_payload():
	data = encode(_ramp(777), 8000)
	hdr = parse_header(data)
	assert len(data) - HEADER_LEN == hdr.data_size
	assert len(data) - 8 == hdr.riff_size
	assert struct.unpack_from("<I", data, 40)[0] == len(data[44:])


def test_payload_is_little_endian_int16():
	data = encode([1, -1, 32767, -32768], 8000)
	assert data[44:] == b"\x01\x00\xff\xff\xff\x7f\x00\x80"


def test_independent_decoder_agrees():
	samples = _ramp(4410)
	data = encode(samples, 44100)
	info = sf.info(io.BytesIO(data))
	assert info.samplerate == 44100
	assert info.channels == 1
	assert info.frames == 4410
	assert info.subtype == "PCM_16"
	decoded, sr = sf.read(io.BytesIO(data), dtype="int16")
	assert sr == 44100
	np.testing.assert_array_equal(decoded, samples)


def test_two_channel_layout():
	data = encode([1, 2, 3, 4], 8000, 16, 2)
	hdr = parse_header(data)
	assert hdr.num_channels == 2
	assert hdr.block_align == 4
	assert hdr.byte_rate == 8000 * 4
	assert hdr.data_size == 2 * 4
	with pytest.raises(BoundaryError):
		encode([1, 2, 3], 8000, 16, 2)


def test_empty_payload():
	data = encode([], 8000)
	assert len(data) == HEADER_LEN
	assert parse_header(data).data_size == 0


def test_encode_pcm():
	pcm = PCM16(sampling_rate=16000, samples=np.array([0, 100, -100], dtype=np.int16))
	data = encode_pcm(pcm)
	assert parse_header(data).sample_rate == 16000
	assert len(data) == HEADER_LEN + 6


def test_rejects_unsupported_formats():
	with pytest.raises(UnsupportedFormatError):
		encode([0, 1], 8000, channel_depth=8)
	with pytest.raises(UnsupportedFormatError):
		encode([0, 1, 2], 8000, num_channels=3)
	with pytest.raises(ValueError):
		encode([40000], 8000)
	with pytest.raises(ValueError):
		encode([0.5], 8000)


def test_verify_layout_catches_mismatch():
	data = encode(_ramp(100), 8000)
	assert verify_layout(data).data_size == 200
	with pytest.raises(EncodingSizeMismatchError):
		verify_layout(data[:-2])
	with pytest.raises(EncodingSizeMismatchError):
		verify_layout(data + b"\x00\x00")
	bad = bytearray(data)
	struct.pack_into("<I", bad, 4, 36)
	with pytest.raises(EncodingSizeMismatchError):
		verify_layout(bytes(bad))
	with pytest.raises(EncodingSizeMismatchError):
		verify_layout(data[:20])


def test_rejects_byte_rate_overflow():
	with pytest.raises(UnsupportedFormatError):
		encode([0, 1], 2**31)
	with pytest.raises(UnsupportedFormatError):
		encode([0, 1, 2, 3], 2**30, num_channels=2)
	assert parse_header(encode([0, 1], 2**31 - 1)).byte_rate == (2**31 - 1) * 2


def test_rejects_riff_size_overflow(monkeypatch):
	monkeypatch.setattr(riff, "UINT32_MAX", 100)
	with pytest.raises(UnsupportedFormatError, match="RIFF"):
		encode(np.zeros(100, dtype=np.int16), 8)
