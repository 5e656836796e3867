"""Canonical RIFF/WAVE layout for uncompressed 16-bit PCM.

All fields are little-endian. The header is always 44 bytes:

	0   "RIFF"   riff size = 4 + 24 + 8 + data size
	8   "WAVE"
	12  "fmt "   16, format 1, channels, rate, byte rate, block align, bits
	36  "data"   data size
	44  samples
"""

from __future__ import annotations

import logging
import struct
from typing import NamedTuple, Sequence, Union

import numpy as np

from .errors import BoundaryError, EncodingSizeMismatchError, UnsupportedFormatError
from .models import PCM16


logger = logging.getLogger(__name__)

RIFF_HEADER_LEN = 12
FMT_CHUNK_LEN = 24
DATA_HEADER_LEN = 8
HEADER_LEN = RIFF_HEADER_LEN + FMT_CHUNK_LEN + DATA_HEADER_LEN
PCM_FORMAT = 1
UINT32_MAX = 0xFFFFFFFF

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


class WavHeader(NamedTuple):
	riff_size: int
	fmt_size: int
	format_code: int
	num_channels: int
	sample_rate: int
	byte_rate: int
	block_align: int
	bits_per_sample: int
	data_size: int


def encode(
	samples: Union[Sequence[int], np.ndarray],
	sampling_rate: int,
	channel_depth: int = 16,
	num_channels: int = 1,
) -> bytes:
	"""Serialize int16 samples into a complete WAV byte string.

	With two channels the samples must already be interleaved left/right.
	"""
	if channel_depth != 16:
		raise UnsupportedFormatError(f"cannot encode {channel_depth}-bit samples")
	if num_channels not in (1, 2):
		raise UnsupportedFormatError(f"cannot encode {num_channels} channels")
	pcm = PCM16(sampling_rate=sampling_rate, num_channels=num_channels, samples=samples).samples
	if len(pcm) % num_channels:
		raise BoundaryError(f"{len(pcm)} samples do not fill whole {num_channels}-channel frames")

	block_align = num_channels * channel_depth // 8
	frames = len(pcm) // num_channels
	data_size = frames * block_align
	riff_size = 4 + FMT_CHUNK_LEN + DATA_HEADER_LEN + data_size
	byte_rate = sampling_rate * block_align
	if byte_rate > UINT32_MAX:
		raise UnsupportedFormatError(f"sampling rate {sampling_rate} overflows the 32-bit byte rate field")
	if riff_size > UINT32_MAX:
		raise UnsupportedFormatError(f"{data_size} bytes of audio do not fit a 32-bit RIFF size field")
	payload = pcm.astype("<i2").tobytes()

	header = _HEADER.pack(
		b"RIFF",
		riff_size,
		b"WAVE",
		b"fmt ",
		FMT_CHUNK_LEN - 8,
		PCM_FORMAT,
		num_channels,
		sampling_rate,
		byte_rate,
		block_align,
		channel_depth,
		b"data",
		data_size,
	)
	out = header + payload
	verify_layout(out)
	logger.debug("Encoded %d frames at %d Hz into %d bytes", frames, sampling_rate, len(out))
	return out


def encode_pcm(pcm: PCM16) -> bytes:
	return encode(pcm.samples, pcm.sampling_rate, pcm.depth, pcm.num_channels)


def parse_header(data: bytes) -> WavHeader:
	"""Read back the fields of a header written by `encode`."""
	if len(data) < HEADER_LEN:
		raise EncodingSizeMismatchError(f"{len(data)} bytes is shorter than a {HEADER_LEN}-byte header")
	riff, riff_size, wave, fmt, fmt_size, fmt_code, channels, rate, byte_rate, align, bits, tag, data_size = (
		_HEADER.unpack_from(data)
	)
	if (riff, wave, fmt, tag) != (b"RIFF", b"WAVE", b"fmt ", b"data"):
		raise ValueError("not a canonical RIFF/WAVE header")
	return WavHeader(riff_size, fmt_size, fmt_code, channels, rate, byte_rate, align, bits, data_size)


def verify_layout(data: bytes) -> WavHeader:
	"""Check every declared size against the bytes actually present."""
	hdr = parse_header(data)
	if hdr.fmt_size != FMT_CHUNK_LEN - 8:
		raise EncodingSizeMismatchError(f"fmt chunk declares {hdr.fmt_size} bytes, expected 16")
	payload = len(data) - HEADER_LEN
	if hdr.data_size != payload:
		raise EncodingSizeMismatchError(
			f"data chunk declares {hdr.data_size} bytes but {payload} follow"
		)
	if hdr.riff_size != len(data) - 8:
		raise EncodingSizeMismatchError(
			f"RIFF chunk declares {hdr.riff_size} bytes but {len(data) - 8} follow"
		)
	if hdr.block_align != hdr.num_channels * hdr.bits_per_sample // 8:
		raise EncodingSizeMismatchError(f"block align {hdr.block_align} disagrees with channel layout")
	if hdr.byte_rate != hdr.sample_rate * hdr.block_align:
		raise EncodingSizeMismatchError(f"byte rate {hdr.byte_rate} disagrees with sample rate")
	if hdr.block_align and hdr.data_size % hdr.block_align:
		raise EncodingSizeMismatchError(f"data size {hdr.data_size} is not a whole number of frames")
	return hdr
