from __future__ import annotations

from typing import Any, Dict, Literal, Optional

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field, field_validator


INT16_MIN = -32768
INT16_MAX = 32767


def _readonly(values: Any, dtype: Any) -> np.ndarray:
	# Always copy so a model never aliases the caller's buffer
	arr = np.array(values, dtype=dtype)
	if arr.ndim != 1:
		raise ValueError(f"samples must be one-dimensional, got shape {arr.shape}")
	arr.flags.writeable = False
	return arr


class _SampleModel(BaseModel):
	"""Frozen model around a read-only sample array, compared by value."""

	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	samples: np.ndarray

	def scalar_fields(self) -> Dict[str, Any]:
		return self.model_dump(exclude={"samples"})

	def __eq__(self, other: object) -> bool:
		if type(other) is not type(self):
			return NotImplemented
		return (
			self.scalar_fields() == other.scalar_fields()
			and bool(np.array_equal(self.samples, other.samples))
		)

	def __hash__(self) -> int:
		# -0.0 and 0.0 compare equal, so they must hash alike
		return hash((tuple(sorted(self.scalar_fields().items())), (self.samples + 0).tobytes()))

	def __len__(self) -> int:
		return int(self.samples.shape[0])


class Waveform(_SampleModel):
	"""Floating-point signal plus the reference amplitude used for normalization."""

	sampling_rate: int = Field(gt=0)
	channel_depth: int = Field(default=16, gt=0)
	stereo: bool = Field(default=False)
	peak: float = Field(default=0.0)

	@field_validator("samples", mode="before")
	@classmethod
	def freeze_samples(cls, v: Any) -> npt.NDArray[np.float64]:
		return _readonly(v, np.float64)

	@property
	def duration(self) -> float:
		return len(self) / float(self.sampling_rate)

	def derive(self, samples: Any, peak: float) -> Waveform:
		"""Return a new waveform with the same format and the given samples and peak."""
		return Waveform(
			sampling_rate=self.sampling_rate,
			channel_depth=self.channel_depth,
			stereo=self.stereo,
			samples=samples,
			peak=peak,
		)


class PCM16(_SampleModel):
	"""Signed 16-bit PCM samples, the only fixed-point format the encoder writes."""

	sampling_rate: int = Field(gt=0)
	depth: Literal[16] = 16
	num_channels: Literal[1, 2] = 1

	@field_validator("samples", mode="before")
	@classmethod
	def freeze_samples(cls, v: Any) -> npt.NDArray[np.int16]:
		arr = np.asarray(v)
		if arr.size and arr.dtype != np.int16:
			if not np.issubdtype(arr.dtype, np.integer):
				raise ValueError(f"PCM16 samples must be integers, got {arr.dtype}")
			if int(arr.min()) < INT16_MIN or int(arr.max()) > INT16_MAX:
				raise ValueError("PCM16 samples out of 16-bit range")
		return _readonly(arr, np.int16)


class SynthesisSettings(BaseModel):
	frequency: float = Field(default=440.0, gt=0.0)
	amplitude: float = Field(default=1.0)
	sampling_rate: int = Field(default=44100, gt=0)
	channel_depth: int = Field(default=16, gt=0)
	harmonics: int = Field(default=1, ge=1, le=64)
	gain: float = Field(default=1.0)
	fade_in_ms: int = Field(default=10, ge=0)
	fade_out_ms: int = Field(default=10, ge=0)
	output: str = Field(default="test.wav")
	dump: Optional[str] = Field(default=None)
