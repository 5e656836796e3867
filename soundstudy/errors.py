class SoundStudyError(Exception):
	"""Base class for every error raised by the synthesis pipeline."""


class UnsupportedFormatError(SoundStudyError):
	"""Channel depth, channel count or container format that is not implemented."""


class IncompatibleWaveformError(SoundStudyError):
	"""Waveforms differ in sampling rate, channel depth or stereo flag."""


class DegenerateSignalError(SoundStudyError):
	"""Reference peak is zero, negative or not finite."""


class BoundaryError(SoundStudyError):
	"""A sample window falls outside the waveform."""


class EncodingSizeMismatchError(SoundStudyError):
	"""A declared chunk size disagrees with the bytes that follow it."""


class ShortWriteError(SoundStudyError, OSError):
	def __init__(self, path: str, written: int, expected: int) -> None:
		super().__init__(f"short write to {path}: {written} of {expected} bytes")
		self.path = path
		self.written = written
		self.expected = expected
