from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Union

from .errors import ShortWriteError
from .models import Waveform


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def write_bytes(path: PathLike, data: bytes) -> int:
	"""Write `data` to `path`, truncating any existing file.

	Open and write failures propagate as OSError; a partial write raises
	ShortWriteError.
	"""
	p = Path(path)
	with p.open("wb") as f:
		# Buffered files write everything or raise; raw and non-blocking
		# handles may return a partial count or None
		n = f.write(data)
	if n is None or n < len(data):
		raise ShortWriteError(str(p), n or 0, len(data))
	logger.info("Wrote %d bytes to %s", n, p)
	return n


def dump_lines(w: Waveform) -> Iterator[str]:
	"""Two-column plot data: 1-based sample index and value."""
	for i, v in enumerate(w.samples, start=1):
		yield "%d %f\n" % (i, v)


def write_wave_data(path: PathLike, w: Waveform) -> None:
	p = Path(path)
	with p.open("w", newline="\n") as f:
		f.writelines(dump_lines(w))
	logger.info("Wrote %d samples of plot data to %s", len(w), p)
