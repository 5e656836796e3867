"""Command-line entry point that renders a tone to a WAV file."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from .config import load_settings
from .errors import SoundStudyError
from .models import SynthesisSettings
from .pipeline import run


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(prog="soundstudy", description="Render additive sine tones to WAV")
	parser.add_argument("--config", help="JSON file with synthesis settings")
	parser.add_argument("--output", help="WAV file to write (default: test.wav)")
	parser.add_argument("--dump", help="also write '<index> <value>' plot data to this file")
	parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
	return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
	args = parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	try:
		settings = load_settings(args.config) if args.config else SynthesisSettings()
		overrides = {k: v for k, v in (("output", args.output), ("dump", args.dump)) if v}
		if overrides:
			settings = SynthesisSettings.model_validate({**settings.model_dump(), **overrides})
	except (ValidationError, ValueError) as err:
		logger.error("Invalid settings: %s", err)
		return 2

	try:
		run(settings)
	except (SoundStudyError, OSError, ValueError) as err:
		logger.error("Rendering failed: %s", err)
		return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
