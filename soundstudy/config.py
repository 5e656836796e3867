from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from .models import SynthesisSettings


def _load_raw(path: Path) -> Dict[str, Any]:
	if not path.exists():
		return {}
	data = json.loads(path.read_text())
	if not isinstance(data, dict):
		raise ValueError(f"{path}: settings must be a JSON object")
	return data


def load_settings(path: Union[str, Path]) -> SynthesisSettings:
	"""Read settings from a JSON file; a missing file gives the defaults."""
	return SynthesisSettings.model_validate(_load_raw(Path(path)))


def save_settings(s: SynthesisSettings, path: Union[str, Path]) -> None:
	Path(path).write_text(json.dumps(s.model_dump(), indent=2))
