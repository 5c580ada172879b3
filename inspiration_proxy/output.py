from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import MalformedOutputError, NoJSONFoundError
from .logger import get_logger


log = get_logger(__name__)

_decoder = json.JSONDecoder()


# Returned by a channel holding no data; JSON `null` is a real value
EMPTY = object()


def extract_json_fragment(text: str) -> Optional[Any]:
	"""Return the longest top-level JSON array or object embedded in free-form text, or None.

	Every `[` or `{` outside an already decoded fragment is tried as a start position;
	log tokens like `[info]` do not decode and are skipped. The longest fragment wins,
	so a short `[3]` in a log line never shadows the real payload. Ties go to the
	earlier fragment.
	"""
	best = None
	best_len = 0
	pos = 0
	while True:
		starts = [i for i in (text.find("[", pos), text.find("{", pos)) if i != -1]
		if not starts:
			return best
		start = min(starts)
		try:
			value, end = _decoder.raw_decode(text, start)
		except json.JSONDecodeError:
			pos = start + 1
			continue
		if end - start > best_len:
			best, best_len = value, end - start
		pos = end


class OutputChannel:
	"""One way the scraper can hand its JSON back. `read()` returns EMPTY when there is nothing."""

	name = "output"

	def read(self) -> Any:
		raise NotImplementedError


class FileOutputChannel(OutputChannel):
	name = "file"

	def __init__(self, path: Path):
		self.path = Path(path)

	def read(self) -> Any:
		if not self.path.is_file():
			return EMPTY
		log.info(f"Found JSON file at: {self.path}")
		try:
			with self.path.open("r", encoding="utf-8") as f:
				return json.load(f)
		except (json.JSONDecodeError, UnicodeDecodeError) as e:
			raise MalformedOutputError(str(self.path), e) from e


class StdoutOutputChannel(OutputChannel):
	name = "stdout"

	def __init__(self, text: str):
		self.text = text or ""

	def read(self) -> Any:
		value = extract_json_fragment(self.text)
		return EMPTY if value is None else value


def resolve_output(channels: Iterable[OutputChannel]) -> Any:
	"""Return the first value any channel yields, trying them in the given order."""
	for channel in channels:
		value = channel.read()
		if value is not EMPTY:
			log.info(f"Using JSON from {channel.name} channel")
			return value
	raise NoJSONFoundError()
