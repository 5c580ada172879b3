from __future__ import annotations

import shutil
import uuid
from pathlib import Path
from typing import List

from .logger import get_logger


log = get_logger(__name__)


class TempWorkspace:
	"""Request-scoped temp folder name handed to the scraper.

	The scraper may create `<root>/<name>/` and `<root>/<name>.json`; both are
	removed on cleanup. A fresh name per instance keeps concurrent requests apart.
	"""

	def __init__(self, root: Path, prefix: str = "temp-search"):
		self.root = Path(root)
		self.name = f"{prefix}-{uuid.uuid4().hex[:12]}"

	@property
	def folder(self) -> Path:
		return self.root / self.name

	@property
	def json_file(self) -> Path:
		return self.root / f"{self.name}.json"

	def cleanup(self) -> List[Path]:
		"""Best effort: failures are logged, never raised."""
		removed: List[Path] = []
		if self.folder.exists():
			try:
				shutil.rmtree(self.folder)
				removed.append(self.folder)
				log.info(f"Deleted temporary folder: {self.folder}")
			except OSError as e:
				log.warning(f"Failed to delete temporary folder {self.folder}: {e}")
		if self.json_file.exists():
			try:
				self.json_file.unlink()
				removed.append(self.json_file)
				log.info(f"Deleted temporary JSON file: {self.json_file}")
			except OSError as e:
				log.warning(f"Failed to delete temporary JSON file {self.json_file}: {e}")
		return removed

	def __enter__(self) -> "TempWorkspace":
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.cleanup()
