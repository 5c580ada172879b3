from __future__ import annotations

import shlex
from typing import List, Optional, Sequence, Union

from .config import SCRAPER_COMMAND


def build_search_command(
	query: str,
	temp_folder: str,
	limit: Union[int, str],
	cookie_path: Optional[str] = None,
	executable: Optional[Sequence[str]] = None,
) -> List[str]:
	"""Build the argv for `<scraper> search "<query>" <folder> -l <limit> --json [--cookie <path>]`.

	The query stays a single argument and no shell ever sees it. `limit` is passed
	through untouched, numeric or not.
	"""
	argv = list(executable or SCRAPER_COMMAND)
	argv += ["search", query, temp_folder, "-l", str(limit), "--json"]
	if cookie_path:
		argv += ["--cookie", str(cookie_path)]
	return argv


def format_command(argv: Sequence[str]) -> str:
	return shlex.join(argv)
