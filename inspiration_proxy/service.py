from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from . import config
from .command import build_search_command
from .logger import get_logger
from .output import FileOutputChannel, StdoutOutputChannel, resolve_output
from .runner import run_scraper
from .workspace import TempWorkspace


log = get_logger(__name__)


async def fetch_inspirations(
	query: Optional[str] = None,
	limit: Union[int, str, None] = None,
	cookie_path: Optional[str] = None,
) -> Any:
	"""Run one scraper search and return its parsed JSON (array or object) verbatim.

	Output is taken from `<temp>.json` in the work dir when the scraper wrote one,
	otherwise from the first JSON fragment on stdout. Temp artifacts are removed
	whether or not the fetch succeeds.
	"""
	query = query or config.DEFAULT_QUERY
	if limit is None or limit == "":
		limit = config.DEFAULT_LIMIT
	cookie_path = cookie_path or config.cookie_path()
	work_dir = Path(config.SCRAPER_WORK_DIR).resolve()

	with TempWorkspace(work_dir, config.SCRAPER_TEMP_PREFIX) as workspace:
		argv = build_search_command(query, workspace.name, limit, cookie_path=cookie_path, executable=config.SCRAPER_COMMAND)
		result = await run_scraper(
			argv,
			cwd=work_dir,
			max_output_bytes=config.SCRAPER_MAX_OUTPUT_BYTES,
			timeout=config.SCRAPER_TIMEOUT_SECS,
		)
		data = resolve_output([
			FileOutputChannel(workspace.json_file),
			StdoutOutputChannel(result.stdout),
		])
	log.info(f"Fetched inspirations q='{query}' limit={limit} type={type(data).__name__}")
	return data
