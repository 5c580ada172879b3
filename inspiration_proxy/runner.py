from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .command import format_command
from .errors import ScraperExitError, ScraperNotFound, ScraperOutputTooLarge, ScraperTimeout
from .logger import get_logger


log = get_logger(__name__)

_CHUNK_SIZE = 64 * 1024


@dataclass
class ScraperResult:
	argv: List[str]
	returncode: int
	stdout: str
	stderr: str


async def _read_capped(stream: asyncio.StreamReader, limit: int) -> bytes:
	chunks: List[bytes] = []
	total = 0
	while True:
		chunk = await stream.read(_CHUNK_SIZE)
		if not chunk:
			break
		total += len(chunk)
		if total > limit:
			raise ScraperOutputTooLarge(limit)
		chunks.append(chunk)
	return b"".join(chunks)


async def _kill(proc: asyncio.subprocess.Process) -> None:
	if proc.returncode is None:
		try:
			proc.kill()
		except ProcessLookupError:
			pass
	await proc.wait()


async def run_scraper(
	argv: Sequence[str],
	cwd: Path,
	max_output_bytes: int,
	timeout: Optional[float] = None,
) -> ScraperResult:
	"""Run the scraper and capture its output, each stream capped at `max_output_bytes`.

	Raises a ScraperError subclass on a missing executable, non-zero exit, overflow
	or timeout. The child is always reaped before this returns or raises.
	"""
	argv = list(argv)
	log.info(f"Running command: {format_command(argv)}")
	try:
		proc = await asyncio.create_subprocess_exec(
			*argv,
			cwd=str(cwd),
			stdin=asyncio.subprocess.DEVNULL,
			stdout=asyncio.subprocess.PIPE,
			stderr=asyncio.subprocess.PIPE,
		)
	except (FileNotFoundError, PermissionError) as e:
		raise ScraperNotFound(f"Cannot start scraper '{argv[0]}': {e}", argv) from e

	readers = [
		asyncio.ensure_future(_read_capped(proc.stdout, max_output_bytes)),
		asyncio.ensure_future(_read_capped(proc.stderr, max_output_bytes)),
	]
	try:
		out, err = await asyncio.wait_for(asyncio.gather(*readers), timeout=timeout or None)
		returncode = await proc.wait()
	except BaseException as e:
		for task in readers:
			task.cancel()
		await _kill(proc)
		if isinstance(e, asyncio.TimeoutError):
			raise ScraperTimeout(timeout, argv) from e
		if isinstance(e, ScraperOutputTooLarge):
			e.argv = argv
		raise

	stdout = out.decode("utf-8", errors="replace")
	stderr = err.decode("utf-8", errors="replace")
	if returncode != 0:
		log.error(f"Command error: code={returncode} stderr={stderr.strip()}")
		raise ScraperExitError(returncode, stderr, argv)
	log.debug(f"Raw output: {stdout}")
	return ScraperResult(argv=argv, returncode=returncode, stdout=stdout, stderr=stderr)
