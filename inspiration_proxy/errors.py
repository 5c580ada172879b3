from typing import Optional, Sequence


class InspirationError(Exception):
	"""Base class for everything that can go wrong while fetching inspirations."""


class ScraperError(InspirationError):
	def __init__(self, message: str, argv: Optional[Sequence[str]] = None):
		super().__init__(message)
		self.argv = list(argv or [])


class ScraperNotFound(ScraperError):
	pass


class ScraperExitError(ScraperError):
	def __init__(self, returncode: int, stderr: str, argv: Optional[Sequence[str]] = None):
		super().__init__(f"Scraper exited with code {returncode}", argv)
		self.returncode = returncode
		self.stderr = stderr


class ScraperOutputTooLarge(ScraperError):
	def __init__(self, limit: int, argv: Optional[Sequence[str]] = None):
		super().__init__(f"Scraper output exceeded {limit} bytes", argv)
		self.limit = limit


class ScraperTimeout(ScraperError):
	def __init__(self, timeout: float, argv: Optional[Sequence[str]] = None):
		super().__init__(f"Scraper did not finish within {timeout:g}s", argv)
		self.timeout = timeout


class OutputError(InspirationError):
	pass


class NoJSONFoundError(OutputError):
	def __init__(self, message: str = "No JSON data found in the output"):
		super().__init__(message)


class MalformedOutputError(OutputError):
	def __init__(self, source: str, cause: Exception):
		super().__init__(f"Malformed JSON in {source}: {cause}")
		self.source = source
		self.cause = cause
