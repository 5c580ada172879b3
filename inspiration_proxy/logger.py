import logging
import os
from typing import Optional
from pathlib import Path

try:
	import tomllib as toml
except Exception:  # pragma: no cover
	import tomli as toml  # type: ignore

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _logging_section() -> dict:
	# Read the TOML directly; importing config here would load .env before logging is up
	config_path = Path(os.getenv("CONFIG_TOML", "config.toml"))
	if not config_path.exists():
		return {}
	try:
		with config_path.open("rb") as f:
			cfg = toml.load(f) or {}
	except (OSError, toml.TOMLDecodeError):
		return {}
	section = cfg.get("logging")
	return section if isinstance(section, dict) else {}


def _parse_level(value: Optional[str]) -> int:
	level = logging.getLevelName((value or "").upper())
	return level if isinstance(level, int) else logging.INFO


def setup_logging(force: bool = False) -> None:
	global _configured
	if _configured and not force:
		return
	section = _logging_section()
	# Env overrides TOML
	level = _parse_level(os.getenv("LOG_LEVEL") or section.get("level") or "INFO")
	root = logging.getLogger()
	root.setLevel(level)
	if not root.handlers:
		h = logging.StreamHandler()
		h.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
		root.addHandler(h)
	# Request lines are noise next to the scraper logs
	access_level = section.get("access_level")
	if access_level:
		logging.getLogger("uvicorn.access").setLevel(_parse_level(access_level))
	_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
	setup_logging()
	return logging.getLogger(name or "inspiration_proxy")
