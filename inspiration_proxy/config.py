import os
import shlex
from typing import Any, Dict, List, Optional
from pathlib import Path

from dotenv import load_dotenv

try:
	import tomllib as toml
except Exception:
	import tomli as toml

load_dotenv()

# Resolve config file path
CONFIG_PATH = Path(os.getenv("CONFIG_TOML", "config.toml"))


def _load_toml(path: Path) -> Dict[str, Any]:
	if not path.exists():
		return {}
	with path.open("rb") as f:
		return toml.load(f)


def _split_list(value: Any) -> List[str]:
	if isinstance(value, (list, tuple)):
		return [str(v).strip() for v in value if str(v).strip()]
	return [v.strip() for v in str(value).split(",") if v.strip()]


def _split_command(value: Any) -> List[str]:
	if isinstance(value, (list, tuple)):
		return [str(v) for v in value]
	return shlex.split(str(value))


_cfg = _load_toml(CONFIG_PATH)

# Server
_server = _cfg.get("server", {}) if isinstance(_cfg, dict) else {}
HOST = os.getenv("HOST", _server.get("host", "0.0.0.0"))
PORT = int(os.getenv("PORT", str(_server.get("port", 5000))))
CORS_ORIGINS = _split_list(os.getenv("CORS_ORIGINS") or _server.get("cors_origins", ["*"]))

# Scraper
_scraper = _cfg.get("scraper", {}) if isinstance(_cfg, dict) else {}
SCRAPER_COMMAND = _split_command(os.getenv("SCRAPER_COMMAND") or _scraper.get("command", "pinterest-dl"))
SCRAPER_WORK_DIR = Path(os.getenv("SCRAPER_WORK_DIR", _scraper.get("work_dir", ".")))
SCRAPER_TEMP_PREFIX = os.getenv("SCRAPER_TEMP_PREFIX", _scraper.get("temp_prefix", "temp-search"))
SCRAPER_MAX_OUTPUT_BYTES = int(os.getenv("SCRAPER_MAX_OUTPUT_BYTES", str(_scraper.get("max_output_bytes", 5 * 1024 * 1024))))
SCRAPER_TIMEOUT_SECS = float(os.getenv("SCRAPER_TIMEOUT_SECS", str(_scraper.get("timeout_secs", 0))))

# Search
_search = _cfg.get("search", {}) if isinstance(_cfg, dict) else {}
DEFAULT_QUERY = os.getenv("DEFAULT_QUERY", _search.get("default_query", "modern kitchen design"))
DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", str(_search.get("default_limit", 30))))


def cookie_path() -> Optional[str]:
	"""Cookie file for the scraper, read per call so env changes apply to the next request."""
	return os.getenv("PINTEREST_COOKIES") or _scraper.get("cookies") or None
