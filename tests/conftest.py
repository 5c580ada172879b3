import sys
import textwrap
from pathlib import Path

import pytest

from inspiration_proxy import config


FAKE_SCRAPER = textwrap.dedent('''
	import json
	import os
	import sys
	import time
	from pathlib import Path

	# search <query> <folder> -l <limit> --json [--cookie <path>]
	args = sys.argv[1:]
	folder = args[2]
	mode = os.environ.get("FAKE_SCRAPER_MODE", "file")
	payload = json.loads(os.environ.get("FAKE_SCRAPER_PAYLOAD", '[{"id": 1, "src": "https://i.pinimg.com/1.jpg"}]'))

	if mode == "file":
		Path(folder).mkdir()
		(Path(folder) / "1.jpg").write_bytes(b"jpg")
		Path(folder + ".json").write_text(json.dumps(payload), encoding="utf-8")
		print("[info] scraped 1 image")
	elif mode == "stdout":
		print("... " + json.dumps(payload) + " ...")
	elif mode == "argv":
		print(json.dumps(args))
	elif mode == "fail":
		sys.stderr.write("boom: login required\\n")
		sys.exit(2)
	elif mode == "nojson":
		print("nothing to see here")
	elif mode == "bad-file":
		Path(folder + ".json").write_text("{not json", encoding="utf-8")
		print(json.dumps(payload))
	elif mode == "flood":
		sys.stdout.write("x" * int(os.environ["FAKE_SCRAPER_BYTES"]))
	elif mode == "sleep":
		time.sleep(30)
''')


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
	d = tmp_path / "work"
	d.mkdir()
	return d


@pytest.fixture
def fake_scraper(tmp_path: Path, work_dir: Path, monkeypatch):
	"""Point the service at a scripted stand-in for the scraper CLI.

	Returns a setter for the script's behaviour: `fake_scraper("stdout", payload=...)`.
	"""
	script = tmp_path / "fake_scraper.py"
	script.write_text(FAKE_SCRAPER, encoding="utf-8")
	monkeypatch.setattr(config, "SCRAPER_COMMAND", [sys.executable, str(script)])
	monkeypatch.setattr(config, "SCRAPER_WORK_DIR", work_dir)
	monkeypatch.setattr(config, "SCRAPER_TIMEOUT_SECS", 0)
	monkeypatch.delenv("PINTEREST_COOKIES", raising=False)
	monkeypatch.setenv("FAKE_SCRAPER_MODE", "file")

	def set_mode(mode: str, payload: str = None, **env):
		monkeypatch.setenv("FAKE_SCRAPER_MODE", mode)
		if payload is not None:
			monkeypatch.setenv("FAKE_SCRAPER_PAYLOAD", payload)
		for key, value in env.items():
			monkeypatch.setenv(key, str(value))

	return set_mode


@pytest.fixture
def leftovers(work_dir: Path):
	"""Names still present in the scraper work dir."""
	return lambda: sorted(p.name for p in work_dir.iterdir())
