import asyncio
import json

import pytest

from inspiration_proxy import config
from inspiration_proxy.errors import MalformedOutputError, NoJSONFoundError, ScraperExitError
from inspiration_proxy.service import fetch_inspirations


class TestFetchInspirations:
	def test_defaults_applied(self, fake_scraper, monkeypatch):
		fake_scraper("argv")
		monkeypatch.setattr(config, "DEFAULT_QUERY", "modern kitchen design")
		monkeypatch.setattr(config, "DEFAULT_LIMIT", 30)
		argv = asyncio.run(fetch_inspirations())
		assert argv[0] == "search"
		assert argv[1] == "modern kitchen design"
		assert argv[3:] == ["-l", "30", "--json"]

	def test_empty_query_uses_default(self, fake_scraper):
		fake_scraper("argv")
		argv = asyncio.run(fetch_inspirations("", ""))
		assert argv[1] == config.DEFAULT_QUERY
		assert argv[4] == str(config.DEFAULT_LIMIT)

	def test_explicit_cookie_path_wins(self, fake_scraper, monkeypatch):
		fake_scraper("argv")
		monkeypatch.setenv("PINTEREST_COOKIES", "/tmp/env.txt")
		argv = asyncio.run(fetch_inspirations("q", 5, cookie_path="/tmp/cli.txt"))
		assert argv[-2:] == ["--cookie", "/tmp/cli.txt"]

	def test_file_output_and_cleanup(self, fake_scraper, leftovers):
		fake_scraper("file", payload='{"pins": [1, 2]}')
		assert asyncio.run(fetch_inspirations("q", 2)) == {"pins": [1, 2]}
		assert leftovers() == []

	def test_temp_folder_is_unique_per_call(self, fake_scraper):
		fake_scraper("argv")
		first = asyncio.run(fetch_inspirations("q", 1))
		second = asyncio.run(fetch_inspirations("q", 1))
		assert first[2] != second[2]
		assert first[2].startswith(config.SCRAPER_TEMP_PREFIX + "-")

	def test_concurrent_fetches_do_not_share_files(self, fake_scraper, leftovers):
		fake_scraper("file", payload='["shared?"]')

		async def run_many():
			return await asyncio.gather(*[fetch_inspirations(f"q{i}", i + 1) for i in range(4)])

		assert asyncio.run(run_many()) == [["shared?"]] * 4
		assert leftovers() == []

	def test_malformed_file_does_not_fall_back_to_stdout(self, fake_scraper, leftovers):
		fake_scraper("bad-file")
		with pytest.raises(MalformedOutputError):
			asyncio.run(fetch_inspirations("q", 1))
		assert leftovers() == []

	def test_no_json(self, fake_scraper):
		fake_scraper("nojson")
		with pytest.raises(NoJSONFoundError):
			asyncio.run(fetch_inspirations("q", 1))

	def test_scraper_failure(self, fake_scraper):
		fake_scraper("fail")
		with pytest.raises(ScraperExitError) as excinfo:
			asyncio.run(fetch_inspirations("q", 1))
		assert "login required" in excinfo.value.stderr
