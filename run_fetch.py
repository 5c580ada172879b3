import argparse
import asyncio
import json
import sys

from inspiration_proxy.config import DEFAULT_LIMIT, DEFAULT_QUERY
from inspiration_proxy.errors import InspirationError
from inspiration_proxy.logger import get_logger
from inspiration_proxy.service import fetch_inspirations


log = get_logger(__name__)


def _parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run one scraper search and print the resulting JSON")
	parser.add_argument("--query", default=DEFAULT_QUERY, help="Search term")
	parser.add_argument("--limit", default=str(DEFAULT_LIMIT), help="Number of images to fetch")
	parser.add_argument("--cookie", default=None, help="Cookie file for the scraper (defaults to PINTEREST_COOKIES)")
	parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
	return parser.parse_args()


def main() -> int:
	args = _parse_args()
	log.info(f"Fetch: q='{args.query}' limit={args.limit}")
	try:
		data = asyncio.run(fetch_inspirations(args.query, args.limit, cookie_path=args.cookie))
	except InspirationError as e:
		log.error(f"Fetch failed: {e}")
		return 1
	print(json.dumps(data, ensure_ascii=False, indent=2 if args.pretty else None))
	return 0


if __name__ == "__main__":
	sys.exit(main())
