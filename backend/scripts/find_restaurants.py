"""Run a restaurant search from the command line and print the JSON body.

Usage:
    python scripts/find_restaurants.py "Seattle, WA" --radius 3000 --limit 10

Reads GOOGLE_PLACES_API_KEY (and the other settings) from the environment or
backend/.env, exactly like the API.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
load_dotenv(ROOT / ".env")

from domain.errors import RestaurantSearchError  # noqa: E402
from services.cuisine import STRATEGY_NAMES  # noqa: E402
from services.restaurant_search import build_search_service  # noqa: E402
from settings import Settings  # noqa: E402

logger = logging.getLogger("find_restaurants")


def main(argv: list[str] | None = None) -> int:
    if not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    parser = argparse.ArgumentParser(description="Find restaurants near a location.")
    parser.add_argument("location", nargs="?", default=None, help="Address, city or zip code.")
    parser.add_argument("--radius", type=int, default=None, help="Search radius in meters.")
    parser.add_argument("--page-token", default=None, help="Fetch one page by continuation token.")
    parser.add_argument("--strategy", choices=STRATEGY_NAMES, default=None, help="Cuisine strategy override.")
    parser.add_argument("--limit", type=int, default=None, help="Print at most this many restaurants.")
    args = parser.parse_args(argv)

    config = Settings()
    if args.strategy:
        config.CUISINE_STRATEGY = args.strategy

    try:
        service = build_search_service(config)
        result = service.search(location=args.location, radius_m=args.radius, page_token=args.page_token)
    except RestaurantSearchError as exc:
        print(json.dumps(exc.to_body(), indent=2))
        return 1

    body = result.to_body()
    if args.limit is not None:
        body["restaurants"] = body["restaurants"][: args.limit]
    print(json.dumps(body, indent=2))
    logger.info("%d restaurants", len(result.restaurants))
    return 0


if __name__ == "__main__":
    sys.exit(main())
