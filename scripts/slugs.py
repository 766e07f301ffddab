"""Print every post slug as JSON, for static path generation.

Usage:
    python -m scripts.slugs                  # Walk WordPress GraphQL directly
    python -m scripts.slugs --via-app        # Use the app's /api/get-all-post-slugs
    python -m scripts.slugs --batch-size 50 --output slugs.json
"""

import argparse
import asyncio
import json
import logging
import sys

from blogfront.services import app_api
from blogfront.services.errors import ConfigurationError, UpstreamError
from blogfront.services.http_client import close_shared_client
from blogfront.services.slugs import enumerate_all_slugs

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("scripts.slugs")


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--via-app", action="store_true")
    parser.add_argument("--batch-size", type=int, default=None)
    parser.add_argument("--max-pages", type=int, default=None)
    parser.add_argument("--output", default=None, help="Write JSON here instead of stdout")
    args = parser.parse_args(argv)

    try:
        if args.via_app:
            slugs = await app_api.fetch_all_slugs()
        else:
            slugs = await enumerate_all_slugs(args.batch_size, args.max_pages)
    except (UpstreamError, ConfigurationError) as exc:
        logger.error("Could not enumerate post slugs: %s", exc)
        return 1
    finally:
        await close_shared_client()

    payload = json.dumps(slugs, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(payload + "\n")
        print(f"Wrote {len(slugs)} slugs to {args.output}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
