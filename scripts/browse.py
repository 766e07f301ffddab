"""Browse posts in the terminal with a "load more" prompt.

Usage:
    python -m scripts.browse               # Read WordPress GraphQL directly
    python -m scripts.browse --via-app     # Go through the app's /api endpoints
    python -m scripts.browse --page-size 10

Press Enter to load the next page, "q" to quit.
"""

import argparse
import asyncio
import logging
import sys

from blogfront.services import app_api, wordpress
from blogfront.services.errors import ConfigurationError, UpstreamError
from blogfront.services.http_client import close_shared_client
from blogfront.services.post_list import open_post_list

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--via-app", action="store_true")
    parser.add_argument("--page-size", type=int, default=None)
    parser.add_argument("--timeout", type=float, default=None)
    args = parser.parse_args(argv)

    fetch_page = app_api.fetch_page if args.via_app else wordpress.fetch_page
    try:
        view = await open_post_list(fetch_page, args.page_size, timeout=args.timeout)
    except (UpstreamError, ConfigurationError) as exc:
        print(f"Could not load posts: {exc}", file=sys.stderr)
        await close_shared_client()
        return 1

    try:
        print(view.render())
        while view.show_load_more:
            answer = await asyncio.to_thread(input, "\n[Enter] load more, [q] quit: ")
            if answer.strip().lower() == "q":
                break
            shown = len(view.lines)
            await view.load_more()
            if view.store.last_error is not None:
                print(f"Load failed, press Enter to retry: {view.store.last_error}")
                continue
            for line in view.lines[shown:]:
                print(line)
        else:
            print("\nNo more posts.")
    finally:
        view.close()
        await close_shared_client()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
