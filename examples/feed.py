#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from typematrux import DrukarniaClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk the Drukarnia main feed page by page")
    p.add_argument("skip_pages", nargs="?", type=int, default=10)
    p.add_argument("skip_articles", nargs="?", type=int, default=99)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with DrukarniaClient() as client:
        page = await client.feed_page(1)
        print(f"first article is {page[0].title!r} by {page[0].owner.username}")

        pages = client.feed()
        skipped = 0
        async for page in pages:
            if skipped == args.skip_pages:
                print(f"first article on page {pages.page} is {page[0].title!r}")
                break
            skipped += 1
        await pages.aclose()

        articles = client.feed().flat()
        async for index, article in _enumerate(articles):
            if index == args.skip_articles:
                print(f"article #{index + 1} is {article.title!r}")
                break
        await articles.aclose()


async def _enumerate(stream):
    index = 0
    async for item in stream:
        yield index, item
        index += 1


if __name__ == "__main__":
    asyncio.run(main())
