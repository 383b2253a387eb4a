#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from typematrux import DrukarniaClient, ExecutorError


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Statistics over articles found by title")
    p.add_argument("title", nargs="?", default="Дія")
    p.add_argument("limit", nargs="?", type=int, default=500)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    total = total_likes = total_reads = max_comments = 0
    async with DrukarniaClient() as client:
        articles = client.search_article(args.title).flat()
        try:
            async for article in articles:
                total += 1
                total_likes += article.like_num
                total_reads += article.owner.read_num
                max_comments = max(max_comments, article.comment_num)
                if total == args.limit:
                    break
        except ExecutorError as err:
            print(f"search stopped early: {err}")
        finally:
            await articles.aclose()

    print("=" * 40)
    print(f"{total} articles processed")
    if total:
        print(f"average like num     : {total_likes / total:.2f}")
        print(f"max comments         : {max_comments}")
        print(f"average author reads : {total_reads / total:.2f}")
    print("=" * 40)


if __name__ == "__main__":
    asyncio.run(main())
