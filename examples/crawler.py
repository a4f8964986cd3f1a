#!/usr/bin/env python3
"""
Crawl a documentation site and print every page that was fetched.
"""

import asyncio
import os

from anyparser import Anyparser

URL = "https://anyparser.com/docs"


async def main():
    parser = Anyparser(
        api_url=os.getenv("ANYPARSER_API_URL", "https://anyparserapi.com"),
        api_key=os.getenv("ANYPARSER_API_KEY"),
        model="crawler",
        format="json",
        max_depth=50,
        max_executions=2,
        strategy="LIFO",
        traversal_scope="subtree",
    )

    for candidate in await parser.parse(URL):
        print()
        print("Start URL            :", candidate["startUrl"])
        print("Total characters     :", candidate["totalCharacters"])
        print("Total items          :", candidate["totalItems"])
        print("Robots directive     :", candidate["robotsDirective"])
        print()
        print("*" * 100)
        print("Begin Crawl")
        print("*" * 100)
        print()

        for index, item in enumerate(candidate.get("items") or []):
            if index > 0:
                print("-" * 100)
                print()

            print("URL                  :", item["url"])
            print("Title                :", item.get("title"))
            print("Status message       :", item["statusMessage"])
            print("Total characters     :", item.get("totalCharacters"))
            print("Politeness delay     :", item["politenessDelay"])
            print("Content:\n")
            print(item.get("markdown"))


if __name__ == "__main__":
    asyncio.run(main())
